"""API exceptions and their HTTP handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class TodoApiException(Exception):
    """Base exception for the todo API."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class TodoNotFoundError(TodoApiException):
    """Raised when a todo ID doesn't exist."""

    def __init__(self, todo_id: str):
        super().__init__(message="Todo not found", status_code=404)
        self.todo_id = todo_id


async def todo_api_exception_handler(request: Request, exc: TodoApiException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoApiException, todo_api_exception_handler)
