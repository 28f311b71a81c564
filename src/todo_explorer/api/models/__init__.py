"""API models."""

from .schemas import (
    TodoStatus,
    Todo,
    TodoCreate,
    TodoUpdate,
    PaginationInfo,
    TodoListResponse,
    ErrorResponse,
)

__all__ = [
    "TodoStatus",
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    "PaginationInfo",
    "TodoListResponse",
    "ErrorResponse",
]
