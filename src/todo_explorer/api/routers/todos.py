"""Todos API router."""

from fastapi import APIRouter, Depends, Path, Query
from typing import Optional
from datetime import date

from todo_explorer.api.config import get_settings
from todo_explorer.api.models.schemas import (
    ErrorResponse,
    Todo,
    TodoCreate,
    TodoListResponse,
    TodoStatus,
    TodoUpdate,
)
from todo_explorer.api.repositories.todo_repository import TodoFilters
from todo_explorer.api.services.todo_service import TodoService

router = APIRouter()
settings = get_settings()


def get_todo_service() -> TodoService:
    """Dependency returning a service bound to the global database."""
    return TodoService()


def parse_todo_filters(
    q: Optional[str] = None,
    status: Optional[TodoStatus] = None,
    created_from: Optional[date] = None,
    created_to: Optional[date] = None,
    has_description: bool = False,
) -> Optional[TodoFilters]:
    """Parse filter query parameters into a TodoFilters object."""
    has_filters = any([q, status, created_from, created_to, has_description])
    if not has_filters:
        return None

    return TodoFilters(
        q=q.strip() or None if q else None,
        completed=None if status is None else status == TodoStatus.DONE,
        created_from=created_from,
        created_to=created_to,
        has_description=has_description,
    )


@router.get("", response_model=TodoListResponse)
async def list_todos(
    q: Optional[str] = Query(None, description="Search title and description"),
    status: Optional[TodoStatus] = Query(None, description="open or done"),
    created_from: Optional[date] = Query(None, description="Created on or after"),
    created_to: Optional[date] = Query(None, description="Created on or before"),
    has_description: bool = Query(False, description="Only todos with a description"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Results per page"
    ),
    service: TodoService = Depends(get_todo_service),
):
    """List todos with filtering and pagination."""
    filters = parse_todo_filters(q, status, created_from, created_to, has_description)
    return service.list_todos(filters, page=page, page_size=page_size)


@router.get("/{todo_id}", response_model=Todo, responses={404: {"model": ErrorResponse}})
async def get_todo(
    todo_id: str = Path(..., min_length=3, description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
):
    """Get a single todo."""
    return service.get_todo(todo_id)


@router.post("", response_model=Todo, status_code=201)
async def create_todo(
    payload: TodoCreate,
    service: TodoService = Depends(get_todo_service),
):
    """Create a todo."""
    return service.create_todo(title=payload.title, description=payload.description)


@router.put("/{todo_id}", response_model=Todo, responses={404: {"model": ErrorResponse}})
async def update_todo(
    payload: TodoUpdate,
    todo_id: str = Path(..., min_length=3, description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
):
    """Update a todo. Omitted fields are left unchanged."""
    return service.update_todo(todo_id, payload.model_dump(exclude_unset=True))


@router.delete("/{todo_id}", response_model=Todo, responses={404: {"model": ErrorResponse}})
async def delete_todo(
    todo_id: str = Path(..., min_length=3, description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
):
    """Delete a todo and return it."""
    return service.delete_todo(todo_id)
