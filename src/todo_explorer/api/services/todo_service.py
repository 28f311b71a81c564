"""Todo business logic."""

import math
from datetime import datetime
from typing import Any, Optional

from todo_explorer.api.database import DatabaseService, get_db
from todo_explorer.api.exceptions import TodoNotFoundError
from todo_explorer.api.repositories.todo_repository import TodoFilters, TodoRepository
from todo_explorer.config.logging_config import get_logger

logger = get_logger("api.todo_service")


def serialize_todo(todo: dict[str, Any]) -> dict[str, Any]:
    """Render timestamps as ISO strings."""
    out = dict(todo)
    for key in ("created_at", "updated_at"):
        value = out.get(key)
        if isinstance(value, datetime):
            out[key] = value.isoformat()
    return out


class TodoService:
    """Service layer between the todo routes and the repository."""

    def __init__(self, db: Optional[DatabaseService] = None):
        self.repository = TodoRepository(db or get_db())

    def list_todos(
        self,
        filters: Optional[TodoFilters] = None,
        page: int = 1,
        page_size: int = 50,
    ) -> dict[str, Any]:
        """Get one page of todos matching the filters."""
        total = self.repository.count(filters)
        todos = self.repository.find_all(
            filters,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
        return {
            "todos": [serialize_todo(t) for t in todos],
            "pagination": {
                "page": page,
                "page_size": page_size,
                "total": total,
                "total_pages": math.ceil(total / page_size) if total else 0,
            },
        }

    def get_todo(self, todo_id: str) -> dict[str, Any]:
        todo = self.repository.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return serialize_todo(todo)

    def create_todo(self, title: str, description: Optional[str] = None) -> dict[str, Any]:
        todo = self.repository.create(title=title, description=description)
        logger.info(f"Created todo {todo['id']}")
        return serialize_todo(todo)

    def update_todo(self, todo_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        if self.repository.find_by_id(todo_id) is None:
            raise TodoNotFoundError(todo_id)
        return serialize_todo(self.repository.update(todo_id, changes))

    def delete_todo(self, todo_id: str) -> dict[str, Any]:
        todo = self.repository.delete(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info(f"Deleted todo {todo_id}")
        return serialize_todo(todo)
