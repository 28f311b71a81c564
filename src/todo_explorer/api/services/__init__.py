"""API services."""

from .todo_service import TodoService, serialize_todo

__all__ = ["TodoService", "serialize_todo"]
