"""Data access for the API."""

from .todo_repository import TodoFilters, TodoRepository, build_todo_filter_clause

__all__ = ["TodoFilters", "TodoRepository", "build_todo_filter_clause"]
