"""SQL access for the todos table."""

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from todo_explorer.api.database import DatabaseService

TODO_COLUMNS = "id, title, description, completed, created_at, updated_at"


@dataclass
class TodoFilters:
    """Container for todo list filter parameters."""
    q: Optional[str] = None
    completed: Optional[bool] = None
    created_from: Optional[date] = None
    created_to: Optional[date] = None
    has_description: bool = False


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_todo_filter_clause(filters: Optional[TodoFilters]) -> tuple[str, list]:
    """Build WHERE clause and parameters for todo filtering.

    Args:
        filters: Filter values; None means no filtering.

    Returns:
        Tuple of (WHERE clause string, list of parameters).
    """
    conditions = []
    params: list[Any] = []

    if filters is None:
        return "1=1", params

    if filters.q:
        conditions.append(
            "(title ILIKE ? ESCAPE '\\' OR COALESCE(description, '') ILIKE ? ESCAPE '\\')"
        )
        pattern = f"%{escape_like(filters.q)}%"
        params.extend([pattern, pattern])

    if filters.completed is not None:
        conditions.append("completed = ?")
        params.append(filters.completed)

    if filters.created_from:
        conditions.append("CAST(created_at AS DATE) >= ?")
        params.append(filters.created_from)

    if filters.created_to:
        conditions.append("CAST(created_at AS DATE) <= ?")
        params.append(filters.created_to)

    if filters.has_description:
        conditions.append("description IS NOT NULL AND description <> ''")

    where_clause = " AND ".join(conditions) if conditions else "1=1"
    return where_clause, params


def _row_to_dict(row) -> dict[str, Any]:
    return {
        "id": row[0],
        "title": row[1],
        "description": row[2],
        "completed": bool(row[3]),
        "created_at": row[4],
        "updated_at": row[5],
    }


class TodoRepository:
    """CRUD queries over the todos table."""

    def __init__(self, db: DatabaseService):
        self.db = db

    def count(self, filters: Optional[TodoFilters] = None) -> int:
        where_clause, params = build_todo_filter_clause(filters)
        row = self.db.fetch_one(f"SELECT COUNT(*) FROM todos WHERE {where_clause}", params)
        return row[0] if row else 0

    def find_all(
        self,
        filters: Optional[TodoFilters] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """Return todos newest first."""
        where_clause, params = build_todo_filter_clause(filters)
        sql = f"SELECT {TODO_COLUMNS} FROM todos WHERE {where_clause} ORDER BY created_at DESC, id"
        if limit is not None:
            sql += " LIMIT ? OFFSET ?"
            params = params + [limit, offset]
        return [_row_to_dict(row) for row in self.db.fetch_all(sql, params)]

    def find_by_id(self, todo_id: str) -> Optional[dict[str, Any]]:
        row = self.db.fetch_one(f"SELECT {TODO_COLUMNS} FROM todos WHERE id = ?", [todo_id])
        return _row_to_dict(row) if row else None

    def create(
        self,
        title: str,
        description: Optional[str] = None,
        completed: bool = False,
        created_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        todo_id = uuid.uuid4().hex
        now = created_at or datetime.now()
        self.db.execute(
            "INSERT INTO todos (id, title, description, completed, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            [todo_id, title, description, completed, now, now],
        )
        return self.find_by_id(todo_id)

    def update(self, todo_id: str, changes: dict[str, Any]) -> Optional[dict[str, Any]]:
        allowed = {key: value for key, value in changes.items() if key in ("title", "description", "completed")}
        if allowed:
            assignments = ", ".join(f"{key} = ?" for key in allowed)
            self.db.execute(
                f"UPDATE todos SET {assignments}, updated_at = ? WHERE id = ?",
                [*allowed.values(), datetime.now(), todo_id],
            )
        return self.find_by_id(todo_id)

    def delete(self, todo_id: str) -> Optional[dict[str, Any]]:
        existing = self.find_by_id(todo_id)
        if existing:
            self.db.execute("DELETE FROM todos WHERE id = ?", [todo_id])
        return existing
