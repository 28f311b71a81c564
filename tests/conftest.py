"""Pytest configuration and fixtures for Todo Explorer tests."""

import pytest
from datetime import datetime

from todo_explorer.api.database import DatabaseService
from todo_explorer.api.repositories.todo_repository import TodoRepository
from todo_explorer.filters import (
    FilterFieldConfig,
    FilterFieldOption,
    FilterFieldType,
    InMemoryQueryStore,
)


class CallRecorder:
    """Callable that records every call it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)


@pytest.fixture
def recorder():
    """Fresh call recorder for filter callbacks."""
    return CallRecorder()


@pytest.fixture
def store():
    """Empty in-memory query store."""
    return InMemoryQueryStore()


@pytest.fixture
def todo_fields():
    """Filter fields mirroring the todo console."""
    return [
        FilterFieldConfig(name="q", label="Search", placeholder="Title or description"),
        FilterFieldConfig(
            name="status",
            label="Status",
            type=FilterFieldType.SELECT,
            options=[FilterFieldOption("open", "Open"), FilterFieldOption("done", "Done")],
        ),
        FilterFieldConfig(name="created_from", label="Created from", type=FilterFieldType.DATE),
        FilterFieldConfig(name="has_description", label="Has description", type=FilterFieldType.CHECKBOX),
    ]


@pytest.fixture
def test_db():
    """In-memory DuckDB with the todos schema."""
    db = DatabaseService(":memory:")
    db.connect()
    yield db
    db.close()


@pytest.fixture
def seeded_db(test_db):
    """In-memory DuckDB with three todos on known dates."""
    repo = TodoRepository(test_db)
    repo.create(
        title="Buy milk",
        description="Milk and bread",
        created_at=datetime(2025, 1, 10, 9, 0),
    )
    repo.create(
        title="Write report",
        description=None,
        completed=True,
        created_at=datetime(2025, 1, 12, 10, 0),
    )
    repo.create(
        title="Call plumber",
        description="Kitchen sink",
        created_at=datetime(2025, 1, 15, 8, 0),
    )
    return test_db
