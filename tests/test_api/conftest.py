"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from todo_explorer.api import database
from todo_explorer.api.main import app
from todo_explorer.api.routers.todos import get_todo_service
from todo_explorer.api.services.todo_service import TodoService


@pytest.fixture
def client(seeded_db, monkeypatch):
    """TestClient bound to the seeded in-memory database."""
    monkeypatch.setattr(database, "_db_service", seeded_db)
    app.dependency_overrides[get_todo_service] = lambda: TodoService(seeded_db)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def todos_by_title(client):
    """Map of title to todo for the seeded rows."""
    response = client.get("/api/todos")
    return {todo["title"]: todo for todo in response.json()["todos"]}
