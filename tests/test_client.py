"""Tests for the todo API client."""

import json

import httpx
import pytest
from tenacity import wait_none

from todo_explorer.client import ApiError, TodoApiClient

LISTING = {
    "todos": [],
    "pagination": {"page": 2, "page_size": 5, "total": 0, "total_pages": 0},
}


def make_client(handler, **kwargs):
    kwargs.setdefault("max_retries", 3)
    return TodoApiClient(
        "http://testserver",
        timeout=1,
        transport=httpx.MockTransport(handler),
        retry_wait=wait_none(),
        **kwargs,
    )


class TestListTodos:
    """Tests for TodoApiClient.list_todos."""

    def test_empty_filters_are_not_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=LISTING)

        client = make_client(handler)
        result = client.list_todos(
            {"q": "milk", "status": "", "has_description": False, "created_from": None},
            page=2,
            page_size=5,
        )

        assert result == LISTING
        assert seen[0].url.path == "/api/todos"
        assert dict(seen[0].url.params) == {"q": "milk", "page": "2", "page_size": "5"}

    def test_booleans_sent_as_true(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=LISTING)

        make_client(handler).list_todos({"has_description": True})
        assert seen[0].url.params["has_description"] == "true"


class TestErrors:
    """Tests for ApiError mapping."""

    def test_not_found(self):
        client = make_client(lambda request: httpx.Response(404, json={"error": "Todo not found"}))
        with pytest.raises(ApiError) as exc_info:
            client.get_todo("missing")
        assert exc_info.value.status == 404
        assert exc_info.value.message == "Todo not found"

    def test_validation_error_detail(self):
        client = make_client(lambda request: httpx.Response(422, json={"detail": "bad page"}))
        with pytest.raises(ApiError) as exc_info:
            client.list_todos(page=0)
        assert exc_info.value.status == 422
        assert "bad page" in exc_info.value.message

    def test_non_json_error(self):
        client = make_client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(ApiError) as exc_info:
            client.list_todos()
        assert exc_info.value.status == 500
        assert exc_info.value.message == "HTTP 500"

    def test_get_retries_transport_errors(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("connection refused")

        with pytest.raises(ApiError) as exc_info:
            make_client(handler).list_todos()
        assert exc_info.value.status == 0
        assert len(attempts) == 3

    def test_get_recovers_after_retry(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            if len(attempts) == 1:
                raise httpx.ConnectError("connection refused")
            return httpx.Response(200, json=LISTING)

        assert make_client(handler).list_todos() == LISTING
        assert len(attempts) == 2

    @pytest.mark.parametrize("max_retries", [0, 1])
    def test_explicit_single_attempt(self, max_retries):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("connection refused")

        client = make_client(handler, max_retries=max_retries)
        assert client.max_retries == max_retries
        with pytest.raises(ApiError):
            client.list_todos()
        assert len(attempts) == 1

    def test_writes_are_not_retried(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("connection refused")

        with pytest.raises(ApiError) as exc_info:
            make_client(handler).create_todo("Buy milk")
        assert exc_info.value.status == 0
        assert len(attempts) == 1


class TestWrites:
    """Tests for create, update and delete."""

    def test_create_todo(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={"id": "abc123", "title": "Buy milk"})

        todo = make_client(handler).create_todo("Buy milk")
        assert todo["id"] == "abc123"
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"title": "Buy milk"}

    def test_update_todo(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "abc123", "completed": True})

        make_client(handler).update_todo("abc123", completed=True)
        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/api/todos/abc123"
        assert json.loads(seen[0].content) == {"completed": True}

    def test_delete_todo(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "abc123"})

        with make_client(handler) as client:
            client.delete_todo("abc123")
        assert seen[0].method == "DELETE"
