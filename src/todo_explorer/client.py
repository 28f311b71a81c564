"""HTTP client for the todo REST API.

Usage::

    from todo_explorer.client import TodoApiClient, ApiError

    client = TodoApiClient("http://localhost:8000")
    try:
        result = client.list_todos({"status": "open"}, page=1, page_size=10)
    except ApiError as exc:
        print(exc.status, exc.message)
"""

from typing import Any, Dict, Mapping, Optional

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from todo_explorer.config import config
from todo_explorer.config.logging_config import get_logger
from todo_explorer.filters.query_params import QueryValue, build_query_params

logger = get_logger("client")


class ApiError(Exception):
    """Raised for any failed API call. ``status`` is 0 for transport failures."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return f"{self.message} (status {self.status})" if self.status else self.message


class TodoApiClient:
    """Synchronous client for ``/api/todos``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        max_retries: Optional[int] = None,
        retry_wait=None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, defaults to ``TODO_API_URL``.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
            max_retries: Attempts for GET requests on transport errors.
            retry_wait: tenacity wait strategy between GET attempts.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.max_retries = config.api.max_retries if max_retries is None else max_retries
        self.retry_wait = retry_wait or wait_exponential(multiplier=0.5, min=0.5, max=4)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout or config.api.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "TodoApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Reads

    def list_todos(
        self,
        filters: Optional[Mapping[str, QueryValue]] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Dict[str, Any]:
        """Fetch one page of todos.

        Empty filter values are dropped before the request is sent.
        """
        params = build_query_params(filters or {})
        params.update({"page": str(page), "page_size": str(page_size)})
        return self._get("/api/todos", params)

    def get_todo(self, todo_id: str) -> Dict[str, Any]:
        return self._get(f"/api/todos/{todo_id}")

    # Writes (never retried)

    def create_todo(self, title: str, description: Optional[str] = None) -> Dict[str, Any]:
        payload = {"title": title}
        if description is not None:
            payload["description"] = description
        return self._send("POST", "/api/todos", json=payload)

    def update_todo(self, todo_id: str, **changes: Any) -> Dict[str, Any]:
        return self._send("PUT", f"/api/todos/{todo_id}", json=changes)

    def delete_todo(self, todo_id: str) -> Dict[str, Any]:
        return self._send("DELETE", f"/api/todos/{todo_id}")

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        try:
            response = retrying(self._client.get, path, params=params)
        except httpx.TransportError as exc:
            logger.warning(f"GET {path} failed after {self.max_retries} attempts: {exc}")
            raise ApiError(f"Connection failed: {exc}", 0) from exc
        return self._handle(response)

    def _send(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise ApiError(f"Connection failed: {exc}", 0) from exc
        return self._handle(response)

    @staticmethod
    def _handle(response: httpx.Response) -> Dict[str, Any]:
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("error") if isinstance(body, dict) else None
            if not message and isinstance(body, dict) and "detail" in body:
                message = str(body["detail"])
            raise ApiError(message or f"HTTP {response.status_code}", response.status_code)
        return response.json()
