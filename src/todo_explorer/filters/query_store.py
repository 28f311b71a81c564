"""Shared URL query-parameter state.

The query string is shared by every URL-aware component on a page (filters,
pagination, anything else). Writers never replace the whole URL: they go
through ``QueryStateStore.replace``, which copies the current parameters,
lets the caller mutate the copy and writes the result back as a single
navigation.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Mapping, MutableMapping, Optional, Union
from urllib.parse import urlencode

import streamlit as st

from todo_explorer.config.logging_config import get_logger

from .query_params import QueryValue, parse_query_params, stringify_value

logger = get_logger("filters.query_store")

Params = Dict[str, str]
StoreListener = Callable[[Params], None]


class QueryStateStore(ABC):
    """Read-modify-write access to the current URL query parameters."""

    def __init__(self) -> None:
        self._listeners: List[StoreListener] = []

    @abstractmethod
    def snapshot(self) -> Params:
        """Return a copy of the current parameters."""

    @abstractmethod
    def _write(self, params: Params) -> None:
        """Persist a full parameter set (one navigation)."""

    def get(self, key: str) -> Optional[str]:
        return self.snapshot().get(key)

    def has(self, key: str) -> bool:
        return key in self.snapshot()

    def replace(self, mutate: Callable[[Params], None]) -> Params:
        """
        Apply ``mutate`` to a copy of the current parameters and write it back.

        Subscribers are notified only when the parameters actually changed.

        Returns:
            The parameters after the write.
        """
        current = self.snapshot()
        updated = dict(current)
        mutate(updated)

        self._write(updated)
        logger.debug(f"Query params replaced: {current} -> {updated}")

        if updated != current:
            for listener in list(self._listeners):
                listener(dict(updated))
        return updated

    def set(self, key: str, value: QueryValue) -> Params:
        return self.replace(lambda params: params.__setitem__(key, stringify_value(value)))

    def delete(self, key: str) -> Params:
        return self.replace(lambda params: params.pop(key, None))

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener called with the new parameters after each change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class InMemoryQueryStore(QueryStateStore):
    """
    Store backed by a plain dict.

    Keeps a navigation log (``history``) with the query string written by
    every ``replace`` call, which makes it the store of choice for tests and
    for driving the filters outside a browser.
    """

    def __init__(
        self,
        initial: Union[str, Mapping[str, QueryValue], None] = None,
        pathname: str = "/",
    ) -> None:
        super().__init__()
        self.pathname = pathname
        self._params: Params = parse_query_params(initial)
        self.history: List[str] = []

    def snapshot(self) -> Params:
        return dict(self._params)

    def _write(self, params: Params) -> None:
        self._params = dict(params)
        self.history.append(self.query_string)

    @property
    def query_string(self) -> str:
        return urlencode(self._params)

    @property
    def url(self) -> str:
        query = self.query_string
        return f"{self.pathname}?{query}" if query else self.pathname

    def navigate(self, query: Union[str, Mapping[str, QueryValue]]) -> None:
        """Simulate an external navigation (back/forward, pasted link)."""
        target = parse_query_params(query)

        def apply(params: Params) -> None:
            params.clear()
            params.update(target)

        self.replace(apply)


class StreamlitQueryStore(QueryStateStore):
    """
    Store backed by ``st.query_params``.

    Only changed keys are written so parameters owned by other components
    survive. Any mutable mapping can be passed instead of ``st.query_params``.
    """

    def __init__(self, params: Optional[MutableMapping[str, str]] = None) -> None:
        super().__init__()
        self._params = params if params is not None else st.query_params

    def snapshot(self) -> Params:
        return parse_query_params({key: self._params[key] for key in self._params})

    def _write(self, params: Params) -> None:
        current = self.snapshot()
        for key in current:
            if key not in params:
                del self._params[key]
        for key, value in params.items():
            if current.get(key) != value:
                self._params[key] = value
