"""Typed filter dict kept in sync with the URL.

Lighter than ``GenericFilter``: no modes and no field descriptors, just a
dict of defaults whose keys are mirrored to query parameters. Values read
from the URL are coerced to the type of the matching default.
"""

from typing import Any, Dict, Mapping, Optional

from .query_params import is_empty_value, parse_bool_param, parse_number_param, stringify_value
from .query_store import Params, QueryStateStore


def coerce_param(raw: str, default: Any) -> Any:
    """Interpret a raw query value using the type of ``default``."""
    if isinstance(default, bool):
        return parse_bool_param(raw)
    if isinstance(default, (int, float)):
        return parse_number_param(raw)
    return raw


class UrlSyncedFilters:
    """
    Filters backed by the URL.

    Example:
        filters = UrlSyncedFilters(store, {"search_query": "", "status": ""})
        filters.update_filter("search_query", "milk")   # ?search_query=milk
        filters.reset_filters()                          # back to defaults
    """

    def __init__(self, store: QueryStateStore, default_values: Mapping[str, Any]):
        self.store = store
        self.default_values: Dict[str, Any] = dict(default_values)

        initial = store.snapshot()
        merged = dict(self.default_values)
        for key, default in self.default_values.items():
            if key in initial:
                merged[key] = coerce_param(initial[key], default)
        self._filters = merged
        self._write_url()

    @property
    def filters(self) -> Dict[str, Any]:
        return dict(self._filters)

    def set_filters(self, values: Mapping[str, Any]) -> None:
        self._filters = dict(values)
        self._write_url()

    def update_filter(self, key: str, value: Any) -> None:
        self._filters = {**self._filters, key: value}
        self._write_url()

    def reset_filters(self) -> None:
        self._filters = dict(self.default_values)
        self._write_url()

    def _write_url(self) -> None:
        owned = list(dict.fromkeys([*self.default_values, *self._filters]))
        filters = dict(self._filters)

        def apply(params: Params) -> None:
            for key in owned:
                value = filters.get(key)
                if is_empty_value(value):
                    params.pop(key, None)
                else:
                    params[key] = stringify_value(value)

        self.store.replace(apply)
