"""Conversion between filter mappings and URL query strings.

Empty values (``None``, ``""`` and ``False``) are never written to a query
string: absence of a key is the "no filter" state. Decoding performs no type
inference; callers re-interpret the strings against their own field kinds.
"""

from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode

QueryValue = Union[str, int, float, bool, None]


def is_empty_value(value: Any) -> bool:
    """Return True for values that must never appear as a filter."""
    return value is None or value is False or value == ""


def stringify_value(value: QueryValue) -> str:
    """Render a scalar the way a browser query string would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_params(params: Mapping[str, QueryValue]) -> Dict[str, str]:
    """
    Filter and stringify a mapping into query parameters.

    Args:
        params: Mapping of parameter name to value.

    Returns:
        Insertion-ordered dict of name to string value, with empty entries
        removed.

    Example:
        >>> build_query_params({"search_term": "test", "type": "BLACKLIST", "page": None})
        {'search_term': 'test', 'type': 'BLACKLIST'}
    """
    return {
        key: stringify_value(value)
        for key, value in params.items()
        if not is_empty_value(value)
    }


def build_query_string(params: Mapping[str, QueryValue]) -> str:
    """
    Encode a mapping as a query string (without the leading '?').

    Example:
        >>> build_query_string({"search_term": "test", "type": "BLACKLIST", "page": None})
        'search_term=test&type=BLACKLIST'
    """
    return urlencode(build_query_params(params))


def add_query_params(base_url: str, params: Mapping[str, QueryValue]) -> str:
    """
    Append query parameters to a URL.

    Example:
        >>> add_query_params("/api/todos", {"q": "milk", "page": 1})
        '/api/todos?q=milk&page=1'
    """
    query_string = build_query_string(params)
    if not query_string:
        return base_url

    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query_string}"


def parse_query_params(query: Union[str, Mapping[str, Any], None]) -> Dict[str, str]:
    """
    Decode a query string (or a mapping of raw params) into string values.

    Repeated keys keep their last value. A leading '?' is ignored.

    Example:
        >>> parse_query_params("search_term=test&page=1")
        {'search_term': 'test', 'page': '1'}
    """
    if query is None:
        return {}

    if isinstance(query, str):
        params: Dict[str, str] = {}
        for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
            params[key] = value
        return params

    params = {}
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[-1]
        params[str(key)] = value if isinstance(value, str) else stringify_value(value)
    return params


def parse_bool_param(raw: Optional[str]) -> bool:
    """Interpret a query value as a checkbox state."""
    return raw == "true"


def parse_number_param(raw: str) -> Union[int, float, str]:
    """Interpret a query value as a number, passing malformed input through."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw
