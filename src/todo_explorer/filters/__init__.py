"""URL-synchronized filter and pagination state.

Usage:
    from todo_explorer.filters import (
        FilterFieldConfig,
        GenericFilter,
        InMemoryQueryStore,
        PaginationController,
    )

    store = InMemoryQueryStore("?status=open")
    fields = [FilterFieldConfig(name="status", label="Status", type="select")]
    todo_filter = GenericFilter(fields, store, on_filter_change=refetch, auto_submit=True)
    pagination = PaginationController(store, default_page_size=25)
"""

from .query_params import (
    QueryValue,
    is_empty_value,
    stringify_value,
    build_query_params,
    build_query_string,
    add_query_params,
    parse_query_params,
    parse_bool_param,
    parse_number_param,
)
from .fields import (
    FilterValue,
    FilterFieldType,
    FilterFieldOption,
    FilterFieldConfig,
)
from .query_store import (
    QueryStateStore,
    InMemoryQueryStore,
    StreamlitQueryStore,
)
from .generic_filter import (
    FilterValueMap,
    AutoSubmitMode,
    ExplicitSubmitMode,
    GenericFilter,
    shallow_equal,
    convert_filters_to_query_params,
)
from .pagination import (
    PAGE_PARAM,
    PAGE_SIZE_PARAM,
    PaginationParams,
    PaginationController,
    parse_positive_int,
)
from .url_filters import UrlSyncedFilters, coerce_param


__all__ = [
    # Codec
    "QueryValue",
    "is_empty_value",
    "stringify_value",
    "build_query_params",
    "build_query_string",
    "add_query_params",
    "parse_query_params",
    "parse_bool_param",
    "parse_number_param",
    # Fields
    "FilterValue",
    "FilterFieldType",
    "FilterFieldOption",
    "FilterFieldConfig",
    # Stores
    "QueryStateStore",
    "InMemoryQueryStore",
    "StreamlitQueryStore",
    # Reconciler
    "FilterValueMap",
    "AutoSubmitMode",
    "ExplicitSubmitMode",
    "GenericFilter",
    "shallow_equal",
    "convert_filters_to_query_params",
    # Pagination
    "PAGE_PARAM",
    "PAGE_SIZE_PARAM",
    "PaginationParams",
    "PaginationController",
    "parse_positive_int",
    # URL-synced dict
    "UrlSyncedFilters",
    "coerce_param",
]
