"""Pagination state stored in the URL (``page`` and ``pageSize``).

Independent of ``GenericFilter``: both share the query string but own
disjoint keys. Callers that want "changing a filter goes back to page 1"
call ``set_page(1)`` from their filter callback.
"""

import math
from dataclasses import dataclass
from typing import Optional

from todo_explorer.config.logging_config import get_logger

from .query_store import Params, QueryStateStore

logger = get_logger("filters.pagination")

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "pageSize"


@dataclass(frozen=True)
class PaginationParams:
    """Resolved pagination position."""
    page: int
    page_size: int
    offset: int


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Read a 1-based count from a query value.

    Missing values use ``default``; anything present is clamped to at least 1,
    and malformed numbers fall to 1.
    """
    if raw is None or raw.strip() == "":
        return max(1, default)
    try:
        number = float(raw)
    except ValueError:
        return 1
    if math.isnan(number) or math.isinf(number):
        return 1
    return max(1, int(number))


class PaginationController:
    """
    Read and write ``page``/``pageSize`` through a query store.

    Usage:
        pagination = PaginationController(store, default_page_size=25)
        rows = repo.list(limit=pagination.page_size, offset=pagination.offset)
        pagination.set_page(pagination.page + 1)
    """

    def __init__(self, store: QueryStateStore, default_page_size: int = 10):
        self.store = store
        self.default_page_size = default_page_size

    @property
    def params(self) -> PaginationParams:
        snapshot = self.store.snapshot()
        page = parse_positive_int(snapshot.get(PAGE_PARAM), 1)
        page_size = parse_positive_int(snapshot.get(PAGE_SIZE_PARAM), self.default_page_size)
        return PaginationParams(
            page=page,
            page_size=page_size,
            offset=(page - 1) * page_size,
        )

    @property
    def page(self) -> int:
        return self.params.page

    @property
    def page_size(self) -> int:
        return self.params.page_size

    @property
    def offset(self) -> int:
        return self.params.offset

    def update_pagination_params(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginationParams:
        """
        Write page and/or page size in one navigation.

        A new page size without an explicit page sends the user back to page 1.
        """
        def apply(params: Params) -> None:
            if page is not None:
                params[PAGE_PARAM] = str(page)
            if page_size is not None:
                params[PAGE_SIZE_PARAM] = str(page_size)
                if page is None:
                    params[PAGE_PARAM] = "1"

        self.store.replace(apply)
        logger.debug(f"Pagination updated: page={page}, page_size={page_size}")
        return self.params

    def set_page(self, page: int) -> PaginationParams:
        return self.update_pagination_params(page=page)

    def set_page_size(self, page_size: int) -> PaginationParams:
        return self.update_pagination_params(page_size=page_size)

    def reset_pagination(self) -> PaginationParams:
        """Remove both pagination parameters."""
        def apply(params: Params) -> None:
            params.pop(PAGE_PARAM, None)
            params.pop(PAGE_SIZE_PARAM, None)

        self.store.replace(apply)
        return self.params
