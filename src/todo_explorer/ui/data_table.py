"""Paginated data table for Streamlit.

Supports client-side pagination (the whole frame is passed in and sliced
here) and manual pagination (the caller passes one server page plus the
total row count and handles page changes).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import pandas as pd
import streamlit as st

ColumnFormatter = Callable[[object], str]
PageCallback = Callable[[int], None]


@dataclass(frozen=True)
class TableWindow:
    """Pagination arithmetic for one table page (``page`` is 1-based)."""
    page: int
    page_size: int
    total_count: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def total_pages(self) -> int:
        """Number of pages, at least 1."""
        if self.total_count <= 0 or self.page_size <= 0:
            return 1
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def start_row(self) -> int:
        if self.total_count <= 0:
            return 0
        return self.offset + 1

    @property
    def end_row(self) -> int:
        return min(self.offset + self.page_size, max(self.total_count, 0))

    def get_display_range(self) -> str:
        if self.total_count <= 0:
            return ""
        return f"Showing {self.start_row:,} - {self.end_row:,} of {self.total_count:,}"


def paginate_frame(frame: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """Slice one page out of ``frame``. Out-of-range pages give an empty frame."""
    window = TableWindow(page=max(1, page), page_size=page_size, total_count=len(frame))
    return frame.iloc[window.offset:window.offset + page_size]


def apply_formatters(frame: pd.DataFrame, formatters: Optional[Dict[str, ColumnFormatter]]) -> pd.DataFrame:
    """Return a copy with the given columns mapped through their formatter."""
    if not formatters:
        return frame
    formatted = frame.copy()
    for column, formatter in formatters.items():
        if column in formatted.columns:
            formatted[column] = formatted[column].map(formatter)
    return formatted


def render_data_table(
    frame: pd.DataFrame,
    key: str = "table",
    page: Optional[int] = None,
    page_size: int = 10,
    total_count: Optional[int] = None,
    manual_pagination: bool = False,
    on_page_change: Optional[PageCallback] = None,
    formatters: Optional[Dict[str, ColumnFormatter]] = None,
    column_config: Optional[dict] = None,
    is_loading: bool = False,
    loading_message: str = "Loading...",
    empty_message: str = "No data",
    show_pagination_info: bool = True,
    enable_row_selection: bool = False,
) -> List[int]:
    """
    Render a page of ``frame`` with pagination controls.

    Args:
        frame: Rows to show. With ``manual_pagination`` this is already one page.
        key: Unique widget key prefix.
        page: Current page (1-based). Kept in session state when omitted.
        page_size: Rows per page.
        total_count: Total rows across all pages (manual pagination).
        manual_pagination: Frame is a server page; ``on_page_change`` loads others.
        on_page_change: Called with the new page number.
        formatters: Per-column display formatters.
        column_config: Passed through to ``st.dataframe``.
        is_loading: Show the loading state instead of the table.
        loading_message: Text for the loading state.
        empty_message: Text when there are no rows.
        show_pagination_info: Show "Showing X - Y of Z".
        enable_row_selection: Allow multi-row selection.

    Returns:
        Positions of the selected rows within the displayed page.
    """
    page_key = f"_table_page_{key}"

    if is_loading:
        with st.spinner(loading_message):
            st.caption(loading_message)
        return []

    if frame.empty:
        st.info(empty_message)
        return []

    if page is None:
        page = st.session_state.get(page_key, 1)

    if manual_pagination:
        window = TableWindow(page=page, page_size=page_size, total_count=total_count or len(frame))
        page_frame = frame
    else:
        window = TableWindow(page=page, page_size=page_size, total_count=len(frame))
        page_frame = paginate_frame(frame, page, page_size)

    display_frame = apply_formatters(page_frame, formatters)

    selected: List[int] = []
    if enable_row_selection:
        event = st.dataframe(
            display_frame,
            column_config=column_config,
            hide_index=True,
            use_container_width=True,
            key=f"{key}_grid",
            on_select="rerun",
            selection_mode="multi-row",
        )
        selected = list(event.selection.rows)
    else:
        st.dataframe(
            display_frame,
            column_config=column_config,
            hide_index=True,
            use_container_width=True,
        )

    def go_to(new_page: int) -> None:
        st.session_state[page_key] = new_page
        if on_page_change is not None:
            on_page_change(new_page)

    info_col, nav_col = st.columns([2, 3])

    if show_pagination_info:
        with info_col:
            st.markdown(f"**{window.get_display_range()}**")

    with nav_col:
        btn_cols = st.columns([1, 1, 2, 1, 1])
        with btn_cols[0]:
            st.button("⏮", key=f"{key}_first", disabled=not window.has_previous,
                      on_click=go_to, args=(1,))
        with btn_cols[1]:
            st.button("◀", key=f"{key}_prev", disabled=not window.has_previous,
                      on_click=go_to, args=(window.page - 1,))
        with btn_cols[2]:
            st.markdown(
                f"<div style='text-align: center; padding-top: 8px;'>"
                f"{window.page} / {window.total_pages}</div>",
                unsafe_allow_html=True,
            )
        with btn_cols[3]:
            st.button("▶", key=f"{key}_next", disabled=not window.has_next,
                      on_click=go_to, args=(window.page + 1,))
        with btn_cols[4]:
            st.button("⏭", key=f"{key}_last", disabled=not window.has_next,
                      on_click=go_to, args=(window.total_pages,))

    return selected
