"""Streamlit rendering of a ``GenericFilter``."""

from typing import Mapping, Optional, Sequence

import streamlit as st

from todo_explorer.filters.fields import FilterFieldConfig, FilterValue
from todo_explorer.filters.generic_filter import (
    FieldChangeCallback,
    FilterChangeCallback,
    GenericFilter,
)
from todo_explorer.filters.query_store import QueryStateStore, StreamlitQueryStore

from .filter_field import render_filter_field

LAYOUTS = ("stack", "grid")


def get_generic_filter(
    key: str,
    fields: Sequence[FilterFieldConfig],
    on_filter_change: FilterChangeCallback,
    on_field_change: Optional[FieldChangeCallback] = None,
    auto_submit: bool = False,
    default_values: Optional[Mapping[str, FilterValue]] = None,
    store: Optional[QueryStateStore] = None,
) -> GenericFilter:
    """
    Get the filter instance kept in session state, creating it on first use.

    Later calls refresh the callbacks and defaults, then ``sync()`` so
    external URL changes are picked up on every rerun.
    """
    state_key = f"_generic_filter_{key}"
    generic_filter: Optional[GenericFilter] = st.session_state.get(state_key)

    if generic_filter is None or generic_filter.auto_submit != auto_submit:
        if generic_filter is not None:
            generic_filter.close()
        generic_filter = GenericFilter(
            fields,
            store or StreamlitQueryStore(),
            on_filter_change=on_filter_change,
            on_field_change=on_field_change,
            auto_submit=auto_submit,
            default_values=default_values,
        )
        st.session_state[state_key] = generic_filter
        return generic_filter

    generic_filter.on_filter_change = on_filter_change
    generic_filter.on_field_change = on_field_change
    generic_filter.set_default_values(default_values)
    generic_filter.sync()
    return generic_filter


def render_generic_filter(
    fields: Sequence[FilterFieldConfig],
    on_filter_change: FilterChangeCallback,
    key: str = "filter",
    on_field_change: Optional[FieldChangeCallback] = None,
    layout: str = "stack",
    grid_columns: int = 3,
    show_search_button: bool = True,
    search_button_text: str = "Search",
    title: Optional[str] = None,
    default_values: Optional[Mapping[str, FilterValue]] = None,
    auto_submit: bool = False,
    store: Optional[QueryStateStore] = None,
) -> GenericFilter:
    """
    Render a filter panel whose state lives in the URL.

    Args:
        fields: Field descriptors.
        on_filter_change: Receives the authoritative filter mapping.
        key: Session state namespace for this panel.
        on_field_change: Optional hook for every raw edit.
        layout: ``"stack"`` or ``"grid"``.
        grid_columns: Column count for the grid layout.
        show_search_button: Show the search and reset buttons.
        search_button_text: Label of the search button.
        title: Optional heading.
        default_values: Caller defaults, overridden by the URL.
        auto_submit: Commit every edit to the URL immediately.
        store: Query-parameter store, ``st.query_params`` by default.

    Returns:
        The ``GenericFilter`` driving the panel.
    """
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout: {layout}")

    generic_filter = get_generic_filter(
        key,
        fields,
        on_filter_change,
        on_field_change=on_field_change,
        auto_submit=auto_submit,
        default_values=default_values,
        store=store,
    )

    # Bumped on reset so widgets are rebuilt from the filter's values
    revision_key = f"_generic_filter_{key}_revision"
    revision = st.session_state.setdefault(revision_key, 0)

    def reset() -> None:
        generic_filter.handle_reset()
        st.session_state[revision_key] = revision + 1

    with st.container(border=True):
        if title:
            st.markdown(f"**{title}**")

        if layout == "grid":
            columns = st.columns(max(1, grid_columns))
            slots = [columns[i % len(columns)] for i in range(len(generic_filter.fields))]
        else:
            slots = [st.container() for _ in generic_filter.fields]

        for slot, field in zip(slots, generic_filter.fields):
            with slot:
                render_filter_field(
                    field,
                    generic_filter.get_field_value(field),
                    key=f"{key}_{field.name}_{revision}",
                    on_change=lambda value, name=field.name: generic_filter.handle_field_change(name, value),
                )

        if show_search_button:
            _, search_col, reset_col, _ = st.columns([2, 1, 1, 2])
            with search_col:
                st.button(
                    search_button_text,
                    key=f"{key}_search",
                    type="primary",
                    use_container_width=True,
                    on_click=generic_filter.handle_submit,
                )
            with reset_col:
                st.button(
                    "Reset",
                    key=f"{key}_reset",
                    use_container_width=True,
                    on_click=reset,
                )

    return generic_filter
