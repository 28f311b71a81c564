"""
Todo Explorer - Streamlit console

Run with: streamlit run src/todo_explorer/app/main.py
"""

from typing import Mapping, MutableMapping, Optional

import pandas as pd
import streamlit as st

from todo_explorer.client import ApiError, TodoApiClient
from todo_explorer.config import config, get_logger, setup_logging
from todo_explorer.filters import (
    FilterFieldConfig,
    FilterFieldOption,
    FilterFieldType,
    PaginationController,
    StreamlitQueryStore,
    is_empty_value,
)
from todo_explorer.ui import format_date_time, render_data_table, render_generic_filter

logger = get_logger("app")

FILTER_STATE_KEY = "todo_filters"

TODO_FILTER_FIELDS = [
    FilterFieldConfig(name="q", label="Search", placeholder="Title or description"),
    FilterFieldConfig(
        name="status",
        label="Status",
        type=FilterFieldType.SELECT,
        placeholder="Any status",
        options=[FilterFieldOption("open", "Open"), FilterFieldOption("done", "Done")],
    ),
    FilterFieldConfig(name="created_from", label="Created from", type=FilterFieldType.DATE),
    FilterFieldConfig(name="created_to", label="Created to", type=FilterFieldType.DATE),
    FilterFieldConfig(name="has_description", label="Has description", type=FilterFieldType.CHECKBOX),
]

TABLE_COLUMNS = ["title", "description", "completed", "created_at", "updated_at", "id"]


@st.cache_resource
def get_client() -> TodoApiClient:
    """One API client per server process."""
    return TodoApiClient(config.api.base_url, timeout=config.api.timeout)


def filters_from_url(fields, params: Mapping[str, str]) -> dict:
    """Filter mapping the URL encodes, as the panel computes it when it mounts."""
    filters = {}
    for field in fields:
        if field.name in params:
            value = field.parse_param(params[field.name])
            if not is_empty_value(value):
                filters[field.name] = value
    return filters


def handle_filter_change(
    pagination: PaginationController,
    state: Optional[MutableMapping] = None,
):
    """Build the filter callback: store the filters and go back to page 1 when they change."""
    if state is None:
        state = st.session_state

    def on_filter_change(filters: dict) -> None:
        previous = state.get(FILTER_STATE_KEY, {})
        state[FILTER_STATE_KEY] = filters
        if previous != filters:
            pagination.set_page(1)
        logger.debug(f"Filters changed: {filters}")

    return on_filter_change


def render_create_form(client: TodoApiClient) -> None:
    with st.expander("Add todo"):
        with st.form("create_todo", clear_on_submit=True):
            title = st.text_input("Title")
            description = st.text_area("Description")
            submitted = st.form_submit_button("Create", type="primary")

        if submitted:
            if not title.strip():
                st.warning("Title is required")
                return
            try:
                todo = client.create_todo(title.strip(), description.strip() or None)
                st.success(f"Created \"{todo['title']}\"")
            except ApiError as e:
                st.error(f"Could not create todo: {e}")


def render_row_actions(client: TodoApiClient, todos: list, selected: list) -> None:
    if not selected:
        return

    chosen = [todos[i] for i in selected if i < len(todos)]
    st.caption(f"{len(chosen)} selected")
    col1, col2, _ = st.columns([1, 1, 4])

    with col1:
        if st.button("Toggle done", key="toggle_done"):
            try:
                for todo in chosen:
                    client.update_todo(todo["id"], completed=not todo["completed"])
                st.rerun()
            except ApiError as e:
                st.error(f"Could not update todo: {e}")

    with col2:
        if st.button("Delete", key="delete_selected"):
            try:
                for todo in chosen:
                    client.delete_todo(todo["id"])
                st.rerun()
            except ApiError as e:
                st.error(f"Could not delete todo: {e}")


def render_todos() -> None:
    """Render the todo list page."""
    store = StreamlitQueryStore()
    pagination = PaginationController(store, default_page_size=config.ui.default_page_size)
    client = get_client()

    if FILTER_STATE_KEY not in st.session_state:
        st.session_state[FILTER_STATE_KEY] = filters_from_url(TODO_FILTER_FIELDS, store.snapshot())

    st.subheader("Filters")
    render_generic_filter(
        TODO_FILTER_FIELDS,
        on_filter_change=handle_filter_change(pagination),
        key="todos",
        layout="grid",
        grid_columns=3,
        auto_submit=config.ui.auto_submit,
        show_search_button=True,
        store=store,
    )

    render_create_form(client)

    filters = st.session_state.get(FILTER_STATE_KEY, {})
    params = pagination.params

    try:
        result = client.list_todos(filters, page=params.page, page_size=params.page_size)
    except ApiError as e:
        logger.error(f"Failed to load todos: {e}")
        st.error(f"Could not load todos: {e}")
        return

    todos = result["todos"]
    frame = pd.DataFrame(todos, columns=TABLE_COLUMNS)

    size_options = config.ui.page_size_options
    _, size_col = st.columns([5, 1])
    with size_col:
        new_size = st.selectbox(
            "Per page",
            options=size_options,
            index=size_options.index(params.page_size) if params.page_size in size_options else 0,
            key="page_size",
        )
        if new_size != params.page_size:
            pagination.set_page_size(new_size)
            st.rerun()

    selected = render_data_table(
        frame,
        key="todos",
        page=params.page,
        page_size=params.page_size,
        total_count=result["pagination"]["total"],
        manual_pagination=True,
        on_page_change=pagination.set_page,
        formatters={
            "created_at": format_date_time,
            "updated_at": format_date_time,
            "description": lambda v: v or "-",
        },
        column_config={
            "completed": st.column_config.CheckboxColumn("Done"),
            "id": None,
        },
        empty_message="No todos match the current filters",
        enable_row_selection=True,
    )

    render_row_actions(client, todos, selected)


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=config.app.name,
        page_icon="✅",
        layout="wide",
    )
    setup_logging(config.app.log_level)

    with st.sidebar:
        st.title(config.app.name)
        st.caption(f"v{config.app.version}")
        st.divider()
        st.caption(f"API: {config.api.base_url}")
        st.caption("Mode: " + ("live filtering" if config.ui.auto_submit else "search on submit"))

    st.title("Todos")
    render_todos()


if __name__ == "__main__":
    main()
