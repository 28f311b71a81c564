"""Streamlit widget for a single filter field."""

from datetime import date
from typing import Callable, Optional

import streamlit as st

from todo_explorer.filters.fields import FilterFieldConfig, FilterFieldType, FilterValue

FieldCallback = Callable[[FilterValue], None]


def _parse_iso_date(value: FilterValue) -> Optional[date]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def widget_to_filter_value(field: FilterFieldConfig, raw) -> FilterValue:
    """Convert a widget's return value to the filter's string/bool form."""
    if field.type == FilterFieldType.CHECKBOX:
        return bool(raw)
    if raw is None:
        return ""
    if isinstance(raw, date):
        return raw.isoformat()
    return str(raw)


def render_filter_field(
    field: FilterFieldConfig,
    value: FilterValue,
    key: str,
    on_change: Optional[FieldCallback] = None,
) -> FilterValue:
    """
    Render the widget for one field.

    Dates travel as ISO ``YYYY-MM-DD`` strings. ``on_change`` receives the
    converted value when the user edits the widget.

    Args:
        field: Field descriptor.
        value: Value to display.
        key: Streamlit widget key.
        on_change: Optional edit callback.

    Returns:
        The widget's current value.
    """
    def changed() -> None:
        if on_change is not None:
            on_change(widget_to_filter_value(field, st.session_state[key]))

    if field.type == FilterFieldType.CHECKBOX:
        raw = st.checkbox(
            field.label,
            value=bool(value),
            disabled=field.disabled,
            key=key,
            on_change=changed,
        )

    elif field.type == FilterFieldType.SELECT:
        options = [option.value for option in field.options]
        labels = {option.value: option.label for option in field.options}
        raw = st.selectbox(
            field.label,
            options=options,
            index=options.index(value) if value in options else None,
            format_func=lambda v: labels.get(v, v),
            placeholder=field.placeholder or "Select...",
            disabled=field.disabled,
            key=key,
            on_change=changed,
        )

    elif field.type == FilterFieldType.DATE:
        raw = st.date_input(
            field.label,
            value=_parse_iso_date(value),
            format="YYYY-MM-DD",
            disabled=field.disabled,
            key=key,
            on_change=changed,
        )

    else:
        raw = st.text_input(
            field.label,
            value=value if isinstance(value, str) else "",
            placeholder=field.placeholder,
            disabled=field.disabled,
            key=key,
            on_change=changed,
        )

    return widget_to_filter_value(field, raw)
