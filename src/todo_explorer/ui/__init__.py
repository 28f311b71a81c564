"""Streamlit presentation components."""

from .formatting import (
    format_date_time,
    format_date,
    remove_phone_hyphens,
    is_valid_phone_format,
    generate_phone_search_patterns,
    is_phone_number,
    is_half_width,
)
from .filter_field import render_filter_field, widget_to_filter_value
from .filter_form import get_generic_filter, render_generic_filter
from .data_table import TableWindow, paginate_frame, apply_formatters, render_data_table

__all__ = [
    "format_date_time",
    "format_date",
    "remove_phone_hyphens",
    "is_valid_phone_format",
    "generate_phone_search_patterns",
    "is_phone_number",
    "is_half_width",
    "render_filter_field",
    "widget_to_filter_value",
    "get_generic_filter",
    "render_generic_filter",
    "TableWindow",
    "paginate_frame",
    "apply_formatters",
    "render_data_table",
]
