"""Tests for data table pagination helpers."""

from datetime import date

import pandas as pd

from todo_explorer.filters import FilterFieldConfig
from todo_explorer.ui import TableWindow, apply_formatters, paginate_frame, widget_to_filter_value


class TestTableWindow:
    """Tests for TableWindow arithmetic."""

    def test_first_page(self):
        window = TableWindow(page=1, page_size=10, total_count=25)
        assert window.offset == 0
        assert window.total_pages == 3
        assert not window.has_previous
        assert window.has_next
        assert window.get_display_range() == "Showing 1 - 10 of 25"

    def test_last_page(self):
        window = TableWindow(page=3, page_size=10, total_count=25)
        assert window.start_row == 21
        assert window.end_row == 25
        assert window.has_previous
        assert not window.has_next

    def test_empty(self):
        window = TableWindow(page=1, page_size=10, total_count=0)
        assert window.total_pages == 1
        assert window.start_row == 0
        assert window.get_display_range() == ""
        assert not window.has_next

    def test_large_numbers_formatted(self):
        window = TableWindow(page=2, page_size=1000, total_count=12345)
        assert window.get_display_range() == "Showing 1,001 - 2,000 of 12,345"


class TestPaginateFrame:
    """Tests for client-side slicing."""

    def test_slices_page(self):
        frame = pd.DataFrame({"n": range(25)})
        assert paginate_frame(frame, page=3, page_size=10)["n"].tolist() == list(range(20, 25))

    def test_out_of_range_is_empty(self):
        frame = pd.DataFrame({"n": range(5)})
        assert paginate_frame(frame, page=4, page_size=10).empty

    def test_page_below_one(self):
        frame = pd.DataFrame({"n": range(5)})
        assert paginate_frame(frame, page=0, page_size=2)["n"].tolist() == [0, 1]


class TestApplyFormatters:
    """Tests for per-column formatting."""

    def test_formats_copy(self):
        frame = pd.DataFrame({"title": ["a"], "n": [1]})
        formatted = apply_formatters(frame, {"n": lambda v: f"#{v}", "missing": str})
        assert formatted["n"].tolist() == ["#1"]
        assert frame["n"].tolist() == [1]

    def test_no_formatters(self):
        frame = pd.DataFrame({"n": [1]})
        assert apply_formatters(frame, None) is frame


class TestWidgetValues:
    """Tests for converting widget values to filter values."""

    def test_date_to_iso(self):
        field = FilterFieldConfig(name="from", label="From", type="date")
        assert widget_to_filter_value(field, date(2025, 1, 31)) == "2025-01-31"
        assert widget_to_filter_value(field, None) == ""

    def test_checkbox(self):
        field = FilterFieldConfig(name="done", label="Done", type="checkbox")
        assert widget_to_filter_value(field, True) is True
        assert widget_to_filter_value(field, None) is False

    def test_select_none_is_empty(self):
        field = FilterFieldConfig(name="status", label="Status", type="select")
        assert widget_to_filter_value(field, None) == ""
        assert widget_to_filter_value(field, "open") == "open"
