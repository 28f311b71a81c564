"""Tests for the query-string codec."""

from todo_explorer.filters import (
    FilterFieldConfig,
    add_query_params,
    build_query_params,
    build_query_string,
    convert_filters_to_query_params,
    is_empty_value,
    parse_bool_param,
    parse_number_param,
    parse_query_params,
    stringify_value,
)


class TestEncode:
    """Tests for building query strings."""

    def test_empty_values_are_dropped(self):
        """Empty string, False and None never reach the query string."""
        assert build_query_string({"a": "", "b": False, "c": "x", "d": None}) == "c=x"

    def test_true_is_encoded(self):
        assert build_query_params({"done": True}) == {"done": "true"}

    def test_numbers_are_stringified(self):
        assert build_query_params({"page": 2, "ratio": 0.5, "whole": 3.0}) == {
            "page": "2",
            "ratio": "0.5",
            "whole": "3",
        }

    def test_insertion_order_is_kept(self):
        assert build_query_string({"z": "1", "a": "2"}) == "z=1&a=2"

    def test_values_are_url_encoded(self):
        assert build_query_string({"q": "milk & bread"}) == "q=milk+%26+bread"

    def test_zero_is_not_empty(self):
        assert build_query_params({"page": 0}) == {"page": "0"}


class TestAddQueryParams:
    """Tests for appending params to a URL."""

    def test_adds_question_mark(self):
        assert add_query_params("/api/todos", {"q": "milk", "page": 1}) == "/api/todos?q=milk&page=1"

    def test_appends_to_existing_query(self):
        assert add_query_params("/api/todos?page=1", {"q": "milk"}) == "/api/todos?page=1&q=milk"

    def test_no_params_leaves_url(self):
        assert add_query_params("/api/todos", {"q": ""}) == "/api/todos"


class TestDecode:
    """Tests for parsing query strings."""

    def test_values_stay_strings(self):
        assert parse_query_params("page=1&done=true") == {"page": "1", "done": "true"}

    def test_leading_question_mark(self):
        assert parse_query_params("?q=milk") == {"q": "milk"}

    def test_last_repeated_key_wins(self):
        assert parse_query_params("a=1&a=2") == {"a": "2"}

    def test_blank_values_kept(self):
        assert parse_query_params("a=&b=1") == {"a": "", "b": "1"}

    def test_none_and_empty(self):
        assert parse_query_params(None) == {}
        assert parse_query_params("") == {}

    def test_mapping_with_lists(self):
        assert parse_query_params({"a": ["1", "2"], "b": "x", "c": []}) == {"a": "2", "b": "x"}

    def test_mapping_with_scalars(self):
        assert parse_query_params({"page": 2, "done": True}) == {"page": "2", "done": "true"}


class TestRoundTrip:
    """Decoding an encoded mapping reproduces its non-empty entries."""

    def test_round_trip_with_field_kinds(self):
        fields = {
            "q": FilterFieldConfig(name="q", label="Search"),
            "done": FilterFieldConfig(name="done", label="Done", type="checkbox"),
        }
        original = {"q": "milk", "done": True}

        decoded = parse_query_params(build_query_string(original))
        assert decoded == {"q": "milk", "done": "true"}

        reinterpreted = {key: fields[key].parse_param(raw) for key, raw in decoded.items()}
        assert reinterpreted == original


class TestHelpers:
    """Tests for scalar helpers."""

    def test_is_empty_value(self):
        assert is_empty_value(None)
        assert is_empty_value("")
        assert is_empty_value(False)
        assert not is_empty_value(0)
        assert not is_empty_value("0")
        assert not is_empty_value(True)

    def test_stringify_bool(self):
        assert stringify_value(False) == "false"

    def test_parse_bool_param(self):
        assert parse_bool_param("true") is True
        assert parse_bool_param("false") is False
        assert parse_bool_param("1") is False
        assert parse_bool_param(None) is False

    def test_parse_number_param(self):
        assert parse_number_param("12") == 12
        assert parse_number_param("1.5") == 1.5
        assert parse_number_param("abc") == "abc"

    def test_convert_filters_skips_non_scalars(self):
        filters = {"q": "milk", "limit": 3, "done": True, "tags": ["a"], "status": ""}
        assert convert_filters_to_query_params(filters) == {
            "q": "milk",
            "limit": "3",
            "done": "true",
        }
