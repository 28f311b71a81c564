"""Tests for the console's filter and pagination wiring."""

from todo_explorer.app.main import FILTER_STATE_KEY, filters_from_url, handle_filter_change
from todo_explorer.filters import GenericFilter, InMemoryQueryStore, PaginationController


def mount(fields, query, auto_submit=False):
    """Mount a filter the way the console does: seed the state from the URL first."""
    store = InMemoryQueryStore(query)
    pagination = PaginationController(store)
    state = {FILTER_STATE_KEY: filters_from_url(fields, store.snapshot())}
    generic_filter = GenericFilter(
        fields,
        store,
        on_filter_change=handle_filter_change(pagination, state),
        auto_submit=auto_submit,
    )
    return generic_filter, store, pagination, state


class TestFiltersFromUrl:
    """Tests for reading the mount-time filters from the URL."""

    def test_keeps_only_field_values(self, todo_fields):
        params = {"q": "milk", "has_description": "false", "page": "3"}
        assert filters_from_url(todo_fields, params) == {"q": "milk"}

    def test_checkbox_parsed(self, todo_fields):
        assert filters_from_url(todo_fields, {"has_description": "true"}) == {"has_description": True}


class TestFilterChangeResetsPage:
    """Tests for going back to page 1 when the filters change."""

    def test_first_search_in_new_session(self, todo_fields):
        generic_filter, store, pagination, state = mount(todo_fields, "page=3")

        generic_filter.handle_field_change("q", "milk")
        generic_filter.handle_submit()

        assert store.snapshot() == {"q": "milk", "page": "1"}
        assert pagination.page == 1
        assert state[FILTER_STATE_KEY] == {"q": "milk"}

    def test_first_search_without_seeded_state(self, todo_fields):
        store = InMemoryQueryStore("page=3")
        pagination = PaginationController(store)
        state = {}
        generic_filter = GenericFilter(
            todo_fields, store, on_filter_change=handle_filter_change(pagination, state)
        )

        generic_filter.handle_field_change("q", "milk")
        generic_filter.handle_submit()

        assert pagination.page == 1

    def test_mount_with_url_filters_keeps_page(self, todo_fields):
        _, store, pagination, state = mount(todo_fields, "q=milk&page=3")

        assert pagination.page == 3
        assert state[FILTER_STATE_KEY] == {"q": "milk"}

    def test_later_change_resets_page(self, todo_fields):
        generic_filter, store, pagination, _ = mount(todo_fields, "q=milk&page=3")

        generic_filter.handle_field_change("q", "bread")
        generic_filter.handle_submit()

        assert store.snapshot() == {"q": "bread", "page": "1"}

    def test_same_filters_keep_page(self, todo_fields):
        generic_filter, _, pagination, _ = mount(todo_fields, "q=milk&page=2", auto_submit=True)

        generic_filter.handle_submit()

        assert pagination.page == 2

    def test_reset_goes_to_page_one(self, todo_fields):
        generic_filter, store, pagination, state = mount(todo_fields, "q=milk&page=4")

        generic_filter.handle_reset()

        assert pagination.page == 1
        assert state[FILTER_STATE_KEY] == {}
        assert "q" not in store.snapshot()
