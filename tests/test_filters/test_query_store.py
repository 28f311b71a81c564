"""Tests for the shared query-parameter stores."""

from todo_explorer.filters import InMemoryQueryStore, StreamlitQueryStore


class RecordingParams(dict):
    """Dict that logs item writes and deletes, standing in for st.query_params."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = []

    def __setitem__(self, key, value):
        self.writes.append(("set", key, value))
        super().__setitem__(key, value)

    def __delitem__(self, key):
        self.writes.append(("del", key))
        super().__delitem__(key)


class TestInMemoryQueryStore:
    """Tests for InMemoryQueryStore."""

    def test_initial_query_string(self):
        store = InMemoryQueryStore("?q=milk&page=2", pathname="/todos")
        assert store.snapshot() == {"q": "milk", "page": "2"}
        assert store.url == "/todos?q=milk&page=2"

    def test_url_without_params(self):
        assert InMemoryQueryStore(pathname="/todos").url == "/todos"

    def test_get_set_delete(self):
        store = InMemoryQueryStore()
        store.set("q", "milk")
        store.set("done", True)
        assert store.get("q") == "milk"
        assert store.get("done") == "true"
        assert store.has("q")

        store.delete("q")
        assert not store.has("q")
        assert store.get("q") is None

    def test_snapshot_is_a_copy(self):
        store = InMemoryQueryStore("?q=milk")
        snapshot = store.snapshot()
        snapshot["q"] = "bread"
        assert store.get("q") == "milk"

    def test_replace_is_one_navigation(self):
        store = InMemoryQueryStore()

        def apply(params):
            params["a"] = "1"
            params["b"] = "2"

        store.replace(apply)
        assert store.history == ["a=1&b=2"]

    def test_listeners_only_on_change(self):
        store = InMemoryQueryStore("?q=milk")
        seen = []
        store.subscribe(seen.append)

        store.set("q", "milk")
        store.set("q", "bread")

        assert seen == [{"q": "bread"}]

    def test_unsubscribe(self):
        store = InMemoryQueryStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        store.set("q", "milk")
        assert seen == []

    def test_navigate_replaces_everything(self):
        store = InMemoryQueryStore("?q=milk&page=2")
        store.navigate("?status=done")
        assert store.snapshot() == {"status": "done"}


class TestStreamlitQueryStore:
    """Tests for StreamlitQueryStore over a plain mapping."""

    def test_snapshot(self):
        store = StreamlitQueryStore(RecordingParams({"q": "milk"}))
        assert store.snapshot() == {"q": "milk"}

    def test_only_changed_keys_written(self):
        params = RecordingParams({"q": "milk", "page": "2", "tab": "all"})
        store = StreamlitQueryStore(params)

        def apply(p):
            p["page"] = "3"
            p.pop("tab")

        store.replace(apply)

        assert params.writes == [("del", "tab"), ("set", "page", "3")]
        assert dict(params) == {"q": "milk", "page": "3"}

    def test_listeners(self):
        store = StreamlitQueryStore(RecordingParams())
        seen = []
        store.subscribe(seen.append)
        store.set("q", "milk")
        assert seen == [{"q": "milk"}]
