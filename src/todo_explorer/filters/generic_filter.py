"""URL-synchronized filter state.

``GenericFilter`` reconciles three sources of filter values (URL query
parameters, caller defaults and, in explicit-submit mode, uncommitted local
edits) into one authoritative mapping and tells the caller about it.

Two modes:

* ``AutoSubmitMode``: every edit is written to the URL straight away and the
  caller is notified on each change (live filtering).
* ``ExplicitSubmitMode``: edits collect in a local map and only reach the URL
  when ``handle_submit`` is called (search forms).

Value priority for a field:

    local edit (explicit mode only) > URL parameter > caller default
        > field default > empty value

The mapping handed to ``on_filter_change`` never contains ``""`` or
``False``, and the same mapping is never delivered twice in a row.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from todo_explorer.config.logging_config import get_logger

from .fields import FilterFieldConfig, FilterValue
from .query_params import QueryValue, build_query_params, is_empty_value, stringify_value
from .query_store import Params, QueryStateStore

logger = get_logger("filters.generic_filter")

FilterValueMap = Dict[str, FilterValue]
FilterChangeCallback = Callable[[FilterValueMap], None]
FieldChangeCallback = Callable[[str, FilterValue], None]
FilterListener = Callable[[FilterValueMap], None]


def shallow_equal(
    a: Optional[Mapping[str, object]],
    b: Optional[Mapping[str, object]],
) -> bool:
    """Key/value equality for flat mappings of primitives."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(key in b and a[key] == b[key] for key in a)


@dataclass(frozen=True)
class AutoSubmitMode:
    """Edits are committed to the URL immediately."""


@dataclass
class ExplicitSubmitMode:
    """Edits wait in ``local_values`` until submitted."""
    local_values: FilterValueMap = field(default_factory=dict)


FilterMode = Union[AutoSubmitMode, ExplicitSubmitMode]


class GenericFilter:
    """
    Filter state reconciler for a fixed list of fields.

    Creating the instance counts as mounting it: the change-notification
    effect runs once straight away. Afterwards it runs whenever the store,
    the caller defaults or the local edits change, and on every ``sync()``
    (a re-render).

    Args:
        fields: Field descriptors; each name is also a URL parameter.
        store: Shared query-parameter store.
        on_filter_change: Receives the authoritative filter mapping.
        on_field_change: Optional hook receiving every raw ``(name, value)`` edit.
        auto_submit: Selects ``AutoSubmitMode`` instead of ``ExplicitSubmitMode``.
        default_values: Caller defaults, overridden by URL parameters.
    """

    def __init__(
        self,
        fields: Sequence[FilterFieldConfig],
        store: QueryStateStore,
        on_filter_change: FilterChangeCallback,
        on_field_change: Optional[FieldChangeCallback] = None,
        auto_submit: bool = False,
        default_values: Optional[Mapping[str, FilterValue]] = None,
    ):
        self.fields: Tuple[FilterFieldConfig, ...] = tuple(fields)
        self.store = store
        self.on_filter_change = on_filter_change
        self.on_field_change = on_field_change
        self.mode: FilterMode = AutoSubmitMode() if auto_submit else ExplicitSubmitMode()

        self._default_values: FilterValueMap = dict(default_values or {})
        self._listeners: List[FilterListener] = []
        self._is_first_mount = True
        self._last_delivered: Optional[FilterValueMap] = None
        self._last_deps: Optional[Tuple[FilterValueMap, Params]] = None
        self._seed_source: Optional[Tuple[Params, FilterValueMap]] = None
        self._suspended = False

        self._unsubscribe_store = store.subscribe(self._on_store_change)
        self._seed_local_values()
        self.sync()

    # ── State accessors ──────────────────────────────────────

    @property
    def auto_submit(self) -> bool:
        return isinstance(self.mode, AutoSubmitMode)

    @property
    def local_values(self) -> FilterValueMap:
        """Uncommitted edits (always empty in auto-submit mode)."""
        if isinstance(self.mode, ExplicitSubmitMode):
            return dict(self.mode.local_values)
        return {}

    @property
    def default_values(self) -> FilterValueMap:
        return dict(self._default_values)

    @property
    def values(self) -> FilterValueMap:
        """Displayed value of every field, empty ones included."""
        return {f.name: self.get_field_value(f) for f in self.fields}

    def field_params(self, params: Optional[Params] = None) -> Params:
        """URL parameters that belong to this filter's fields."""
        if params is None:
            params = self.store.snapshot()
        return {f.name: params[f.name] for f in self.fields if f.name in params}

    def has_filter_params(self) -> bool:
        return bool(self.field_params())

    def get_field_value(self, field: FilterFieldConfig) -> FilterValue:
        """Resolve the value a field should display."""
        if isinstance(self.mode, ExplicitSubmitMode) and field.name in self.mode.local_values:
            return self.mode.local_values[field.name]

        raw = self.store.get(field.name)
        if raw is not None:
            return field.parse_param(raw)

        default = self._default_values.get(field.name)
        if default is not None:
            return default

        if field.default_value is not None:
            return field.default_value
        return field.empty_value()

    def compute_current_filters(self) -> FilterValueMap:
        """Build the authoritative filter mapping from the current state."""
        filters: FilterValueMap = {}

        if isinstance(self.mode, ExplicitSubmitMode):
            url_values = self.field_params()
            if url_values:
                # Once any field is in the URL, the URL is the last committed search
                for f in self.fields:
                    if f.name in url_values:
                        value = f.parse_param(url_values[f.name])
                        if not is_empty_value(value):
                            filters[f.name] = value
            else:
                for name, value in self.mode.local_values.items():
                    if not is_empty_value(value):
                        filters[name] = value
            return filters

        for f in self.fields:
            value = self.get_field_value(f)
            if not is_empty_value(value):
                filters[f.name] = value
        return filters

    # ── Event handlers ───────────────────────────────────────

    def handle_field_change(self, name: str, value: FilterValue) -> None:
        """Record an edit to one field."""
        if isinstance(self.mode, AutoSubmitMode):
            def apply(params: Params) -> None:
                if is_empty_value(value):
                    params.pop(name, None)
                else:
                    params[name] = stringify_value(value)

            self.store.replace(apply)
        else:
            local = dict(self.mode.local_values)
            if is_empty_value(value):
                local.pop(name, None)
            else:
                local[name] = value
            self.mode.local_values = local
            self._state_changed()

        if self.on_field_change is not None:
            self.on_field_change(name, value)

    def handle_submit(self) -> None:
        """Commit local edits to the URL (explicit mode) or re-announce the filters."""
        if isinstance(self.mode, ExplicitSubmitMode):
            local = dict(self.mode.local_values)

            def apply(params: Params) -> None:
                for f in self.fields:
                    params.pop(f.name, None)
                for key, value in local.items():
                    if not is_empty_value(value):
                        params[key] = stringify_value(value)

            self.store.replace(apply)
        else:
            self._deliver(self.compute_current_filters())

    def handle_reset(self) -> None:
        """Drop local edits and every field parameter, then announce ``{}``."""
        if isinstance(self.mode, ExplicitSubmitMode):
            self.mode.local_values = {}

        def apply(params: Params) -> None:
            for f in self.fields:
                params.pop(f.name, None)

        self._suspended = True
        try:
            self.store.replace(apply)
        finally:
            self._suspended = False

        self._seed_source = (self.field_params(), dict(self._default_values))
        self._deliver({})
        self._state_changed()

    def set_default_values(self, default_values: Optional[Mapping[str, FilterValue]]) -> None:
        """Replace the caller defaults (a prop change)."""
        values = dict(default_values or {})
        if values == self._default_values:
            return
        self._default_values = values
        self._seed_local_values()
        self._state_changed()

    # ── Reactive plumbing ────────────────────────────────────

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """
        Observe every recomputation of the filter mapping.

        Unlike ``on_filter_change`` the listener is not de-duplicated: it is
        called whenever the URL, the defaults or the local edits change.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sync(self) -> FilterValueMap:
        """
        Re-render: pick up external URL changes and run the notification effect.

        Returns:
            The current filter mapping.
        """
        self._seed_local_values()
        current = self.compute_current_filters()
        self._run_effect(current)
        return current

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe_store()
        self._listeners.clear()

    def _on_store_change(self, params: Params) -> None:
        if self._suspended:
            return
        self._seed_local_values()
        self._state_changed()

    def _state_changed(self) -> None:
        current = self.compute_current_filters()
        for listener in list(self._listeners):
            listener(dict(current))
        self._run_effect(current)

    def _seed_local_values(self) -> None:
        """Rebuild the local map from defaults and URL when either has moved."""
        if not isinstance(self.mode, ExplicitSubmitMode):
            return

        url_values = self.field_params()
        source = (url_values, dict(self._default_values))
        if source == self._seed_source:
            return
        self._seed_source = source

        seeded: FilterValueMap = {
            key: value
            for key, value in self._default_values.items()
            if not is_empty_value(value)
        }
        for f in self.fields:
            if f.name not in url_values:
                continue
            value = f.parse_param(url_values[f.name])
            if is_empty_value(value):
                seeded.pop(f.name, None)
            else:
                seeded[f.name] = value

        self.mode.local_values = seeded

    def _run_effect(self, current: FilterValueMap) -> None:
        deps = (current, self.store.snapshot())
        if deps == self._last_deps:
            return
        self._last_deps = deps

        if self._is_first_mount:
            self._is_first_mount = False
            if not current:
                return

        if not (self.auto_submit or self.has_filter_params()):
            return

        if shallow_equal(self._last_delivered, current):
            return
        self._deliver(current)

    def _deliver(self, filters: FilterValueMap) -> None:
        delivered = dict(filters)
        self._last_delivered = delivered
        logger.debug(f"Filter change delivered: {delivered}")
        self.on_filter_change(dict(delivered))


def convert_filters_to_query_params(filters: Mapping[str, object]) -> Dict[str, str]:
    """Encode a filter mapping as query parameters, skipping non-scalar values."""
    params: Dict[str, QueryValue] = {}
    for key, value in filters.items():
        if isinstance(value, (str, int, float, bool)):
            params[key] = value
    return build_query_params(params)
