"""Declarative filter field descriptors.

A list of ``FilterFieldConfig`` is what the filter form renders and what
``GenericFilter`` reconciles. Each ``name`` doubles as the URL query parameter
that stores the field's committed value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .query_params import parse_bool_param

FilterValue = Union[str, bool]


class FilterFieldType(str, Enum):
    """Kinds of filter control."""
    TEXT = "text"
    SELECT = "select"
    CHECKBOX = "checkbox"
    DATE = "date"


@dataclass(frozen=True)
class FilterFieldOption:
    """Single selectable option for a select field."""
    value: str
    label: str


@dataclass(frozen=True)
class FilterFieldConfig:
    """Static description of one filter control."""
    name: str
    label: str
    type: FilterFieldType = FilterFieldType.TEXT
    placeholder: Optional[str] = None
    options: Tuple[FilterFieldOption, ...] = field(default_factory=tuple)
    disabled: bool = False
    default_value: Optional[FilterValue] = None

    def __post_init__(self):
        # Accept plain strings and lists from callers building configs by hand
        object.__setattr__(self, "type", FilterFieldType(self.type))
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def is_checkbox(self) -> bool:
        return self.type is FilterFieldType.CHECKBOX

    def empty_value(self) -> FilterValue:
        """Value shown when no source supplies one."""
        return False if self.is_checkbox else ""

    def parse_param(self, raw: str) -> FilterValue:
        """Re-interpret a URL parameter according to this field's kind."""
        if self.is_checkbox:
            return parse_bool_param(raw)
        return raw
