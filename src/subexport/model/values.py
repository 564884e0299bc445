"""
Option values and their kinds.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

# (requester, name, args, collection) -> callable
Generator = Callable[[Any, str, Mapping[str, Any], Mapping[str, Any]], Callable[..., Any]]

# (requester, group_name, args, collection) -> {name: callable}
GroupGenerator = Callable[[Any, str, Any, Mapping[str, Any]], Mapping[str, Callable[..., Any]]]

Validator = Callable[[Any], bool]

OptList = list[tuple[str, Any]]


class ValueKind(Enum):
    """Structural kinds an option value can have."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    SLOT = "slot"


@dataclass(eq=False)
class OutputSlot:
    """
    A caller-owned cell that receives a generated routine.

    Used as an ``-as`` target when the importer wants the routine handed back
    instead of bound under a name.
    """

    value: Any = None

    @property
    def filled(self) -> bool:
        return self.value is not None

    def set(self, value: Any) -> None:
        self.value = value


def kind_of(value: Any) -> ValueKind | None:
    """Return the kind of a structured value, or None for scalars."""
    if isinstance(value, OutputSlot):
        return ValueKind.SLOT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.CALLABLE
    return None
