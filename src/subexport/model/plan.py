"""
Resolution plan: the ordered bindings produced by one import request.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .values import Generator, OutputSlot


@dataclass(frozen=True)
class PlanEntry:
    """A single routine to generate and install."""

    name: str
    generator: Generator | None
    args: Mapping[str, Any]
    collection: Mapping[str, Any]
    destination: str | OutputSlot
    into: Any = None

    def __str__(self) -> str:
        dest = self.destination if isinstance(self.destination, str) else "<slot>"
        gen = "" if self.generator is None else " (generated)"
        return f"{self.name} -> {dest}{gen}"


@dataclass(frozen=True)
class ResolutionPlan:
    """
    The outcome of resolving one request against an exporter configuration.

    Plans are computed from scratch on every import and are never cached.
    """

    requester: Any
    entries: tuple[PlanEntry, ...] = ()
    collection: Mapping[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> list[str]:
        """Export names in installation order."""
        return [entry.name for entry in self.entries]

    def destinations(self) -> list[str | OutputSlot]:
        return [entry.destination for entry in self.entries]

    def __str__(self) -> str:
        return "\n".join(str(entry) for entry in self.entries)
