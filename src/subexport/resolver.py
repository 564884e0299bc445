"""
Resolution of import requests into plans.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .collectors import collect_collections
from .config import ExporterConfig
from .errors import ConfigurationError, ResolutionError, UnknownExportError
from .groups import GroupExpander
from .model import Generator, OptList, PlanEntry, ResolutionPlan, ValueKind, kind_of
from .names import AS, DEFAULT_GROUP, excluded_name, group_ref, is_control_key
from .optlist import canonicalize_opt_list

logger = logging.getLogger(__name__)


def _constant(routine: Callable[..., Any]) -> Generator:
    def generator(
        requester: Any, name: str, args: Mapping[str, Any], collection: Mapping[str, Any]  # noqa: ARG001
    ) -> Callable[..., Any]:
        return routine

    return generator


class ExportResolver:
    """
    Turns import requests into resolution plans for one configuration.

    The resolver keeps no state between calls; every call to :meth:`resolve`
    builds its collection, merge contexts and seen set from scratch.
    """

    def __init__(self, config: ExporterConfig):
        self._config = config

    @property
    def config(self) -> ExporterConfig:
        return self._config

    def resolve(self, requester: Any, request: Iterable[Any] | None = None, into: Any = None) -> ResolutionPlan:
        """
        Resolve a request into a plan without installing anything.

        Args:
            requester: The exporting namespace; passed to every generator
            request: The import arguments, in any opt list shape
            into: The namespace the plan's routines are meant for

        Returns:
            A ResolutionPlan with one entry per routine to install

        Raises:
            ResolutionError: If the request cannot be satisfied
        """
        try:
            entries = canonicalize_opt_list(request, "import")
        except ConfigurationError as e:
            raise ResolutionError(str(e)) from e

        collection = MappingProxyType(collect_collections(self._config, entries))

        if not entries:
            entries = [(group_ref(DEFAULT_GROUP), None)]

        expanded = GroupExpander(self._config, requester, collection).expand(entries)
        remaining = self._apply_exclusions(expanded)

        plan_entries = tuple(
            self._plan_entry(requester, name, value, collection, into) for name, value in remaining
        )
        logger.debug("Resolved %d routine(s) for import from %s", len(plan_entries), requester)
        return ResolutionPlan(requester, plan_entries, collection)

    @staticmethod
    def _apply_exclusions(entries: OptList) -> OptList:
        excluded = {target for name, _ in entries if (target := excluded_name(name)) is not None}
        if excluded:
            logger.debug("Excluding %s", sorted(excluded))
        return [
            (name, value)
            for name, value in entries
            if excluded_name(name) is None and name not in excluded
        ]

    def _plan_entry(
        self,
        requester: Any,
        name: str,
        value: Any,
        collection: Mapping[str, Any],
        into: Any,
    ) -> PlanEntry:
        kind = kind_of(value)

        if kind is ValueKind.CALLABLE:
            return PlanEntry(name, _constant(value), {}, collection, name, into)

        if name not in self._config.exports:
            raise UnknownExportError(name, requester)

        if value is not None and kind is not ValueKind.MAPPING:
            found = kind.value if kind is not None else type(value).__name__
            raise ResolutionError(f'options for "{name}" must be a mapping, got a {found}')

        options = dict(value) if value is not None else {}
        destination = options.pop(AS, name)
        args = {key: arg for key, arg in options.items() if not is_control_key(key)}

        return PlanEntry(name, self._config.exports[name], args, collection, destination, into)
