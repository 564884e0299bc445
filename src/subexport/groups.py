"""
Recursive expansion of group references into plain export references.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import ExporterConfig
from .errors import GroupGeneratorError, ResolutionError, UnknownGroupError
from .model import OptList, ValueKind, kind_of
from .names import AS, PREFIX, SUFFIX, excluded_name, group_name

logger = logging.getLogger(__name__)

MergeContext = Mapping[str, Any]

_EMPTY: MergeContext = {}


class GroupExpander:
    """
    Expands group references for one import request.

    A group reference (``-name`` or ``:name``) is replaced in place by the
    members of the group, depth first, so ``[x, -G, y]`` with ``G = [a, b]``
    becomes ``[x, a, b, y]``. Options given on a group reference flow down to
    every member: prefixes accumulate outside-in, suffixes inside-out, and any
    other key is inherited unless the member sets it itself.

    Each group is expanded at most once per request. A group that shows up
    again, through a cycle or a repeated reference, contributes nothing.

    An expander holds per-request state and must not be reused.
    """

    def __init__(self, config: ExporterConfig, requester: Any, collection: Mapping[str, Any]):
        self._config = config
        self._requester = requester
        self._collection = collection
        self._seen: set[str] = set()

    def expand(self, entries: OptList) -> OptList:
        """Return a new opt list in which no group references remain."""
        return self._expand_list(entries, _EMPTY)

    def _expand_list(self, entries: OptList, merge: MergeContext) -> OptList:
        result = list(entries)

        # Walk backwards so splicing never shifts an index still to be visited.
        for i in reversed(range(len(entries))):
            name, value = entries[i]
            group = group_name(name)
            if group is not None:
                result[i : i + 1] = self._expand_group(group, value, merge)
            elif merge and excluded_name(name) is None:
                result[i] = self._apply_merge(name, value, merge)

        return result

    def _expand_group(self, group: str, args: Any, inherited: MergeContext) -> OptList:
        if group in self._seen:
            logger.debug("Group %s already expanded, skipping", group)
            return []

        definition = self._config.groups.get(group)
        if definition is None:
            raise UnknownGroupError(group, self._requester)

        self._seen.add(group)
        merge = self._merge(group, inherited, args)

        if callable(definition):
            produced = definition(self._requester, group, args, self._collection)
            if not isinstance(produced, Mapping):
                raise GroupGeneratorError(group, produced)
            members: OptList = list(produced.items())
            logger.debug("Group generator %s produced %s", group, list(produced))
        else:
            members = definition

        return self._expand_list(members, merge)

    @staticmethod
    def _merge(group: str, inherited: MergeContext, args: Any) -> MergeContext:
        if not isinstance(args, Mapping):
            return inherited

        for key in (PREFIX, SUFFIX):
            affix = args.get(key)
            if affix is not None and not isinstance(affix, str):
                raise ResolutionError(f'{key} for group "{group}" must be a string, got {affix!r}')

        prefix = inherited.get(PREFIX, "") + (args.get(PREFIX) or "")
        suffix = (args.get(SUFFIX) or "") + inherited.get(SUFFIX, "")

        merged = {**inherited, **args}
        merged.pop(PREFIX, None)
        merged.pop(SUFFIX, None)
        if prefix:
            merged[PREFIX] = prefix
        if suffix:
            merged[SUFFIX] = suffix
        return merged

    @staticmethod
    def _apply_merge(name: str, value: Any, merge: MergeContext) -> tuple[str, Any]:
        prefix = merge.get(PREFIX, "")
        suffix = merge.get(SUFFIX, "")

        kind = kind_of(value)
        if kind is ValueKind.CALLABLE:
            # Routines from a group generator can only be renamed through their name.
            return f"{prefix}{name}{suffix}", value
        if value is not None and kind is not ValueKind.MAPPING:
            return name, value

        options = dict(value) if value is not None else {}
        explicit = options.get(AS)
        destination = explicit if explicit else f"{prefix}{name}{suffix}"

        inherited = {k: v for k, v in merge.items() if k not in (AS, PREFIX, SUFFIX)}
        return name, {**inherited, **options, AS: destination}
