"""
Ready-made generators for common export patterns.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .errors import ResolutionError
from .exporter import Exporter
from .model import Generator, GroupGenerator

LIKE = "-like"


def curry_method(method_name: str | None = None) -> Generator:
    """
    Build a generator that exports a method of the requester as a function.

    The exported function calls ``getattr(requester, method_name)`` on every
    call, so it follows later rebinding on the requester. Without a
    ``method_name`` the export's own name is used::

        setup_exporter({"exports": {"connect": curry_method()}}, into=Database)
        Database.import_("connect")   # connect(...) == Database.connect(...)
    """

    def generator(
        requester: Any, name: str, args: Mapping[str, Any], collection: Mapping[str, Any]  # noqa: ARG001
    ) -> Callable[..., Any]:
        target = method_name or name

        def curried(*call_args: Any, **call_kwargs: Any) -> Any:
            return getattr(requester, target)(*call_args, **call_kwargs)

        curried.__name__ = target
        return curried

    return generator


def merge_defaults(collector: str, generator: Generator) -> Generator:
    """
    Wrap a generator so that a collector's mapping supplies default args.

    Args given on the export itself win over the collected defaults.
    """

    def merged(
        requester: Any, name: str, args: Mapping[str, Any], collection: Mapping[str, Any]
    ) -> Callable[..., Any]:
        if collector in collection:
            args = {**(collection[collector] or {}), **args}
        return generator(requester, name, args, collection)

    return merged


def _is_import_routine(routine: Any) -> bool:
    return isinstance(routine, functools.partial) and isinstance(routine.func, Exporter)


def like(names: Iterable[str] | None = None) -> GroupGenerator:
    """
    Build a group generator selecting routines by regular expression.

    The group is requested with ``{"-like": pattern}`` (or a list of
    patterns); every candidate name matching any pattern is exported. Other
    options such as ``-prefix`` apply as usual. Candidates are ``names`` or,
    when omitted, the requester's public callable attributes, leaving out
    import routines bound by :func:`setup_exporter`.
    """
    candidates = list(names) if names is not None else None

    def generator(
        requester: Any, group: str, args: Any, collection: Mapping[str, Any]  # noqa: ARG001
    ) -> dict[str, Callable[..., Any]]:
        raw = args.get(LIKE) if isinstance(args, Mapping) else None
        if raw is None:
            raise ResolutionError(f'group "{group}" requires a {LIKE} pattern')
        patterns = [re.compile(p) for p in ([raw] if isinstance(raw, (str, re.Pattern)) else raw)]

        pool = candidates if candidates is not None else [n for n in dir(requester) if not n.startswith("_")]
        selected: dict[str, Callable[..., Any]] = {}
        for name in pool:
            if any(p.search(name) for p in patterns):
                routine = getattr(requester, name, None)
                if callable(routine) and not _is_import_routine(routine):
                    selected[name] = routine
        return selected

    return generator
