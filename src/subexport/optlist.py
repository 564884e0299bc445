"""
Normalization of loosely structured option lists.

An opt list is how exports, groups, collectors and import requests are
written down. Any of these shapes is accepted::

    None                                  -> []
    {"a": None, "b": {"-as": "x"}}        -> [("a", None), ("b", {"-as": "x"})]
    ["a", None, "b", {"-as": "x"}, "c"]   -> [("a", None), ("b", {...}), ("c", None)]

In the sequence form every name may be followed by a structured value (a
mapping, a non-string sequence, a callable or an OutputSlot) which becomes
its options. A ``None`` following a name is swallowed and means "no options".
Scalars never count as options.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import ConfigurationError, DuplicateNameError, InvalidOptionKindError
from .model import OptList, ValueKind, kind_of


def _allowed_kinds(must_be: ValueKind | Iterable[ValueKind] | None) -> frozenset[ValueKind] | None:
    if must_be is None:
        return None
    if isinstance(must_be, ValueKind):
        return frozenset((must_be,))
    return frozenset(must_be)


def _where(moniker: str | None) -> str:
    return f" in {moniker} opt list" if moniker else ""


def _check_kind(value: Any, allowed: frozenset[ValueKind] | None, moniker: str | None) -> None:
    if allowed is None or value is None:
        return
    kind = kind_of(value)
    if kind not in allowed:
        actual = kind.value if kind is not None else type(value).__name__
        raise InvalidOptionKindError(actual, moniker)


def canonicalize_opt_list(
    opt_list: Mapping[str, Any] | Iterable[Any] | None,
    moniker: str | None = None,
    require_unique: bool = False,
    must_be: ValueKind | Iterable[ValueKind] | None = None,
) -> OptList:
    """
    Turn an opt list into a list of ``(name, options)`` pairs.

    Args:
        opt_list: None, a name -> options mapping, or a flat sequence of names
                  each optionally followed by its options
        moniker: Label for the opt list, used in error messages
        require_unique: Reject names that appear more than once
        must_be: Kind (or kinds) every non-None options value must have

    Returns:
        A new list; the input is never modified.

    Raises:
        DuplicateNameError: If require_unique is set and a name repeats
        InvalidOptionKindError: If a value violates must_be
        ConfigurationError: If the opt list is a bare string or holds a non-string name
    """
    if not opt_list:
        return []

    allowed = _allowed_kinds(must_be)
    result: OptList = []

    if isinstance(opt_list, Mapping):
        for name, value in opt_list.items():
            options = value if kind_of(value) is not None else None
            _check_kind(options, allowed, moniker)
            result.append((name, options))
    elif isinstance(opt_list, (str, bytes)):
        raise ConfigurationError(f"expected an opt list{_where(moniker)}, got the bare string {opt_list!r}")
    else:
        items = list(opt_list)
        i = 0
        while i < len(items):
            name = items[i]
            if not isinstance(name, str):
                raise ConfigurationError(f"expected a name{_where(moniker)}, got {name!r}")

            options = None
            if i + 1 < len(items):
                following = items[i + 1]
                if following is None:
                    i += 1
                elif kind_of(following) is not None:
                    options = following
                    i += 1

            _check_kind(options, allowed, moniker)
            result.append((name, options))
            i += 1

    if require_unique:
        seen: set[str] = set()
        for name, _ in result:
            if name in seen:
                raise DuplicateNameError(name)
            seen.add(name)

    return result


def expand_opt_list(
    opt_list: Mapping[str, Any] | Iterable[Any] | None,
    moniker: str | None = None,
    must_be: ValueKind | Iterable[ValueKind] | None = None,
) -> dict[str, Any]:
    """Like canonicalize_opt_list, but returns a name -> options dict."""
    return dict(canonicalize_opt_list(opt_list, moniker, require_unique=True, must_be=must_be))
