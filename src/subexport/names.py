"""
Request name syntax: group references and exclusions.
"""

from __future__ import annotations

GROUP_SIGILS = ("-", ":")
EXCLUDE_SIGIL = "!"

DEFAULT_GROUP = "default"
ALL_GROUP = "all"

# Option keys interpreted by the resolver rather than passed to generators.
AS = "-as"
PREFIX = "-prefix"
SUFFIX = "-suffix"


def group_name(name: str) -> str | None:
    """Return the group a name refers to, or None if it is not a group reference."""
    if name[:1] in GROUP_SIGILS:
        return name[1:]
    return None


def excluded_name(name: str) -> str | None:
    """Return the export an exclusion entry removes, or None."""
    if name.startswith(EXCLUDE_SIGIL):
        return name[len(EXCLUDE_SIGIL) :]
    return None


def group_ref(name: str) -> str:
    return f"{GROUP_SIGILS[0]}{name}"


def is_control_key(key: str) -> bool:
    return key.startswith("-")
