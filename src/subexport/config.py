"""
Exporter configuration: what a namespace offers for import.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .errors import CollectorConflictError, ConfigurationError
from .model import Generator, GroupGenerator, OptList, Validator, ValueKind, kind_of
from .names import ALL_GROUP, DEFAULT_GROUP
from .optlist import canonicalize_opt_list, expand_opt_list

GroupDefinition = OptList | GroupGenerator


@dataclass(frozen=True)
class ExporterConfig:
    """
    A normalized exporter configuration.

    Instances are built once through :meth:`build` and treated as read-only
    afterwards, so a single configuration can serve any number of imports,
    concurrently or not.
    """

    exports: Mapping[str, Generator | None]
    groups: Mapping[str, GroupDefinition]
    collectors: Mapping[str, Validator | None]

    @classmethod
    def build(
        cls,
        exports: Mapping[str, Any] | Iterable[Any] | None = None,
        groups: Mapping[str, Any] | Iterable[Any] | None = None,
        collectors: Mapping[str, Any] | Iterable[Any] | None = None,
    ) -> ExporterConfig:
        """
        Normalize loosely written opt lists into a configuration.

        Args:
            exports: Export names, each optionally followed by a generator
            groups: Group names, each followed by a member opt list or a group generator
            collectors: Collector names, each optionally followed by a validator

        Raises:
            ConfigurationError: If any opt list is malformed or collectors clash with exports
        """
        export_map = expand_opt_list(exports, "exports", must_be=ValueKind.CALLABLE)
        collector_map = expand_opt_list(collectors, "collectors", must_be=ValueKind.CALLABLE)

        clashes = [name for name in collector_map if name in export_map]
        if clashes:
            raise CollectorConflictError(clashes)

        group_items = (
            list(groups.items())
            if isinstance(groups, Mapping)
            else canonicalize_opt_list(groups, "groups", require_unique=True)
        )
        group_map: dict[str, GroupDefinition] = {}
        for name, definition in group_items:
            group_map[name] = cls._normalize_group(name, definition)

        group_map.setdefault(DEFAULT_GROUP, [])
        group_map.setdefault(ALL_GROUP, [(name, None) for name in export_map])

        return cls(
            exports=MappingProxyType(export_map),
            groups=MappingProxyType(group_map),
            collectors=MappingProxyType(collector_map),
        )

    @staticmethod
    def _normalize_group(name: str, definition: Any) -> GroupDefinition:
        kind = kind_of(definition)
        if kind is ValueKind.CALLABLE:
            return definition  # type: ignore[no-any-return]
        if kind in (ValueKind.SEQUENCE, ValueKind.MAPPING):
            return canonicalize_opt_list(definition, f"group {name}")
        if definition is None:
            return []
        raise ConfigurationError(f"group {name} must be an opt list or a group generator")

    @classmethod
    def coerce(cls, config: ExporterConfig | Mapping[str, Any] | Iterable[str] | None) -> ExporterConfig:
        """
        Accept a ready configuration, a mapping of build() arguments, or a
        plain sequence of export names.
        """
        if isinstance(config, ExporterConfig):
            return config
        if config is None:
            return cls.build()
        if isinstance(config, Mapping):
            unknown = set(config) - {"exports", "groups", "collectors"}
            if unknown:
                raise ConfigurationError(f"unknown configuration keys: {', '.join(sorted(unknown))}")
            return cls.build(**config)
        return cls.build(exports=config)

    def is_export(self, name: str) -> bool:
        return name in self.exports

    def is_group(self, name: str) -> bool:
        return name in self.groups

    def __str__(self) -> str:
        return (
            f"ExporterConfig(exports={list(self.exports)}, groups={list(self.groups)}, "
            f"collectors={list(self.collectors)})"
        )
