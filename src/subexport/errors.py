"""
Exception hierarchy for export configuration and resolution.
"""

from __future__ import annotations

from typing import Any


def _describe(requester: Any) -> str:
    return getattr(requester, "__name__", None) or str(requester)


class ExporterError(Exception):
    """Base class for all errors raised by subexport."""


class ConfigurationError(ExporterError):
    """Raised when an exporter configuration is malformed."""


class ResolutionError(ExporterError):
    """Raised when an import request cannot be resolved."""


class DuplicateNameError(ConfigurationError):
    """Raised when a name appears twice in an opt list that must be unique."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"multiple definitions provided for {name}")


class InvalidOptionKindError(ConfigurationError):
    """Raised when an option value has a kind the opt list does not allow."""

    def __init__(self, kind: str, moniker: str | None = None):
        self.kind = kind
        self.moniker = moniker
        where = f"{moniker} opt list" if moniker else "opt list"
        super().__init__(f"{kind} values are not valid in {where}")


class CollectorConflictError(ConfigurationError):
    """Raised when a collector shares its name with an export."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"collectors conflict with exports: {', '.join(names)}")


class UnknownGroupError(ResolutionError):
    def __init__(self, group: str, requester: Any):
        self.group = group
        self.requester = requester
        super().__init__(f'group "{group}" is not exported by the {_describe(requester)} module')


class GroupGeneratorError(ResolutionError):
    def __init__(self, group: str, returned: Any):
        self.group = group
        self.returned = returned
        super().__init__(
            f'group generator "{group}" did not return a mapping '
            f"(got {type(returned).__name__})"
        )


class DuplicateCollectionError(ResolutionError):
    def __init__(self, collector: str):
        self.collector = collector
        super().__init__(f"collection {collector} provided multiple times in import")


class CollectionValidationError(ResolutionError):
    def __init__(self, collector: str, value: Any):
        self.collector = collector
        self.value = value
        super().__init__(f"collection {collector} failed validation")


class UnknownExportError(ResolutionError):
    """Raised when a request names something the configuration does not export."""

    def __init__(self, name: str, requester: Any):
        self.name = name
        self.requester = requester
        super().__init__(f'"{name}" is not exported by the {_describe(requester)} module')


class MissingRoutineError(ResolutionError):
    """Raised when an export without a generator has no routine to reuse."""

    def __init__(self, name: str, requester: Any):
        self.name = name
        self.requester = requester
        super().__init__(f'{_describe(requester)} has no routine named "{name}" to export')


class InvalidDestinationError(ResolutionError):
    def __init__(self, destination: Any):
        self.destination = destination
        super().__init__(
            f"invalid destination reference type for {destination!r}: "
            f"{type(destination).__name__}"
        )
