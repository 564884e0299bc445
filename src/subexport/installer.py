"""
Installation of resolved routines into target namespaces.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Protocol

from .errors import InvalidDestinationError, MissingRoutineError
from .model import Generator, OutputSlot

logger = logging.getLogger(__name__)


class Binder(ABC):
    """
    Capability to bind a routine under a name in some namespace.

    The resolver never touches namespaces itself; installers go through a
    binder so that modules, classes and plain dictionaries are handled alike.
    """

    @abstractmethod
    def bind(self, name: str, value: Any) -> None:
        """Bind ``value`` under ``name``."""

    @property
    @abstractmethod
    def target(self) -> Any:
        """The namespace this binder writes into."""


class MappingBinder(Binder):
    """Binds into a mutable mapping, such as a module's globals()."""

    def __init__(self, namespace: MutableMapping[str, Any]):
        self._namespace = namespace

    def bind(self, name: str, value: Any) -> None:
        self._namespace[name] = value

    @property
    def target(self) -> MutableMapping[str, Any]:
        return self._namespace


class NamespaceBinder(Binder):
    """Binds as attributes of a module, class or any object that allows it."""

    def __init__(self, namespace: Any):
        self._namespace = namespace

    def bind(self, name: str, value: Any) -> None:
        setattr(self._namespace, name, value)

    @property
    def target(self) -> Any:
        return self._namespace


def binder_for(target: Any) -> Binder:
    """Pick the binder matching the shape of ``target``."""
    if isinstance(target, Binder):
        return target
    if isinstance(target, MutableMapping):
        return MappingBinder(target)
    return NamespaceBinder(target)


class Installer(Protocol):
    """The install callback an exporter invokes once per plan entry."""

    def __call__(
        self,
        requester: Any,
        generator: Generator | None,
        name: str,
        args: Mapping[str, Any],
        collection: Mapping[str, Any],
        destination: Any,
        into: Any,
    ) -> None: ...


def generate(
    requester: Any,
    generator: Generator | None,
    name: str,
    args: Mapping[str, Any],
    collection: Mapping[str, Any],
) -> Callable[..., Any]:
    """Produce the routine for one export."""
    if generator is not None:
        return generator(requester, name, args, collection)

    routine = getattr(requester, name, None)
    if routine is None:
        raise MissingRoutineError(name, requester)
    return routine  # type: ignore[no-any-return]


def install(routine: Callable[..., Any], into: Any, destination: Any) -> None:
    """
    Put a routine where the destination says.

    An OutputSlot destination receives the routine directly; a string
    destination is bound in ``into`` through its binder.

    Raises:
        InvalidDestinationError: If the destination is neither a name nor a slot
    """
    if isinstance(destination, OutputSlot):
        destination.set(routine)
    elif isinstance(destination, str):
        binder_for(into).bind(destination, routine)
    else:
        raise InvalidDestinationError(destination)


def default_export(
    requester: Any,
    generator: Generator | None,
    name: str,
    args: Mapping[str, Any],
    collection: Mapping[str, Any],
    destination: Any,
    into: Any,
) -> None:
    """The default install callback: generate, then install."""
    routine = generate(requester, generator, name, args, collection)
    install(routine, into, destination)
    logger.debug("Installed %s as %s", name, destination if isinstance(destination, str) else "<slot>")
