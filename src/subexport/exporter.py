"""
Exporter construction and the import entry point.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import ExporterConfig
from .errors import ConfigurationError
from .installer import Installer, binder_for, default_export
from .introspection import CallerIntrospector
from .model import ResolutionPlan
from .resolver import ExportResolver

logger = logging.getLogger(__name__)

SPECIAL_KEYS = frozenset({"export"})

ConfigInput = ExporterConfig | Mapping[str, Any] | Iterable[str] | None


class Exporter:
    """
    A reusable import routine built from one configuration.

    Calling an exporter performs a full resolve-and-install cycle::

        exporter(mymodule, "-all", {"-prefix": "my_"})

    installs every export of ``mymodule``, prefixed, into the caller's
    globals. Pass ``into=`` to install somewhere else.
    """

    def __init__(self, config: ExporterConfig, export: Installer = default_export):
        self._resolver = ExportResolver(config)
        self._export = export

    @property
    def config(self) -> ExporterConfig:
        """The configuration this exporter was built from."""
        return self._resolver.config

    def plan(self, requester: Any, *request: Any, into: Any = None) -> ResolutionPlan:
        """Resolve a request without installing anything."""
        return self._resolver.resolve(requester, list(request), into)

    def __call__(self, requester: Any, *request: Any, into: Any = None) -> None:
        """
        Resolve ``request`` and install every routine of the plan.

        The whole request is resolved before anything is installed, so a
        resolution error leaves ``into`` untouched. Errors raised by generators
        during installation propagate as they are; routines installed before
        the failing one stay installed.
        """
        if into is None:
            into = CallerIntrospector.caller_globals()

        plan = self._resolver.resolve(requester, list(request), into)
        for entry in plan:
            self._export(
                requester,
                entry.generator,
                entry.name,
                dict(entry.args),
                entry.collection,
                entry.destination,
                entry.into,
            )

    def __repr__(self) -> str:
        return f"Exporter({self.config})"


def build_exporter(config: ConfigInput = None, special: Mapping[str, Any] | None = None) -> Exporter:
    """
    Build an exporter.

    Args:
        config: An ExporterConfig, a mapping with ``exports``, ``groups`` and
                ``collectors`` opt lists, or a plain sequence of export names
        special: Optional overrides; ``export`` replaces the install callback

    Raises:
        ConfigurationError: If the configuration or the overrides are malformed
    """
    special = dict(special or {})
    unknown = set(special) - SPECIAL_KEYS
    if unknown:
        raise ConfigurationError(f"unknown special options: {', '.join(sorted(unknown))}")

    exporter = Exporter(ExporterConfig.coerce(config), special.get("export", default_export))
    logger.debug("Built %r", exporter)
    return exporter


def setup_exporter(
    config: ConfigInput = None,
    special: Mapping[str, Any] | None = None,
    *,
    into: Any = None,
    as_: str = "import_",
) -> Exporter:
    """
    Build an exporter and attach it to the exporting namespace.

    The attached routine has the namespace pre-bound as requester, so an
    importer only passes its request::

        # mylib.py
        setup_exporter({"exports": ["parse", "render"]})

        # app.py
        import mylib
        mylib.import_("parse")

    Args:
        config: As for build_exporter
        special: As for build_exporter
        into: The exporting module or class; defaults to the calling module
        as_: The attribute name for the import routine

    Returns:
        The exporter that was attached
    """
    if into is None:
        into = CallerIntrospector.caller_module()

    exporter = build_exporter(config, special)
    binder_for(into).bind(as_, functools.partial(exporter, into))
    return exporter
