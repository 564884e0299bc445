"""
subexport - configurable routine exporting for Python modules and classes.

An exporting namespace declares:
- exports, each optionally backed by a generator that builds the routine per import
- groups of exports, nested freely or produced by a group generator
- collectors, side-channel values handed to every generator of one import

Importers request names, groups (``-name`` or ``:name``) and exclusions
(``!name``), with ``-as``, ``-prefix`` and ``-suffix`` options for renaming.
"""

from .config import ExporterConfig
from .errors import (
    CollectionValidationError,
    CollectorConflictError,
    ConfigurationError,
    DuplicateCollectionError,
    DuplicateNameError,
    ExporterError,
    GroupGeneratorError,
    InvalidDestinationError,
    InvalidOptionKindError,
    MissingRoutineError,
    ResolutionError,
    UnknownExportError,
    UnknownGroupError,
)
from .exporter import Exporter, build_exporter, setup_exporter
from .installer import Binder, MappingBinder, NamespaceBinder, binder_for, default_export
from .model import OutputSlot, PlanEntry, ResolutionPlan, ValueKind
from .optlist import canonicalize_opt_list, expand_opt_list
from .resolver import ExportResolver
from .util import curry_method, like, merge_defaults

__all__ = [
    "Binder",
    "CollectionValidationError",
    "CollectorConflictError",
    "ConfigurationError",
    "DuplicateCollectionError",
    "DuplicateNameError",
    "ExportResolver",
    "Exporter",
    "ExporterConfig",
    "ExporterError",
    "GroupGeneratorError",
    "InvalidDestinationError",
    "InvalidOptionKindError",
    "MappingBinder",
    "MissingRoutineError",
    "NamespaceBinder",
    "OutputSlot",
    "PlanEntry",
    "ResolutionError",
    "ResolutionPlan",
    "UnknownExportError",
    "UnknownGroupError",
    "ValueKind",
    "binder_for",
    "build_exporter",
    "canonicalize_opt_list",
    "curry_method",
    "default_export",
    "expand_opt_list",
    "like",
    "merge_defaults",
    "setup_exporter",
]
