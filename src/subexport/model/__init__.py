"""
Model subpackage containing core data structures and types.

Kept free of resolution logic so that every other module can import it
without cycles.
"""

from .plan import PlanEntry, ResolutionPlan
from .values import (
    Generator,
    GroupGenerator,
    OptList,
    OutputSlot,
    Validator,
    ValueKind,
    kind_of,
)

__all__ = [
    "Generator",
    "GroupGenerator",
    "OptList",
    "OutputSlot",
    "PlanEntry",
    "ResolutionPlan",
    "Validator",
    "ValueKind",
    "kind_of",
]
