"""Constraint-ordering engine: containers, resolution and union."""

from .container import ConstraintPolicy, OrderedContainer
from .graph import Before, Constraint, ConstraintGraph
from .merge import union
from .resolver import natural_sort, resolve_order

__all__ = [
    "Before",
    "Constraint",
    "ConstraintGraph",
    "ConstraintPolicy",
    "OrderedContainer",
    "natural_sort",
    "resolve_order",
    "union",
]
