"""Deterministic ordering of page resources under before/after constraints."""

from .exceptions import (
    RegistryError,
    ConstraintViolation,
    MissingRequiredEndpoint,
    CycleDetected,
    IllegalConstraint,
    InvalidIdentifier,
    ManifestError,
)
from .ordering import (
    Constraint,
    ConstraintGraph,
    ConstraintPolicy,
    OrderedContainer,
    resolve_order,
    union,
)
from .resources import (
    Direction,
    Position,
    Script,
    Scripts,
    Style,
    Styles,
)
from .group import Group, GroupName, ResourceKind, validate_group_name
from .registry import Registry, merge_active

__all__ = [
    "RegistryError",
    "ConstraintViolation",
    "MissingRequiredEndpoint",
    "CycleDetected",
    "IllegalConstraint",
    "InvalidIdentifier",
    "ManifestError",
    "Constraint",
    "ConstraintGraph",
    "ConstraintPolicy",
    "OrderedContainer",
    "resolve_order",
    "union",
    "Direction",
    "Position",
    "Script",
    "Scripts",
    "Style",
    "Styles",
    "Group",
    "GroupName",
    "ResourceKind",
    "validate_group_name",
    "Registry",
    "merge_active",
]

__version__ = "0.1.0"
