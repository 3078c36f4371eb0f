"""Exception hierarchy for resource ordering and registry errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence


class RegistryError(Exception):
    """Base exception for resource registry errors."""
    pass


class ConstraintViolation(RegistryError):
    """Resolution failed because the declared constraints cannot be satisfied.

    Raised from ``OrderedContainer.resolve()``. Never cached: the next call
    re-attempts resolution against the then-current state.
    """
    pass


class MissingRequiredEndpoint(ConstraintViolation):
    """A required constraint names an item absent from the container."""

    def __init__(self, before: Any, after: Any, missing_before: bool):
        self.before = before
        self.after = after
        self.missing = before if missing_before else after
        self.present = after if missing_before else before
        role = "before" if missing_before else "after"
        super().__init__(
            f"Required resource not found:\n"
            f"    before = {before}\n"
            f"    after  = {after}\n"
            f"Missing {role} endpoint {self.missing} (other endpoint: {self.present})"
        )


class CycleDetected(ConstraintViolation):
    """Required constraints form a cycle."""

    def __init__(self, cycle: Sequence[Any]):
        self.cycle = tuple(cycle)
        path = " -> ".join(str(item) for item in (*self.cycle, self.cycle[0]))
        super().__init__(f"Required ordering constraints form a cycle: {path}")


class IllegalConstraint(RegistryError, ValueError):
    """A constraint violates a type-specific ordering rule.

    Raised synchronously by ``add_constraint``/``remove_constraint``; the
    container is left unchanged.
    """

    def __init__(self, before: Any, after: Any, reason: str):
        self.before = before
        self.after = after
        self.reason = reason
        super().__init__(f"{reason}: {before} > {after}")


class InvalidIdentifier(RegistryError, ValueError):
    """An identifier (such as a group name) failed validation."""

    def __init__(self, name: object, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(reason)


class ManifestError(RegistryError):
    """A registry manifest could not be read or validated."""

    def __init__(self, path: Path | None, message: str):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
