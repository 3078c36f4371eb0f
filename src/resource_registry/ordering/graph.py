"""Constraint storage for ordered containers.

Constraints are kept as ``after -> {Before(before, required)}``. Each inner
collection is an insertion-ordered dict used as a set, so iteration order is
reproducible for the same sequence of insertions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator


@dataclass(frozen=True)
class Before:
    """One incoming edge of an ``after`` item."""
    before: Hashable
    required: bool

    def __str__(self) -> str:
        return f"{self.before} ({'required' if self.required else 'optional'})"


@dataclass(frozen=True)
class Constraint:
    """A full ``before -> after`` ordering constraint."""
    before: Hashable
    after: Hashable
    required: bool = True


class ConstraintGraph:
    """Multimap of ordering constraints keyed by the ``after`` item.

    Pure data: no locking and no validation. Owners serialise access.
    """

    def __init__(self) -> None:
        self._edges: Dict[Any, Dict[Before, None]] = {}

    def add(self, before: Hashable, after: Hashable, required: bool) -> bool:
        """Add the triple; return False when it is already present."""
        befores = self._edges.setdefault(after, {})
        edge = Before(before, required)
        if edge in befores:
            return False
        befores[edge] = None
        return True

    def remove(self, before: Hashable, after: Hashable, required: bool) -> bool:
        """Remove the exact triple; return False when it is not present."""
        befores = self._edges.get(after)
        if befores is None:
            return False
        edge = Before(before, required)
        if edge not in befores:
            return False
        del befores[edge]
        if not befores:
            del self._edges[after]
        return True

    def contains(self, before: Hashable, after: Hashable, required: bool) -> bool:
        befores = self._edges.get(after)
        return befores is not None and Before(before, required) in befores

    def befores(self, after: Hashable) -> tuple[Before, ...]:
        """Get the incoming edges of ``after`` in insertion order."""
        return tuple(self._edges.get(after, ()))

    def merge(self, other: "ConstraintGraph") -> None:
        """Add every constraint of ``other`` into this graph."""
        for after, befores in other._edges.items():
            target = self._edges.setdefault(after, {})
            for edge in befores:
                target.setdefault(edge, None)

    def copy(self) -> "ConstraintGraph":
        clone = ConstraintGraph()
        clone._edges = {after: dict(befores) for after, befores in self._edges.items()}
        return clone

    def __iter__(self) -> Iterator[Constraint]:
        for after, befores in self._edges.items():
            for edge in befores:
                yield Constraint(edge.before, after, edge.required)

    def __len__(self) -> int:
        return sum(len(befores) for befores in self._edges.values())

    def __bool__(self) -> bool:
        return bool(self._edges)
