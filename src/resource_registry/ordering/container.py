"""Thread-safe ordered container of items plus ordering constraints."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Generic, Hashable, Iterable, Optional, Tuple, TypeVar

from .graph import Constraint, ConstraintGraph
from .resolver import resolve_order

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)
C = TypeVar("C", bound="OrderedContainer")


class ConstraintPolicy:
    """Type-specific validation run on every constraint add/remove.

    The default policy accepts every constraint. Subclasses raise
    ``IllegalConstraint`` to reject one.
    """

    def check(self, before: Hashable, after: Hashable) -> None:
        return None


class OrderedContainer(Generic[T]):
    """A set of items with before/after constraints and a cached resolution.

    One re-entrant lock guards the item set, the constraint graph and the
    cached order together, so every mutation and every ``resolve()`` on a
    container is serialised. The cached order is cleared by each successful
    mutation and recomputed on the next ``resolve()``.

    Items must not be mutated in ways that change their equality, hash or
    ordering after insertion.
    """

    policy: ConstraintPolicy = ConstraintPolicy()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._items: Dict[T, None] = {}
        self._graph = ConstraintGraph()
        self._sorted: Optional[Tuple[T, ...]] = None
        self._resolve_count = 0

    # ── Items ─────────────────────────────────────────────────────

    def add(self, item: T) -> bool:
        """Add an item if not already present.

        Returns:
            True if the item was added, False if it already existed
        """
        if item is None:
            raise ValueError("item may not be None")
        with self._lock:
            if item in self._items:
                return False
            self._items[item] = None
            self._sorted = None
            return True

    def remove(self, item: T) -> bool:
        """Remove an item.

        Constraints referencing the item are kept; they are dropped or
        rejected at resolution time according to their required flag.

        Returns:
            True if the item was removed, False if it was not found
        """
        with self._lock:
            if item not in self._items:
                return False
            del self._items[item]
            self._sorted = None
            return True

    def add_all(self: C, items: Iterable[T] | None) -> C:
        """Add each item, skipping None entries."""
        if items is not None:
            for item in items:
                if item is not None:
                    self.add(item)
        return self

    def remove_all(self: C, items: Iterable[T] | None) -> C:
        """Remove each item, skipping None entries."""
        if items is not None:
            for item in items:
                if item is not None:
                    self.remove(item)
        return self

    # ── Constraints ───────────────────────────────────────────────

    def add_constraint(self, before: T, after: T, required: bool = True) -> bool:
        """Declare that ``before`` must be emitted ahead of ``after``.

        Raises:
            IllegalConstraint: The container's policy rejects the pair. The
                container is left unchanged.

        Returns:
            True if the constraint was added, False if it already existed
        """
        if before is None:
            raise ValueError("before may not be None")
        if after is None:
            raise ValueError("after may not be None")
        self.policy.check(before, after)
        with self._lock:
            added = self._graph.add(before, after, required)
            if added:
                self._sorted = None
            return added

    def remove_constraint(self, before: T, after: T, required: bool = True) -> bool:
        """Remove the exact ``(before, after, required)`` constraint.

        Returns:
            True if the constraint was removed, False if it was not found
        """
        self.policy.check(before, after)
        with self._lock:
            removed = self._graph.remove(before, after, required)
            if removed:
                self._sorted = None
            return removed

    def add_ordering(self: C, *items: T | None, required: bool = True) -> C:
        """Constrain each item to come before the next one, skipping None."""
        last = None
        for item in items:
            if item is None:
                continue
            if last is not None:
                self.add_constraint(last, item, required)
            last = item
        return self

    def remove_ordering(self: C, *items: T | None, required: bool = True) -> C:
        """Remove the constraints that ``add_ordering`` would have added."""
        last = None
        for item in items:
            if item is None:
                continue
            if last is not None:
                self.remove_constraint(last, item, required)
            last = item
        return self

    # ── Reading ───────────────────────────────────────────────────

    def resolve(self) -> Tuple[T, ...]:
        """Get all items, naturally sorted then topologically ordered.

        The result is cached until the next successful mutation. Failures
        are not cached.

        Raises:
            MissingRequiredEndpoint: A required constraint has an absent
                endpoint.
            CycleDetected: Required constraints form a cycle.
        """
        with self._lock:
            if self._sorted is None:
                self._resolve_count += 1
                self._sorted = resolve_order(self._items, self._graph)
            return self._sorted

    def snapshot(self) -> frozenset[T]:
        """Get the current items, in no particular order."""
        with self._lock:
            return frozenset(self._items)

    def constraints(self) -> Tuple[Constraint, ...]:
        """Get the current constraints, in insertion order."""
        with self._lock:
            return tuple(self._graph)

    def is_empty(self) -> bool:
        """True when there are neither items nor constraints."""
        with self._lock:
            return not self._items and not self._graph

    @property
    def resolve_count(self) -> int:
        """Number of times the order was actually computed."""
        with self._lock:
            return self._resolve_count

    # ── Copying ───────────────────────────────────────────────────

    def _copy_state(self) -> Tuple[Dict[T, None], ConstraintGraph, Optional[Tuple[T, ...]]]:
        """Copy items, constraints and cached order under this lock."""
        with self._lock:
            return dict(self._items), self._graph.copy(), self._sorted

    def copy(self: C) -> C:
        """Get a deep copy sharing no mutable state with this container."""
        items, graph, cached = self._copy_state()
        clone = type(self)()
        clone._items = items
        clone._graph = graph
        clone._sorted = cached
        return clone

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"{type(self).__name__}(items={len(self._items)}, "
                f"constraints={len(self._graph)})"
            )
