"""Topological resolution of items and ordering constraints.

The resolution is a pure function of an item collection and a
``ConstraintGraph``:

1. Items are sorted by their natural ordering (stable, so items comparing
   equal keep their collection order). This is the tie-break order.
2. Constraints with both endpoints present become candidate edges. A
   required constraint with an absent endpoint raises
   ``MissingRequiredEndpoint``; an optional one is skipped.
3. Required edges are accepted first, in order of the ``after`` item's
   sorted position, then the ``before`` item's. A required edge that closes
   a cycle raises ``CycleDetected``.
4. Optional edges are accepted next, in the same order. An optional edge that
   would close a cycle with the edges already accepted is dropped.
5. The sorted list is walked in order; each item is emitted right after its
   not-yet-emitted predecessors, so constraints pull predecessors forward
   and everything else keeps its natural position.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import CycleDetected, MissingRequiredEndpoint
from .graph import ConstraintGraph

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]  # (before index, after index) into the sorted snapshot


def natural_sort(items: Iterable[Hashable]) -> List[Hashable]:
    """Sort items by their natural ordering, keeping ties in input order."""
    return sorted(items)


def _collect_edges(
    snapshot: Sequence[Hashable],
    graph: ConstraintGraph,
) -> Tuple[List[Edge], List[Edge]]:
    """Split constraints into required and optional edges over ``snapshot``.

    Raises:
        MissingRequiredEndpoint: A required constraint references an item
            that is not in the snapshot.
    """
    index = {item: i for i, item in enumerate(snapshot)}
    required: set[Edge] = set()
    optional: set[Edge] = set()
    for constraint in graph:
        before_pos = index.get(constraint.before)
        after_pos = index.get(constraint.after)
        if before_pos is not None and after_pos is not None:
            target = required if constraint.required else optional
            target.add((before_pos, after_pos))
        elif constraint.required:
            raise MissingRequiredEndpoint(
                constraint.before,
                constraint.after,
                missing_before=before_pos is None,
            )

    def by_position(edge: Edge) -> Tuple[int, int]:
        return edge[1], edge[0]

    # An optional duplicate of a required edge adds nothing
    optional -= required
    return sorted(required, key=by_position), sorted(optional, key=by_position)


def _find_path(successors: List[List[int]], start: int, goal: int) -> Optional[List[int]]:
    """Breadth-first path from ``start`` to ``goal`` inclusive, or None."""
    if start == goal:
        return [start]
    parents = {start: start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in successors[node]:
            if nxt in parents:
                continue
            parents[nxt] = node
            if nxt == goal:
                path = [goal]
                while path[-1] != start:
                    path.append(parents[path[-1]])
                path.reverse()
                return path
            queue.append(nxt)
    return None


def _emit(snapshot: Sequence[Hashable], predecessors: List[List[int]]) -> Tuple[Hashable, ...]:
    """Emit items in snapshot order, each preceded by its predecessors.

    The accepted edge set is acyclic, so a node can never be reached again
    while it is still on the stack.
    """
    emitted = [False] * len(snapshot)
    order: List[Hashable] = []
    for root in range(len(snapshot)):
        if emitted[root]:
            continue
        stack = [(root, iter(predecessors[root]))]
        while stack:
            node, pending = stack[-1]
            for pred in pending:
                if not emitted[pred]:
                    stack.append((pred, iter(predecessors[pred])))
                    break
            else:
                stack.pop()
                emitted[node] = True
                order.append(snapshot[node])
    return tuple(order)


def resolve_order(items: Iterable[Hashable], graph: ConstraintGraph) -> Tuple[Hashable, ...]:
    """Resolve the deterministic order of ``items`` under ``graph``.

    Args:
        items: The items to order; each must be hashable and comparable.
        graph: Ordering constraints, possibly referencing absent items.

    Returns:
        Every item exactly once, as a tuple.

    Raises:
        MissingRequiredEndpoint: A required constraint has an absent endpoint.
        CycleDetected: Required constraints form a cycle.
    """
    snapshot = natural_sort(items)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("list sorted: %s", ", ".join(str(item) for item in snapshot))

    required, optional = _collect_edges(snapshot, graph)

    successors: List[List[int]] = [[] for _ in snapshot]
    predecessors: List[List[int]] = [[] for _ in snapshot]

    for before, after in required:
        path = _find_path(successors, after, before)
        if path is not None:
            raise CycleDetected([snapshot[before]] + [snapshot[i] for i in path[:-1]])
        successors[before].append(after)
        predecessors[after].append(before)

    for before, after in optional:
        if _find_path(successors, after, before) is not None:
            logger.debug(
                "Dropping optional ordering %s -> %s: would close a cycle",
                snapshot[before],
                snapshot[after],
            )
            continue
        successors[before].append(after)
        predecessors[after].append(before)

    for preds in predecessors:
        preds.sort()

    order = _emit(snapshot, predecessors)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("topological sorted: %s", ", ".join(str(item) for item in order))
    return order
