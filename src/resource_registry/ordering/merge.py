"""Union of independently populated ordered containers."""

from __future__ import annotations

import logging
from typing import Sequence, Type, TypeVar

from .container import OrderedContainer

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=OrderedContainer)


def union(
    containers: Sequence[C] | None,
    container_type: Type[C] | None = None,
) -> C:
    """Get the union of multiple containers as a new, independent container.

    - No containers: a new empty container of ``container_type``
      (``OrderedContainer`` when not given).
    - One container: a deep copy of it.
    - Several: items and constraints are the unions of all inputs.

    Inputs are never modified. Each source's lock is held only while that
    source's state is copied, never two at once.

    Raises:
        TypeError: The containers are not all of the same class, or not of
            ``container_type`` when it is given.
    """
    if not containers:
        return (container_type or OrderedContainer)()

    result_type = container_type or type(containers[0])
    for container in containers:
        if type(container) is not result_type:
            raise TypeError(
                f"Cannot union {type(container).__name__} into {result_type.__name__}"
            )

    if len(containers) == 1:
        return containers[0].copy()

    logger.debug("union of %d %s", len(containers), result_type.__name__)
    result = result_type()
    for container in containers:
        items, graph, _ = container._copy_state()
        for item in items:
            result._items.setdefault(item, None)
        result._graph.merge(graph)
    return result
