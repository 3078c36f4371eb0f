"""Registries: groups of resources plus group activations."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .group import Group, GroupName

logger = logging.getLogger(__name__)


class Registry:
    """A set of named groups, along with activations.

    Activations are tri-state per group name: True activates, False
    deactivates and an absent entry leaves the activation unchanged. A
    group does not need to be part of the registry that activates it; an
    application-wide registry will often hold the resources while
    per-request registries activate them. Groups are inactive unless some
    registry activates them.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._groups: Dict[GroupName, Group] = {}
        self._activations: Dict[GroupName, bool] = {}

    def copy(self) -> "Registry":
        """Get a deep copy of this registry."""
        clone = Registry()
        with self._lock:
            groups = dict(self._groups)
            clone._activations = dict(self._activations)
        clone._groups = {name: group.copy() for name, group in groups.items()}
        return clone

    # ── Groups ────────────────────────────────────────────────────

    def get_group(self, name: "str | GroupName", create: bool = True) -> Optional[Group]:
        """Get the group for a name, optionally creating it if missing.

        Raises:
            InvalidIdentifier: ``name`` is not a valid group name.

        Returns:
            The group, or None when it does not exist and ``create`` is False
        """
        key = GroupName.of(name)
        with self._lock:
            group = self._groups.get(key)
            if group is None and create:
                group = Group()
                self._groups[key] = group
                logger.debug("Created group %s", key)
            return group

    @property
    def groups(self) -> Mapping[GroupName, Group]:
        """Read-only snapshot of the groups, sorted by name."""
        with self._lock:
            return MappingProxyType(dict(sorted(self._groups.items(), key=lambda kv: kv[0])))

    # ── Activations ───────────────────────────────────────────────

    @property
    def activations(self) -> Mapping[GroupName, bool]:
        """Read-only snapshot of the current activations."""
        with self._lock:
            return MappingProxyType(dict(self._activations))

    def set_activation(self, name: "str | GroupName", activation: Optional[bool]) -> Optional[bool]:
        """Set the activation for a group; None removes it.

        Returns:
            The previous activation value for the group
        """
        key = GroupName.of(name)
        with self._lock:
            previous = self._activations.get(key)
            if activation is None:
                self._activations.pop(key, None)
            else:
                self._activations[key] = bool(activation)
            return previous

    def activate(self, *names: "str | GroupName | None") -> "Registry":
        """Activate each named group, skipping None."""
        for name in names:
            if name is not None:
                self.set_activation(name, True)
        return self

    def deactivate(self, *names: "str | GroupName | None") -> "Registry":
        """Deactivate each named group, skipping None."""
        for name in names:
            if name is not None:
                self.set_activation(name, False)
        return self

    def is_empty(self) -> bool:
        """Empty when there are no activations and all groups are empty."""
        with self._lock:
            if self._activations:
                return False
            groups = list(self._groups.values())
        return all(group.is_empty() for group in groups)


def merge_active(registries: Iterable[Registry]) -> Group:
    """Merge the active groups of a stack of registries into one group.

    Activations are applied in order, so later registries override earlier
    ones. Every group whose name ends up active is unioned, across all
    registries, into a new group; the registries are not modified.
    """
    stack = list(registries)
    activations: Dict[GroupName, bool] = {}
    for registry in stack:
        activations.update(registry.activations)
    active = {name for name, value in activations.items() if value}

    groups: List[Group] = []
    for registry in stack:
        for name, group in registry.groups.items():
            if name in active:
                groups.append(group)
    logger.debug(
        "Merging %d group(s) for active names: %s",
        len(groups),
        ", ".join(str(name) for name in sorted(active)),
    )
    if not groups:
        return Group()
    return Group.union(groups)
