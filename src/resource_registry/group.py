"""Groups: named sets of resources, one ordered container per resource kind."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Type

from .exceptions import InvalidIdentifier
from .ordering import OrderedContainer, union
from .resources import Script, Scripts, Style, Styles

logger = logging.getLogger(__name__)


def validate_group_name(name: object) -> Optional[str]:
    """Validate a group name.

    Group names may not be empty and may not contain commas or whitespace,
    so that lists of names can be split on either.

    Returns:
        The reason the name is invalid, or None when valid
    """
    if name is None:
        return "Group names may not be None"
    if not isinstance(name, str):
        return f"Group names must be strings, got {type(name).__name__}"
    if not name:
        return "Group names may not be empty"
    for pos, char in enumerate(name, start=1):
        if char == ",":
            return f'Group names may not contain commas ("," position {pos})'
        if char.isspace():
            return f"Group names may not contain whitespaces (position {pos})"
    return None


@dataclass(frozen=True, order=True)
class GroupName:
    """A validated group name."""
    name: str

    def __post_init__(self) -> None:
        reason = validate_group_name(self.name)
        if reason is not None:
            raise InvalidIdentifier(self.name, reason)

    @classmethod
    def of(cls, name: "str | GroupName") -> "GroupName":
        return name if isinstance(name, GroupName) else cls(name)

    def __str__(self) -> str:
        return self.name


class ResourceKind(Enum):
    """The kinds of resource a group partitions its contents into."""
    STYLE = "styles"
    SCRIPT = "scripts"

    @property
    def container_type(self) -> Type[OrderedContainer]:
        return _CONTAINER_TYPES[self]

    @property
    def item_type(self) -> type:
        return _ITEM_TYPES[self]


_CONTAINER_TYPES: Dict[ResourceKind, Type[OrderedContainer]] = {
    ResourceKind.STYLE: Styles,
    ResourceKind.SCRIPT: Scripts,
}

_ITEM_TYPES: Dict[ResourceKind, type] = {
    ResourceKind.STYLE: Style,
    ResourceKind.SCRIPT: Script,
}


class Group:
    """A named set of resources along with their ordering constraints.

    Each resource kind has its own container, created on first access.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._containers: Dict[ResourceKind, OrderedContainer] = {}

    def get_container(self, kind: ResourceKind) -> OrderedContainer:
        """Get the container for a resource kind, creating it if missing."""
        with self._lock:
            container = self._containers.get(kind)
            if container is None:
                container = kind.container_type()
                self._containers[kind] = container
            return container

    @property
    def styles(self) -> Styles:
        return self.get_container(ResourceKind.STYLE)  # type: ignore[return-value]

    @property
    def scripts(self) -> Scripts:
        return self.get_container(ResourceKind.SCRIPT)  # type: ignore[return-value]

    def _containers_snapshot(self) -> Dict[ResourceKind, OrderedContainer]:
        with self._lock:
            return dict(self._containers)

    def copy(self) -> "Group":
        """Get a deep copy of this group."""
        clone = Group()
        clone._containers = {
            kind: container.copy()
            for kind, container in self._containers_snapshot().items()
        }
        return clone

    @staticmethod
    def union(groups: Sequence["Group"]) -> "Group":
        """Get the union of multiple groups as a new group.

        Raises:
            ValueError: No groups were given.
        """
        if not groups:
            raise ValueError("Cannot union an empty collection of groups")
        if len(groups) == 1:
            return groups[0].copy()

        by_kind: Dict[ResourceKind, List[OrderedContainer]] = {}
        for group in groups:
            for kind, container in group._containers_snapshot().items():
                by_kind.setdefault(kind, []).append(container)

        result = Group()
        for kind, containers in by_kind.items():
            result._containers[kind] = union(containers, kind.container_type)
        return result

    def is_empty(self) -> bool:
        """True when every container is empty."""
        return all(container.is_empty() for container in self._containers_snapshot().values())

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{kind.value}={container!r}"
            for kind, container in self._containers_snapshot().items()
        )
        return f"Group({parts})"
