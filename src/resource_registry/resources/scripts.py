"""Ordered container of scripts, enforcing script positions."""

from __future__ import annotations

from typing import Hashable, Optional, Sequence, Union

from ..exceptions import IllegalConstraint
from ..ordering import ConstraintPolicy, OrderedContainer, union
from .script import Script

ScriptLike = Union[Script, str]


def as_script(value: ScriptLike) -> Script:
    """Interpret a plain string as the src of a default ``Script``."""
    return Script(value) if isinstance(value, str) else value


class PositionPolicy(ConstraintPolicy):
    """The before script may not be placed later in the page than the after script."""

    def check(self, before: Hashable, after: Hashable) -> None:
        if not isinstance(before, Script) or not isinstance(after, Script):
            raise IllegalConstraint(before, after, "Scripts may only be ordered against scripts")
        if before.position.ordinal > after.position.ordinal:
            raise IllegalConstraint(before, after, "before.position > after.position")


class Scripts(OrderedContainer[Script]):
    """The partition of a group holding scripts.

    Every operation accepts either a ``Script`` or a src string. Ordering
    constraints may not contradict ``Script.position``.
    """

    policy = PositionPolicy()

    @staticmethod
    def union(others: Optional[Sequence["Scripts"]]) -> "Scripts":
        """Get the union of multiple script containers."""
        return union(others, Scripts)

    def add(self, item: ScriptLike) -> bool:
        if item is None:
            raise ValueError("src may not be None")
        return super().add(as_script(item))

    def remove(self, item: Optional[ScriptLike]) -> bool:
        if item is None:
            return False
        return super().remove(as_script(item))

    def add_constraint(self, before: ScriptLike, after: ScriptLike, required: bool = True) -> bool:
        if before is None:
            raise ValueError("before src may not be None")
        if after is None:
            raise ValueError("after src may not be None")
        return super().add_constraint(as_script(before), as_script(after), required)

    def remove_constraint(
        self,
        before: Optional[ScriptLike],
        after: Optional[ScriptLike],
        required: bool = True,
    ) -> bool:
        if before is None or after is None:
            return False
        return super().remove_constraint(as_script(before), as_script(after), required)
