"""Ordered container of styles with string convenience overloads."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..ordering import OrderedContainer, union
from .style import Style

StyleLike = Union[Style, str]


def as_style(value: StyleLike) -> Style:
    """Interpret a plain string as the href of a default ``Style``."""
    return Style(value) if isinstance(value, str) else value


class Styles(OrderedContainer[Style]):
    """The partition of a group holding CSS styles.

    Every operation accepts either a ``Style`` or an href string.
    """

    @staticmethod
    def union(others: Optional[Sequence["Styles"]]) -> "Styles":
        """Get the union of multiple style containers."""
        return union(others, Styles)

    def add(self, item: StyleLike) -> bool:
        if item is None:
            raise ValueError("href may not be None")
        return super().add(as_style(item))

    def remove(self, item: Optional[StyleLike]) -> bool:
        if item is None:
            return False
        return super().remove(as_style(item))

    def add_constraint(self, before: StyleLike, after: StyleLike, required: bool = True) -> bool:
        if before is None:
            raise ValueError("before href may not be None")
        if after is None:
            raise ValueError("after href may not be None")
        return super().add_constraint(as_style(before), as_style(after), required)

    def remove_constraint(
        self,
        before: Optional[StyleLike],
        after: Optional[StyleLike],
        required: bool = True,
    ) -> bool:
        if before is None or after is None:
            return False
        return super().remove_constraint(as_style(before), as_style(after), required)
