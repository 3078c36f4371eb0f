"""JavaScript resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import Resource, natural_key, strip_to_none


class Position(Enum):
    """Where in the page a script is placed, in document order."""
    HEAD_START = "head_start"  # Just after the head opening tag
    HEAD_END = "head_end"      # Just before the head closing tag
    BODY_START = "body_start"  # Just after the body opening tag
    BODY_END = "body_end"      # Just before the body closing tag

    @property
    def ordinal(self) -> int:
        return list(Position).index(self)

    @classmethod
    def parse(cls, value: "str | Position") -> "Position":
        """Accept a member, its value or its name (any case)."""
        if isinstance(value, Position):
            return value
        key = value.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown script position {value!r}; "
                f"expected one of {', '.join(p.value for p in cls)}"
            ) from None


DEFAULT_POSITION = Position.HEAD_END


@dataclass(frozen=True)
class Script(Resource):
    """A script, identified by URI plus its other attributes.

    Scripts start with a default ordering that should minimise the number of
    explicit ordering declarations:

    1. async, true first
    2. defer, true first
    3. URI
    4. position, in document order
    5. crossorigin, None first

    Position and crossorigin only break ties between scripts that differ in
    nothing else. Position is enforced by ``Scripts`` when constraints are
    declared.
    """

    position: Position = DEFAULT_POSITION
    async_: bool = False
    defer: bool = False
    crossorigin: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.position is None:
            object.__setattr__(self, "position", DEFAULT_POSITION)
        object.__setattr__(self, "crossorigin", strip_to_none(self.crossorigin))

    @classmethod
    def builder(cls) -> "ScriptBuilder":
        return ScriptBuilder()

    def sort_key(self) -> tuple:
        return (
            not self.async_,
            not self.defer,
            natural_key(self.uri),
            self.position.ordinal,
            self.crossorigin is not None,
            self.crossorigin or "",
        )

    def __str__(self) -> str:
        attrs = [self.position.name]
        if self.async_:
            attrs.append("async")
        if self.defer:
            attrs.append("defer")
        if self.crossorigin is not None:
            attrs.append(f'crossorigin="{self.crossorigin}"')
        return f"{super().__str__()}[{', '.join(attrs)}]"


class ScriptBuilder:
    """Fluent builder for ``Script``."""

    def __init__(self) -> None:
        self._uri: Optional[str] = None
        self._position = DEFAULT_POSITION
        self._async = False
        self._defer = False
        self._crossorigin: Optional[str] = None

    def uri(self, src: Optional[str]) -> "ScriptBuilder":
        self._uri = src
        return self

    def position(self, position: Position) -> "ScriptBuilder":
        self._position = position
        return self

    def async_(self, async_: bool = True) -> "ScriptBuilder":
        self._async = async_
        return self

    def defer(self, defer: bool = True) -> "ScriptBuilder":
        self._defer = defer
        return self

    def crossorigin(self, crossorigin: Optional[str]) -> "ScriptBuilder":
        self._crossorigin = crossorigin
        return self

    def build(self) -> Script:
        return Script(
            self._uri,
            position=self._position,
            async_=self._async,
            defer=self._defer,
            crossorigin=self._crossorigin,
        )
