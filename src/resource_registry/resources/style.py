"""CSS stylesheet resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import Resource, natural_key, strip_to_none

# Primary language subtags written right-to-left
_RTL_LANGUAGES = frozenset({
    "ar", "arc", "ckb", "dv", "fa", "ha", "he", "iw", "khw", "ks",
    "ku", "ps", "sd", "ur", "yi",
})


class Direction(Enum):
    """Text direction a style applies to."""
    LTR = "ltr"  # Left-to-right
    RTL = "rtl"  # Right-to-left

    @property
    def ordinal(self) -> int:
        return list(Direction).index(self)

    @classmethod
    def for_language(cls, language: str) -> "Direction":
        """Get the expected direction for a language tag such as ``ar-EG``."""
        primary = language.replace("_", "-").split("-", 1)[0].strip().lower()
        return cls.RTL if primary in _RTL_LANGUAGES else cls.LTR


@dataclass(frozen=True)
class Style(Resource):
    """A CSS stylesheet, identified by URI plus its other attributes.

    Styles start with a default ordering that should minimise the number of
    explicit ordering declarations:

    1. media condition, None first
    2. direction, None first
    3. URI
    4. crossorigin, None first
    5. disabled, false first

    so that ``global.css`` sorts ahead of ``global-print.css`` with
    ``media="print"``, matching how print styles usually override base
    definitions. The last two only break ties between styles that differ in
    nothing else, keeping the ordering consistent with equality.
    """

    media: Optional[str] = None
    direction: Optional[Direction] = None
    crossorigin: Optional[str] = None
    disabled: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "media", strip_to_none(self.media))
        object.__setattr__(self, "crossorigin", strip_to_none(self.crossorigin))

    @classmethod
    def builder(cls) -> "StyleBuilder":
        return StyleBuilder()

    def sort_key(self) -> tuple:
        return (
            self.media is not None,
            natural_key(self.media),
            self.direction is not None,
            self.direction.ordinal if self.direction is not None else -1,
            natural_key(self.uri),
            self.crossorigin is not None,
            self.crossorigin or "",
            self.disabled,
        )

    def __str__(self) -> str:
        attrs = []
        if self.media is not None:
            attrs.append(f'media="{self.media}"')
        if self.direction is not None:
            attrs.append(f"direction={self.direction.name}")
        if self.crossorigin is not None:
            attrs.append(f'crossorigin="{self.crossorigin}"')
        if self.disabled:
            attrs.append("disabled")
        base = super().__str__()
        return f"{base}[{', '.join(attrs)}]" if attrs else base


class StyleBuilder:
    """Fluent builder for ``Style``."""

    def __init__(self) -> None:
        self._uri: Optional[str] = None
        self._media: Optional[str] = None
        self._direction: Optional[Direction] = None
        self._crossorigin: Optional[str] = None
        self._disabled = False

    def uri(self, href: Optional[str]) -> "StyleBuilder":
        self._uri = href
        return self

    def media(self, media: Optional[str]) -> "StyleBuilder":
        self._media = media
        return self

    def direction(self, direction: Optional[Direction]) -> "StyleBuilder":
        self._direction = direction
        return self

    def crossorigin(self, crossorigin: Optional[str]) -> "StyleBuilder":
        self._crossorigin = crossorigin
        return self

    def disabled(self, disabled: bool = True) -> "StyleBuilder":
        self._disabled = disabled
        return self

    def build(self) -> Style:
        return Style(
            self._uri,
            media=self._media,
            direction=self._direction,
            crossorigin=self._crossorigin,
            disabled=self._disabled,
        )
