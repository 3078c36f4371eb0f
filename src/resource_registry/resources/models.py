"""Base resource model and natural string ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

_DIGITS = re.compile(r"(\d+)")

NaturalKey = Tuple[Tuple[Union[str, int], ...], str]


def natural_key(text: Optional[str]) -> NaturalKey:
    """Sort key comparing embedded numbers numerically, ignoring case.

    ``re.split`` with a capturing group alternates text and digit runs,
    always starting with text, so parts at equal positions share a type.
    The exact text breaks ties between strings differing only in case or
    leading zeros.

    Examples:
        >>> sorted(["a10.css", "A2.css", "a1.css"], key=natural_key)
        ['a1.css', 'A2.css', 'a10.css']
    """
    text = text or ""
    parts: list[Union[str, int]] = []
    for i, chunk in enumerate(_DIGITS.split(text)):
        parts.append(int(chunk) if i % 2 else chunk.casefold())
    return tuple(parts), text


def strip_to_none(value: Optional[str]) -> Optional[str]:
    """Trim a string, mapping empty results to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Resource:
    """A resource identified by its full URL or application path.

    ``uri`` may be absolute (``https://...``), a full path within the
    application (``/...``) or relative to the application root (``../...``).
    No normalisation is performed beyond mapping an empty URI to None;
    callers should normalise URIs so ordering stays consistent.

    Concrete resources are immutable, hashable over all of their attributes
    and naturally ordered via ``__lt__``.
    """

    uri: Optional[str]

    def __post_init__(self) -> None:
        if self.uri == "":
            object.__setattr__(self, "uri", None)

    def sort_key(self) -> tuple:
        """Natural ordering key; resources order by URI by default."""
        return (natural_key(self.uri),)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sort_key() < other.sort_key()  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.uri or ""
