"""Concrete page resources and their typed containers."""

from .models import Resource, natural_key
from .script import DEFAULT_POSITION, Position, Script, ScriptBuilder
from .scripts import PositionPolicy, Scripts, as_script
from .style import Direction, Style, StyleBuilder
from .styles import Styles, as_style

__all__ = [
    "DEFAULT_POSITION",
    "Direction",
    "Position",
    "PositionPolicy",
    "Resource",
    "Script",
    "ScriptBuilder",
    "Scripts",
    "Style",
    "StyleBuilder",
    "Styles",
    "as_script",
    "as_style",
    "natural_key",
]
