"""Rich rendering helpers for resolved resources."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from rich.markup import escape
from rich.table import Table

from ..resources import Script, Style


def styles_table(styles: Sequence[Style], title: str = "Styles") -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Href", style="bold")
    table.add_column("Media", style="cyan")
    table.add_column("Direction", style="magenta")
    table.add_column("Flags")
    for i, style in enumerate(styles, start=1):
        flags = []
        if style.crossorigin:
            flags.append(f"crossorigin={style.crossorigin}")
        if style.disabled:
            flags.append("disabled")
        table.add_row(
            str(i),
            escape(style.uri or ""),
            escape(style.media or ""),
            style.direction.value if style.direction else "",
            escape(", ".join(flags)),
        )
    return table


def scripts_table(scripts: Sequence[Script], title: str = "Scripts") -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Src", style="bold")
    table.add_column("Position", style="cyan")
    table.add_column("Flags")
    for i, script in enumerate(scripts, start=1):
        flags = []
        if script.async_:
            flags.append("async")
        if script.defer:
            flags.append("defer")
        if script.crossorigin:
            flags.append(f"crossorigin={script.crossorigin}")
        table.add_row(
            str(i),
            escape(script.uri or ""),
            script.position.value,
            escape(", ".join(flags)),
        )
    return table


def resolved_payload(styles: Sequence[Style], scripts: Sequence[Script]) -> Dict[str, List[Dict[str, Any]]]:
    """JSON-ready form of a resolved group."""
    return {
        "styles": [
            {
                "href": style.uri,
                "media": style.media,
                "direction": style.direction.value if style.direction else None,
                "crossorigin": style.crossorigin,
                "disabled": style.disabled,
            }
            for style in styles
        ],
        "scripts": [
            {
                "src": script.uri,
                "position": script.position.value,
                "async": script.async_,
                "defer": script.defer,
                "crossorigin": script.crossorigin,
            }
            for script in scripts
        ],
    }
