"""Manifest resolution commands.

Commands:
    resolve  -- Print the resolved order of the active (or a named) group
    check    -- Resolve every group in a manifest and report failures
"""

import json as json_lib
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from resource_registry.config import RegistryConfig, load_config
from resource_registry.exceptions import RegistryError
from resource_registry.manifest import load_manifest
from resource_registry.registry import merge_active

from ..ui import resolved_payload, scripts_table, styles_table

logger = logging.getLogger(__name__)


def _config(ctx: typer.Context) -> RegistryConfig:
    if isinstance(ctx.obj, RegistryConfig):
        return ctx.obj
    return load_config()


def resolve(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., help="Registry manifest (YAML)"),
    group: Optional[str] = typer.Option(
        None,
        "--group",
        "-g",
        help="Resolve only this group instead of the merged active groups",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print styles and scripts in their resolved order."""
    config = _config(ctx)
    console = Console(width=config.console_width)

    try:
        registry = load_manifest(manifest).to_registry(config.default_required)
        if group is not None:
            target = registry.get_group(group, create=False)
            if target is None:
                console.print(f"[red]Error:[/red] Group not found: {escape(group)}")
                raise typer.Exit(1)
        else:
            target = merge_active([registry])
        styles = target.styles.resolve()
        scripts = target.scripts.resolve()
    except RegistryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json_lib.dumps(resolved_payload(styles, scripts), indent=2))
        return

    label = group if group is not None else "active groups"
    console.print(styles_table(styles, title=f"Styles ({escape(label)})"))
    console.print(scripts_table(scripts, title=f"Scripts ({escape(label)})"))


def check(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., help="Registry manifest (YAML)"),
) -> None:
    """Resolve every group and report which ones fail."""
    config = _config(ctx)
    console = Console(width=config.console_width)

    try:
        registry = load_manifest(manifest).to_registry(config.default_required)
    except RegistryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    table = Table(title="Group Resolution", show_lines=True)
    table.add_column("Group", style="bold")
    table.add_column("Styles", justify="right")
    table.add_column("Scripts", justify="right")
    table.add_column("Active")
    table.add_column("Status")

    activations = registry.activations
    failures = 0
    for name, group in registry.groups.items():
        active = "yes" if activations.get(name) else "no"
        try:
            styles = group.styles.resolve()
            scripts = group.scripts.resolve()
        except RegistryError as exc:
            failures += 1
            logger.debug("Group %s failed to resolve: %s", name, exc)
            table.add_row(
                escape(str(name)), "-", "-", active, f"[red]{escape(str(exc))}[/red]"
            )
            continue
        table.add_row(escape(str(name)), str(len(styles)), str(len(scripts)), active, "[green]OK[/green]")

    console.print(table)
    if failures:
        console.print(f"[red]{failures} group(s) failed to resolve[/red]")
        raise typer.Exit(1)
    console.print("[green]All groups resolved[/green]")
