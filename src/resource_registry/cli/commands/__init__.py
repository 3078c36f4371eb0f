"""CLI command modules for resource-registry."""

import typer

from .resolve import check, resolve


def register_commands(app: typer.Typer) -> None:
    """Attach every command to the root app."""
    app.command()(resolve)
    app.command()(check)


__all__ = ["register_commands"]
