"""Command-line interface for inspecting registry manifests."""

from pathlib import Path
from typing import Optional

import typer

from resource_registry.config import configure_logging, load_config

from .commands import register_commands

app = typer.Typer(
    name="resource-registry",
    help="Resolve the ordering of page styles and scripts declared in registry manifests",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file (defaults to ./resource-registry.yaml)",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    config = load_config(config_path)
    if verbose:
        config.log_level = "DEBUG"
    configure_logging(config.log_level)
    ctx.obj = config


register_commands(app)


def main() -> None:
    app()


__all__ = ["app", "main"]
