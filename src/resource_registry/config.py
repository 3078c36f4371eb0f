"""Configuration loading and logging setup.

Settings are read from the ``registry:`` section of
``resource-registry.yaml`` in the working directory (or an explicit path).
A missing or malformed file falls back to defaults. The
``RESOURCE_REGISTRY_LOG_LEVEL`` environment variable overrides the
configured log level.

Example file::

    registry:
      log_level: DEBUG
      default_required: false
      console_width: 100
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import ruamel.yaml
from ruamel.yaml.error import YAMLError
from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "resource-registry.yaml"
LOG_LEVEL_ENV_VAR = "RESOURCE_REGISTRY_LOG_LEVEL"

_VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class RegistryConfig:
    """Effective settings for the registry tooling."""
    log_level: str = "WARNING"
    default_required: bool = True  # for manifest orderings that omit ``required``
    console_width: int = 120


def _normalize_level(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    level = value.strip().upper()
    return level if level in _VALID_LEVELS else None


def _apply_section(config: RegistryConfig, section: dict[str, Any], source: Path) -> None:
    if "log_level" in section:
        level = _normalize_level(section["log_level"])
        if level is None:
            logger.warning("Ignoring invalid log_level %r in %s", section["log_level"], source)
        else:
            config.log_level = level
    if "default_required" in section:
        value = section["default_required"]
        if isinstance(value, bool):
            config.default_required = value
        else:
            logger.warning("Ignoring non-boolean default_required %r in %s", value, source)
    if "console_width" in section:
        value = section["console_width"]
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            config.console_width = value
        else:
            logger.warning("Ignoring invalid console_width %r in %s", value, source)


def load_config(path: Optional[Path] = None) -> RegistryConfig:
    """Load configuration, falling back to defaults.

    Args:
        path: Config file to read. Defaults to ``resource-registry.yaml`` in
            the current directory.

    Returns:
        The effective configuration, environment overrides applied
    """
    config = RegistryConfig()
    config_path = path if path is not None else Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        yaml = ruamel.yaml.YAML(typ="safe")
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.load(f)
        except (OSError, YAMLError) as exc:
            logger.warning("Could not read %s, using defaults: %s", config_path, exc)
            data = None
        section = data.get("registry") if isinstance(data, dict) else None
        if isinstance(section, dict):
            _apply_section(config, section, config_path)
        elif section is not None:
            logger.warning("Ignoring non-mapping 'registry' section in %s", config_path)

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        level = _normalize_level(env_level)
        if level is None:
            logger.warning("Ignoring invalid %s=%r", LOG_LEVEL_ENV_VAR, env_level)
        else:
            config.log_level = level

    return config


def configure_logging(level: str, console: Optional[Console] = None) -> None:
    """Route ``resource_registry`` logs through a Rich handler.

    Library code never calls this; it is for command-line entry points.
    Calling it again replaces the previously installed handler.
    """
    package_logger = logging.getLogger("resource_registry")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    package_logger.addHandler(handler)
    package_logger.setLevel(_normalize_level(level) or "WARNING")
