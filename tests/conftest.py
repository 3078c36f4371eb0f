from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from resource_registry.config import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep env overrides and handlers installed by the CLI out of other tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    package_logger = logging.getLogger("resource_registry")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture()
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to a manifest file under tmp_path."""

    def _write(text: str, name: str = "registry.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
