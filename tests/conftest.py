from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click runner configured for CLI smoke tests."""

    return CliRunner()


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Strip environment variables that change colour, width, or config discovery."""

    for name in ("TERMGRID_CONFIG", "NO_COLOR", "FORCE_COLOR", "TERMGRID_FORCE_256_COLOR", "COLUMNS"):
        monkeypatch.delenv(name, raising=False)
    config_home = tmp_path / "config-home"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """The CLI reconfigures root logging; put it back after each test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
