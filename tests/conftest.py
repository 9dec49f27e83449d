"""Shared test fixtures for tint."""

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tint.registry import reset_registry


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration directory at a temporary directory.

    Returns:
        Path to the configuration directory.
    """
    monkeypatch.setenv("TINT_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_config(config_dir: Path) -> Callable[[object], Path]:
    """Write a configuration object to theme.json in the config directory.

    Returns:
        A function taking the object to serialize and returning the file path.
    """

    def _write(data: object) -> Path:
        path = config_dir / "theme.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def fresh_registry() -> Iterator[None]:
    """Drop the process-wide registry around each test."""
    reset_registry()
    yield
    reset_registry()
