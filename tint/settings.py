"""Locating and reading the theme configuration file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from tint.errors import ConfigError
from tint.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = "theme.json"
THEME_KEY = "theme"


def get_config_dir() -> Path:
    """Get the directory used for configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("TINT_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "tint"

    return Path.home() / ".config" / "tint"


def get_config_path() -> Path:
    """Get the full path to the configuration file.

    Returns:
        Path to the configuration JSON file.
    """
    return get_config_dir() / CONFIG_FILE_NAME


def load_config_document(path: Path | None = None) -> dict[str, Any]:
    """Read the configuration file.

    A missing file is not an error: it yields an empty document, so every
    theme slot falls back to its default.

    Args:
        path: File to read. Defaults to the configured location.

    Returns:
        The decoded top-level configuration object.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does not
            hold a JSON object.
    """
    config_path = path if path is not None else get_config_path()
    if not config_path.exists():
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return {}

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to parse configuration file {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a JSON object")

    logger.debug(f"Loaded configuration from {config_path}")
    return raw


def load_theme_document(path: Path | None = None) -> Any:
    """Read the raw theme document from the configuration file.

    Args:
        path: File to read. Defaults to the configured location.

    Returns:
        The value of the ``theme`` key, or None when it is absent.

    Raises:
        ConfigError: If the configuration file is unusable.
    """
    return load_config_document(path).get(THEME_KEY)
