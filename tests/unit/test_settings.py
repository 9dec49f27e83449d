"""Tests for configuration file loading."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from tint.errors import ConfigError, ThemeError
from tint.settings import get_config_dir, get_config_path, load_config_document, load_theme_document


class TestGetConfigDir:
    """Tests for get_config_dir."""

    def test_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TINT_CONFIG_DIR", str(tmp_path))
        assert get_config_dir() == tmp_path

    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TINT_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "tint"

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TINT_CONFIG_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "tint"

    def test_config_path(self, config_dir: Path) -> None:
        assert get_config_path() == config_dir / "theme.json"


class TestLoadConfigDocument:
    """Tests for load_config_document."""

    def test_missing_file_is_empty(self, config_dir: Path) -> None:
        assert load_config_document() == {}

    def test_reads_file(self, write_config: Callable[[object], Path]) -> None:
        write_config({"theme": {"primary_color": "green"}, "other": 1})
        assert load_config_document() == {"theme": {"primary_color": "green"}, "other": 1}

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"theme": {}}), encoding="utf-8")
        assert load_config_document(path) == {"theme": {}}

    def test_invalid_json(self, config_dir: Path) -> None:
        (config_dir / "theme.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config_document()

    def test_non_object(self, write_config: Callable[[object], Path]) -> None:
        write_config(["theme"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config_document()

    def test_invalid_utf8(self, config_dir: Path) -> None:
        (config_dir / "theme.json").write_bytes(b"\xff\xfe")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config_document()

    def test_invalid_utf8_inside_string(self, config_dir: Path) -> None:
        (config_dir / "theme.json").write_bytes(b'{"theme": {"primary_color": "\xff"}}')
        with pytest.raises(ConfigError):
            load_config_document()

    def test_unreadable(self, config_dir: Path) -> None:
        (config_dir / "theme.json").mkdir()
        with pytest.raises(ConfigError):
            load_config_document()

    def test_config_error_is_theme_error(self) -> None:
        assert issubclass(ConfigError, ThemeError)


class TestLoadThemeDocument:
    """Tests for load_theme_document."""

    def test_returns_theme_value(self, write_config: Callable[[object], Path]) -> None:
        write_config({"theme": {"text_color": "white"}})
        assert load_theme_document() == {"text_color": "white"}

    def test_absent_theme_key(self, write_config: Callable[[object], Path]) -> None:
        write_config({"other": True})
        assert load_theme_document() is None
