"""tint - theme resolution for terminal UIs."""

from tint.colors import AnsiIndex, ColorSpec, Named, Rgb, parse_color
from tint.errors import ConfigError, InvalidColor, InvalidColorReason, ThemeError, UnknownField
from tint.registry import ThemeRegistry, current_theme, init_theme, reload_theme
from tint.themes import (
    DEFAULT_THEME,
    PartialSyntaxTheme,
    PartialTheme,
    SyntaxTheme,
    Theme,
    load_theme,
    parse_theme_document,
    resolve_theme,
    validate_theme_document,
)

__all__ = [
    "DEFAULT_THEME",
    "AnsiIndex",
    "ColorSpec",
    "ConfigError",
    "InvalidColor",
    "InvalidColorReason",
    "Named",
    "PartialSyntaxTheme",
    "PartialTheme",
    "Rgb",
    "SyntaxTheme",
    "Theme",
    "ThemeError",
    "ThemeRegistry",
    "UnknownField",
    "current_theme",
    "init_theme",
    "load_theme",
    "parse_color",
    "parse_theme_document",
    "reload_theme",
    "resolve_theme",
    "validate_theme_document",
]
