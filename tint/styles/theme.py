"""Textual theme built from a resolved tint theme."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.theme import Theme as TextualTheme

from tint.colors import ColorSpec, to_hex
from tint.themes import Theme

if TYPE_CHECKING:
    from textual.app import App

TINT_THEME_NAME = "tint"
# Textual needs a primary color; used when the theme leaves it at the terminal default
FALLBACK_PRIMARY = "#0178d4"


def _hex_or(spec: ColorSpec, fallback: str | None) -> str | None:
    """Get a hex color, or the fallback for the terminal default color.

    Args:
        spec: Parsed color.
        fallback: Value used when spec is ``reset``.

    Returns:
        Hex color string, or fallback.
    """
    value = to_hex(spec)
    return value if value is not None else fallback


def to_textual_theme(theme: Theme, name: str = TINT_THEME_NAME) -> TextualTheme:
    """Build a Textual Theme from a resolved theme.

    ``reset`` slots are left unset so Textual uses its own defaults, except
    for the primary color which falls back to ``FALLBACK_PRIMARY``.

    Args:
        theme: Resolved theme.
        name: Name to register the theme under.

    Returns:
        A Textual Theme instance.
    """
    primary = to_hex(theme.primary) or FALLBACK_PRIMARY
    primary_text = _hex_or(theme.primary_text, None)
    inactive = _hex_or(theme.inactive, None)
    border = _hex_or(theme.border, None)

    variables: dict[str, str] = {}
    if border is not None:
        variables["border"] = border
    if inactive is not None:
        variables["text-muted"] = inactive
        variables["text-disabled"] = inactive
    if primary_text is not None:
        variables["text-on-success"] = primary_text
        variables["text-on-error"] = primary_text
        variables["text-on-accent"] = primary_text

    return TextualTheme(
        name=name,
        primary=primary,
        secondary=_hex_or(theme.secondary, None),
        accent=primary,
        warning=_hex_or(theme.secondary, None),
        error=_hex_or(theme.error, None),
        success=_hex_or(theme.success, None),
        foreground=_hex_or(theme.text, None),
        background=_hex_or(theme.background, None),
        dark=True,
        variables=variables,
    )


def apply_theme(app: App[object], theme: Theme, name: str = TINT_THEME_NAME) -> TextualTheme:
    """Register a resolved theme with a Textual app and make it active.

    Args:
        app: The running Textual app.
        theme: Resolved theme.
        name: Name to register the theme under.

    Returns:
        The registered Textual theme.
    """
    textual_theme = to_textual_theme(theme, name)
    app.register_theme(textual_theme)
    app.theme = name
    return textual_theme
