"""Styles derived from a resolved theme."""

from tint.styles.styles import Styles, build_styles
from tint.styles.theme import TINT_THEME_NAME, apply_theme, to_textual_theme

__all__ = ["TINT_THEME_NAME", "Styles", "apply_theme", "build_styles", "to_textual_theme"]
