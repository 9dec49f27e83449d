"""Tests for styles derived from a theme."""

from dataclasses import replace
from unittest.mock import MagicMock

from rich import box
from rich.color import Color as RichColor
from textual.theme import Theme as TextualTheme

from tint.colors import AnsiIndex, Named, Rgb
from tint.styles import TINT_THEME_NAME, apply_theme, build_styles, to_textual_theme
from tint.styles.theme import FALLBACK_PRIMARY
from tint.themes import DEFAULT_THEME


class TestBuildStyles:
    """Tests for build_styles."""

    def test_uses_theme_colors(self) -> None:
        theme = replace(DEFAULT_THEME, primary=Rgb(255, 0, 0), error=AnsiIndex(160))
        styles = build_styles(theme)
        assert styles.tab.highlight.color == RichColor.from_rgb(255, 0, 0)
        assert styles.tab.highlight.bold
        assert styles.tab.highlight.underline
        assert styles.text.error.color == RichColor.from_ansi(160)
        assert styles.status_code.error.bgcolor == RichColor.from_ansi(160)

    def test_syntax_styles_are_foreground_only(self) -> None:
        theme = replace(DEFAULT_THEME, syntax=replace(DEFAULT_THEME.syntax, comment=Rgb(1, 2, 3)))
        styles = build_styles(theme)
        assert styles.syntax.comment.color == RichColor.from_rgb(1, 2, 3)
        assert styles.syntax.comment.bgcolor is None

    def test_pane_border_depends_on_focus(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert styles.pane.border_for(True) == (box.DOUBLE, styles.pane.border_selected)
        assert styles.pane.border_for(False) == (box.ROUNDED, styles.pane.border)

    def test_reset_background_is_default_color(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert styles.pane.generic.bgcolor == RichColor.default()
        assert styles.table.background_color == RichColor.default()

    def test_edited_text_is_italic_text_color(self) -> None:
        theme = replace(DEFAULT_THEME, text=Rgb(10, 20, 30), secondary=Named("magenta"))
        edited = build_styles(theme).text.edited
        assert edited.color == RichColor.from_rgb(10, 20, 30)
        assert edited.italic

    def test_template_preview_uses_secondary(self) -> None:
        theme = replace(DEFAULT_THEME, secondary=Rgb(255, 255, 0), error=Named("red"))
        preview = build_styles(theme).template_preview
        assert preview.text.color == RichColor.from_rgb(255, 255, 0)
        assert preview.text.underline
        assert preview.error.bgcolor == RichColor.from_ansi(1)

    def test_menu_and_modal_borders(self) -> None:
        styles = build_styles(DEFAULT_THEME)
        assert styles.menu.border_box is box.ROUNDED
        assert styles.modal.border_box is box.DOUBLE

    def test_form_titles(self) -> None:
        theme = replace(DEFAULT_THEME, primary=Rgb(1, 1, 1))
        form = build_styles(theme).form
        assert form.title.underline
        assert not form.title.bold
        assert form.title_highlight.color == RichColor.from_rgb(1, 1, 1)
        assert form.title_highlight.bold

    def test_table_text_has_no_background(self) -> None:
        theme = replace(DEFAULT_THEME, background=Rgb(16, 16, 16))
        styles = build_styles(theme)
        assert styles.table.text.bgcolor is None
        assert styles.table.background_color == RichColor.from_rgb(16, 16, 16)
        assert styles.text_window.gutter.color == RichColor.from_ansi(8)


class TestToTextualTheme:
    """Tests for to_textual_theme."""

    def test_carries_resolved_hex(self) -> None:
        theme = replace(DEFAULT_THEME, primary=Rgb(255, 255, 0), background=Rgb(16, 16, 16))
        textual_theme = to_textual_theme(theme)
        assert isinstance(textual_theme, TextualTheme)
        assert textual_theme.name == TINT_THEME_NAME
        assert textual_theme.primary == "#ffff00"
        assert textual_theme.background == "#101010"

    def test_reset_slots_are_unset(self) -> None:
        textual_theme = to_textual_theme(DEFAULT_THEME, name="custom")
        assert textual_theme.name == "custom"
        assert textual_theme.background is None
        assert textual_theme.foreground is None
        assert "border" not in textual_theme.variables

    def test_reset_primary_falls_back(self) -> None:
        textual_theme = to_textual_theme(replace(DEFAULT_THEME, primary=Named("reset")))
        assert textual_theme.primary == FALLBACK_PRIMARY

    def test_apply_theme_registers_and_activates(self) -> None:
        app = MagicMock()
        textual_theme = apply_theme(app, DEFAULT_THEME)
        app.register_theme.assert_called_once_with(textual_theme)
        assert app.theme == TINT_THEME_NAME
