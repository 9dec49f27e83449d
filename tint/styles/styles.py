"""Concrete rich styles derived from a resolved theme.

The theme only exposes a handful of colors; the styles for each component are
worked out from those here. Styles are grouped by component.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.box import Box
from rich.color import Color
from rich.style import Style

from tint.colors import to_rich_color
from tint.themes import Theme


@dataclass(frozen=True)
class FormStyles:
    """Styles for input form field titles."""

    title: Style
    title_highlight: Style


@dataclass(frozen=True)
class ListStyles:
    """Styles for list items."""

    highlight: Style
    # Highlighted item while the list is not focused
    highlight_inactive: Style
    disabled: Style
    item: Style


@dataclass(frozen=True)
class MenuStyles:
    """Styles for the action menu."""

    border: Style
    border_box: Box
    normal: Style


@dataclass(frozen=True)
class ModalStyles:
    """Styles for modal dialogs."""

    border: Style
    border_box: Box
    normal: Style


@dataclass(frozen=True)
class PaneStyles:
    """Styles for panes."""

    border: Style
    border_selected: Style
    border_box: Box
    border_box_selected: Box
    generic: Style

    def border_for(self, has_focus: bool) -> tuple[Box, Style]:
        """Get the box and style of a pane border.

        Args:
            has_focus: Whether the pane is selected.

        Returns:
            (box, style) for the border.
        """
        if has_focus:
            return self.border_box_selected, self.border_selected
        return self.border_box, self.border


@dataclass(frozen=True)
class StatusCodeStyles:
    """Styles for success/error status badges."""

    success: Style
    error: Style


@dataclass(frozen=True)
class TabStyles:
    """Styles for tab labels."""

    disabled: Style
    highlight: Style


@dataclass(frozen=True)
class TableStyles:
    """Styles for tables."""

    header: Style
    text: Style
    alt: Style
    disabled: Style
    highlight: Style
    title: Style
    background_color: Color


@dataclass(frozen=True)
class TemplatePreviewStyles:
    """Styles for rendered template previews."""

    text: Style
    error: Style


@dataclass(frozen=True)
class TextStyles:
    """General text styles."""

    highlight: Style
    # De-emphasized informational text
    hint: Style
    primary: Style
    # Values overridden during the current session
    edited: Style
    error: Style
    title: Style


@dataclass(frozen=True)
class TextBoxStyles:
    """Styles for text inputs."""

    text: Style
    cursor: Style
    placeholder: Style
    invalid: Style


@dataclass(frozen=True)
class TextWindowStyles:
    """Styles for scrollable text areas."""

    gutter: Style


@dataclass(frozen=True)
class SyntaxStyles:
    """Foreground-only styles for syntax highlighting."""

    comment: Style
    builtin: Style
    escape: Style
    number: Style
    string: Style
    special: Style


@dataclass(frozen=True)
class Styles:
    """All component styles for one theme."""

    form: FormStyles
    list: ListStyles
    menu: MenuStyles
    modal: ModalStyles
    pane: PaneStyles
    status_code: StatusCodeStyles
    tab: TabStyles
    table: TableStyles
    template_preview: TemplatePreviewStyles
    text: TextStyles
    text_box: TextBoxStyles
    text_window: TextWindowStyles
    syntax: SyntaxStyles


def build_styles(theme: Theme) -> Styles:
    """Derive component styles from a theme.

    Args:
        theme: Resolved theme.

    Returns:
        Styles for every component.
    """
    primary = to_rich_color(theme.primary)
    primary_text = to_rich_color(theme.primary_text)
    secondary = to_rich_color(theme.secondary)
    success = to_rich_color(theme.success)
    error = to_rich_color(theme.error)
    inactive = to_rich_color(theme.inactive)
    background = to_rich_color(theme.background)
    border = to_rich_color(theme.border)
    text = to_rich_color(theme.text)
    syntax = theme.syntax

    return Styles(
        form=FormStyles(
            title=Style(color=text, underline=True),
            title_highlight=Style(color=primary, bold=True, underline=True),
        ),
        list=ListStyles(
            highlight=Style(color=primary_text, bgcolor=primary, bold=True),
            highlight_inactive=Style(color=primary_text, bgcolor=inactive, bold=True),
            disabled=Style(color=inactive, bgcolor=background),
            item=Style(color=text),
        ),
        menu=MenuStyles(
            border=Style(color=primary, bgcolor=background),
            border_box=box.ROUNDED,
            normal=Style(color=text, bgcolor=background),
        ),
        modal=ModalStyles(
            border=Style(color=primary, bgcolor=background),
            border_box=box.DOUBLE,
            normal=Style(color=text, bgcolor=background),
        ),
        pane=PaneStyles(
            border=Style(color=border),
            border_selected=Style(color=primary, bold=True),
            border_box=box.ROUNDED,
            border_box_selected=box.DOUBLE,
            generic=Style(color=text, bgcolor=background),
        ),
        status_code=StatusCodeStyles(
            success=Style(color=primary_text, bgcolor=success),
            error=Style(color=primary_text, bgcolor=error),
        ),
        tab=TabStyles(
            disabled=Style(color=inactive),
            highlight=Style(color=primary, bold=True, underline=True),
        ),
        table=TableStyles(
            header=Style(color=text, bold=True, underline=True),
            text=Style(color=text),
            alt=Style(color=primary_text, bgcolor=inactive),
            disabled=Style(color=inactive),
            highlight=Style(color=primary_text, bgcolor=primary, bold=True, underline=True),
            title=Style(color=text, bold=True),
            background_color=background,
        ),
        template_preview=TemplatePreviewStyles(
            text=Style(color=secondary, underline=True),
            error=Style(color=primary_text, bgcolor=error),
        ),
        text=TextStyles(
            highlight=Style(color=primary_text, bgcolor=primary),
            hint=Style(color=inactive),
            primary=Style(color=primary),
            edited=Style(color=text, italic=True),
            error=Style(color=error),
            title=Style(color=text, bold=True),
        ),
        text_box=TextBoxStyles(
            text=Style(color=primary_text, bgcolor=inactive),
            cursor=Style(color=inactive, bgcolor=primary_text),
            placeholder=Style(color=text),
            invalid=Style(color=primary_text, bgcolor=error),
        ),
        text_window=TextWindowStyles(gutter=Style(color=inactive)),
        syntax=SyntaxStyles(
            comment=Style(color=to_rich_color(syntax.comment)),
            builtin=Style(color=to_rich_color(syntax.builtin)),
            escape=Style(color=to_rich_color(syntax.escape)),
            number=Style(color=to_rich_color(syntax.number)),
            string=Style(color=to_rich_color(syntax.string)),
            special=Style(color=to_rich_color(syntax.special)),
        ),
    )
