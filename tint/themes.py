"""Theme schema and resolution.

A theme document is a loose mapping as written by the user::

    {
        "primary_color": "green",
        "syntax_hightlighting": {"comment_color": "#5c6370"},
    }

Every field is optional. The document is parsed into a ``PartialTheme``, then
resolved onto the built-in defaults to produce a complete ``Theme``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tint.colors import AnsiIndex, ColorSpec, Named, color_schema, parse_color
from tint.errors import InvalidColor, InvalidColorReason, ThemeError, UnknownField
from tint.logger import get_logger

logger = get_logger(__name__)

ROOT_PATH = "theme"
# The key is misspelled in existing config files, so it stays that way.
SYNTAX_KEY = "syntax_hightlighting"
KEY_SUFFIX = "_color"

THEME_FIELDS: tuple[str, ...] = (
    "primary",
    "primary_text",
    "secondary",
    "success",
    "error",
    "inactive",
    "background",
    "border",
    "text",
)
SYNTAX_FIELDS: tuple[str, ...] = ("comment", "builtin", "escape", "number", "string", "special")


@dataclass(frozen=True)
class SyntaxTheme:
    """Colors used for syntax highlighting."""

    comment: ColorSpec
    builtin: ColorSpec
    escape: ColorSpec
    number: ColorSpec
    string: ColorSpec
    special: ColorSpec


@dataclass(frozen=True)
class Theme:
    """A fully resolved theme. Every slot holds a color."""

    primary: ColorSpec
    primary_text: ColorSpec
    secondary: ColorSpec
    success: ColorSpec
    error: ColorSpec
    inactive: ColorSpec
    background: ColorSpec
    border: ColorSpec
    text: ColorSpec
    syntax: SyntaxTheme

    def to_partial(self) -> PartialTheme:
        """Convert to a partial theme with every field set.

        Returns:
            A fully populated PartialTheme.
        """
        return PartialTheme.from_theme(self)

    def to_mapping(self) -> dict[str, Any]:
        """Serialize to a theme document.

        Returns:
            Document with every key present, colors as tokens.
        """
        return self.to_partial().to_mapping()


@dataclass(frozen=True)
class PartialSyntaxTheme:
    """User-supplied syntax colors; unset slots are None."""

    comment: ColorSpec | None = None
    builtin: ColorSpec | None = None
    escape: ColorSpec | None = None
    number: ColorSpec | None = None
    string: ColorSpec | None = None
    special: ColorSpec | None = None


@dataclass(frozen=True)
class PartialTheme:
    """User-supplied theme before defaults are applied."""

    primary: ColorSpec | None = None
    primary_text: ColorSpec | None = None
    secondary: ColorSpec | None = None
    success: ColorSpec | None = None
    error: ColorSpec | None = None
    inactive: ColorSpec | None = None
    background: ColorSpec | None = None
    border: ColorSpec | None = None
    text: ColorSpec | None = None
    syntax: PartialSyntaxTheme = field(default_factory=PartialSyntaxTheme)

    @classmethod
    def from_theme(cls, theme: Theme) -> PartialTheme:
        """Build a partial theme that sets every field of a resolved theme.

        Args:
            theme: Resolved theme.

        Returns:
            PartialTheme holding the same colors.
        """
        syntax = PartialSyntaxTheme(**{name: getattr(theme.syntax, name) for name in SYNTAX_FIELDS})
        return cls(**{name: getattr(theme, name) for name in THEME_FIELDS}, syntax=syntax)

    def to_mapping(self) -> dict[str, Any]:
        """Serialize the set fields back into a theme document.

        Returns:
            Document containing only the fields that are set.
        """
        document: dict[str, Any] = {}
        for name in THEME_FIELDS:
            value = getattr(self, name)
            if value is not None:
                document[f"{name}{KEY_SUFFIX}"] = str(value)
        syntax: dict[str, str] = {}
        for name in SYNTAX_FIELDS:
            value = getattr(self.syntax, name)
            if value is not None:
                syntax[f"{name}{KEY_SUFFIX}"] = str(value)
        if syntax:
            document[SYNTAX_KEY] = syntax
        return document


DEFAULT_SYNTAX_THEME = SyntaxTheme(
    comment=Named("gray"),
    builtin=Named("blue"),
    escape=Named("green"),
    number=Named("cyan"),
    string=Named("lightgreen"),
    special=Named("green"),
)

DEFAULT_THEME = Theme(
    primary=Named("blue"),
    primary_text=Named("white"),
    secondary=Named("yellow"),
    success=Named("green"),
    error=Named("red"),
    inactive=Named("darkgray"),
    background=Named("reset"),
    border=Named("reset"),
    text=Named("reset"),
    syntax=DEFAULT_SYNTAX_THEME,
)


def _parse_value(value: object, field_path: str) -> ColorSpec | None:
    """Parse a single leaf value of a theme document.

    Args:
        value: Raw value from the document.
        field_path: Dotted path of the field, for error reporting.

    Returns:
        The parsed color, or None when the value is unset.

    Raises:
        InvalidColor: If the value is not a valid color.
    """
    if value is None:
        return None
    # bool is a subclass of int and must not be read as an index
    if isinstance(value, bool):
        raise InvalidColor(value, InvalidColorReason.UNRECOGNIZED, field_path)
    if isinstance(value, int):
        try:
            return AnsiIndex(value)
        except ValueError:
            raise InvalidColor(value, InvalidColorReason.OUT_OF_RANGE, field_path) from None
    if isinstance(value, str):
        try:
            return parse_color(value)
        except InvalidColor as exc:
            raise exc.at(field_path) from None
    raise InvalidColor(value, InvalidColorReason.UNRECOGNIZED, field_path)


class _ErrorCollector:
    """Either raises the first error or collects all of them."""

    def __init__(self, aggregate: bool) -> None:
        self.aggregate = aggregate
        self.errors: list[ThemeError] = []

    def report(self, error: ThemeError) -> None:
        if not self.aggregate:
            raise error
        self.errors.append(error)


def _parse_section(
    document: Mapping[str, object],
    names: tuple[str, ...],
    path: str,
    *,
    strict: bool,
    collector: _ErrorCollector,
    nested: tuple[str, ...] = (),
) -> dict[str, ColorSpec | None]:
    """Parse the color fields of one mapping level.

    Args:
        document: Mapping holding the fields.
        names: Slot names expected at this level.
        path: Dotted path of the mapping.
        strict: Whether unknown keys are errors.
        collector: Receives parse errors.
        nested: Keys handled by the caller, not treated as unknown.

    Returns:
        Mapping of slot name to parsed color (None when unset or invalid).
    """
    values: dict[str, ColorSpec | None] = {}
    for name in names:
        key = f"{name}{KEY_SUFFIX}"
        try:
            values[name] = _parse_value(document.get(key), f"{path}.{key}")
        except InvalidColor as exc:
            collector.report(exc)
            values[name] = None

    known = {f"{name}{KEY_SUFFIX}" for name in names} | set(nested)
    for key in document:
        if key in known:
            continue
        key_path = f"{path}.{key}"
        if strict:
            collector.report(UnknownField(key_path))
        else:
            logger.warning(f"Ignoring unknown theme field {key_path}")
    return values


def _parse_document(
    document: Mapping[str, object] | None,
    *,
    strict: bool,
    collector: _ErrorCollector,
) -> PartialTheme:
    if document is None:
        return PartialTheme()
    if not isinstance(document, Mapping):
        collector.report(ThemeError(f"expected a mapping, got {type(document).__name__}", ROOT_PATH))
        return PartialTheme()

    top = _parse_section(
        document,
        THEME_FIELDS,
        ROOT_PATH,
        strict=strict,
        collector=collector,
        nested=(SYNTAX_KEY,),
    )

    syntax = PartialSyntaxTheme()
    raw_syntax = document.get(SYNTAX_KEY)
    syntax_path = f"{ROOT_PATH}.{SYNTAX_KEY}"
    if isinstance(raw_syntax, Mapping):
        syntax = PartialSyntaxTheme(
            **_parse_section(raw_syntax, SYNTAX_FIELDS, syntax_path, strict=strict, collector=collector)
        )
    elif raw_syntax is not None:
        collector.report(ThemeError(f"expected a mapping, got {type(raw_syntax).__name__}", syntax_path))

    return PartialTheme(**top, syntax=syntax)


def parse_theme_document(document: Mapping[str, object] | None, *, strict: bool = True) -> PartialTheme:
    """Parse a theme document, stopping at the first error.

    Args:
        document: Raw theme mapping. None is treated as an empty document.
        strict: Reject unknown keys when True, ignore them otherwise.

    Returns:
        The parsed partial theme.

    Raises:
        ThemeError: On the first invalid color, unknown key or malformed section,
            in field order.
    """
    return _parse_document(document, strict=strict, collector=_ErrorCollector(aggregate=False))


def validate_theme_document(document: Mapping[str, object] | None, *, strict: bool = True) -> list[ThemeError]:
    """Check a theme document and report every error.

    Args:
        document: Raw theme mapping. None is treated as an empty document.
        strict: Reject unknown keys when True, ignore them otherwise.

    Returns:
        All errors found, in field order. Empty when the document is valid.
    """
    collector = _ErrorCollector(aggregate=True)
    _parse_document(document, strict=strict, collector=collector)
    return collector.errors


def _pick(value: ColorSpec | None, default: ColorSpec) -> ColorSpec:
    return default if value is None else value


def resolve_theme(partial: PartialTheme | Theme, defaults: Theme = DEFAULT_THEME) -> Theme:
    """Merge a partial theme onto defaults.

    Each slot set in the partial theme wins; every other slot comes from the
    defaults. Syntax slots are merged one by one.

    Args:
        partial: User-supplied theme. A resolved Theme is returned unchanged.
        defaults: Theme supplying unset slots.

    Returns:
        The resolved theme.
    """
    if isinstance(partial, Theme):
        return partial

    syntax = SyntaxTheme(
        **{name: _pick(getattr(partial.syntax, name), getattr(defaults.syntax, name)) for name in SYNTAX_FIELDS}
    )
    return Theme(
        **{name: _pick(getattr(partial, name), getattr(defaults, name)) for name in THEME_FIELDS},
        syntax=syntax,
    )


def load_theme(
    document: Mapping[str, object] | None,
    *,
    strict: bool = True,
    defaults: Theme = DEFAULT_THEME,
) -> Theme:
    """Parse a theme document and resolve it onto the defaults.

    Args:
        document: Raw theme mapping, or None for the defaults.
        strict: Reject unknown keys when True.
        defaults: Theme supplying unset slots.

    Returns:
        The resolved theme.

    Raises:
        ThemeError: If the document is invalid.
    """
    return resolve_theme(parse_theme_document(document, strict=strict), defaults)


def theme_schema() -> dict[str, Any]:
    """Build a JSON schema for the theme document.

    Returns:
        JSON schema dictionary.
    """
    color_ref = {"$ref": "#/$defs/Color"}
    syntax_properties = {f"{name}{KEY_SUFFIX}": color_ref for name in SYNTAX_FIELDS}
    properties: dict[str, Any] = {f"{name}{KEY_SUFFIX}": color_ref for name in THEME_FIELDS}
    properties[SYNTAX_KEY] = {
        "type": "object",
        "properties": syntax_properties,
        "additionalProperties": False,
    }
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "Theme",
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
        "$defs": {"Color": color_schema()},
    }


def theme_fields(theme: Theme) -> list[tuple[str, ColorSpec]]:
    """List every slot of a theme with its document path.

    Args:
        theme: Resolved theme.

    Returns:
        (path, color) pairs in document order, syntax slots last.
    """
    rows = [(f"{name}{KEY_SUFFIX}", getattr(theme, name)) for name in THEME_FIELDS]
    rows.extend((f"{SYNTAX_KEY}.{name}{KEY_SUFFIX}", getattr(theme.syntax, name)) for name in SYNTAX_FIELDS)
    return rows
