"""Color tokens used in theme configuration.

A color token is one of:

- a color name (``blue``, ``LightGreen``, ``dark-gray``, ``reset``)
- a hex code (``#ffff00``)
- an ANSI palette index (``0`` to ``255``)

Usage:
    from tint.colors import parse_color, to_rich_color

    spec = parse_color("#ffff00")  # Rgb(r=255, g=255, b=0)
    style = Style(color=to_rich_color(spec))
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from rich.color import Color as RichColor

from tint.errors import InvalidColor, InvalidColorReason

# Named colors in ANSI order; the position is the ANSI index of the color.
# "reset" has no index and means the terminal's default color.
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "gray",
    "darkgray",
    "lightred",
    "lightgreen",
    "lightyellow",
    "lightblue",
    "lightmagenta",
    "lightcyan",
    "white",
    "reset",
)
RESET = "reset"

_NAME_ALIASES = {"grey": "gray", "darkgrey": "darkgray"}
_NAME_SEPARATORS = re.compile(r"[-_ ]")
HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
INDEX_PATTERN = re.compile(r"^[0-9]+$")
MAX_ANSI_INDEX = 255
MAX_RGB_COMPONENT = 255


@dataclass(frozen=True)
class Named:
    """One of the standard terminal colors, by name."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in COLOR_NAMES:
            raise ValueError(f"Unknown color name: {self.name!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Rgb:
    """A 24-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= MAX_RGB_COMPONENT:
                raise ValueError(f"RGB component out of range: {component}")

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class AnsiIndex:
    """A color from the 256-color terminal palette."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= MAX_ANSI_INDEX:
            raise ValueError(f"ANSI index out of range: {self.index}")

    def __str__(self) -> str:
        return str(self.index)


ColorSpec = Named | Rgb | AnsiIndex


def _normalize_name(token: str) -> str | None:
    """Map a token onto a canonical color name.

    Args:
        token: Stripped color token.

    Returns:
        The canonical name, or None when the token is not a color name.
    """
    candidate = _NAME_SEPARATORS.sub("", token.lower())
    candidate = _NAME_ALIASES.get(candidate, candidate)
    return candidate if candidate in COLOR_NAMES else None


def parse_color(token: str) -> ColorSpec:
    """Parse a color token.

    Args:
        token: A color name, ``#RRGGBB`` hex code or ANSI index.

    Returns:
        The parsed color.

    Raises:
        InvalidColor: If the token is not a valid color.
    """
    stripped = token.strip()

    name = _normalize_name(stripped)
    if name is not None:
        return Named(name)

    if stripped.startswith("#"):
        if not HEX_PATTERN.fullmatch(stripped):
            raise InvalidColor(token, InvalidColorReason.MALFORMED_HEX)
        return Rgb(
            r=int(stripped[1:3], 16),
            g=int(stripped[3:5], 16),
            b=int(stripped[5:7], 16),
        )

    if INDEX_PATTERN.fullmatch(stripped):
        index = int(stripped)
        if index > MAX_ANSI_INDEX:
            raise InvalidColor(token, InvalidColorReason.OUT_OF_RANGE)
        return AnsiIndex(index)

    raise InvalidColor(token, InvalidColorReason.UNRECOGNIZED)


def to_rich_color(spec: ColorSpec) -> RichColor:
    """Convert a color to a rich Color.

    Args:
        spec: Parsed color.

    Returns:
        The equivalent rich color. ``reset`` maps to the terminal default.

    Raises:
        TypeError: If spec is not a ColorSpec.
    """
    if isinstance(spec, Named):
        if spec.name == RESET:
            return RichColor.default()
        return RichColor.from_ansi(COLOR_NAMES.index(spec.name))
    if isinstance(spec, AnsiIndex):
        return RichColor.from_ansi(spec.index)
    if isinstance(spec, Rgb):
        return RichColor.from_rgb(spec.r, spec.g, spec.b)
    raise TypeError(f"Not a color spec: {spec!r}")


def to_hex(spec: ColorSpec) -> str | None:
    """Get a hex string for a color.

    Named and indexed colors use rich's default terminal palette.

    Args:
        spec: Parsed color.

    Returns:
        Hex color string like '#a3be8c', or None for ``reset``.
    """
    if isinstance(spec, Rgb):
        return str(spec)
    if isinstance(spec, Named) and spec.name == RESET:
        return None
    return to_rich_color(spec).get_truecolor().hex


def color_schema() -> dict[str, Any]:
    """Build a JSON schema describing a color token.

    Returns:
        JSON schema dictionary.
    """
    return {
        "title": "Color",
        "description": "Color name, #RRGGBB hex code, or ANSI index (0-255)",
        "anyOf": [
            {"type": "string", "enum": list(COLOR_NAMES)},
            {"type": "string", "pattern": HEX_PATTERN.pattern},
            {"type": "integer", "minimum": 0, "maximum": MAX_ANSI_INDEX},
        ],
    }
