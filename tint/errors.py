"""Exceptions raised while loading and resolving themes."""

from __future__ import annotations

from enum import Enum


class InvalidColorReason(Enum):
    """Why a color token was rejected."""

    UNRECOGNIZED = "unrecognized color"
    MALFORMED_HEX = "malformed hex code"
    OUT_OF_RANGE = "ANSI index out of range"


class ThemeError(Exception):
    """Base class for all theme loading errors.

    Attributes:
        field_path: Dotted path of the offending field, or an empty string when
            the error is not tied to a field.
    """

    def __init__(self, message: str, field_path: str = "") -> None:
        self.message = message
        self.field_path = field_path
        super().__init__(message, field_path)

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message


class InvalidColor(ThemeError):
    """Raised when a color token cannot be parsed."""

    def __init__(self, token: object, reason: InvalidColorReason, field_path: str = "") -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"invalid color {token!r} ({reason.value})", field_path)
        # args mirror the constructor signature
        self.args = (token, reason, field_path)

    def at(self, field_path: str) -> InvalidColor:
        """Return a copy of this error attached to a field path.

        Args:
            field_path: Dotted path of the field that held the token.

        Returns:
            A new InvalidColor with the same token and reason.
        """
        return InvalidColor(self.token, self.reason, field_path)


class UnknownField(ThemeError):
    """Raised for unrecognized keys when parsing strictly."""

    def __init__(self, field_path: str) -> None:
        super().__init__("unknown field", field_path)
        self.args = (field_path,)


class ConfigError(ThemeError):
    """Raised when the configuration file cannot be read or decoded."""
