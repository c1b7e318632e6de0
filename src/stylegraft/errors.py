"""Error hierarchy for stylegraft."""
from __future__ import annotations


class StylegraftError(Exception):
    """Base error for all stylegraft errors."""


class ConversionError(StylegraftError):
    """A quantity was converted or combined across unit categories."""

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        target: str = "",
    ) -> None:
        super().__init__(message)
        self.source = source
        self.target = target


class ArityError(StylegraftError):
    """An arithmetic operator was called without operands."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation


class UnitParseError(StylegraftError):
    """Text could not be read as a CSS quantity."""

    def __init__(self, message: str, *, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class ConfigurationError(StylegraftError):
    """Invalid compiler flags."""

    def __init__(self, message: str, *, key: str = "") -> None:
        super().__init__(message)
        self.key = key
