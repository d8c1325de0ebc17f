"""Exceptions raised when text cannot be parsed into a library value."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a string does not name a known value of the target kind."""

    kind = "value"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Cannot parse str into {self.kind}: {value!r}")


class ScriptParseError(ParseError):
    """Raised when a string does not name a known script."""

    kind = "Script"


class LangParseError(ParseError):
    """Raised when a string is not a known ISO 639-3 language code."""

    kind = "Lang"


class MethodParseError(ParseError):
    """Raised when a string does not name a known detection method."""

    kind = "Method"