"""The available methods of telling apart languages sharing a script."""

from __future__ import annotations

from enum import Enum

from langsniff.errors import MethodParseError


class Method(Enum):
    """A detection method: trigram profiles, alphabets, or both combined."""

    TRIGRAM = "Trigram"
    ALPHABET = "Alphabet"
    COMBINED = "Combined"

    @classmethod
    def parse(cls, text: str) -> "Method":
        """Return the method named by text, ignoring case and surrounding space."""
        method = _BY_NAME.get(text.lower().strip())
        if method is None:
            raise MethodParseError(text)
        return method

    def __str__(self) -> str:
        return self.value


_BY_NAME: dict[str, Method] = {method.value.lower(): method for method in Method}