"""Character classification shared by script and language detection."""

from __future__ import annotations


def is_stop_char(ch: str) -> bool:
    """Return True for spaces, punctuation and digits.

    Such characters carry no information for script or language detection.
    """
    code = ord(ch)
    return code <= 0x40 or 0x5B <= code <= 0x60 or 0x7B <= code <= 0x7E