"""Detection of the writing system a text is written in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from langsniff.chars import is_stop_char
from langsniff.script import Script

_Span = tuple[int, int]


def _within(ch: str, spans: Iterable[_Span]) -> bool:
    code = ord(ch)
    return any(low <= code <= high for low, high in spans)


_CYRILLIC: tuple[_Span, ...] = (
    (0x0400, 0x0484),
    (0x0487, 0x052F),
    (0x2DE0, 0x2DFF),
    (0xA640, 0xA69D),
    (0x1D2B, 0x1D2B),
    (0x1D78, 0x1D78),
    (0xA69F, 0xA69F),
)

_LATIN: tuple[_Span, ...] = (
    (ord("a"), ord("z")),
    (ord("A"), ord("Z")),
    (0x0080, 0x00FF),
    (0x0100, 0x017F),
    (0x0180, 0x024F),
    (0x0250, 0x02AF),
    (0x1D00, 0x1D7F),
    (0x1D80, 0x1DBF),
    (0x1E00, 0x1EFF),
    (0x2100, 0x214F),
    (0x2C60, 0x2C7F),
    (0xA720, 0xA7FF),
    (0xAB30, 0xAB6F),
)

_ARABIC: tuple[_Span, ...] = (
    (0x0600, 0x06FF),
    (0x0750, 0x07FF),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
    (0x10E60, 0x10E7F),
    (0x1EE00, 0x1EEFF),
)

_DEVANAGARI: tuple[_Span, ...] = ((0x0900, 0x097F), (0xA8E0, 0xA8FF), (0x1CD0, 0x1CFF))
_ETHIOPIC: tuple[_Span, ...] = ((0x1200, 0x139F), (0x2D80, 0x2DDF), (0xAB00, 0xAB2F))

_MANDARIN: tuple[_Span, ...] = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DB5),
    (0x4E00, 0x9FCC),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
)

_HANGUL: tuple[_Span, ...] = (
    (0xAC00, 0xD7AF),
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
    (0x3200, 0x32FF),
    (0xA960, 0xA97F),
    (0xD7B0, 0xD7FF),
    (0xFF00, 0xFFEF),
)

_KHMER: tuple[_Span, ...] = ((0x1780, 0x17FF), (0x19E0, 0x19FF))


def is_cyrillic(ch: str) -> bool:
    """Return True if ch belongs to the Cyrillic script."""
    return _within(ch, _CYRILLIC)


def is_latin(ch: str) -> bool:
    """Return True if ch belongs to the Latin script."""
    return _within(ch, _LATIN)


def is_arabic(ch: str) -> bool:
    """Return True if ch belongs to the Arabic script."""
    return _within(ch, _ARABIC)


def is_devanagari(ch: str) -> bool:
    """Return True if ch belongs to the Devanagari script."""
    return _within(ch, _DEVANAGARI)


def is_ethiopic(ch: str) -> bool:
    """Return True if ch belongs to the Ethiopic script."""
    return _within(ch, _ETHIOPIC)


def is_hebrew(ch: str) -> bool:
    """Return True if ch belongs to the Hebrew block."""
    return 0x0590 <= ord(ch) <= 0x05FF


def is_georgian(ch: str) -> bool:
    """Return True if ch belongs to the Georgian block."""
    return 0x10A0 <= ord(ch) <= 0x10FF


def is_mandarin(ch: str) -> bool:
    """Return True if ch is a Han character."""
    return _within(ch, _MANDARIN)


def is_bengali(ch: str) -> bool:
    """Return True if ch belongs to the Bengali block."""
    return 0x0980 <= ord(ch) <= 0x09FF


def is_hiragana(ch: str) -> bool:
    """Return True if ch belongs to the Hiragana block."""
    return 0x3040 <= ord(ch) <= 0x309F


def is_katakana(ch: str) -> bool:
    """Return True if ch belongs to the Katakana block."""
    return 0x30A0 <= ord(ch) <= 0x30FF


def is_hangul(ch: str) -> bool:
    """Return True if ch belongs to the Korean alphabet."""
    return _within(ch, _HANGUL)


def is_greek(ch: str) -> bool:
    """Return True if ch belongs to the Greek and Coptic block."""
    return 0x0370 <= ord(ch) <= 0x03FF


def is_kannada(ch: str) -> bool:
    """Return True if ch belongs to the Kannada block."""
    return 0x0C80 <= ord(ch) <= 0x0CFF


def is_tamil(ch: str) -> bool:
    """Return True if ch belongs to the Tamil block."""
    return 0x0B80 <= ord(ch) <= 0x0BFF


def is_thai(ch: str) -> bool:
    """Return True if ch belongs to the Thai block."""
    return 0x0E00 <= ord(ch) <= 0x0E7F


def is_gujarati(ch: str) -> bool:
    """Return True if ch belongs to the Gujarati block."""
    return 0x0A80 <= ord(ch) <= 0x0AFF


def is_gurmukhi(ch: str) -> bool:
    """Return True if ch belongs to the Gurmukhi block, used for Punjabi."""
    return 0x0A00 <= ord(ch) <= 0x0A7F


def is_telugu(ch: str) -> bool:
    """Return True if ch belongs to the Telugu block."""
    return 0x0C00 <= ord(ch) <= 0x0C7F


def is_malayalam(ch: str) -> bool:
    """Return True if ch belongs to the Malayalam block."""
    return 0x0D00 <= ord(ch) <= 0x0D7F


def is_oriya(ch: str) -> bool:
    """Return True if ch belongs to the Oriya block."""
    return 0x0B00 <= ord(ch) <= 0x0B7F


def is_myanmar(ch: str) -> bool:
    """Return True if ch belongs to the Myanmar block."""
    return 0x1000 <= ord(ch) <= 0x109F


def is_sinhala(ch: str) -> bool:
    """Return True if ch belongs to the Sinhala block."""
    return 0x0D80 <= ord(ch) <= 0x0DFF


def is_khmer(ch: str) -> bool:
    """Return True if ch belongs to the Khmer script."""
    return _within(ch, _KHMER)


_CHECKERS: tuple[tuple[Script, Callable[[str], bool]], ...] = (
    (Script.LATIN, is_latin),
    (Script.CYRILLIC, is_cyrillic),
    (Script.ARABIC, is_arabic),
    (Script.MANDARIN, is_mandarin),
    (Script.DEVANAGARI, is_devanagari),
    (Script.HEBREW, is_hebrew),
    (Script.ETHIOPIC, is_ethiopic),
    (Script.GEORGIAN, is_georgian),
    (Script.BENGALI, is_bengali),
    (Script.HANGUL, is_hangul),
    (Script.HIRAGANA, is_hiragana),
    (Script.KATAKANA, is_katakana),
    (Script.GREEK, is_greek),
    (Script.KANNADA, is_kannada),
    (Script.TAMIL, is_tamil),
    (Script.THAI, is_thai),
    (Script.GUJARATI, is_gujarati),
    (Script.GURMUKHI, is_gurmukhi),
    (Script.TELUGU, is_telugu),
    (Script.MALAYALAM, is_malayalam),
    (Script.ORIYA, is_oriya),
    (Script.MYANMAR, is_myanmar),
    (Script.SINHALA, is_sinhala),
    (Script.KHMER, is_khmer),
)


@dataclass(frozen=True)
class RawScriptInfo:
    """Character counts of every script, ordered from most to least frequent."""

    counters: tuple[tuple[Script, int], ...]

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.counters, key=lambda pair: pair[1], reverse=True))
        object.__setattr__(self, "counters", ordered)

    def main_script(self) -> Script | None:
        """The most frequent script, or None if no script character was seen."""
        if not self.counters:
            return None
        script, count = self.counters[0]
        return script if count > 0 else None

    def count(self, script: Script) -> int:
        """The number of characters counted for the given script."""
        for counted, count in self.counters:
            if counted is script:
                return count
        raise KeyError(script)


def raw_detect_script(text: str) -> RawScriptInfo:
    """Count how many characters of text belong to each script."""
    order = list(_CHECKERS)
    counts = {script: 0 for script, _ in _CHECKERS}

    for ch in text:
        if is_stop_char(ch):
            continue
        for position, (script, check) in enumerate(order):
            if check(ch):
                counts[script] += 1
                # Frequent scripts drift forward so they are tried first.
                if position > 0:
                    order[position - 1], order[position] = order[position], order[position - 1]
                break

    return RawScriptInfo(tuple((script, counts[script]) for script, _ in order))


def detect_script(text: str) -> Script | None:
    """Detect only the script of text, which is much faster than full detection."""
    return raw_detect_script(text).main_script()