"""Writing systems and the languages written in them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from langsniff.errors import ScriptParseError
from langsniff.lang import Lang


class Script(Enum):
    """A writing system such as Latin, Cyrillic or Arabic."""

    ARABIC = "Arabic"
    BENGALI = "Bengali"
    CYRILLIC = "Cyrillic"
    DEVANAGARI = "Devanagari"
    ETHIOPIC = "Ethiopic"
    GEORGIAN = "Georgian"
    GREEK = "Greek"
    GUJARATI = "Gujarati"
    GURMUKHI = "Gurmukhi"
    HANGUL = "Hangul"
    HEBREW = "Hebrew"
    HIRAGANA = "Hiragana"
    KANNADA = "Kannada"
    KATAKANA = "Katakana"
    KHMER = "Khmer"
    LATIN = "Latin"
    MALAYALAM = "Malayalam"
    MANDARIN = "Mandarin"
    MYANMAR = "Myanmar"
    ORIYA = "Oriya"
    SINHALA = "Sinhala"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    THAI = "Thai"

    @classmethod
    def all(cls) -> tuple["Script", ...]:
        """Return every script, in alphabetical order."""
        return tuple(cls)

    @classmethod
    def parse(cls, text: str) -> "Script":
        """Return the script named by text, ignoring case and surrounding space."""
        script = _BY_NAME.get(text.lower().strip())
        if script is None:
            raise ScriptParseError(text)
        return script

    def langs(self) -> tuple[Lang, ...]:
        """The languages written in this script."""
        return script_langs(self)

    def to_lang_group(self) -> "ScriptLangGroup":
        """Describe which languages this script can indicate."""
        return _LANG_GROUPS[self]

    def __str__(self) -> str:
        return self.value


class MultiLangScript(Enum):
    """A script shared by several languages, which needs further analysis."""

    LATIN = "Latin"
    CYRILLIC = "Cyrillic"
    ARABIC = "Arabic"
    DEVANAGARI = "Devanagari"
    HEBREW = "Hebrew"

    def to_script(self) -> Script:
        """The script this value stands for."""
        return Script(self.value)


@dataclass(frozen=True)
class ScriptLangGroup:
    """How a script maps to languages.

    Exactly one of ``multi`` and ``lang`` is set for a script shared by
    several languages or written by a single language. Neither is set for
    Mandarin script, which may be Chinese or Japanese.
    """

    multi: MultiLangScript | None = None
    lang: Lang | None = None


_BY_NAME: dict[str, Script] = {script.value.lower(): script for script in Script}

_LATIN_LANGS: tuple[Lang, ...] = (
    Lang.SPA, Lang.ENG, Lang.POR, Lang.IND, Lang.FRA, Lang.DEU,
    Lang.JAV, Lang.VIE, Lang.ITA, Lang.TUR, Lang.POL, Lang.RON,
    Lang.HRV, Lang.NLD, Lang.UZB, Lang.HUN, Lang.AZE, Lang.CES,
    Lang.ZUL, Lang.SWE, Lang.AKA, Lang.SNA, Lang.AFR, Lang.FIN,
    Lang.SLK, Lang.TGL, Lang.TUK, Lang.DAN, Lang.NOB, Lang.CAT,
    Lang.LIT, Lang.SLV, Lang.EPO, Lang.LAV, Lang.EST, Lang.LAT,
)

_SCRIPT_LANGS: dict[Script, tuple[Lang, ...]] = {
    Script.LATIN: _LATIN_LANGS,
    Script.CYRILLIC: (Lang.RUS, Lang.UKR, Lang.SRP, Lang.BEL, Lang.BUL, Lang.MKD),
    Script.DEVANAGARI: (Lang.HIN, Lang.MAR, Lang.NEP),
    Script.HEBREW: (Lang.HEB, Lang.YID),
    Script.ARABIC: (Lang.ARA, Lang.URD, Lang.PES),
    Script.MANDARIN: (Lang.CMN,),
    Script.BENGALI: (Lang.BEN,),
    Script.HANGUL: (Lang.KOR,),
    Script.GEORGIAN: (Lang.KAT,),
    Script.GREEK: (Lang.ELL,),
    Script.KANNADA: (Lang.KAN,),
    Script.TAMIL: (Lang.TAM,),
    Script.THAI: (Lang.THA,),
    Script.GUJARATI: (Lang.GUJ,),
    Script.GURMUKHI: (Lang.PAN,),
    Script.TELUGU: (Lang.TEL,),
    Script.MALAYALAM: (Lang.MAL,),
    Script.ORIYA: (Lang.ORI,),
    Script.MYANMAR: (Lang.MYA,),
    Script.SINHALA: (Lang.SIN,),
    Script.KHMER: (Lang.KHM,),
    Script.ETHIOPIC: (Lang.AMH,),
    Script.KATAKANA: (Lang.JPN,),
    Script.HIRAGANA: (Lang.JPN,),
}

_SINGLE_LANG: dict[Script, Lang] = {
    Script.BENGALI: Lang.BEN,
    Script.HANGUL: Lang.KOR,
    Script.GEORGIAN: Lang.KAT,
    Script.GREEK: Lang.ELL,
    Script.KANNADA: Lang.KAN,
    Script.TAMIL: Lang.TAM,
    Script.THAI: Lang.THA,
    Script.GUJARATI: Lang.GUJ,
    Script.GURMUKHI: Lang.PAN,
    Script.TELUGU: Lang.TEL,
    Script.MALAYALAM: Lang.MAL,
    Script.ORIYA: Lang.ORI,
    Script.MYANMAR: Lang.MYA,
    Script.SINHALA: Lang.SIN,
    Script.KHMER: Lang.KHM,
    Script.ETHIOPIC: Lang.AMH,
    Script.KATAKANA: Lang.JPN,
    Script.HIRAGANA: Lang.JPN,
}

_LANG_GROUPS: dict[Script, ScriptLangGroup] = {
    **{multi.to_script(): ScriptLangGroup(multi=multi) for multi in MultiLangScript},
    **{script: ScriptLangGroup(lang=lang) for script, lang in _SINGLE_LANG.items()},
    Script.MANDARIN: ScriptLangGroup(),
}


def script_langs(script: Script) -> tuple[Lang, ...]:
    """Return the languages written in the given script."""
    return _SCRIPT_LANGS[script]