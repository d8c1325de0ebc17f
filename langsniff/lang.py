"""Languages identified by their ISO 639-3 codes."""

from __future__ import annotations

from enum import Enum

from langsniff.errors import LangParseError


class Lang(Enum):
    """A language following the ISO 639-3 standard."""

    EPO = (0, "epo", "Esperanto", "Esperanto")
    ENG = (1, "eng", "English", "English")
    RUS = (2, "rus", "Русский", "Russian")
    CMN = (3, "cmn", "普通话", "Mandarin")
    SPA = (4, "spa", "Español", "Spanish")
    POR = (5, "por", "Português", "Portuguese")
    ITA = (6, "ita", "Italiano", "Italian")
    BEN = (7, "ben", "বাংলা", "Bengali")
    FRA = (8, "fra", "Français", "French")
    DEU = (9, "deu", "Deutsch", "German")
    UKR = (10, "ukr", "Українська", "Ukrainian")
    KAT = (11, "kat", "ქართული", "Georgian")
    ARA = (12, "ara", "العربية", "Arabic")
    HIN = (13, "hin", "हिन्दी", "Hindi")
    JPN = (14, "jpn", "日本語", "Japanese")
    HEB = (15, "heb", "עברית", "Hebrew")
    YID = (16, "yid", "ייִדיש", "Yiddish")
    POL = (17, "pol", "Polski", "Polish")
    AMH = (18, "amh", "አማርኛ", "Amharic")
    JAV = (19, "jav", "Basa Jawa", "Javanese")
    KOR = (20, "kor", "한국어", "Korean")
    NOB = (21, "nob", "Bokmål", "Bokmal")
    DAN = (22, "dan", "Dansk", "Danish")
    SWE = (23, "swe", "Svenska", "Swedish")
    FIN = (24, "fin", "Suomi", "Finnish")
    TUR = (25, "tur", "Türkçe", "Turkish")
    NLD = (26, "nld", "Nederlands", "Dutch")
    HUN = (27, "hun", "Magyar", "Hungarian")
    CES = (28, "ces", "Čeština", "Czech")
    ELL = (29, "ell", "Ελληνικά", "Greek")
    BUL = (30, "bul", "Български", "Bulgarian")
    BEL = (31, "bel", "Беларуская", "Belarusian")
    MAR = (32, "mar", "मराठी", "Marathi")
    KAN = (33, "kan", "ಕನ್ನಡ", "Kannada")
    RON = (34, "ron", "Română", "Romanian")
    SLV = (35, "slv", "Slovenščina", "Slovene")
    HRV = (36, "hrv", "Hrvatski", "Croatian")
    SRP = (37, "srp", "Српски", "Serbian")
    MKD = (38, "mkd", "Македонски", "Macedonian")
    LIT = (39, "lit", "Lietuvių", "Lithuanian")
    LAV = (40, "lav", "Latviešu", "Latvian")
    EST = (41, "est", "Eesti", "Estonian")
    TAM = (42, "tam", "தமிழ்", "Tamil")
    VIE = (43, "vie", "Tiếng Việt", "Vietnamese")
    URD = (44, "urd", "اُردُو", "Urdu")
    THA = (45, "tha", "ภาษาไทย", "Thai")
    GUJ = (46, "guj", "ગુજરાતી", "Gujarati")
    UZB = (47, "uzb", "Oʻzbekcha", "Uzbek")
    PAN = (48, "pan", "ਪੰਜਾਬੀ", "Punjabi")
    AZE = (49, "aze", "Azərbaycanca", "Azerbaijani")
    IND = (50, "ind", "Bahasa Indonesia", "Indonesian")
    TEL = (51, "tel", "తెలుగు", "Telugu")
    PES = (52, "pes", "فارسی", "Persian")
    MAL = (53, "mal", "മലയാളം", "Malayalam")
    ORI = (54, "ori", "ଓଡ଼ିଆ", "Oriya")
    MYA = (55, "mya", "မြန်မာစာ", "Burmese")
    NEP = (56, "nep", "नेपाली", "Nepali")
    SIN = (57, "sin", "සිංහල", "Sinhalese")
    KHM = (58, "khm", "ភាសាខ្មែរ", "Khmer")
    TUK = (59, "tuk", "Türkmençe", "Turkmen")
    AKA = (60, "aka", "Akan", "Akan")
    ZUL = (61, "zul", "IsiZulu", "Zulu")
    SNA = (62, "sna", "ChiShona", "Shona")
    AFR = (63, "afr", "Afrikaans", "Afrikaans")
    LAT = (64, "lat", "Lingua Latina", "Latin")
    SLK = (65, "slk", "Slovenčina", "Slovak")
    CAT = (66, "cat", "Català", "Catalan")
    TGL = (67, "tgl", "Tagalog", "Tagalog")

    def __new__(cls, index: int, code: str, native: str, eng: str) -> "Lang":
        member = object.__new__(cls)
        member._value_ = index
        member._code = code
        member._native = native
        member._eng = eng
        return member

    @classmethod
    def from_code(cls, code: str) -> "Lang | None":
        """Return the language with the given ISO 639-3 code, ignoring case."""
        return _BY_CODE.get(str(code).lower())

    @classmethod
    def parse(cls, text: str) -> "Lang":
        """Return the language for a code, raising LangParseError if unknown."""
        lang = cls.from_code(text)
        if lang is None:
            raise LangParseError(text)
        return lang

    @classmethod
    def all(cls) -> tuple["Lang", ...]:
        """Return every language, in declaration order."""
        return tuple(cls)

    def code(self) -> str:
        """The ISO 639-3 code of the language."""
        return self._code

    def native_name(self) -> str:
        """The name of the language in the language itself."""
        return self._native

    def eng_name(self) -> str:
        """The name of the language in English."""
        return self._eng

    def __str__(self) -> str:
        return self._native


_BY_CODE: dict[str, Lang] = {lang.code(): lang for lang in Lang}