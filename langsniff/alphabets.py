"""Language scoring by how well the letters of a text fit each alphabet."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field

from langsniff.chars import is_stop_char
from langsniff.filters import FilterList
from langsniff.info import Info, calculate_confidence
from langsniff.lang import Lang
from langsniff.query import Query
from langsniff.script import MultiLangScript, Script


@dataclass
class RawOutcome:
    """Scores of an alphabet analysis, best language first."""

    count: int
    raw_scores: list[tuple[Lang, int]] = field(default_factory=list)
    scores: list[tuple[Lang, float]] = field(default_factory=list)


_CYRILLIC_ALPHABETS: dict[Lang, frozenset[str]] = {
    Lang.BUL: frozenset("абвгдежзийклмнопрстуфхцчшщъьюя"),
    Lang.RUS: frozenset("абвгдежзийклмнопрстуфхцчшщъыьэюяё"),
    Lang.UKR: frozenset("абвгдежзийклмнопрстуфхцчшщьюяєіїґ"),
    Lang.BEL: frozenset("абвгдежзйклмнопрстуфхцчшыьэюяёіў"),
    Lang.SRP: frozenset("абвгдежзиклмнопрстуфхцчшђјљњћџ"),
    Lang.MKD: frozenset("абвгдежзиклмнопрстуфхцчшѓѕјљњќџ"),
}

_CYRILLIC_RELEVANT: frozenset[str] = frozenset(
    "абвгдежзийклмнопрстуфхцчшщъыьэюяёєіїґўђјљњћџѓѕќ"
)

_BASIC = "abcdefghijklmnopqrstuvwxyz"

_LATIN_ALPHABETS: dict[Lang, frozenset[str]] = {
    Lang.AFR: frozenset(_BASIC + "áèéêëíîïóôúû"),
    Lang.AKA: frozenset("abdefghiklmnoprstuwyɔɛ"),
    Lang.AZE: frozenset("abcdefghijklmnopqrstuvxyzçöüğışə̇"),
    Lang.CAT: frozenset(_BASIC + "·àçèéíïòóúü"),
    Lang.CES: frozenset(_BASIC + "áéóúýčďěňřšťůž"),
    Lang.DAN: frozenset(_BASIC + "åæø"),
    Lang.DEU: frozenset(_BASIC + "ßäöü"),
    Lang.ENG: frozenset(_BASIC),
    Lang.EPO: frozenset("abcdefghijklmnoprstuvzĉĝĥĵŝŭ"),
    Lang.EST: frozenset(_BASIC + "äõöü"),
    Lang.FIN: frozenset(_BASIC + "äöšž"),
    Lang.FRA: frozenset(_BASIC + "àâçèéêëîïôùûüÿœ"),
    Lang.HRV: frozenset(_BASIC + "ćčđšž"),
    Lang.HUN: frozenset(_BASIC + "áéíóöúüőű"),
    Lang.IND: frozenset(_BASIC),
    Lang.ITA: frozenset(_BASIC + "àèéìòù"),
    Lang.JAV: frozenset(_BASIC + "èé"),
    Lang.LAT: frozenset(_BASIC),
    Lang.LAV: frozenset(_BASIC + "āčēģīķļņōŗšūž"),
    Lang.LIT: frozenset(_BASIC + "ąčėęįšūųž"),
    Lang.NLD: frozenset(_BASIC + "àèéëïĳ"),
    Lang.NOB: frozenset(_BASIC + "åæø"),
    Lang.POL: frozenset(_BASIC + "óąćęłńśźż"),
    Lang.POR: frozenset(_BASIC + "àáâãçéêíóôõú"),
    Lang.RON: frozenset(_BASIC + "âîăşţ"),
    Lang.SLK: frozenset(_BASIC + "áäéíóôúýčďĺľňŕšťž"),
    Lang.SLV: frozenset(_BASIC + "čšž"),
    Lang.SNA: frozenset(_BASIC),
    Lang.SPA: frozenset(_BASIC + "¡¿áéíñóúü"),
    Lang.SWE: frozenset(_BASIC + "äåö"),
    Lang.TGL: frozenset(_BASIC + "áéíñóú"),
    Lang.TUK: frozenset("abdefghijklmnoprstuwyzäçöüýňşž"),
    Lang.TUR: frozenset(_BASIC + "çöüğış̇"),
    Lang.UZB: frozenset("abcdefghijklmnopqrstuvxyzʻ"),
    Lang.VIE: frozenset(
        _BASIC
        + "àáâãèéêìíòóôõùúýăđĩũơưạảấầẩẫậắằẳẵặẹẻẽếềểễệỉịọỏốồổỗộớờởỡợụủứừửữựỳỵỷỹ"
    ),
    Lang.ZUL: frozenset(_BASIC),
}


def _outcome(count: int, signed_scores: list[tuple[Lang, int]]) -> RawOutcome:
    ordered = sorted(signed_scores, key=lambda pair: pair[1], reverse=True)
    raw_scores = [(lang, max(score, 0)) for lang, score in ordered]
    return RawOutcome(count=count, raw_scores=raw_scores, scores=[])


def cyrillic_scores(text: str, filter_list: FilterList) -> RawOutcome:
    """Score Cyrillic-script languages against a lowercase text."""
    relevant = Counter(ch for ch in text if ch in _CYRILLIC_RELEVANT)
    total = sum(relevant.values())

    signed = []
    for lang in Script.CYRILLIC.langs():
        if not filter_list.is_allowed(lang):
            continue
        alphabet = _CYRILLIC_ALPHABETS[lang]
        hits = sum(n for ch, n in relevant.items() if ch in alphabet)
        signed.append((lang, 2 * hits - total))

    outcome = _outcome(total, signed)
    outcome.scores = [
        (lang, raw / total if raw else 0.0) for lang, raw in outcome.raw_scores
    ]
    return outcome


def latin_scores(text: str, filter_list: FilterList) -> RawOutcome:
    """Score Latin-script languages against a lowercase text."""
    letters = Counter(ch for ch in text if not is_stop_char(ch))
    total = sum(letters.values())

    signed = []
    for lang in Script.LATIN.langs():
        if not filter_list.is_allowed(lang):
            continue
        alphabet = _LATIN_ALPHABETS[lang]
        hits = sum(n for ch, n in letters.items() if ch in alphabet)
        signed.append((lang, 2 * hits - total))

    outcome = _outcome(total, signed)
    outcome.scores = [
        (lang, raw / total if total else math.nan) for lang, raw in outcome.raw_scores
    ]
    return outcome


def _uniform(langs: tuple[Lang, ...], filter_list: FilterList) -> RawOutcome:
    allowed = [lang for lang in langs if filter_list.is_allowed(lang)]
    return RawOutcome(
        count=1,
        raw_scores=[(lang, 1) for lang in allowed],
        scores=[(lang, 1.0) for lang in allowed],
    )


def raw_detect(query: Query) -> RawOutcome:
    """Score every allowed language of the query's script by its alphabet.

    Arabic, Devanagari and Hebrew have no alphabet data, so every allowed
    language of those scripts scores equally.
    """
    text = query.lowercase()
    script = query.multi_lang_script
    if script is MultiLangScript.CYRILLIC:
        return cyrillic_scores(text, query.filter_list)
    if script is MultiLangScript.LATIN:
        return latin_scores(text, query.filter_list)
    if script is MultiLangScript.ARABIC:
        return _uniform((Lang.ARA, Lang.URD, Lang.PES), query.filter_list)
    if script is MultiLangScript.DEVANAGARI:
        return _uniform((Lang.HIN, Lang.MAR, Lang.NEP), query.filter_list)
    return _uniform((Lang.HEB, Lang.YID), query.filter_list)


def detect(query: Query) -> Info | None:
    """Detect the language by alphabet, or None if no language is allowed."""
    outcome = raw_detect(query)
    if not outcome.scores:
        return None
    lang, best = outcome.scores[0]
    if len(outcome.scores) > 1:
        confidence = calculate_confidence(best, outcome.scores[1][1], outcome.count)
    else:
        confidence = 1.0
    return Info(query.multi_lang_script.to_script(), lang, confidence)