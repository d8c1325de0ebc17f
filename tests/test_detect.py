import pytest

from langsniff.detect import (
    Options,
    detect,
    detect_lang,
    detect_lang_based_on_mandarin_script,
    detect_with_options,
)
from langsniff.filters import FilterList
from langsniff.lang import Lang
from langsniff.script import Script
from langsniff.scripts import raw_detect_script

RUSSIAN_POEM = """
        Мой дядя самых честных правил,
        Когда не в шутку занемог,
        Он уважать себя заставил
        И лучше выдумать не мог.
    """

JAPANESE = """
        この間、川越城や松井田城などの諸城を拡張・改修 河越城の三の丸と八幡郭など拡張、松井田城の大道寺郭構築など
    """


def test_detect_spanish():
    info = detect("Además de todo lo anteriormente dicho, también encontramos...")
    assert info is not None
    assert info.lang is Lang.SPA
    assert info.script is Script.LATIN


def test_detect_lang_ukrainian():
    assert detect_lang("Та нічого, все нормально. А в тебе як?") is Lang.UKR


def test_detect_esperanto():
    text = "Ĉu vi ne volas eklerni Esperanton? Bonvolu! Estas unu de la plej bonaj aferoj!"
    info = detect(text)
    assert info is not None
    assert info.lang is Lang.EPO
    assert info.script is Script.LATIN
    assert 0.0 <= info.confidence <= 1.0


def test_with_russian_text():
    info = detect(RUSSIAN_POEM)
    assert info is not None
    assert info.script is Script.CYRILLIC
    assert str(info.script) == "Cyrillic"
    assert info.lang is Lang.RUS
    assert info.lang.code() == "rus"
    assert info.lang.eng_name() == "Russian"
    assert info.lang.native_name() == "Русский"
    assert info.confidence == 1.0
    assert info.is_reliable()


def test_japanese_with_mandarin_chars():
    info = detect(JAPANESE)
    assert info is not None
    assert info.script is Script.MANDARIN
    assert info.lang is Lang.JPN
    assert info.is_reliable()


def test_no_script_gives_none():
    assert detect("1234567890-,;!") is None
    assert detect_lang("") is None


def test_single_language_script():
    info = detect("Ελληνικά")
    assert info is not None
    assert info.lang is Lang.ELL
    assert info.script is Script.GREEK
    assert info.confidence == 1.0


def test_allowlist_limits_latin_languages():
    options = Options().set_filter_list(FilterList.allow([Lang.ENG, Lang.RUS]))
    info = detect_with_options("There is no reason not to learn Esperanto.", options)
    assert info is not None
    assert info.lang is Lang.ENG


def test_filter_list_only():
    options = Options().set_filter_list(FilterList.allow([Lang.EPO, Lang.UKR]))
    info = detect_with_options("Mi ne scias!", options)
    assert info is not None
    assert info.lang is Lang.EPO


def test_set_filter_list_leaves_original_untouched():
    original = Options()
    changed = original.set_filter_list(FilterList.deny([Lang.ENG]))
    assert original.filter_list.is_allowed(Lang.ENG)
    assert not changed.filter_list.is_allowed(Lang.ENG)


@pytest.mark.parametrize(
    "text, denied",
    [
        ("האקדמיה ללשון העברית", [Lang.HEB, Lang.YID]),
        ("Мы хотим видеть дальше, чем окна дома напротив", list(Script.CYRILLIC.langs())),
        ("Mit dem Wissen wächst der Zweifel", list(Script.LATIN.langs())),
    ],
)
def test_filter_list_except_all_gives_none(text, denied):
    options = Options().set_filter_list(FilterList.deny(denied))
    assert detect_with_options(text, options) is None


@pytest.mark.parametrize(
    "filter_list, expected",
    [
        (FilterList.allow([Lang.JPN]), Lang.JPN),
        (FilterList.allow([Lang.CMN]), Lang.CMN),
        (FilterList.deny([Lang.JPN]), Lang.CMN),
        (FilterList.deny([Lang.CMN]), Lang.JPN),
    ],
)
def test_mandarin_japanese_filters(filter_list, expected):
    info = detect_with_options("水", Options().set_filter_list(filter_list))
    assert info is not None
    assert info.lang is expected


def test_mandarin_helper_without_kana():
    info = detect_lang_based_on_mandarin_script(FilterList.all(), raw_detect_script("水"))
    assert info.script is Script.MANDARIN
    assert info.lang is Lang.CMN
    assert info.confidence == 1.0


def test_mandarin_helper_with_kana():
    raw = raw_detect_script(JAPANESE)
    info = detect_lang_based_on_mandarin_script(FilterList.all(), raw)
    assert info.lang is Lang.JPN
    assert info.confidence == 1.0


@pytest.mark.parametrize(
    "text",
    ["", " ", "Ꙕ", "a", "ß", "水ひ", "¡¿", "ǅ\u0300", "\U0001F600", "ॐ", "x" * 500],
)
def test_detect_never_fails(text):
    info = detect(text)
    assert info is None or 0.0 <= info.confidence <= 1.0