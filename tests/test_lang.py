import pytest

from langsniff.errors import LangParseError
from langsniff.lang import Lang


def test_from_code():
    assert Lang.from_code("rus") is Lang.RUS
    assert Lang.from_code("ukr") is Lang.UKR
    assert Lang.from_code("ENG") is Lang.ENG
    assert Lang.from_code("oops") is None


@pytest.mark.parametrize(
    ("lang", "expected"),
    [(Lang.SPA, "spa"), (Lang.UKR, "ukr")],
)
def test_code(lang, expected):
    assert lang.code() == expected


def test_native_name():
    assert Lang.RUS.native_name() == "Русский"
    assert Lang.SPA.native_name() == "Español"
    assert Lang.EPO.native_name() == "Esperanto"
    assert Lang.UKR.native_name() == "Українська"


def test_eng_name():
    assert Lang.SPA.eng_name() == "Spanish"
    assert Lang.EPO.eng_name() == "Esperanto"
    assert Lang.RUS.eng_name() == "Russian"
    assert Lang.DEU.eng_name() == "German"


def test_str_is_native_name():
    assert str(Lang.parse("rus")) == "Русский"
    assert str(Lang.parse("spa")) == "Español"


def test_all():
    all_langs = Lang.all()
    assert len(all_langs) == 68
    assert Lang.UKR in all_langs
    assert Lang.SWE in all_langs


def test_all_order_matches_values():
    assert [lang.value for lang in Lang.all()] == list(range(68))
    assert Lang.all()[0] is Lang.EPO
    assert Lang.all()[-1] is Lang.TGL


@pytest.mark.parametrize("lang", list(Lang))
def test_parse_round_trip(lang):
    iso = lang.code()
    assert Lang.parse(iso) is lang
    assert Lang.parse(iso.lower()) is lang
    assert Lang.parse(iso.upper()) is lang


def test_parse_unknown_raises():
    with pytest.raises(LangParseError) as excinfo:
        Lang.parse("xyz")
    assert excinfo.value.value == "xyz"


def test_codes_are_unique():
    codes = [lang.code() for lang in Lang.all()]
    assert len(set(codes)) == len(codes)