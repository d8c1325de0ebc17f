import pytest

from langsniff.errors import MethodParseError, ParseError
from langsniff.method import Method


def test_from_str():
    assert Method.parse("trigram") is Method.TRIGRAM
    assert Method.parse("ALPHABET") is Method.ALPHABET


def test_from_str_error():
    with pytest.raises(MethodParseError) as excinfo:
        Method.parse("foobar")
    assert excinfo.value.value == "foobar"
    assert isinstance(excinfo.value, ParseError)


def test_parse_trims_whitespace():
    assert Method.parse("  Combined\n") is Method.COMBINED


@pytest.mark.parametrize("method", list(Method))
def test_str_round_trip(method):
    assert Method.parse(str(method)) is method


def test_display_names():
    assert str(Method.parse("trigram")) == "Trigram"
    assert str(Method.parse("alphabet")) == "Alphabet"
    assert str(Method.parse("combined")) == "Combined"