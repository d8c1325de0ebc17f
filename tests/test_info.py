import pytest

from langsniff.info import RELIABLE_CONFIDENCE_THRESHOLD, Info, calculate_confidence
from langsniff.lang import Lang
from langsniff.script import Script


def test_info_with_full_confidence_is_reliable():
    info = Info(Script.LATIN, Lang.EPO, 1.0)
    assert info.lang is Lang.EPO
    assert info.script is Script.LATIN
    assert info.is_reliable()


def test_info_at_threshold_is_not_reliable():
    info = Info(Script.CYRILLIC, Lang.RUS, RELIABLE_CONFIDENCE_THRESHOLD)
    assert not info.is_reliable()


def test_info_equality():
    assert Info(Script.GREEK, Lang.ELL, 1.0) == Info(Script.GREEK, Lang.ELL, 1.0)
    assert Info(Script.GREEK, Lang.ELL, 1.0) != Info(Script.GREEK, Lang.ELL, 0.5)


def test_zero_highest_score_gives_zero():
    assert calculate_confidence(0.0, 0.0, 10) == 0.0
    assert calculate_confidence(0.0, 0.3, 10) == 0.0


def test_zero_second_score_gives_highest():
    assert calculate_confidence(0.7, 0.0, 10) == 0.7


def test_clear_winner_gives_full_confidence():
    assert calculate_confidence(1.0, 0.1, 100) == 1.0


def test_equal_scores_give_zero_confidence():
    assert calculate_confidence(0.5, 0.5, 50) == 0.0


@pytest.mark.parametrize("count", [1, 10, 100, 1000])
def test_confidence_within_unit_interval(count):
    for highest, second in [(0.6, 0.5), (0.9, 0.85), (0.51, 0.5), (1.0, 0.2)]:
        result = calculate_confidence(highest, second, count)
        assert 0.0 <= result <= 1.0


def test_confidence_grows_with_gap():
    small = calculate_confidence(0.51, 0.5, 20)
    large = calculate_confidence(0.55, 0.5, 20)
    assert small < large


def test_confidence_grows_with_count():
    few = calculate_confidence(0.55, 0.5, 5)
    many = calculate_confidence(0.55, 0.5, 50)
    assert few < many