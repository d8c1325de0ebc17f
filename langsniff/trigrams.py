"""Extraction of character trigrams and their frequency ranks from text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import chain

from langsniff.chars import is_stop_char

# Largest difference between a trigram's rank in a language profile and in a text.
MAX_TRIGRAM_DISTANCE = 300

# A profile of 300 trigrams, each at the largest distance.
MAX_TOTAL_DISTANCE = MAX_TRIGRAM_DISTANCE * MAX_TRIGRAM_DISTANCE

# Only this many of the most frequent trigrams of a text are ranked.
TEXT_TRIGRAMS_SIZE = 2 * MAX_TRIGRAM_DISTANCE


@dataclass(frozen=True)
class TrigramsWithPositions:
    """The number of trigrams in a text and the rank of the most frequent ones."""

    total_trigrams: int
    trigram_positions: dict[str, int]


def to_trigram_char(ch: str) -> str:
    """Turn punctuation, digits and spaces into a space; keep other characters."""
    return " " if is_stop_char(ch) else ch


def count_trigrams(text: str) -> Counter[str]:
    """Count the trigrams of an already lowercased text.

    Words are padded with a space on each side, and trigrams made only of
    spacing around a single character boundary are not counted.
    """
    counts: Counter[str] = Counter()
    chars = chain(map(to_trigram_char, text), " ")
    first = " "
    second = next(chars)
    for third in chars:
        if not (second == " " and (first == " " or third == " ")):
            counts[first + second + third] += 1
        first, second = second, third
    return counts


def get_trigrams_with_positions(text: str) -> TrigramsWithPositions:
    """Rank the trigrams of a lowercased text, most frequent first.

    Ties are broken by the trigram itself, higher first. Only the first
    TEXT_TRIGRAMS_SIZE trigrams receive a position.
    """
    counts = count_trigrams(text)
    ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    positions = {
        trigram: position
        for position, (trigram, _) in enumerate(ranked[:TEXT_TRIGRAMS_SIZE])
    }
    return TrigramsWithPositions(
        total_trigrams=sum(counts.values()),
        trigram_positions=positions,
    )