"""The outcome of language detection and how confident it is."""

from __future__ import annotations

from dataclasses import dataclass

from langsniff.lang import Lang
from langsniff.script import Script

RELIABLE_CONFIDENCE_THRESHOLD = 0.9


@dataclass(frozen=True)
class Info:
    """A detected script and language with a confidence from 0 to 1."""

    script: Script
    lang: Lang
    confidence: float

    def is_reliable(self) -> bool:
        """Return True if the confidence is high enough to trust the result."""
        return self.confidence > RELIABLE_CONFIDENCE_THRESHOLD


def calculate_confidence(highest_score: float, second_score: float, count: int) -> float:
    """Confidence that the best-scoring language is the right one.

    Scores lie within 0..1; count is the number of characters or trigrams.
    """
    if highest_score == 0.0:
        return 0.0
    if second_score == 0.0:
        return highest_score

    # Above this hyperbola the result is certain; below it confidence is
    # proportional. The constants were chosen by experiment.
    confident_rate = 3.0 / count + 0.015
    rate = (highest_score - second_score) / second_score

    if rate > confident_rate:
        return 1.0
    return rate / confident_rate