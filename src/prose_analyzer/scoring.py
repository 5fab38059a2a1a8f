from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .metrics import count_sentences, count_syllables, count_words
from .models import ReadabilityLevel, ReadabilityResult

# Lower bound of each band on the clamped 0-100 score, highest first.
LEVEL_THRESHOLDS: List[Tuple[int, ReadabilityLevel]] = [
    (90, ReadabilityLevel.VERY_EASY),
    (80, ReadabilityLevel.EASY),
    (70, ReadabilityLevel.FAIRLY_EASY),
    (60, ReadabilityLevel.STANDARD),
    (50, ReadabilityLevel.FAIRLY_DIFFICULT),
    (30, ReadabilityLevel.DIFFICULT),
]

LEVEL_DESCRIPTIONS: Dict[ReadabilityLevel, str] = {
    ReadabilityLevel.VERY_EASY: "5th-grade level. Very easy to read.",
    ReadabilityLevel.EASY: "6th-grade level. Easy to read.",
    ReadabilityLevel.FAIRLY_EASY: "7th-grade level. Fairly easy to read.",
    ReadabilityLevel.STANDARD: "8th & 9th-grade level. Plain English.",
    ReadabilityLevel.FAIRLY_DIFFICULT: (
        "10th to 12th-grade level. Fairly difficult to read."
    ),
    ReadabilityLevel.DIFFICULT: "College level. Difficult to read.",
    ReadabilityLevel.VERY_DIFFICULT: (
        "College graduate level. Very difficult to read."
    ),
    ReadabilityLevel.NOT_AVAILABLE: "Not enough text to analyze",
}

EMPTY_TEXT_DESCRIPTION = "Add some text to see readability score"


def compute_readability(text: str) -> ReadabilityResult:
    """Score text with Flesch Reading Ease and Flesch-Kincaid grade level."""
    if not text or not text.strip():
        return _not_available(EMPTY_TEXT_DESCRIPTION)

    sentences = count_sentences(text)
    words = count_words(text)
    if words == 0 or sentences == 0:
        return _not_available(LEVEL_DESCRIPTIONS[ReadabilityLevel.NOT_AVAILABLE])

    syllables = count_syllables(text)
    words_per_sentence = words / sentences
    syllables_per_word = syllables / words

    raw_score = _round_half_up(
        206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    )
    score = max(0, min(100, raw_score))
    grade = (
        _round_half_up(
            (0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59) * 10
        )
        / 10
    )
    level = classify_score(score)
    return ReadabilityResult(
        score=score,
        grade=grade,
        level=level,
        description=LEVEL_DESCRIPTIONS[level],
    )


def classify_score(score: int) -> ReadabilityLevel:
    """Map a clamped reading-ease score to its level band."""
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return ReadabilityLevel.VERY_DIFFICULT


def _not_available(description: str) -> ReadabilityResult:
    return ReadabilityResult(
        score=0,
        grade=0.0,
        level=ReadabilityLevel.NOT_AVAILABLE,
        description=description,
    )


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upward.
    return int(math.floor(value + 0.5))
