import pytest

from prose_analyzer.models import ReadabilityLevel
from prose_analyzer.scoring import (
    EMPTY_TEXT_DESCRIPTION,
    LEVEL_DESCRIPTIONS,
    classify_score,
    compute_readability,
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t \n"])
def test_blank_text_is_not_available(text: str):
    result = compute_readability(text)

    assert result.score == 0
    assert result.grade == 0
    assert result.level is ReadabilityLevel.NOT_AVAILABLE
    assert result.description == EMPTY_TEXT_DESCRIPTION


def test_short_text_clamps_score_but_not_grade():
    """Raw score ~120.2 clamps to 100 while the grade stays negative."""
    result = compute_readability("Cat sat.")

    assert result.score == 100
    assert result.grade == -3.0
    assert result.level is ReadabilityLevel.VERY_EASY
    assert result.description == LEVEL_DESCRIPTIONS[ReadabilityLevel.VERY_EASY]


def test_dense_text_scores_very_difficult():
    result = compute_readability(
        "Internationalization considerations complicate organizational communication."
    )

    assert result.score == 0
    assert result.level is ReadabilityLevel.VERY_DIFFICULT
    assert result.grade > 12


@pytest.mark.parametrize(
    ("score", "level"),
    [
        (100, ReadabilityLevel.VERY_EASY),
        (90, ReadabilityLevel.VERY_EASY),
        (89, ReadabilityLevel.EASY),
        (80, ReadabilityLevel.EASY),
        (75, ReadabilityLevel.FAIRLY_EASY),
        (60, ReadabilityLevel.STANDARD),
        (55, ReadabilityLevel.FAIRLY_DIFFICULT),
        (30, ReadabilityLevel.DIFFICULT),
        (29, ReadabilityLevel.VERY_DIFFICULT),
        (0, ReadabilityLevel.VERY_DIFFICULT),
    ],
)
def test_classify_score_thresholds(score: int, level: ReadabilityLevel):
    assert classify_score(score) is level


def test_every_level_has_a_description():
    assert set(LEVEL_DESCRIPTIONS) == set(ReadabilityLevel)


def test_result_serializes_level_label():
    payload = compute_readability("Cat sat.").to_dict()

    assert payload == {
        "score": 100,
        "grade": -3.0,
        "level": "Very Easy",
        "description": "5th-grade level. Very easy to read.",
    }
