import pytest

from prose_analyzer.metrics import (
    compute_text_stats,
    count_sentences,
    count_syllables,
    count_word_syllables,
    count_words,
)


def test_count_sentences_counts_terminator_runs():
    assert count_sentences("Hello world. How are you? Fine!") == 3
    assert count_sentences("Wait... what?!") == 2


def test_count_sentences_floors_unterminated_text_to_one():
    assert count_sentences("no terminator here") == 1
    assert count_sentences("Pi is 3.14 roughly") == 1


def test_count_sentences_blank_text_is_zero():
    assert count_sentences("") == 0
    assert count_sentences("  \n\t") == 0


def test_count_words_splits_on_whitespace_runs():
    assert count_words("  one  two\tthree\n") == 3
    assert count_words("") == 0
    assert count_words("   ") == 0


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("cat", 1),
        ("table", 2),
        ("little", 2),
        ("whale", 1),
        ("played", 1),
        ("reading", 2),
        ("beautiful", 3),
    ],
)
def test_count_word_syllables_heuristic(word: str, expected: int):
    assert count_word_syllables(word) == expected


@pytest.mark.parametrize("word", ["a", "rhythm", "bcdfg", "eses", "ssss", "ed"])
def test_count_word_syllables_never_below_one(word: str):
    assert count_word_syllables(word) >= 1


def test_count_syllables_ignores_case_and_punctuation():
    assert count_syllables("Cat sat.") == 2
    assert count_syllables("Hello, WORLD") == 3
    assert count_syllables("") == 0
    assert count_syllables("123 !!!") == 0


def test_compute_text_stats_rounds_reading_time_up():
    stats = compute_text_stats("one two three", words_per_minute=2)

    assert stats.words == 3
    assert stats.characters == 13
    assert stats.sentences == 1
    assert stats.reading_time_minutes == 2
    assert compute_text_stats("").reading_time_minutes == 0
