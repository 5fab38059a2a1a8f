from __future__ import annotations

import math
import re

from .models import TextStats

SENTENCE_END_RE = re.compile(r"[.!?]+(?:\s|\Z)")
NON_LETTER_RE = re.compile(r"[^a-z]+")
VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")
SILENT_SUFFIX_RE = re.compile(r"(?:[es]{1,2}|ed)$")
VOWELS = "aeiouy"


def count_sentences(text: str) -> int:
    """
    Count runs of terminal punctuation followed by whitespace or end of text.

    Non-blank text without any terminator is still one sentence.
    """
    if not text or not text.strip():
        return 0
    matches = SENTENCE_END_RE.findall(text)
    return len(matches) or 1


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def count_syllables(text: str) -> int:
    """Sum heuristic syllable counts over every alphabetic token in text."""
    if not text:
        return 0
    cleaned = NON_LETTER_RE.sub(" ", text.lower())
    return sum(count_word_syllables(word) for word in cleaned.split())


def count_word_syllables(word: str) -> int:
    """
    Approximate syllables in a lowercase word by counting vowel groups.

    A trailing silent ``e``/``es``/``ed`` is dropped first, and a consonant +
    ``le`` ending (``table``) counts as its own syllable.
    """
    if len(word) <= 3:
        return 1

    stripped = SILENT_SUFFIX_RE.sub("", word, count=1)
    count = len(VOWEL_GROUP_RE.findall(stripped)) or 1

    if word.endswith("le") and word[-3] not in VOWELS:
        count += 1

    return max(1, count)


def compute_text_stats(text: str, words_per_minute: int = 200) -> TextStats:
    """Collect raw counts for text along with a rounded-up reading time."""
    words = count_words(text)
    pace = max(1, words_per_minute)
    return TextStats(
        words=words,
        characters=len(text),
        sentences=count_sentences(text),
        syllables=count_syllables(text),
        reading_time_minutes=math.ceil(words / pace),
    )
