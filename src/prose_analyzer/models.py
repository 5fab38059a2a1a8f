from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ReadabilityLevel(str, Enum):
    """Reading-level bands, easiest first."""

    VERY_EASY = "Very Easy"
    EASY = "Easy"
    FAIRLY_EASY = "Fairly Easy"
    STANDARD = "Standard"
    FAIRLY_DIFFICULT = "Fairly Difficult"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"
    NOT_AVAILABLE = "N/A"


class SuggestionOrigin(str, Enum):
    """Where a suggestion was produced."""

    LOCAL = "local"
    REMOTE = "remote"


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A located edit proposal: replace text[offset:offset + length]."""

    original_text: str
    suggestion_text: str
    reason: str
    offset: int
    length: int
    rule: str = ""
    origin: SuggestionOrigin = SuggestionOrigin.LOCAL

    @property
    def end(self) -> int:
        return self.offset + self.length

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_text": self.original_text,
            "suggestion_text": self.suggestion_text,
            "reason": self.reason,
            "offset": self.offset,
            "length": self.length,
            "rule": self.rule,
            "origin": self.origin.value,
        }


@dataclass(frozen=True, slots=True)
class ReadabilityResult:
    """Flesch reading-ease score, Flesch-Kincaid grade and level band."""

    score: int
    grade: float
    level: ReadabilityLevel
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "grade": self.grade,
            "level": self.level.value,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class TextStats:
    """Raw counts for a document plus an estimated reading time."""

    words: int
    characters: int
    sentences: int
    syllables: int
    reading_time_minutes: int


@dataclass(slots=True)
class ApplyResult:
    """Outcome of applying one suggestion against a pending batch."""

    text: str
    remaining: List[Suggestion] = field(default_factory=list)
    invalidated: List[Suggestion] = field(default_factory=list)


@dataclass(slots=True)
class DocumentAnalysis:
    """Everything computed for one document in a single analysis pass."""

    doc_id: str
    readability: ReadabilityResult
    stats: TextStats
    suggestions: List[Suggestion]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_id": self.doc_id,
            "readability": self.readability.to_dict(),
            "stats": {
                "words": self.stats.words,
                "characters": self.stats.characters,
                "sentences": self.stats.sentences,
                "syllables": self.stats.syllables,
                "reading_time_minutes": self.stats.reading_time_minutes,
            },
            "suggestions": [s.to_dict() for s in self.suggestions],
        }
