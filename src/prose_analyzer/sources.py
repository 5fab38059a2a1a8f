from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from .detection import detect_suggestions
from .errors import NetworkError
from .models import Suggestion
from .remote import RemoteGrammarClient
from .scanners import SuggestionScanner

logger = logging.getLogger(__name__)


class SuggestionSource(ABC):
    """Abstract provider of suggestions for a piece of text."""

    name: str = "source"

    @abstractmethod
    def suggest(self, text: str) -> List[Suggestion]:
        """Return suggestions located against text."""
        raise NotImplementedError


class LocalSuggestionSource(SuggestionSource):
    """Runs the in-process rule scanners."""

    name = "local"

    def __init__(self, scanners: Sequence[SuggestionScanner] | None = None) -> None:
        self._scanners = list(scanners) if scanners is not None else None

    def suggest(self, text: str) -> List[Suggestion]:
        return detect_suggestions(text, self._scanners)


class RemoteSuggestionSource(SuggestionSource):
    """Delegates to a remote grammar service."""

    name = "remote"

    def __init__(self, client: RemoteGrammarClient) -> None:
        self._client = client

    def suggest(self, text: str) -> List[Suggestion]:
        if not text.strip():
            return []
        return self._client.check(text)


class CallableSuggestionSource(SuggestionSource):
    """Adapt an arbitrary callable into the SuggestionSource interface."""

    def __init__(
        self, func: Callable[[str], List[Suggestion]], name: str = "callable"
    ) -> None:
        self._func = func
        self.name = name

    def suggest(self, text: str) -> List[Suggestion]:
        return self._func(text)


def gather_suggestions(
    text: str, sources: Sequence[SuggestionSource]
) -> List[Suggestion]:
    """
    Concatenate suggestions from every source, in source order.

    A source failing with NetworkError contributes nothing; the others still
    report.
    """
    suggestions: List[Suggestion] = []
    for source in sources:
        try:
            found = source.suggest(text)
        except NetworkError as exc:
            logger.warning("Suggestion source %s unavailable: %s", source.name, exc)
            continue
        suggestions.extend(found)
    return suggestions
