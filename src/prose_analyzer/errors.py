from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .models import Suggestion


class ProseAnalyzerError(RuntimeError):
    """Base class for errors raised by prose_analyzer."""


class StaleSuggestionError(ProseAnalyzerError):
    """Raised when a suggestion's span no longer matches the text it targets."""

    def __init__(self, suggestion: "Suggestion", found: str) -> None:
        super().__init__(
            f"Suggestion at offset {suggestion.offset} expected "
            f"{suggestion.original_text!r} but found {found!r}."
        )
        self.suggestion = suggestion
        self.found = found


class SuggestionConflictError(ProseAnalyzerError):
    """Raised when a batch contains suggestions with overlapping spans."""

    def __init__(
        self, conflicts: Sequence[Tuple["Suggestion", "Suggestion"]]
    ) -> None:
        first, second = conflicts[0]
        super().__init__(
            f"{len(conflicts)} overlapping suggestion pair(s); first at "
            f"[{first.offset}, {first.end}) and [{second.offset}, {second.end})."
        )
        self.conflicts = list(conflicts)


class NetworkError(ProseAnalyzerError):
    """Raised when the remote grammar service is unreachable or misbehaves."""
