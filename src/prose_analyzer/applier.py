from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Sequence, Tuple

from .errors import StaleSuggestionError, SuggestionConflictError
from .models import ApplyResult, Suggestion

LOGGER = logging.getLogger(__name__)


def apply_suggestion(text: str, suggestion: Suggestion) -> str:
    """Splice suggestion into text, failing if its span no longer matches."""
    _ensure_current(text, suggestion)
    return (
        text[: suggestion.offset] + suggestion.suggestion_text + text[suggestion.end :]
    )


def apply_suggestions(text: str, suggestions: Iterable[Suggestion]) -> str:
    """
    Apply a batch of suggestions detected against the same text.

    The batch is all-or-nothing: any stale or overlapping suggestion raises
    before the text is touched. Suggestions may arrive in any order.
    """
    ordered = sorted(suggestions, key=lambda s: (s.offset, s.end))
    for suggestion in ordered:
        _ensure_current(text, suggestion)
    conflicts = find_overlaps(ordered)
    if conflicts:
        raise SuggestionConflictError(conflicts)

    result = text
    delta = 0
    for suggestion in ordered:
        # Offsets in the working text shift by the net growth of earlier edits.
        start = suggestion.offset + delta
        result = (
            result[:start]
            + suggestion.suggestion_text
            + result[start + suggestion.length :]
        )
        delta += len(suggestion.suggestion_text) - suggestion.length
    LOGGER.info(
        "Applied %d suggestion(s); length changed by %+d.", len(ordered), delta
    )
    return result


def find_overlaps(
    suggestions: Iterable[Suggestion],
) -> List[Tuple[Suggestion, Suggestion]]:
    """Return every pair of suggestions whose spans intersect."""
    ordered = sorted(suggestions, key=lambda s: (s.offset, s.end))
    overlaps: List[Tuple[Suggestion, Suggestion]] = []
    active: List[Suggestion] = []
    for candidate in ordered:
        active = [s for s in active if s.end > candidate.offset]
        overlaps.extend((s, candidate) for s in active)
        active.append(candidate)
    return overlaps


def select_non_overlapping(suggestions: Iterable[Suggestion]) -> List[Suggestion]:
    """Greedily keep suggestions by offset, skipping any that hit a kept span."""
    accepted: List[Suggestion] = []
    for candidate in sorted(suggestions, key=lambda s: (s.offset, s.end)):
        if accepted and _overlaps(accepted[-1], candidate):
            continue
        accepted.append(candidate)
    return accepted


def rebase_suggestions(
    applied: Suggestion, pending: Sequence[Suggestion]
) -> Tuple[List[Suggestion], List[Suggestion]]:
    """
    Shift pending suggestions to account for an applied edit.

    Returns ``(remaining, invalidated)``: spans after the edit move by its
    length delta, spans before it are unchanged, spans overlapping it are
    invalidated. Spans that only touch its edges are kept.
    """
    delta = len(applied.suggestion_text) - applied.length
    remaining: List[Suggestion] = []
    invalidated: List[Suggestion] = []
    for suggestion in pending:
        if suggestion == applied:
            continue
        if _overlaps(applied, suggestion):
            invalidated.append(suggestion)
        elif suggestion.offset >= applied.end:
            remaining.append(_shift(suggestion, delta))
        else:
            remaining.append(suggestion)
    return remaining, invalidated


def apply_and_rebase(
    text: str, suggestion: Suggestion, pending: Sequence[Suggestion]
) -> ApplyResult:
    """Apply one suggestion and rebase the rest of its batch onto the result."""
    new_text = apply_suggestion(text, suggestion)
    remaining, invalidated = rebase_suggestions(suggestion, pending)
    if invalidated:
        LOGGER.debug(
            "Applying suggestion at %d invalidated %d pending suggestion(s).",
            suggestion.offset,
            len(invalidated),
        )
    return ApplyResult(text=new_text, remaining=remaining, invalidated=invalidated)


def _ensure_current(text: str, suggestion: Suggestion) -> None:
    if suggestion.offset < 0 or suggestion.end > len(text):
        raise StaleSuggestionError(suggestion, found="")
    found = text[suggestion.offset : suggestion.end]
    if found != suggestion.original_text:
        raise StaleSuggestionError(suggestion, found=found)


def _overlaps(first: Suggestion, second: Suggestion) -> bool:
    return first.offset < second.end and second.offset < first.end


def _shift(suggestion: Suggestion, delta: int) -> Suggestion:
    if delta == 0:
        return suggestion
    return replace(suggestion, offset=suggestion.offset + delta)
