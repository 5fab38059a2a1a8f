from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence, cast

from ..errors import NetworkError
from ..models import Suggestion, SuggestionOrigin

logger = logging.getLogger(__name__)

# Keys a service may use to wrap its record list inside an object.
RECORD_LIST_KEYS = ("matches", "errors", "suggestions")


def normalize_remote_records(text: str, payload: Any) -> List[Suggestion]:
    """
    Translate a remote grammar response into Suggestions against text.

    Each record looks like ``{bad, better, type, offset, length}``. The first
    ``better`` candidate becomes the replacement (empty when there is none).
    Records whose span does not match text are dropped.
    """
    records = _extract_records(payload)
    suggestions: List[Suggestion] = []
    for index, raw in enumerate(records):
        if not isinstance(raw, Mapping):
            raise NetworkError(f"Remote record {index} is not an object: {raw!r}")
        record = cast(Mapping[str, Any], raw)
        try:
            offset = int(record["offset"])
            length = int(record["length"])
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError(f"Remote record {index} has no valid span.") from exc

        span = text[offset : offset + length] if offset >= 0 else ""
        bad = record.get("bad")
        if length <= 0 or not span or len(span) != length or (bad and bad != span):
            logger.warning(
                "Dropping remote record %s: span [%s, %s) does not match %r.",
                index,
                offset,
                offset + length,
                bad,
            )
            continue

        replacement = _first_candidate(index, record.get("better"))
        category = str(record.get("type") or "remote")
        suggestions.append(
            Suggestion(
                original_text=span,
                suggestion_text=replacement,
                reason=_describe(category, span, replacement),
                offset=offset,
                length=length,
                rule=category,
                origin=SuggestionOrigin.REMOTE,
            )
        )
    return suggestions


def _extract_records(payload: Any) -> Sequence[Any]:
    if isinstance(payload, list):
        return cast(List[Any], payload)
    if isinstance(payload, Mapping):
        mapping = cast(Mapping[str, Any], payload)
        if mapping.get("error"):
            raise NetworkError(f"Remote grammar service error: {mapping['error']}")
        for key in RECORD_LIST_KEYS:
            value = mapping.get(key)
            if isinstance(value, list):
                return cast(List[Any], value)
    raise NetworkError("Remote grammar response is not a list of records.")


def _first_candidate(index: int, candidates: Any) -> str:
    if candidates is None or isinstance(candidates, str):
        return candidates or ""
    if isinstance(candidates, (list, tuple)) and all(
        isinstance(candidate, str) for candidate in candidates
    ):
        return candidates[0] if candidates else ""
    raise NetworkError(f"Remote record {index} has malformed candidates.")


def _describe(category: str, span: str, replacement: str) -> str:
    if replacement:
        return (
            f'{category.capitalize()} issue: consider "{replacement}" '
            f'instead of "{span}".'
        )
    return f'{category.capitalize()} issue: consider removing "{span}".'
