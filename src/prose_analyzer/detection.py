from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Sequence, Tuple

from .models import Suggestion
from .scanners import (
    RepeatedWordScanner,
    SpacingScanner,
    SuggestionScanner,
    TypoScanner,
)

LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_scanners() -> Tuple[SuggestionScanner, ...]:
    """Spacing, typo and repeated-word scanners, in reporting order."""
    return (SpacingScanner(), TypoScanner(), RepeatedWordScanner())


def detect_suggestions(
    text: str, scanners: Sequence[SuggestionScanner] | None = None
) -> List[Suggestion]:
    """
    Run every scanner over text and concatenate their suggestions.

    Results keep scanner order, then offset order within a scanner. Spans from
    different scanners may overlap; nothing is deduplicated.
    """
    if not text:
        return []
    active = default_scanners() if scanners is None else scanners
    suggestions: List[Suggestion] = []
    for scanner in active:
        found = scanner.scan(text)
        LOGGER.debug("Scanner %s found %d suggestion(s).", scanner.name, len(found))
        suggestions.extend(found)
    return suggestions
