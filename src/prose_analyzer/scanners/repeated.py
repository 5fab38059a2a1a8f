from __future__ import annotations

import re
from typing import List

from ..models import Suggestion
from .base import SuggestionScanner

REPEATED_WORD_RE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)


class RepeatedWordScanner(SuggestionScanner):
    """Flags a word immediately repeated after whitespace ("the the")."""

    name = "repeated-word"

    def scan(self, text: str) -> List[Suggestion]:
        return [
            Suggestion(
                original_text=match.group(0),
                suggestion_text=match.group(1),
                reason="Repeated word detected.",
                offset=match.start(),
                length=match.end() - match.start(),
                rule=self.name,
            )
            for match in REPEATED_WORD_RE.finditer(text)
        ]
