from __future__ import annotations

import re
from typing import List

from ..models import Suggestion
from .base import SuggestionScanner

WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


class SpacingScanner(SuggestionScanner):
    """Flags every run of two or more whitespace characters."""

    name = "spacing"

    def scan(self, text: str) -> List[Suggestion]:
        return [
            Suggestion(
                original_text=match.group(0),
                suggestion_text=" ",
                reason="Multiple spaces detected. Consider using a single space.",
                offset=match.start(),
                length=match.end() - match.start(),
                rule=self.name,
            )
            for match in WHITESPACE_RUN_RE.finditer(text)
        ]
