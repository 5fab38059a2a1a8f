from __future__ import annotations

import re
from typing import List

from ..models import Suggestion
from ..typo_table import TypoTable, default_typo_table
from .base import SuggestionScanner


class TypoScanner(SuggestionScanner):
    """Flags whole-word occurrences of known misspellings."""

    name = "typo"

    def __init__(self, table: TypoTable | None = None) -> None:
        self._table = table if table is not None else default_typo_table()
        self._pattern = _build_pattern(self._table)

    @property
    def table(self) -> TypoTable:
        return self._table

    def scan(self, text: str) -> List[Suggestion]:
        if self._pattern is None:
            return []
        suggestions: List[Suggestion] = []
        for match in self._pattern.finditer(text):
            token = match.group(0)
            correction = self._table.get(token)
            if correction is None:
                continue
            suggestions.append(
                Suggestion(
                    original_text=token,
                    suggestion_text=match_case(token, correction),
                    reason=f'"{token}" is a common misspelling of "{correction}".',
                    offset=match.start(),
                    length=match.end() - match.start(),
                    rule=self.name,
                )
            )
        return suggestions


def _build_pattern(table: TypoTable) -> re.Pattern[str] | None:
    # Longest keys first so a key never shadows a longer one it prefixes.
    keys = sorted((typo for typo, _ in table), key=len, reverse=True)
    if not keys:
        return None
    alternation = "|".join(re.escape(key) for key in keys)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def match_case(token: str, replacement: str) -> str:
    """
    Copy the case pattern of token onto replacement, position by position.

    Positions beyond the end of token follow token's last character, so an
    all-caps token yields an all-caps replacement of any length.
    """
    if not token:
        return replacement
    last = len(token) - 1
    chars: List[str] = []
    for idx, char in enumerate(replacement):
        source = token[min(idx, last)]
        chars.append(char.upper() if source.isupper() else char.lower())
    return "".join(chars)
