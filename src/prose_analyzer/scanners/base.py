from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import Suggestion


class SuggestionScanner(ABC):
    """Abstract rule that scans raw text and reports located suggestions."""

    name: str = ""

    @abstractmethod
    def scan(self, text: str) -> List[Suggestion]:
        """Return suggestions for text, left to right by offset."""
        raise NotImplementedError
