from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from ..typo_table import load_typo_table
from .base import SuggestionScanner
from .repeated import RepeatedWordScanner
from .spacing import SpacingScanner
from .typos import TypoScanner, match_case

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import AnalyzerConfig

__all__ = [
    "SuggestionScanner",
    "SpacingScanner",
    "TypoScanner",
    "RepeatedWordScanner",
    "match_case",
    "canonical_rule_name",
    "create_scanner",
    "build_scanners_from_config",
]

# Accepted spellings of each rule, keyed to the rule name scanners report.
RULE_ALIASES: Dict[str, str] = {
    "spacing": "spacing",
    "typo": "typo",
    "typos": "typo",
    "repeated-word": "repeated-word",
    "repeated-words": "repeated-word",
    "repeated": "repeated-word",
}


def canonical_rule_name(name: str) -> str:
    """Return the rule name a scanner reports for any accepted spelling."""
    normalized = name.lower().strip().replace("_", "-")
    try:
        return RULE_ALIASES[normalized]
    except KeyError:
        raise ValueError(f"Unknown scanner '{name}'.") from None


def create_scanner(name: str, **kwargs: Any) -> SuggestionScanner:
    """Factory for building scanners by rule name."""
    rule = canonical_rule_name(name)
    if rule == "spacing":
        return SpacingScanner()
    if rule == "typo":
        return TypoScanner(**kwargs)
    return RepeatedWordScanner()


def build_scanners_from_config(config: "AnalyzerConfig") -> List[SuggestionScanner]:
    """Build the configured scanners, in configured order."""
    scanners: List[SuggestionScanner] = []
    for name in config.scanners:
        if canonical_rule_name(name) == "typo":
            table = load_typo_table(config.typo_table_path).merged(
                config.extra_typos
            )
            scanners.append(create_scanner(name, table=table))
        else:
            scanners.append(create_scanner(name))
    return scanners
