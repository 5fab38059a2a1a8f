"""
prose_analyzer package exports the analysis entry points for library consumers.
"""

from __future__ import annotations

from .applier import (
    apply_and_rebase,
    apply_suggestion,
    apply_suggestions,
    select_non_overlapping,
)
from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .detection import detect_suggestions
from .errors import (
    NetworkError,
    ProseAnalyzerError,
    StaleSuggestionError,
    SuggestionConflictError,
)
from .models import ReadabilityLevel, ReadabilityResult, Suggestion, SuggestionOrigin
from .pipeline import analyze_corpus, analyze_document
from .scoring import compute_readability

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "compute_readability",
    "detect_suggestions",
    "apply_suggestion",
    "apply_suggestions",
    "apply_and_rebase",
    "select_non_overlapping",
    "analyze_corpus",
    "analyze_document",
    "ReadabilityLevel",
    "ReadabilityResult",
    "Suggestion",
    "SuggestionOrigin",
    "ProseAnalyzerError",
    "StaleSuggestionError",
    "SuggestionConflictError",
    "NetworkError",
]

__version__ = "0.1.0"
