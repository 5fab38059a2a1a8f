from __future__ import annotations

from typing import Dict, List, Sequence

from .config import AnalyzerConfig
from .metrics import compute_text_stats
from .models import Document, DocumentAnalysis
from .scanners import build_scanners_from_config
from .scoring import compute_readability
from .sources import LocalSuggestionSource, SuggestionSource, gather_suggestions


def analyze_document(
    doc: Document,
    config: AnalyzerConfig | None = None,
    sources: Sequence[SuggestionSource] | None = None,
) -> DocumentAnalysis:
    """Score readability, collect stats and gather suggestions for one document."""
    cfg = config or AnalyzerConfig()
    if sources is None:
        sources = build_sources_from_config(cfg)
    return DocumentAnalysis(
        doc_id=doc.doc_id,
        readability=compute_readability(doc.text),
        stats=compute_text_stats(doc.text, cfg.words_per_minute),
        suggestions=gather_suggestions(doc.text, sources),
    )


def analyze_corpus(
    documents: List[Document],
    config: AnalyzerConfig | None = None,
    sources: Sequence[SuggestionSource] | None = None,
) -> Dict[str, DocumentAnalysis]:
    """Analyze all documents and return the per-document results."""
    cfg = config or AnalyzerConfig()
    if sources is None:
        sources = build_sources_from_config(cfg)
    results: Dict[str, DocumentAnalysis] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document, cfg, sources)
    return results


def build_sources_from_config(config: AnalyzerConfig) -> List[SuggestionSource]:
    """Local scanners as configured; remote sources are wired by the caller."""
    return [LocalSuggestionSource(build_scanners_from_config(config))]
