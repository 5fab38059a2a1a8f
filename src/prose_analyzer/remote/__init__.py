from __future__ import annotations

from .client import RemoteGrammarClient, RequestSequencer
from .normalize import normalize_remote_records

__all__ = ["RemoteGrammarClient", "RequestSequencer", "normalize_remote_records"]
