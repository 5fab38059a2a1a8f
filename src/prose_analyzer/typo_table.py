from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

import yaml

DEFAULT_TABLE_RESOURCE = "data/typos.yaml"


@dataclass(frozen=True, slots=True)
class TypoTable:
    """Read-only mapping of lowercase misspellings to their corrections."""

    entries: Mapping[str, str]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.entries.items())

    def get(self, typo: str) -> str | None:
        return self.entries.get(typo.lower())

    def merged(self, extra: Mapping[str, str] | None) -> "TypoTable":
        """Return a new table with extra entries added (or overriding)."""
        if not extra:
            return self
        combined = dict(self.entries)
        combined.update(_normalize_entries(extra))
        return TypoTable(MappingProxyType(combined))


def load_typo_table(path: str | Path | None = None) -> TypoTable:
    """
    Load a YAML mapping of misspelling -> correction.

    Parameters
    ----------
    path:
        Custom YAML file. Defaults to the table shipped with the package.
    """
    if path is None:
        return default_typo_table()
    contents = Path(path).read_text(encoding="utf-8")
    return _parse_table(contents, source=str(path))


@lru_cache(maxsize=1)
def default_typo_table() -> TypoTable:
    """Return the packaged typo table, parsed once per process."""
    contents = (
        resources.files("prose_analyzer")
        .joinpath(DEFAULT_TABLE_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return _parse_table(contents, source=DEFAULT_TABLE_RESOURCE)


def _parse_table(contents: str, source: str) -> TypoTable:
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, Mapping):
        raise ValueError(f"Typo table {source} must define a mapping.")
    return TypoTable(MappingProxyType(_normalize_entries(parsed)))


def _normalize_entries(data: Mapping[object, object]) -> dict[str, str]:
    entries: dict[str, str] = {}
    for typo, correction in data.items():
        key = str(typo).strip().lower()
        if not key or correction is None:
            raise ValueError(f"Invalid typo table entry {typo!r}: {correction!r}")
        entries[key] = str(correction)
    return entries
