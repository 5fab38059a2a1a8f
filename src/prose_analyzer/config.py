from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping

import yaml

DEFAULT_SCANNERS = ["spacing", "typo", "repeated-word"]


@dataclass(slots=True)
class RemoteCheckSettings:
    """Configuration block for the optional remote grammar service."""

    enabled: bool = False
    endpoint: str | None = None
    api_key: str | None = None
    api_key_env: str = "PROSE_ANALYZER_API_KEY"
    request_timeout: float = 10.0
    max_attempts: int = 1


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for document analysis."""

    words_per_minute: int = 200
    scanners: List[str] = field(default_factory=lambda: list(DEFAULT_SCANNERS))
    typo_table_path: str | None = None
    extra_typos: Dict[str, str] = field(default_factory=dict)
    remote: RemoteCheckSettings = field(default_factory=RemoteCheckSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "remote" in data:
        remote_value = data["remote"]
        if isinstance(remote_value, RemoteCheckSettings):
            kwargs["remote"] = remote_value
        elif isinstance(remote_value, Mapping):
            kwargs["remote"] = _build_remote_settings(remote_value)
        else:
            kwargs.pop("remote")
    if "scanners" in kwargs:
        kwargs["scanners"] = _scanner_names(kwargs["scanners"])
    if "extra_typos" in kwargs:
        kwargs["extra_typos"] = _typo_overrides(kwargs["extra_typos"])
    return kwargs


def _scanner_names(value: Any) -> List[str]:
    if value is None:
        return list(DEFAULT_SCANNERS)
    if not isinstance(value, (list, tuple)):
        raise ValueError("'scanners' must be a list of scanner names.")
    if not all(isinstance(name, str) for name in value):
        raise ValueError("'scanners' entries must be strings.")
    return list(value)


def _typo_overrides(value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError("'extra_typos' must map misspellings to corrections.")
    return dict(value)


def _build_remote_settings(data: Mapping[str, Any]) -> RemoteCheckSettings:
    remote_allowed = {field.name for field in fields(RemoteCheckSettings)}
    filtered = {key: data[key] for key in data if key in remote_allowed}
    return RemoteCheckSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
