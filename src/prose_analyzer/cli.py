from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List

import typer
import yaml

from .applier import apply_suggestions, select_non_overlapping
from .config import AnalyzerConfig, RemoteCheckSettings, load_config
from .detection import detect_suggestions
from .models import Document
from .pipeline import analyze_corpus, build_sources_from_config
from .remote import RemoteGrammarClient
from .scanners import build_scanners_from_config, canonical_rule_name
from .sources import RemoteSuggestionSource, SuggestionSource

app = typer.Typer(help="Prose Analyzer CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING...)."
    ),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    remote: bool | None = typer.Option(
        None,
        "--remote/--no-remote",
        help="Override config remote.enabled flag.",
    ),
    remote_endpoint: str | None = typer.Option(
        None, "--remote-endpoint", help="Remote grammar service URL."
    ),
    remote_api_key: str | None = typer.Option(
        None, "--remote-api-key", help="Explicit API key (prefer env vars)."
    ),
) -> None:
    """Analyze the input documents and emit a JSON summary."""
    cfg = load_config(config)
    _apply_remote_overrides(cfg.remote, remote, remote_endpoint, remote_api_key)
    documents = _load_documents(input_path)
    sources = _build_sources(cfg)
    results = analyze_corpus(documents, cfg, sources)
    payload = [results[doc_id].to_dict() for doc_id in sorted(results)]
    typer.echo(json.dumps({"documents": payload}, indent=2))


@app.command()
def fix(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    rule: List[str] = typer.Option(
        [], "--rule", "-r", help="Only apply suggestions from these rules."
    ),
) -> None:
    """Apply every non-conflicting local suggestion and write the result."""
    cfg = load_config(config)
    text = input_path.read_text(encoding="utf-8")
    suggestions = detect_suggestions(text, build_scanners_from_config(cfg))
    if rule:
        wanted = _resolve_rules(rule)
        suggestions = [s for s in suggestions if s.rule in wanted]
    accepted = select_non_overlapping(suggestions)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(apply_suggestions(text, accepted), encoding="utf-8")
    skipped = len(suggestions) - len(accepted)
    typer.echo(
        f"Applied {len(accepted)} suggestion(s) to {output_path}"
        + (f"; skipped {skipped} overlapping." if skipped else ".")
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_remote_overrides(
    settings: RemoteCheckSettings,
    enabled: bool | None,
    endpoint: str | None,
    api_key: str | None,
) -> None:
    """Override remote grammar settings from CLI flags."""
    if enabled is not None:
        settings.enabled = enabled
    if endpoint:
        settings.endpoint = endpoint
    if api_key:
        settings.api_key = api_key


def _resolve_rules(names: List[str]) -> set[str]:
    """Map --rule values, aliases included, to the rule names scanners report."""
    try:
        return {canonical_rule_name(name) for name in names}
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--rule") from exc


def _build_sources(config: AnalyzerConfig) -> List[SuggestionSource]:
    """Local scanners, plus the remote service when it is enabled."""
    sources = build_sources_from_config(config)
    if config.remote.enabled:
        api_key = _resolve_remote_api_key(config.remote)
        try:
            client = RemoteGrammarClient(config.remote, api_key=api_key)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        sources.append(RemoteSuggestionSource(client))
    return sources


def _resolve_remote_api_key(settings: RemoteCheckSettings) -> str:
    """Resolve the API key from explicit config or the configured env variable."""
    if settings.api_key:
        return settings.api_key
    env_name = settings.api_key_env
    if env_name and os.environ.get(env_name):
        return os.environ[env_name]
    raise typer.BadParameter(
        "Remote API key not provided. Use --remote-api-key or set "
        f"{env_name or 'the configured environment variable'}."
    )


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, str(file.relative_to(input_path)))
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


if __name__ == "__main__":
    main()
