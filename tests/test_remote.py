from __future__ import annotations

from typing import Any

import pytest
import requests

from prose_analyzer.config import RemoteCheckSettings
from prose_analyzer.errors import NetworkError
from prose_analyzer.models import SuggestionOrigin
from prose_analyzer.remote import client as remote_client
from prose_analyzer.remote import (
    RemoteGrammarClient,
    RequestSequencer,
    normalize_remote_records,
)

TEXT = "Ths is a sentense."


class DummyResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class DummySession:
    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append({"url": url, **kwargs})
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _record(
    bad: str, better: Any, offset: int, length: int, kind: str = "spelling"
) -> dict[str, Any]:
    return {
        "bad": bad,
        "better": better,
        "type": kind,
        "offset": offset,
        "length": length,
    }


def _settings(**overrides: Any) -> RemoteCheckSettings:
    values: dict[str, Any] = {
        "enabled": True,
        "endpoint": "https://grammar.test/check",
    }
    values.update(overrides)
    return RemoteCheckSettings(**values)


def test_normalize_takes_first_candidate():
    payload = [
        _record("Ths", ["This", "The"], 0, 3),
        _record("sentense", [], 9, 8),
    ]

    suggestions = normalize_remote_records(TEXT, payload)

    assert [(s.original_text, s.suggestion_text) for s in suggestions] == [
        ("Ths", "This"),
        ("sentense", ""),
    ]
    assert all(s.origin is SuggestionOrigin.REMOTE for s in suggestions)
    assert suggestions[0].rule == "spelling"
    assert suggestions[0].offset == 0 and suggestions[0].length == 3


def test_normalize_accepts_wrapped_record_list():
    payload = {"matches": [_record("Ths", "This", 0, 3, kind="typo")]}

    assert normalize_remote_records(TEXT, payload)[0].suggestion_text == "This"


def test_normalize_drops_records_that_do_not_match_text():
    payload = [
        _record("Thus", ["This"], 0, 3),
        _record("x", ["y"], 40, 1),
    ]

    assert normalize_remote_records(TEXT, payload) == []


@pytest.mark.parametrize(
    "payload",
    [
        {"error": "invalid api key"},
        "not json records",
        [{"bad": "Ths", "better": ["This"]}],
        ["Ths"],
        [_record("Ths", 5, 0, 3)],
        [_record("Ths", {"text": "This"}, 0, 3)],
        [_record("Ths", ["This", 5], 0, 3)],
    ],
)
def test_normalize_rejects_malformed_payloads(payload: Any):
    with pytest.raises(NetworkError):
        normalize_remote_records(TEXT, payload)


def test_client_posts_text_and_key():
    session = DummySession(DummyResponse([_record("Ths", ["This"], 0, 3)]))
    client = RemoteGrammarClient(
        _settings(request_timeout=3.0), "secret", session=session
    )

    suggestions = client.check(TEXT)

    assert [s.suggestion_text for s in suggestions] == ["This"]
    call = session.calls[0]
    assert call["url"] == "https://grammar.test/check"
    assert call["data"] == {"text": TEXT, "key": "secret"}
    assert call["timeout"] == 3.0


def test_client_wraps_http_failures():
    session = DummySession(DummyResponse([], status_code=503))
    client = RemoteGrammarClient(_settings(), "secret", session=session)

    with pytest.raises(NetworkError) as excinfo:
        client.check(TEXT)
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_client_wraps_invalid_json():
    session = DummySession(DummyResponse(ValueError("no json")))
    client = RemoteGrammarClient(_settings(), "secret", session=session)

    with pytest.raises(NetworkError):
        client.check(TEXT)


def test_client_retries_then_succeeds(monkeypatch: pytest.MonkeyPatch):
    """Client retries transport errors up to max_attempts."""
    monkeypatch.setattr(remote_client.time, "sleep", lambda _: None)
    session = DummySession(
        requests.ConnectionError("connection reset"),
        DummyResponse([]),
    )
    client = RemoteGrammarClient(
        _settings(max_attempts=2), "secret", session=session
    )

    assert client.check(TEXT) == []
    assert len(session.calls) == 2


def test_client_requires_key_and_endpoint():
    with pytest.raises(ValueError):
        RemoteGrammarClient(_settings(), "")
    with pytest.raises(ValueError):
        RemoteGrammarClient(_settings(endpoint=None), "secret")


def test_request_sequencer_tracks_latest_ticket():
    sequencer = RequestSequencer()
    first = sequencer.issue()
    second = sequencer.issue()

    assert second > first
    assert not sequencer.is_latest(first)
    assert sequencer.is_latest(second)
