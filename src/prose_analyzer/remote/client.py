from __future__ import annotations

import itertools
import logging
import threading
import time
from typing import Any, List

import requests

from ..config import RemoteCheckSettings
from ..errors import NetworkError
from ..models import Suggestion
from .normalize import normalize_remote_records

logger = logging.getLogger(__name__)


class RemoteGrammarClient:
    """Thin wrapper around an HTTP grammar-check endpoint."""

    def __init__(
        self,
        settings: RemoteCheckSettings,
        api_key: str,
        session: Any | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("An API key is required for the remote grammar service.")
        if not settings.endpoint:
            raise ValueError("Remote grammar service endpoint is not configured.")
        self._settings = settings
        self._api_key = api_key
        self._http: Any = session if session is not None else requests
        self._max_attempts = max(1, settings.max_attempts)

    @property
    def settings(self) -> RemoteCheckSettings:
        return self._settings

    def check(self, text: str) -> List[Suggestion]:
        """Send text to the service and return its findings as Suggestions."""
        payload = self._fetch(text)
        suggestions = normalize_remote_records(text, payload)
        logger.debug(
            "Remote grammar check returned %d suggestion(s).", len(suggestions)
        )
        return suggestions

    def _fetch(self, text: str) -> Any:
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                response = self._http.post(
                    self._settings.endpoint,
                    data={"text": text, "key": self._api_key},
                    timeout=self._settings.request_timeout,
                )
                response.raise_for_status()
                return response.json()
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                logger.warning(
                    "Remote grammar request failed (attempt %s/%s): %s",
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(2 ** (attempt - 1), 5))
        raise NetworkError(
            f"Remote grammar service failed after {attempt} attempt(s)."
        ) from last_error


class RequestSequencer:
    """
    Issue increasing tickets so a host can discard superseded responses.

    Call ``issue()`` before each request and ``is_latest(ticket)`` when its
    response arrives; only the most recently issued ticket is current.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    def issue(self) -> int:
        with self._lock:
            self._latest = next(self._counter)
            return self._latest

    def is_latest(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest
