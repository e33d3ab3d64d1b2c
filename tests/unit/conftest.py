"""Shared fakes for the unit tests.

Nothing here touches the network: :class:`FakeSession` stands in for
``requests.Session`` and hands out queued ``SimpleNamespace`` responses.
"""

from __future__ import annotations

import json
import threading
from types import SimpleNamespace
from typing import Any

import pytest


def _fake_response(payload: Any = None, *, status: int = 200, text: str | None = None) -> SimpleNamespace:
    """Return an object quacking like ``requests.Response``."""
    body = text if text is not None else ("" if payload is None else json.dumps(payload))
    return SimpleNamespace(
        ok=200 <= status < 300,
        status_code=status,
        text=body,
        json=lambda: json.loads(body),
    )


def _token_payload(
    access_token: str = "at-1",
    *,
    refresh_token: str | None = "rt-1",
    expires_in: int = 3600,
    scope: str = "user-read-email",
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "access_token": access_token,
        "token_type": "Bearer",
        "expires_in": expires_in,
        "scope": scope,
    }
    if refresh_token is not None:
        payload["refresh_token"] = refresh_token
    return payload


class FakeSession:
    """Records calls and replays queued responses (token endpoint and API)."""

    def __init__(self) -> None:
        self.posts: list[tuple[str, dict[str, Any]]] = []
        self.requests: list[tuple[str, str, dict[str, Any]]] = []
        self.post_responses: list[Any] = []
        self.api_responses: list[Any] = []
        self.post_error: Exception | None = None
        self.request_error: Exception | None = None
        self._lock = threading.Lock()

    # queueing helpers ---------------------------------------------------- #
    def queue_token(self, payload: Any = None, *, status: int = 200, text: str | None = None) -> None:
        self.post_responses.append(_fake_response(payload, status=status, text=text))

    def queue_api(self, payload: Any = None, *, status: int = 200, text: str | None = None) -> None:
        self.api_responses.append(_fake_response(payload, status=status, text=text))

    # requests.Session surface -------------------------------------------- #
    def post(self, url: str, **kwargs: Any) -> Any:
        with self._lock:
            self.posts.append((url, kwargs))
            if self.post_error is not None:
                raise self.post_error
            return self.post_responses.pop(0)

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        with self._lock:
            self.requests.append((method, url, kwargs))
            if self.request_error is not None:
                raise self.request_error
            return self.api_responses.pop(0)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def token_payload():
    """Factory for token-endpoint JSON bodies."""
    return _token_payload


@pytest.fixture
def respond():
    """Factory for fake ``requests.Response`` objects."""
    return _fake_response
