"""Unit tests for the immutable Token record and scope parsing."""

from __future__ import annotations

from typing import Callable

import pytest

from spotify_api.auth.models import DEFAULT_EXPIRES_IN, Token, parse_scopes


def fake_clock_factory(now: float) -> Callable[[], float]:
    """Return a deterministic clock returning *now*."""
    return lambda now=now: now


def test_from_response_computes_expiry() -> None:
    token = Token.from_response(
        {
            "access_token": "at",
            "refresh_token": "rt",
            "expires_in": 3600,
            "scope": "user-read-email playlist-read-private",
        },
        clock=fake_clock_factory(1_000),
    )
    assert token.obtained_at == 1_000
    assert token.expires_at == 4_600
    assert token.ttl == 3600
    assert token.scopes == {"user-read-email", "playlist-read-private"}
    assert token.is_refreshable


def test_from_response_defaults_expiry_when_missing() -> None:
    token = Token.from_response({"access_token": "at"}, clock=fake_clock_factory(0))
    assert token.ttl == DEFAULT_EXPIRES_IN
    assert token.refresh_token is None
    assert token.scopes == frozenset()


def test_is_expired_at_the_expiry_instant() -> None:
    token = Token(access_token="at", expires_at=100, obtained_at=0)
    assert not token.is_expired(clock=fake_clock_factory(99.9))
    assert token.is_expired(clock=fake_clock_factory(100))


def test_refreshed_keeps_previous_refresh_token() -> None:
    old = Token(access_token="old", expires_at=10, obtained_at=0, refresh_token="rt-old")
    new = Token(access_token="new", expires_at=20, obtained_at=10)
    merged = old.refreshed(new)
    assert merged.access_token == "new"
    assert merged.refresh_token == "rt-old"


def test_refreshed_prefers_rotated_refresh_token() -> None:
    old = Token(access_token="old", expires_at=10, obtained_at=0, refresh_token="rt-old")
    new = Token(access_token="new", expires_at=20, obtained_at=10, refresh_token="rt-new")
    assert old.refreshed(new).refresh_token == "rt-new"


def test_repr_hides_secrets() -> None:
    token = Token(access_token="secret-at", expires_at=10, obtained_at=0, refresh_token="secret-rt")
    assert "secret" not in repr(token)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, frozenset()),
        ("", frozenset()),
        ("a b", {"a", "b"}),
        ("a,b , c", {"a", "b", "c"}),
        (["a", " b ", ""], {"a", "b"}),
    ],
)
def test_parse_scopes(raw, expected) -> None:
    assert parse_scopes(raw) == expected
