"""Typed, immutable records used by the auth layer.

All expiry decisions go through an injected :class:`Clock` rather than
``time.time()`` so tests can move time forward without sleeping.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

# Spotify documents a one hour lifetime; used when ``expires_in`` is missing.
DEFAULT_EXPIRES_IN = 3600


@runtime_checkable
class Clock(Protocol):
    """Callable protocol returning *seconds* since the UNIX epoch."""

    def __call__(self) -> float: ...


def default_clock() -> float:
    return time.time()


def parse_scopes(raw: str | Iterable[str] | None) -> frozenset[str]:
    """Normalise a space/comma separated string (or iterable) into a set."""
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = raw.replace(",", " ").split()
    return frozenset(s.strip() for s in raw if s and s.strip())


@dataclass(frozen=True, slots=True)
class Token:
    """Snapshot of an OAuth access token, its refresh token and expiry.

    A token is never mutated: refreshing produces a brand new instance via
    :meth:`refreshed`.
    """

    access_token: str
    expires_at: int
    obtained_at: int
    refresh_token: str | None = None
    scopes: frozenset[str] = field(default_factory=frozenset)
    token_type: str = "Bearer"

    @classmethod
    def from_response(
        cls, payload: Mapping[str, Any], *, clock: Clock = default_clock
    ) -> "Token":
        """Build a token from a token-endpoint JSON body.

        Raises ``KeyError`` when ``access_token`` is absent; callers translate
        that into an authentication error.
        """
        access_token = payload["access_token"]
        obtained_at = int(clock())
        expires_in = int(payload.get("expires_in") or DEFAULT_EXPIRES_IN)
        return cls(
            access_token=access_token,
            expires_at=obtained_at + expires_in,
            obtained_at=obtained_at,
            refresh_token=payload.get("refresh_token") or None,
            scopes=parse_scopes(payload.get("scope")),
            token_type=payload.get("token_type") or "Bearer",
        )

    @classmethod
    def from_access_token(
        cls,
        access_token: str,
        *,
        refresh_token: str | None = None,
        expires_in: int = DEFAULT_EXPIRES_IN,
        scopes: str | Iterable[str] | None = None,
        clock: Clock = default_clock,
    ) -> "Token":
        """Wrap a token obtained out-of-band (e.g. loaded from disk)."""
        now = int(clock())
        return cls(
            access_token=access_token,
            expires_at=now + expires_in,
            obtained_at=now,
            refresh_token=refresh_token,
            scopes=parse_scopes(scopes),
        )

    def refreshed(self, new: "Token") -> "Token":
        """Return *new*, keeping our refresh token if the response omitted one."""
        if new.refresh_token or not self.refresh_token:
            return new
        return replace(new, refresh_token=self.refresh_token)

    def is_expired(self, *, clock: Clock = default_clock) -> bool:
        """Return *True* once the expiry instant has been reached."""
        return clock() >= self.expires_at

    @property
    def is_refreshable(self) -> bool:
        return self.refresh_token is not None

    @property
    def ttl(self) -> int:
        """Seconds between *obtained_at* and *expires_at*."""
        return self.expires_at - self.obtained_at

    def __repr__(self) -> str:
        # Keep secrets out of tracebacks and debug logs.
        return (
            f"Token(expires_at={self.expires_at}, refreshable={self.is_refreshable}, "
            f"scopes={sorted(self.scopes)})"
        )
