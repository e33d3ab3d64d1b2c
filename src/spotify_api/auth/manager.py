"""Token holder with expiry tracking and single-flight refresh.

One :class:`TokenManager` belongs to one authenticated client.  Callers ask it
for a usable access token right before each request:

* token still valid → returned as-is, no I/O;
* token expired, auto-refresh **off** → :class:`ExpiredTokenError`, no I/O;
* token expired, auto-refresh **on** → refreshed through the token endpoint,
  then returned.  A failed refresh propagates its own
  :class:`AuthenticationError`.

Read-check-refresh-write runs under a ``threading.Lock`` and expiry is checked
again after the lock is acquired, so concurrent callers sharing a client
trigger exactly one refresh and never observe a half-updated token.
"""

from __future__ import annotations

import logging
import threading

from spotify_api.auth.flows import AuthFlow
from spotify_api.auth.models import Clock, Token, default_clock
from spotify_api.auth.oauth import OAuthClient
from spotify_api.errors import (
    ExpiredTokenError,
    NotAuthenticatedError,
    RefreshUnavailableError,
)

_LOG = logging.getLogger("spotify-api.auth.manager")


class TokenManager:
    """Own the current :class:`Token` of an authenticated client."""

    def __init__(
        self,
        oauth: OAuthClient,
        token: Token | None = None,
        *,
        auto_refresh: bool = False,
        clock: Clock = default_clock,
    ) -> None:
        self.oauth = oauth
        self.clock = clock
        self._token = token
        self._lock = threading.Lock()
        self.auto_refresh = auto_refresh and oauth.flow.supports_refresh
        if auto_refresh and not self.auto_refresh:
            _LOG.warning(
                "auto_refresh ignored: the %s flow cannot refresh tokens", oauth.flow.name
            )

    @property
    def flow(self) -> AuthFlow:
        return self.oauth.flow

    @property
    def token(self) -> Token | None:
        return self._token

    # ------------------------------------------------------------------ #
    # Token access & JIT refresh                                         #
    # ------------------------------------------------------------------ #
    def access_token(self) -> str:
        """Return a valid access token, refreshing on-demand."""
        current = self._token
        if current is None:
            raise NotAuthenticatedError()
        if not current.is_expired(clock=self.clock):
            return current.access_token

        if not self.auto_refresh:
            raise ExpiredTokenError()

        with self._lock:
            # Another thread may have refreshed while we waited.
            latest = self._token
            if latest is not None and not latest.is_expired(clock=self.clock):
                return latest.access_token
            return self._refresh_locked().access_token

    def refresh(self) -> Token:
        """Refresh unconditionally and return the new token.

        Raises
        ------
        RefreshUnavailableError
            When the flow (client credentials) or the current token has no
            refresh support. Checked before any network I/O.
        """
        with self._lock:
            return self._refresh_locked()

    # ---------------- internal helpers --------------------------------- #
    def _refresh_locked(self) -> Token:
        if not self.flow.supports_refresh:
            raise RefreshUnavailableError()

        current = self._token
        if current is None:
            raise NotAuthenticatedError()
        if current.refresh_token is None:
            raise RefreshUnavailableError(
                "The current token carries no refresh token; authenticate again."
            )

        fresh = self.oauth.refresh(current.refresh_token)
        if fresh.refresh_token is None:
            _LOG.warning("Refresh response carried no refresh token; keeping the old one")
        new_token = current.refreshed(fresh)
        self._token = new_token

        _LOG.info("Refreshed %s access token (expires in %ss)", self.flow.name, new_token.ttl)
        return new_token
