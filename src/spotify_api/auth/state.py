"""CSRF ``state`` helpers for the authorization-code redirect.

A fresh random token is minted when an authorization-code client is built and
sent as the ``state`` query parameter of the authorize URL.  Spotify echoes it
back on the redirect; the caller hands the value to ``authenticate`` which
compares it with the original **before** any request hits the token endpoint.

Logging
-------
Only a short prefix of the state is ever logged.
"""

from __future__ import annotations

import hmac
import logging
import secrets
from typing import Final
from urllib.parse import parse_qs, urlsplit

from spotify_api.errors import AuthenticationError, InvalidStateError
from spotify_api.utils.logging import mask_sensitive

_LOG = logging.getLogger("spotify-api.auth.state")

_STATE_BYTES: Final[int] = 24


def generate_csrf_token(nbytes: int = _STATE_BYTES) -> str:
    """Return a URL-safe random ``state`` value."""
    return secrets.token_urlsafe(nbytes)


def verify_state(expected: str, received: str | None) -> None:
    """Raise :class:`InvalidStateError` unless *received* matches *expected*.

    Surrounding whitespace on the received value is ignored since it is
    usually copy-pasted or extracted from a URL by the caller.
    """
    candidate = (received or "").strip()
    # bytes, since compare_digest rejects non-ASCII str
    if not candidate or not hmac.compare_digest(
        candidate.encode("utf-8"), expected.encode("utf-8")
    ):
        _LOG.debug("Rejected state=%s", mask_sensitive(candidate, 4))
        raise InvalidStateError()


def parse_redirect(redirect_url: str) -> tuple[str, str]:
    """Extract ``(code, state)`` from the URL Spotify redirected the user to.

    Raises
    ------
    AuthenticationError
        If the user denied access (``?error=access_denied``).
    InvalidStateError
        If ``code`` or ``state`` is missing.
    """
    query = parse_qs(urlsplit(redirect_url.strip()).query)

    error = (query.get("error") or [""])[0]
    if error:
        raise AuthenticationError(
            kind="server_response",
            description=f"The authorization request was rejected: {error}",
            grant_type="authorization_code",
            error_code=error,
        )

    code = (query.get("code") or [""])[0].strip()
    state = (query.get("state") or [""])[0].strip()
    if not code or not state:
        raise InvalidStateError("redirect URL is missing the 'code' or 'state' parameter")
    return code, state
