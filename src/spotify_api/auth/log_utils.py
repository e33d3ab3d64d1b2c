"""Context-carrying loggers for the OAuth code.

Records emitted through :func:`get_auth_logger` receive a fixed set of
``extra`` attributes, and nothing else, so a careless call site cannot attach
a token or secret to a record:

- ``flow``           – ``auth_code``, ``auth_code_pkce`` or ``client_creds``
- ``client_id``      – first 6 characters of the OAuth client id
- ``grant_type``     – grant sent to the token endpoint
- ``correlation_id`` – caller supplied id for tying records together

Example
-------
>>> from spotify_api.auth.log_utils import get_auth_logger
>>> log = get_auth_logger(
...     base_logger_name="spotify-api.auth.oauth",
...     flow="auth_code",
...     client_id="5fe01282e44241328a84e7c5cc169165",
... )
>>> log.info("Exchanging authorization code")
INFO spotify-api.auth.oauth flow=auth_code client_id=5fe012 ...
"""

from __future__ import annotations

import logging
from typing import Any, Final, MutableMapping

CONTEXT_KEYS: Final[tuple[str, ...]] = ("flow", "client_id", "grant_type", "correlation_id")
_CLIENT_ID_PREFIX: Final[int] = 6


class AuthContextAdapter(logging.LoggerAdapter):
    """Adds the whitelisted auth context to every record it emits."""

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        allowed = {
            key: value for key, value in context.items() if key in CONTEXT_KEYS and value is not None
        }
        if "client_id" in allowed:
            allowed["client_id"] = str(allowed["client_id"])[:_CLIENT_ID_PREFIX]
        super().__init__(logger, allowed)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        # values given at the call site take precedence
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_auth_logger(
    *,
    base_logger_name: str = "spotify-api.auth",
    flow: str | None = None,
    client_id: str | None = None,
    grant_type: str | None = None,
    correlation_id: str | None = None,
) -> AuthContextAdapter:
    """Return an adapter over *base_logger_name* carrying the given context."""
    return AuthContextAdapter(
        logging.getLogger(base_logger_name),
        flow=flow,
        client_id=client_id,
        grant_type=grant_type,
        correlation_id=correlation_id,
    )
