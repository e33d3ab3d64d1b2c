"""OAuth 2.0 core for the Spotify accounts service.

This namespace hosts the **HTTP-light** building blocks shared by every
client flow.

Sub-modules
-----------
models
    Immutable token record, scope parsing and the test-friendly clock.
pkce
    Proof-Key for Code Exchange helpers.
state
    CSRF ``state`` generation / validation and redirect parsing.
flows
    Immutable descriptors for the authorization-code, PKCE and
    client-credentials flows.
oauth
    Token-endpoint client (authorize URL, code / credentials / refresh grants).
manager
    Thread-safe token holder implementing expiry checks and auto-refresh.
log_utils
    Structured logging helpers (thin wrapper around :pymod:`logging`).

All public objects are re-exported here for convenience.
"""

from __future__ import annotations

from .models import Clock, Token, default_clock, parse_scopes  # noqa: F401
from .pkce import PkcePair, code_challenge_s256, generate_code_verifier  # noqa: F401
from .state import generate_csrf_token, parse_redirect, verify_state  # noqa: F401
from .flows import AuthCodeFlow, AuthCodePkceFlow, AuthFlow, ClientCredsFlow  # noqa: F401
from .oauth import OAuthClient  # noqa: F401
from .manager import TokenManager  # noqa: F401
from .log_utils import get_auth_logger  # noqa: F401

__all__ = [
    # models
    "Clock",
    "Token",
    "default_clock",
    "parse_scopes",
    # pkce
    "PkcePair",
    "generate_code_verifier",
    "code_challenge_s256",
    # state
    "generate_csrf_token",
    "parse_redirect",
    "verify_state",
    # flows
    "AuthFlow",
    "AuthCodeFlow",
    "AuthCodePkceFlow",
    "ClientCredsFlow",
    # token endpoint / manager
    "OAuthClient",
    "TokenManager",
    # logging helpers
    "get_auth_logger",
]
