"""
Unit tests for PKCE helpers and CSRF state helpers.


These tests are CI-safe (no network), cover:
* Code-verifier / S256 challenge generation
* State verification (match, mismatch, whitespace, missing)
* Redirect URL parsing, including a denied authorization
"""

from __future__ import annotations

import base64
import re
from hashlib import sha256

import pytest

from spotify_api.auth.pkce import PkcePair, code_challenge_s256, generate_code_verifier
from spotify_api.auth.state import generate_csrf_token, parse_redirect, verify_state
from spotify_api.errors import AuthenticationError, InvalidStateError


ALLOWED_CHARS_RE = re.compile(r"^[A-Za-z0-9\-._~]+$")  # RFC-7636


# --------------------------------------------------------------------------- #
# PKCE                                                                        #
# --------------------------------------------------------------------------- #
def test_generate_code_verifier_default_length() -> None:
    verifier = generate_code_verifier()
    assert 43 <= len(verifier) <= 128
    assert ALLOWED_CHARS_RE.match(verifier), "Verifier contains non-RFC chars"


def test_generate_code_verifier_bounds() -> None:
    assert len(generate_code_verifier(43)) == 43
    assert len(generate_code_verifier(128)) == 128


def test_generate_code_verifier_invalid_len() -> None:
    with pytest.raises(ValueError):
        _ = generate_code_verifier(42)  # below minimum
    with pytest.raises(ValueError):
        _ = generate_code_verifier(129)  # above maximum


def test_code_challenge_s256_matches_reference() -> None:
    verifier = "test_verifier_1234567890"
    digest = sha256(verifier.encode("ascii")).digest()
    expected = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    assert code_challenge_s256(verifier) == expected
    assert "=" not in code_challenge_s256(verifier)


def test_pkce_pair_challenge_derives_from_verifier() -> None:
    pair = PkcePair.generate()
    assert pair.challenge == code_challenge_s256(pair.verifier)


# --------------------------------------------------------------------------- #
# STATE VERIFY                                                                #
# --------------------------------------------------------------------------- #
def test_csrf_tokens_are_unique() -> None:
    assert generate_csrf_token() != generate_csrf_token()


def test_verify_state_accepts_match_with_whitespace() -> None:
    token = generate_csrf_token()
    verify_state(token, f"  {token}\n")


@pytest.mark.parametrize("received", ["other", "", None, "\u00e9tat-forg\u00e9"])
def test_verify_state_rejects_mismatch(received: str | None) -> None:
    with pytest.raises(InvalidStateError) as exc:
        verify_state("expected-state", received)
    assert "rfc6749#section-10.12" in str(exc.value)


# --------------------------------------------------------------------------- #
# REDIRECT PARSING                                                            #
# --------------------------------------------------------------------------- #
def test_parse_redirect_happy_path() -> None:
    code, state = parse_redirect("http://localhost:8888/callback?code=abc123&state=xyz")
    assert (code, state) == ("abc123", "xyz")


def test_parse_redirect_access_denied() -> None:
    with pytest.raises(AuthenticationError) as exc:
        parse_redirect("http://localhost:8888/callback?error=access_denied&state=xyz")
    assert exc.value.error_code == "access_denied"
    assert exc.value.grant_type == "authorization_code"


def test_parse_redirect_missing_state() -> None:
    with pytest.raises(InvalidStateError):
        parse_redirect("http://localhost:8888/callback?code=abc123")
