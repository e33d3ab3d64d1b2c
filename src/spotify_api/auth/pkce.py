"""Code verifier and challenge for the PKCE variant of the code flow.

Public clients cannot keep a secret, so RFC 7636 binds the token exchange to
the browser leg instead: the authorize URL carries a *challenge*, and only the
caller that knows the matching *verifier* can redeem the code.

Spotify supports the ``S256`` method alone.  Verifiers and challenges are
never logged.
"""

from __future__ import annotations

import base64
import secrets
import string
from dataclasses import dataclass
from hashlib import sha256
from typing import Final

CHALLENGE_METHOD: Final[str] = "S256"

# RFC 7636 §4.1: unreserved characters, 43-128 of them.
VERIFIER_ALPHABET: Final[str] = string.ascii_letters + string.digits + "-._~"
MIN_VERIFIER_LENGTH: Final[int] = 43
MAX_VERIFIER_LENGTH: Final[int] = 128
DEFAULT_VERIFIER_LENGTH: Final[int] = 64


def generate_code_verifier(length: int = DEFAULT_VERIFIER_LENGTH) -> str:
    """Return a random verifier of *length* unreserved characters.

    Raises
    ------
    ValueError
        If *length* is outside 43-128.
    """
    if not MIN_VERIFIER_LENGTH <= length <= MAX_VERIFIER_LENGTH:
        raise ValueError(
            f"verifier length must be between {MIN_VERIFIER_LENGTH} and "
            f"{MAX_VERIFIER_LENGTH}, got {length}"
        )
    return "".join(secrets.choice(VERIFIER_ALPHABET) for _ in range(length))


def code_challenge_s256(verifier: str) -> str:
    """Unpadded base64url of the verifier's SHA-256 digest."""
    encoded = base64.urlsafe_b64encode(sha256(verifier.encode("ascii")).digest())
    return encoded.decode("ascii").rstrip("=")


@dataclass(frozen=True, slots=True)
class PkcePair:
    """Verifier kept by the client plus the challenge sent to the browser."""

    verifier: str
    challenge: str

    @classmethod
    def generate(cls, length: int = DEFAULT_VERIFIER_LENGTH) -> "PkcePair":
        verifier = generate_code_verifier(length)
        return cls(verifier=verifier, challenge=code_challenge_s256(verifier))
