"""Exception types raised by the Spotify client.

Only lightweight, **data-carrying** exceptions live here so that callers can
branch on the failure mode (or turn the error into a log line / HTTP response)
without parsing messages.  Every exception derives from :class:`SpotifyError`
and offers :meth:`SpotifyError.to_payload`, a JSON-serialisable summary that
never includes tokens or client secrets.
"""

from __future__ import annotations

from typing import Any, Final, Literal

AuthErrorKind = Literal["server_response", "request", "parse", "unknown"]

_CSRF_HELP: Final[str] = "https://datatracker.ietf.org/doc/html/rfc6749#section-10.12"

# RFC 6749 §5.2 error codes returned by the token endpoint.
_OAUTH_ERROR_DESCRIPTIONS: Final[dict[str, str]] = {
    "invalid_client": "Client authentication failed",
    "invalid_grant": (
        "The provided authorization grant or refresh token may be invalid, "
        "expired or revoked"
    ),
    "invalid_request": "The request is invalid or malformed",
    "invalid_scope": (
        "The requested scope is invalid, unknown, malformed, or exceeds the "
        "scope granted by the resource owner"
    ),
    "unauthorized_client": (
        "The authenticated client is not authorized to use this authorization "
        "grant type"
    ),
    "unsupported_grant_type": (
        "The authorization grant type is not supported by the authorization server"
    ),
}


class SpotifyError(Exception):
    """Base class for every error raised by this package."""

    code: str = "spotify_error"

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-serialisable payload **without secrets**."""
        return {"error": self.code, "message": str(self)}


# --------------------------------------------------------------------------- #
# Transport / HTTP                                                            #
# --------------------------------------------------------------------------- #
class TransportError(SpotifyError):
    """The request never produced an HTTP response (DNS, TLS, timeout…)."""

    code = "transport"


class HttpError(SpotifyError):
    """The API answered with a non-2xx status."""

    code = "http"

    def __init__(
        self,
        status_code: int,
        *,
        body: str | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"HTTP {status_code} returned by the Spotify API")
        self.status_code: int = status_code
        self.body: str | None = body

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["status"] = self.status_code
        return payload


class ApiError(HttpError):
    """Structured ``{"error": {"status": ..., "message": ...}}`` API payload."""

    code = "api"

    def __init__(self, status_code: int, api_message: str, *, body: str | None = None) -> None:
        super().__init__(
            status_code,
            body=body,
            message=f"Error returned from the Spotify API: {status_code} {api_message}",
        )
        self.api_message: str = api_message


class AuthenticationError(SpotifyError):
    """The token endpoint rejected (or failed to answer) a grant request."""

    code = "authentication"

    def __init__(
        self,
        *,
        kind: AuthErrorKind,
        description: str,
        grant_type: str | None = None,
        error_code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"An error occurred during authentication: {description}")
        self.kind: AuthErrorKind = kind
        self.description: str = description
        self.grant_type: str | None = grant_type
        self.error_code: str | None = error_code
        self.status_code: int | None = status_code

    @classmethod
    def from_oauth_response(
        cls,
        payload: dict[str, Any],
        *,
        grant_type: str,
        status_code: int | None = None,
    ) -> "AuthenticationError":
        """Build the error from an RFC 6749 ``{"error", "error_description"}`` body."""
        error_code = str(payload.get("error") or "unknown_error")
        base = _OAUTH_ERROR_DESCRIPTIONS.get(error_code, error_code)
        extra = payload.get("error_description")
        description = f"{base}: {extra}" if extra else f"{base}."
        return cls(
            kind="server_response",
            description=description,
            grant_type=grant_type,
            error_code=error_code,
            status_code=status_code,
        )

    @property
    def is_refresh_failure(self) -> bool:
        return self.grant_type == "refresh_token"

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            {
                "kind": self.kind,
                "grant_type": self.grant_type,
                "error_code": self.error_code,
            }
        )
        return payload


# --------------------------------------------------------------------------- #
# Local flow validity                                                         #
# --------------------------------------------------------------------------- #
class InvalidStateError(SpotifyError):
    """The CSRF ``state`` returned by the redirect does not match ours."""

    code = "invalid_state"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or (
                "The supplied state parameter is not the same as the one sent to "
                f"the authorisation server. Learn more about CSRF here: {_CSRF_HELP}"
            )
        )


class RefreshUnavailableError(SpotifyError):
    """Refresh requested on a flow (or token) that cannot be refreshed."""

    code = "refresh_unavailable"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or (
                "Refreshing the access token is not available in the current "
                "authorisation flow."
            )
        )


class ExpiredTokenError(SpotifyError):
    """The access token expired and auto-refresh is turned off."""

    code = "expired_token"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "The access token has expired and auto-refresh is turned off."
        )


class NotAuthenticatedError(SpotifyError):
    """An endpoint was requested before the client obtained a token."""

    code = "not_authenticated"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "The client has not been authenticated.")


class InvalidClientStateError(SpotifyError):
    """Internal client state does not allow the requested operation."""

    code = "invalid_client_state"


class DeserializeError(SpotifyError):
    """A success response could not be decoded into the expected model."""

    code = "deserialize"

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message)
        self.body: str = body


class NoRemainingPagesError(SpotifyError):
    """There is no page before/after the current one."""

    code = "no_remaining_pages"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "There are no remaining pages.")
