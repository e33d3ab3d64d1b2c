"""Token-endpoint client for the Spotify accounts service.

``OAuthClient`` builds the authorize URL for the browser redirect and performs
the three grant exchanges the library needs (``authorization_code``,
``client_credentials`` and ``refresh_token``).  It is stateless apart from the
flow descriptor: tokens are returned to the caller, never stored here.

Every failure, transport included, is raised as
:class:`~spotify_api.errors.AuthenticationError` with ``grant_type`` set, so
a failed refresh can always be told apart from a failed API call.

For now **all secrets are redacted** from logs: only masked client ids and
expiry information are written.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

import requests

from spotify_api.auth.flows import AuthCodeFlow, AuthCodePkceFlow, AuthFlow
from spotify_api.auth.log_utils import get_auth_logger
from spotify_api.auth.models import Clock, Token, default_clock
from spotify_api.auth.pkce import CHALLENGE_METHOD
from spotify_api.config import AUTHORIZE_URL, DEFAULT_TIMEOUT, TOKEN_URL
from spotify_api.errors import AuthenticationError, InvalidClientStateError


class OAuthClient:
    """Talks to the accounts service on behalf of one :class:`AuthFlow`."""

    def __init__(
        self,
        flow: AuthFlow,
        *,
        session: requests.Session | None = None,
        authorize_url: str = AUTHORIZE_URL,
        token_url: str = TOKEN_URL,
        timeout: tuple[float, float] = DEFAULT_TIMEOUT,
        clock: Clock = default_clock,
    ) -> None:
        self.flow = flow
        self.session = session or requests.Session()
        self.authorize_endpoint = authorize_url
        self.token_endpoint = token_url
        self.timeout = timeout
        self.clock = clock
        self._log = get_auth_logger(
            base_logger_name="spotify-api.auth.oauth",
            flow=flow.name,
            client_id=flow.client_id,
        )

    # ------------------------------------------------------------------ #
    # Browser redirect                                                   #
    # ------------------------------------------------------------------ #
    def authorize_url(self, *, show_dialog: bool = False) -> str:
        """Return the URL the user must visit to grant access."""
        flow = self.flow
        if not isinstance(flow, (AuthCodeFlow, AuthCodePkceFlow)):
            raise InvalidClientStateError(
                f"the {flow.name} flow has no authorization redirect"
            )

        query_params: dict[str, str] = {
            "response_type": "code",
            "client_id": flow.client_id,
            "redirect_uri": flow.redirect_uri,
            "state": flow.csrf_token,
        }
        if flow.scopes:
            query_params["scope"] = flow.scope_param
        if isinstance(flow, AuthCodePkceFlow):
            if flow.pkce is None:
                raise InvalidClientStateError(
                    "the client's PKCE verifier is missing; create a new client"
                )
            query_params["code_challenge"] = flow.pkce.challenge
            query_params["code_challenge_method"] = CHALLENGE_METHOD
        if show_dialog:
            query_params["show_dialog"] = "true"

        self._log.debug("Built authorize URL (scopes=%s)", query_params.get("scope", ""))
        return f"{self.authorize_endpoint}?{urlencode(query_params)}"

    # ------------------------------------------------------------------ #
    # Grants                                                             #
    # ------------------------------------------------------------------ #
    def exchange_code(self, code: str) -> Token:
        """Exchange an authorization *code* for a token."""
        flow = self.flow
        if not isinstance(flow, (AuthCodeFlow, AuthCodePkceFlow)):
            raise InvalidClientStateError(
                f"the {flow.name} flow cannot exchange authorization codes"
            )

        payload = {
            "grant_type": "authorization_code",
            "code": code.strip(),
            "redirect_uri": flow.redirect_uri,
        }
        if isinstance(flow, AuthCodePkceFlow):
            if flow.pkce is None:
                raise InvalidClientStateError(
                    "Internal error: the client's PKCE verifier was missing when "
                    "authenticating."
                )
            payload["code_verifier"] = flow.pkce.verifier
        return self._request_token(payload)

    def request_client_credentials(self) -> Token:
        """Obtain an app-only token (client credentials grant)."""
        return self._request_token({"grant_type": "client_credentials"})

    def refresh(self, refresh_token: str) -> Token:
        """Exchange *refresh_token* for a new token.

        The returned token may lack a refresh token; the caller decides
        whether to keep the previous one (see :meth:`Token.refreshed`).
        """
        return self._request_token(
            {"grant_type": "refresh_token", "refresh_token": refresh_token}
        )

    # ---------------- internal helpers --------------------------------- #
    def _request_token(self, payload: dict[str, str]) -> Token:
        grant_type = payload["grant_type"]
        auth: tuple[str, str] | None = None
        if self.flow.client_secret:
            auth = (self.flow.client_id, self.flow.client_secret)
        else:
            # public (PKCE) client: identify ourselves in the form body
            payload = {**payload, "client_id": self.flow.client_id}

        try:
            resp = self.session.post(
                self.token_endpoint,
                data=payload,
                auth=auth,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise AuthenticationError(
                kind="request",
                description=(
                    "An error occurred while sending the request or receiving the "
                    f"response from the authentication server: {exc}"
                ),
                grant_type=grant_type,
            ) from exc

        body = _json_or_none(resp)
        if not resp.ok:
            if isinstance(body, dict) and body.get("error"):
                raise AuthenticationError.from_oauth_response(
                    body, grant_type=grant_type, status_code=resp.status_code
                )
            raise AuthenticationError(
                kind="parse",
                description=(
                    f"Token endpoint returned {resp.status_code}: {resp.text[:200]}"
                ),
                grant_type=grant_type,
                status_code=resp.status_code,
            )

        if not isinstance(body, dict) or not body.get("access_token"):
            raise AuthenticationError(
                kind="parse",
                description="Failed to parse server response: missing access_token",
                grant_type=grant_type,
                status_code=resp.status_code,
            )

        token = Token.from_response(body, clock=self.clock)
        self._log.info(
            "Obtained access token via %s (expires in %ss)", grant_type, token.ttl
        )
        return token


def _json_or_none(resp: Any) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None
