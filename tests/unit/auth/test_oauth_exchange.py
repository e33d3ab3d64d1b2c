"""Unit tests for OAuthClient (authorize URL and token endpoint grants).

Coverage:
* Authorize URL query parameters for the code and PKCE flows
* Confidential clients authenticate with HTTP Basic, PKCE clients in the form
* RFC 6749 error bodies map to AuthenticationError(kind="server_response")
* Transport failures and malformed bodies are reported with grant_type set
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from spotify_api.auth.flows import AuthCodeFlow, AuthCodePkceFlow, ClientCredsFlow
from spotify_api.auth.oauth import OAuthClient
from spotify_api.config import TOKEN_URL
from spotify_api.errors import AuthenticationError, InvalidClientStateError


def _code_flow() -> AuthCodeFlow:
    return AuthCodeFlow.create(
        "client-id-123", "shh", "http://localhost/cb", "user-read-email playlist-read-private"
    )


def _query(url: str) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


# --------------------------------------------------------------------------- #
# Authorize URL                                                               #
# --------------------------------------------------------------------------- #
def test_authorize_url_code_flow(session) -> None:
    flow = _code_flow()
    url = OAuthClient(flow, session=session).authorize_url()
    query = _query(url)
    assert url.startswith("https://accounts.spotify.com/authorize?")
    assert query["response_type"] == "code"
    assert query["client_id"] == "client-id-123"
    assert query["redirect_uri"] == "http://localhost/cb"
    assert query["state"] == flow.csrf_token
    assert query["scope"] == "playlist-read-private user-read-email"
    assert "code_challenge" not in query
    assert session.posts == []


def test_authorize_url_pkce_flow_carries_challenge(session) -> None:
    flow = AuthCodePkceFlow.create("client-id-123", "http://localhost/cb")
    query = _query(OAuthClient(flow, session=session).authorize_url(show_dialog=True))
    assert query["code_challenge"] == flow.pkce.challenge
    assert query["code_challenge_method"] == "S256"
    assert query["show_dialog"] == "true"
    assert "scope" not in query


def test_authorize_url_unavailable_for_client_credentials(session) -> None:
    oauth = OAuthClient(ClientCredsFlow.create("id", "secret"), session=session)
    with pytest.raises(InvalidClientStateError):
        oauth.authorize_url()


# --------------------------------------------------------------------------- #
# Grants                                                                      #
# --------------------------------------------------------------------------- #
def test_exchange_code_uses_basic_auth(session, token_payload) -> None:
    session.queue_token(token_payload())
    token = OAuthClient(_code_flow(), session=session).exchange_code("  the-code \n")

    url, kwargs = session.posts[0]
    assert url == TOKEN_URL
    assert kwargs["auth"] == ("client-id-123", "shh")
    assert kwargs["data"] == {
        "grant_type": "authorization_code",
        "code": "the-code",
        "redirect_uri": "http://localhost/cb",
    }
    assert token.access_token == "at-1"
    assert token.refresh_token == "rt-1"


def test_exchange_code_pkce_sends_verifier_and_client_id(session, token_payload) -> None:
    flow = AuthCodePkceFlow.create("public-client", "http://localhost/cb")
    session.queue_token(token_payload())
    OAuthClient(flow, session=session).exchange_code("c0de")

    _, kwargs = session.posts[0]
    assert kwargs["auth"] is None
    assert kwargs["data"]["client_id"] == "public-client"
    assert kwargs["data"]["code_verifier"] == flow.pkce.verifier


def test_client_credentials_grant(session, token_payload) -> None:
    session.queue_token(token_payload(refresh_token=None))
    token = OAuthClient(ClientCredsFlow.create("id", "secret"), session=session).request_client_credentials()
    assert session.posts[0][1]["data"] == {"grant_type": "client_credentials"}
    assert token.refresh_token is None


def test_server_error_maps_to_authentication_error(session) -> None:
    session.queue_token(
        {"error": "invalid_grant", "error_description": "Invalid authorization code"},
        status=400,
    )
    with pytest.raises(AuthenticationError) as exc:
        OAuthClient(_code_flow(), session=session).exchange_code("bad")

    err = exc.value
    assert err.kind == "server_response"
    assert err.error_code == "invalid_grant"
    assert err.grant_type == "authorization_code"
    assert err.status_code == 400
    assert "Invalid authorization code" in err.description
    assert not err.is_refresh_failure


def test_refresh_error_is_flagged(session) -> None:
    session.queue_token({"error": "invalid_grant"}, status=400)
    with pytest.raises(AuthenticationError) as exc:
        OAuthClient(_code_flow(), session=session).refresh("rt")
    assert exc.value.is_refresh_failure
    assert exc.value.to_payload()["grant_type"] == "refresh_token"


def test_non_json_error_is_parse_kind(session) -> None:
    session.queue_token(text="<html>bad gateway</html>", status=502)
    with pytest.raises(AuthenticationError) as exc:
        OAuthClient(_code_flow(), session=session).exchange_code("c")
    assert exc.value.kind == "parse"
    assert exc.value.status_code == 502


def test_missing_access_token_is_parse_kind(session) -> None:
    session.queue_token({"token_type": "Bearer"})
    with pytest.raises(AuthenticationError) as exc:
        OAuthClient(_code_flow(), session=session).exchange_code("c")
    assert exc.value.kind == "parse"


def test_transport_failure_is_request_kind(session) -> None:
    session.post_error = requests.ConnectionError("connection refused")
    with pytest.raises(AuthenticationError) as exc:
        OAuthClient(_code_flow(), session=session).refresh("rt")
    assert exc.value.kind == "request"
    assert exc.value.grant_type == "refresh_token"
