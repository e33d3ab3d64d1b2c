"""Immutable descriptors for the three supported OAuth 2.0 flows.

A flow is built once, when its client is constructed, and never mutated
afterwards.  It carries everything the token endpoint needs for that flow
plus the knobs that decide what the authenticated client may do:

* :class:`AuthCodeFlow` - confidential client, user authorised, refreshable.
* :class:`AuthCodePkceFlow` - public client (no secret), user authorised,
  refreshable.
* :class:`ClientCredsFlow` - app-only access, no user resources and no
  refresh token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable

from spotify_api.auth.models import parse_scopes
from spotify_api.auth.pkce import PkcePair
from spotify_api.auth.state import generate_csrf_token


@dataclass(frozen=True, slots=True)
class AuthFlow:
    """Fields common to every flow."""

    name: ClassVar[str] = "base"
    # Whether tokens minted by this flow can be refreshed.
    supports_refresh: ClassVar[bool] = False
    # Whether tokens minted by this flow act on behalf of a user.
    user_authorised: ClassVar[bool] = False

    client_id: str
    client_secret: str | None = None
    scopes: frozenset[str] = field(default_factory=frozenset)

    @property
    def scope_param(self) -> str:
        return " ".join(sorted(self.scopes))


@dataclass(frozen=True, slots=True)
class AuthCodeFlow(AuthFlow):
    name: ClassVar[str] = "auth_code"
    supports_refresh: ClassVar[bool] = True
    user_authorised: ClassVar[bool] = True

    redirect_uri: str = ""
    csrf_token: str = field(default_factory=generate_csrf_token)

    @classmethod
    def create(
        cls,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes: str | Iterable[str] | None = None,
    ) -> "AuthCodeFlow":
        if not client_secret:
            raise ValueError("the authorization code flow requires a client secret")
        if not redirect_uri:
            raise ValueError("redirect_uri is required")
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            scopes=parse_scopes(scopes),
            redirect_uri=redirect_uri,
        )


@dataclass(frozen=True, slots=True)
class AuthCodePkceFlow(AuthFlow):
    name: ClassVar[str] = "auth_code_pkce"
    supports_refresh: ClassVar[bool] = True
    user_authorised: ClassVar[bool] = True

    redirect_uri: str = ""
    csrf_token: str = field(default_factory=generate_csrf_token)
    pkce: PkcePair | None = field(default_factory=PkcePair.generate)

    @classmethod
    def create(
        cls,
        client_id: str,
        redirect_uri: str,
        scopes: str | Iterable[str] | None = None,
    ) -> "AuthCodePkceFlow":
        if not redirect_uri:
            raise ValueError("redirect_uri is required")
        return cls(client_id=client_id, scopes=parse_scopes(scopes), redirect_uri=redirect_uri)


@dataclass(frozen=True, slots=True)
class ClientCredsFlow(AuthFlow):
    name: ClassVar[str] = "client_creds"

    @classmethod
    def create(cls, client_id: str, client_secret: str) -> "ClientCredsFlow":
        if not client_secret:
            raise ValueError("the client credentials flow requires a client secret")
        return cls(client_id=client_id, client_secret=client_secret)
