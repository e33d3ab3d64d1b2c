"""Flow clients and the authenticated API clients they produce.

Authentication is a one-way state change, modelled as a change of type:

* :class:`AuthCodeClient`, :class:`AuthCodePkceClient` and
  :class:`ClientCredsClient` are *unauthenticated*.  They build the authorize
  URL (user flows) and run the token exchange, but expose no endpoint
  builders; looking one up raises :class:`NotAuthenticatedError`.
* ``authenticate()`` returns an authenticated client: a :class:`UserClient`
  for the user flows, a plain :class:`Client` for client credentials.
  User-scoped builders exist only on :class:`UserClient`; asking a
  :class:`Client` for one raises :class:`InvalidClientStateError`.

Every builder ends in :meth:`Client.request`, the single execution path:
token check (and refresh if enabled) → HTTP → error mapping → parsing.
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Mapping

import requests

from spotify_api.auth.flows import AuthCodeFlow, AuthCodePkceFlow, AuthFlow, ClientCredsFlow
from spotify_api.auth.manager import TokenManager
from spotify_api.auth.models import DEFAULT_EXPIRES_IN, Clock, Token, default_clock, parse_scopes
from spotify_api.auth.oauth import OAuthClient
from spotify_api.auth.state import verify_state
from spotify_api.config import ClientConfig
from spotify_api.endpoints import CATALOG_APIS, USER_APIS, endpoint_names
from spotify_api.endpoints.album import AlbumsApi, SavedAlbumsApi
from spotify_api.endpoints.artist import ArtistsApi
from spotify_api.endpoints.audiobook import AudiobooksApi, SavedAudiobooksApi
from spotify_api.endpoints.category import CategoriesApi
from spotify_api.endpoints.player import PlayerApi
from spotify_api.endpoints.playlist import PlaylistsApi, UserPlaylistsApi
from spotify_api.endpoints.search import SearchApi
from spotify_api.endpoints.show import SavedShowsApi, ShowsApi
from spotify_api.endpoints.track import SavedTracksApi, TracksApi
from spotify_api.endpoints.user import UserProfileApi, UsersApi
from spotify_api.errors import InvalidClientStateError, NotAuthenticatedError
from spotify_api.transport import Transport, decode_response
from spotify_api.utils.logging import mask_sensitive

_LOG = logging.getLogger("spotify-api.client")

_CATALOG_ENDPOINTS = endpoint_names(*CATALOG_APIS)
_USER_ENDPOINTS = endpoint_names(*USER_APIS)


# --------------------------------------------------------------------------- #
# Authenticated clients                                                       #
# --------------------------------------------------------------------------- #
class Client(
    AlbumsApi,
    ArtistsApi,
    AudiobooksApi,
    CategoriesApi,
    PlaylistsApi,
    SearchApi,
    ShowsApi,
    TracksApi,
    UsersApi,
):
    """Authenticated client exposing the catalogue endpoints."""

    def __init__(self, tokens: TokenManager, transport: Transport) -> None:
        self.tokens = tokens
        self.transport = transport

    @property
    def token(self) -> Token | None:
        return self.tokens.token

    @property
    def flow(self) -> AuthFlow:
        return self.tokens.flow

    def refresh(self) -> Token:
        """Refresh the access token now and return the new token.

        Raises :class:`RefreshUnavailableError` for client credentials.
        """
        return self.tokens.refresh()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
        parse: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Send one request and return its parsed result.

        *path* is relative to the API base URL or an absolute URL such as a
        page's ``next`` link.  Without *parse*, or for an empty body, the
        result is :data:`~spotify_api.models.NO_CONTENT`.
        """
        access_token = self.tokens.access_token()
        resp = self.transport.send(
            method,
            path,
            access_token=access_token,
            params=params,
            json_body=json,
            data=data,
            headers=headers,
        )
        return decode_response(resp, parse)

    def __getattr__(self, name: str) -> Any:
        if name in _USER_ENDPOINTS:
            raise InvalidClientStateError(
                f"{name}() needs a user-authorised client; use the authorization "
                "code or PKCE flow"
            )
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} flow={self.flow.name} token={self.token!r}>"


class UserClient(
    SavedAlbumsApi,
    SavedAudiobooksApi,
    SavedShowsApi,
    SavedTracksApi,
    UserPlaylistsApi,
    UserProfileApi,
    PlayerApi,
    Client,
):
    """Authenticated client acting on behalf of a user (code or PKCE flow)."""


# --------------------------------------------------------------------------- #
# Unauthenticated flow clients                                                #
# --------------------------------------------------------------------------- #
class _FlowClient:
    """Shared plumbing of the unauthenticated clients."""

    flow: AuthFlow

    def __init__(
        self,
        flow: AuthFlow,
        config: ClientConfig,
        *,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> None:
        self.flow = flow
        self.config = config
        self.clock = clock
        self._session = session or requests.Session()
        self.oauth = OAuthClient(
            flow,
            session=self._session,
            authorize_url=config.authorize_url,
            token_url=config.token_url,
            timeout=config.timeout,
            clock=clock,
        )

    def _authenticated(self, token: Token, *, user: bool, auto_refresh: bool) -> Client:
        cls = UserClient if user else Client
        tokens = TokenManager(self.oauth, token, auto_refresh=auto_refresh, clock=self.clock)
        transport = Transport(
            self.config.api_url, session=self._session, timeout=self.config.timeout
        )
        return cls(tokens, transport)

    def __getattr__(self, name: str) -> Any:
        if name in _CATALOG_ENDPOINTS or name in _USER_ENDPOINTS:
            raise NotAuthenticatedError(
                f"call authenticate() before using {name}(); "
                f"{type(self).__name__} has no access token yet"
            )
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def _resolve_config(config: ClientConfig | None, **overrides: Any) -> ClientConfig:
    """Merge explicit keyword arguments over *config* (``None`` = not given)."""
    given = {key: value for key, value in overrides.items() if value is not None}
    if "scopes" in given:
        given["scopes"] = parse_scopes(given["scopes"])
    if config is None:
        if not given.get("client_id"):
            raise ValueError("client_id is required (or pass config=ClientConfig(...))")
        return ClientConfig(**given)
    return dataclasses.replace(config, **given)


def _validated(client: Client) -> Client:
    # any cheap authorised call proves the token is usable
    client.markets().send()
    return client


class _UserFlowClient(_FlowClient, ABC):
    flow: AuthCodeFlow | AuthCodePkceFlow

    def __init__(
        self,
        flow: AuthCodeFlow | AuthCodePkceFlow,
        config: ClientConfig,
        *,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> None:
        super().__init__(flow, config, session=session, clock=clock)
        self._consumed = False

    @property
    def authorize_url(self) -> str:
        """URL to send the user to; carries the scopes and the CSRF state."""
        return self.oauth.authorize_url()

    @property
    def csrf_token(self) -> str:
        return self.flow.csrf_token

    def authorize_url_with_dialog(self) -> str:
        """Like :attr:`authorize_url` but forces the consent dialog again."""
        return self.oauth.authorize_url(show_dialog=True)

    def authenticate(self, auth_code: str, csrf_state: str) -> UserClient:
        """Exchange the redirect's ``code`` for a token.

        The redirect's ``state`` is checked first; on mismatch
        :class:`InvalidStateError` is raised and nothing is sent.  A flow
        client authenticates once; later calls raise
        :class:`InvalidClientStateError`.
        """
        verify_state(self.flow.csrf_token, csrf_state)
        if self._consumed:
            raise InvalidClientStateError(
                "this client already exchanged its authorization code; create a new one"
            )
        self._consumed = True

        token = self._exchange(auth_code)
        _LOG.info(
            "Authenticated %s client %s", self.flow.name, mask_sensitive(self.flow.client_id, 6)
        )
        return self._authenticated(token, user=True, auto_refresh=self.config.auto_refresh)

    def _exchange(self, auth_code: str) -> Token:
        return self.oauth.exchange_code(auth_code)

    # ------------------------------------------------------------------ #
    # Resuming from stored credentials                                   #
    # ------------------------------------------------------------------ #
    @classmethod
    @abstractmethod
    def _token_flow(cls, cfg: ClientConfig) -> AuthCodeFlow | AuthCodePkceFlow:
        """Flow descriptor for resuming without a browser redirect."""

    @classmethod
    def _resume(
        cls, cfg: ClientConfig, *, session: requests.Session | None, clock: Clock
    ) -> "_UserFlowClient":
        # no browser redirect happens here, so no redirect_uri is needed
        client = cls.__new__(cls)
        _UserFlowClient.__init__(client, cls._token_flow(cfg), cfg, session=session, clock=clock)
        return client

    @classmethod
    def _resume_with_refresh_token(
        cls,
        refresh_token: str,
        cfg: ClientConfig,
        *,
        session: requests.Session | None,
        clock: Clock,
    ) -> UserClient:
        flow_client = cls._resume(cfg, session=session, clock=clock)
        token = flow_client.oauth.refresh(refresh_token)
        if token.refresh_token is None:
            token = dataclasses.replace(token, refresh_token=refresh_token)
        return flow_client._with_token(token, validate=False)

    @classmethod
    def _resume_with_access_token(
        cls,
        access_token: str,
        cfg: ClientConfig,
        *,
        refresh_token: str | None,
        expires_in: int,
        session: requests.Session | None,
        clock: Clock,
    ) -> UserClient:
        flow_client = cls._resume(cfg, session=session, clock=clock)
        token = Token.from_access_token(
            access_token,
            refresh_token=refresh_token,
            expires_in=expires_in,
            scopes=cfg.scopes,
            clock=clock,
        )
        return flow_client._with_token(token, validate=True)

    def _with_token(self, token: Token, *, validate: bool) -> UserClient:
        auto_refresh = self.config.auto_refresh
        if auto_refresh and not token.is_refreshable:
            _LOG.warning("auto_refresh disabled: the supplied token has no refresh token")
            auto_refresh = False
        client = self._authenticated(token, user=True, auto_refresh=auto_refresh)
        return _validated(client) if validate else client


class AuthCodeClient(_UserFlowClient):
    """Authorization code flow for confidential clients (with a secret)."""

    flow: AuthCodeFlow

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> None:
        cfg = _resolve_config(
            config,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            scopes=scopes,
            auto_refresh=auto_refresh,
        )
        flow = AuthCodeFlow.create(
            cfg.client_id, cfg.client_secret or "", cfg.redirect_uri or "", cfg.scopes
        )
        super().__init__(flow, cfg, session=session, clock=clock)

    @classmethod
    def from_refresh_token(
        cls,
        refresh_token: str,
        client_id: str | None = None,
        client_secret: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> UserClient:
        """Authenticate with a refresh token saved from an earlier session."""
        cfg = _resolve_config(
            config,
            client_id=client_id,
            client_secret=client_secret,
            scopes=scopes,
            auto_refresh=auto_refresh,
        )
        return cls._resume_with_refresh_token(refresh_token, cfg, session=session, clock=clock)

    @classmethod
    def from_access_token(
        cls,
        access_token: str,
        client_id: str | None = None,
        client_secret: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        refresh_token: str | None = None,
        expires_in: int = DEFAULT_EXPIRES_IN,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> UserClient:
        """Wrap an existing access token, checked with one ``GET /markets``.

        Auto-refresh is only enabled when *refresh_token* is given.
        """
        cfg = _resolve_config(
            config,
            client_id=client_id,
            client_secret=client_secret,
            scopes=scopes,
            auto_refresh=auto_refresh,
        )
        return cls._resume_with_access_token(
            access_token,
            cfg,
            refresh_token=refresh_token,
            expires_in=expires_in,
            session=session,
            clock=clock,
        )

    @classmethod
    def _token_flow(cls, cfg: ClientConfig) -> AuthCodeFlow:
        if not cfg.client_secret:
            raise ValueError("the authorization code flow requires a client secret")
        return AuthCodeFlow(
            client_id=cfg.client_id, client_secret=cfg.client_secret, scopes=cfg.scopes
        )


class AuthCodePkceClient(_UserFlowClient):
    """Authorization code flow with PKCE for public clients (no secret).

    The code verifier is dropped as soon as the exchange has been attempted.
    """

    flow: AuthCodePkceFlow

    def __init__(
        self,
        client_id: str | None = None,
        redirect_uri: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> None:
        cfg = _resolve_config(
            config,
            client_id=client_id,
            redirect_uri=redirect_uri,
            scopes=scopes,
            auto_refresh=auto_refresh,
        )
        flow = AuthCodePkceFlow.create(cfg.client_id, cfg.redirect_uri or "", cfg.scopes)
        super().__init__(flow, cfg, session=session, clock=clock)

    def _exchange(self, auth_code: str) -> Token:
        try:
            return self.oauth.exchange_code(auth_code)
        finally:
            self.flow = dataclasses.replace(self.flow, pkce=None)
            self.oauth.flow = self.flow

    @classmethod
    def from_refresh_token(
        cls,
        refresh_token: str,
        client_id: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> UserClient:
        """Authenticate with a refresh token saved from an earlier session."""
        cfg = _resolve_config(
            config, client_id=client_id, scopes=scopes, auto_refresh=auto_refresh
        )
        return cls._resume_with_refresh_token(refresh_token, cfg, session=session, clock=clock)

    @classmethod
    def from_access_token(
        cls,
        access_token: str,
        client_id: str | None = None,
        scopes: str | Iterable[str] | None = None,
        *,
        refresh_token: str | None = None,
        expires_in: int = DEFAULT_EXPIRES_IN,
        auto_refresh: bool | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> UserClient:
        """Wrap an existing access token, checked with one ``GET /markets``."""
        cfg = _resolve_config(
            config, client_id=client_id, scopes=scopes, auto_refresh=auto_refresh
        )
        return cls._resume_with_access_token(
            access_token,
            cfg,
            refresh_token=refresh_token,
            expires_in=expires_in,
            session=session,
            clock=clock,
        )

    @classmethod
    def _token_flow(cls, cfg: ClientConfig) -> AuthCodePkceFlow:
        return AuthCodePkceFlow(client_id=cfg.client_id, scopes=cfg.scopes, pkce=None)


class ClientCredsClient(_FlowClient):
    """Client credentials flow: app-only access to the catalogue.

    Tokens from this flow cannot be refreshed; once one expires, call
    :meth:`authenticate` again.
    """

    flow: ClientCredsFlow

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        *,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> None:
        cfg = _resolve_config(config, client_id=client_id, client_secret=client_secret)
        flow = ClientCredsFlow.create(cfg.client_id, cfg.client_secret or "")
        super().__init__(flow, cfg, session=session, clock=clock)

    def authenticate(self) -> Client:
        token = self.oauth.request_client_credentials()
        _LOG.info(
            "Authenticated %s client %s", self.flow.name, mask_sensitive(self.flow.client_id, 6)
        )
        return self._authenticated(token, user=False, auto_refresh=False)

    @classmethod
    def from_access_token(
        cls,
        access_token: str,
        client_id: str | None = None,
        client_secret: str | None = None,
        *,
        expires_in: int = DEFAULT_EXPIRES_IN,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Clock = default_clock,
    ) -> Client:
        """Wrap an existing app token, checked with one ``GET /markets``."""
        flow_client = cls(
            client_id, client_secret, config=config, session=session, clock=clock
        )
        token = Token.from_access_token(access_token, expires_in=expires_in, clock=clock)
        return _validated(flow_client._authenticated(token, user=False, auto_refresh=False))
