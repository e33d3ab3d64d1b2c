"""Typed client for the Spotify Web API.

Pick the flow client matching your app, authenticate, then use the returned
client's endpoint builders::

    client = ClientCredsClient(client_id, client_secret).authenticate()
    album = client.album("4aawyAB9vmqN3uQ7FjRGTy").market("US").get()

User flows go through the browser first::

    flow = AuthCodePkceClient(client_id, redirect_uri, scopes="user-read-email")
    print(flow.authorize_url)
    user = flow.authenticate(code, state)   # values from the redirect
    me = user.current_user().get()
"""

from __future__ import annotations

from .auth import Token  # noqa: F401
from .client import (  # noqa: F401
    AuthCodeClient,
    AuthCodePkceClient,
    Client,
    ClientCredsClient,
    UserClient,
)
from .config import ClientConfig  # noqa: F401
from .endpoints import Limit  # noqa: F401
from .errors import (  # noqa: F401
    ApiError,
    AuthenticationError,
    DeserializeError,
    ExpiredTokenError,
    HttpError,
    InvalidClientStateError,
    InvalidStateError,
    NoRemainingPagesError,
    NotAuthenticatedError,
    RefreshUnavailableError,
    SpotifyError,
    TransportError,
)
from .models import NO_CONTENT  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # clients
    "AuthCodeClient",
    "AuthCodePkceClient",
    "ClientCredsClient",
    "Client",
    "UserClient",
    "ClientConfig",
    "Token",
    "Limit",
    "NO_CONTENT",
    # errors
    "SpotifyError",
    "TransportError",
    "HttpError",
    "ApiError",
    "AuthenticationError",
    "InvalidStateError",
    "RefreshUnavailableError",
    "ExpiredTokenError",
    "NotAuthenticatedError",
    "InvalidClientStateError",
    "DeserializeError",
    "NoRemainingPagesError",
]
