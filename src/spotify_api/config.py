"""Client configuration, loadable from ``SPOTIFY_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from spotify_api.utils.environment import env_bool, env_float, env_str

API_URL: Final[str] = "https://api.spotify.com/v1"
AUTHORIZE_URL: Final[str] = "https://accounts.spotify.com/authorize"
TOKEN_URL: Final[str] = "https://accounts.spotify.com/api/token"

# (connect, read) seconds, handed straight to ``requests``.
DEFAULT_TIMEOUT: Final[tuple[float, float]] = (5, 20)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Everything a flow client needs besides the user's redirect data."""

    client_id: str
    client_secret: str | None = None
    redirect_uri: str | None = None
    scopes: frozenset[str] = field(default_factory=frozenset)
    auto_refresh: bool = False
    api_url: str = API_URL
    authorize_url: str = AUTHORIZE_URL
    token_url: str = TOKEN_URL
    timeout: tuple[float, float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, prefix: str = "SPOTIFY_") -> "ClientConfig":
        """Build a config from ``<prefix>*`` variables.

        Raises
        ------
        ValueError
            If ``<prefix>CLIENT_ID`` is not set.
        """
        client_id = env_str(f"{prefix}CLIENT_ID")
        if not client_id:
            raise ValueError(f"{prefix}CLIENT_ID is not set")

        return cls(
            client_id=client_id,
            client_secret=env_str(f"{prefix}CLIENT_SECRET"),
            redirect_uri=env_str(f"{prefix}REDIRECT_URI"),
            scopes=frozenset((env_str(f"{prefix}SCOPES") or "").replace(",", " ").split()),
            auto_refresh=env_bool(f"{prefix}AUTO_REFRESH"),
            api_url=(env_str(f"{prefix}API_URL") or API_URL).rstrip("/"),
            authorize_url=env_str(f"{prefix}AUTHORIZE_URL") or AUTHORIZE_URL,
            token_url=env_str(f"{prefix}TOKEN_URL") or TOKEN_URL,
            timeout=(
                env_float(f"{prefix}HTTP_CONNECT_TIMEOUT", DEFAULT_TIMEOUT[0]),
                env_float(f"{prefix}HTTP_READ_TIMEOUT", DEFAULT_TIMEOUT[1]),
            ),
        )
