"""Endpoint builders grouped by resource.

Each ``*Api`` class is a mixin of builder factories; :mod:`spotify_api.client`
composes them into the client-credentials and user-authorised clients.
"""

from __future__ import annotations

from .base import Endpoint, Limit, MarketEndpoint, PagedEndpoint, ReadEndpoint  # noqa: F401
from .album import AlbumsApi, SavedAlbumsApi  # noqa: F401
from .artist import ArtistsApi  # noqa: F401
from .audiobook import AudiobooksApi, SavedAudiobooksApi  # noqa: F401
from .category import CategoriesApi  # noqa: F401
from .player import PlayerApi  # noqa: F401
from .playlist import PlaylistsApi, UserPlaylistsApi  # noqa: F401
from .search import SearchApi  # noqa: F401
from .show import SavedShowsApi, ShowsApi  # noqa: F401
from .track import RecommendationLimit, SavedTracksApi, TracksApi  # noqa: F401
from .user import UserProfileApi, UsersApi  # noqa: F401

# Available to every authenticated client.
CATALOG_APIS = (
    AlbumsApi,
    ArtistsApi,
    AudiobooksApi,
    CategoriesApi,
    PlaylistsApi,
    SearchApi,
    ShowsApi,
    TracksApi,
    UsersApi,
)

# Need a token issued on behalf of a user.
USER_APIS = (
    SavedAlbumsApi,
    SavedAudiobooksApi,
    SavedShowsApi,
    SavedTracksApi,
    UserPlaylistsApi,
    UserProfileApi,
    PlayerApi,
)


def endpoint_names(*apis: type) -> frozenset[str]:
    """Public builder names defined by *apis*."""
    return frozenset(
        name
        for api in apis
        for name, attr in vars(api).items()
        if not name.startswith("_") and callable(attr)
    )


__all__ = [
    "Endpoint",
    "Limit",
    "MarketEndpoint",
    "PagedEndpoint",
    "ReadEndpoint",
    "RecommendationLimit",
    "CATALOG_APIS",
    "USER_APIS",
    "endpoint_names",
    # catalogue
    "AlbumsApi",
    "ArtistsApi",
    "AudiobooksApi",
    "CategoriesApi",
    "PlaylistsApi",
    "SearchApi",
    "ShowsApi",
    "TracksApi",
    "UsersApi",
    # user scoped
    "SavedAlbumsApi",
    "SavedAudiobooksApi",
    "SavedShowsApi",
    "SavedTracksApi",
    "UserPlaylistsApi",
    "UserProfileApi",
    "PlayerApi",
]
