from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
    LocaleMixin,
    MarketEndpoint,
    PagedEndpoint,
    PagingMixin,
    ReadEndpoint,
    ids_contains,
    ids_write,
    join_ids,
    parse_as,
    parse_key,
)
from spotify_api.models import Album, Page, SavedAlbum, SimplifiedAlbum, SimplifiedTrack


class NewReleasesEndpoint(PagingMixin, LocaleMixin, ReadEndpoint[Page[SimplifiedAlbum]]):
    pass


class AlbumsApi:
    """Album catalogue lookups (any flow)."""

    def album(self, album_id: str) -> MarketEndpoint[Album]:
        return MarketEndpoint(self, f"/albums/{album_id}", parse_as(Album))

    def albums(self, album_ids: Iterable[str]) -> MarketEndpoint[list[Album]]:
        """Up to 20 albums in one request."""
        return MarketEndpoint(
            self,
            "/albums",
            parse_key("albums", list[Album]),
            params={"ids": join_ids(album_ids)},
        )

    def album_tracks(self, album_id: str) -> PagedEndpoint[Page[SimplifiedTrack]]:
        return PagedEndpoint(
            self, f"/albums/{album_id}/tracks", parse_as(Page[SimplifiedTrack])
        )

    def new_releases(self) -> NewReleasesEndpoint:
        return NewReleasesEndpoint(
            self, "/browse/new-releases", parse_key("albums", Page[SimplifiedAlbum])
        )


class SavedAlbumsApi:
    """The current user's saved albums (user-authorised flows only)."""

    def saved_albums(self) -> PagedEndpoint[Page[SavedAlbum]]:
        return PagedEndpoint(self, "/me/albums", parse_as(Page[SavedAlbum]))

    def save_albums(self, album_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "PUT", "/me/albums", album_ids)

    def remove_saved_albums(self, album_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "DELETE", "/me/albums", album_ids)

    def check_saved_albums(self, album_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/albums/contains", album_ids)
