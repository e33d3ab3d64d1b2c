from __future__ import annotations

import base64
from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
    LocaleMixin,
    MarketEndpoint,
    PagedEndpoint,
    PagingMixin,
    ReadEndpoint,
    ids_contains,
    parse_as,
    parse_key,
)
from spotify_api.models import (
    FeaturedPlaylists,
    Image,
    Page,
    Playlist,
    PlaylistItem,
    SimplifiedPlaylist,
)

_snapshot = parse_key("snapshot_id", str)


def _uris(uris: Iterable[str]) -> list[str]:
    if isinstance(uris, str):
        return [uris]
    return list(uris)


# --------------------------------------------------------------------------- #
# Builders                                                                    #
# --------------------------------------------------------------------------- #
class PlaylistEndpoint(MarketEndpoint[Playlist]):
    def fields(self, fields: str) -> "PlaylistEndpoint":
        """Field filter, e.g. ``"name,tracks.items(track(name))"``."""
        return self._param("fields", fields)


class PlaylistItemsEndpoint(PagedEndpoint[Page[PlaylistItem]]):
    def fields(self, fields: str) -> "PlaylistItemsEndpoint":
        return self._param("fields", fields)


class PlaylistsPageEndpoint(PagingMixin, ReadEndpoint[Page[SimplifiedPlaylist]]):
    pass


class FeaturedPlaylistsEndpoint(PagingMixin, LocaleMixin, ReadEndpoint[FeaturedPlaylists]):
    def timestamp(self, timestamp: str) -> "FeaturedPlaylistsEndpoint":
        """ISO 8601 local time, e.g. ``2014-10-23T09:00:00``."""
        return self._param("timestamp", timestamp)


class CategoryPlaylistsEndpoint(PagingMixin, ReadEndpoint[Page[SimplifiedPlaylist]]):
    def country(self, country: str) -> "CategoryPlaylistsEndpoint":
        return self._param("country", country)


class PlaylistDetailsEndpoint(Endpoint[None]):
    def name(self, name: str) -> "PlaylistDetailsEndpoint":
        return self._field("name", name)

    def public(self, public: bool) -> "PlaylistDetailsEndpoint":
        return self._field("public", public)

    def collaborative(self, collaborative: bool) -> "PlaylistDetailsEndpoint":
        """Only non-public playlists can be collaborative."""
        return self._field("collaborative", collaborative)

    def description(self, description: str) -> "PlaylistDetailsEndpoint":
        return self._field("description", description)


class ReorderPlaylistItemsEndpoint(Endpoint[str]):
    """Replace or reorder playlist items.

    With :meth:`uris` the playlist content is replaced; otherwise
    :meth:`range_start` and :meth:`insert_before` move a block of
    :meth:`range_length` items.
    """

    def uris(self, uris: Iterable[str]) -> "ReorderPlaylistItemsEndpoint":
        return self._field("uris", _uris(uris))

    def range_start(self, position: int) -> "ReorderPlaylistItemsEndpoint":
        return self._field("range_start", position)

    def insert_before(self, position: int) -> "ReorderPlaylistItemsEndpoint":
        return self._field("insert_before", position)

    def range_length(self, length: int) -> "ReorderPlaylistItemsEndpoint":
        return self._field("range_length", length)

    def snapshot_id(self, snapshot_id: str) -> "ReorderPlaylistItemsEndpoint":
        return self._field("snapshot_id", snapshot_id)


class AddPlaylistItemsEndpoint(Endpoint[str]):
    def position(self, position: int) -> "AddPlaylistItemsEndpoint":
        """Zero-based insert position; items are appended by default."""
        return self._field("position", position)


class RemovePlaylistItemsEndpoint(Endpoint[str]):
    def snapshot_id(self, snapshot_id: str) -> "RemovePlaylistItemsEndpoint":
        return self._field("snapshot_id", snapshot_id)


class FollowPlaylistEndpoint(Endpoint[None]):
    def public(self, public: bool) -> "FollowPlaylistEndpoint":
        """Show the playlist on the user's public profile (default ``True``)."""
        return self._field("public", public)


# --------------------------------------------------------------------------- #
# Operations                                                                  #
# --------------------------------------------------------------------------- #
class PlaylistsApi:
    """Playlist reads available to every flow."""

    def playlist(self, playlist_id: str) -> PlaylistEndpoint:
        return PlaylistEndpoint(self, f"/playlists/{playlist_id}", parse_as(Playlist))

    def playlist_items(self, playlist_id: str) -> PlaylistItemsEndpoint:
        return PlaylistItemsEndpoint(
            self, f"/playlists/{playlist_id}/tracks", parse_as(Page[PlaylistItem])
        )

    def user_playlists(self, user_id: str) -> PlaylistsPageEndpoint:
        return PlaylistsPageEndpoint(
            self, f"/users/{user_id}/playlists", parse_as(Page[SimplifiedPlaylist])
        )

    def featured_playlists(self) -> FeaturedPlaylistsEndpoint:
        return FeaturedPlaylistsEndpoint(
            self, "/browse/featured-playlists", parse_as(FeaturedPlaylists)
        )

    def category_playlists(self, category_id: str) -> CategoryPlaylistsEndpoint:
        return CategoryPlaylistsEndpoint(
            self,
            f"/browse/categories/{category_id}/playlists",
            parse_key("playlists", Page[SimplifiedPlaylist]),
        )

    def playlist_cover_image(self, playlist_id: str) -> ReadEndpoint[list[Image]]:
        return ReadEndpoint(self, f"/playlists/{playlist_id}/images", parse_as(list[Image]))


class UserPlaylistsApi:
    """Playlist changes on behalf of the current user."""

    def current_user_playlists(self) -> PlaylistsPageEndpoint:
        return PlaylistsPageEndpoint(self, "/me/playlists", parse_as(Page[SimplifiedPlaylist]))

    def create_playlist(self, user_id: str, name: str) -> PlaylistDetailsEndpoint:
        """New playlist; the details setters apply to it as well."""
        return PlaylistDetailsEndpoint(
            self,
            "POST",
            f"/users/{user_id}/playlists",
            parse=parse_as(Playlist),
            body={"name": name},
        )

    def change_playlist_details(self, playlist_id: str) -> PlaylistDetailsEndpoint:
        return PlaylistDetailsEndpoint(self, "PUT", f"/playlists/{playlist_id}", body={})

    def update_playlist_items(self, playlist_id: str) -> ReorderPlaylistItemsEndpoint:
        return ReorderPlaylistItemsEndpoint(
            self, "PUT", f"/playlists/{playlist_id}/tracks", parse=_snapshot, body={}
        )

    def add_items_to_playlist(
        self, playlist_id: str, uris: Iterable[str]
    ) -> AddPlaylistItemsEndpoint:
        return AddPlaylistItemsEndpoint(
            self,
            "POST",
            f"/playlists/{playlist_id}/tracks",
            parse=_snapshot,
            body={"uris": _uris(uris)},
        )

    def remove_playlist_items(
        self, playlist_id: str, uris: Iterable[str]
    ) -> RemovePlaylistItemsEndpoint:
        return RemovePlaylistItemsEndpoint(
            self,
            "DELETE",
            f"/playlists/{playlist_id}/tracks",
            parse=_snapshot,
            body={"tracks": [{"uri": uri} for uri in _uris(uris)]},
        )

    def upload_playlist_cover_image(self, playlist_id: str, jpeg: bytes) -> Endpoint[None]:
        """Replace the cover with *jpeg* (raw bytes, at most 256 KB once encoded)."""
        endpoint: Endpoint[None] = Endpoint(self, "PUT", f"/playlists/{playlist_id}/images")
        endpoint.data = base64.b64encode(jpeg)
        endpoint.headers["Content-Type"] = "image/jpeg"
        return endpoint

    def follow_playlist(self, playlist_id: str) -> FollowPlaylistEndpoint:
        return FollowPlaylistEndpoint(
            self, "PUT", f"/playlists/{playlist_id}/followers", body={"public": True}
        )

    def unfollow_playlist(self, playlist_id: str) -> Endpoint[None]:
        return Endpoint(self, "DELETE", f"/playlists/{playlist_id}/followers")

    def check_users_follow_playlist(
        self, playlist_id: str, user_ids: Iterable[str]
    ) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, f"/playlists/{playlist_id}/followers/contains", user_ids)
