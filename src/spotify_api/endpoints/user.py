from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
    Limit,
    PagingMixin,
    ReadEndpoint,
    ids_contains,
    ids_write,
    parse_as,
    parse_key,
)
from spotify_api.models import (
    Artist,
    CursorPage,
    Page,
    PrivateUser,
    TimeRange,
    Track,
    User,
)


class TopItemsEndpoint(PagingMixin, ReadEndpoint):
    def time_range(self, time_range: TimeRange | str) -> "TopItemsEndpoint":
        """``short_term`` (~4 weeks), ``medium_term`` (~6 months) or ``long_term``."""
        return self._param("time_range", TimeRange(time_range))


class FollowedArtistsEndpoint(ReadEndpoint[CursorPage[Artist]]):
    def after(self, artist_id: str) -> "FollowedArtistsEndpoint":
        """Cursor: the last artist id of the previous page."""
        return self._param("after", artist_id)

    def limit(self, limit: int) -> "FollowedArtistsEndpoint":
        return self._param("limit", Limit(limit))


class UsersApi:
    def user(self, user_id: str) -> ReadEndpoint[User]:
        """Public profile of any user."""
        return ReadEndpoint(self, f"/users/{user_id}", parse_as(User))


class UserProfileApi:
    """Profile, top items and follow graph of the current user."""

    def current_user(self) -> ReadEndpoint[PrivateUser]:
        return ReadEndpoint(self, "/me", parse_as(PrivateUser))

    def top_artists(self) -> TopItemsEndpoint:
        return TopItemsEndpoint(self, "/me/top/artists", parse_as(Page[Artist]))

    def top_tracks(self) -> TopItemsEndpoint:
        return TopItemsEndpoint(self, "/me/top/tracks", parse_as(Page[Track]))

    def followed_artists(self) -> FollowedArtistsEndpoint:
        return FollowedArtistsEndpoint(
            self,
            "/me/following",
            parse_key("artists", CursorPage[Artist]),
            params={"type": "artist"},
        )

    def follow_artists(self, artist_ids: Iterable[str]) -> Endpoint:
        return self._follow("PUT", "artist", artist_ids)

    def unfollow_artists(self, artist_ids: Iterable[str]) -> Endpoint:
        return self._follow("DELETE", "artist", artist_ids)

    def follow_users(self, user_ids: Iterable[str]) -> Endpoint:
        return self._follow("PUT", "user", user_ids)

    def unfollow_users(self, user_ids: Iterable[str]) -> Endpoint:
        return self._follow("DELETE", "user", user_ids)

    def check_following_artists(self, artist_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/following/contains", artist_ids, type="artist")

    def check_following_users(self, user_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/following/contains", user_ids, type="user")

    def _follow(self, method: str, kind: str, ids: Iterable[str]) -> Endpoint:
        return ids_write(self, method, "/me/following", ids)._param("type", kind)
