from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    MarketEndpoint,
    PagedEndpoint,
    ReadEndpoint,
    join_ids,
    parse_as,
    parse_key,
)
from spotify_api.models import Artist, Page, SimplifiedAlbum, Track

# Accepted values for ``include_groups``.
ALBUM_GROUPS = ("album", "single", "appears_on", "compilation")


class ArtistAlbumsEndpoint(PagedEndpoint[Page[SimplifiedAlbum]]):
    def include_groups(self, *groups: str) -> "ArtistAlbumsEndpoint":
        """Restrict to some of ``album``, ``single``, ``appears_on``, ``compilation``."""
        unknown = [g for g in groups if g not in ALBUM_GROUPS]
        if unknown:
            raise ValueError(f"unknown album group(s): {', '.join(unknown)}")
        return self._param("include_groups", list(groups))


class ArtistsApi:
    def artist(self, artist_id: str) -> ReadEndpoint[Artist]:
        return ReadEndpoint(self, f"/artists/{artist_id}", parse_as(Artist))

    def artists(self, artist_ids: Iterable[str]) -> ReadEndpoint[list[Artist]]:
        return ReadEndpoint(
            self,
            "/artists",
            parse_key("artists", list[Artist]),
            params={"ids": join_ids(artist_ids)},
        )

    def artist_albums(self, artist_id: str) -> ArtistAlbumsEndpoint:
        return ArtistAlbumsEndpoint(
            self, f"/artists/{artist_id}/albums", parse_as(Page[SimplifiedAlbum])
        )

    def artist_top_tracks(self, artist_id: str) -> MarketEndpoint[list[Track]]:
        return MarketEndpoint(
            self, f"/artists/{artist_id}/top-tracks", parse_key("tracks", list[Track])
        )

    def related_artists(self, artist_id: str) -> ReadEndpoint[list[Artist]]:
        return ReadEndpoint(
            self,
            f"/artists/{artist_id}/related-artists",
            parse_key("artists", list[Artist]),
        )
