from __future__ import annotations

from datetime import datetime

from pydantic import Field

from spotify_api.models.artist import SimplifiedArtist
from spotify_api.models.base import (
    Copyright,
    ExternalIds,
    ExternalUrls,
    Image,
    Page,
    Restriction,
    SpotifyModel,
)
from spotify_api.models.track import SavedTrack, SimplifiedTrack, Track


class SimplifiedAlbum(SpotifyModel):
    id: str | None = None
    name: str
    type: str = "album"
    uri: str | None = None
    href: str | None = None
    # album, single, compilation; Spotify sometimes sends these upper-cased
    album_type: str | None = None
    # only set when listing an artist's albums
    album_group: str | None = None
    total_tracks: int = 0
    available_markets: list[str] = []
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    release_date: str | None = None
    release_date_precision: str | None = None
    restrictions: Restriction | None = None
    artists: list[SimplifiedArtist] = []


class Album(SimplifiedAlbum):
    copyrights: list[Copyright] = []
    external_ids: ExternalIds = Field(default_factory=ExternalIds)
    genres: list[str] = []
    label: str | None = None
    popularity: int = 0
    tracks: Page[SimplifiedTrack] | None = None


class SavedAlbum(SpotifyModel):
    added_at: datetime
    album: Album


# Track embeds SimplifiedAlbum, defined above.
Track.model_rebuild()
SavedTrack.model_rebuild()
