"""Track models.

``Track.album`` refers to :class:`~spotify_api.models.album.SimplifiedAlbum`,
which itself lives next to ``Album`` (whose ``tracks`` page refers back to
:class:`SimplifiedTrack`).  The forward reference is resolved once
``spotify_api.models.album`` is imported, see the bottom of that module.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from spotify_api.models.artist import SimplifiedArtist
from spotify_api.models.base import ExternalIds, ExternalUrls, Restriction, SpotifyModel

if TYPE_CHECKING:
    from spotify_api.models.album import SimplifiedAlbum


class LinkedFrom(SpotifyModel):
    id: str | None = None
    type: str = "track"
    uri: str | None = None
    href: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class SimplifiedTrack(SpotifyModel):
    id: str | None = None
    name: str
    type: Literal["track"] = "track"
    uri: str | None = None
    href: str | None = None
    artists: list[SimplifiedArtist] = []
    available_markets: list[str] | None = None
    disc_number: int = 1
    duration_ms: int = 0
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    is_playable: bool | None = None
    linked_from: LinkedFrom | None = None
    restrictions: Restriction | None = None
    preview_url: str | None = None
    track_number: int = 0
    is_local: bool = False


class Track(SimplifiedTrack):
    album: SimplifiedAlbum | None = None
    external_ids: ExternalIds = Field(default_factory=ExternalIds)
    popularity: int = 0


class SavedTrack(SpotifyModel):
    added_at: datetime
    track: Track
