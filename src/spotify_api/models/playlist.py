from __future__ import annotations

from datetime import datetime
from typing import Annotated, Union

from pydantic import Field, field_validator

from spotify_api.models.base import ExternalUrls, Followers, Image, Page, SpotifyModel
from spotify_api.models.show import Episode
from spotify_api.models.track import Track
from spotify_api.models.user import ReferenceUser

# A playlist entry, a queue entry or the currently playing item.
PlayableItem = Annotated[Union[Track, Episode], Field(discriminator="type")]


class PlaylistItem(SpotifyModel):
    added_at: datetime | None = None
    added_by: ReferenceUser | None = None
    is_local: bool = False
    track: PlayableItem | None = None


class TrackReference(SpotifyModel):
    href: str
    total: int = 0


class _PlaylistFields(SpotifyModel):
    id: str
    name: str
    type: str = "playlist"
    uri: str | None = None
    href: str | None = None
    collaborative: bool = False
    description: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    owner: ReferenceUser | None = None
    public: bool | None = None
    snapshot_id: str | None = None

    @field_validator("images", mode="before")
    @classmethod
    def _null_images(cls, value):
        # playlists without a cover send "images": null
        return value or []


class SimplifiedPlaylist(_PlaylistFields):
    tracks: TrackReference | None = None


class Playlist(_PlaylistFields):
    followers: Followers = Field(default_factory=Followers)
    tracks: Page[PlaylistItem] | None = None


class FeaturedPlaylists(SpotifyModel):
    message: str | None = None
    playlists: Page[SimplifiedPlaylist]
