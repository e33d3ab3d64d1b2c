from __future__ import annotations

from pydantic import Field

from spotify_api.models.base import ExternalUrls, Followers, Image, SpotifyModel


class SimplifiedArtist(SpotifyModel):
    id: str | None = None
    name: str
    type: str = "artist"
    uri: str | None = None
    href: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class Artist(SimplifiedArtist):
    followers: Followers = Field(default_factory=Followers)
    genres: list[str] = []
    images: list[Image] = []
    popularity: int = 0
