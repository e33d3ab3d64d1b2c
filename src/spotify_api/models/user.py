from __future__ import annotations

from enum import Enum

from pydantic import Field

from spotify_api.models.base import ExternalUrls, Followers, Image, SpotifyModel


class TimeRange(str, Enum):
    """Window used for the current user's top artists / tracks."""

    LONG_TERM = "long_term"
    MEDIUM_TERM = "medium_term"
    SHORT_TERM = "short_term"


class ReferenceUser(SpotifyModel):
    """The minimal user object embedded in playlists."""

    id: str
    type: str = "user"
    uri: str | None = None
    href: str | None = None
    display_name: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class User(ReferenceUser):
    followers: Followers = Field(default_factory=Followers)
    images: list[Image] = []


class ExplicitContent(SpotifyModel):
    filter_enabled: bool = False
    filter_locked: bool = False


class PrivateUser(User):
    """Profile of the user who authorised the client."""

    country: str | None = None
    email: str | None = None
    explicit_content: ExplicitContent | None = None
    product: str | None = None
