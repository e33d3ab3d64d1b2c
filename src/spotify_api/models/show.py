from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from spotify_api.models.base import (
    ExternalUrls,
    Image,
    Page,
    Restriction,
    ResumePoint,
    SpotifyModel,
)


class SimplifiedShow(SpotifyModel):
    id: str
    name: str
    type: str = "show"
    uri: str | None = None
    href: str | None = None
    available_markets: list[str] = []
    copyrights: list[dict] = []
    description: str = ""
    html_description: str = ""
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    is_externally_hosted: bool | None = None
    languages: list[str] = []
    media_type: str | None = None
    publisher: str = ""
    total_episodes: int = 0


class SimplifiedEpisode(SpotifyModel):
    id: str
    name: str
    type: Literal["episode"] = "episode"
    uri: str | None = None
    href: str | None = None
    audio_preview_url: str | None = None
    description: str = ""
    html_description: str = ""
    duration_ms: int = 0
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    is_externally_hosted: bool = False
    is_playable: bool = True
    languages: list[str] = []
    release_date: str | None = None
    release_date_precision: str | None = None
    resume_point: ResumePoint | None = None
    restrictions: Restriction | None = None


class Episode(SimplifiedEpisode):
    show: SimplifiedShow | None = None


class Show(SimplifiedShow):
    episodes: Page[SimplifiedEpisode] | None = None


class SavedShow(SpotifyModel):
    added_at: datetime
    show: SimplifiedShow


class SavedEpisode(SpotifyModel):
    added_at: datetime
    episode: Episode
