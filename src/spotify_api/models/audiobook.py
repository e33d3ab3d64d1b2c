from __future__ import annotations

from pydantic import Field

from spotify_api.models.base import (
    Copyright,
    ExternalUrls,
    Image,
    Page,
    Restriction,
    ResumePoint,
    SpotifyModel,
)


class Author(SpotifyModel):
    name: str


class Narrator(SpotifyModel):
    name: str


class SimplifiedAudiobook(SpotifyModel):
    id: str
    name: str
    type: str = "audiobook"
    uri: str | None = None
    href: str | None = None
    authors: list[Author] = []
    narrators: list[Narrator] = []
    available_markets: list[str] = []
    copyrights: list[Copyright] = []
    description: str = ""
    html_description: str = ""
    edition: str | None = None
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    languages: list[str] = []
    media_type: str | None = None
    publisher: str = ""
    total_chapters: int | None = None

    def author_names(self) -> list[str]:
        return [a.name for a in self.authors]

    def narrator_names(self) -> list[str]:
        return [n.name for n in self.narrators]


class SimplifiedChapter(SpotifyModel):
    id: str
    name: str
    type: str = "chapter"
    uri: str | None = None
    href: str | None = None
    audio_preview_url: str | None = None
    available_markets: list[str] = []
    chapter_number: int = 0
    description: str = ""
    html_description: str = ""
    duration_ms: int = 0
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    images: list[Image] = []
    is_playable: bool | None = None
    languages: list[str] = []
    release_date: str | None = None
    release_date_precision: str | None = None
    resume_point: ResumePoint | None = None
    restrictions: Restriction | None = None


class Chapter(SimplifiedChapter):
    audiobook: SimplifiedAudiobook | None = None


class Audiobook(SimplifiedAudiobook):
    chapters: Page[SimplifiedChapter] | None = None
