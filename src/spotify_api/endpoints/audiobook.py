from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
    MarketEndpoint,
    PagedEndpoint,
    PagingMixin,
    ReadEndpoint,
    ids_contains,
    ids_write,
    join_ids,
    parse_as,
    parse_key,
)
from spotify_api.models import (
    Audiobook,
    Chapter,
    Page,
    SimplifiedAudiobook,
    SimplifiedChapter,
)


def _present(items: list) -> list:
    # unavailable ids come back as null entries
    return [item for item in items if item is not None]


class AudiobooksApi:
    def audiobook(self, audiobook_id: str) -> MarketEndpoint[Audiobook]:
        return MarketEndpoint(self, f"/audiobooks/{audiobook_id}", parse_as(Audiobook))

    def audiobooks(self, audiobook_ids: Iterable[str]) -> MarketEndpoint[list[Audiobook]]:
        """Several audiobooks; ids Spotify does not know are dropped."""
        parse = parse_key("audiobooks", list[Audiobook | None])
        return MarketEndpoint(
            self,
            "/audiobooks",
            lambda payload: _present(parse(payload)),
            params={"ids": join_ids(audiobook_ids)},
        )

    def audiobook_chapters(self, audiobook_id: str) -> PagedEndpoint[Page[SimplifiedChapter]]:
        return PagedEndpoint(
            self, f"/audiobooks/{audiobook_id}/chapters", parse_as(Page[SimplifiedChapter])
        )

    def chapter(self, chapter_id: str) -> MarketEndpoint[Chapter]:
        return MarketEndpoint(self, f"/chapters/{chapter_id}", parse_as(Chapter))

    def chapters(self, chapter_ids: Iterable[str]) -> MarketEndpoint[list[Chapter]]:
        parse = parse_key("chapters", list[Chapter | None])
        return MarketEndpoint(
            self,
            "/chapters",
            lambda payload: _present(parse(payload)),
            params={"ids": join_ids(chapter_ids)},
        )


class SavedAudiobooksEndpoint(PagingMixin, ReadEndpoint[Page[SimplifiedAudiobook]]):
    pass


class SavedAudiobooksApi:
    def saved_audiobooks(self) -> SavedAudiobooksEndpoint:
        return SavedAudiobooksEndpoint(
            self, "/me/audiobooks", parse_as(Page[SimplifiedAudiobook])
        )

    # The audiobook library takes its ids in the query string, not the body.
    def save_audiobooks(self, audiobook_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "PUT", "/me/audiobooks", audiobook_ids, in_query=True)

    def remove_saved_audiobooks(self, audiobook_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "DELETE", "/me/audiobooks", audiobook_ids, in_query=True)

    def check_saved_audiobooks(self, audiobook_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/audiobooks/contains", audiobook_ids)
