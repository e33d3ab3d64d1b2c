"""Unit tests for Page / CursorPage navigation and a few model edge cases."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from spotify_api.errors import NoRemainingPagesError
from spotify_api.models import (
    Artist,
    CursorPage,
    Page,
    PlaylistItem,
    SimplifiedPlaylist,
    SimplifiedTrack,
    Track,
)

BASE = "https://api.spotify.com/v1/albums/a1/tracks"


class PageServer:
    """Answers ``client.request("GET", url, parse=...)`` from canned bodies."""

    def __init__(self, bodies: dict[str, dict[str, Any]]) -> None:
        self.bodies = bodies
        self.fetched: list[str] = []

    def request(self, method: str, path: str, *, parse: Callable[[Any], Any], **_: Any) -> Any:
        assert method == "GET"
        self.fetched.append(path)
        return parse(self.bodies[path])


def _page_body(offset: int, names: list[str | None], *, total: int = 5, limit: int = 2) -> dict:
    def url(off: int) -> str:
        return f"{BASE}?offset={off}&limit={limit}"

    return {
        "href": url(offset),
        "limit": limit,
        "offset": offset,
        "total": total,
        "next": url(offset + limit) if offset + limit < total else None,
        "previous": url(offset - limit) if offset > 0 else None,
        "items": [None if n is None else {"name": n, "type": "track"} for n in names],
    }


@pytest.fixture
def server() -> PageServer:
    pages = [_page_body(0, ["a", "b"]), _page_body(2, ["c", None]), _page_body(4, ["e"])]
    return PageServer({p["href"]: p for p in pages})


def _names(items) -> list[str | None]:
    return [None if i is None else i.name for i in items]


# --------------------------------------------------------------------------- #
# Page                                                                        #
# --------------------------------------------------------------------------- #
def test_filtered_items_drops_none() -> None:
    page = Page[SimplifiedTrack].model_validate(_page_body(2, ["c", None]))
    assert _names(page.items) == ["c", None]
    assert _names(page.filtered_items()) == ["c"]


def test_get_next_and_previous_bounds(server: PageServer) -> None:
    first = Page[SimplifiedTrack].model_validate(_page_body(0, ["a", "b"]))
    with pytest.raises(NoRemainingPagesError):
        first.get_previous(server)

    last = Page[SimplifiedTrack].model_validate(_page_body(4, ["e"]))
    with pytest.raises(NoRemainingPagesError):
        last.get_next(server)
    assert server.fetched == []


def test_get_remaining_follows_next_links(server: PageServer) -> None:
    first = Page[SimplifiedTrack].model_validate(_page_body(0, ["a", "b"]))
    assert _names(first.get_remaining(server)) == ["a", "b", "c", None, "e"]
    assert len(server.fetched) == 2


def test_get_all_is_chronological_from_any_page(server: PageServer) -> None:
    middle = Page[SimplifiedTrack].model_validate(_page_body(2, ["c", None]))
    assert _names(middle.get_all(server)) == ["a", "b", "c", None, "e"]


def test_next_page_keeps_item_type(server: PageServer) -> None:
    first = Page[SimplifiedTrack].model_validate(_page_body(0, ["a", "b"]))
    second = first.get_next(server)
    assert isinstance(second.items[0], SimplifiedTrack)


# --------------------------------------------------------------------------- #
# CursorPage                                                                  #
# --------------------------------------------------------------------------- #
def test_cursor_page_unwraps_followed_artists() -> None:
    next_url = "https://api.spotify.com/v1/me/following?type=artist&after=x&limit=1"
    first = CursorPage[Artist].model_validate(
        {
            "href": "https://api.spotify.com/v1/me/following?type=artist&limit=1",
            "limit": 1,
            "next": next_url,
            "cursors": {"after": "x"},
            "items": [{"id": "x", "name": "X"}],
        }
    )
    server = PageServer(
        {
            next_url: {
                "artists": {
                    "href": next_url,
                    "limit": 1,
                    "next": None,
                    "cursors": {"after": None},
                    "items": [{"id": "y", "name": "Y"}],
                }
            }
        }
    )
    second = first.get_next(server)
    assert _names(second.filtered_items()) == ["Y"]
    with pytest.raises(NoRemainingPagesError):
        second.get_next(server)


# --------------------------------------------------------------------------- #
# Model edge cases                                                            #
# --------------------------------------------------------------------------- #
def test_playlist_item_discriminates_track_and_episode() -> None:
    track_item = PlaylistItem.model_validate({"track": {"type": "track", "name": "Song"}})
    episode_item = PlaylistItem.model_validate(
        {"track": {"type": "episode", "id": "e1", "name": "Episode"}}
    )
    assert isinstance(track_item.track, Track)
    assert episode_item.track.type == "episode"


def test_playlist_null_images_become_empty() -> None:
    playlist = SimplifiedPlaylist.model_validate({"id": "p", "name": "P", "images": None})
    assert playlist.images == []


def test_unknown_fields_are_kept() -> None:
    artist = Artist.model_validate({"name": "A", "brand_new_field": 1})
    assert artist.model_extra == {"brand_new_field": 1}
