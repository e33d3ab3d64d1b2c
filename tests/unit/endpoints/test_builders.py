"""Unit tests for the endpoint builders.

A RecordingClient replaces the HTTP path: every ``send()`` lands in
``calls`` so the tests can assert on method, path, query and body.

Coverage:
* Limit clamping and query value conversion
* Builders are consumed by their first send
* Library save/remove/check id placement (body vs. query string)
* Recently-played before/after: last set wins
* Search, recommendations, playlist and player request shapes
"""

from __future__ import annotations

import base64
from typing import Any

import pytest

from spotify_api.client import UserClient
from spotify_api.endpoints import Limit, RecommendationLimit
from spotify_api.errors import InvalidClientStateError
from spotify_api.models import NO_CONTENT


class RecordingClient(UserClient):
    """UserClient whose request() records instead of sending."""

    def __init__(self, payload: Any = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self.payload = payload

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        self.calls.append({"method": method, "path": path, **kwargs})
        parse = kwargs.get("parse")
        if parse is None or self.payload is None:
            return NO_CONTENT
        return parse(self.payload)


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()


# --------------------------------------------------------------------------- #
# Limit                                                                       #
# --------------------------------------------------------------------------- #
@pytest.mark.parametrize("raw, expected", [(100, 50), (0, 1), (-5, 1), (20, 20), (50, 50)])
def test_limit_clamps(raw: int, expected: int) -> None:
    assert Limit(raw) == expected


def test_recommendation_limit_allows_100() -> None:
    assert RecommendationLimit(100) == 100
    assert RecommendationLimit(500) == 100


def test_paging_setters_clamp(client: RecordingClient) -> None:
    client.saved_tracks().limit(100).offset(-3).market("SE").send()
    assert client.calls[0]["params"] == {"limit": 50, "offset": 0, "market": "SE"}


# --------------------------------------------------------------------------- #
# Builder lifecycle                                                           #
# --------------------------------------------------------------------------- #
def test_builder_is_single_use(client: RecordingClient) -> None:
    endpoint = client.album("1")
    endpoint.get()
    with pytest.raises(InvalidClientStateError):
        endpoint.send()
    assert len(client.calls) == 1


def test_write_without_parser_returns_no_content(client: RecordingClient) -> None:
    assert client.save_tracks(["a", "b"]).send() is NO_CONTENT


def test_parsed_result() -> None:
    client = RecordingClient({"markets": ["SE", "US"]})
    assert client.markets().get() == ["SE", "US"]


# --------------------------------------------------------------------------- #
# Library ids                                                                 #
# --------------------------------------------------------------------------- #
def test_saved_tracks_ids_in_body(client: RecordingClient) -> None:
    client.save_tracks(["t1", "t2"]).send()
    call = client.calls[0]
    assert (call["method"], call["path"]) == ("PUT", "/me/tracks")
    assert call["json"] == {"ids": ["t1", "t2"]}
    assert call["params"] == {}


def test_saved_audiobooks_ids_in_query(client: RecordingClient) -> None:
    client.remove_saved_audiobooks(["b1", "b2"]).send()
    call = client.calls[0]
    assert (call["method"], call["path"]) == ("DELETE", "/me/audiobooks")
    assert call["params"] == {"ids": "b1,b2"}
    assert call["json"] is None


def test_check_saved_albums(client: RecordingClient) -> None:
    client.check_saved_albums(["a1", "a2"]).send()
    assert client.calls[0]["path"] == "/me/albums/contains"
    assert client.calls[0]["params"] == {"ids": "a1,a2"}


def test_follow_artists_sets_type(client: RecordingClient) -> None:
    client.follow_artists("artist-1").send()
    call = client.calls[0]
    assert call["params"] == {"type": "artist"}
    assert call["json"] == {"ids": ["artist-1"]}


# --------------------------------------------------------------------------- #
# Recently played                                                             #
# --------------------------------------------------------------------------- #
def test_recently_played_after_then_before(client: RecordingClient) -> None:
    client.recently_played().after(1_000).before(2_000).send()
    assert client.calls[0]["params"] == {"before": 2_000}


def test_recently_played_before_then_after(client: RecordingClient) -> None:
    client.recently_played().before(2_000).limit(10).after(1_000).send()
    assert client.calls[0]["params"] == {"limit": 10, "after": 1_000}


# --------------------------------------------------------------------------- #
# Search & recommendations                                                    #
# --------------------------------------------------------------------------- #
def test_search_params(client: RecordingClient) -> None:
    client.search("roadhouse blues", ["Album", "track"]).include_external().limit(5).send()
    assert client.calls[0]["params"] == {
        "q": "roadhouse blues",
        "type": "album,track",
        "include_external": "audio",
        "limit": 5,
    }


def test_search_rejects_unknown_type(client: RecordingClient) -> None:
    with pytest.raises(ValueError):
        client.search("x", "podcast")
    assert client.calls == []


def test_recommendations_need_a_seed(client: RecordingClient) -> None:
    with pytest.raises(ValueError):
        client.recommendations()


def test_recommendations_params(client: RecordingClient) -> None:
    (
        client.recommendations(seed_genres=["rock", "blues"], seed_tracks=["t1"])
        .feature("energy", min=0.4, max=0.9)
        .feature("tempo", target=120)
        .limit(150)
        .send()
    )
    assert client.calls[0]["params"] == {
        "seed_genres": "rock,blues",
        "seed_tracks": "t1",
        "min_energy": 0.4,
        "max_energy": 0.9,
        "target_tempo": 120,
        "limit": 100,
    }


def test_recommendations_unknown_feature(client: RecordingClient) -> None:
    with pytest.raises(ValueError):
        client.recommendations(seed_artists=["a"]).feature("groove", min=1)


def test_artist_albums_include_groups(client: RecordingClient) -> None:
    client.artist_albums("a1").include_groups("album", "single").send()
    assert client.calls[0]["params"] == {"include_groups": "album,single"}
    with pytest.raises(ValueError):
        client.artist_albums("a1").include_groups("mixtape")


# --------------------------------------------------------------------------- #
# Playlists                                                                   #
# --------------------------------------------------------------------------- #
def test_playlist_details_body(client: RecordingClient) -> None:
    client.change_playlist_details("p1").name("Road trip").public(False).send()
    call = client.calls[0]
    assert (call["method"], call["path"]) == ("PUT", "/playlists/p1")
    assert call["json"] == {"name": "Road trip", "public": False}


def test_remove_playlist_items_body(client: RecordingClient) -> None:
    client.remove_playlist_items("p1", ["spotify:track:1"]).snapshot_id("snap").send()
    assert client.calls[0]["json"] == {
        "tracks": [{"uri": "spotify:track:1"}],
        "snapshot_id": "snap",
    }


def test_add_items_returns_snapshot() -> None:
    client = RecordingClient({"snapshot_id": "snap-2"})
    assert client.add_items_to_playlist("p1", ["spotify:track:1"]).position(0).send() == "snap-2"
    assert client.calls[0]["json"] == {"uris": ["spotify:track:1"], "position": 0}


def test_upload_cover_image(client: RecordingClient) -> None:
    client.upload_playlist_cover_image("p1", b"\xff\xd8jpeg").send()
    call = client.calls[0]
    assert call["headers"] == {"Content-Type": "image/jpeg"}
    assert call["data"] == base64.b64encode(b"\xff\xd8jpeg")
    assert call["json"] is None


# --------------------------------------------------------------------------- #
# Player                                                                      #
# --------------------------------------------------------------------------- #
def test_device_id_returns_the_builder(client: RecordingClient) -> None:
    endpoint = client.pause_playback()
    assert endpoint.device_id("dev") is endpoint
    assert endpoint.params == {"device_id": "dev"}


def test_start_playback_body(client: RecordingClient) -> None:
    (
        client.start_playback()
        .device_id("dev")
        .context_uri("spotify:album:1")
        .offset(position=3)
        .position_ms(1_500)
        .send()
    )
    call = client.calls[0]
    assert (call["method"], call["path"]) == ("PUT", "/me/player/play")
    assert call["params"] == {"device_id": "dev"}
    assert call["json"] == {
        "context_uri": "spotify:album:1",
        "offset": {"position": 3},
        "position_ms": 1_500,
    }


def test_start_playback_offset_needs_one_value(client: RecordingClient) -> None:
    with pytest.raises(ValueError):
        client.start_playback().offset()
    with pytest.raises(ValueError):
        client.start_playback().offset(position=1, uri="spotify:track:1")


def test_resume_sends_no_body(client: RecordingClient) -> None:
    client.start_playback().send()
    assert client.calls[0]["json"] is None


@pytest.mark.parametrize("raw, expected", [(150, 100), (-1, 0), (42, 42)])
def test_set_volume_clamps(client: RecordingClient, raw: int, expected: int) -> None:
    client.set_volume(raw).send()
    assert client.calls[0]["params"] == {"volume_percent": expected}


def test_shuffle_and_repeat_query_values(client: RecordingClient) -> None:
    client.toggle_shuffle(True).send()
    client.set_repeat_mode("context").send()
    assert client.calls[0]["params"] == {"state": "true"}
    assert client.calls[1]["params"] == {"state": "context"}
    with pytest.raises(ValueError):
        client.set_repeat_mode("forever")
