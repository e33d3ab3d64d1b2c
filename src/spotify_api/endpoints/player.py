"""Playback control for the current user.

Every call here needs a user-authorised token with the
``user-read-playback-state`` / ``user-modify-playback-state`` scopes; most
control calls act on the active device unless ``device_id`` is given, and
return :data:`~spotify_api.models.NO_CONTENT`.
"""

from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    E,
    Endpoint,
    Limit,
    MarketEndpoint,
    ReadEndpoint,
    parse_as,
    parse_key,
)
from spotify_api.models import (
    CurrentlyPlayingItem,
    CursorPage,
    Device,
    PlaybackState,
    PlayHistory,
    Queue,
    RepeatState,
)


class DeviceMixin:
    def device_id(self: E, device_id: str) -> E:
        """Target device; the currently active one by default."""
        return self._param("device_id", device_id)


class PlayerControlEndpoint(DeviceMixin, Endpoint[None]):
    pass


class TransferPlaybackEndpoint(Endpoint[None]):
    def play(self, play: bool = True) -> "TransferPlaybackEndpoint":
        """Start playing on the new device (otherwise keep the current state)."""
        return self._field("play", play)


class StartPlaybackEndpoint(DeviceMixin, Endpoint[None]):
    """Start a new context or resume the current one.

    With neither :meth:`context_uri` nor :meth:`uris` set, playback resumes.
    """

    def context_uri(self, uri: str) -> "StartPlaybackEndpoint":
        """Album, artist or playlist to play."""
        return self._field("context_uri", uri)

    def uris(self, uris: Iterable[str]) -> "StartPlaybackEndpoint":
        """Track or episode URIs to play."""
        return self._field("uris", [uris] if isinstance(uris, str) else list(uris))

    def offset(
        self, *, position: int | None = None, uri: str | None = None
    ) -> "StartPlaybackEndpoint":
        """Where in the context to start, by zero-based position or by item URI."""
        if (position is None) == (uri is None):
            raise ValueError("offset takes exactly one of position or uri")
        offset = {"position": position} if position is not None else {"uri": uri}
        return self._field("offset", offset)

    def position_ms(self, position_ms: int) -> "StartPlaybackEndpoint":
        return self._field("position_ms", max(int(position_ms), 0))


class RecentlyPlayedEndpoint(ReadEndpoint[CursorPage[PlayHistory]]):
    """Recently played tracks.

    ``after`` and ``before`` are mutually exclusive; setting one discards
    the other, so the last one set wins.
    """

    def limit(self, limit: int) -> "RecentlyPlayedEndpoint":
        return self._param("limit", Limit(limit))

    def after(self, timestamp_ms: int) -> "RecentlyPlayedEndpoint":
        """Items played after this Unix time in milliseconds."""
        self.params.pop("before", None)
        return self._param("after", int(timestamp_ms))

    def before(self, timestamp_ms: int) -> "RecentlyPlayedEndpoint":
        """Items played before this Unix time in milliseconds."""
        self.params.pop("after", None)
        return self._param("before", int(timestamp_ms))


class PlayerApi:
    def playback_state(self) -> MarketEndpoint[PlaybackState]:
        """Current playback; ``NO_CONTENT`` when nothing is active."""
        return MarketEndpoint(self, "/me/player", parse_as(PlaybackState))

    def transfer_playback(self, device_id: str) -> TransferPlaybackEndpoint:
        return TransferPlaybackEndpoint(
            self, "PUT", "/me/player", body={"device_ids": [device_id]}
        )

    def devices(self) -> ReadEndpoint[list[Device]]:
        return ReadEndpoint(self, "/me/player/devices", parse_key("devices", list[Device]))

    def currently_playing(self) -> MarketEndpoint[CurrentlyPlayingItem]:
        return MarketEndpoint(
            self, "/me/player/currently-playing", parse_as(CurrentlyPlayingItem)
        )

    def start_playback(self) -> StartPlaybackEndpoint:
        return StartPlaybackEndpoint(self, "PUT", "/me/player/play")

    def pause_playback(self) -> PlayerControlEndpoint:
        return PlayerControlEndpoint(self, "PUT", "/me/player/pause")

    def next_track(self) -> PlayerControlEndpoint:
        return PlayerControlEndpoint(self, "POST", "/me/player/next")

    def previous_track(self) -> PlayerControlEndpoint:
        return PlayerControlEndpoint(self, "POST", "/me/player/previous")

    def seek(self, position_ms: int) -> PlayerControlEndpoint:
        return PlayerControlEndpoint(
            self, "PUT", "/me/player/seek", params={"position_ms": max(int(position_ms), 0)}
        )

    def set_repeat_mode(self, state: RepeatState | str) -> PlayerControlEndpoint:
        """``track``, ``context`` or ``off``."""
        return PlayerControlEndpoint(
            self, "PUT", "/me/player/repeat", params={"state": RepeatState(state)}
        )

    def set_volume(self, volume_percent: int) -> PlayerControlEndpoint:
        """Volume in percent, clamped to 0-100."""
        volume = min(max(int(volume_percent), 0), 100)
        return PlayerControlEndpoint(
            self, "PUT", "/me/player/volume", params={"volume_percent": volume}
        )

    def toggle_shuffle(self, state: bool) -> PlayerControlEndpoint:
        return PlayerControlEndpoint(
            self, "PUT", "/me/player/shuffle", params={"state": bool(state)}
        )

    def recently_played(self) -> RecentlyPlayedEndpoint:
        return RecentlyPlayedEndpoint(
            self, "/me/player/recently-played", parse_as(CursorPage[PlayHistory])
        )

    def queue(self) -> ReadEndpoint[Queue]:
        return ReadEndpoint(self, "/me/player/queue", parse_as(Queue))

    def add_to_queue(self, uri: str) -> PlayerControlEndpoint:
        """Append a track or episode URI to the queue."""
        return PlayerControlEndpoint(self, "POST", "/me/player/queue", params={"uri": uri})
