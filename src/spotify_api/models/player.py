from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from spotify_api.models.base import ExternalUrls, SpotifyModel
from spotify_api.models.playlist import PlayableItem
from spotify_api.models.track import Track


class RepeatState(str, Enum):
    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"


class Device(SpotifyModel):
    id: str | None = None
    name: str
    type: str
    is_active: bool = False
    is_private_session: bool = False
    is_restricted: bool = False
    volume_percent: int | None = None
    supports_volume: bool = True


class Context(SpotifyModel):
    type: str
    uri: str
    href: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class Disallows(SpotifyModel):
    interrupting_playback: bool | None = None
    pausing: bool | None = None
    resuming: bool | None = None
    seeking: bool | None = None
    skipping_next: bool | None = None
    skipping_prev: bool | None = None
    toggling_repeat_context: bool | None = None
    toggling_shuffle: bool | None = None
    toggling_repeat_track: bool | None = None
    transferring_playback: bool | None = None


class Actions(SpotifyModel):
    disallows: Disallows = Field(default_factory=Disallows)


class CurrentlyPlayingItem(SpotifyModel):
    context: Context | None = None
    timestamp: int = 0
    progress_ms: int | None = None
    is_playing: bool = False
    item: PlayableItem | None = None
    # track, episode, ad or unknown
    currently_playing_type: str = "unknown"
    actions: Actions = Field(default_factory=Actions)


class PlaybackState(CurrentlyPlayingItem):
    device: Device | None = None
    repeat_state: RepeatState | None = None
    shuffle_state: bool | None = None


class PlayHistory(SpotifyModel):
    track: Track
    played_at: datetime
    context: Context | None = None


class Queue(SpotifyModel):
    currently_playing: PlayableItem | None = None
    queue: list[PlayableItem] = []
