from __future__ import annotations

from enum import Enum

from spotify_api.models.album import SimplifiedAlbum
from spotify_api.models.artist import Artist
from spotify_api.models.audiobook import SimplifiedAudiobook
from spotify_api.models.base import Page, SpotifyModel
from spotify_api.models.playlist import SimplifiedPlaylist
from spotify_api.models.show import SimplifiedEpisode, SimplifiedShow
from spotify_api.models.track import Track


class SearchType(str, Enum):
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"
    AUDIOBOOK = "audiobook"

    @classmethod
    def parse(cls, value: "str | SearchType") -> "SearchType":
        """Case-insensitive lookup; ``ValueError`` lists the accepted values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            expected = ", ".join(m.value for m in cls)
            raise ValueError(
                f"{value!r} is not a valid search type. Expected one of: {expected}"
            ) from None


class SearchResults(SpotifyModel):
    tracks: Page[Track] | None = None
    artists: Page[Artist] | None = None
    albums: Page[SimplifiedAlbum] | None = None
    playlists: Page[SimplifiedPlaylist] | None = None
    shows: Page[SimplifiedShow] | None = None
    episodes: Page[SimplifiedEpisode] | None = None
    audiobooks: Page[SimplifiedAudiobook] | None = None
