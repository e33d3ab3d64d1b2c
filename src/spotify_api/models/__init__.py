"""Typed (pydantic) models for Spotify Web API responses.

Import order matters: :mod:`.album` resolves the forward reference from
``Track.album`` and has to run before any module embedding ``Track``.
"""

from __future__ import annotations

from .base import (  # noqa: F401
    NO_CONTENT,
    Copyright,
    Cursor,
    CursorPage,
    ExternalIds,
    ExternalUrls,
    Followers,
    Image,
    NoContent,
    Page,
    Restriction,
    ResumePoint,
    SpotifyModel,
)
from .artist import Artist, SimplifiedArtist  # noqa: F401
from .track import LinkedFrom, SavedTrack, SimplifiedTrack, Track  # noqa: F401
from .album import Album, SavedAlbum, SimplifiedAlbum  # noqa: F401
from .show import (  # noqa: F401
    Episode,
    SavedEpisode,
    SavedShow,
    Show,
    SimplifiedEpisode,
    SimplifiedShow,
)
from .audiobook import (  # noqa: F401
    Audiobook,
    Author,
    Chapter,
    Narrator,
    SimplifiedAudiobook,
    SimplifiedChapter,
)
from .user import ExplicitContent, PrivateUser, ReferenceUser, TimeRange, User  # noqa: F401
from .playlist import (  # noqa: F401
    FeaturedPlaylists,
    PlayableItem,
    Playlist,
    PlaylistItem,
    SimplifiedPlaylist,
    TrackReference,
)
from .player import (  # noqa: F401
    Actions,
    Context,
    CurrentlyPlayingItem,
    Device,
    Disallows,
    PlaybackState,
    PlayHistory,
    Queue,
    RepeatState,
)
from .audio import AudioAnalysis, AudioFeatures, Mode  # noqa: F401
from .category import Category  # noqa: F401
from .recommendation import RecommendationSeed, Recommendations  # noqa: F401
from .search import SearchResults, SearchType  # noqa: F401
