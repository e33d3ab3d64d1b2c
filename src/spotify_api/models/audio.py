"""Audio features / analysis payloads.

Both endpoints are deprecated upstream and only answer for apps that were
granted extended access; the models are kept permissive accordingly.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import Field

from spotify_api.models.base import SpotifyModel


class Mode(IntEnum):
    MINOR = 0
    MAJOR = 1


class AudioFeatures(SpotifyModel):
    id: str
    uri: str | None = None
    type: str = "audio_features"
    track_href: str | None = None
    analysis_url: str | None = None
    acousticness: float = 0.0
    danceability: float = 0.0
    duration_ms: int = 0
    energy: float = 0.0
    instrumentalness: float = 0.0
    key: int = -1
    liveness: float = 0.0
    loudness: float = 0.0
    mode: Mode = Mode.MAJOR
    speechiness: float = 0.0
    tempo: float = 0.0
    time_signature: int = 4
    valence: float = 0.0


class TimeInterval(SpotifyModel):
    start: float
    duration: float
    confidence: float = 0.0


class Section(TimeInterval):
    loudness: float = 0.0
    tempo: float = 0.0
    tempo_confidence: float = 0.0
    key: int = -1
    key_confidence: float = 0.0
    mode: int = -1
    mode_confidence: float = 0.0
    time_signature: int = 4
    time_signature_confidence: float = 0.0


class Segment(TimeInterval):
    loudness_start: float = 0.0
    loudness_max: float = 0.0
    loudness_max_time: float = 0.0
    loudness_end: float | None = None
    pitches: list[float] = []
    timbre: list[float] = []


class AnalysisMeta(SpotifyModel):
    analyzer_version: str | None = None
    platform: str | None = None
    detailed_status: str | None = None
    status_code: int = 0
    timestamp: int = 0
    analysis_time: float = 0.0
    input_process: str | None = None


class TrackAnalysis(SpotifyModel):
    num_samples: int = 0
    duration: float = 0.0
    loudness: float = 0.0
    tempo: float = 0.0
    tempo_confidence: float = 0.0
    time_signature: int = 4
    time_signature_confidence: float = 0.0
    key: int = -1
    key_confidence: float = 0.0
    mode: int = -1
    mode_confidence: float = 0.0
    end_of_fade_in: float = 0.0
    start_of_fade_out: float = 0.0
    echoprint_string: str | None = Field(default=None, alias="echoprintstring")


class AudioAnalysis(SpotifyModel):
    meta: AnalysisMeta = Field(default_factory=AnalysisMeta)
    track: TrackAnalysis = Field(default_factory=TrackAnalysis)
    bars: list[TimeInterval] = []
    beats: list[TimeInterval] = []
    sections: list[Section] = []
    segments: list[Segment] = []
    tatums: list[TimeInterval] = []
