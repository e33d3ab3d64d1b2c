from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
    Limit,
    MarketEndpoint,
    PagedEndpoint,
    ReadEndpoint,
    ids_contains,
    ids_write,
    join_ids,
    parse_as,
    parse_key,
)
from spotify_api.models import (
    AudioAnalysis,
    AudioFeatures,
    Page,
    Recommendations,
    SavedTrack,
    Track,
)

# Tunable attributes accepted as min_/max_/target_ recommendation parameters.
FEATURES = (
    "acousticness",
    "danceability",
    "duration_ms",
    "energy",
    "instrumentalness",
    "key",
    "liveness",
    "loudness",
    "mode",
    "popularity",
    "speechiness",
    "tempo",
    "time_signature",
    "valence",
)


class RecommendationLimit(Limit):
    MAX = 100


class RecommendationsEndpoint(MarketEndpoint[Recommendations]):
    """Track recommendations.

    Spotify accepts at most five seeds in total across artists, genres and
    tracks.
    """

    def seed_artists(self, artist_ids: Iterable[str]) -> "RecommendationsEndpoint":
        return self._param("seed_artists", join_ids(artist_ids))

    def seed_genres(self, genres: Iterable[str]) -> "RecommendationsEndpoint":
        return self._param("seed_genres", join_ids(genres))

    def seed_tracks(self, track_ids: Iterable[str]) -> "RecommendationsEndpoint":
        return self._param("seed_tracks", join_ids(track_ids))

    def limit(self, limit: int) -> "RecommendationsEndpoint":
        """Number of tracks (clamped to 1-100)."""
        return self._param("limit", RecommendationLimit(limit))

    def feature(
        self,
        kind: str,
        *,
        target: float | None = None,
        min: float | None = None,
        max: float | None = None,
    ) -> "RecommendationsEndpoint":
        """Constrain a tunable attribute, e.g. ``feature("energy", min=0.6)``."""
        if kind not in FEATURES:
            raise ValueError(f"unknown recommendation feature: {kind}")
        for prefix, value in (("target", target), ("min", min), ("max", max)):
            if value is not None:
                self._param(f"{prefix}_{kind}", value)
        return self


class TracksApi:
    def track(self, track_id: str) -> MarketEndpoint[Track]:
        return MarketEndpoint(self, f"/tracks/{track_id}", parse_as(Track))

    def tracks(self, track_ids: Iterable[str]) -> MarketEndpoint[list[Track]]:
        return MarketEndpoint(
            self,
            "/tracks",
            parse_key("tracks", list[Track]),
            params={"ids": join_ids(track_ids)},
        )

    def audio_features(self, track_id: str) -> ReadEndpoint[AudioFeatures]:
        return ReadEndpoint(self, f"/audio-features/{track_id}", parse_as(AudioFeatures))

    def several_audio_features(
        self, track_ids: Iterable[str]
    ) -> ReadEndpoint[list[AudioFeatures | None]]:
        return ReadEndpoint(
            self,
            "/audio-features",
            parse_key("audio_features", list[AudioFeatures | None]),
            params={"ids": join_ids(track_ids)},
        )

    def audio_analysis(self, track_id: str) -> ReadEndpoint[AudioAnalysis]:
        return ReadEndpoint(self, f"/audio-analysis/{track_id}", parse_as(AudioAnalysis))

    def recommendations(
        self,
        *,
        seed_artists: Iterable[str] = (),
        seed_genres: Iterable[str] = (),
        seed_tracks: Iterable[str] = (),
    ) -> RecommendationsEndpoint:
        """Recommendations from at least one seed artist, genre or track."""
        endpoint = RecommendationsEndpoint(
            self, "/recommendations", parse_as(Recommendations)
        )
        seeds = {
            "seed_artists": list(seed_artists),
            "seed_genres": list(seed_genres),
            "seed_tracks": list(seed_tracks),
        }
        if not any(seeds.values()):
            raise ValueError("at least one seed artist, genre or track is required")
        for key, values in seeds.items():
            if values:
                endpoint._param(key, join_ids(values))
        return endpoint


class SavedTracksApi:
    def saved_tracks(self) -> PagedEndpoint[Page[SavedTrack]]:
        return PagedEndpoint(self, "/me/tracks", parse_as(Page[SavedTrack]))

    def save_tracks(self, track_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "PUT", "/me/tracks", track_ids)

    def remove_saved_tracks(self, track_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "DELETE", "/me/tracks", track_ids)

    def check_saved_tracks(self, track_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/tracks/contains", track_ids)
