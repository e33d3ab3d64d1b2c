from __future__ import annotations

from pydantic import Field

from spotify_api.models.base import SpotifyModel
from spotify_api.models.track import Track


class RecommendationSeed(SpotifyModel):
    id: str
    type: str
    href: str | None = None
    after_filtering_size: int = Field(default=0, alias="afterFilteringSize")
    after_relinking_size: int = Field(default=0, alias="afterRelinkingSize")
    initial_pool_size: int = Field(default=0, alias="initialPoolSize")


class Recommendations(SpotifyModel):
    seeds: list[RecommendationSeed] = []
    tracks: list[Track] = []
