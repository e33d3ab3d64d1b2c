from __future__ import annotations

from spotify_api.models.base import Image, SpotifyModel


class Category(SpotifyModel):
    id: str
    name: str
    href: str | None = None
    icons: list[Image] = []
