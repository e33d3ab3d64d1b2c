from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import (
    Endpoint,
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
    Episode,
    Page,
    SavedEpisode,
    SavedShow,
    Show,
    SimplifiedEpisode,
    SimplifiedShow,
)


class ShowsApi:
    """Podcast shows and episodes (any flow)."""

    def show(self, show_id: str) -> MarketEndpoint[Show]:
        return MarketEndpoint(self, f"/shows/{show_id}", parse_as(Show))

    def shows(self, show_ids: Iterable[str]) -> MarketEndpoint[list[SimplifiedShow | None]]:
        """Several shows; unknown ids yield ``None`` entries."""
        return MarketEndpoint(
            self,
            "/shows",
            parse_key("shows", list[SimplifiedShow | None]),
            params={"ids": join_ids(show_ids)},
        )

    def show_episodes(self, show_id: str) -> PagedEndpoint[Page[SimplifiedEpisode]]:
        return PagedEndpoint(
            self, f"/shows/{show_id}/episodes", parse_as(Page[SimplifiedEpisode])
        )

    def episode(self, episode_id: str) -> MarketEndpoint[Episode]:
        return MarketEndpoint(self, f"/episodes/{episode_id}", parse_as(Episode))

    def episodes(self, episode_ids: Iterable[str]) -> MarketEndpoint[list[Episode | None]]:
        return MarketEndpoint(
            self,
            "/episodes",
            parse_key("episodes", list[Episode | None]),
            params={"ids": join_ids(episode_ids)},
        )


class SavedShowsApi:
    """Saved shows and episodes of the current user."""

    def saved_shows(self) -> PagedEndpoint[Page[SavedShow]]:
        return PagedEndpoint(self, "/me/shows", parse_as(Page[SavedShow]))

    def save_shows(self, show_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "PUT", "/me/shows", show_ids)

    def remove_saved_shows(self, show_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "DELETE", "/me/shows", show_ids)

    def check_saved_shows(self, show_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/shows/contains", show_ids)

    def saved_episodes(self) -> PagedEndpoint[Page[SavedEpisode]]:
        return PagedEndpoint(self, "/me/episodes", parse_as(Page[SavedEpisode]))

    def save_episodes(self, episode_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "PUT", "/me/episodes", episode_ids)

    def remove_saved_episodes(self, episode_ids: Iterable[str]) -> Endpoint:
        return ids_write(self, "DELETE", "/me/episodes", episode_ids)

    def check_saved_episodes(self, episode_ids: Iterable[str]) -> ReadEndpoint[list[bool]]:
        return ids_contains(self, "/me/episodes/contains", episode_ids)
