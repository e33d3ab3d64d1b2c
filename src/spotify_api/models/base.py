"""Shared response models: pagination envelopes and small value objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from spotify_api.errors import NoRemainingPagesError

if TYPE_CHECKING:
    from spotify_api.client import Client

T = TypeVar("T")


class SpotifyModel(BaseModel):
    """Base for every API object.

    Unknown keys are kept (``extra="allow"``) because Spotify adds fields
    without notice; they stay reachable through ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class NoContent:
    """Result of a successful request whose response body is empty.

    A single instance, :data:`NO_CONTENT`, exists.  It is truthy so
    ``if client.pause().send():`` reads naturally, and it is distinct from
    ``None`` so success can never be confused with a missing value.
    """

    _instance: "NoContent | None" = None

    def __new__(cls) -> "NoContent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_CONTENT"

    def __bool__(self) -> bool:
        return True


NO_CONTENT = NoContent()


# --------------------------------------------------------------------------- #
# Value objects                                                               #
# --------------------------------------------------------------------------- #
class Image(SpotifyModel):
    url: str
    height: int | None = None
    width: int | None = None


class Copyright(SpotifyModel):
    text: str
    # "C" = copyright, "P" = performance copyright
    type: str


class Restriction(SpotifyModel):
    reason: str


class ExternalIds(SpotifyModel):
    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None


class ExternalUrls(SpotifyModel):
    spotify: str | None = None


class Followers(SpotifyModel):
    href: str | None = None
    total: int = 0


class ResumePoint(SpotifyModel):
    fully_played: bool = False
    resume_position_ms: int = 0


# --------------------------------------------------------------------------- #
# Pagination                                                                  #
# --------------------------------------------------------------------------- #
class Page(SpotifyModel, Generic[T]):
    """Offset-based page.  ``items`` may contain ``None`` for unavailable items."""

    href: str
    limit: int
    next: str | None = None
    offset: int = 0
    previous: str | None = None
    total: int = 0
    items: list[T | None] = []

    def filtered_items(self) -> list[T]:
        """Return the items with ``None`` entries dropped."""
        return [item for item in self.items if item is not None]

    def get_next(self, client: "Client") -> "Page[T]":
        """Fetch the following page.

        Raises
        ------
        NoRemainingPagesError
            If this is the last page.
        """
        if not self.next:
            raise NoRemainingPagesError()
        return client.request("GET", self.next, parse=type(self).model_validate)

    def get_previous(self, client: "Client") -> "Page[T]":
        """Fetch the preceding page (``NoRemainingPagesError`` on the first)."""
        if not self.previous:
            raise NoRemainingPagesError()
        return client.request("GET", self.previous, parse=type(self).model_validate)

    def get_remaining(self, client: "Client") -> list[T | None]:
        """Return this page's items followed by those of every later page."""
        items = list(self.items)
        page: Page[T] = self
        while page.next:
            page = page.get_next(client)
            items.extend(page.items)
        return items

    def get_all(self, client: "Client") -> list[T | None]:
        """Return the items of every page, earlier pages first."""
        earlier: list[list[T | None]] = []
        page: Page[T] = self
        while page.previous:
            page = page.get_previous(client)
            earlier.append(list(page.items))

        items: list[T | None] = []
        for chunk in reversed(earlier):
            items.extend(chunk)
        items.extend(self.get_remaining(client))
        return items


class Cursor(SpotifyModel):
    after: str | None = None
    before: str | None = None


class CursorPage(SpotifyModel, Generic[T]):
    """Cursor-based page (followed artists, recently played)."""

    href: str
    limit: int
    next: str | None = None
    cursors: Cursor | None = None
    total: int | None = None
    items: list[T | None] = []

    def filtered_items(self) -> list[T]:
        return [item for item in self.items if item is not None]

    def get_next(self, client: "Client") -> "CursorPage[T]":
        if not self.next:
            raise NoRemainingPagesError()
        return client.request("GET", self.next, parse=self._parse_wrapped)

    @classmethod
    def _parse_wrapped(cls, payload: dict) -> "CursorPage[T]":
        # /me/following nests the page under its item type: {"artists": {...}}
        if "items" not in payload and len(payload) == 1:
            (payload,) = payload.values()
        return cls.model_validate(payload)

