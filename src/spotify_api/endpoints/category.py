from __future__ import annotations

from spotify_api.endpoints.base import (
    LocaleMixin,
    PagingMixin,
    ReadEndpoint,
    parse_as,
    parse_key,
)
from spotify_api.models import Category, Page


class CategoryEndpoint(LocaleMixin, ReadEndpoint[Category]):
    pass


class CategoriesEndpoint(PagingMixin, LocaleMixin, ReadEndpoint[Page[Category]]):
    pass


class CategoriesApi:
    def browse_category(self, category_id: str) -> CategoryEndpoint:
        return CategoryEndpoint(self, f"/browse/categories/{category_id}", parse_as(Category))

    def browse_categories(self) -> CategoriesEndpoint:
        return CategoriesEndpoint(
            self, "/browse/categories", parse_key("categories", Page[Category])
        )

    def genre_seeds(self) -> ReadEndpoint[list[str]]:
        """Genres usable as recommendation seeds."""
        return ReadEndpoint(
            self,
            "/recommendations/available-genre-seeds",
            parse_key("genres", list[str]),
        )

    def markets(self) -> ReadEndpoint[list[str]]:
        """Country codes where Spotify is available."""
        return ReadEndpoint(self, "/markets", parse_key("markets", list[str]))
