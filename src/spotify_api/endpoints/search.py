from __future__ import annotations

from typing import Iterable

from spotify_api.endpoints.base import PagedEndpoint, parse_as
from spotify_api.models import SearchResults, SearchType


class SearchEndpoint(PagedEndpoint[SearchResults]):
    def include_external(self, audio: bool = True) -> "SearchEndpoint":
        """Mark externally hosted audio content as playable in the results."""
        return self._param("include_external", "audio" if audio else None)


class SearchApi:
    def search(
        self, query: str, types: Iterable[str | SearchType] | str | SearchType
    ) -> SearchEndpoint:
        """Search the catalogue.

        *types* is one or several of ``album``, ``artist``, ``playlist``,
        ``track``, ``show``, ``episode`` and ``audiobook``; unknown names
        raise ``ValueError`` before anything is sent.
        """
        if isinstance(types, (str, SearchType)):
            types = [types]
        parsed = [SearchType.parse(t).value for t in types]
        if not parsed:
            raise ValueError("at least one search type is required")
        return SearchEndpoint(
            self, "/search", parse_as(SearchResults), params={"q": query, "type": parsed}
        )
