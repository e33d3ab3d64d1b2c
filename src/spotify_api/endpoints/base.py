"""Request descriptors shared by every resource module.

An :class:`Endpoint` is a small mutable accumulator:

* the per-endpoint constructor (a client method such as ``client.album(id)``)
  seeds the HTTP method, the path with its required parameters and the
  response parser;
* fluent setters add optional query parameters (``params``) or JSON body
  fields (``body``) and return the builder itself;
* a terminal :meth:`Endpoint.send` (or its alias :meth:`Endpoint.get`) runs
  the one shared execution path on the owning client.

A builder is consumed by its first send; sending it again raises
:class:`~spotify_api.errors.InvalidClientStateError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

from pydantic import TypeAdapter

from spotify_api.errors import InvalidClientStateError

if TYPE_CHECKING:
    from spotify_api.client import Client

T = TypeVar("T")
E = TypeVar("E", bound="Endpoint")


class Limit(int):
    """Page size clamped into ``[MIN, MAX]`` at construction.

    >>> Limit(100), Limit(0), Limit(20)
    (50, 1, 20)
    """

    MIN = 1
    MAX = 50

    def __new__(cls, value: int) -> "Limit":
        return super().__new__(cls, min(max(int(value), cls.MIN), cls.MAX))


# --------------------------------------------------------------------------- #
# Response parsers                                                            #
# --------------------------------------------------------------------------- #
def parse_as(type_: Any) -> Callable[[Any], Any]:
    """Parser validating the whole payload against *type_*."""
    adapter = TypeAdapter(type_)
    return adapter.validate_python


def parse_key(key: str, type_: Any) -> Callable[[Any], Any]:
    """Parser for payloads that wrap the result, e.g. ``{"albums": [...]}``."""
    adapter = TypeAdapter(type_)

    def parse(payload: Any) -> Any:
        return adapter.validate_python(payload[key])

    return parse


def join_ids(ids: Iterable[str]) -> str:
    """Comma-join ids for ``?ids=`` style parameters."""
    if isinstance(ids, str):
        return ids
    return ",".join(ids)


# --------------------------------------------------------------------------- #
# Builder                                                                     #
# --------------------------------------------------------------------------- #
class Endpoint(Generic[T]):
    """One API request, built fluently and sent once."""

    def __init__(
        self,
        client: "Client",
        method: str,
        path: str,
        *,
        parse: Callable[[Any], T] | None = None,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> None:
        self._client = client
        self.method = method
        self.path = path
        self.parse = parse
        self.params: dict[str, Any] = dict(params or {})
        self.body: dict[str, Any] | None = dict(body) if body is not None else None
        # raw payload for non-JSON uploads; takes the place of body
        self.data: bytes | str | None = None
        self.headers: dict[str, str] = {}
        self._sent = False

    def _param(self: E, key: str, value: Any) -> E:
        self.params[key] = value
        return self

    def _field(self: E, key: str, value: Any) -> E:
        if self.body is None:
            self.body = {}
        self.body[key] = value
        return self

    def send(self) -> T:
        """Execute the request and return the parsed result."""
        if self._sent:
            raise InvalidClientStateError(
                "this endpoint builder was already sent; build a new one"
            )
        self._sent = True
        params = {k: _query_value(v) for k, v in self.params.items() if v is not None}
        return self._client.request(
            self.method,
            self.path,
            params=params,
            json=self.body,
            data=self.data,
            headers=self.headers or None,
            parse=self.parse,
        )

    get = send

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.path} params={self.params}>"


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(_query_value(v)) for v in value)
    return getattr(value, "value", value)


# --------------------------------------------------------------------------- #
# Shared setters                                                              #
# --------------------------------------------------------------------------- #
class MarketMixin:
    def market(self: E, market: str) -> E:
        """ISO 3166-1 alpha-2 country code, or ``"from_token"``."""
        return self._param("market", market)


class PagingMixin:
    def limit(self: E, limit: int) -> E:
        """Maximum number of items (clamped to 1-50)."""
        return self._param("limit", Limit(limit))

    def offset(self: E, offset: int) -> E:
        return self._param("offset", max(int(offset), 0))


class LocaleMixin:
    def country(self: E, country: str) -> E:
        return self._param("country", country)

    def locale(self: E, locale: str) -> E:
        """Language tag such as ``es_MX``."""
        return self._param("locale", locale)


class ReadEndpoint(Endpoint[T]):
    """GET request."""

    def __init__(self, client: "Client", path: str, parse: Callable[[Any], T], **kwargs: Any):
        super().__init__(client, "GET", path, parse=parse, **kwargs)


class PagedEndpoint(PagingMixin, MarketMixin, ReadEndpoint[T]):
    """GET request returning a page, with ``market``/``limit``/``offset``."""


class MarketEndpoint(MarketMixin, ReadEndpoint[T]):
    """GET request accepting an optional ``market``."""


# --------------------------------------------------------------------------- #
# Library helpers (save / remove / check)                                     #
# --------------------------------------------------------------------------- #
def ids_write(
    client: "Client", method: str, path: str, ids: Iterable[str], *, in_query: bool = False
) -> Endpoint[Any]:
    """PUT/DELETE carrying ``ids`` in the JSON body (or the query string)."""
    if isinstance(ids, str):
        ids = [ids]
    ids = list(ids)
    if in_query:
        return Endpoint(client, method, path, params={"ids": join_ids(ids)})
    return Endpoint(client, method, path, body={"ids": ids})


def ids_contains(client: "Client", path: str, ids: Iterable[str], **params: Any) -> ReadEndpoint[list[bool]]:
    """GET ``.../contains?ids=`` returning one boolean per id."""
    return ReadEndpoint(client, path, parse_as(list[bool]), params={**params, "ids": join_ids(ids)})
