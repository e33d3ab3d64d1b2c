"""HTTP plumbing shared by every endpoint.

:class:`Transport` owns the ``requests.Session`` used for API calls and turns
responses into results:

* 2xx with an empty body, or an endpoint that expects no body → :data:`NO_CONTENT`
* 2xx with a JSON body → ``parse(json)``
* non-2xx with ``{"error": {"status", "message"}}`` → :class:`ApiError`
* any other non-2xx → :class:`HttpError`
* ``requests`` failures → :class:`TransportError`
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

import requests
from pydantic import ValidationError

from spotify_api.config import API_URL, DEFAULT_TIMEOUT
from spotify_api.errors import ApiError, DeserializeError, HttpError, TransportError
from spotify_api.models.base import NO_CONTENT

_LOG = logging.getLogger("spotify-api.transport")

Parser = Callable[[Any], Any]


class Transport:
    """Send authorised requests to the REST API."""

    def __init__(
        self,
        api_url: str = API_URL,
        *,
        session: requests.Session | None = None,
        timeout: tuple[float, float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        """Join *path* to the API base; absolute URLs (``next`` links) pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.api_url}/{path.lstrip('/')}"

    def send(
        self,
        method: str,
        path: str,
        *,
        access_token: str,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        data: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        all_headers = {"Authorization": f"Bearer {access_token}"}
        if headers:
            all_headers.update(headers)
        if json_body is None and data is None and method != "GET":
            # some endpoints (e.g. saving audiobooks) reject body-less writes without it
            all_headers.setdefault("Content-Length", "0")

        url = self.url_for(path)
        try:
            resp = self.session.request(
                method,
                url,
                params=dict(params) if params else None,
                json=json_body,
                data=data,
                headers=all_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        _LOG.debug("%s %s -> %s", method, path, resp.status_code)
        return resp


def decode_response(resp: requests.Response, parse: Parser | None) -> Any:
    """Map *resp* to a result or raise the matching :class:`SpotifyError`."""
    text = resp.text or ""

    if not resp.ok:
        raise _error_from(resp.status_code, text)

    if parse is None or not text.strip():
        return NO_CONTENT

    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise DeserializeError(f"response is not valid JSON: {exc}", body=text) from exc

    try:
        return parse(payload)
    except (ValidationError, KeyError, TypeError) as exc:
        raise DeserializeError(
            f"response does not match the expected shape: {exc}", body=text
        ) from exc


def _error_from(status_code: int, text: str) -> HttpError:
    try:
        payload = json.loads(text) if text.strip() else None
    except ValueError:
        payload = None

    details = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(details, dict) and "message" in details:
        return ApiError(_status_of(details, status_code), str(details["message"]), body=text)
    return HttpError(status_code, body=text or None)


def _status_of(details: dict, fallback: int) -> int:
    # a non-numeric payload status falls back to the HTTP one
    try:
        return int(details.get("status") or fallback)
    except (TypeError, ValueError):
        return fallback
