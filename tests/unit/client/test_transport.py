"""Unit tests for Transport.send and decode_response.

Coverage:
* Structured API errors vs. bare HTTP errors
* Malformed or mismatching success bodies → DeserializeError
* Empty success bodies → NO_CONTENT
* Request headers (bearer token, Content-Length on body-less writes)
* requests failures → TransportError
"""

from __future__ import annotations

import pytest
import requests

from spotify_api.errors import ApiError, DeserializeError, HttpError, TransportError
from spotify_api.models import NO_CONTENT, Album
from spotify_api.transport import Transport, decode_response


def _parse_album(payload):
    return Album.model_validate(payload)


# --------------------------------------------------------------------------- #
# decode_response                                                             #
# --------------------------------------------------------------------------- #
def test_api_error_body(respond) -> None:
    resp = respond({"error": {"status": 404, "message": "Non existing id"}}, status=404)
    with pytest.raises(ApiError) as exc:
        decode_response(resp, _parse_album)
    assert exc.value.status_code == 404
    assert exc.value.api_message == "Non existing id"
    assert str(exc.value) == "Error returned from the Spotify API: 404 Non existing id"
    assert exc.value.to_payload() == {
        "error": "api",
        "message": "Error returned from the Spotify API: 404 Non existing id",
        "status": 404,
    }


def test_api_error_with_non_numeric_status(respond) -> None:
    resp = respond({"error": {"status": "bad", "message": "x"}}, status=400)
    with pytest.raises(ApiError) as exc:
        decode_response(resp, None)
    assert exc.value.status_code == 400
    assert exc.value.api_message == "x"


def test_plain_http_error(respond) -> None:
    with pytest.raises(HttpError) as exc:
        decode_response(respond(text="upstream timeout", status=502), _parse_album)
    assert not isinstance(exc.value, ApiError)
    assert exc.value.status_code == 502
    assert exc.value.body == "upstream timeout"


def test_invalid_json_is_deserialize_error(respond) -> None:
    with pytest.raises(DeserializeError) as exc:
        decode_response(respond(text="{not json"), _parse_album)
    assert exc.value.body == "{not json"


def test_shape_mismatch_is_deserialize_error(respond) -> None:
    with pytest.raises(DeserializeError):
        decode_response(respond({"unexpected": True}), _parse_album)


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_body_is_no_content(respond, text: str) -> None:
    assert decode_response(respond(text=text, status=204), _parse_album) is NO_CONTENT


def test_no_parser_is_no_content(respond) -> None:
    assert decode_response(respond({"snapshot_id": "x"}), None) is NO_CONTENT


def test_no_content_is_singleton_and_truthy() -> None:
    assert NO_CONTENT
    assert repr(NO_CONTENT) == "NO_CONTENT"
    assert type(NO_CONTENT)() is NO_CONTENT


# --------------------------------------------------------------------------- #
# Transport.send                                                              #
# --------------------------------------------------------------------------- #
def test_send_builds_authorised_request(session) -> None:
    session.queue_api({"ok": True})
    Transport("https://api.example.test/v1/", session=session).send(
        "GET", "/albums/1", access_token="tk", params={"market": "SE"}
    )
    method, url, kwargs = session.requests[0]
    assert (method, url) == ("GET", "https://api.example.test/v1/albums/1")
    assert kwargs["params"] == {"market": "SE"}
    assert kwargs["headers"] == {"Authorization": "Bearer tk"}
    assert kwargs["timeout"] == (5, 20)


def test_body_less_write_sends_content_length(session) -> None:
    session.queue_api(text="")
    Transport(session=session).send("PUT", "/me/player/pause", access_token="tk")
    assert session.requests[0][2]["headers"]["Content-Length"] == "0"


def test_absolute_urls_pass_through(session) -> None:
    next_url = "https://api.spotify.com/v1/me/tracks?offset=20&limit=20"
    session.queue_api({})
    Transport(session=session).send("GET", next_url, access_token="tk")
    assert session.requests[0][1] == next_url


def test_requests_failure_is_transport_error(session) -> None:
    session.request_error = requests.Timeout("read timed out")
    with pytest.raises(TransportError):
        Transport(session=session).send("GET", "/markets", access_token="tk")
