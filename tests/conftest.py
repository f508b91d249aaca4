import json
from unittest.mock import MagicMock

import pytest
import requests

from spotify_web_api import SpotifyClient


def make_response(status_code, body=None, url="https://api.spotify.com/v1/me", headers=None):
    """Build a real requests.Response with the given status, body and headers."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if headers is not None:
        response.headers.update(headers)
        response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    else:
        response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> SpotifyClient:
    return SpotifyClient("test-token", session=session)


@pytest.fixture
def artist_data():
    return {
        "external_urls": {"spotify": "https://open.spotify.com/artist/0OdUWJ0sBjDrqHygGUXeCF"},
        "followers": {"href": None, "total": 306565},
        "genres": ["indie folk", "indie pop"],
        "href": "https://api.spotify.com/v1/artists/0OdUWJ0sBjDrqHygGUXeCF",
        "id": "0OdUWJ0sBjDrqHygGUXeCF",
        "images": [{"height": 816, "url": "https://i.scdn.co/image/eb26", "width": 1000}],
        "name": "Band of Horses",
        "popularity": 59,
        "type": "artist",
        "uri": "spotify:artist:0OdUWJ0sBjDrqHygGUXeCF",
    }


@pytest.fixture
def track_data():
    return {
        "album": {"album_type": "album", "id": "6TJmQnO44YE5BtTxH8pop1", "name": "Hot Fuss"},
        "artists": [{"id": "0C0XlULifJtAgn6ZNCW2eu", "name": "The Killers", "type": "artist"}],
        "available_markets": ["AR", "AU"],
        "disc_number": 1,
        "duration_ms": 222075,
        "explicit": False,
        "external_ids": {"isrc": "USIR20400274"},
        "external_urls": {"spotify": "https://open.spotify.com/track/0eGsygTp906u18L0Oimnem"},
        "href": "https://api.spotify.com/v1/tracks/0eGsygTp906u18L0Oimnem",
        "id": "0eGsygTp906u18L0Oimnem",
        "is_local": False,
        "name": "Mr. Brightside",
        "popularity": 74,
        "preview_url": None,
        "track_number": 2,
        "type": "track",
        "uri": "spotify:track:0eGsygTp906u18L0Oimnem",
    }


@pytest.fixture
def device_data():
    return {
        "id": "123",
        "is_active": True,
        "is_private_session": False,
        "is_restricted": False,
        "name": "So-And-So's Phone",
        "type": "mobile",
        "volume_percent": 95,
    }


@pytest.fixture
def response_factory():
    return make_response
