"""Tests for the HTTP client."""

from unittest.mock import MagicMock

import pytest
import requests

from spotify_web_api import SpotifyClient
from spotify_web_api.exceptions import SpotifyAPIError, SpotifyAuthenticationError


class TestSpotifyClientInit:
    def test_requires_token(self):
        with pytest.raises(SpotifyAuthenticationError):
            SpotifyClient("")

    def test_defaults(self):
        client = SpotifyClient("token")

        assert client.base_url == "https://api.spotify.com/v1"
        assert client.timeout is None
        assert client.verify_ssl is True
        assert isinstance(client.session, requests.Session)
        client.close()

    def test_strips_trailing_slash(self, session):
        client = SpotifyClient("token", base_url="http://localhost:8080/v1/", session=session)

        assert client.base_url == "http://localhost:8080/v1"

    def test_context_manager_closes_session(self, session):
        with SpotifyClient("token", session=session) as client:
            assert client.session is session

        session.close.assert_called_once_with()


class TestInvokeApiCall:
    def test_get_sends_bearer_token(self, client, session, response_factory):
        session.request.return_value = response_factory(200, {})

        client.get("https://api.spotify.com/v1/me/top/artists")

        session.request.assert_called_once_with(
            "GET",
            "https://api.spotify.com/v1/me/top/artists",
            headers={"Authorization": "Bearer test-token"},
            verify=True,
            timeout=None,
        )

    def test_put_sends_json(self, client, session, response_factory):
        session.request.return_value = response_factory(204)

        client.put("https://api.spotify.com/v1/me/player", json_payload={"device_ids": ["a"]})

        _, kwargs = session.request.call_args
        assert session.request.call_args[0][0] == "PUT"
        assert kwargs["json"] == {"device_ids": ["a"]}

    def test_extra_headers_are_merged(self, client, session, response_factory):
        session.request.return_value = response_factory(200, {})

        client.post("https://api.spotify.com/v1/me/player/next", headers={"X-Test": "1"})

        _, kwargs = session.request.call_args
        assert kwargs["headers"] == {"Authorization": "Bearer test-token", "X-Test": "1"}

    def test_error_statuses_are_returned(self, client, session, response_factory):
        response = response_factory(404, "missing")
        session.request.return_value = response

        assert client.get("https://api.spotify.com/v1/me/player/devices") is response

    def test_transport_failure(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("boom")

        with pytest.raises(SpotifyAPIError) as exc_info:
            client.get("https://api.spotify.com/v1/me/player/devices")

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_unsupported_method(self, client):
        with pytest.raises(ValueError):
            client._invoke_api_call("TRACE", "https://api.spotify.com/v1/me")

    def test_set_access_token(self, client, session, response_factory):
        session.request.return_value = response_factory(200, {})

        client.set_access_token("new-token")
        client.get("https://api.spotify.com/v1/me")

        _, kwargs = session.request.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer new-token"

    def test_set_empty_access_token(self, client):
        with pytest.raises(SpotifyAuthenticationError):
            client.set_access_token(None)

    def test_timeout_and_verify_are_forwarded(self, response_factory):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = response_factory(200, {})
        client = SpotifyClient("t", timeout=5, verify_ssl="/etc/ca.pem", session=session)

        client.get("https://api.spotify.com/v1/me")

        _, kwargs = session.request.call_args
        assert kwargs["timeout"] == 5
        assert kwargs["verify"] == "/etc/ca.pem"
