"""Tests for logger naming and debug output."""

import logging

from spotify_web_api.logging import get_logger, log_api_response, log_extra_fields


class TestGetLogger:
    def test_package_logger(self):
        assert get_logger().name == "spotify_web_api"
        assert get_logger("spotify_web_api").name == "spotify_web_api"

    def test_module_names_are_kept(self):
        assert get_logger("spotify_web_api.player").name == "spotify_web_api.player"

    def test_other_names_are_nested(self):
        assert get_logger("player") is get_logger("spotify_web_api.player")
        assert get_logger("spotify_web_apix").name == "spotify_web_api.spotify_web_apix"


class TestLogApiResponse:
    def test_logs_any_json_value(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="spotify_web_api"):
            log_api_response(logger, "https://api.spotify.com/v1/me", [1, "two", None], 200)
            log_api_response(logger, "https://api.spotify.com/v1/me", None, 200)

        assert caplog.messages == [
            '200 from https://api.spotify.com/v1/me: [1, "two", null]',
            "200 from https://api.spotify.com/v1/me: null",
        ]

    def test_truncates(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="spotify_web_api"):
            log_api_response(logger, "u", "x" * 50, 200, max_length=10)
            log_api_response(logger, "u", "x" * 50, 200, max_length=None)

        assert caplog.messages[0] == '200 from u: "xxxxxxxxx... [truncated]'
        assert caplog.messages[1] == '200 from u: "' + "x" * 50 + '"'

    def test_not_serializable(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="spotify_web_api"):
            log_api_response(logger, "u", object(), 200)

        assert "body not serializable" in caplog.messages[0]

    def test_silent_above_debug(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.INFO, logger="spotify_web_api"):
            log_api_response(logger, "u", {"a": 1}, 200)
            log_extra_fields(logger, "Device", "1", {"a": 1})

        assert caplog.messages == []


class TestLogExtraFields:
    def test_truncates_values(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="spotify_web_api"):
            log_extra_fields(logger, "Track", "abc", {"note": "y" * 20}, max_length=5)

        assert "Extra fields for Track abc" in caplog.messages[0]
        assert "yyyyy... [truncated]" in caplog.messages[0]
