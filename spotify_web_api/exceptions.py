from typing import Optional, Union


class SpotifyError(Exception):
    """Base exception for spotify_web_api errors."""

    pass


class SpotifyAuthenticationError(SpotifyError):
    """Raised when the client is created without usable credentials."""

    pass


class SpotifyAPIError(SpotifyError):
    """Raised when an API call to the Spotify Web API fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[Union[bytes, str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SpotifyDataError(SpotifyError):
    """Raised when there is an error parsing data returned by the Spotify Web API."""

    pass


class SpotifyUnknownItemTypeError(SpotifyDataError):
    """Raised when a paged item carries a "type" no model is registered for."""

    def __init__(self, item_type: Optional[str]):
        super().__init__(f"Unknown item type: {item_type!r}")
        self.item_type = item_type
