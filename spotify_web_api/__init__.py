"""
Spotify Web API client.

This package provides a thin Python interface to the Spotify Web API: URL
builders and request functions per endpoint, with JSON responses built into
frozen dataclass models.
"""

from .api_client import SpotifyClient
from .models import Artist, Device, Paging, Track
from .responses import ApiResponse, build_item, build_paging, build_response
from . import personalization, player
from .exceptions import (
    SpotifyError,
    SpotifyAuthenticationError,
    SpotifyAPIError,
    SpotifyDataError,
    SpotifyUnknownItemTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "SpotifyClient",
    "Artist",
    "Device",
    "Paging",
    "Track",
    "ApiResponse",
    "build_item",
    "build_paging",
    "build_response",
    "personalization",
    "player",
    "SpotifyError",
    "SpotifyAuthenticationError",
    "SpotifyAPIError",
    "SpotifyDataError",
    "SpotifyUnknownItemTypeError",
]
