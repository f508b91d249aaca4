"""
Endpoints for retrieving information about the user's listening habits.

There are two functions for each endpoint, one that makes the request and one
that provides the URL for it::

    personalization.top_artists(client, limit=5)      # makes the GET request
    personalization.top_artists_url(limit=5)          # provides the URL

Both endpoints require the ``user-top-read`` scope.
"""

from typing import Any, Dict

from .api_client import DEFAULT_BASE_URL, SpotifyClient
from .responses import ApiResponse, build_paging, build_response
from .utils import query_string, validate_paging_params, validate_time_range
from .logging import get_logger

logger = get_logger(__name__)

TOP_PARAMS = ("limit", "offset", "time_range")


def url(base_url: str = DEFAULT_BASE_URL) -> str:
    """Base URL of the personalization endpoints."""
    return f"{base_url.rstrip('/')}/me/top/"


def _top_url(kind: str, base_url: str, params: Dict[str, Any]) -> str:
    unknown = [name for name in params if name not in TOP_PARAMS]
    if unknown:
        raise TypeError(
            f"Unexpected parameter(s) {', '.join(unknown)}; "
            f"expected {', '.join(TOP_PARAMS)}")
    validate_paging_params(limit=params.get("limit"), offset=params.get("offset"))
    validate_time_range(params.get("time_range"))
    return url(base_url) + kind + query_string(params)


def top_artists_url(base_url: str = DEFAULT_BASE_URL, **params: Any) -> str:
    """
    URL for the current user's top artists.

    Parameters are written to the query string in the order they are given.

    >>> top_artists_url(limit=5, time_range="medium_term")
    'https://api.spotify.com/v1/me/top/artists?limit=5&time_range=medium_term'

    Raises:
        TypeError: If a parameter other than limit, offset or time_range is given.
        ValueError: If a parameter is out of range.
    """
    return _top_url("artists", base_url, params)


def top_tracks_url(base_url: str = DEFAULT_BASE_URL, **params: Any) -> str:
    """
    URL for the current user's top tracks.

    >>> top_tracks_url()
    'https://api.spotify.com/v1/me/top/tracks'
    """
    return _top_url("tracks", base_url, params)


def top_artists(client: SpotifyClient, **params: Any) -> ApiResponse:
    """
    Get the current user's top artists based on calculated affinity.

    **Method**: ``GET``

    **Optional Params**: ``limit``, ``offset``, ``time_range``

    Args:
        client: Client used to send the request.
        **params: ``limit`` is the number of items to return (1-50, the API
            defaults to 20), ``offset`` the index of the first item, and
            ``time_range`` one of ``short_term`` (about 4 weeks),
            ``medium_term`` (about 6 months, the API default) or
            ``long_term`` (several years). None values are left out.

    Returns:
        ApiResponse: ``("ok", Paging)`` whose items are Artist models, or
        ``("error", raw body bytes)`` for a 4xx response.

    Raises:
        TypeError: If an unknown parameter is given.
        ValueError: If a parameter is out of range.
        SpotifyAPIError: If the request fails or the API answers with a server error.
        SpotifyDataError: If the response body cannot be decoded.
    """
    request_url = top_artists_url(base_url=client.base_url, **params)
    logger.info(f"Fetching top artists from {request_url}")
    return build_response(client.get(request_url), build_paging)


def top_tracks(client: SpotifyClient, **params: Any) -> ApiResponse:
    """
    Get the current user's top tracks based on calculated affinity.

    **Method**: ``GET``

    Takes the same parameters as :func:`top_artists`.

    Returns:
        ApiResponse: ``("ok", Paging)`` whose items are Track models, or
        ``("error", raw body bytes)`` for a 4xx response.
    """
    request_url = top_tracks_url(base_url=client.base_url, **params)
    logger.info(f"Fetching top tracks from {request_url}")
    return build_response(client.get(request_url), build_paging)
