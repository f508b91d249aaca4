"""
Endpoints for reading and controlling Spotify Connect playback.

As in :mod:`spotify_web_api.personalization`, every endpoint has a function
that provides the URL and one that makes the request. Reading devices requires
the ``user-read-playback-state`` scope, the commands need
``user-modify-playback-state``.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .api_client import DEFAULT_BASE_URL, SpotifyClient
from .models import Device
from .responses import ApiResponse, build_response
from .utils import query_string
from .logging import get_logger
from .exceptions import SpotifyDataError

logger = get_logger(__name__)


def url(base_url: str = DEFAULT_BASE_URL) -> str:
    """Base URL of the player endpoints."""
    return f"{base_url.rstrip('/')}/me/player"


def _command_url(command: str, device_id: Optional[str], base_url: str) -> str:
    return f"{url(base_url)}/{command}" + query_string({"device_id": device_id})


def build_devices(body: Any) -> Tuple[Device, ...]:
    """
    Build Device models from a ``{"devices": [...]}`` body.

    Raises:
        SpotifyDataError: If the body does not hold a list of devices.
    """
    if not isinstance(body, dict) or not isinstance(body.get("devices"), list):
        raise SpotifyDataError("Expected a JSON object with a 'devices' list")
    return tuple(Device.build_response(device) for device in body["devices"])


def devices_url(base_url: str = DEFAULT_BASE_URL) -> str:
    """
    URL for the user's available devices.

    >>> devices_url()
    'https://api.spotify.com/v1/me/player/devices'
    """
    return f"{url(base_url)}/devices"


def devices(client: SpotifyClient) -> ApiResponse:
    """
    Get the user's available Spotify Connect devices.

    **Method**: ``GET``

    Returns:
        ApiResponse: ``("ok", tuple of Device)`` or ``("error", raw body)``.

    Raises:
        SpotifyAPIError: If the request fails or the API answers with a server error.
        SpotifyDataError: If the response body cannot be decoded.
    """
    request_url = devices_url(base_url=client.base_url)
    logger.info(f"Fetching devices from {request_url}")
    return build_response(client.get(request_url), build_devices)


def transfer_playback_url(base_url: str = DEFAULT_BASE_URL) -> str:
    """
    URL for transferring playback to another device.

    >>> transfer_playback_url()
    'https://api.spotify.com/v1/me/player'
    """
    return url(base_url)


def transfer_playback(
    client: SpotifyClient,
    device_ids: Sequence[str],
    play: Optional[bool] = None,
) -> ApiResponse:
    """
    Transfer playback to a new device.

    **Method**: ``PUT``

    Args:
        client: Client used to send the request.
        device_ids: IDs of the devices to transfer playback to. The API
                    currently accepts exactly one.
        play: True to start playing on the new device, False to keep the
              current state. Left out of the request when None.

    Raises:
        ValueError: If device_ids is empty.
    """
    if isinstance(device_ids, str):
        device_ids = [device_ids]
    if not device_ids:
        raise ValueError("device_ids must contain at least one device ID")

    payload: Dict[str, Any] = {"device_ids": list(device_ids)}
    if play is not None:
        payload["play"] = play

    request_url = transfer_playback_url(base_url=client.base_url)
    logger.info(f"Transferring playback to {', '.join(map(str, payload['device_ids']))}")
    return build_response(client.put(request_url, json_payload=payload))


def play_url(device_id: Optional[str] = None, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    URL for starting or resuming playback.

    >>> play_url(device_id="abc")
    'https://api.spotify.com/v1/me/player/play?device_id=abc'
    """
    return _command_url("play", device_id, base_url)


def play(
    client: SpotifyClient,
    device_id: Optional[str] = None,
    context_uri: Optional[str] = None,
    uris: Optional[List[str]] = None,
    offset: Optional[Dict[str, Any]] = None,
    position_ms: Optional[int] = None,
) -> ApiResponse:
    """
    Start a new context or resume current playback.

    **Method**: ``PUT``

    Args:
        client: Client used to send the request.
        device_id: Device to target. Defaults to the active device.
        context_uri: Album, artist or playlist URI to play.
        uris: Track URIs to play. Cannot be combined with context_uri.
        offset: Where in the context to start, e.g. ``{"position": 5}`` or
                ``{"uri": "spotify:track:..."}``.
        position_ms: Position to seek to in the first track.

    Raises:
        ValueError: If both context_uri and uris are given, or position_ms is not a
            non-negative integer.
    """
    if context_uri is not None and uris is not None:
        raise ValueError("context_uri and uris cannot be used together")
    if position_ms is not None:
        if isinstance(position_ms, bool) or not isinstance(position_ms, int):
            raise ValueError("position_ms must be an integer")
        if position_ms < 0:
            raise ValueError("position_ms can't be a negative number")

    payload = {
        key: value
        for key, value in (
            ("context_uri", context_uri),
            ("uris", uris),
            ("offset", offset),
            ("position_ms", position_ms),
        )
        if value is not None
    }
    request_url = play_url(device_id, base_url=client.base_url)
    return build_response(client.put(request_url, json_payload=payload or None))


def pause_url(device_id: Optional[str] = None, base_url: str = DEFAULT_BASE_URL) -> str:
    """URL for pausing playback."""
    return _command_url("pause", device_id, base_url)


def pause(client: SpotifyClient, device_id: Optional[str] = None) -> ApiResponse:
    """
    Pause playback on the user's account.

    **Method**: ``PUT``
    """
    return build_response(client.put(pause_url(device_id, base_url=client.base_url)))


def next_url(device_id: Optional[str] = None, base_url: str = DEFAULT_BASE_URL) -> str:
    """URL for skipping to the next track."""
    return _command_url("next", device_id, base_url)


def skip_to_next(client: SpotifyClient, device_id: Optional[str] = None) -> ApiResponse:
    """
    Skip to the next track in the user's queue.

    **Method**: ``POST``
    """
    return build_response(client.post(next_url(device_id, base_url=client.base_url)))


def previous_url(device_id: Optional[str] = None, base_url: str = DEFAULT_BASE_URL) -> str:
    """URL for skipping to the previous track."""
    return _command_url("previous", device_id, base_url)


def skip_to_previous(client: SpotifyClient, device_id: Optional[str] = None) -> ApiResponse:
    """
    Skip to the previous track in the user's queue.

    **Method**: ``POST``
    """
    return build_response(client.post(previous_url(device_id, base_url=client.base_url)))


def volume_url(
    volume_percent: int,
    device_id: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """
    URL for setting the playback volume.

    >>> volume_url(40)
    'https://api.spotify.com/v1/me/player/volume?volume_percent=40'

    Raises:
        ValueError: If volume_percent is not an integer between 0 and 100.
    """
    if isinstance(volume_percent, bool) or not isinstance(volume_percent, int):
        raise ValueError("volume_percent must be an integer")
    if volume_percent < 0 or volume_percent > 100:
        raise ValueError("volume_percent must be between 0 and 100")
    params = {"volume_percent": volume_percent, "device_id": device_id}
    return f"{url(base_url)}/volume" + query_string(params)


def set_volume(
    client: SpotifyClient,
    volume_percent: int,
    device_id: Optional[str] = None,
) -> ApiResponse:
    """
    Set the volume for the user's current playback device.

    **Method**: ``PUT``
    """
    request_url = volume_url(volume_percent, device_id, base_url=client.base_url)
    return build_response(client.put(request_url))
