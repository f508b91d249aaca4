"""
Models for Spotify Connect devices.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..utils import build_model
from .base import SpotifyModel


@dataclass(frozen=True)
class Device(SpotifyModel):
    """
    A device that can be controlled through Spotify Connect.

    Attributes:
        id: Device ID. May be None for restricted devices.
        is_active: Whether this device is the currently active device.
        is_private_session: Whether this device is in a private session.
        is_restricted: Whether controlling this device is restricted. When True,
            no Web API commands are accepted by it.
        name: Human readable name, e.g. "Loudest speaker".
        type: Device type, such as "computer", "smartphone" or "speaker".
        volume_percent: Current volume in percent.
    """
    id: Optional[str] = None
    is_active: Optional[bool] = None
    is_private_session: Optional[bool] = None
    is_restricted: Optional[bool] = None
    name: Optional[str] = None
    type: Optional[str] = None
    volume_percent: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)

    @classmethod
    def build_response(cls, data: Mapping[str, Any]) -> "Device":
        """Build a Device from one entry of the ``devices`` list."""
        return build_model(cls, data)
