"""
Data models for Spotify Web API responses.

Every model is a frozen dataclass. Fields missing from a response are None;
keys the model does not declare are kept in the ``_extra_fields`` attribute,
which takes no part in equality or ``repr``.
"""

from .base import SpotifyModel
from .artist import Artist
from .track import Track
from .device import Device
from .paging import Item, Paging

__all__ = [
    "SpotifyModel",
    "Artist",
    "Track",
    "Device",
    "Item",
    "Paging",
]
