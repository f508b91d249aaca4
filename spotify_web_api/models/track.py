from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import SpotifyModel


@dataclass(frozen=True)
class Track(SpotifyModel):
    """
    Full track object, as returned inside top-tracks pages (``"type": "track"``).

    ``album`` and ``artists`` are kept as the simplified objects the API sends.
    """
    album: Optional[Dict[str, Any]] = None
    artists: Optional[List[Dict[str, Any]]] = None
    available_markets: Optional[List[str]] = None
    disc_number: Optional[int] = None
    duration_ms: Optional[int] = None
    explicit: Optional[bool] = None
    external_ids: Optional[Dict[str, str]] = None
    external_urls: Optional[Dict[str, str]] = None
    href: Optional[str] = None
    id: Optional[str] = None
    is_local: Optional[bool] = None
    is_playable: Optional[bool] = None
    linked_from: Optional[Dict[str, Any]] = None
    name: Optional[str] = None
    popularity: Optional[int] = None
    preview_url: Optional[str] = None
    restrictions: Optional[Dict[str, str]] = None
    track_number: Optional[int] = None
    type: Optional[str] = None
    uri: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)
