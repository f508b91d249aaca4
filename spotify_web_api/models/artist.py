from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import SpotifyModel


@dataclass(frozen=True)
class Artist(SpotifyModel):
    """Full artist object, as returned inside top-artists pages (``"type": "artist"``)."""
    external_urls: Optional[Dict[str, str]] = None
    followers: Optional[Dict[str, Any]] = None
    genres: Optional[List[str]] = None
    href: Optional[str] = None
    id: Optional[str] = None
    images: Optional[List[Dict[str, Any]]] = None
    name: Optional[str] = None
    popularity: Optional[int] = None
    type: Optional[str] = None
    uri: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)
