"""
Models for paged API results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .base import SpotifyModel
from .artist import Artist
from .track import Track

Item = Union[Artist, Track]


@dataclass(frozen=True)
class Paging(SpotifyModel):
    """
    One page of results.

    Only the ``next``/``previous`` URLs are exposed; fetching further pages is
    left to the caller.

    Attributes:
        items: The decoded items of this page, each an Artist or a Track.
        next: URL of the next page, or None on the last page.
        previous: URL of the previous page, or None on the first page.
        total: Total number of items available.
        limit: Maximum number of items in this page.
        href: URL of this page.
        offset: Offset of the first item of this page.
    """
    items: Tuple[Item, ...] = ()
    next: Optional[str] = None
    previous: Optional[str] = None
    total: Optional[int] = None
    limit: Optional[int] = None
    href: Optional[str] = None
    offset: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)
