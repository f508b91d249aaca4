"""
Shared behaviour for Spotify Web API models.
"""

import dataclasses
from typing import Any, Dict


class SpotifyModel:
    """
    Mixin for the frozen dataclasses returned by the endpoint functions.

    Subclasses declare their API fields as dataclass fields and end with an
    ``_extra_fields`` field that holds whatever else the API sent.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Return the declared fields as a dictionary, nested models included."""
        result = {}
        for f in dataclasses.fields(self):
            if f.name.startswith("_"):
                continue
            result[f.name] = _serialize(getattr(self, f.name))
        return result


def _serialize(value: Any) -> Any:
    if isinstance(value, SpotifyModel):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_serialize(v) for v in value]
    return value
