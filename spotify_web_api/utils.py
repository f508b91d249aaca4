"""
Utility functions for the Spotify Web API package.
"""

import dataclasses
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import urlencode

from .logging import get_logger, log_extra_fields
from .exceptions import SpotifyDataError

logger = get_logger(__name__)

T = TypeVar("T")

VALID_TIME_RANGES = ("short_term", "medium_term", "long_term")


def query_string(params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Serialize optional request parameters into a query string.

    Parameters whose value is None are dropped. Booleans are written the way
    the Web API expects them ("true"/"false").

    Args:
        params: Mapping of parameter names to values, in the order they should appear.

    Returns:
        The query string including its leading "?", or "" when nothing is left to send.
    """
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        pairs.append((key, value))

    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def model_field_names(model_class: Type) -> Tuple[str, ...]:
    """
    Return the public field names a model declares, in declaration order.

    Fields starting with an underscore (such as ``_extra_fields``) are internal
    and never filled from API data.
    """
    if not dataclasses.is_dataclass(model_class):
        raise TypeError(f"{model_class!r} is not a dataclass model")
    return tuple(
        f.name for f in dataclasses.fields(model_class) if not f.name.startswith("_")
    )


def map_api_data_to_model(
    data: Mapping[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split API data into the fields a model declares and everything else.

    Args:
        data: Decoded JSON object from an API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Every declared field, set to the API value or None if absent
            - extra_fields: Keys from the API data the model does not declare
    """
    declared = model_field_names(model_class)
    model_fields = {name: data.get(name) for name in declared}
    extra_fields = {k: v for k, v in data.items() if k not in model_fields}
    return model_fields, extra_fields


def build_model(model_class: Type[T], data: Any) -> T:
    """
    Build a model instance from a decoded JSON object.

    Args:
        model_class: The dataclass model to build.
        data: Decoded JSON object.

    Returns:
        An instance of ``model_class``. Keys the model does not declare are kept
        in its ``_extra_fields`` attribute.

    Raises:
        SpotifyDataError: If ``data`` is not a JSON object.
    """
    if not isinstance(data, Mapping):
        error_msg = (
            f"Cannot build {model_class.__name__} from {type(data).__name__}; "
            "expected a JSON object"
        )
        logger.error(error_msg)
        raise SpotifyDataError(error_msg)

    model_fields, extra_fields = map_api_data_to_model(data, model_class)
    log_extra_fields(logger, model_class.__name__, data.get("id"), extra_fields)
    return model_class(**model_fields, _extra_fields=extra_fields)


def validate_paging_params(
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    max_limit: int = 50,
) -> None:
    """
    Check the common paging parameters before a request is made.

    Raises:
        ValueError: If limit is outside 1..max_limit or offset is negative.
    """
    if limit is not None:
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError("limit must be an integer")
        if limit < 1 or limit > max_limit:
            raise ValueError(f"limit must be between 1 and {max_limit}")
    if offset is not None:
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise ValueError("offset must be an integer")
        if offset < 0:
            raise ValueError("offset can't be a negative number")


def validate_time_range(time_range: Optional[str]) -> None:
    """Raise ValueError unless time_range is None or one the API accepts."""
    if time_range is not None and time_range not in VALID_TIME_RANGES:
        raise ValueError(
            f"time_range must be one of {', '.join(VALID_TIME_RANGES)}, got {time_range!r}"
        )
