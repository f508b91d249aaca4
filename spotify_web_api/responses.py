"""
Turning HTTP responses into models.

Every endpoint function hands its ``requests.Response`` to :func:`build_response`
together with a builder for the success body. Client errors (4xx) are returned
untouched with the ``"error"`` tag; successful bodies are decoded and built into
models; anything else raises :class:`~spotify_web_api.exceptions.SpotifyAPIError`.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, Type

import requests

from .models import Artist, Item, Paging, Track
from .utils import build_model, map_api_data_to_model
from .logging import get_logger, log_api_response, log_extra_fields
from .exceptions import SpotifyAPIError, SpotifyDataError, SpotifyUnknownItemTypeError

logger = get_logger(__name__)

OK = "ok"
ERROR = "error"

DEFAULT_ITEM_TYPES: Mapping[str, Type] = {
    "artist": Artist,
    "track": Track,
}


@dataclass(frozen=True)
class ApiResponse:
    """
    Outcome of one API call: a status tag paired with a value.

    On success ``status`` is ``"ok"`` and ``value`` is the built model (or None
    for bodiless responses such as 204 No Content). On a client error ``status``
    is ``"error"`` and ``value`` is the raw response body as bytes
    (``response.content``), exactly as received: no charset or JSON decoding.

    The object unpacks like a pair::

        status, page = personalization.top_artists(client, limit=5)
    """
    status: str
    value: Any
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    def __iter__(self) -> Iterator[Any]:
        return iter((self.status, self.value))

    def raise_for_error(self) -> Any:
        """
        Return the value on success, raise SpotifyAPIError on a client error.

        Raises:
            SpotifyAPIError: If this response carries the error tag.
        """
        if self.ok:
            return self.value
        raise SpotifyAPIError(
            f"Spotify API returned status {self.status_code}: {self.value}",
            status_code=self.status_code,
            body=self.value,
        )


def build_item(
    data: Any, item_types: Mapping[str, Type] = DEFAULT_ITEM_TYPES
) -> Item:
    """
    Build one paged item, choosing the model by its ``"type"`` field.

    Args:
        data: Decoded JSON object for the item.
        item_types: Mapping of discriminator values to model classes.

    Returns:
        An instance of the model registered for the item's type.

    Raises:
        SpotifyUnknownItemTypeError: If the type is missing or not registered.
        SpotifyDataError: If the item is not a JSON object.
    """
    if not isinstance(data, Mapping):
        raise SpotifyDataError(
            f"Expected a JSON object for a paged item, got {type(data).__name__}")

    item_type = data.get("type")
    model_class = item_types.get(item_type) if isinstance(item_type, str) else None
    if model_class is None:
        logger.error(
            f"No model registered for item type {item_type!r} "
            f"(known: {', '.join(sorted(item_types))})")
        raise SpotifyUnknownItemTypeError(item_type)
    return build_model(model_class, data)


def build_paging(
    body: Any, item_types: Mapping[str, Type] = DEFAULT_ITEM_TYPES
) -> Paging:
    """
    Build a Paging model, decoding each entry of ``items`` by its type.

    Raises:
        SpotifyDataError: If the body or its ``items`` value has the wrong shape.
        SpotifyUnknownItemTypeError: If an item has an unknown type.
    """
    if not isinstance(body, Mapping):
        raise SpotifyDataError(
            f"Expected a JSON object for a paging response, got {type(body).__name__}")

    raw_items = body.get("items")
    if raw_items is None:
        raw_items = []
    elif not isinstance(raw_items, list):
        raise SpotifyDataError(
            f"Expected 'items' to be a list, got {type(raw_items).__name__}")

    items = tuple(build_item(item, item_types) for item in raw_items)
    model_fields, extra_fields = map_api_data_to_model(body, Paging)
    model_fields["items"] = items
    log_extra_fields(logger, "Paging", body.get("href"), extra_fields)
    return Paging(**model_fields, _extra_fields=extra_fields)


def decode_json(response: requests.Response, url: str) -> Any:
    """
    Decode a response body as JSON.

    Raises:
        SpotifyDataError: If the body is not valid JSON.
    """
    try:
        data = response.json()
    except ValueError as e:
        error_msg = f"Failed to parse API response from {url}: {e}"
        logger.error(error_msg)
        raise SpotifyDataError(error_msg) from e
    log_api_response(logger, url, data, response.status_code)
    return data


def build_response(
    response: requests.Response,
    builder: Optional[Callable[[Any], Any]] = None,
) -> ApiResponse:
    """
    Match on the status code of a response and build the result.

    Args:
        response: The response returned by the HTTP client.
        builder: Called with the decoded JSON body of a successful response.
                 When None, the decoded body is returned as is.

    Returns:
        ApiResponse: ``("error", raw body bytes)`` for status 400-499,
        ``("ok", None)`` for a successful response without a body and
        ``("ok", builder(body))`` otherwise.

    Raises:
        SpotifyAPIError: For status codes outside 2xx and 4xx.
        SpotifyDataError: If a successful body cannot be decoded or built.
    """
    code = response.status_code
    url = response.url

    if 400 <= code <= 499:
        logger.warning(f"Client error {code} from {url}")
        return ApiResponse(ERROR, response.content, code)

    if not 200 <= code <= 299:
        error_msg = f"Spotify API request to {url} failed with status {code}"
        logger.error(error_msg)
        raise SpotifyAPIError(error_msg, status_code=code, body=response.content)

    if code == 204 or not response.content:
        logger.debug(f"No content in response from {url} (Status: {code})")
        return ApiResponse(OK, None, code)

    body = decode_json(response, url)
    value = builder(body) if builder is not None else body
    return ApiResponse(OK, value, code)

