import logging
import json
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "spotify_web_api"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger below the ``spotify_web_api`` namespace.

    Modules pass ``__name__``, which already lives in the namespace. Any other
    name is nested under it, so ``get_logger("player")`` and
    ``get_logger("spotify_web_api.player")`` are the same logger. The library
    installs no handlers; configure ``logging.getLogger("spotify_web_api")``
    in the application to see its output.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _truncate(value: Any, max_length: int) -> Any:
    if isinstance(value, (dict, list)):
        try:
            value_str = json.dumps(value)
        except (TypeError, ValueError):
            return f"<complex structure: {type(value).__name__}>"
        if len(value_str) > max_length:
            value_str = value_str[:max_length] + "... [truncated]"
        return value_str
    if isinstance(value, str) and len(value) > max_length:
        return value[:max_length] + "... [truncated]"
    return value


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: Optional[str],
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log response keys that a model does not declare.

    Args:
        logger: Logger to use
        obj_name: Name of the model (e.g., 'Track', 'Device').
        obj_id: Identifier of the decoded object, usually its Spotify ID.
        extra_fields: Dictionary of undeclared keys and their values.
        max_length: Maximum length for field values in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if not extra_fields:
        logger.debug(f"No extra fields for {obj_name} {obj_id}")
        return

    truncated_fields = {
        key: _truncate(value, max_length) for key, value in extra_fields.items()
    }
    logger.debug(
        f"Extra fields for {obj_name} {obj_id}: {json.dumps(truncated_fields, indent=2)}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Any,
    status_code: int,
    max_length: Optional[int] = 500,
):
    """
    Write a decoded response body to the debug log.

    Args:
        logger: Logger to write to.
        url: URL the body came from.
        response_data: Any JSON value: an object for most endpoints, but
            arrays, strings, numbers and null are logged the same way.
        status_code: HTTP status code of the response.
        max_length: Cut the serialized body after this many characters.
            None logs it in full.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    try:
        body = json.dumps(response_data)
    except (TypeError, ValueError) as e:
        logger.debug(f"{status_code} from {url}, body not serializable: {e}")
        return

    if max_length is not None and len(body) > max_length:
        body = body[:max_length] + "... [truncated]"
    logger.debug(f"{status_code} from {url}: {body}")
