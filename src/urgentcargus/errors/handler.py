"""Error message extraction for failed UrgentCargus responses."""

import json
from typing import Any

GENERIC_ERROR_MESSAGE = "Something went wrong: {}"

# Keys checked in order on a decoded error body.
MESSAGE_KEYS = ("message", "Error")


def decode_error_body(contents: str) -> Any:
    """Decode an error body, returning None when it is not JSON.

    Args:
        contents: Raw response text

    Returns:
        Decoded JSON value, or None if decoding fails
    """
    try:
        return json.loads(contents)
    except ValueError:
        return None


def extract_error_message(contents: str, default: str) -> str:
    """Pick the most useful error message out of a response body.

    The service reports errors in a few shapes: ``{"message": ...}``,
    ``{"Error": ...}`` or a bare JSON string. Anything else, including a body
    that is not JSON at all, falls back to ``default``.

    Args:
        contents: Raw response text (non-empty)
        default: Message to use when the body has nothing better

    Returns:
        Error message
    """
    data = decode_error_body(contents)

    if isinstance(data, dict):
        for key in MESSAGE_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value != "":
                return value
    elif isinstance(data, str) and data != "":
        return data

    return default
