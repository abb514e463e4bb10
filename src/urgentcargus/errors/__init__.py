"""Error taxonomy and error normalization for the UrgentCargus client."""

from urgentcargus.errors.exceptions import (
    ConfigurationError,
    InvalidTokenError,
    RequestError,
    ResponseDecodeError,
    UrgentCargusError,
)
from urgentcargus.errors.handler import GENERIC_ERROR_MESSAGE, extract_error_message

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "ConfigurationError",
    "InvalidTokenError",
    "RequestError",
    "ResponseDecodeError",
    "UrgentCargusError",
    "extract_error_message",
]
