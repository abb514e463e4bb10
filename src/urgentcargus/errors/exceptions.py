"""Structured exceptions for UrgentCargus API errors."""

from typing import TYPE_CHECKING

from urgentcargus.errors.handler import GENERIC_ERROR_MESSAGE, extract_error_message

if TYPE_CHECKING:
    import httpx


class UrgentCargusError(Exception):
    """Base exception for everything raised by this package."""

    pass


class ConfigurationError(UrgentCargusError):
    """Invalid client configuration, e.g. an empty subscription key."""

    pass


class InvalidTokenError(UrgentCargusError):
    """Login succeeded at the transport level but returned no usable token."""

    pass


class RequestError(UrgentCargusError):
    """Normalized transport or service failure.

    Attributes:
        code: HTTP status code of the failed response, 0 when unknown.
        response: The failed response, if the server answered at all.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response

    @classmethod
    def from_exception(cls, exc: "httpx.HTTPError") -> "RequestError":
        """Build a normalized error from an httpx failure.

        Network errors carry no response; status errors do. When the response
        body is empty the message wraps the httpx error and the code is 0.
        Otherwise the body is searched for a service-provided message and the
        code is the response status.

        Args:
            exc: The httpx exception raised while sending the request.

        Returns:
            RequestError with message and code filled in (not raised).
        """
        response = getattr(exc, "response", None)
        default = str(exc)

        contents = response.text if response is not None else ""
        if contents == "":
            return cls(GENERIC_ERROR_MESSAGE.format(default), response=response)

        message = extract_error_message(contents, default)
        return cls(message, code=response.status_code, response=response)


class ResponseDecodeError(RequestError):
    """A successful response carried a body that is not valid JSON."""

    pass
