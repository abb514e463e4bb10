"""UrgentCargus API client.

Example:
    ```python
    from urgentcargus import UrgentCargusClient

    with UrgentCargusClient("my-subscription-key") as client:
        client.get_token("user", "secret")
        counties = client.get("Counties", {"countryId": 1})
    ```
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from urgentcargus.auth.credentials import ACCESS_TOKEN_ENV, API_URI_ENV, CredentialResolver
from urgentcargus.errors.exceptions import (
    ConfigurationError,
    InvalidTokenError,
    RequestError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)

VERSION = "0.9.11"

API_URI = "https://urgentcargus.azure-api.net/api/"

DEFAULT_TIMEOUT = 60.0

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


def _log_deprecation(message: str) -> None:
    logger.warning(message)


class UrgentCargusClient:
    """Authenticated gateway to the UrgentCargus REST API.

    Every request carries the subscription key. Requests also carry a bearer
    token once one is cached, either set with ``set_access_token`` or obtained
    through ``get_token``/``create_access_token``. The token never expires on
    the client side; callers replace or clear it explicitly.

    The client is synchronous. The token cache is a plain attribute without
    locking, so concurrent ``get_token`` calls on one instance may log in
    more than once.

    Args:
        subscription_key: API subscription key, must not be empty.
        base_uri: API root. ``None`` or ``""`` selects ``API_URI``.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        on_deprecation: Called with a message when a deprecated calling
            convention is used. Defaults to logging a warning. Exceptions
            raised by the observer are logged and the request goes on.

    Requests time out after a fixed ``DEFAULT_TIMEOUT`` of 60 seconds.

    Raises:
        ConfigurationError: If the subscription key is empty.
    """

    def __init__(
        self,
        subscription_key: str,
        base_uri: str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        on_deprecation: Callable[[str], None] | None = None,
    ) -> None:
        if not subscription_key:
            raise ConfigurationError("The UrgentCargus API needs a subscription key.")

        self._subscription_key = subscription_key
        self._access_token: str | None = None
        self._on_deprecation = on_deprecation or _log_deprecation
        self.base_uri = base_uri or API_URI

        self._http = httpx.Client(
            base_url=self.base_uri,
            timeout=DEFAULT_TIMEOUT,
            follow_redirects=False,
            transport=transport,
            headers={
                "User-Agent": f"UrgentCargusAPI-Python (v{VERSION})",
                "Content-Type": "application/json",
                "Accept-Charset": "utf-8",
            },
        )

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        **kwargs: Any,
    ) -> "UrgentCargusClient":
        """Build a client from environment variables and .env.

        Reads the subscription key (or key file), ``URGENTCARGUS_API_URI`` and
        an optional ``URGENTCARGUS_ACCESS_TOKEN`` that pre-seeds the token
        cache. Extra keyword arguments go to the constructor.

        Raises:
            CredentialNotFoundError: If no subscription key is configured.
        """
        resolver = resolver or CredentialResolver()

        client = cls(
            resolver.resolve_subscription_key(),
            resolver.resolve(env_var_name=API_URI_ENV, secret=False),
            **kwargs,
        )
        access_token = resolver.resolve(env_var_name=ACCESS_TOKEN_ENV)
        if access_token:
            client.set_access_token(access_token)
        return client

    @property
    def subscription_key(self) -> str:
        """The subscription key sent with every request."""
        return self._subscription_key

    @property
    def access_token(self) -> str | None:
        """The cached bearer token, or None."""
        return self._access_token

    def __enter__(self) -> "UrgentCargusClient":
        """Return the client itself."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the client on leaving the block."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._http.close()

    def _notify_deprecation(self, message: str) -> None:
        try:
            self._on_deprecation(message)
        except Exception as e:
            logger.warning(f"Deprecation observer failed: {e!r}")

    def _build_headers(self, token: str | None) -> dict[str, str]:
        headers = {SUBSCRIPTION_KEY_HEADER: self._subscription_key}

        if token:
            self._notify_deprecation(
                'Calling "UrgentCargusClient.request()" with the token argument is '
                "deprecated since 0.9.3, use set_access_token() instead."
            )
            headers["Authorization"] = f"Bearer {token}"
        elif self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        token: str | None = None,
    ) -> Any:
        """Send a request to the API and return the decoded response.

        Args:
            method: HTTP method (GET, POST, PUT or DELETE).
            endpoint: Path relative to the base URI, e.g. ``"Awbs"``.
            payload: JSON-serializable body. Sent for every method, GET
                included; ``None`` is sent as an empty list.
            token: Deprecated. Bearer token for this call only.

        Returns:
            The JSON-decoded body, or None if the body is empty.

        Raises:
            RequestError: On network failure, timeout or a non-2xx status.
            ResponseDecodeError: If a successful response is not valid JSON.
        """
        headers = self._build_headers(token)
        body = payload if payload is not None else []

        logger.debug(f"{method} {endpoint} (authorized: {'Authorization' in headers})")

        try:
            response = self._http.request(method, endpoint, headers=headers, json=body)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = RequestError.from_exception(exc)
            logger.debug(f"{method} {endpoint} failed with code {error.code}: {error}")
            raise error from exc

        logger.debug(f"{method} {endpoint} returned {response.status_code}")

        if response.text == "":
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(
                f"Invalid JSON in response to {method} {endpoint}: {exc}",
                code=response.status_code,
                response=response,
            ) from exc

    execute = request

    def get(self, endpoint: str, payload: Any = None, token: str | None = None) -> Any:
        """Shorthand for a GET request."""
        return self.request("GET", endpoint, payload, token)

    def post(self, endpoint: str, payload: Any = None, token: str | None = None) -> Any:
        """Shorthand for a POST request."""
        return self.request("POST", endpoint, payload, token)

    def put(self, endpoint: str, payload: Any = None, token: str | None = None) -> Any:
        """Shorthand for a PUT request."""
        return self.request("PUT", endpoint, payload, token)

    def delete(self, endpoint: str, payload: Any = None, token: str | None = None) -> Any:
        """Shorthand for a DELETE request."""
        return self.request("DELETE", endpoint, payload, token)

    def get_token(self, username: str, password: str) -> str:
        """Return the cached token, logging in first if there is none."""
        if self._access_token is None:
            self.create_access_token(username, password)

        return self._access_token

    def set_access_token(self, access_token: str | None) -> None:
        """Replace the cached token. ``None`` clears it."""
        self._access_token = access_token
        logger.debug("Access token set" if access_token is not None else "Access token cleared")

    def create_access_token(self, username: str, password: str) -> None:
        """Log in and cache the returned token.

        Raises:
            InvalidTokenError: If the service answers without a non-empty
                string token. The cached token is left unchanged.
            RequestError: If the login call itself fails.
        """
        access_token = self.post("LoginUser", {"UserName": username, "Password": password})

        if not isinstance(access_token, str) or access_token == "":
            raise InvalidTokenError("UrgentCargus API did not return a valid token.")

        self.set_access_token(access_token)
