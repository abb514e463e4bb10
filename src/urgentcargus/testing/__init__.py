"""Testing utilities for code built on the UrgentCargus client.

Responses are served by ``httpx.MockTransport``, so no network access is
needed.

Example:
    ```python
    from urgentcargus.testing import RecordingHandler, create_mock_client

    handler = RecordingHandler()
    handler.queue(200, json="token-123")
    client = create_mock_client(handler)

    assert client.get_token("user", "secret") == "token-123"
    assert handler.requests[0].url.path == "/api/LoginUser"
    ```
"""

import json
from typing import Any

import httpx

from urgentcargus.client import UrgentCargusClient


class RecordingHandler:
    """MockTransport handler that records requests and replays queued responses.

    When the queue is empty every request gets ``200`` with an empty body.
    An exception instance may be queued in place of a response to simulate
    a network failure.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def queue(self, status_code: int = 200, **kwargs: Any) -> "RecordingHandler":
        """Queue a response; kwargs are passed to ``httpx.Response``."""
        self._responses.append(httpx.Response(status_code, **kwargs))
        return self

    def queue_error(self, error: Exception) -> "RecordingHandler":
        """Queue an exception to be raised by the transport."""
        self._responses.append(error)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if not self._responses:
            return httpx.Response(200)

        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decode the body of the most recent request."""
        return json.loads(self.last_request.content)


def create_mock_client(
    handler: RecordingHandler | None = None,
    subscription_key: str = "test-subscription-key",
    **kwargs: Any,
) -> UrgentCargusClient:
    """Create a client whose requests are served by ``handler``."""
    handler = handler or RecordingHandler()
    return UrgentCargusClient(subscription_key, transport=httpx.MockTransport(handler), **kwargs)


__all__ = ["RecordingHandler", "create_mock_client"]
