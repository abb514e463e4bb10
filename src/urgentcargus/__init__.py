"""UrgentCargus - Python client for the UrgentCargus courier API.

The client adds the subscription key to every request, caches a bearer token
obtained from ``LoginUser`` and turns transport and service failures into
``RequestError``.

Example:
    ```python
    from urgentcargus import RequestError, UrgentCargusClient

    client = UrgentCargusClient.from_env()
    client.get_token("user", "secret")

    try:
        awbs = client.get("Awbs", {"barCode": "1234567890"})
    except RequestError as e:
        print(f"{e.code}: {e}")
    ```
"""

from urgentcargus.client import API_URI, VERSION, UrgentCargusClient
from urgentcargus.errors import (
    ConfigurationError,
    InvalidTokenError,
    RequestError,
    ResponseDecodeError,
    UrgentCargusError,
)

__version__ = VERSION

__all__ = [
    "API_URI",
    "ConfigurationError",
    "InvalidTokenError",
    "RequestError",
    "ResponseDecodeError",
    "UrgentCargusClient",
    "UrgentCargusError",
    "__version__",
]
