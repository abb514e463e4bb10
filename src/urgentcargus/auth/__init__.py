"""Credential resolution for the UrgentCargus client.

Example:
    ```python
    from urgentcargus.auth import CredentialResolver

    resolver = CredentialResolver()
    subscription_key = resolver.resolve_subscription_key()
    ```
"""

from urgentcargus.auth.credentials import (
    ACCESS_TOKEN_ENV,
    API_URI_ENV,
    SUBSCRIPTION_KEY_ENV,
    SUBSCRIPTION_KEY_FILE_ENV,
    CredentialResolver,
)
from urgentcargus.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "ACCESS_TOKEN_ENV",
    "API_URI_ENV",
    "SUBSCRIPTION_KEY_ENV",
    "SUBSCRIPTION_KEY_FILE_ENV",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
