"""Exceptions for credential resolution.

Credential errors are configuration errors: a client cannot be built without
a subscription key, so failing to resolve one is reported the same way as
passing an empty one.

Example:
    ```python
    from urgentcargus.auth.exceptions import CredentialNotFoundError

    if not subscription_key:
        raise CredentialNotFoundError(
            "Subscription key not found", env_var_name="URGENTCARGUS_SUBSCRIPTION_KEY"
        )
    ```
"""

from urgentcargus.errors.exceptions import ConfigurationError


class CredentialError(ConfigurationError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
