"""Credential and settings resolution for the UrgentCargus client.

Values are looked up in priority order:
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv loads it into the environment)
4. Default value

The subscription key may also live in a file whose path is given by
``URGENTCARGUS_SUBSCRIPTION_KEY_FILE``, which suits mounted secrets.

Example:
    ```python
    from urgentcargus.auth import CredentialResolver

    resolver = CredentialResolver()
    key = resolver.resolve_subscription_key()
    base_uri = resolver.resolve(env_var_name=API_URI_ENV)
    ```

Credentials are never logged in full, only the source they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from urgentcargus.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_ENV = "URGENTCARGUS_SUBSCRIPTION_KEY"
SUBSCRIPTION_KEY_FILE_ENV = "URGENTCARGUS_SUBSCRIPTION_KEY_FILE"
API_URI_ENV = "URGENTCARGUS_API_URI"
ACCESS_TOKEN_ENV = "URGENTCARGUS_ACCESS_TOKEN"


class CredentialResolver:
    """Resolve client settings from explicit values, the environment and .env.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading entirely (useful in
            tests).
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            # Existing environment variables win over .env entries.
            load_dotenv(dotenv_path=self._dotenv_path, override=False)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for UrgentCargus settings")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to consult.
            default: Fallback when nothing else is set.
            required: Raise CredentialNotFoundError instead of returning None.
            secret: Mask the value in debug logs.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and no source has a value.
        """
        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        else:
            result, source = default, "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved setting from {source}: {shown}")
        elif required:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may be given directly or through ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. Surrounding whitespace is stripped from the
        file contents.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = str(file_path) if file_path is not None else None
        if path_to_use is None and env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            error_msg = f"Cannot read credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_subscription_key(self, value: str | None = None) -> str:
        """Resolve the API subscription key.

        Looks at ``value``, then ``URGENTCARGUS_SUBSCRIPTION_KEY``, then the
        file named by ``URGENTCARGUS_SUBSCRIPTION_KEY_FILE``.

        Raises:
            CredentialNotFoundError: If no source provides a non-empty key.
        """
        key = self.resolve(value=value, env_var_name=SUBSCRIPTION_KEY_ENV)
        if not key:
            key = self.resolve_from_file(env_var_name=SUBSCRIPTION_KEY_FILE_ENV)
        if not key:
            raise CredentialNotFoundError(
                f"UrgentCargus subscription key not found (checked env vars: "
                f"{SUBSCRIPTION_KEY_ENV}, {SUBSCRIPTION_KEY_FILE_ENV})",
                env_var_name=SUBSCRIPTION_KEY_ENV,
            )
        return key
