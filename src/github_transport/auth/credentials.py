"""Credentials and credential stores for the GitHub API.

A credential store answers one question: "which username/token pair is stored
for this host URL?". The transport never cares how the answer is produced; it
only sees the `CredentialStore` protocol.

The bundled `EnvCredentialStore` reads credentials from environment variables,
optionally seeded from a .env file (python-dotenv):

| Host URL                 | Username variable     | Token variable     |
|--------------------------|-----------------------|--------------------|
| https://api.github.com   | GITHUB_API_USERNAME   | GITHUB_API_TOKEN   |
| https://github.com       | GITHUB_USERNAME       | GITHUB_TOKEN       |

Any token variable may instead be given as a file path through
``<TOKEN VARIABLE>_FILE`` (for example ``GITHUB_TOKEN_FILE=~/.secrets/gh``).

Example:
    ```python
    from github_transport.auth import EnvCredentialStore

    store = EnvCredentialStore()
    credential = store.lookup("https://github.com")
    ```

Security Considerations:
    - Secrets are never logged (masked with ***)
    - The `Credential` repr omits the secret
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Protocol

from dotenv import load_dotenv

from github_transport.auth.exceptions import CredentialNotFoundError, CredentialStoreError
from github_transport.config import API_URL, WEB_URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """A username and secret (password or token) for HTTP Basic auth."""

    username: str
    secret: str = field(repr=False)


class CredentialStore(Protocol):
    """Looks up the stored credential for a host URL.

    Implementations raise `CredentialError` (usually `CredentialNotFoundError`)
    when no usable entry exists.
    """

    def lookup(self, host_url: str) -> Credential: ...


class CredentialResolver:
    """Resolve single configuration values from the environment.

    Values come from environment variables, including those loaded from a
    .env file, or from files named by such variables.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except Exception as e:
                # Continue without .env
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        env_var_name: str,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Return the value of `env_var_name`, or None when it is unset or empty."""
        result = os.environ.get(env_var_name) or None

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved value from environment variable '{env_var_name}': {shown}")

        return result

    def resolve_from_file(self, *, env_var_name: str) -> str | None:
        """Read a value from the file whose path is held in `env_var_name`.

        The path supports ``~`` and ``$VAR`` expansion. File contents are
        stripped of surrounding whitespace.

        Returns:
            File contents, or None if the variable is unset.

        Raises:
            CredentialStoreError: If the variable is set but the file
                cannot be read.
        """
        path_from_env = self.resolve(env_var_name=env_var_name, mask_in_logs=False)
        if not path_from_env:
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_from_env)))
        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            raise CredentialStoreError(
                f"Credential file not found: {path_obj} (from env var '{env_var_name}')"
            ) from None
        except PermissionError:
            raise CredentialStoreError(f"Permission denied reading credential file: {path_obj}") from None
        except OSError as e:
            raise CredentialStoreError(f"Error reading credential file {path_obj}: {e}") from e

        logger.debug(f"Resolved value from file: {path_obj} (***)")
        return content


DEFAULT_HOST_VARIABLES: Mapping[str, tuple[str, str]] = {
    API_URL: ("GITHUB_API_USERNAME", "GITHUB_API_TOKEN"),
    WEB_URL: ("GITHUB_USERNAME", "GITHUB_TOKEN"),
}


class EnvCredentialStore:
    """Credential store backed by environment variables and an optional .env file.

    Args:
        host_variables: Maps a host URL to its (username variable, token
            variable) pair. Defaults to `DEFAULT_HOST_VARIABLES`.
        resolver: Resolver used to read the variables. A new one (which
            loads .env) is created when omitted.

    Example:
        ```python
        store = EnvCredentialStore(resolver=CredentialResolver(load_dotenv=False))
        store.lookup("https://api.github.com")
        ```
    """

    def __init__(
        self,
        host_variables: Mapping[str, tuple[str, str]] | None = None,
        resolver: CredentialResolver | None = None,
    ):
        self._host_variables = dict(host_variables or DEFAULT_HOST_VARIABLES)
        self._resolver = resolver or CredentialResolver()

    @property
    def location(self) -> str:
        """Human-readable description of where credentials are read from."""
        names = [name for pair in self._host_variables.values() for name in pair]
        return "environment variables " + ", ".join(names)

    def lookup(self, host_url: str) -> Credential:
        variables = self._host_variables.get(host_url.rstrip("/"))
        if variables is None:
            raise CredentialNotFoundError(f"No credential variables configured for {host_url}", host_url=host_url)

        username_var, token_var = variables
        username = self._resolver.resolve(env_var_name=username_var, mask_in_logs=False)
        token = self._resolver.resolve(env_var_name=token_var)
        if token is None:
            token = self._resolver.resolve_from_file(env_var_name=f"{token_var}_FILE")

        if username is None and token is None:
            raise CredentialNotFoundError(
                f"No credential for {host_url} (checked {username_var}, {token_var})",
                host_url=host_url,
            )
        if username is None or token is None:
            missing = username_var if username is None else token_var
            raise CredentialStoreError(f"Incomplete credential for {host_url}: {missing} is not set")

        logger.debug(f"Found credential for {host_url} in {username_var}/{token_var}")
        return Credential(username=username, secret=token)
