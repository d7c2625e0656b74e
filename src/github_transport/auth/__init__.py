"""Authentication components for the GitHub API transport.

This module provides:
- `Credential`, the username/secret pair used for HTTP Basic auth
- `CredentialStore`, the lookup protocol keyed by host URL
- `EnvCredentialStore`, a store backed by environment variables and .env
- `CredentialProvider`, the API-host then web-host fallback

Example:
    ```python
    from github_transport.auth import CredentialProvider, EnvCredentialStore

    provider = CredentialProvider(EnvCredentialStore())
    credential = provider.resolve()
    ```
"""

from github_transport.auth.credentials import (
    Credential,
    CredentialResolver,
    CredentialStore,
    EnvCredentialStore,
)
from github_transport.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    CredentialStoreError,
)
from github_transport.auth.provider import CredentialProvider

__all__ = [
    "Credential",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialProvider",
    "CredentialResolver",
    "CredentialStore",
    "CredentialStoreError",
    "EnvCredentialStore",
]
