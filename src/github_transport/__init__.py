"""GitHub API transport - authenticated JSON GET/POST for the GitHub REST API.

This library provides:
- Credential lookup with API-host then web-host fallback
- Anonymous reads when no credential is stored
- Structured errors that keep the status code, parsed error body,
  method, path and raw response

Example:
    ```python
    from github_transport import EnvCredentialStore, GitHubApiError, GitHubApiTransport

    with GitHubApiTransport(EnvCredentialStore()) as api:
        try:
            repo = api.get("repos/octocat/hello-world", dict)
        except GitHubApiError as e:
            print(e.status_code, e.client_error.message)
    ```
"""

from github_transport.auth import (
    Credential,
    CredentialError,
    CredentialNotFoundError,
    CredentialProvider,
    CredentialStore,
    EnvCredentialStore,
)
from github_transport.client import GitHubApiTransport
from github_transport.errors import ClientError, GitHubApiError, NetworkError, ResponseDecodeError, TransportError

__version__ = "0.1.0"

__all__ = [
    "ClientError",
    "Credential",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialProvider",
    "CredentialStore",
    "EnvCredentialStore",
    "GitHubApiError",
    "GitHubApiTransport",
    "NetworkError",
    "ResponseDecodeError",
    "TransportError",
    "__version__",
]
