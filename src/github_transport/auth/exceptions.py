"""Custom exceptions for credential resolution and authentication.

This module defines exceptions raised by credential stores and by the
`CredentialProvider` fallback logic.

Example:
    ```python
    from github_transport.auth.exceptions import CredentialNotFoundError

    if username is None:
        raise CredentialNotFoundError("No credential stored", host_url="https://github.com")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when no credential can be resolved for a host.

    Attributes:
        host_url: The host URL that was looked up (if any).
        attempted_hosts: Every host URL tried before giving up. For a
            single-store lookup this is just ``(host_url,)``.

    Example:
        ```python
        try:
            credential = provider.resolve()
        except CredentialNotFoundError as e:
            print(f"Tried: {', '.join(e.attempted_hosts)}")
        ```
    """

    def __init__(
        self,
        message: str,
        host_url: str | None = None,
        attempted_hosts: tuple[str, ...] | None = None,
    ):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing what credential is missing.
            host_url: Optional host URL the lookup was made for.
            attempted_hosts: Optional list of every host URL tried.
        """
        super().__init__(message)
        self.host_url = host_url
        if attempted_hosts is None:
            attempted_hosts = (host_url,) if host_url else ()
        self.attempted_hosts = attempted_hosts


class CredentialStoreError(CredentialError):
    """Raised when the credential store has an entry but it cannot be used.

    Typical causes are a username without a token, or a token file that
    exists but cannot be read.
    """

    pass
