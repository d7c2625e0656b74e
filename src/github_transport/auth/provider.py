"""Two-tier credential resolution for the GitHub API.

API and web hosts usually share one account, so a user may have stored the
credential under either domain. `CredentialProvider` first asks the store for
the API host and then for the web host, so a single entry is enough.
"""

import logging

from github_transport.auth.credentials import Credential, CredentialStore
from github_transport.auth.exceptions import CredentialError, CredentialNotFoundError
from github_transport.config import API_URL, WEB_URL

logger = logging.getLogger(__name__)

_MISSING_CREDENTIAL_HELP = (
    "Cannot get credentials for host {primary} or {fallback} from {location}."
    " Make sure either your credential store has the username and password/token"
    " for one of them, or, if you use a credential file, that it contains one of"
    " the two lines:\n"
    "Either:\n"
    "https://USERNAME:TOKEN@{primary_host}\n"
    "or:\n"
    "https://USERNAME:TOKEN@{fallback_host}\n"
    "\n"
    "Note that spaces or other special characters need to be escaped. For example"
    " ' ' should be %20 and '@' should be %40 (for example when using the email"
    " as username)"
)


def _host_of(url: str) -> str:
    return url.split("://", 1)[-1].rstrip("/")


class CredentialProvider:
    """Resolve a credential for the API, falling back to the web host.

    Args:
        store: Backing credential store. It is consulted on every call; no
            result is cached, so changes to the store apply immediately.
        store_location: Description of the store used in error messages.
            Defaults to the store's ``location`` attribute when it has one.
    """

    def __init__(self, store: CredentialStore, store_location: str | None = None):
        self._store = store
        self._store_location = store_location or getattr(store, "location", "the credential store")

    def _lookup(self, host_url: str) -> Credential | CredentialError:
        try:
            return self._store.lookup(host_url)
        except CredentialError as e:
            logger.debug(f"No usable credential for {host_url}: {e}")
            return e

    def resolve(self, primary_host: str = API_URL, fallback_host: str = WEB_URL) -> Credential:
        """Return the credential for `primary_host`, else for `fallback_host`.

        Raises:
            CredentialNotFoundError: If neither host yields a credential. The
                message names both hosts and the accepted credential lines.
        """
        primary = self._lookup(primary_host)
        if isinstance(primary, Credential):
            return primary

        fallback = self._lookup(fallback_host)
        if isinstance(fallback, Credential):
            logger.debug(f"Using {fallback_host} credential for {primary_host}")
            return fallback

        message = _MISSING_CREDENTIAL_HELP.format(
            primary=primary_host,
            fallback=fallback_host,
            location=self._store_location,
            primary_host=_host_of(primary_host),
            fallback_host=_host_of(fallback_host),
        )
        raise CredentialNotFoundError(message, attempted_hosts=(primary_host, fallback_host)) from fallback

    def resolve_optional(self, primary_host: str = API_URL, fallback_host: str = WEB_URL) -> Credential | None:
        """Like `resolve`, but return None instead of raising.

        Only for operations that may run anonymously (reads). Any
        `CredentialError`, including a malformed store, degrades to None.
        """
        try:
            return self.resolve(primary_host, fallback_host)
        except CredentialError:
            logger.debug(f"No credential for {primary_host} or {fallback_host}; continuing anonymously")
            return None
