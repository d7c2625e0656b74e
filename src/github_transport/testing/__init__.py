"""Testing utilities for code built on the GitHub API transport.

Example:
    ```python
    import httpx

    from github_transport import GitHubApiTransport
    from github_transport.testing import RecordingHandler, StaticCredentialStore


    def test_reads_pull_request():
        handler = RecordingHandler(httpx.Response(200, json={"number": 1}))
        api = GitHubApiTransport(StaticCredentialStore(), http_transport=httpx.MockTransport(handler))
        assert api.get("repos/o/r/pulls/1", dict) == {"number": 1}
        assert handler.requests[0].method == "GET"
    ```
"""

from collections.abc import Mapping

import httpx

from github_transport.auth.credentials import Credential
from github_transport.auth.exceptions import CredentialNotFoundError


class StaticCredentialStore:
    """In-memory credential store keyed by host URL.

    Records every lookup in `lookups` so tests can assert on fallback order.
    """

    location = "the test credential store"

    def __init__(self, credentials: Mapping[str, Credential] | None = None):
        self._credentials = dict(credentials or {})
        self.lookups: list[str] = []

    def lookup(self, host_url: str) -> Credential:
        self.lookups.append(host_url)
        try:
            return self._credentials[host_url]
        except KeyError:
            raise CredentialNotFoundError(f"No credential for {host_url}", host_url=host_url) from None


class RecordingHandler:
    """`httpx.MockTransport` handler that replays responses and records requests.

    Responses are returned in order; the last one is repeated once the list
    is exhausted. An exception instance is raised instead of returned.
    """

    def __init__(self, *responses: httpx.Response | Exception):
        if not responses:
            raise ValueError("RecordingHandler needs at least one response")
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        outcome = self._responses[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


__all__ = ["RecordingHandler", "StaticCredentialStore"]
