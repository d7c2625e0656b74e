"""Authenticated GET/POST client for the GitHub REST API."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from github_transport.auth.credentials import CredentialStore
from github_transport.auth.provider import CredentialProvider
from github_transport.codec import JSON_CODEC
from github_transport.config import API_URL, UNKNOWN_REQUEST
from github_transport.errors.exceptions import NetworkError, ResponseDecodeError
from github_transport.errors.handler import raise_for_status
from github_transport.transport.config import RequestConfig, build_request_config

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[Any], T]


class GitHubApiTransport:
    """Synchronous transport for the GitHub REST API.

    Credentials are looked up again on every call. GET requests fall back to
    anonymous access when no credential is available; POST requests require
    one.

    The underlying `httpx.Client` (and its connection pool) is the only state
    shared between calls and is safe to use from several threads.

    Args:
        credential_store: Store consulted for the API and web hosts.
        http_transport: Optional httpx transport, e.g. `httpx.MockTransport`
            in tests. Defaults to httpx's pooled transport.
        base_url: API base URL.

    Example:
        ```python
        with GitHubApiTransport(EnvCredentialStore()) as api:
            pr = api.get("repos/octo/hello/pulls/1", PullRequest.from_json)
        ```
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        *,
        http_transport: httpx.BaseTransport | None = None,
        base_url: str = API_URL,
    ):
        self._credentials = CredentialProvider(credential_store)
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(transport=http_transport, follow_redirects=True)

    def __enter__(self) -> "GitHubApiTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str, decoder: Decoder[T]) -> T:
        """GET ``<base_url>/<path>`` and decode the JSON body with `decoder`.

        Raises:
            GitHubApiError: The API answered with a non-2xx status.
            NetworkError: The request failed below HTTP.
            ResponseDecodeError: The 2xx body could not be decoded.
        """
        config = build_request_config(self._credentials.resolve_optional())
        response = self._send("GET", path, config)
        raise_for_status(response, method="GET", path=path)
        return self._decode(path, response, config, decoder)

    def post(self, path: str, body: Any, decoder: Decoder[T]) -> T:
        """POST `body` as JSON to ``<base_url>/<path>`` and decode the answer.

        Raises:
            CredentialError: No credential for the API or web host. Raised
                before any request is made.
            GitHubApiError: The API answered with a non-2xx status.
            NetworkError: The request failed below HTTP.
            ResponseDecodeError: The 2xx body could not be decoded.
        """
        config = build_request_config(self._credentials.resolve())
        response = self._send("POST", path, config, content=config.codec.encode(body))
        if not response.is_success:
            raise_for_status(response, method="POST", path=path, request_body=self._render_request(body))
        return self._decode(path, response, config, decoder)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    def _send(self, method: str, path: str, config: RequestConfig, content: bytes | None = None) -> httpx.Response:
        headers = dict(config.headers)
        if content is not None:
            headers["Content-Type"] = "application/json"

        url = self._url(path)
        logger.debug(f"{method} {url} ({'authenticated' if config.credential else 'anonymous'})")
        try:
            return self._client.request(
                method,
                url,
                content=content,
                headers=headers,
                auth=config.auth,
                timeout=config.timeout,
            )
        except httpx.RequestError as e:
            raise NetworkError(path, e) from e

    @staticmethod
    def _decode(path: str, response: httpx.Response, config: RequestConfig, decoder: Decoder[T]) -> T:
        try:
            # 204 and similar responses carry no body
            data = config.decode(response.content) if response.content else None
            return decoder(data)
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            raise ResponseDecodeError(path, e, response.content) from e

    @staticmethod
    def _render_request(body: Any) -> str:
        try:
            return JSON_CODEC.to_pretty_string(body)
        except (TypeError, ValueError):
            logger.exception("Error serializing request for error")
            return UNKNOWN_REQUEST
