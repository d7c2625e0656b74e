"""Per-request configuration for GitHub API calls."""

from dataclasses import dataclass, field
from typing import Any

import httpx

from github_transport.auth.credentials import Credential
from github_transport.codec import JSON_CODEC, JsonCodec
from github_transport.config import ACCEPT_HEADER, CONNECT_TIMEOUT, READ_TIMEOUT, USER_AGENT


@dataclass(frozen=True)
class RequestConfig:
    """Settings for a single request. Built per call and never shared."""

    timeout: httpx.Timeout
    credential: Credential | None
    headers: dict[str, str] = field(default_factory=dict)
    codec: JsonCodec = JSON_CODEC

    @property
    def auth(self) -> httpx.BasicAuth | None:
        if self.credential is None:
            return None
        return httpx.BasicAuth(self.credential.username, self.credential.secret)

    def decode(self, body: bytes) -> Any:
        return self.codec.decode(body)


def build_request_config(credential: Credential | None) -> RequestConfig:
    """Build the configuration for one request.

    Timeouts are fixed at one minute for both connect and read. A credential
    turns on HTTP Basic auth; without one the request is anonymous.
    """
    return RequestConfig(
        timeout=httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT, read=READ_TIMEOUT),
        credential=credential,
        headers={"Accept": ACCEPT_HEADER, "User-Agent": USER_AGENT},
    )
