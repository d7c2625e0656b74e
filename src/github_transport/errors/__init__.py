"""Error handling for the GitHub API transport."""

from github_transport.errors.exceptions import (
    GitHubApiError,
    NetworkError,
    ResponseCode,
    ResponseDecodeError,
    TransportError,
)
from github_transport.errors.handler import raise_for_status, translate_error
from github_transport.errors.models import ClientError, FieldError

__all__ = [
    "ClientError",
    "FieldError",
    "GitHubApiError",
    "NetworkError",
    "ResponseCode",
    "ResponseDecodeError",
    "TransportError",
    "raise_for_status",
    "translate_error",
]
