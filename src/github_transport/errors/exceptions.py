"""Structured exceptions for GitHub API exchanges."""

from enum import Enum

from github_transport.errors.models import ClientError


class ResponseCode(Enum):
    """Coarse classification of a failed response's status code."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    SERVER_ERROR = 500
    UNKNOWN = 0

    @classmethod
    def from_status(cls, status_code: int) -> "ResponseCode":
        try:
            return cls(status_code)
        except ValueError:
            if 500 <= status_code < 600:
                return cls.SERVER_ERROR
            return cls.UNKNOWN


class TransportError(Exception):
    """Base exception for failures while talking to the GitHub API."""

    pass


class GitHubApiError(TransportError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        client_error: Parsed error body; empty when the body was not valid.
        method: HTTP method of the failed request.
        path: API path, relative to the API base URL.
        request_body: Pretty-printed request body (POST only).
        raw_body: Response body exactly as received.
    """

    def __init__(
        self,
        status_code: int,
        client_error: ClientError | None,
        method: str,
        path: str,
        request_body: str | None,
        raw_body: bytes,
    ):
        self.status_code = status_code
        self.client_error = client_error if client_error is not None else ClientError()
        self.method = method
        self.path = path
        self.request_body = request_body
        self.raw_body = raw_body
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"{self.method} {self.path} failed with HTTP {self.status_code}: "
        message += self.client_error.to_exception_message()
        if self.request_body is not None:
            message += f"\nRequest:\n{self.request_body}"
        return message

    @property
    def response_code(self) -> ResponseCode:
        return ResponseCode.from_status(self.status_code)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class NetworkError(TransportError):
    """The exchange failed below HTTP (timeout, DNS, connection reset, redirect loop)."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Error running GitHub API operation {path}: {cause}")
        self.path = path
        self.cause = cause


class ResponseDecodeError(TransportError):
    """A 2xx response body could not be turned into the requested type."""

    def __init__(self, path: str, cause: BaseException, raw_body: bytes):
        super().__init__(f"Cannot decode response of GitHub API operation {path}: {cause}")
        self.path = path
        self.cause = cause
        self.raw_body = raw_body
