"""Translation of failed HTTP exchanges into `GitHubApiError`."""

import logging

import httpx

from github_transport.codec import JSON_CODEC
from github_transport.errors.exceptions import GitHubApiError
from github_transport.errors.models import ClientError

logger = logging.getLogger(__name__)


def translate_error(raw_body: bytes) -> ClientError:
    """Parse an error body, returning an empty `ClientError` if it is not valid.

    A malformed body must never hide the status code and request context of
    the failure, so parse problems are logged and swallowed here.
    """
    try:
        return ClientError.from_json(JSON_CODEC.decode(raw_body))
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Invalid error response: {e}", exc_info=True)
        return ClientError()


def raise_for_status(
    response: httpx.Response,
    *,
    method: str,
    path: str,
    request_body: str | None = None,
) -> None:
    """Raise `GitHubApiError` for a non-2xx response.

    Args:
        response: Response whose body has been read.
        method: HTTP method used for the request.
        path: API path relative to the base URL.
        request_body: Rendered request body to attach for diagnostics.

    Raises:
        GitHubApiError: If the response status is not 2xx.
    """
    if response.is_success:
        return

    raw_body = response.content
    raise GitHubApiError(
        status_code=response.status_code,
        client_error=translate_error(raw_body),
        method=method,
        path=path,
        request_body=request_body,
        raw_body=raw_body,
    )
