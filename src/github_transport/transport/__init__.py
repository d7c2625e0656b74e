"""Request construction for the GitHub API transport.

Example:
    ```python
    from github_transport.transport import build_request_config

    config = build_request_config(credential)
    client.get(url, auth=config.auth, timeout=config.timeout, headers=config.headers)
    ```
"""

from github_transport.transport.config import RequestConfig, build_request_config

__all__ = ["RequestConfig", "build_request_config"]
