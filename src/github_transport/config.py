"""Fixed endpoints and request limits for the GitHub API transport."""

API_URL = "https://api.github.com"
WEB_URL = "https://github.com"

# Both limits are fixed; there is no per-call override.
CONNECT_TIMEOUT = 60.0
READ_TIMEOUT = 60.0

ACCEPT_HEADER = "application/vnd.github+json"
USER_AGENT = "github-transport/0.1.0"

UNKNOWN_REQUEST = "unknown request"
