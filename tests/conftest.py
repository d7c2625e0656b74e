"""Pytest configuration and shared fixtures for github-transport tests."""

import httpx
import pytest

from github_transport.auth import Credential


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear credential-related environment variables before each test.

    This prevents a developer's real GitHub token from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "GITHUB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def api_credential():
    return Credential(username="api-user", secret="api-token")


@pytest.fixture
def web_credential():
    return Credential(username="web-user", secret="web-token")


@pytest.fixture
def not_found_response():
    return httpx.Response(
        404,
        json={"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
    )
