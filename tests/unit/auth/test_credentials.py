"""Tests for credentials, value resolution and the environment credential store."""

import logging

import pytest

from github_transport.auth import (
    Credential,
    CredentialNotFoundError,
    CredentialResolver,
    CredentialStoreError,
    EnvCredentialStore,
)
from github_transport.config import API_URL, WEB_URL


class TestCredential:
    """Test the Credential value type."""

    def test_repr_hides_secret(self):
        credential = Credential(username="octocat", secret="ghp_secret")

        assert "octocat" in repr(credential)
        assert "ghp_secret" not in repr(credential)

    def test_is_immutable(self):
        credential = Credential(username="octocat", secret="ghp_secret")

        with pytest.raises(AttributeError):
            credential.username = "other"

    def test_equality(self):
        assert Credential("a", "b") == Credential("a", "b")
        assert Credential("a", "b") != Credential("a", "c")


class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_skip_dotenv(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_custom_dotenv_path(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_VAR=from-dotenv\n")
        # Register the variable so monkeypatch removes what load_dotenv sets
        monkeypatch.setenv("TEST_DOTENV_VAR", "placeholder")
        monkeypatch.delenv("TEST_DOTENV_VAR")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver._dotenv_loaded
        assert resolver.resolve(env_var_name="TEST_DOTENV_VAR") == "from-dotenv"

    def test_dotenv_loaded_only_once(self, tmp_path):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_VAR=test_value\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        resolver._ensure_dotenv_loaded()
        resolver._ensure_dotenv_loaded()

        assert resolver._dotenv_loaded is True


class TestCredentialResolverResolve:
    """Test environment value resolution."""

    def test_resolves_environment_variable(self, monkeypatch):
        monkeypatch.setenv("TEST_API_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_API_KEY") == "env-value"

    def test_empty_environment_value_is_unset(self, monkeypatch):
        monkeypatch.setenv("TEST_EMPTY_KEY", "")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_EMPTY_KEY") is None

    def test_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_NONEXISTENT_VAR") is None

    def test_value_is_masked_in_debug_logs(self, caplog, monkeypatch):
        caplog.set_level(logging.DEBUG)
        monkeypatch.setenv("TEST_SECRET", "super-secret-key-123")
        resolver = CredentialResolver(load_dotenv=False)

        resolver.resolve(env_var_name="TEST_SECRET")

        assert "super-secret-key-123" not in caplog.text
        assert "***" in caplog.text


class TestCredentialResolverFromFile:
    """Test file-based value resolution."""

    def test_reads_and_strips_file(self, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("  ghp_from_file  \n")
        monkeypatch.setenv("TEST_TOKEN_FILE", str(token_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE") == "ghp_from_file"

    def test_tilde_expansion(self, tmp_path, monkeypatch):
        fake_home = tmp_path / "home"
        (fake_home / ".config").mkdir(parents=True)
        (fake_home / ".config" / "gh_token").write_text("home-token")
        monkeypatch.setenv("HOME", str(fake_home))
        monkeypatch.setenv("TEST_TOKEN_FILE", "~/.config/gh_token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE") == "home-token"

    def test_unset_variable_returns_none(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE") is None

    def test_missing_file_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_TOKEN_FILE", str(tmp_path / "nope"))
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialStoreError, match="not found"):
            resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE")

    def test_directory_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_TOKEN_FILE", str(tmp_path))
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialStoreError):
            resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE")


class TestEnvCredentialStore:
    """Test the environment-backed credential store."""

    @pytest.fixture
    def store(self):
        return EnvCredentialStore(resolver=CredentialResolver(load_dotenv=False))

    def test_lookup_api_host(self, store, monkeypatch):
        monkeypatch.setenv("GITHUB_API_USERNAME", "api-user")
        monkeypatch.setenv("GITHUB_API_TOKEN", "api-token")

        assert store.lookup(API_URL) == Credential("api-user", "api-token")

    def test_lookup_web_host(self, store, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "web-user")
        monkeypatch.setenv("GITHUB_TOKEN", "web-token")

        assert store.lookup(WEB_URL) == Credential("web-user", "web-token")

    def test_lookup_ignores_trailing_slash(self, store, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "web-user")
        monkeypatch.setenv("GITHUB_TOKEN", "web-token")

        assert store.lookup(WEB_URL + "/") == Credential("web-user", "web-token")

    def test_token_from_file(self, store, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("file-token\n")
        monkeypatch.setenv("GITHUB_USERNAME", "web-user")
        monkeypatch.setenv("GITHUB_TOKEN_FILE", str(token_file))

        assert store.lookup(WEB_URL) == Credential("web-user", "file-token")

    def test_missing_credential(self, store):
        with pytest.raises(CredentialNotFoundError) as exc_info:
            store.lookup(API_URL)

        assert exc_info.value.host_url == API_URL
        assert "GITHUB_API_TOKEN" in str(exc_info.value)

    def test_unknown_host(self, store):
        with pytest.raises(CredentialNotFoundError):
            store.lookup("https://gitlab.com")

    def test_username_without_token(self, store, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "web-user")

        with pytest.raises(CredentialStoreError, match="GITHUB_TOKEN"):
            store.lookup(WEB_URL)

    def test_token_without_username(self, store, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "web-token")

        with pytest.raises(CredentialStoreError, match="GITHUB_USERNAME"):
            store.lookup(WEB_URL)

    def test_custom_host_variables(self, monkeypatch):
        monkeypatch.setenv("TEST_GHE_USER", "ghe-user")
        monkeypatch.setenv("TEST_GHE_TOKEN", "ghe-token")
        store = EnvCredentialStore(
            {"https://ghe.example.com": ("TEST_GHE_USER", "TEST_GHE_TOKEN")},
            resolver=CredentialResolver(load_dotenv=False),
        )

        assert store.lookup("https://ghe.example.com") == Credential("ghe-user", "ghe-token")

    def test_location_lists_variables(self, store):
        assert "GITHUB_API_TOKEN" in store.location
        assert "GITHUB_TOKEN" in store.location

    def test_token_is_not_logged(self, store, monkeypatch, caplog):
        caplog.set_level(logging.DEBUG)
        monkeypatch.setenv("GITHUB_USERNAME", "web-user")
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_very_secret")

        store.lookup(WEB_URL)

        assert "ghp_very_secret" not in caplog.text
