"""Tests for runtime settings."""

import pytest

from pr_approval_stats.config import API_BASE_URL, Settings
from pr_approval_stats.errors import ConfigError


@pytest.fixture
def no_token_env(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GH_TOKEN", raising=False)


class TestSettings:
    def test_explicit_token_wins(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        assert Settings.from_env("acme", token="explicit").token == "explicit"

    def test_token_from_env(self, no_token_env, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "gh")
        assert Settings.from_env("acme").token == "gh"

    def test_github_token_preferred(self, no_token_env, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "primary")
        monkeypatch.setenv("GH_TOKEN", "secondary")
        assert Settings.from_env("acme").token == "primary"

    def test_no_token(self, no_token_env):
        settings = Settings.from_env("acme")
        assert settings.token is None
        assert settings.authenticated is False
        assert settings.base_url == API_BASE_URL

    def test_base_url_trailing_slash(self, no_token_env):
        assert Settings.from_env("acme", base_url="http://localhost:8080/").base_url == "http://localhost:8080"

    @pytest.mark.parametrize("kwargs", [
        {"org": ""},
        {"org": "  "},
        {"org": "two words"},
        {"org": "acme", "timeout_s": 0},
        {"org": "acme", "max_concurrency": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigError):
            Settings(**kwargs)
