"""Configuration constants and runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigError

# GitHub search API
API_BASE_URL = "https://api.github.com"
SEARCH_PATH = "/search/issues"
API_VERSION = "2022-11-28"
USER_AGENT = "pr-approval-stats"
PER_PAGE = 100
SEARCH_RESULT_LIMIT = 1000  # search API never serves results past this offset

DEFAULT_TIMEOUT_S = 30.0

# Environment
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    org: str
    token: str | None = None
    base_url: str = API_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if not self.org or not self.org.strip():
            raise ConfigError("Organization name is required.")
        if any(c.isspace() for c in self.org.strip()):
            raise ConfigError(f"Invalid organization name: {self.org!r}")
        if self.timeout_s <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout_s}.")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ConfigError(f"Max concurrency must be at least 1, got {self.max_concurrency}.")

    @classmethod
    def from_env(
        cls,
        org: str,
        *,
        token: str | None = None,
        base_url: str = API_BASE_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        max_concurrency: int | None = None,
    ) -> "Settings":
        """Build settings, taking the token from the environment when not given."""
        tok = token or next((os.environ[k] for k in TOKEN_ENV_VARS if os.environ.get(k)), None)
        return cls(
            org=org.strip() if org else org,
            token=tok,
            base_url=base_url.rstrip("/"),
            timeout_s=timeout_s,
            max_concurrency=max_concurrency,
        )

    @property
    def authenticated(self) -> bool:
        return bool(self.token)
