from __future__ import annotations


class StatsError(RuntimeError):
    pass


class ConfigError(StatsError):
    pass


class TransportError(StatsError):
    """Connection, DNS or timeout failure talking to the API."""


class DecodeError(StatsError):
    """Response body is not the expected search envelope."""


class ApiError(StatsError):
    """Non-2xx response from the API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"GitHub API error {status}: {message}")
        self.status = status
        self.message = message


class RateLimitError(ApiError):
    def __init__(self, status: int, message: str, reset_at: int | None = None) -> None:
        super().__init__(status, message)
        self.reset_at = reset_at
