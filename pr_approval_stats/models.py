from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError


@dataclass(frozen=True)
class PRRecord:
    repository_url: str
    number: int | None = None
    html_url: str | None = None

    @classmethod
    def from_item(cls, item: Any) -> "PRRecord":
        if not isinstance(item, dict):
            raise DecodeError(f"Expected object for search item, got {type(item).__name__}")
        repo_url = item.get("repository_url")
        if not isinstance(repo_url, str) or not repo_url:
            raise DecodeError("Search item is missing 'repository_url'")
        number = item.get("number")
        html_url = item.get("html_url")
        return cls(
            repository_url=repo_url,
            number=number if isinstance(number, int) else None,
            html_url=html_url if isinstance(html_url, str) else None,
        )

    @property
    def full_name(self) -> str:
        """owner/name taken from the tail of the repository URL."""
        parts = self.repository_url.rstrip("/").split("/")
        return "/".join(parts[-2:])


@dataclass(frozen=True)
class SearchPage:
    total_count: int
    items: tuple[PRRecord, ...]
    incomplete_results: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchPage":
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected object for search response, got {type(payload).__name__}")
        total = payload.get("total_count")
        # bool is an int subclass; reject it explicitly
        if not isinstance(total, int) or isinstance(total, bool) or total < 0:
            raise DecodeError(f"Invalid 'total_count' in search response: {total!r}")
        items = payload.get("items")
        if not isinstance(items, list):
            raise DecodeError(f"Invalid 'items' in search response: {type(items).__name__}")
        return cls(
            total_count=total,
            items=tuple(PRRecord.from_item(i) for i in items),
            incomplete_results=bool(payload.get("incomplete_results", False)),
        )


def _rate(approved: int, not_approved: int) -> float:
    total = approved + not_approved
    if total == 0:
        return math.nan
    return approved / total


@dataclass(frozen=True)
class RepoStats:
    approved: int = 0
    not_approved: int = 0

    @property
    def total(self) -> int:
        return self.approved + self.not_approved

    @property
    def rate(self) -> float:
        """approved / total, NaN when there is nothing to divide by."""
        return _rate(self.approved, self.not_approved)

    def to_dict(self) -> dict[str, Any]:
        rate = self.rate
        return {
            "approved": self.approved,
            "not_approved": self.not_approved,
            "total": self.total,
            "rate": None if math.isnan(rate) else rate,
        }


@dataclass(frozen=True)
class TotalStats:
    approved: int = 0
    not_approved: int = 0

    @property
    def total(self) -> int:
        return self.approved + self.not_approved

    @property
    def rate(self) -> float:
        return _rate(self.approved, self.not_approved)


StatsMap = dict[str, RepoStats]
