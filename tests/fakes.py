from __future__ import annotations

import asyncio

from pr_approval_stats.models import PRRecord, SearchPage


def page_of(total: int, *repos: str) -> SearchPage:
    return SearchPage(total_count=total, items=tuple(PRRecord(repository_url=r) for r in repos))


class FakeSearchClient:
    """Serves canned pages per query and records every request."""

    def __init__(self, pages: dict[str, dict[int, object]]):
        self.pages = pages
        self.calls: list[tuple[str, int]] = []
        self.cancelled: list[tuple[str, int]] = []

    async def fetch_page(self, query: str, page: int) -> SearchPage:
        self.calls.append((query, page))
        result = self.pages[query][page]
        try:
            await asyncio.sleep(0)
            if isinstance(result, asyncio.Event):
                await result.wait()
                raise AssertionError("blocked page should have been cancelled")
        except asyncio.CancelledError:
            self.cancelled.append((query, page))
            raise
        if isinstance(result, BaseException):
            raise result
        return result
