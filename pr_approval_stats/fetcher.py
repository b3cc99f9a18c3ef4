"""Paginated search: page 1 first, then the remaining pages in parallel."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Awaitable, Protocol

from .config import PER_PAGE, SEARCH_RESULT_LIMIT
from .models import PRRecord, SearchPage

log = logging.getLogger(__name__)


class PageSource(Protocol):
    async def fetch_page(self, query: str, page: int) -> SearchPage: ...


async def gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """Like asyncio.gather, but on the first failure the remaining tasks are
    cancelled and awaited before the error propagates."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class PaginatedFetcher:
    def __init__(self, client: PageSource, max_concurrency: int | None = None):
        self.client = client
        self._sem = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _fetch(self, query: str, page: int) -> SearchPage:
        if self._sem is None:
            return await self.client.fetch_page(query, page)
        async with self._sem:
            return await self.client.fetch_page(query, page)

    async def fetch_all(self, query: str) -> list[PRRecord]:
        first = await self._fetch(query, 1)
        num_pages = math.ceil(first.total_count / PER_PAGE)
        log.info("%r: %d results over %d page(s)", query, first.total_count, num_pages)

        records = list(first.items)
        if num_pages <= 1:
            return records

        if first.total_count > SEARCH_RESULT_LIMIT:
            log.warning(
                "%r matched %d results; the search API only serves the first %d",
                query, first.total_count, SEARCH_RESULT_LIMIT,
            )

        pages = await gather_or_cancel(*(self._fetch(query, n) for n in range(2, num_pages + 1)))
        for page in pages:
            records.extend(page.items)
        return records
