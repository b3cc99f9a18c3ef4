"""The approval-rate pipeline: two searches, counted and merged per repository."""

from __future__ import annotations

import asyncio
import logging

from .aggregator import combine, count_by_repo
from .config import Settings
from .fetcher import PageSource, PaginatedFetcher, gather_or_cancel
from .models import StatsMap
from .queries import approved_query, not_approved_query
from .search_client import SearchClient

log = logging.getLogger(__name__)


async def pr_stats(
    org: str,
    settings: Settings | None = None,
    *,
    client: PageSource | None = None,
) -> StatsMap:
    """Fetch approved and not-approved merged PRs for ``org`` concurrently and
    combine them into per-repository stats.

    Either query failing fails the whole call; nothing partial is returned.
    """
    settings = settings or Settings.from_env(org)
    queries = (approved_query(org), not_approved_query(org))

    if client is not None:
        return await _run(client, queries, settings.max_concurrency)
    async with SearchClient(settings) as owned:
        return await _run(owned, queries, settings.max_concurrency)


async def _run(client: PageSource, queries: tuple[str, str], max_concurrency: int | None) -> StatsMap:
    # one fetcher per query, so a concurrency cap applies to each query separately
    fetchers = [PaginatedFetcher(client, max_concurrency=max_concurrency) for _ in queries]
    approved, not_approved = await gather_or_cancel(*(f.fetch_all(q) for f, q in zip(fetchers, queries)))
    log.info("Fetched %d approved and %d not-approved merged PRs", len(approved), len(not_approved))
    return combine(count_by_repo(approved), count_by_repo(not_approved))


def collect_stats(settings: Settings) -> StatsMap:
    return asyncio.run(pr_stats(settings.org, settings))
