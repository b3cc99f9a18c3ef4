from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

from .models import PRRecord, RepoStats, StatsMap, TotalStats


def count_by_repo(records: Iterable[PRRecord]) -> dict[str, int]:
    return dict(Counter(r.repository_url for r in records))


def combine(approved: Mapping[str, int], not_approved: Mapping[str, int]) -> StatsMap:
    """Merge the two count maps; a repository missing from one side counts 0 there."""
    combined: StatsMap = {}
    for repo in (*approved.keys(), *not_approved.keys()):
        if repo in combined:
            continue
        combined[repo] = RepoStats(
            approved=approved.get(repo, 0),
            not_approved=not_approved.get(repo, 0),
        )
    return combined


def totals(stats: StatsMap) -> TotalStats:
    return TotalStats(
        approved=sum(s.approved for s in stats.values()),
        not_approved=sum(s.not_approved for s in stats.values()),
    )
