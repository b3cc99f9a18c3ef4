from __future__ import annotations

import csv
import json
from pathlib import Path

from .models import StatsMap

FIELDNAMES = ("repository", "approved", "not_approved", "total", "rate")


def _rows(stats: StatsMap) -> list[dict]:
    return [{"repository": repo, **s.to_dict()} for repo, s in sorted(stats.items())]


def write_json(path: str | Path, stats: StatsMap) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(_rows(stats), indent=2) + "\n", encoding="utf-8")


def write_csv(path: str | Path, stats: StatsMap) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        for row in _rows(stats):
            w.writerow(row)
