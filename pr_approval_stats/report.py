"""Report rendering: plain lines and a rich table."""

from __future__ import annotations

import math

from rich import box
from rich.console import Console
from rich.table import Table

from .aggregator import totals
from .models import StatsMap

NAN_RATE = "n/a"


def format_rate(rate: float) -> str:
    if math.isnan(rate):
        return NAN_RATE
    return f"{rate:.2f}"


def _line(label: str, approved: int, not_approved: int, rate: float) -> str:
    return (
        f"{label}: {approved + not_approved} total, {approved} approved, "
        f"{not_approved} not approved, rate: {format_rate(rate)}"
    )


def render_lines(stats: StatsMap) -> list[str]:
    lines = [_line(repo, s.approved, s.not_approved, s.rate) for repo, s in sorted(stats.items())]
    tot = totals(stats)
    lines.append(_line("Total", tot.approved, tot.not_approved, tot.rate))
    return lines


def render(stats: StatsMap) -> str:
    return "\n".join(render_lines(stats))


def print_report(stats: StatsMap, console: Console | None = None) -> None:
    console = console or Console()
    for line in render_lines(stats):
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def rate_color(rate: float) -> str:
    if math.isnan(rate):
        return "dim"
    if rate >= 0.8:
        return "green"
    if rate >= 0.5:
        return "yellow"
    return "red"


def build_table(stats: StatsMap) -> Table:
    table = Table(title="Merged PR approval rates", box=box.SIMPLE_HEAVY, show_footer=True)
    tot = totals(stats)
    table.add_column("Repository", footer="Total", style="cyan", no_wrap=True)
    table.add_column("Total", footer=str(tot.total), justify="right")
    table.add_column("Approved", footer=str(tot.approved), justify="right")
    table.add_column("Not approved", footer=str(tot.not_approved), justify="right")
    table.add_column("Rate", footer=format_rate(tot.rate), justify="right")

    for repo, s in sorted(stats.items()):
        table.add_row(
            repo,
            str(s.total),
            str(s.approved),
            str(s.not_approved),
            f"[{rate_color(s.rate)}]{format_rate(s.rate)}[/]",
        )
    return table


def print_table(stats: StatsMap, console: Console | None = None) -> None:
    console = console or Console()
    console.print(build_table(stats))
