from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import API_BASE_URL, DEFAULT_LOG_LEVEL, DEFAULT_TIMEOUT_S, LOG_LEVEL_ENV, Settings
from .errors import ConfigError, StatsError
from .output import write_csv, write_json
from .report import print_report, print_table
from .stats import collect_stats

console = Console()
err_console = Console(stderr=True)

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pr-approval-stats",
        description="Report how many merged pull requests in a GitHub organization were approved.",
    )
    parser.add_argument("org", help="GitHub organization to report on.")
    parser.add_argument(
        "--token", default=None,
        help="GitHub token (or set GITHUB_TOKEN / GH_TOKEN). Unauthenticated search is heavily rate limited.",
    )
    parser.add_argument("--base-url", default=API_BASE_URL, help=f"API base URL (default: {API_BASE_URL})")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT_S,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT_S:g})",
    )
    parser.add_argument(
        "--max-concurrency", type=int, default=None,
        help="Cap on simultaneous page requests per query (default: no cap)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--table", action="store_true", default=False, help="Render the report as a table")
    parser.add_argument("--json-out", default=None, help="Also write the stats to this JSON file")
    parser.add_argument("--csv-out", default=None, help="Also write the stats to this CSV file")
    return parser


def configure_logging(level: str | None) -> None:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    try:
        return _main_inner(argv)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Cancelled.[/yellow]")
        return 130


def _main_inner(argv: list[str] | None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = Settings.from_env(
            args.org,
            token=args.token,
            base_url=args.base_url,
            timeout_s=args.timeout,
            max_concurrency=args.max_concurrency,
        )
    except ConfigError as error:
        err_console.print(f"[red]Error: {escape(str(error))}[/red]")
        return 2

    if not settings.authenticated:
        log.warning("No GitHub token configured; search requests are unauthenticated.")
    log.info("Reporting for org: %s", settings.org)

    try:
        stats = collect_stats(settings)
    except ConfigError as error:
        err_console.print(f"[red]Error: {escape(str(error))}[/red]")
        return 2
    except StatsError as error:
        err_console.print(f"[red]Error: {escape(str(error))}[/red]")
        return 1

    if args.table:
        print_table(stats, console)
    else:
        print_report(stats, console)

    if args.json_out:
        write_json(args.json_out, stats)
        err_console.print(f"[green]Saved to {args.json_out}[/green]")
    if args.csv_out:
        write_csv(args.csv_out, stats)
        err_console.print(f"[green]Saved to {args.csv_out}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
