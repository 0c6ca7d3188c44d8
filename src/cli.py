"""One-shot command that rebuilds the yearly statistics report."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Sequence

import click

from .services.redis import create_redis
from .settings import get_settings
from .statistics.application import (
    ActivityStoreError,
    ReportStoreError,
    StatisticsConfig,
    YearlyStatisticsOrchestrator,
)
from .statistics.infrastructure import (
    RedisReportStore,
    SqlActivityStore,
    SqlTelemetryStore,
    create_session_factory,
)


@click.command(name="yearly-stats")
@click.option("--first-year", type=int, default=None, help="First year of the report.")
@click.option("--last-year", type=int, default=None, help="Last year of the report.")
@click.option("-v", "--verbose", is_flag=True, help="Log per-activity details.")
def yearly_stats(first_year: int | None, last_year: int | None, verbose: bool) -> None:
    """Recompute the statistics of every configured year and store them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings()
    try:
        config = StatisticsConfig.from_settings(
            settings, first_year=first_year, last_year=last_year
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    session_factory = create_session_factory(settings.database_url)
    redis = create_redis(settings)
    orchestrator = YearlyStatisticsOrchestrator(
        SqlActivityStore(session_factory),
        SqlTelemetryStore(session_factory),
        RedisReportStore(redis),
        config,
    )
    try:
        report = asyncio.run(orchestrator.run())
    except (ActivityStoreError, ReportStoreError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Stored {len(report.years)} years under {config.report_key!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the Click command and propagate the exit code."""
    args = list(argv) if argv is not None else None

    try:
        yearly_stats.main(args=args, prog_name="yearly-stats", standalone_mode=False)
    except click.exceptions.Exit as exc:  # pragma: no cover - click handles sys.exit
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - convenience execution path
    sys.exit(main(sys.argv[1:]))
