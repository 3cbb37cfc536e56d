"""Command-line driver for the cedula lookup scraper."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from padron.scraper import config
from padron.scraper.config_validation import validate_runtime_config
from padron.scraper.csv_sink import CsvRecordSink
from padron.scraper.healthcheck import run_health_checks
from padron.scraper.launcher import LaunchExhaustedError
from padron.scraper.run import BatchRunner, playwright_engine
from padron.scraper.sources import load_identifiers
from padron.scraper.telemetry import RunTelemetry
from padron.scraper.utils import ensure_dirs, log_line, setup_run_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up cedulas on the voter verification site and save the results to CSV.",
    )
    parser.add_argument(
        "--identifiers-file",
        type=Path,
        default=config.IDENTIFIERS_FILE,
        help="Text file with one cedula per line (falls back to the inline list).",
    )
    parser.add_argument("--output", type=Path, default=config.OUTPUT_CSV, help="CSV file to write.")
    parser.add_argument(
        "--delay",
        type=float,
        default=config.PER_RECORD_DELAY_SECONDS,
        help="Seconds to pause after each lookup.",
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window.")
    parser.add_argument("--check", action="store_true", help="Run health checks and exit.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    ensure_dirs()
    setup_run_logger()

    if args.check:
        result = run_health_checks()
        for name, info in result.checks.items():
            status = "OK" if info.get("ok") else "FAIL"
            log_line(f"[HEALTH] {name}: {status} {info}")
        return 0 if result.ok else 1

    if args.delay < 0:
        parser.error("--delay must be non-negative")

    try:
        validate_runtime_config("cli")
    except ValueError as exc:
        log_line(f"Invalid configuration: {exc}")
        return 1

    identifiers = load_identifiers(args.identifiers_file)
    if not identifiers:
        log_line("No identifiers to process")
        return 0
    log_line(f"Using identifiers: {', '.join(identifiers)}")

    headless = False if args.headed else None
    try:
        with CsvRecordSink(args.output) as sink:
            runner = BatchRunner(
                sink,
                engine_factory=lambda: playwright_engine(headless=headless),
                delay_seconds=args.delay,
                telemetry=RunTelemetry(),
            )
            runner.run(identifiers)
    except LaunchExhaustedError as exc:
        log_line(f"[RUN][FATAL] {exc}")
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
