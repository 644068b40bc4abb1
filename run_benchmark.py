#!/usr/bin/env python3
"""
Neon vs Turso latency benchmark.

Creates one table per database, then measures a cold-start round trip, a
sequential batch of inserts and two read queries, and saves the timings to
``benchmark-results-<rows>-rows-<timestamp>.json``.

Usage:
    python run_benchmark.py            # 100 rows
    python run_benchmark.py 10000      # 10,000 rows
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from edgebench.config import Settings, parse_record_count
from edgebench.runner import run_benchmarks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Neon vs Turso latency benchmark")
    parser.add_argument(
        "record_count", nargs="?", default=None,
        help="Rows to insert in the write test (default: $BENCHMARK_RECORD_COUNT or 100)",
    )
    parser.add_argument("--output-dir", default=".", help="Directory for the results file (default: .)")
    parser.add_argument("--no-rowcount-in-name", action="store_true",
                        help="Leave the row count out of the results file name")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 1 when the benchmark fails")
    parser.add_argument("--env-file", help="Load settings from this .env file instead of ./.env")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the benchmark and return the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env(Path(args.env_file) if args.env_file else None)

    record_count = parse_record_count(args.record_count, default=settings.record_count)
    print(f"🚀 Running benchmark with {record_count} records...")

    outcome = asyncio.run(
        run_benchmarks(
            settings,
            record_count,
            output_dir=Path(args.output_dir),
            include_row_count=not args.no_rowcount_in_name,
        )
    )

    # A failed run still exits 0 unless --strict is given
    if not outcome.succeeded and args.strict:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
