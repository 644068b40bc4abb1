"""Benchmark phases and the top-level run loop.

Every backend call is awaited one at a time, neon first then turso, so the
single ``BenchmarkResults`` object is only ever touched by the active phase.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .backends import Backend, build_backends
from .config import Settings
from .results import BenchmarkResults, save_results
from .sample_data import SampleRecord, generate_sample_data
from .timing import measure_time

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkOutcome:
    """What a run produced."""

    results: BenchmarkResults
    path: Path
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


async def setup_databases(backends: Sequence[Backend]) -> None:
    """Drop then recreate the benchmark table on every backend."""
    for backend in backends:
        try:
            await backend.drop_table()
        except Exception as e:
            logger.debug("Dropping %s table failed: %s", backend.name, e)
            print("Tables did not exist, proceeding with creation...")

    for backend in backends:
        await backend.create_table()


async def run_cold_start_test(backends: Sequence[Backend], results: BenchmarkResults) -> None:
    """Time a brand-new client's first ``SELECT 1`` per backend."""
    print("\n=== Cold Start Test ===")

    cold_start = {}
    for backend in backends:
        fresh_clients: List[Backend] = []

        async def connect_and_ping() -> None:
            fresh = backend.fresh()
            fresh_clients.append(fresh)
            await fresh.ping()

        try:
            elapsed = await measure_time(connect_and_ping)
        finally:
            for fresh in fresh_clients:
                try:
                    await fresh.close()
                except Exception as e:
                    logger.warning("Closing fresh %s client failed: %s", backend.name, e)

        cold_start[backend.name] = elapsed
        print(f"{backend.label} Cold Start Time: {elapsed:.2f}ms")

    results.cold_start = cold_start


async def run_write_test(
    backends: Sequence[Backend],
    data: Sequence[SampleRecord],
    results: BenchmarkResults,
) -> None:
    """Insert every record, one statement at a time, on each backend."""
    print(f"\n=== Write Test ({len(data)} rows) ===")

    timings = {}
    for backend in backends:

        async def insert_all() -> None:
            for item in data:
                await backend.insert_row(item)

        elapsed = await measure_time(insert_all)
        timings[backend.name] = elapsed
        print(f"{backend.label} Write Time: {elapsed:.2f}ms")

    row_count = len(data)
    write_test = dict(timings)
    write_test["rowCount"] = row_count
    if row_count == 0:
        print("⚠️  No rows written, per-row averages recorded as null")
    for name, elapsed in timings.items():
        write_test[f"{name}AvgPerRow"] = elapsed / row_count if row_count else None

    results.write_test = write_test


async def run_read_test(backends: Sequence[Backend], results: BenchmarkResults) -> None:
    """Time one unfiltered and one LIKE-filtered select per backend."""
    print("\n=== Read Test ===")

    print("\nSimple Query (SELECT * LIMIT 100):")
    simple_query = {}
    for backend in backends:
        elapsed = await measure_time(backend.select_all)
        simple_query[backend.name] = elapsed
        print(f"{backend.label} Query Time: {elapsed:.2f}ms")

    print("\nFilter Query (WHERE title LIKE):")
    filter_query = {}
    for backend in backends:
        elapsed = await measure_time(backend.select_filtered)
        filter_query[backend.name] = elapsed
        print(f"{backend.label} Filter Time: {elapsed:.2f}ms")

    results.read_test = {
        "simpleQuery": simple_query,
        "filterQuery": filter_query,
    }


async def run_benchmarks(
    settings: Settings,
    record_count: int,
    output_dir: Path = Path("."),
    backends: Optional[Sequence[Backend]] = None,
    include_row_count: bool = True,
) -> BenchmarkOutcome:
    """Run every phase and save the results exactly once.

    Any exception ends the run; whatever was measured up to that point is
    still written to disk.
    """
    results = BenchmarkResults(record_count=record_count)
    error: Optional[BaseException] = None
    active: Sequence[Backend] = backends or []

    try:
        print("🔧 Setting up databases...")
        if backends is None:
            active = build_backends(settings)
        await setup_databases(active)

        sample_data = generate_sample_data(record_count)

        await run_cold_start_test(active, results)
        await run_write_test(active, sample_data, results)
        await run_read_test(active, results)
    except Exception as e:
        error = e
        print(f"❌ Error during benchmark: {e!r}")
        logger.debug("Benchmark failed", exc_info=True)
    finally:
        for backend in active:
            try:
                await backend.close()
            except Exception as e:
                logger.warning("Closing %s failed: %s", backend.name, e)

    path = save_results(results, output_dir, include_row_count=include_row_count)
    if error is None:
        print("\n🎉 Benchmark completed successfully!")
    return BenchmarkOutcome(results=results, path=path, error=error)
