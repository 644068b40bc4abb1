"""Benchmark result accumulator and JSON reporter."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .sample_data import iso_timestamp

RESULTS_PREFIX = "benchmark-results"


def _empty_read_test() -> Dict[str, Dict[str, float]]:
    return {"simpleQuery": {}, "filterQuery": {}}


@dataclass
class BenchmarkResults:
    """Timings for one run, keyed by phase then backend name."""

    record_count: int
    timestamp: str = field(default_factory=iso_timestamp)
    cold_start: Dict[str, float] = field(default_factory=dict)
    write_test: Dict[str, Any] = field(default_factory=dict)
    read_test: Dict[str, Dict[str, float]] = field(default_factory=_empty_read_test)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "configuration": {"recordCount": self.record_count},
            "coldStart": self.cold_start,
            "writeTest": self.write_test,
            "readTest": self.read_test,
        }


def results_filename(record_count: Optional[int], now: Optional[datetime] = None) -> str:
    """File name for a results document.

    ``record_count=None`` leaves the row count out of the name.
    """
    stamp = iso_timestamp(now).replace(":", "-").replace(".", "-")
    if record_count is None:
        return f"{RESULTS_PREFIX}-{stamp}.json"
    return f"{RESULTS_PREFIX}-{record_count}-rows-{stamp}.json"


def save_results(
    results: BenchmarkResults,
    directory: Path = Path("."),
    include_row_count: bool = True,
) -> Path:
    """Write results as pretty-printed JSON and return the file path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    name = results_filename(results.record_count if include_row_count else None)
    path = directory / name
    with open(path, "w") as f:
        json.dump(results.to_dict(), f, indent=2)
    print(f"\n💾 Results saved to {path}")
    return path
