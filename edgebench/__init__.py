"""Latency benchmark comparing Neon (serverless Postgres) and Turso (libSQL)."""

from .config import Settings
from .results import BenchmarkResults, save_results
from .runner import BenchmarkOutcome, run_benchmarks
from .sample_data import SampleRecord, generate_sample_data
from .timing import measure_time

__all__ = [
    "Settings",
    "BenchmarkResults",
    "BenchmarkOutcome",
    "SampleRecord",
    "generate_sample_data",
    "measure_time",
    "run_benchmarks",
    "save_results",
]

__version__ = "0.1.0"
