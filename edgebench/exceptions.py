"""Benchmark exceptions."""


class BenchmarkError(Exception):
    """Base benchmark error."""
    pass


class ConfigError(BenchmarkError):
    """Connection settings are missing or invalid."""
    pass
