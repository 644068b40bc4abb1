"""Database package for the benchmark."""

from .engine import create_neon_engine, create_turso_client
from .schema import NeonTaskDB, TURSO_TABLE

__all__ = [
    "create_neon_engine",
    "create_turso_client",
    "NeonTaskDB",
    "TURSO_TABLE",
]
