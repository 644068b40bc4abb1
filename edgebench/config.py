"""Connection settings for the benchmark, read from the environment."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_RECORD_COUNT = 100

# Query parameters Neon puts in its connection strings that asyncpg rejects
_UNSUPPORTED_PG_PARAMS = ("channel_binding",)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_record_count(raw: Optional[str], default: int = DEFAULT_RECORD_COUNT) -> int:
    """Parse a row count the way ``parseInt(raw) || default`` would.

    Leading digits are used, anything unparsable or zero falls back to the
    default, and negative counts clamp to zero rows. The clamp is a deliberate
    departure from ``parseInt``, which kept the raw negative value.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    if value == 0:
        return default
    return max(value, 0)


def normalize_neon_url(raw_url: str) -> str:
    """Turn a Neon/Postgres connection string into a SQLAlchemy asyncpg URL.

    Non-Postgres URLs (e.g. ``sqlite+aiosqlite`` in tests) pass through.
    """
    url = make_url(raw_url)
    if url.get_backend_name() not in ("postgres", "postgresql"):
        return raw_url

    url = url.set(drivername="postgresql+asyncpg")
    query = dict(url.query)
    if "sslmode" in query:
        url = url.difference_update_query(["sslmode"]).update_query_dict({"ssl": query["sslmode"]})
    dropped = [name for name in _UNSUPPORTED_PG_PARAMS if name in query]
    if dropped:
        logger.debug("Dropping unsupported connection parameters: %s", dropped)
        url = url.difference_update_query(dropped)
    return url.render_as_string(hide_password=False)


@dataclass(frozen=True)
class Settings:
    """Benchmark connection settings."""

    neon_database_url: Optional[str] = None
    turso_database_url: Optional[str] = None
    turso_auth_token: Optional[str] = None
    record_count: int = DEFAULT_RECORD_COUNT

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        """Load settings from ``.env`` (if present) and the process environment."""
        load_dotenv(dotenv_path=env_file or Path.cwd() / ".env", override=False)
        return cls(
            neon_database_url=os.getenv("NEON_DATABASE_URL") or None,
            turso_database_url=os.getenv("TURSO_DATABASE_URL") or None,
            turso_auth_token=os.getenv("TURSO_AUTH_TOKEN") or None,
            record_count=parse_record_count(os.getenv("BENCHMARK_RECORD_COUNT")),
        )

    def require_neon_url(self) -> str:
        if not self.neon_database_url:
            raise ConfigError("NEON_DATABASE_URL is not set")
        return normalize_neon_url(self.neon_database_url)

    def require_turso_url(self) -> str:
        if not self.turso_database_url:
            raise ConfigError("TURSO_DATABASE_URL is not set")
        return self.turso_database_url
