"""Client construction for both benchmark backends."""

from typing import Optional

import libsql_client
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_neon_engine(url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine for Neon.

    The engine opens no connection until first use. Connections run in
    autocommit with no pre-ping, so each timed call sends only its own
    statement.
    """
    return create_async_engine(
        url,
        echo=False,
        isolation_level="AUTOCOMMIT",
    )


def create_turso_client(url: str, auth_token: Optional[str] = None):
    """Create a libSQL client for Turso (``libsql://``, ``https://`` or ``file:``)."""
    return libsql_client.create_client(url, auth_token=auth_token)
