"""Turso (libSQL) backend on ``libsql_client``."""

from typing import Any, Optional, Sequence

from ..db import create_turso_client
from ..db.schema import (
    TURSO_CREATE_TABLE,
    TURSO_DROP_TABLE,
    TURSO_INSERT,
    TURSO_SELECT_ALL,
    TURSO_SELECT_FILTERED,
)
from ..sample_data import SampleRecord
from .base import DEFAULT_SELECT_LIMIT, DEFAULT_TITLE_PATTERN, Backend


class TursoBackend(Backend):
    name = "turso"
    label = "Turso"

    def __init__(self, url: str, auth_token: Optional[str] = None):
        self.url = url
        self.auth_token = auth_token
        self.client = create_turso_client(url, auth_token)

    async def drop_table(self) -> None:
        await self.client.execute(TURSO_DROP_TABLE)

    async def create_table(self) -> None:
        await self.client.execute(TURSO_CREATE_TABLE)

    async def insert_row(self, record: SampleRecord) -> None:
        await self.client.execute(
            TURSO_INSERT,
            [record.title, record.description, record.created_at],
        )

    async def select_all(self, limit: int = DEFAULT_SELECT_LIMIT) -> Sequence[Any]:
        result = await self.client.execute(TURSO_SELECT_ALL, [limit])
        return result.rows

    async def select_filtered(self, pattern: str = DEFAULT_TITLE_PATTERN) -> Sequence[Any]:
        result = await self.client.execute(TURSO_SELECT_FILTERED, [pattern])
        return result.rows

    async def ping(self) -> None:
        await self.client.execute("SELECT 1")

    def fresh(self) -> "TursoBackend":
        return TursoBackend(self.url, self.auth_token)

    async def close(self) -> None:
        await self.client.close()
