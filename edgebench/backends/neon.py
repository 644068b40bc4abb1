"""Neon (serverless Postgres) backend on SQLAlchemy's asyncio engine."""

from typing import Any, Sequence

from sqlalchemy import insert, select, text

from ..db import NeonTaskDB, create_neon_engine
from ..sample_data import SampleRecord, parse_timestamp
from .base import DEFAULT_SELECT_LIMIT, DEFAULT_TITLE_PATTERN, Backend

neon_tasks = NeonTaskDB.__table__


class NeonBackend(Backend):
    name = "neon"
    label = "Neon"

    def __init__(self, url: str):
        self.url = url
        self.engine = create_neon_engine(url)

    async def drop_table(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(neon_tasks.drop, checkfirst=True)

    async def create_table(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(neon_tasks.create, checkfirst=True)

    async def insert_row(self, record: SampleRecord) -> None:
        # Autocommitted single statement, like the serverless driver's one-shot queries
        async with self.engine.connect() as conn:
            await conn.execute(
                insert(neon_tasks).values(
                    title=record.title,
                    description=record.description,
                    created_at=parse_timestamp(record.created_at),
                )
            )

    async def select_all(self, limit: int = DEFAULT_SELECT_LIMIT) -> Sequence[Any]:
        async with self.engine.connect() as conn:
            result = await conn.execute(select(neon_tasks).limit(limit))
            return result.fetchall()

    async def select_filtered(self, pattern: str = DEFAULT_TITLE_PATTERN) -> Sequence[Any]:
        async with self.engine.connect() as conn:
            result = await conn.execute(select(neon_tasks).where(neon_tasks.c.title.like(pattern)))
            return result.fetchall()

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    def fresh(self) -> "NeonBackend":
        return NeonBackend(self.url)

    async def close(self) -> None:
        await self.engine.dispose()
