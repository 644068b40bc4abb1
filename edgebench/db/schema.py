"""Table definitions for both benchmark backends."""

from sqlalchemy import Column, DateTime, Integer, Text, text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class NeonTaskDB(Base):
    """Task row stored in Neon."""

    __tablename__ = "neon_tasks"

    # SERIAL PRIMARY KEY on Postgres
    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))


TURSO_TABLE = "turso_tasks"

TURSO_DROP_TABLE = f"DROP TABLE IF EXISTS {TURSO_TABLE}"

TURSO_CREATE_TABLE = f"""
    CREATE TABLE IF NOT EXISTS {TURSO_TABLE} (
      id INTEGER PRIMARY KEY,
      title TEXT NOT NULL,
      description TEXT,
      created_at TEXT
    )
"""

TURSO_INSERT = f"INSERT INTO {TURSO_TABLE} (title, description, created_at) VALUES (?, ?, ?)"
TURSO_SELECT_ALL = f"SELECT * FROM {TURSO_TABLE} LIMIT ?"
TURSO_SELECT_FILTERED = f"SELECT * FROM {TURSO_TABLE} WHERE title LIKE ?"
