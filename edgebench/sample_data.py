"""Synthetic rows for the write test."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Inverse of :func:`iso_timestamp`."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class SampleRecord:
    """One generated task row."""

    id: int
    title: str
    description: str
    created_at: str


def generate_sample_data(count: int) -> List[SampleRecord]:
    """Generate ``count`` task records with ids starting at 1."""
    return [
        SampleRecord(
            id=i + 1,
            title=f"Task {i + 1}",
            description=f"This is a sample task description for task {i + 1}",
            created_at=iso_timestamp(),
        )
        for i in range(max(count, 0))
    ]
