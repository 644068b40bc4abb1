"""Base backend interface."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..sample_data import SampleRecord

DEFAULT_SELECT_LIMIT = 100
DEFAULT_TITLE_PATTERN = "%Task 1%"


class Backend(ABC):
    """One hosted database under test.

    Every benchmark phase drives both services through this interface.
    """

    #: Key used in the results document.
    name: str = ""
    #: Human readable name for console output.
    label: str = ""

    @abstractmethod
    async def drop_table(self) -> None:
        """Drop the benchmark table if it exists."""
        ...

    @abstractmethod
    async def create_table(self) -> None:
        """Create the benchmark table if it does not exist."""
        ...

    @abstractmethod
    async def insert_row(self, record: SampleRecord) -> None:
        """Insert one record with a single parameterized statement."""
        ...

    @abstractmethod
    async def select_all(self, limit: int = DEFAULT_SELECT_LIMIT) -> Sequence[Any]:
        """Unfiltered select, capped at ``limit`` rows."""
        ...

    @abstractmethod
    async def select_filtered(self, pattern: str = DEFAULT_TITLE_PATTERN) -> Sequence[Any]:
        """Select rows whose title matches a LIKE pattern."""
        ...

    @abstractmethod
    async def ping(self) -> None:
        """Trivial ``SELECT 1`` round trip."""
        ...

    @abstractmethod
    def fresh(self) -> "Backend":
        """Return a new, unconnected backend with the same settings."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any open connections."""
        ...
