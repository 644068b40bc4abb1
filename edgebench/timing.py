"""Wall-clock timing helpers."""

import time
from typing import Any, Awaitable, Callable


async def measure_time(action: Callable[[], Awaitable[Any]]) -> float:
    """Await ``action()`` once and return the elapsed time in milliseconds."""
    start = time.perf_counter()
    await action()
    end = time.perf_counter()
    return (end - start) * 1000
