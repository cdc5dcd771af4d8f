"""Wall-clock helpers and an accurate, interruptible sleep."""

from __future__ import annotations

import enum
import time
from typing import Callable


class TimeUnit(enum.Enum):
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"


_NS_PER_UNIT = {
    TimeUnit.SECOND: 1_000_000_000,
    TimeUnit.MILLISECOND: 1_000_000,
    TimeUnit.MICROSECOND: 1_000,
}


def gettime(unit: TimeUnit) -> int:
    """Return the current wall-clock time, truncated to whole units."""
    try:
        divisor = _NS_PER_UNIT[unit]
    except KeyError:
        raise ValueError("Wrong input to gettime !") from None
    return time.time_ns() // divisor


def precise_sleep(usec: int, should_stop: Callable[[], bool]) -> None:
    """Sleep for ``usec`` microseconds, returning early once should_stop() is true.

    Sleeps in halving chunks and spins for the final millisecond.
    """
    start = gettime(TimeUnit.MICROSECOND)
    while (elapsed := gettime(TimeUnit.MICROSECOND) - start) < usec:
        if should_stop():
            break
        remaining = usec - elapsed
        if remaining > 1000:
            time.sleep(remaining / 2 / 1_000_000)
        else:
            while gettime(TimeUnit.MICROSECOND) - start < usec:
                pass