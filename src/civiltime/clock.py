"""Wall-clock sources for instant construction.

The clock is the only host state read when building an instant from "now".
It is injected into InstantFactory so tests can substitute a frozen clock.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of the current wall-clock time."""

    def timestamp(self) -> float:
        """Seconds since the epoch, possibly fractional."""
        ...


class SystemClock:
    """Clock backed by the host's wall clock (time.time())."""

    def timestamp(self) -> float:
        return time.time()

    def __repr__(self) -> str:
        return "SystemClock()"


class FrozenClock:
    """Clock pinned to a fixed timestamp.

    Example:
        >>> clock = FrozenClock(946684800.0)
        >>> clock.advance(1.5)
        >>> clock.timestamp()
        946684801.5
    """

    _timestamp: float

    def __init__(self, timestamp: float = 0.0) -> None:
        self._timestamp = float(timestamp)

    def timestamp(self) -> float:
        return self._timestamp

    def advance(self, seconds: float) -> None:
        """Move the frozen time forward (or backward for negative seconds)."""
        self._timestamp += seconds

    def __repr__(self) -> str:
        return f"FrozenClock({self._timestamp!r})"
