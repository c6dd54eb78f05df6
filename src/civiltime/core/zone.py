"""Local-zone rules used to derive civil fields for Zone.LOCAL instants.

The local rule is host state (the process time zone configuration). It is
modelled as an injected provider so callers can pin it:

- SystemLocalZone: the platform's localtime()/mktime() primitives
- FixedOffsetZone: a constant offset from UTC with a constant DST flag

Providers work on time.struct_time and plain 9-tuples, the same shapes the
platform primitives use.
"""

from __future__ import annotations

import calendar
import time
from typing import Protocol

# (year, month, day, hour, minute, second, weekday, yearday, isdst) as accepted by time.mktime()
CivilTuple = tuple[int, int, int, int, int, int, int, int, int]


class LocalZone(Protocol):
    """Observer's local offset/DST rule."""

    def localtime(self, seconds: int) -> time.struct_time:
        """Break down epoch seconds into local civil fields.

        Raises:
            OverflowError, OSError or ValueError: If the host cannot represent the second count
        """
        ...

    def mktime(self, fields: CivilTuple) -> float:
        """Convert local civil fields back into epoch seconds.

        Out-of-range fields are normalized the way the platform's mktime() does.

        Raises:
            OverflowError, OSError or ValueError: If the host cannot represent the result
        """
        ...


class SystemLocalZone:
    """Local rule of the running process (TZ environment / system configuration).

    Results depend on the host and are not portable across machines.
    """

    def localtime(self, seconds: int) -> time.struct_time:
        return time.localtime(seconds)

    def mktime(self, fields: CivilTuple) -> float:
        return time.mktime(fields)

    def __repr__(self) -> str:
        return "SystemLocalZone()"


class FixedOffsetZone:
    """Local rule with a constant UTC offset.

    Args:
        offset_seconds: Seconds east of UTC (e.g. 3600 for UTC+1)
        is_dst: DST flag reported for every instant in this zone
    """

    offset_seconds: int
    is_dst: bool

    def __init__(self, offset_seconds: int = 0, is_dst: bool = False) -> None:
        self.offset_seconds = int(offset_seconds)
        self.is_dst = is_dst

    def localtime(self, seconds: int) -> time.struct_time:
        shifted = time.gmtime(seconds + self.offset_seconds)
        return time.struct_time((*shifted[:8], 1 if self.is_dst else 0))

    def mktime(self, fields: CivilTuple) -> float:
        year, month, *rest = fields
        # timegm() rolls over days and smaller units but not months
        years, month_index = divmod(month - 1, 12)
        normalized = (year + years, month_index + 1, *rest)
        return float(calendar.timegm(normalized) - self.offset_seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedOffsetZone):
            return NotImplemented
        return (self.offset_seconds, self.is_dst) == (other.offset_seconds, other.is_dst)

    def __hash__(self) -> int:
        return hash((self.offset_seconds, self.is_dst))

    def __repr__(self) -> str:
        return f"FixedOffsetZone(offset_seconds={self.offset_seconds}, is_dst={self.is_dst})"
