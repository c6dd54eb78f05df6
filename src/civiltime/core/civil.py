"""Conversion between epoch seconds and civil calendar fields.

This module derives the human-oriented decomposition of an instant (year,
month, day, hour, minute, second, weekday, yearday, DST flag) from its whole
second count and zone tag, and converts civil fields back to epoch seconds.

Field conventions:
    - month: 1-12
    - day: 1-31
    - weekday: 0-6, Sunday = 0
    - yearday: 0-365, January 1st = 0
    - is_dst: always False for Zone.UTC

Only the proleptic Gregorian calendar provided by the host's time functions is
supported. UTC fields come from time.gmtime(); LOCAL fields come from the
injected LocalZone provider.
"""

from __future__ import annotations

import logging
import math
import time
from typing import NamedTuple

from ..exceptions import ArgumentError, InvalidInstantError
from .common import Zone
from .zone import CivilTuple, LocalZone, SystemLocalZone

logger = logging.getLogger(__name__)

# Errors the platform time functions raise for unrepresentable values
_PLATFORM_ERRORS = (OverflowError, OSError, ValueError)


class CalendarFields(NamedTuple):
    """Civil calendar fields of an instant under a given zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int
    yearday: int
    is_dst: bool

    @classmethod
    def from_struct_time(cls, value: time.struct_time) -> CalendarFields:
        """Build fields from a platform struct_time.

        struct_time counts weekdays from Monday = 0 and yeardays from 1; both
        are shifted to the Sunday = 0 / zero-based conventions used here.
        """
        return cls(
            year=value.tm_year,
            month=value.tm_mon,
            day=value.tm_mday,
            hour=value.tm_hour,
            minute=value.tm_min,
            second=value.tm_sec,
            weekday=(value.tm_wday + 1) % 7,
            yearday=value.tm_yday - 1,
            is_dst=value.tm_isdst > 0,
        )


class CalendarConverter:
    """Converts (seconds, zone) pairs to CalendarFields and civil fields to epoch seconds.

    Args:
        local_zone: Local offset/DST rule used for Zone.LOCAL (default: SystemLocalZone())
    """

    local_zone: LocalZone

    def __init__(self, local_zone: LocalZone | None = None) -> None:
        self.local_zone = local_zone if local_zone is not None else SystemLocalZone()

    def convert(self, seconds: int, zone: Zone) -> CalendarFields:
        """Derive calendar fields for a whole second count.

        Args:
            seconds: Whole seconds since the epoch (may be negative)
            zone: Zone.UTC or Zone.LOCAL

        Returns:
            CalendarFields for the given second under the zone's rule

        Raises:
            ArgumentError: If zone is Zone.NONE
            InvalidInstantError: If the host cannot represent the second count
        """
        if zone is Zone.UTC:
            breakdown = time.gmtime
        elif zone is Zone.LOCAL:
            breakdown = self.local_zone.localtime
        else:
            raise ArgumentError(f"Cannot derive calendar fields for zone {zone.name}")

        try:
            value = breakdown(seconds)
        except _PLATFORM_ERRORS as e:
            logger.debug("Calendar conversion of %d seconds (%s) failed: %s", seconds, zone.name, e)
            raise InvalidInstantError(f"Cannot represent {seconds} seconds since epoch: {e}") from e

        return CalendarFields.from_struct_time(value)

    def to_epoch(
        self,
        year: float,
        month: float = 1,
        day: float = 1,
        hour: float = 0,
        minute: float = 0,
        second: float = 0,
    ) -> int:
        """Convert civil fields to epoch seconds using the local-zone rule.

        Each component is floored. The DST flag is left for the rule to
        determine, and out-of-range components are normalized by it.

        Returns:
            Whole epoch seconds (may be negative)

        Raises:
            ArgumentError: If a component is not finite
            InvalidInstantError: If the host cannot represent the result
        """
        components = (year, month, day, hour, minute, second)
        if not all(math.isfinite(component) for component in components):
            raise ArgumentError(f"Civil time components must be finite, got {components}")

        floored = [math.floor(component) for component in components]
        fields: CivilTuple = (*floored, 0, 0, -1)  # type: ignore[assignment]

        try:
            return int(self.local_zone.mktime(fields))
        except _PLATFORM_ERRORS as e:
            logger.debug("Civil time %s cannot be converted to epoch seconds: %s", floored, e)
            raise InvalidInstantError(f"Not a valid time: {e}") from e

    def __repr__(self) -> str:
        return f"CalendarConverter(local_zone={self.local_zone!r})"


DEFAULT_CONVERTER = CalendarConverter()
