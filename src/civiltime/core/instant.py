"""Instant: an absolute point in time tagged with a display zone.

An Instant stores whole seconds since the epoch, a separate microsecond
fraction and a zone tag (Zone.UTC or Zone.LOCAL). Calendar fields are derived
from the whole seconds and the zone when the instant is created and are never
recomputed afterwards, since instants are immutable: zone switches and
arithmetic return new instants.

Equality and ordering only look at (seconds, microseconds). Two instants naming
the same absolute point compare equal whatever their zone tags.

Examples:
    >>> a = Instant(946684800, zone=Zone.UTC)
    >>> str(a)
    'Sat Jan 01 00:00:00 UTC 2000'
    >>> (a + 1.5).microseconds
    500000
    >>> a == a.to_local()
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from numbers import Real
from typing import Self

from ..exceptions import ArgumentError, InstantTypeError
from .civil import DEFAULT_CONVERTER, CalendarConverter, CalendarFields
from .common import Zone
from .formatter import format_display

MICROSECONDS_PER_SECOND = 1_000_000


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _offset_seconds(delta: object) -> float:
    if not _is_number(delta):
        raise ArgumentError(f"Offset must be a number of seconds, got {delta!r}")
    try:
        return float(delta)  # type: ignore[arg-type]
    except OverflowError as e:
        raise ArgumentError(f"Offset out of range: {delta!r}") from e


@dataclass(frozen=True, eq=False)
class Instant:
    """Seconds + microseconds since the epoch, tagged with a zone.

    Args:
        seconds: Whole seconds since 1970-01-01T00:00:00 (may be negative)
        microseconds: Sub-second fraction, 0-999999 (never negative)
        zone: Zone.UTC or Zone.LOCAL
        converter: Converter used to derive calendar fields

    Raises:
        ArgumentError: If a field is out of range or zone is Zone.NONE
        InvalidInstantError: If the host cannot break down the second count
    """

    seconds: int
    microseconds: int = 0
    zone: Zone = Zone.LOCAL
    converter: CalendarConverter = field(default=DEFAULT_CONVERTER, repr=False)

    # Derived from (seconds, zone) in __post_init__
    calendar: CalendarFields = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, int) or isinstance(self.seconds, bool):
            raise ArgumentError(f"seconds must be an integer, got {self.seconds!r}")

        if not isinstance(self.microseconds, int) or isinstance(self.microseconds, bool):
            raise ArgumentError(f"microseconds must be an integer, got {self.microseconds!r}")

        if not 0 <= self.microseconds < MICROSECONDS_PER_SECOND:
            raise ArgumentError(f"microseconds must be in 0-999999, got {self.microseconds}")

        if self.zone not in (Zone.UTC, Zone.LOCAL):
            raise ArgumentError(f"Invalid zone for an instant: {self.zone!r}")

        object.__setattr__(self, "calendar", self.converter.convert(self.seconds, self.zone))

    # =========================================================================
    # Construction helpers
    # =========================================================================

    @classmethod
    def from_float_seconds(
        cls,
        value: float,
        zone: Zone = Zone.LOCAL,
        converter: CalendarConverter = DEFAULT_CONVERTER,
    ) -> Self:
        """Build an instant from (possibly fractional) seconds since the epoch.

        The whole part is floored, so the fraction is always non-negative:
        -1.25 becomes seconds=-2, microseconds=750000. The fraction is rounded
        to the nearest microsecond.

        Raises:
            ArgumentError: If value is not a finite number
        """
        if not _is_number(value):
            raise ArgumentError(f"Seconds since epoch must be a finite number, got {value!r}")

        try:
            value = float(value)
        except OverflowError as e:
            raise ArgumentError(f"Seconds since epoch out of range: {value!r}") from e

        if not math.isfinite(value):
            raise ArgumentError(f"Seconds since epoch must be a finite number, got {value!r}")

        seconds = math.floor(value)
        microseconds = round((value - seconds) * MICROSECONDS_PER_SECOND)
        if microseconds == MICROSECONDS_PER_SECOND:
            # Fraction rounded up to a full second
            seconds += 1
            microseconds = 0

        return cls(seconds, microseconds, zone, converter)

    @classmethod
    def copy_from(cls, source: object) -> Self:
        """Duplicate another instant's full state, cached calendar included.

        Raises:
            InstantTypeError: If source is not exactly of this class
        """
        if type(source) is not cls:
            raise InstantTypeError(f"wrong argument class: expected {cls.__name__}, got {type(source).__name__}")

        duplicate = object.__new__(cls)
        for instant_field in fields(cls):
            object.__setattr__(duplicate, instant_field.name, getattr(source, instant_field.name))
        return duplicate

    def __copy__(self) -> Self:
        # Immutable: copying onto itself is a no-op
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self

    # =========================================================================
    # Zone switching
    # =========================================================================

    def to_local(self) -> Self:
        """Same absolute instant with calendar fields in the local zone."""
        if self.zone is Zone.LOCAL:
            return self
        return replace(self, zone=Zone.LOCAL)

    def to_utc(self) -> Self:
        """Same absolute instant with calendar fields in UTC."""
        if self.zone is Zone.UTC:
            return self
        return replace(self, zone=Zone.UTC)

    localtime = to_local
    gmtime = to_utc
    utc = to_utc

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, delta: float) -> Self:
        """Instant delta seconds later (earlier for negative delta), same zone.

        Raises:
            ArgumentError: If delta is not a number or the result is not finite
        """
        value = _offset_seconds(delta)
        value += self.seconds
        value += self.microseconds / MICROSECONDS_PER_SECOND
        return self.from_float_seconds(value, self.zone, self.converter)

    def subtract(self, delta: float) -> Self:
        """Instant delta seconds earlier (later for negative delta), same zone.

        The operand is always a plain offset; subtracting two instants is not supported.

        Raises:
            ArgumentError: If delta is not a number or the result is not finite
        """
        offset = _offset_seconds(delta)
        value = float(self.seconds)
        value += self.microseconds / MICROSECONDS_PER_SECOND
        value -= offset
        return self.from_float_seconds(value, self.zone, self.converter)

    def __add__(self, other: object) -> Self:
        if not _is_number(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    __radd__ = __add__

    def __sub__(self, other: object) -> Self:
        if not _is_number(other):
            return NotImplemented
        return self.subtract(other)  # type: ignore[arg-type]

    # =========================================================================
    # Comparison
    # =========================================================================

    def equals(self, other: object) -> bool:
        """True if other names the same absolute point in time.

        Zone tags are ignored. Non-instants are simply not equal.
        """
        if not isinstance(other, Instant):
            return False
        return self.seconds == other.seconds and self.microseconds == other.microseconds

    def compare(self, other: object) -> int | None:
        """Order two instants on (seconds, microseconds).

        Returns:
            -1, 0 or 1, or None if other is not an instant (no ordering)
        """
        if not isinstance(other, Instant):
            return None

        mine = (self.seconds, self.microseconds)
        theirs = (other.seconds, other.microseconds)
        if mine > theirs:
            return 1
        if mine < theirs:
            return -1
        return 0

    def between(self, low: object, high: object) -> bool:
        """True if low <= self <= high; False when either bound has no ordering."""
        above = self.compare(low)
        below = self.compare(high)
        if above is None or below is None:
            return False
        return above >= 0 and below <= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.seconds, self.microseconds))

    def __lt__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def year(self) -> int:
        return self.calendar.year

    @property
    def month(self) -> int:
        """Month, 1-12."""
        return self.calendar.month

    @property
    def day(self) -> int:
        """Day of month, 1-31."""
        return self.calendar.day

    @property
    def hour(self) -> int:
        return self.calendar.hour

    @property
    def minute(self) -> int:
        return self.calendar.minute

    @property
    def second(self) -> int:
        return self.calendar.second

    @property
    def weekday(self) -> int:
        """Day of week, 0-6 with Sunday = 0."""
        return self.calendar.weekday

    @property
    def yearday(self) -> int:
        """Day of year, 0-365 with January 1st = 0."""
        return self.calendar.yearday

    @property
    def is_dst(self) -> bool:
        """True if daylight saving was applied (always False in UTC)."""
        return self.calendar.is_dst

    @property
    def is_utc(self) -> bool:
        return self.zone is Zone.UTC

    @property
    def zone_name(self) -> str | None:
        """'UTC' or 'LOCAL'."""
        return self.zone.zone_name

    @property
    def float_seconds(self) -> float:
        """Seconds since the epoch including the microsecond fraction."""
        return self.seconds + self.microseconds / MICROSECONDS_PER_SECOND

    mon = month
    min = minute
    mday = day
    sec = second
    wday = weekday
    yday = yearday
    is_gmt = is_utc

    @property
    def usec(self) -> int:
        return self.microseconds

    def to_i(self) -> int:
        return self.seconds

    def to_f(self) -> float:
        return self.float_seconds

    def __int__(self) -> int:
        return self.seconds

    def __float__(self) -> float:
        return self.float_seconds

    # =========================================================================
    # Display
    # =========================================================================

    def display(self) -> str:
        """Fixed-layout display string, e.g. "Sat Jan 01 00:00:00 UTC 2000"."""
        return format_display(self.calendar, self.zone)

    asctime = display
    ctime = display

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(seconds={self.seconds}, "
            f"microseconds={self.microseconds}, zone={self.zone.name})"
        )
