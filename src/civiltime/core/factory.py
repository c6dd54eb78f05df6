"""Instant constructors.

InstantFactory owns the two pieces of host state instant construction depends
on, the wall clock and the local-zone rule, and builds instants from:

- the current wall clock (now)
- a raw microsecond count (from_raw_microseconds)
- a raw, possibly fractional, second count (from_raw_seconds)
- a number of seconds or another instant (at)
- civil calendar components (from_civil)
- another instant of the same kind (copy)

The two raw conventions are deliberately distinct: from_raw_microseconds(1e6)
and from_raw_seconds(1.0) name the same instant.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real

from ..clock import Clock, SystemClock
from ..exceptions import ArgumentError, InvalidInstantError
from .civil import CalendarConverter
from .common import Zone
from .instant import MICROSECONDS_PER_SECOND, Instant
from .zone import LocalZone

logger = logging.getLogger(__name__)


# =============================================================================
# at() argument variants
# =============================================================================


@dataclass(frozen=True)
class NumericSeconds:
    """at() argument given as seconds since the epoch."""

    value: float


@dataclass(frozen=True)
class InstantLike:
    """at() argument given as another instant."""

    instant: Instant


AtArgument = NumericSeconds | InstantLike


def resolve_at_argument(arg: object) -> AtArgument:
    """Classify a raw at() argument once, at the call boundary.

    Raises:
        ArgumentError: If arg is missing (None/False) or neither a number nor an instant
    """
    if arg is None or arg is False:
        raise ArgumentError("Need at least one argument.")

    if isinstance(arg, Instant):
        return InstantLike(arg)

    if isinstance(arg, Real) and not isinstance(arg, bool):
        try:
            return NumericSeconds(float(arg))
        except OverflowError as e:
            raise ArgumentError(f"Seconds since epoch out of range: {arg!r}") from e

    raise ArgumentError(f"Cannot interpret {arg!r} as seconds since epoch")


# =============================================================================
# Factory
# =============================================================================


class InstantFactory:
    """Builds instants against an injected clock and local-zone rule.

    Args:
        clock: Wall-clock source for now() (default: SystemClock())
        local_zone: Local offset/DST rule for Zone.LOCAL instants and
                    from_civil() (default: the host's rule)

    Example:
        >>> factory = InstantFactory(clock=FrozenClock(0.0), local_zone=FixedOffsetZone(3600))
        >>> factory.now().hour
        1
    """

    # Public attributes
    clock: Clock
    converter: CalendarConverter

    def __init__(self, clock: Clock | None = None, local_zone: LocalZone | None = None) -> None:
        self.clock = clock if clock is not None else SystemClock()
        self.converter = CalendarConverter(local_zone)

    @property
    def local_zone(self) -> LocalZone:
        return self.converter.local_zone

    def now(self) -> Instant:
        """Current wall-clock time in the local zone.

        Only whole seconds are sampled; microseconds is always 0.
        """
        return Instant(math.floor(self.clock.timestamp()), 0, Zone.LOCAL, self.converter)

    def from_raw_microseconds(self, value: float) -> Instant:
        """Local-zone instant from microseconds since the epoch.

        The sub-second part is discarded: from_raw_microseconds(1_500_000.0)
        has seconds=1, microseconds=0.

        Raises:
            ArgumentError: If value is not a finite number
        """
        if not isinstance(value, Real) or isinstance(value, bool):
            raise ArgumentError(f"Microseconds since epoch must be a finite number, got {value!r}")

        try:
            value = float(value)
        except OverflowError as e:
            raise ArgumentError(f"Microseconds since epoch out of range: {value!r}") from e

        if not math.isfinite(value):
            raise ArgumentError(f"Microseconds since epoch must be a finite number, got {value!r}")

        seconds = math.floor(value / MICROSECONDS_PER_SECOND)
        return Instant(seconds, 0, Zone.LOCAL, self.converter)

    def from_raw_seconds(self, value: float, zone: Zone = Zone.LOCAL) -> Instant:
        """Instant from (possibly fractional) seconds since the epoch.

        from_raw_seconds(1.5) has seconds=1, microseconds=500000.

        Raises:
            ArgumentError: If value is not a finite number
        """
        return Instant.from_float_seconds(value, zone, self.converter)

    def at(self, arg: Instant | float | None) -> Instant:
        """Instant at a number of seconds since the epoch, or at another instant's second.

        A number gives a local-zone instant with its fraction kept. An instant
        gives its whole second (fraction dropped) and keeps its zone.

        Raises:
            ArgumentError: If arg is missing or unusable
        """
        match resolve_at_argument(arg):
            case InstantLike(instant):
                return self.from_raw_seconds(float(instant.seconds), instant.zone)
            case NumericSeconds(value):
                return self.from_raw_seconds(value)

    def from_civil(
        self,
        year: float,
        month: float = 1,
        day: float = 1,
        hour: float = 0,
        minute: float = 0,
        second: float = 0,
        microsecond: float = 0,
    ) -> Instant:
        """Instant from civil calendar components, tagged Zone.UTC.

        Components are floored and converted with the local-zone rule even
        though the result is tagged UTC. microsecond is accepted but not used;
        the result always has microseconds=0.

        Raises:
            ArgumentError: If a component is not finite
            InvalidInstantError: If the result is before the epoch or cannot be represented
        """
        seconds = self.converter.to_epoch(year, month, day, hour, minute, second)
        if seconds < 0:
            logger.debug(
                "Rejected civil time %s-%s-%s %s:%s:%s: %d seconds is before the epoch",
                year, month, day, hour, minute, second, seconds,
            )
            raise InvalidInstantError("Not a valid time.")

        return self.from_raw_seconds(float(seconds), Zone.UTC)

    def copy(self, source: object, kind: type[Instant] = Instant) -> Instant:
        """Duplicate source's full state.

        Raises:
            InstantTypeError: If source is not exactly of class kind
        """
        return kind.copy_from(source)

    def __repr__(self) -> str:
        return f"InstantFactory(clock={self.clock!r}, local_zone={self.local_zone!r})"


DEFAULT_FACTORY = InstantFactory()
