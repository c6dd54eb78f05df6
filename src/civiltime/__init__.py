"""
civiltime: Civil-time instants with UTC and local-zone calendar fields.

An Instant is an absolute point in time (seconds + microseconds since the
epoch) tagged with either the UTC or the local zone. The module-level
constructors below use the host clock and the host's local-zone rule; build an
InstantFactory to inject deterministic ones.
"""

from __future__ import annotations

from .clock import Clock, FrozenClock, SystemClock
from .core import (
    CalendarConverter,
    CalendarFields,
    FixedOffsetZone,
    Instant,
    InstantFactory,
    LocalZone,
    SystemLocalZone,
    Zone,
)
from .core.factory import DEFAULT_FACTORY
from .exceptions import ArgumentError, CivilTimeError, InstantTypeError, InvalidInstantError

__version__ = "0.1.0"

now = DEFAULT_FACTORY.now
at = DEFAULT_FACTORY.at
from_raw_microseconds = DEFAULT_FACTORY.from_raw_microseconds
from_raw_seconds = DEFAULT_FACTORY.from_raw_seconds
from_civil = DEFAULT_FACTORY.from_civil
copy = DEFAULT_FACTORY.copy

__all__ = [
    "__version__",
    # Values
    "Instant",
    "Zone",
    "CalendarFields",
    # Host capabilities
    "Clock",
    "FrozenClock",
    "SystemClock",
    "LocalZone",
    "FixedOffsetZone",
    "SystemLocalZone",
    "CalendarConverter",
    "InstantFactory",
    "DEFAULT_FACTORY",
    # Constructors bound to DEFAULT_FACTORY
    "now",
    "at",
    "from_raw_microseconds",
    "from_raw_seconds",
    "from_civil",
    "copy",
    # Exceptions
    "CivilTimeError",
    "ArgumentError",
    "InvalidInstantError",
    "InstantTypeError",
]
