"""Core components of the civil-time value type.

This package contains the instant value, the calendar conversion it relies on,
its display formatting and its constructors.
"""

from .civil import CalendarConverter, CalendarFields
from .common import Zone
from .factory import InstantFactory, InstantLike, NumericSeconds, resolve_at_argument
from .formatter import MONTH_NAMES, WEEKDAY_NAMES, format_display
from .instant import Instant
from .zone import FixedOffsetZone, LocalZone, SystemLocalZone

__all__ = [
    # Common types
    "Zone",
    # Calendar conversion
    "CalendarConverter",
    "CalendarFields",
    # Local-zone rules
    "FixedOffsetZone",
    "LocalZone",
    "SystemLocalZone",
    # Display
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "format_display",
    # Instant and constructors
    "Instant",
    "InstantFactory",
    "InstantLike",
    "NumericSeconds",
    "resolve_at_argument",
]
