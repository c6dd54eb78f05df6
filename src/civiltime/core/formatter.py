"""Fixed-layout display of calendar fields.

Layout: "{Weekday} {Month} {day:02} {hour:02}:{minute:02}:{second:02} {UTC }{year}"

Examples:
    "Sat Jan 01 00:00:00 UTC 2000"  - Zone.UTC
    "Thu Jan 01 01:00:00 1970"      - Zone.LOCAL (no zone marker)

Names come from fixed tables, never from the host locale.
"""

from __future__ import annotations

from .civil import CalendarFields
from .common import Zone

# Indexed by CalendarFields.weekday (Sunday = 0)
WEEKDAY_NAMES: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Indexed by CalendarFields.month - 1
MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_display(fields: CalendarFields, zone: Zone) -> str:
    """Render calendar fields in the fixed display layout.

    Args:
        fields: Calendar fields to render
        zone: Zone tag; only Zone.UTC adds a marker before the year

    Returns:
        Display string, e.g. "Sat Jan 01 00:00:00 UTC 2000"
    """
    zone_marker = "UTC " if zone is Zone.UTC else ""
    return (
        f"{WEEKDAY_NAMES[fields.weekday]} {MONTH_NAMES[fields.month - 1]} {fields.day:02d} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d} {zone_marker}{fields.year}"
    )
