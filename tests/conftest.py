"""Shared test fixtures for civiltime tests."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Generator

import pytest

from src.civiltime.clock import FrozenClock
from src.civiltime.core.civil import CalendarConverter
from src.civiltime.core.factory import InstantFactory
from src.civiltime.core.zone import FixedOffsetZone

# 2000-01-01T00:00:00Z, a Saturday
Y2K_SECONDS = 946684800


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Clock pinned to 2000-01-01T00:00:00.75Z."""
    return FrozenClock(Y2K_SECONDS + 0.75)


@pytest.fixture
def utc_converter() -> CalendarConverter:
    """Converter whose local zone is UTC+0 without DST."""
    return CalendarConverter(FixedOffsetZone(0))


@pytest.fixture
def cet_converter() -> CalendarConverter:
    """Converter whose local zone is UTC+1 without DST."""
    return CalendarConverter(FixedOffsetZone(3600))


@pytest.fixture
def factory(frozen_clock: FrozenClock) -> InstantFactory:
    """Factory with a frozen clock and a UTC+0 local zone."""
    return InstantFactory(clock=frozen_clock, local_zone=FixedOffsetZone(0))


@pytest.fixture
def cet_factory(frozen_clock: FrozenClock) -> InstantFactory:
    """Factory with a frozen clock and a UTC+1 local zone."""
    return InstantFactory(clock=frozen_clock, local_zone=FixedOffsetZone(3600))


@pytest.fixture
def system_tz() -> Generator[Callable[[str], None]]:
    """Switch the process time zone (POSIX TZ string) for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    original = os.environ.get("TZ")

    def set_tz(value: str) -> None:
        os.environ["TZ"] = value
        time.tzset()

    yield set_tz

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()
