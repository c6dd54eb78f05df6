"""civiltime exception classes."""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""


class ArgumentError(CivilTimeError, ValueError):
    """An argument could not be used to build an instant."""


class InvalidInstantError(CivilTimeError, ValueError):
    """The second count cannot be represented as a civil time on this host."""


class InstantTypeError(CivilTimeError, TypeError):
    """A copy source is not the same concrete kind as its target."""
