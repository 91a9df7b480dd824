"""Custom exception hierarchy for weekly-moment arithmetic."""

from __future__ import annotations

from typing import Any


class WeekTimeError(Exception):
    """Base exception for all weektime errors."""


# --- Configuration ---
class ConfigError(WeekTimeError):
    """Invalid or unreadable configuration."""


# --- Arguments ---
class InvalidArgumentError(WeekTimeError, ValueError):
    """Missing required input or a value outside its valid range."""


class ArithmeticOverflowError(WeekTimeError, OverflowError):
    """Amount does not fit the signed 64-bit range used for arithmetic."""


# --- Conversion ---
class ConversionError(WeekTimeError):
    """A temporal source cannot supply the requested facets."""

    def __init__(self, message: str, source: Any = None):
        self.source = source
        super().__init__(message)


# --- Unsupported units / fields ---
class UnsupportedTemporalTypeError(WeekTimeError):
    """A built-in unit or field is recognized but not supported here."""


class UnsupportedUnitError(UnsupportedTemporalTypeError):
    """Unit is not one of the day-or-smaller units (e.g. WEEKS, MONTHS)."""


class UnsupportedFieldError(UnsupportedTemporalTypeError):
    """Field is date-based or otherwise not readable from a weekly moment."""
