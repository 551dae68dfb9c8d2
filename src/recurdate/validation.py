"""Parameter validation for recurrence rules and enumerators."""

from datetime import date, datetime
from typing import Any

# Longest month length for each month; Feb allows 29 for leap years.
_MAX_MDAY = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class ValidationError(Exception):
    """Raised when a rule or enumerator is configured with invalid parameters."""


def validate_date(value: Any, name: str = "date") -> date:
    """Check that value is a plain calendar date.

    datetime is a subclass of date but compares unequal to dates,
    so it is rejected rather than silently mixed in.

    Raises:
        ValidationError: If value is not a date
    """
    if isinstance(value, datetime) or not isinstance(value, date):
        raise ValidationError(f"{name} must be a datetime.date, got {value!r}")
    return value


def validate_interval(interval: int) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise ValidationError(f"interval must be an integer, got {interval!r}")
    if interval < 1:
        raise ValidationError(f"interval must be >= 1, got {interval}")
    return interval


def validate_weekday(value: int, name: str = "wday") -> int:
    """Check a weekday number (0=Sunday .. 6=Saturday)."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ValidationError(f"{name} must be in 0..6 (0=Sunday), got {value!r}")
    return value


def validate_nth(nth: int) -> int:
    """Check an nth-weekday ordinal.

    No month holds more than five of any weekday, so |nth| > 5 never matches.
    """
    if isinstance(nth, bool) or not isinstance(nth, int):
        raise ValidationError(f"nth must be an integer, got {nth!r}")
    if nth == 0 or not -5 <= nth <= 5:
        raise ValidationError(f"nth must be in -5..-1 or 1..5, got {nth}")
    return nth


def validate_month(month: int) -> int:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(f"month must be in 1..12, got {month!r}")
    return month


def validate_mday(mday: int, month: int | None = None) -> int:
    """Check a day-of-month, optionally against a fixed month.

    With a month given, days that no year can hold (Feb 30, Apr 31) are
    rejected since a rule built on them would never produce a date.
    """
    if isinstance(mday, bool) or not isinstance(mday, int) or not 1 <= mday <= 31:
        raise ValidationError(f"mday must be in 1..31, got {mday!r}")
    if month is not None and mday > _MAX_MDAY[month - 1]:
        raise ValidationError(f"day {mday} never occurs in month {month}")
    return mday


def validate_duration(begin: date | None, until: date | None) -> None:
    """Check that a clip window is not inverted.

    Raises:
        ValidationError: If both bounds are set and begin > until
    """
    if begin is not None and until is not None and begin > until:
        raise ValidationError(
            f"duration begin {begin.isoformat()} is after until {until.isoformat()}"
        )
