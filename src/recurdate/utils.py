"""Date arithmetic helpers shared by frames and occurrence rules.

Weekdays are numbered 0=Sunday .. 6=Saturday, unlike ``date.weekday()``.
"""

from calendar import monthrange
from datetime import date, timedelta


def wday(d: date) -> int:
    """Weekday of d with Sunday as 0."""
    return d.isoweekday() % 7


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def add_months(d: date, months: int) -> date:
    """Shift d by a number of months, clamping the day to the target month."""
    total = d.year * 12 + (d.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    return date(year, month, min(d.day, days_in_month(year, month)))


def beginning_of_year(d: date) -> date:
    return date(d.year, 1, 1)


def beginning_of_month(d: date) -> date:
    return date(d.year, d.month, 1)


def beginning_of_week(d: date, week_start: int = 1) -> date:
    """First day of the week holding d, for weeks starting on week_start."""
    return d - timedelta(days=(wday(d) - week_start) % 7)


def years_between(d1: date, d2: date) -> int:
    return d2.year - d1.year


def months_between(d1: date, d2: date) -> int:
    return (d2.year * 12 + d2.month) - (d1.year * 12 + d1.month)


def make_date(year: int, month: int, mday: int) -> date | None:
    """Build a date, or None when mday does not exist in that month."""
    if mday < 1 or mday > days_in_month(year, month):
        return None
    return date(year, month, mday)


def make_date_by_day(year: int, month: int, nth: int, weekday: int) -> date | None:
    """Make a date by day like "1st Wed of Nov, 1999" or "last Fri of May".

    Positive nth counts from the first of the month, negative nth from the
    last day. Returns None if no date matches, e.g. there is no 5th
    Saturday in April 2010.
    """
    direction = 1 if nth > 0 else -1
    if direction > 0:
        edge = date(year, month, 1)
    else:
        edge = date(year, month, days_in_month(year, month))

    # Distance from the edge to the first matching weekday, walking inward
    xdiff = direction * ((direction * (weekday - wday(edge))) % 7)
    mday = edge.day + (nth - direction) * 7 + xdiff
    return make_date(year, month, mday)
