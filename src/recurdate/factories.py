"""Convenience constructors deriving omitted rule parameters from the anchor date."""

from datetime import date
from typing import Iterable

from recurdate.config import get_default_week_start
from recurdate.enumerator import DateEnumerator, DateListEnumerator
from recurdate.rules import (
    Daily,
    MonthlyByDay,
    MonthlyByMonthday,
    Weekly,
    YearlyByDay,
    YearlyByMonthday,
)
from recurdate.utils import wday as weekday_of
from recurdate.validation import validate_date


def _nth_of(d: date) -> int:
    """Ordinal of d's weekday within its month (1..5)."""
    return (d.day + 6) // 7


def yearly_by_monthday(
    first_date: date,
    month: int | None = None,
    mday: int | None = None,
    interval: int = 1,
) -> DateEnumerator:
    """Every ``interval`` years on month/mday, defaulting to first_date's."""
    validate_date(first_date, "first_date")
    rule = YearlyByMonthday(
        month=first_date.month if month is None else month,
        mday=first_date.day if mday is None else mday,
    )
    return DateEnumerator(rule, first_date, interval=interval)


def yearly_by_day(
    first_date: date,
    month: int | None = None,
    nth: int | None = None,
    wday: int | None = None,
    interval: int = 1,
) -> DateEnumerator:
    """Every ``interval`` years on the nth weekday of a month.

    Defaults follow first_date: 2018-08-03 gives the 1st Friday of August.
    """
    validate_date(first_date, "first_date")
    rule = YearlyByDay(
        month=first_date.month if month is None else month,
        nth=_nth_of(first_date) if nth is None else nth,
        wday=weekday_of(first_date) if wday is None else wday,
    )
    return DateEnumerator(rule, first_date, interval=interval)


def monthly_by_monthday(
    first_date: date,
    mday: int | None = None,
    interval: int = 1,
) -> DateEnumerator:
    validate_date(first_date, "first_date")
    rule = MonthlyByMonthday(mday=first_date.day if mday is None else mday)
    return DateEnumerator(rule, first_date, interval=interval)


def monthly_by_day(
    first_date: date,
    nth: int | None = None,
    wday: int | None = None,
    interval: int = 1,
) -> DateEnumerator:
    validate_date(first_date, "first_date")
    rule = MonthlyByDay(
        nth=_nth_of(first_date) if nth is None else nth,
        wday=weekday_of(first_date) if wday is None else wday,
    )
    return DateEnumerator(rule, first_date, interval=interval)


def weekly(
    first_date: date,
    wday: int | None = None,
    wkst: int | None = None,
    interval: int = 1,
) -> DateEnumerator:
    """Every ``interval`` weeks on a weekday.

    Args:
        first_date: Anchor date.
        wday: Target weekday (0=Sunday). Defaults to first_date's weekday.
        wkst: Week start weekday. Defaults to the configured week start.
        interval: Weeks between occurrences.
    """
    validate_date(first_date, "first_date")
    rule = Weekly(wday=weekday_of(first_date) if wday is None else wday)
    return DateEnumerator(
        rule,
        first_date,
        interval=interval,
        week_start=get_default_week_start() if wkst is None else wkst,
    )


def daily(first_date: date, interval: int = 1) -> DateEnumerator:
    return DateEnumerator(Daily(), first_date, interval=interval)


def date_list(dates: Iterable[date] = ()) -> DateListEnumerator:
    return DateListEnumerator(dates)
