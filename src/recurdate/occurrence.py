"""Occurrence calculation: the single date a rule picks inside one frame."""

from datetime import date, timedelta

from recurdate.rules import (
    Daily,
    MonthlyByDay,
    MonthlyByMonthday,
    Rule,
    Weekly,
    YearlyByDay,
    YearlyByMonthday,
)
from recurdate.utils import beginning_of_week, make_date, make_date_by_day, wday


def occurrence_in_frame(rule: Rule, frame_start: date, week_start: int = 1) -> date | None:
    """Compute the occurrence of rule in the frame starting at frame_start.

    Returns None when the frame holds no occurrence, e.g. the 31st of a
    30-day month or a 5th Saturday in a month with four. That is a normal
    outcome; callers move on to the next frame.

    Args:
        rule: Recurrence rule variant.
        frame_start: First date of the frame (Jan 1, the 1st of a month,
            the week start, or the day itself).
        week_start: First weekday of a week, only used by Weekly rules.

    Raises:
        TypeError: If rule is not a known rule variant.
    """
    if isinstance(rule, YearlyByDay):
        return make_date_by_day(frame_start.year, rule.month, rule.nth, rule.wday)
    elif isinstance(rule, YearlyByMonthday):
        return make_date(frame_start.year, rule.month, rule.mday)
    elif isinstance(rule, MonthlyByDay):
        return make_date_by_day(frame_start.year, frame_start.month, rule.nth, rule.wday)
    elif isinstance(rule, MonthlyByMonthday):
        return make_date(frame_start.year, frame_start.month, rule.mday)
    elif isinstance(rule, Weekly):
        return _weekly_occurrence(rule.wday, frame_start, week_start)
    elif isinstance(rule, Daily):
        return frame_start
    raise TypeError(f"Unknown rule type: {type(rule).__name__}")


def _weekly_occurrence(weekday: int, reference: date, week_start: int) -> date | None:
    # Sun Mon Tue Wed Thu Fri Sat Sun Mon Tue ...
    #  0   1   2   3   4   5   6   0   1   2  ...
    bow = beginning_of_week(reference, week_start)
    candidate = bow + timedelta(days=(weekday - wday(bow)) % 7)
    if candidate < reference:
        return None
    return candidate
