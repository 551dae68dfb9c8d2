"""Calendar views over recurring date sequences."""

from abc import ABC, abstractmethod
from collections import deque
from datetime import date
from itertools import dropwhile, islice, takewhile
from typing import Iterator

from recurdate.enumerator import DateSequence
from recurdate.validation import validate_date, validate_duration


class Calendar(ABC):
    """Abstract base class for calendars."""

    @abstractmethod
    def dt_range(self, start_dt: date, end_dt: date) -> Iterator[date]:
        """Generate valid dates in range [start_dt, end_dt]."""
        pass

    @abstractmethod
    def dt_offset(self, dt: date, periods: int) -> date:
        """Shift date by N calendar periods."""
        pass


class RecurrenceCalendar(Calendar):
    """Calendar whose valid dates are the occurrences of a date sequence.

    Every query rewinds the sequence and reads it from the start, so the
    calendar should own its sequence rather than share it with other
    consumers.

    Example:
        paydays = RecurrenceCalendar(monthly_by_monthday(date(2024, 1, 25)))
        list(paydays.dt_range(date(2024, 3, 1), date(2024, 5, 31)))
        # [2024-03-25, 2024-04-25, 2024-05-25]
        paydays.dt_offset(date(2024, 3, 1), 2)
        # 2024-04-25
    """

    def __init__(self, sequence: DateSequence) -> None:
        self._sequence = sequence

    @property
    def sequence(self) -> DateSequence:
        return self._sequence

    def _scan(self) -> Iterator[date]:
        self._sequence.rewind()
        return self._sequence.produce()

    def dt_range(self, start_dt: date, end_dt: date) -> Iterator[date]:
        validate_date(start_dt, "start_dt")
        validate_date(end_dt, "end_dt")
        validate_duration(start_dt, end_dt)
        tail = dropwhile(lambda d: d < start_dt, self._scan())
        yield from takewhile(lambda d: d <= end_dt, tail)

    def dt_offset(self, dt: date, periods: int) -> date:
        """Move ``periods`` occurrences away from dt.

        Positive periods count occurrences strictly after dt, negative
        periods occurrences strictly before it. Zero returns dt unchanged.

        Raises:
            ValueError: If the sequence holds fewer occurrences than asked.
        """
        validate_date(dt, "dt")
        if periods == 0:
            return dt

        if periods > 0:
            after = dropwhile(lambda d: d <= dt, self._scan())
            found = next(islice(after, periods - 1, None), None)
        else:
            before = deque(takewhile(lambda d: d < dt, self._scan()), maxlen=-periods)
            found = before[0] if len(before) == -periods else None

        if found is None:
            raise ValueError(
                f"Sequence has fewer than {abs(periods)} occurrences "
                f"{'after' if periods > 0 else 'before'} {dt.isoformat()}"
            )
        return found
