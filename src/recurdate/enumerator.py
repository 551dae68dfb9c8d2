"""Date enumerators: rule-based recurrences and explicit date lists."""

from datetime import date
from typing import Iterable, Iterator, Protocol

from recurdate.frames import DateFrame
from recurdate.logging import get_logger
from recurdate.occurrence import occurrence_in_frame
from recurdate.rules import RULE_TYPES, Rule
from recurdate.validation import (
    ValidationError,
    validate_date,
    validate_duration,
    validate_interval,
)


class DateSequence(Protocol):
    """Protocol for ordered date sequences that can be merged or clipped."""

    def produce(self) -> Iterator[date]:
        """Yield dates in ascending order."""
        ...

    def rewind(self) -> "DateSequence":
        """Start the next traversal over from the beginning."""
        ...


class DateEnumerator:
    """Enumerate the occurrences of a recurrence rule.

    Steps through frames (years, months, weeks or days) from ``first_date``
    every ``interval`` frames and yields the date the rule picks in each.
    The sequence is infinite unless ``until`` is set.

    ``first_date`` always counts as the first occurrence, even if it does
    not match the rule (cf. DTSTART vs RRULE in RFC 5545):

        enum = DateEnumerator(Weekly(wday=2), first_date=date(2021, 8, 2))
        # 2021-08-02 (Mon), 2021-08-03 (Tue), 2021-08-10 (Tue), ...
    """

    def __init__(
        self,
        rule: Rule,
        first_date: date,
        interval: int = 1,
        week_start: int | None = None,
        until: date | None = None,
    ) -> None:
        """Initialize a DateEnumerator.

        Args:
            rule: Rule variant selecting the date within each frame.
            first_date: Anchor date. Always yielded first and fixes the
                frame cadence.
            interval: Number of frames between occurrences (>= 1).
            week_start: First weekday of a week (0=Sunday). Only weekly
                rules use it; defaults to the configured week start.
            until: Optional inclusive upper bound.

        Raises:
            ValidationError: If any parameter is out of range.
        """
        if not isinstance(rule, RULE_TYPES):
            raise ValidationError(f"Unknown rule: {rule!r}")
        self._rule = rule
        self._first_date = validate_date(first_date, "first_date")
        self._interval = validate_interval(interval)
        self._frame = DateFrame(
            first_date, interval=interval, week_start=week_start, kind=rule.frame_kind
        )
        self._duration_begin = first_date
        self._duration_until: date | None = None
        self._log = get_logger(__name__).bind(rule=repr(rule))
        if until is not None:
            self.until(until)

    @property
    def rule(self) -> Rule:
        return self._rule

    @property
    def first_date(self) -> date:
        return self._first_date

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def week_start(self) -> int:
        return self._frame.week_start

    @property
    def duration_begin(self) -> date:
        return self._duration_begin

    @property
    def duration_until(self) -> date | None:
        return self._duration_until

    def produce(self) -> Iterator[date]:
        """Yield occurrences in ascending order within the clip window."""
        if self._between_duration(self._first_date):
            yield self._first_date

        for frame in self._frame.produce():
            # Sparse rules may skip many frames in a row; checking the frame
            # itself keeps a bounded run from searching past until.
            if self._duration_until is not None and self._duration_until < frame:
                return

            occurrence = occurrence_in_frame(self._rule, frame, self._frame.week_start)
            if occurrence is None:
                continue

            if self._duration_until is not None and self._duration_until < occurrence:
                return

            # The first frame may hold an occurrence before first_date, e.g.
            # "every August 1st" anchored on August 15th. Nothing precedes
            # the anchor, even when forward_to moved the bound before it.
            if occurrence < max(self._duration_begin, self._first_date):
                continue

            # Already yielded as the anchor
            if occurrence == self._first_date:
                continue

            yield occurrence

    def __iter__(self) -> Iterator[date]:
        return self.produce()

    def forward_to(self, d: date) -> "DateEnumerator":
        """Set the new beginning of the duration.

        The frame cadence stays that of ``first_date``. For a yearly rule
        with interval 2 anchored on 2021-08-01, ``forward_to(2022-08-01)``
        gives 2023-08-01, 2025-08-01, ...; anchoring on 2022-08-01 instead
        would give 2022-08-01, 2024-08-01, ...
        """
        validate_date(d, "forward_to")
        validate_duration(d, self._duration_until)
        self._frame.forward_to(d)
        self._duration_begin = d
        self._log.debug("enumerator_forwarded", begin=d.isoformat())
        return self

    def until(self, d: date) -> "DateEnumerator":
        """Set the new end of the duration (inclusive)."""
        validate_date(d, "until")
        validate_duration(self._duration_begin, d)
        self._duration_until = d
        self._log.debug("enumerator_until", until=d.isoformat())
        return self

    def rewind(self) -> "DateEnumerator":
        """Restart frame iteration from the first frame.

        The duration bounds are kept.
        """
        self._frame.rewind()
        return self

    def _between_duration(self, d: date) -> bool:
        return self._duration_begin <= d and (
            self._duration_until is None or d <= self._duration_until
        )

    def __repr__(self) -> str:
        return (
            f"DateEnumerator({self._rule!r}, first_date={self._first_date.isoformat()}, "
            f"interval={self._interval})"
        )


class DateListEnumerator:
    """Enumerate an explicit list of dates in ascending order.

    Shares the clip window of ``DateEnumerator`` (``forward_to`` and
    ``until``) but has no anchor date: there is no lower bound until
    ``forward_to`` sets one.
    """

    def __init__(self, dates: Iterable[date] = ()) -> None:
        self._dates: list[date] = [validate_date(d) for d in dates]
        self._duration_begin: date | None = None
        self._duration_until: date | None = None

    def add(self, d: date) -> "DateListEnumerator":
        self._dates.append(validate_date(d))
        return self

    def __len__(self) -> int:
        return len(self._dates)

    @property
    def duration_begin(self) -> date | None:
        return self._duration_begin

    @property
    def duration_until(self) -> date | None:
        return self._duration_until

    def produce(self) -> Iterator[date]:
        for d in sorted(self._dates):
            if self._duration_begin is not None and d < self._duration_begin:
                continue
            if self._duration_until is not None and d > self._duration_until:
                return
            yield d

    def __iter__(self) -> Iterator[date]:
        return self.produce()

    def forward_to(self, d: date) -> "DateListEnumerator":
        validate_date(d, "forward_to")
        validate_duration(d, self._duration_until)
        self._duration_begin = d
        return self

    def until(self, d: date) -> "DateListEnumerator":
        validate_date(d, "until")
        validate_duration(self._duration_begin, d)
        self._duration_until = d
        return self

    def rewind(self) -> "DateListEnumerator":
        # Every produce() sorts afresh, so there is no cursor to reset
        return self

    def __repr__(self) -> str:
        return f"DateListEnumerator({len(self._dates)} dates)"
