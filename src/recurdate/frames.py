"""Frame steppers: iterate the calendar in years, months, weeks or days."""

from datetime import date, timedelta
from typing import Iterator, Literal

from recurdate.config import get_default_week_start
from recurdate.utils import (
    add_months,
    beginning_of_month,
    beginning_of_week,
    beginning_of_year,
    months_between,
    years_between,
)
from recurdate.validation import (
    validate_date,
    validate_interval,
    validate_weekday,
)

FrameKind = Literal["year", "month", "week", "day"]


class DateFrame:
    """Enumerate the first date of each frame of a year, month, week, or day.

    ``first_date`` is an arbitrary date of the first frame; every produced
    frame start is ``interval`` frames after the previous one.

    Example:
        DateFrame(date(2021, 6, 1), interval=2, kind="year")
        # 2021-01-01, 2023-01-01, 2025-01-01, ...

        DateFrame(date(2021, 6, 10), interval=2, kind="month")
        # 2021-06-01, 2021-08-01, 2021-10-01, ...

        # 2021-06-08 is a Tuesday; weekly frames follow week_start
        DateFrame(date(2021, 6, 8), interval=2, week_start=1, kind="week")
        # 2021-06-07, 2021-06-21, 2021-07-05, ...

    ``forward_to`` jumps to a later frame without walking the frames in
    between, keeping the cadence of the original first frame:

        DateFrame(date(2021, 1, 1), 2, kind="year").forward_to(date(2100, 1, 1))
        # 2101-01-01, 2103-01-01, 2105-01-01, ...
    """

    def __init__(
        self,
        first_date: date,
        interval: int = 1,
        week_start: int | None = None,
        kind: FrameKind = "day",
    ) -> None:
        if kind not in ("year", "month", "week", "day"):
            raise ValueError(f"Unknown frame kind: {kind}")
        if week_start is None:
            week_start = get_default_week_start()

        self._first_date = validate_date(first_date, "first_date")
        self._interval = validate_interval(interval)
        self._week_start = validate_weekday(week_start, "week_start")
        self._kind = kind
        self._current_frame_date = self._beginning_of_frame(self._first_date)

    @property
    def kind(self) -> FrameKind:
        return self._kind

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def week_start(self) -> int:
        return self._week_start

    def produce(self) -> Iterator[date]:
        """Yield frame starts from the cursor onward, forever.

        The cursor moves with every pull, so a second ``produce()`` carries
        on after the last frame handed out. Use ``rewind`` to start over.
        """
        while True:
            frame = self._current_frame_date
            self._current_frame_date = self._next_frame_start(frame)
            yield frame

    def __iter__(self) -> Iterator[date]:
        return self.produce()

    def rewind(self) -> "DateFrame":
        """Move the cursor back to the frame holding first_date."""
        self._current_frame_date = self._beginning_of_frame(self._first_date)
        return self

    def forward_to(self, target: date) -> "DateFrame":
        """Go forward to the frame in which target is involved.

        Lands on the earliest frame of the original cadence that does not
        start before target's frame. Targets before the first frame leave
        the cursor on the first frame.
        """
        validate_date(target, "target")
        self.rewind()
        frames = self._frames_between(self._current_frame_date, target)
        cycles = -(-frames // self._interval)
        if cycles > 0:
            self._current_frame_date = self._next_frame_start(
                self._current_frame_date, cycles
            )
        return self

    def _next_frame_start(self, frame_date: date, cycles: int = 1) -> date:
        step = self._interval * cycles
        if self._kind == "year":
            return add_months(frame_date, step * 12)
        elif self._kind == "month":
            return add_months(frame_date, step)
        elif self._kind == "week":
            return frame_date + timedelta(days=step * 7)
        return frame_date + timedelta(days=step)

    def _beginning_of_frame(self, d: date) -> date:
        if self._kind == "year":
            return beginning_of_year(d)
        elif self._kind == "month":
            return beginning_of_month(d)
        elif self._kind == "week":
            return beginning_of_week(d, self._week_start)
        return d

    def _frames_between(self, d1: date, d2: date) -> int:
        if self._kind == "year":
            return years_between(d1, d2)
        elif self._kind == "month":
            return months_between(d1, d2)
        elif self._kind == "week":
            span = self._beginning_of_frame(d2) - self._beginning_of_frame(d1)
            return span.days // 7
        return (d2 - d1).days

    def __repr__(self) -> str:
        return (
            f"DateFrame(first_date={self._first_date.isoformat()}, "
            f"interval={self._interval}, week_start={self._week_start}, "
            f"kind={self._kind!r})"
        )
