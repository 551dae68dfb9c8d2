"""Recurrence rule variants.

Each rule is an immutable value naming the frame it steps through and the
parameters that pick one date inside each frame. Weekdays are 0=Sunday ..
6=Saturday; ``nth`` counts from the start of the month when positive and
from the end when negative (-1 is the last).
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from recurdate.frames import FrameKind
from recurdate.validation import (
    validate_mday,
    validate_month,
    validate_nth,
    validate_weekday,
)


@dataclass(frozen=True)
class YearlyByMonthday:
    """Every year on a fixed month and day, like Apr 22."""

    month: int
    mday: int

    frame_kind: ClassVar[FrameKind] = "year"

    def __post_init__(self) -> None:
        validate_month(self.month)
        validate_mday(self.mday, self.month)


@dataclass(frozen=True)
class YearlyByDay:
    """Every year on the nth weekday of a month, like the 4th Tue of Apr."""

    month: int
    nth: int
    wday: int

    frame_kind: ClassVar[FrameKind] = "year"

    def __post_init__(self) -> None:
        validate_month(self.month)
        validate_nth(self.nth)
        validate_weekday(self.wday)


@dataclass(frozen=True)
class MonthlyByMonthday:
    """Every month on a fixed day, like the 22nd. Short months are skipped."""

    mday: int

    frame_kind: ClassVar[FrameKind] = "month"

    def __post_init__(self) -> None:
        validate_mday(self.mday)


@dataclass(frozen=True)
class MonthlyByDay:
    """Every month on the nth weekday, like the 4th Tue."""

    nth: int
    wday: int

    frame_kind: ClassVar[FrameKind] = "month"

    def __post_init__(self) -> None:
        validate_nth(self.nth)
        validate_weekday(self.wday)


@dataclass(frozen=True)
class Weekly:
    """Every week on a weekday."""

    wday: int

    frame_kind: ClassVar[FrameKind] = "week"

    def __post_init__(self) -> None:
        validate_weekday(self.wday)


@dataclass(frozen=True)
class Daily:
    """Every day."""

    frame_kind: ClassVar[FrameKind] = "day"


Rule = Union[YearlyByMonthday, YearlyByDay, MonthlyByMonthday, MonthlyByDay, Weekly, Daily]

RULE_TYPES = (YearlyByMonthday, YearlyByDay, MonthlyByMonthday, MonthlyByDay, Weekly, Daily)
