"""recurdate - Lazy enumeration and merging of recurring calendar dates."""

from recurdate.backends.pandas import PandasBackend
from recurdate.backends.polars import PolarsBackend
from recurdate.calendar import Calendar, RecurrenceCalendar
from recurdate.config import (
    configure_recurdate,
    get_default_backend,
    get_default_week_start,
    reset_recurdate_config,
)
from recurdate.enumerator import DateEnumerator, DateListEnumerator, DateSequence
from recurdate.export import occurrences_between, to_frame
from recurdate.factories import (
    daily,
    date_list,
    monthly_by_day,
    monthly_by_monthday,
    weekly,
    yearly_by_day,
    yearly_by_monthday,
)
from recurdate.frames import DateFrame, FrameKind
from recurdate.logging import configure_logging, get_logger
from recurdate.merger import EnumMerger
from recurdate.occurrence import occurrence_in_frame
from recurdate.rules import (
    Daily,
    MonthlyByDay,
    MonthlyByMonthday,
    Rule,
    Weekly,
    YearlyByDay,
    YearlyByMonthday,
)
from recurdate.validation import ValidationError

__all__ = [
    # Enumerators
    "DateEnumerator",
    "DateListEnumerator",
    "DateSequence",
    "EnumMerger",
    # Frames
    "DateFrame",
    "FrameKind",
    # Rules
    "Rule",
    "Daily",
    "MonthlyByDay",
    "MonthlyByMonthday",
    "Weekly",
    "YearlyByDay",
    "YearlyByMonthday",
    "occurrence_in_frame",
    # Convenience constructors
    "daily",
    "date_list",
    "monthly_by_day",
    "monthly_by_monthday",
    "weekly",
    "yearly_by_day",
    "yearly_by_monthday",
    # Calendar
    "Calendar",
    "RecurrenceCalendar",
    # Export
    "PandasBackend",
    "PolarsBackend",
    "occurrences_between",
    "to_frame",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "configure_recurdate",
    "get_default_backend",
    "get_default_week_start",
    "reset_recurdate_config",
    # Errors
    "ValidationError",
]
__version__ = "0.1.0"
