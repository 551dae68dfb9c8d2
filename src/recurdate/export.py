"""Materialize a window of a date sequence as a list or DataFrame."""

from datetime import date
from itertools import dropwhile, takewhile
from typing import Any

from recurdate.backends.base import Backend
from recurdate.backends.pandas import PandasBackend
from recurdate.backends.polars import PolarsBackend
from recurdate.config import BackendName, get_default_backend
from recurdate.enumerator import DateSequence
from recurdate.logging import get_logger, timed_block
from recurdate.validation import validate_date, validate_duration

_log = get_logger(__name__)


def get_backend(name: BackendName) -> Backend:
    if name == "pandas":
        return PandasBackend()
    elif name == "polars":
        return PolarsBackend()
    raise ValueError(f"Unknown backend: {name}")


def occurrences_between(sequence: DateSequence, start: date, end: date) -> list[date]:
    """Collect the dates of sequence in [start, end].

    Reads the sequence from its current position and stops at the first
    date past ``end``, so infinite sequences are safe. The sequence is not
    rewound first.
    """
    validate_date(start, "start")
    validate_date(end, "end")
    validate_duration(start, end)
    tail = dropwhile(lambda d: d < start, sequence.produce())
    return list(takewhile(lambda d: d <= end, tail))


def to_frame(
    sequence: DateSequence,
    start: date,
    end: date,
    backend: BackendName | None = None,
) -> Any:
    """Build a DataFrame of the occurrences in [start, end].

    Args:
        sequence: Any date sequence (enumerator, list, or merger).
        start: First date of the window (inclusive).
        end: Last date of the window (inclusive).
        backend: "pandas" or "polars". Defaults to the configured backend.

    Returns:
        DataFrame with ``as_of_date`` and ``wday`` columns, one row per date.
    """
    backend_name = backend or get_default_backend()
    impl = get_backend(backend_name)
    with timed_block(_log, "to_frame", backend=backend_name):
        dates = occurrences_between(sequence, start, end)
        df = impl.from_dates(dates)
    _log.debug("to_frame_built", rows=len(dates), start=start.isoformat(), end=end.isoformat())
    return df
