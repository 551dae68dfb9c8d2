"""Merge several ordered date sequences into one."""

from datetime import date
from typing import Iterator

from recurdate.enumerator import DateSequence
from recurdate.logging import get_logger

_EXHAUSTED = object()


class _Cursor:
    """One-element lookahead over a source traversal."""

    __slots__ = ("_iterator", "_pending")

    def __init__(self, iterator: Iterator[date]) -> None:
        self._iterator = iterator
        self._pending = None
        self._fill()

    def _fill(self) -> None:
        self._pending = next(self._iterator, _EXHAUSTED)

    @property
    def exhausted(self) -> bool:
        return self._pending is _EXHAUSTED

    def peek(self) -> date:
        return self._pending

    def advance(self) -> date:
        value = self._pending
        self._fill()
        return value


class EnumMerger:
    """Merge ordered date sequences into one ordered, deduplicated sequence.

    Sources are any objects with ``produce()`` and ``rewind()``. Each step
    takes the smallest pending value among the sources; values equal to
    the one just emitted are dropped.

    Example:
        first = date(2021, 8, 4)  # Wednesday
        merger = EnumMerger().add(weekly(first)).add(weekly(first, wday=1))
        # 2021-08-04, 2021-08-09, 2021-08-11, 2021-08-16, ...
    """

    def __init__(self) -> None:
        self._sources: list[DateSequence] = []
        self._cursors: list[_Cursor] | None = None
        self._previous = _EXHAUSTED
        self._log = get_logger(__name__)

    def add(self, sequence: DateSequence) -> "EnumMerger":
        """Register a source sequence.

        A source added during a traversal joins the running merge at its
        own first value.
        """
        self._sources.append(sequence)
        if self._cursors is not None:
            self._cursors.append(_Cursor(sequence.produce()))
        self._log.debug("merger_source_added", sources=len(self._sources))
        return self

    def __len__(self) -> int:
        return len(self._sources)

    def produce(self) -> Iterator[date]:
        """Yield merged dates until every source is exhausted."""
        if self._cursors is None:
            self._cursors = [_Cursor(s.produce()) for s in self._sources]
            self._previous = _EXHAUSTED

        while True:
            cursor = self._minimum_cursor()
            if cursor is None:
                return
            current = cursor.advance()
            if current == self._previous:
                continue
            self._previous = current
            yield current

    def __iter__(self) -> Iterator[date]:
        return self.produce()

    def rewind(self) -> "EnumMerger":
        """Rewind every source and restart the merge from the beginning."""
        for source in self._sources:
            source.rewind()
        self._cursors = None
        self._previous = _EXHAUSTED
        return self

    def _minimum_cursor(self) -> _Cursor | None:
        minimum = None
        for cursor in self._cursors:
            if cursor.exhausted:
                continue
            if minimum is None or cursor.peek() < minimum.peek():
                minimum = cursor
        return minimum

    def __repr__(self) -> str:
        return f"EnumMerger({len(self._sources)} sources)"
