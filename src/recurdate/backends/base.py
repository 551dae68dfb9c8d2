"""Abstract backend protocol for DataFrame output."""

from datetime import date
from typing import Protocol, TypeVar

DF = TypeVar("DF", covariant=True)


class Backend(Protocol[DF]):
    """Protocol defining required DataFrame operations for a backend."""

    def from_dates(self, dates: list[date]) -> DF:
        """Build a DataFrame with one row per date.

        Columns are ``as_of_date`` (the backend's date or datetime type)
        and ``wday`` (0=Sunday).
        """
        ...

    def empty(self) -> DF:
        """Return an empty DataFrame with the output columns."""
        ...
