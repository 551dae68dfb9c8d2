"""Polars backend implementation."""

from datetime import date

import polars as pl

from recurdate.utils import wday


class PolarsBackend:
    """Backend implementation for polars DataFrames."""

    def from_dates(self, dates: list[date]) -> pl.DataFrame:
        """Build a DataFrame with ``as_of_date`` and ``wday`` columns.

        Polars keeps ``as_of_date`` as a Date column rather than Datetime.
        """
        if not dates:
            return self.empty()
        return pl.DataFrame({
            "as_of_date": pl.Series("as_of_date", dates, dtype=pl.Date),
            "wday": pl.Series("wday", [wday(d) for d in dates], dtype=pl.Int64),
        })

    def empty(self) -> pl.DataFrame:
        """Return an empty DataFrame."""
        return pl.DataFrame(schema={"as_of_date": pl.Date, "wday": pl.Int64})
