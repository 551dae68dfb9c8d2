"""Pandas backend implementation."""

from datetime import date

import pandas as pd

from recurdate.utils import wday


class PandasBackend:
    """Backend implementation for pandas DataFrames."""

    def from_dates(self, dates: list[date]) -> pd.DataFrame:
        """Build a DataFrame with ``as_of_date`` and ``wday`` columns."""
        if not dates:
            return self.empty()
        return pd.DataFrame({
            "as_of_date": pd.to_datetime(dates),
            "wday": pd.Series([wday(d) for d in dates], dtype="int64"),
        })

    def empty(self) -> pd.DataFrame:
        """Return an empty DataFrame."""
        return pd.DataFrame({
            "as_of_date": pd.Series([], dtype="datetime64[ns]"),
            "wday": pd.Series([], dtype="int64"),
        })
