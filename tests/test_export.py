"""Tests for occurrence export and DataFrame backends."""

from datetime import date

import pandas as pd
import polars as pl
import pytest

from recurdate import (
    DateListEnumerator,
    PandasBackend,
    PolarsBackend,
    ValidationError,
    configure_recurdate,
    occurrences_between,
    to_frame,
    weekly,
)


@pytest.fixture
def mondays():
    """Every Monday from 2024-01-01."""
    return weekly(date(2024, 1, 1))


class TestOccurrencesBetween:
    """Test occurrences_between."""

    def test_window_of_infinite_sequence(self, mondays):
        dates = occurrences_between(mondays, date(2024, 1, 10), date(2024, 1, 31))
        assert dates == [date(2024, 1, 15), date(2024, 1, 22), date(2024, 1, 29)]

    def test_empty_window(self, mondays):
        assert occurrences_between(mondays, date(2024, 1, 2), date(2024, 1, 7)) == []

    def test_inverted_window(self, mondays):
        with pytest.raises(ValidationError):
            occurrences_between(mondays, date(2024, 2, 1), date(2024, 1, 1))


class TestToFrame:
    """Test to_frame with each backend."""

    def test_pandas(self, mondays):
        df = to_frame(mondays, date(2024, 1, 1), date(2024, 1, 15), backend="pandas")

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["as_of_date", "wday"]
        assert list(df["as_of_date"]) == [
            pd.Timestamp("2024-01-01"),
            pd.Timestamp("2024-01-08"),
            pd.Timestamp("2024-01-15"),
        ]
        assert df["wday"].tolist() == [1, 1, 1]

    def test_polars(self, mondays):
        df = to_frame(mondays, date(2024, 1, 1), date(2024, 1, 15), backend="polars")

        assert isinstance(df, pl.DataFrame)
        assert df.columns == ["as_of_date", "wday"]
        assert df["as_of_date"].to_list() == [
            date(2024, 1, 1),
            date(2024, 1, 8),
            date(2024, 1, 15),
        ]
        assert df["wday"].to_list() == [1, 1, 1]

    def test_default_backend_from_config(self, mondays):
        configure_recurdate(default_backend="polars")
        df = to_frame(mondays, date(2024, 1, 1), date(2024, 1, 15))
        assert isinstance(df, pl.DataFrame)

    def test_unknown_backend(self, mondays):
        with pytest.raises(ValueError, match="Unknown backend"):
            to_frame(mondays, date(2024, 1, 1), date(2024, 1, 15), backend="arrow")

    @pytest.mark.parametrize("backend", ["pandas", "polars"])
    def test_empty_result_keeps_columns(self, backend):
        seq = DateListEnumerator([date(2024, 6, 1)])
        df = to_frame(seq, date(2024, 1, 1), date(2024, 1, 31), backend=backend)
        assert list(df.columns) == ["as_of_date", "wday"]
        assert len(df) == 0


class TestBackends:
    """Test backend builders directly."""

    def test_pandas_from_dates(self):
        df = PandasBackend().from_dates([date(2024, 1, 1), date(2024, 3, 1)])
        assert list(df.columns) == ["as_of_date", "wday"]
        assert list(df["as_of_date"]) == [pd.Timestamp("2024-01-01"), pd.Timestamp("2024-03-01")]
        assert list(df["wday"]) == [1, 5]

    def test_polars_from_dates(self):
        df = PolarsBackend().from_dates([date(2024, 1, 1), date(2024, 3, 1)])
        assert df.schema["as_of_date"] == pl.Date
        assert df["as_of_date"].to_list() == [date(2024, 1, 1), date(2024, 3, 1)]
        assert df["wday"].to_list() == [1, 5]

    @pytest.mark.parametrize("backend", [PandasBackend(), PolarsBackend()])
    def test_from_no_dates_is_empty_frame(self, backend):
        df = backend.from_dates([])
        assert list(df.columns) == ["as_of_date", "wday"]
        assert len(df) == 0
