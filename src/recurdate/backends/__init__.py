"""Backend implementations for tabular occurrence output."""

from recurdate.backends.base import Backend
from recurdate.backends.pandas import PandasBackend
from recurdate.backends.polars import PolarsBackend

__all__ = ["Backend", "PandasBackend", "PolarsBackend"]
