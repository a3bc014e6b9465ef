"""Utility helpers."""

from .dates import (
    convert_date,
    date_to_ts,
    end_of_day,
    min_max_date,
    now_ts,
    start_of_day,
    ts_to_date,
    utc_now,
)

__all__ = [
    "convert_date",
    "date_to_ts",
    "end_of_day",
    "min_max_date",
    "now_ts",
    "start_of_day",
    "ts_to_date",
    "utc_now",
]
