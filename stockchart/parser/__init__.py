"""Intraday payload parsing."""

from stockchart.parser.timeseries import (
    DEFAULT_SERIES_KEY,
    TIMESTAMP_FORMAT,
    parse_price,
    parse_time_series,
    parse_time_series_file,
    parse_timestamp,
    parse_volume,
)

__all__ = [
    "DEFAULT_SERIES_KEY",
    "TIMESTAMP_FORMAT",
    "parse_price",
    "parse_time_series",
    "parse_time_series_file",
    "parse_timestamp",
    "parse_volume",
]
