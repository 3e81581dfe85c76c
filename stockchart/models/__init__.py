"""Data models for stockchart."""

from stockchart.models.sample import PriceSample
from stockchart.models.series import PriceStatistics, SeriesMetadata, TimeSeries
from stockchart.models.geometry import (
    DEFAULT_CLOSE_TIME,
    DEFAULT_OPEN_TIME,
    PathGeometry,
    Point,
    SessionWindow,
    Viewport,
)

__all__ = [
    "PriceSample",
    "PriceStatistics",
    "SeriesMetadata",
    "TimeSeries",
    "DEFAULT_CLOSE_TIME",
    "DEFAULT_OPEN_TIME",
    "PathGeometry",
    "Point",
    "SessionWindow",
    "Viewport",
]
