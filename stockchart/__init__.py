"""stockchart: intraday price chart geometry from time series JSON."""

from stockchart.errors import ChartDataError, InvalidFieldError, MalformedPayloadError
from stockchart.geometry import compute_geometry
from stockchart.models import (
    PathGeometry,
    Point,
    PriceSample,
    PriceStatistics,
    SessionWindow,
    TimeSeries,
    Viewport,
)
from stockchart.parser import parse_time_series

__all__ = [
    "ChartDataError",
    "InvalidFieldError",
    "MalformedPayloadError",
    "PathGeometry",
    "Point",
    "PriceSample",
    "PriceStatistics",
    "SessionWindow",
    "TimeSeries",
    "Viewport",
    "compute_geometry",
    "parse_time_series",
]
__version__ = "0.1.0"
