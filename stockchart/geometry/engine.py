"""Chart geometry calculations.

Maps (time, open price) samples onto viewport coordinates. The x axis spans
the session window, the y axis spans the series' lowest to highest open,
with y growing downward so that higher prices sit nearer the top.
"""

import math
from typing import Sequence

from stockchart.models import (
    PathGeometry,
    Point,
    PriceStatistics,
    SessionWindow,
    TimeSeries,
    Viewport,
)


def compute_geometry(
    series: TimeSeries,
    stats: PriceStatistics,
    window: SessionWindow,
    viewport: Viewport,
) -> PathGeometry:
    """Compute the stroke and fill paths for *series* inside *viewport*.

    Only samples within the session window (inclusive) are plotted.
    Degenerate input (missing or non-positive window, no samples in the
    window) yields empty geometry; nothing here raises.

    Args:
        series: Samples sorted ascending by timestamp.
        stats: Open-price statistics of *series*.
        window: Session bounds defining the x axis.
        viewport: Size of the drawing surface.

    Returns:
        PathGeometry with the line vertices and the fill polygon.
    """
    if not window.is_valid:
        return PathGeometry.empty()

    span = window.span_minutes
    # Opens too far apart to subtract without overflow are halved first
    divisor = 1.0 if math.isfinite(stats.open_range) else 2.0
    low = stats.lowest_open / divisor
    price_range = stats.highest_open / divisor - low

    line_points = []
    for sample in series.between(window.open_time, window.close_time):
        minutes = (sample.timestamp - window.open_time).total_seconds() / 60
        x = minutes / span * viewport.width
        # Flat series: every point sits on the baseline
        level = (sample.open / divisor - low) / price_range if price_range else 0.0
        y = viewport.height - level * viewport.height
        line_points.append(Point(x=x, y=y))

    return PathGeometry(
        line_points=tuple(line_points),
        fill_points=tuple(fill_polygon(line_points, viewport)),
    )


def fill_polygon(line_points: Sequence[Point], viewport: Viewport) -> list[Point]:
    """Close *line_points* down to the viewport's bottom edge.

    Appends ``(last.x, height)`` and ``(0, height)``; the polygon is closed
    back to the first vertex implicitly. Empty input gives an empty polygon.
    """
    if not line_points:
        return []
    return [
        *line_points,
        Point(x=line_points[-1].x, y=viewport.height),
        Point(x=0.0, y=viewport.height),
    ]
