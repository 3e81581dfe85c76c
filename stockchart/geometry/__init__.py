"""Chart geometry module."""

from stockchart.geometry.engine import compute_geometry, fill_polygon
from stockchart.geometry.paths import path_commands, svg_path_data

__all__ = [
    "compute_geometry",
    "fill_polygon",
    "path_commands",
    "svg_path_data",
]
