"""Chart renderers."""

from stockchart.render.svg import ChartStyle, render_svg

__all__ = ["ChartStyle", "render_svg"]
