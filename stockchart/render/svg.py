"""SVG rendering of chart geometry.

Draws the fill polygon as a mask over a vertical gradient, then strokes the
price line on top of it.
"""

from xml.sax.saxutils import quoteattr

from pydantic import BaseModel, Field

from stockchart.geometry import svg_path_data
from stockchart.models import PathGeometry, Viewport

# UIKit's systemBlue
SYSTEM_BLUE = "#007AFF"


class ChartStyle(BaseModel):
    """Presentation settings for the rendered chart."""

    stroke_color: str = Field(default=SYSTEM_BLUE, description="Price line color")
    fill_top_color: str = Field(default=SYSTEM_BLUE, description="Gradient color at the top")
    fill_bottom_color: str = Field(
        default="transparent", description="Gradient color at the baseline"
    )
    line_width: float = Field(default=1.0, gt=0, description="Price line width")
    background_color: str = Field(default="#FFFFFF", description="Chart background")

    model_config = {"frozen": True}


def _stop(offset: str, color: str) -> str:
    if color == "transparent":
        return f'<stop offset="{offset}" stop-color="#000000" stop-opacity="0"/>'
    return f"<stop offset={quoteattr(offset)} stop-color={quoteattr(color)}/>"


def render_svg(
    geometry: PathGeometry,
    viewport: Viewport,
    style: ChartStyle = ChartStyle(),
) -> str:
    """Render *geometry* as a standalone SVG document.

    Empty geometry renders just the background.
    """
    width = f"{viewport.width:g}"
    height = f"{viewport.height:g}"

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f'  <rect width="100%" height="100%" fill={quoteattr(style.background_color)}/>',
    ]

    if not geometry.is_empty:
        fill_d = svg_path_data(geometry.fill_points, close=True)
        line_d = svg_path_data(geometry.line_points)
        lines.extend([
            "  <defs>",
            '    <linearGradient id="price-fill" x1="0" y1="0" x2="0" y2="1">',
            f"      {_stop('0', style.fill_top_color)}",
            f"      {_stop('1', style.fill_bottom_color)}",
            "    </linearGradient>",
            '    <clipPath id="price-mask">',
            f'      <path d="{fill_d}"/>',
            "    </clipPath>",
            "  </defs>",
            '  <rect width="100%" height="100%" fill="url(#price-fill)" clip-path="url(#price-mask)"/>',
            f'  <path d="{line_d}" fill="none" stroke={quoteattr(style.stroke_color)} '
            f'stroke-width="{style.line_width:g}"/>',
        ])

    lines.append("</svg>")
    return "\n".join(lines) + "\n"
