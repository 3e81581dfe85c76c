"""Tests for SVG chart rendering."""

import xml.etree.ElementTree as ET

import pytest
from pydantic import ValidationError

from stockchart.geometry import compute_geometry
from stockchart.models import PathGeometry, SessionWindow, Viewport
from stockchart.parser import parse_time_series
from stockchart.render import ChartStyle, render_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def ibm_geometry(ibm_payload: bytes) -> PathGeometry:
    series, stats = parse_time_series(ibm_payload)
    window = SessionWindow.for_date(series.last.timestamp.date())
    return compute_geometry(series, stats, window, Viewport(width=390, height=281))


class TestRenderSvg:
    """SVG output mirrors the stroke layer over a gradient-masked fill."""

    def test_renders_line_and_fill(self, ibm_geometry: PathGeometry):
        svg = render_svg(ibm_geometry, Viewport(width=390, height=281))

        root = ET.fromstring(svg)
        assert root.get("width") == "390"
        assert root.get("height") == "281"

        paths = root.findall(f".//{SVG_NS}path")
        assert len(paths) == 2
        fill_path, line_path = paths
        assert fill_path.get("d").endswith("Z")
        assert line_path.get("fill") == "none"
        assert line_path.get("stroke") == "#007AFF"
        assert root.find(f".//{SVG_NS}linearGradient") is not None

    def test_empty_geometry_renders_background_only(self):
        svg = render_svg(PathGeometry.empty(), Viewport(width=200, height=100))

        root = ET.fromstring(svg)
        assert root.findall(f".//{SVG_NS}path") == []
        assert root.find(f".//{SVG_NS}linearGradient") is None
        assert len(root.findall(f"{SVG_NS}rect")) == 1

    def test_custom_style(self, ibm_geometry: PathGeometry):
        style = ChartStyle(
            stroke_color="#34C759",
            fill_top_color="#34C759",
            fill_bottom_color="#FFFFFF",
            line_width=2.5,
            background_color="#000000",
        )

        svg = render_svg(ibm_geometry, Viewport(width=390, height=281), style)

        root = ET.fromstring(svg)
        line_path = root.findall(f".//{SVG_NS}path")[-1]
        assert line_path.get("stroke") == "#34C759"
        assert line_path.get("stroke-width") == "2.5"
        stops = root.findall(f".//{SVG_NS}stop")
        assert [s.get("stop-color") for s in stops] == ["#34C759", "#FFFFFF"]

    def test_transparent_stop_uses_opacity(self, ibm_geometry: PathGeometry):
        svg = render_svg(ibm_geometry, Viewport(width=390, height=281))

        stops = ET.fromstring(svg).findall(f".//{SVG_NS}stop")
        assert stops[-1].get("stop-opacity") == "0"

    def test_line_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            ChartStyle(line_width=0)
