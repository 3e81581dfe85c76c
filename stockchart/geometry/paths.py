"""Path command helpers for renderers that consume point lists."""

from typing import Sequence

from stockchart.models import Point

MOVE_TO = "M"
LINE_TO = "L"
CLOSE = "Z"


def path_commands(points: Sequence[Point], close: bool = False) -> list[tuple]:
    """Convert points into move-to / line-to commands.

    The first point becomes ``("M", x, y)``, the rest ``("L", x, y)``.
    With *close*, a final ``("Z",)`` is appended. Empty input gives ``[]``.
    """
    if not points:
        return []

    commands: list[tuple] = [(MOVE_TO, points[0].x, points[0].y)]
    commands.extend((LINE_TO, p.x, p.y) for p in points[1:])
    if close:
        commands.append((CLOSE,))
    return commands


def _fmt(value: float) -> str:
    # Trim trailing zeros so paths stay compact ("12.5", "0", "100")
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def svg_path_data(points: Sequence[Point], close: bool = False) -> str:
    """Build an SVG ``d`` attribute from *points*."""
    parts = []
    for command in path_commands(points, close=close):
        if command[0] == CLOSE:
            parts.append(CLOSE)
        else:
            op, x, y = command
            parts.append(f"{op}{_fmt(x)},{_fmt(y)}")
    return " ".join(parts)
