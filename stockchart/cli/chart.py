"""Chart commands for stockchart CLI.

Handles parsing a payload file and displaying its statistics, its chart
geometry, or writing it out as an SVG chart.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stockchart.config import ChartConfig, load_config
from stockchart.errors import ChartDataError
from stockchart.geometry import compute_geometry
from stockchart.models import PathGeometry, PriceStatistics, SessionWindow, TimeSeries, Viewport
from stockchart.parser import parse_time_series_file
from stockchart.render import ChartStyle, render_svg

console = Console()


def _fail(message: str) -> None:
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _get_config(ctx: click.Context) -> ChartConfig:
    """Load configuration, honoring the group's --config option."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path)
    except ChartDataError as e:
        _fail(str(e))


def _load_series(
    path: str,
    config: ChartConfig,
    series_key: Optional[str],
    strict: Optional[bool],
) -> tuple[TimeSeries, PriceStatistics]:
    try:
        return parse_time_series_file(
            path,
            series_key=series_key or config.parser.series_key,
            strict=config.parser.strict if strict is None else strict,
        )
    except OSError as e:
        _fail(f"Cannot read {path}: {e.strerror or e}")
    except ChartDataError as e:
        _fail(str(e))


def resolve_window(
    config: ChartConfig,
    series: TimeSeries,
    day: Optional[date] = None,
    open_at: Optional[datetime] = None,
    close_at: Optional[datetime] = None,
) -> SessionWindow:
    """Pick the session window for a chart.

    The date comes from *day*, then the config, then the last sample's date.
    A series with no samples and no configured date gets an unbounded
    window, which charts nothing.
    """
    session_day = day or config.session.day
    if session_day is None and series.last is not None:
        session_day = series.last.timestamp.date()
    if session_day is None:
        return SessionWindow()

    return SessionWindow.for_date(
        session_day,
        open_at=open_at.time() if open_at else config.session.open,
        close_at=close_at.time() if close_at else config.session.close,
    )


def _geometry_for(
    ctx: click.Context,
    file: str,
    width: Optional[float],
    height: Optional[float],
    session_date: Optional[datetime],
    open_at: Optional[datetime],
    close_at: Optional[datetime],
    series_key: Optional[str],
    strict: Optional[bool],
) -> tuple[ChartConfig, PathGeometry, Viewport]:
    config = _get_config(ctx)
    series, stats = _load_series(file, config, series_key, strict)

    viewport = Viewport(
        width=width if width is not None else config.viewport.width,
        height=height if height is not None else config.viewport.height,
    )
    window = resolve_window(
        config,
        series,
        day=session_date.date() if session_date else None,
        open_at=open_at,
        close_at=close_at,
    )
    return config, compute_geometry(series, stats, window, viewport), viewport


_parse_options = [
    click.argument("file", type=click.Path(exists=True, dir_okay=False)),
    click.option("--series-key", default=None, help="Top-level key of the series object."),
    click.option(
        "--strict/--no-strict",
        default=None,
        help="Fail on unparseable fields instead of substituting 0 (default: config).",
    ),
]

_chart_options = [
    click.option("--width", type=click.FloatRange(min=0), default=None, help="Viewport width."),
    click.option("--height", type=click.FloatRange(min=0), default=None, help="Viewport height."),
    click.option(
        "-d", "--date", "session_date",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Session date (default: config, then date of the last sample).",
    ),
    click.option(
        "--open", "open_at",
        type=click.DateTime(formats=["%H:%M"]),
        default=None,
        help="Session open time, HH:MM (default: 09:30).",
    ),
    click.option(
        "--close", "close_at",
        type=click.DateTime(formats=["%H:%M"]),
        default=None,
        help="Session close time, HH:MM (default: 16:00).",
    ),
]


def _apply(options):
    def decorator(f):
        for option in reversed(options):
            f = option(f)
        return f
    return decorator


@click.command()
@_apply(_parse_options)
@click.pass_context
def stats(ctx: click.Context, file: str, series_key: Optional[str], strict: Optional[bool]) -> None:
    """Show a summary of the time series in FILE.

    \b
    Examples:
      stockchart stats ibm.json
      stockchart stats ibm.json --series-key "Time Series (1min)"
    """
    config = _get_config(ctx)
    series, price_stats = _load_series(file, config, series_key, strict)

    table = Table(title=f"Time Series - {Path(file).name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    metadata = series.metadata
    if metadata is not None and metadata.symbol:
        table.add_row("Symbol", metadata.symbol)
    if metadata is not None and metadata.time_zone:
        table.add_row("Time Zone", metadata.time_zone)

    table.add_row("Samples", str(len(series)))
    if not series.is_empty:
        table.add_row("First", series.first.timestamp.strftime("%Y-%m-%d %H:%M"))
        table.add_row("Last", series.last.timestamp.strftime("%Y-%m-%d %H:%M"))
    table.add_row("Highest Open", f"{price_stats.highest_open:.4f}")
    table.add_row("Lowest Open", f"{price_stats.lowest_open:.4f}")

    console.print(table)


@click.command()
@_apply(_parse_options)
@_apply(_chart_options)
@click.option("--json", "as_json", is_flag=True, help="Print geometry as JSON.")
@click.pass_context
def geometry(
    ctx: click.Context,
    file: str,
    series_key: Optional[str],
    strict: Optional[bool],
    width: Optional[float],
    height: Optional[float],
    session_date: Optional[datetime],
    open_at: Optional[datetime],
    close_at: Optional[datetime],
    as_json: bool,
) -> None:
    """Compute line and fill geometry for the series in FILE.

    \b
    Examples:
      stockchart geometry ibm.json
      stockchart geometry ibm.json --width 200 --height 100 --json
      stockchart geometry ibm.json --date 2020-12-04 --open 09:30 --close 16:00
    """
    _, path_geometry, viewport = _geometry_for(
        ctx, file, width, height, session_date, open_at, close_at, series_key, strict
    )

    if as_json:
        click.echo(path_geometry.model_dump_json(indent=2))
        return

    if path_geometry.is_empty:
        console.print("[yellow]No samples fall inside the session window.[/yellow]")
        return

    table = Table(title=f"Line Points ({viewport.width:g}x{viewport.height:g})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")

    for i, point in enumerate(path_geometry.line_points):
        table.add_row(str(i), f"{point.x:.2f}", f"{point.y:.2f}")

    console.print(table)
    console.print(
        f"[dim]{len(path_geometry.line_points)} line points, "
        f"{len(path_geometry.fill_points)} fill points[/dim]"
    )


@click.command()
@_apply(_parse_options)
@_apply(_chart_options)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
    help="SVG file to write.",
)
@click.option("--stroke-color", default=None, help="Price line color.")
@click.option("--line-width", type=click.FloatRange(min=0, min_open=True), default=None)
@click.pass_context
def render(
    ctx: click.Context,
    file: str,
    series_key: Optional[str],
    strict: Optional[bool],
    width: Optional[float],
    height: Optional[float],
    session_date: Optional[datetime],
    open_at: Optional[datetime],
    close_at: Optional[datetime],
    output: str,
    stroke_color: Optional[str],
    line_width: Optional[float],
) -> None:
    """Render the series in FILE as an SVG chart.

    \b
    Examples:
      stockchart render ibm.json -o ibm.svg
      stockchart render ibm.json -o ibm.svg --stroke-color "#34C759"
    """
    config, path_geometry, viewport = _geometry_for(
        ctx, file, width, height, session_date, open_at, close_at, series_key, strict
    )

    overrides = {}
    if stroke_color:
        overrides["stroke_color"] = stroke_color
    if line_width is not None:
        overrides["line_width"] = line_width
    style = ChartStyle(**{**config.style.model_dump(), **overrides})

    try:
        Path(output).write_text(render_svg(path_geometry, viewport, style))
    except OSError as e:
        _fail(f"Cannot write {output}: {e.strerror or e}")

    if path_geometry.is_empty:
        console.print("[yellow]No samples fall inside the session window; wrote an empty chart.[/yellow]")
    console.print(f"[green]✓[/green] Wrote {output}")
