"""Configuration commands for stockchart CLI."""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from stockchart.config import CONFIG_PATH, create_template_config

console = Console()


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Create a template configuration file.

    Writes ~/.config/stockchart/config.toml (or the path given with
    --config) with the default session, viewport and style settings.
    """
    config_path = Path((ctx.obj or {}).get("config_path") or CONFIG_PATH)

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists at {config_path}[/yellow]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Exists[/bold yellow]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    written = create_template_config(config_path)
    console.print(f"[green]✓[/green] Created config at {written}")
