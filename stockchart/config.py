"""Configuration for stockchart.

Settings are read from ``~/.config/stockchart/config.toml``. A missing file
means defaults; every section and key is optional.

    [session]
    date = "2020-12-04"   # defaults to the date of the last sample
    open = "09:30"
    close = "16:00"

    [parser]
    series_key = "Time Series (5min)"
    strict = false

    [viewport]
    width = 390
    height = 281

    [style]
    stroke_color = "#007AFF"
    line_width = 1.0
"""

import logging
from datetime import date, time
from pathlib import Path
from typing import Optional, Union

import toml
from pydantic import BaseModel, Field, ValidationError

from stockchart.errors import ConfigError
from stockchart.models import DEFAULT_CLOSE_TIME, DEFAULT_OPEN_TIME, SessionWindow, Viewport
from stockchart.parser import DEFAULT_SERIES_KEY
from stockchart.render import ChartStyle

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "stockchart"
CONFIG_PATH = CONFIG_DIR / "config.toml"


class SessionConfig(BaseModel):
    """Trading session bounds."""

    day: Optional[date] = Field(default=None, alias="date", description="Session date")
    open: time = Field(default=DEFAULT_OPEN_TIME, description="Session open time")
    close: time = Field(default=DEFAULT_CLOSE_TIME, description="Session close time")

    model_config = {"frozen": True, "populate_by_name": True}

    def window(self, day: date) -> SessionWindow:
        """Session window on *day* using the configured open/close times."""
        return SessionWindow.for_date(day, open_at=self.open, close_at=self.close)


class ParserConfig(BaseModel):
    """Payload parsing options."""

    series_key: str = Field(default=DEFAULT_SERIES_KEY, min_length=1)
    strict: bool = Field(default=False, description="Raise on unparseable fields")

    model_config = {"frozen": True}


class ViewportConfig(BaseModel):
    """Default drawing size (an iPhone-width playground view)."""

    width: float = Field(default=390.0, gt=0)
    height: float = Field(default=281.0, gt=0)

    model_config = {"frozen": True}

    def viewport(self) -> Viewport:
        return Viewport(width=self.width, height=self.height)


class ChartConfig(BaseModel):
    """Complete stockchart configuration."""

    session: SessionConfig = Field(default_factory=SessionConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    style: ChartStyle = Field(default_factory=ChartStyle)

    model_config = {"frozen": True}


def load_config(path: Optional[Union[str, Path]] = None) -> ChartConfig:
    """Load configuration from *path* (default: ``CONFIG_PATH``).

    Returns:
        ChartConfig. Defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or holds
            invalid values.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return ChartConfig()

    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        return ChartConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def create_template_config(path: Optional[Union[str, Path]] = None) -> Path:
    """Write a template configuration file and return its path."""
    config_path = Path(path) if path is not None else CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "session": {
            "open": DEFAULT_OPEN_TIME.strftime("%H:%M"),
            "close": DEFAULT_CLOSE_TIME.strftime("%H:%M"),
        },
        "parser": ParserConfig().model_dump(),
        "viewport": ViewportConfig().model_dump(),
        "style": ChartStyle().model_dump(),
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
