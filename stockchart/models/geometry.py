"""Session window, viewport and path geometry models."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Regular US equity session, matching the feed's exchange hours
DEFAULT_OPEN_TIME = time(9, 30)
DEFAULT_CLOSE_TIME = time(16, 0)


class SessionWindow(BaseModel):
    """Open/close bounds of the trading session to chart (inclusive)."""

    open_time: Optional[datetime] = Field(default=None, description="Session open")
    close_time: Optional[datetime] = Field(default=None, description="Session close")

    model_config = {"frozen": True}

    @field_validator("open_time", "close_time")
    @classmethod
    def naive_only(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Sample timestamps are naive; aware bounds could not be compared with them
        if value is not None and value.tzinfo is not None:
            raise ValueError("session bounds must be naive (session-local) datetimes")
        return value

    @classmethod
    def for_date(
        cls,
        day: date,
        open_at: time = DEFAULT_OPEN_TIME,
        close_at: time = DEFAULT_CLOSE_TIME,
    ) -> "SessionWindow":
        """Build a window for *day* between *open_at* and *close_at*."""
        return cls(
            open_time=datetime.combine(day, open_at),
            close_time=datetime.combine(day, close_at),
        )

    @property
    def is_valid(self) -> bool:
        """True if both bounds are set and close is after open."""
        if self.open_time is None or self.close_time is None:
            return False
        return self.close_time > self.open_time

    @property
    def span_minutes(self) -> float:
        """Length of the session in minutes (0 when the window is invalid)."""
        if not self.is_valid:
            return 0.0
        return (self.close_time - self.open_time).total_seconds() / 60

    def contains(self, timestamp: datetime) -> bool:
        if self.open_time is None or self.close_time is None:
            return False
        return self.open_time <= timestamp <= self.close_time


class Viewport(BaseModel):
    """Drawing surface size supplied by the renderer."""

    width: float = Field(..., ge=0, description="Drawable width")
    height: float = Field(..., ge=0, description="Drawable height")

    model_config = {"frozen": True}


class Point(BaseModel):
    """A 2D point in viewport coordinates (origin top-left, y grows down)."""

    x: float
    y: float

    model_config = {"frozen": True}


class PathGeometry(BaseModel):
    """Stroke path and the closed fill polygon beneath it."""

    line_points: tuple[Point, ...] = Field(default=(), description="Stroke path vertices")
    fill_points: tuple[Point, ...] = Field(
        default=(), description="Line vertices plus two baseline vertices"
    )

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "PathGeometry":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.line_points
