"""Time series and derived statistics models."""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from stockchart.models.sample import PriceSample


class SeriesMetadata(BaseModel):
    """Descriptive block that accompanies an intraday payload."""

    information: Optional[str] = Field(default=None, description="Feed description")
    symbol: Optional[str] = Field(default=None, description="Ticker symbol")
    last_refreshed: Optional[str] = Field(
        default=None, description="Provider's last refresh time, as sent"
    )
    interval: Optional[str] = Field(default=None, description="Bar interval (e.g., '5min')")
    output_size: Optional[str] = Field(default=None, description="Compact or full")
    time_zone: Optional[str] = Field(default=None, description="Exchange time zone name")

    model_config = {"frozen": True}


class TimeSeries(BaseModel):
    """Ordered, immutable sequence of price samples.

    Samples are sorted ascending by timestamp when produced by the parser.
    """

    samples: tuple[PriceSample, ...] = Field(
        default=(), description="Samples in ascending timestamp order"
    )
    metadata: Optional[SeriesMetadata] = Field(
        default=None, description="Payload metadata, if the feed carried any"
    )

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples

    @property
    def first(self) -> Optional[PriceSample]:
        return self.samples[0] if self.samples else None

    @property
    def last(self) -> Optional[PriceSample]:
        return self.samples[-1] if self.samples else None

    def between(self, start: datetime, end: datetime) -> list[PriceSample]:
        """Return samples with ``start <= timestamp <= end``, preserving order."""
        return [s for s in self.samples if start <= s.timestamp <= end]


class PriceStatistics(BaseModel):
    """High/low of the opening prices across a series.

    Derived from the ``open`` field only, not from ``high``/``low``.
    Both values are 0 for an empty series.
    """

    highest_open: float = Field(default=0.0, description="Maximum opening price")
    lowest_open: float = Field(default=0.0, description="Minimum opening price")

    model_config = {"frozen": True}

    @property
    def open_range(self) -> float:
        return self.highest_open - self.lowest_open

    @classmethod
    def from_samples(cls, samples: Sequence[PriceSample]) -> "PriceStatistics":
        """Compute statistics from the ``open`` prices of *samples*."""
        if not samples:
            return cls()
        opens = [s.open for s in samples]
        return cls(highest_open=max(opens), lowest_open=min(opens))
