"""Price sample (OHLCV) data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class PriceSample(BaseModel):
    """Represents a single intraday OHLCV observation."""

    timestamp: datetime = Field(..., description="Sample timestamp (session-local)")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")
    volume: int = Field(..., ge=0, description="Trading volume")

    model_config = {"frozen": True}
