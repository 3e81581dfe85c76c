"""Parser for intraday time series payloads.

The feed delivers the series as a JSON object keyed by timestamp strings,
with every numeric field encoded as a string:

    {
        "Meta Data": {"2. Symbol": "IBM", ...},
        "Time Series (5min)": {
            "2020-12-04 19:25:00": {"1. open": "127.1000", ..., "5. volume": "200"},
            ...
        }
    }

Parsing happens in two passes. The first decodes the JSON and pulls out
``(key, record)`` pairs; the second maps each pair to a typed
:class:`PriceSample`, taking the timestamp from the key.

By default the parser is tolerant: a numeric field that cannot be parsed
becomes 0 and an entry whose key is not a valid timestamp is dropped.
Pass ``strict=True`` to raise :class:`InvalidFieldError` instead.
"""

import json
import logging
import math
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from stockchart.errors import InvalidFieldError, MalformedPayloadError
from stockchart.models import PriceSample, PriceStatistics, SeriesMetadata, TimeSeries

logger = logging.getLogger(__name__)

DEFAULT_SERIES_KEY = "Time Series (5min)"
METADATA_KEY = "Meta Data"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

OPEN_LABEL = "1. open"
HIGH_LABEL = "2. high"
LOW_LABEL = "3. low"
CLOSE_LABEL = "4. close"
VOLUME_LABEL = "5. volume"

# Plain decimal strings only: no underscores, padding or "inf"/"nan" words
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"\d+", re.ASCII)

# Metadata labels mapped to SeriesMetadata fields
METADATA_LABELS = {
    "1. Information": "information",
    "2. Symbol": "symbol",
    "3. Last Refreshed": "last_refreshed",
    "4. Interval": "interval",
    "5. Output Size": "output_size",
    "6. Time Zone": "time_zone",
}


def parse_time_series(
    raw: Union[bytes, str],
    *,
    series_key: str = DEFAULT_SERIES_KEY,
    strict: bool = False,
) -> tuple[TimeSeries, PriceStatistics]:
    """Parse an intraday payload into a sorted series and its statistics.

    Args:
        raw: JSON payload as bytes or text.
        series_key: Top-level key holding the series object.
        strict: Raise on unparseable fields instead of substituting 0
            (numeric fields) or dropping the entry (timestamp keys).

    Returns:
        Tuple of (TimeSeries sorted ascending by timestamp, PriceStatistics).

    Raises:
        MalformedPayloadError: If the payload is not valid JSON or the series
            object is missing.
        InvalidFieldError: In strict mode, if any field fails to parse.
    """
    document = _decode(raw)
    entries = _series_entries(document, series_key)

    samples = []
    for key, record in entries:
        sample = _to_sample(key, record, strict)
        if sample is not None:
            samples.append(sample)

    # sorted() is stable; keys are unique so ties cannot occur
    samples = sorted(samples, key=lambda s: s.timestamp)

    series = TimeSeries(samples=tuple(samples), metadata=_metadata(document))
    stats = PriceStatistics.from_samples(series.samples)

    logger.debug(
        "Parsed %d of %d entries under '%s'", len(series), len(entries), series_key
    )
    return series, stats


def parse_time_series_file(
    path: Union[str, Path], **kwargs: Any
) -> tuple[TimeSeries, PriceStatistics]:
    """Read *path* and parse it with :func:`parse_time_series`."""
    return parse_time_series(Path(path).read_bytes(), **kwargs)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a series key in the feed's fixed format, or return None."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except (TypeError, ValueError):
        return None


def parse_price(value: Any) -> Optional[float]:
    """Parse a string-encoded price. Returns None for unparseable values."""
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        return None
    if isinstance(value, str) and not _DECIMAL_RE.fullmatch(value):
        return None
    try:
        price = float(value)
    except ValueError:
        return None
    if not math.isfinite(price):
        return None
    return price


def parse_volume(value: Any) -> Optional[int]:
    """Parse a string-encoded volume. Returns None for unparseable or negative values."""
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        return None
    if isinstance(value, str) and not _INTEGER_RE.fullmatch(value):
        return None
    try:
        volume = int(value)
    except ValueError:
        return None
    return volume if volume >= 0 else None


def _decode(raw: Union[bytes, str]) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e


def _series_entries(document: Any, series_key: str) -> list[tuple[str, Any]]:
    """First pass: extract (timestamp key, record) pairs from the series object."""
    if not isinstance(document, dict):
        raise MalformedPayloadError("Payload top level is not a JSON object")

    if series_key not in document:
        raise MalformedPayloadError(f"Payload has no '{series_key}' object")

    series = document[series_key]
    if not isinstance(series, dict):
        raise MalformedPayloadError(f"'{series_key}' is not a JSON object")

    return list(series.items())


def _to_sample(key: str, record: Any, strict: bool) -> Optional[PriceSample]:
    """Second pass: map one entry to a PriceSample, or None if it is dropped."""
    timestamp = parse_timestamp(key)
    if timestamp is None:
        if strict:
            raise InvalidFieldError(key, "time", key)
        logger.debug("Dropping entry with unparseable timestamp %r", key)
        return None

    if not isinstance(record, dict):
        if strict:
            raise InvalidFieldError(key, "record", record)
        logger.debug("Dropping entry %r: value is not an object", key)
        return None

    return PriceSample(
        timestamp=timestamp,
        open=_field(key, record, OPEN_LABEL, parse_price, strict),
        high=_field(key, record, HIGH_LABEL, parse_price, strict),
        low=_field(key, record, LOW_LABEL, parse_price, strict),
        close=_field(key, record, CLOSE_LABEL, parse_price, strict),
        volume=_field(key, record, VOLUME_LABEL, parse_volume, strict),
    )


def _field(key: str, record: dict, label: str, convert, strict: bool):
    value = record.get(label)
    parsed = convert(value)
    if parsed is not None:
        return parsed

    if strict:
        raise InvalidFieldError(key, label, value)
    logger.debug("Entry %r: %s=%r is not a number, using 0", key, label, value)
    return 0


def _metadata(document: dict) -> Optional[SeriesMetadata]:
    block = document.get(METADATA_KEY)
    if not isinstance(block, dict):
        return None

    values = {
        field: block[label]
        for label, field in METADATA_LABELS.items()
        if isinstance(block.get(label), str)
    }
    return SeriesMetadata(**values)
