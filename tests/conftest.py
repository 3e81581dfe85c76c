"""Shared fixtures and payload builders for stockchart tests."""

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"
IBM_PAYLOAD_PATH = DATA_DIR / "ibm_intraday_5min.json"


def make_record(open_="100.0000", high="101.0000", low="99.0000", close="100.5000", volume="10"):
    """Build one series entry with string-encoded fields."""
    return {
        "1. open": open_,
        "2. high": high,
        "3. low": low,
        "4. close": close,
        "5. volume": volume,
    }


def make_payload(entries: dict, series_key: str = "Time Series (5min)", metadata: dict | None = None) -> bytes:
    """Build a payload with *entries* under *series_key*."""
    document = {series_key: entries}
    if metadata is not None:
        document["Meta Data"] = metadata
    return json.dumps(document).encode("utf-8")


@pytest.fixture
def ibm_payload() -> bytes:
    return IBM_PAYLOAD_PATH.read_bytes()


@pytest.fixture
def ibm_payload_path() -> Path:
    return IBM_PAYLOAD_PATH
