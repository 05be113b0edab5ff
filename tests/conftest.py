"""
Shared pytest fixtures.
"""

import json
import pytest

from train_finder.utils.config import Settings, reset_settings


SAMPLE_RECORDS = [
    {"trainId": 1177, "departureStationId": 1902, "arrivalStationId": 1929, "price": 164.65, "arrivalTime": "10:25:00", "departureTime": "16:36:00"},
    {"trainId": 1178, "departureStationId": 1929, "arrivalStationId": 1902, "price": 164.65, "arrivalTime": "10:25:00", "departureTime": "16:36:00"},
    {"trainId": 1141, "departureStationId": 1902, "arrivalStationId": 1929, "price": 176.77, "arrivalTime": "10:15:00", "departureTime": "16:35:00"},
    {"trainId": 1142, "departureStationId": 1929, "arrivalStationId": 1902, "price": 176.77, "arrivalTime": "10:15:00", "departureTime": "16:35:00"},
    {"trainId": 1386, "departureStationId": 1902, "arrivalStationId": 1929, "price": 220.3, "arrivalTime": "08:40:00", "departureTime": "06:05:00"},
    {"trainId": 1387, "departureStationId": 1929, "arrivalStationId": 1902, "price": 220.3, "arrivalTime": "08:40:00", "departureTime": "06:05:00"},
    {"trainId": 2001, "departureStationId": 1902, "arrivalStationId": 1929, "price": 99.5, "arrivalTime": "23:10:00", "departureTime": "20:45:00"},
    {"trainId": 2002, "departureStationId": 1909, "arrivalStationId": 1929, "price": 120.0, "arrivalTime": "12:00:00", "departureTime": "09:30:00"},
]


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop the cached settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_records():
    """Provide raw train records as stored in the data file."""
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def data_file(tmp_path, sample_records):
    """Write the sample records to a temporary data file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture
def settings(data_file):
    """Provide settings pointing at the temporary data file."""
    return Settings(data_file=data_file)
