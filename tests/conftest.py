"""
Shared pytest fixtures for the forecast API tests.

The environment is prepared before any app module is imported so that the
settings object is built with caching disabled and a fixed station timezone.
"""

import os
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import pytest

os.environ.setdefault("FIREBOAT_CACHE_ENABLED", "false")
os.environ.setdefault("FIREBOAT_TIMEZONE", "America/Los_Angeles")
os.environ.setdefault("FIREBOAT_SHIFT_START_HOUR", "8")
os.environ.setdefault("FIREBOAT_DEFAULT_WATER_TEMP_F", "52")


def build_weather_payload(
    start: datetime = datetime(2024, 3, 12, 8, 0),
    hours: int = 48,
    temperature: Optional[List[Optional[float]]] = None,
    precipitation_probability: Optional[List[Optional[float]]] = None,
    weather_code: Optional[List[Optional[int]]] = None,
    visibility: Optional[List[Optional[float]]] = None,
    wind_speed: Optional[List[Optional[float]]] = None,
    wind_direction: Optional[List[Optional[float]]] = None,
    wind_gusts: Optional[List[Optional[float]]] = None,
) -> Dict[str, Any]:
    """Open-Meteo shaped payload whose hourly arrays start at ``start``."""
    times = [(start + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)]
    return {
        "latitude": 47.6062,
        "longitude": -122.3321,
        "timezone": "America/Los_Angeles",
        "current": {
            "time": start.strftime("%Y-%m-%dT%H:%M"),
            "temperature_2m": 48.6,
            "relative_humidity_2m": 81,
            "apparent_temperature": 44.5,
            "precipitation": 0.0,
            "weather_code": 3,
            "pressure_msl": 1016.2,
            "wind_speed_10m": 8.4,
            "wind_direction_10m": 200,
            "wind_gusts_10m": 15.6,
        },
        "hourly": {
            "time": times,
            "temperature_2m": temperature or [50.0] * hours,
            "precipitation_probability": precipitation_probability or [10] * hours,
            "weather_code": weather_code or [2] * hours,
            "visibility": visibility or [16093.4] * hours,
            "wind_speed_10m": wind_speed or [8.0] * hours,
            "wind_direction_10m": wind_direction or [180.0] * hours,
            "wind_gusts_10m": wind_gusts or [14.0] * hours,
        },
        "daily": {
            "time": ["2024-03-12", "2024-03-13"],
            "temperature_2m_max": [54.1, 55.0],
            "temperature_2m_min": [41.2, 42.0],
            "sunrise": ["2024-03-12T07:19", "2024-03-13T07:17"],
            "sunset": ["2024-03-12T19:13", "2024-03-13T19:15"],
        },
    }


@pytest.fixture
def weather_payload() -> Dict[str, Any]:
    return build_weather_payload()


@pytest.fixture
def tide_predictions() -> List[Dict[str, str]]:
    """NOAA CO-OPS hilo predictions for Seattle, low tide first."""
    return [
        {"t": "2024-03-12 04:02", "v": "-0.412", "type": "L"},
        {"t": "2024-03-12 10:47", "v": "11.236", "type": "H"},
        {"t": "2024-03-12 16:31", "v": "3.950", "type": "L"},
        {"t": "2024-03-12 22:20", "v": "10.874", "type": "H"},
        {"t": "2024-03-13 04:41", "v": "-0.881", "type": "L"},
        {"t": "2024-03-13 11:26", "v": "11.402", "type": "H"},
    ]


@pytest.fixture
def water_temp_reading() -> Dict[str, str]:
    return {"t": "2024-03-12 08:00", "v": "48.7", "f": "0,0,0"}


@pytest.fixture
def shift_now() -> datetime:
    """08:00 local, the moment a shift starts."""
    return datetime(2024, 3, 12, 8, 0)


@pytest.fixture
def make_weather_payload():
    """Factory for payloads with custom hourly arrays."""
    return build_weather_payload
