from datetime import datetime
from typing import ClassVar, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, Field, model_validator

# WMO weather interpretation codes as reported by Open-Meteo
WEATHER_CODE_LABELS: Dict[int, str] = {
    0: "Clear",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light Drizzle",
    53: "Drizzle",
    55: "Heavy Drizzle",
    61: "Light Rain",
    63: "Rain",
    65: "Heavy Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    80: "Light Showers",
    81: "Showers",
    82: "Heavy Showers",
    95: "Thunderstorm",
}

UNKNOWN_CONDITION = "Unknown"

def describe_weather_code(code: Optional[float]) -> str:
    """Map a weather code to its label; missing or unmapped codes are "Unknown"."""
    if code is None or pd.isna(code):
        return UNKNOWN_CONDITION
    return WEATHER_CODE_LABELS.get(int(code), UNKNOWN_CONDITION)

class OpenMeteoCurrent(BaseModel):
    """Instant conditions block (°F, knots, hPa)."""
    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: float
    weather_code: int
    pressure_msl: float
    wind_speed_10m: float
    wind_direction_10m: float
    wind_gusts_10m: float

class OpenMeteoHourly(BaseModel):
    """Hourly parallel arrays; index 0 is the first forecast hour."""
    time: List[datetime]
    temperature_2m: List[Optional[float]]
    precipitation_probability: List[Optional[float]]
    weather_code: List[Optional[int]]
    visibility: List[Optional[float]] = Field(..., description="Visibility in meters")
    wind_speed_10m: List[Optional[float]]
    wind_direction_10m: List[Optional[float]]
    wind_gusts_10m: List[Optional[float]]

    # Open-Meteo hourly key -> column name used by the aggregator
    COLUMN_MAP: ClassVar[Dict[str, str]] = {
        "temperature_2m": "temperature_f",
        "precipitation_probability": "precipitation_pct",
        "weather_code": "weather_code",
        "visibility": "visibility_m",
        "wind_speed_10m": "wind_speed_kt",
        "wind_direction_10m": "wind_bearing_deg",
        "wind_gusts_10m": "wind_gust_kt",
    }

    @model_validator(mode="after")
    def check_parallel_arrays(self) -> 'OpenMeteoHourly':
        if not self.time:
            raise ValueError("hourly 'time' array is empty")
        expected = len(self.time)
        for key in self.COLUMN_MAP:
            actual = len(getattr(self, key))
            if actual != expected:
                raise ValueError(
                    f"Array length mismatch for '{key}': time length={expected}, {key} length={actual}"
                )
        return self

    def __len__(self) -> int:
        return len(self.time)

    def starting_at(self, hour: datetime) -> Optional['OpenMeteoHourly']:
        """Drop the rows before ``hour`` so index 0 is that hour; None when no row is left.

        Open-Meteo reports naive local times, so an aware ``hour`` is compared by
        its wall-clock value.
        """
        if self.time[0].tzinfo is None:
            hour = hour.replace(tzinfo=None)
        elif hour.tzinfo is None:
            hour = hour.replace(tzinfo=self.time[0].tzinfo)

        offset = next((i for i, t in enumerate(self.time) if t >= hour), len(self.time))
        if offset == 0:
            return self
        if offset == len(self.time):
            return None
        return self.model_copy(
            update={key: getattr(self, key)[offset:] for key in ("time", *self.COLUMN_MAP)}
        )

    def to_frame(self) -> pd.DataFrame:
        """Hourly arrays as a DataFrame with a positional index; nulls become NaN."""
        return pd.DataFrame(
            {column: pd.Series(getattr(self, key), dtype="float64") for key, column in self.COLUMN_MAP.items()}
        )

class OpenMeteoDaily(BaseModel):
    sunrise: List[datetime] = Field(..., min_length=1)
    sunset: List[datetime] = Field(..., min_length=1)

class OpenMeteoForecast(BaseModel):
    """Subset of the Open-Meteo /v1/forecast response used for the briefing."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    current: OpenMeteoCurrent
    hourly: OpenMeteoHourly
    daily: OpenMeteoDaily

    def aligned_to(self, now: datetime) -> Optional['OpenMeteoForecast']:
        """Copy whose hourly series starts at ``now`` floored to the hour."""
        hourly = self.hourly.starting_at(now.replace(minute=0, second=0, microsecond=0))
        if hourly is None:
            return None
        if hourly is self.hourly:
            return self
        return self.model_copy(update={"hourly": hourly})
