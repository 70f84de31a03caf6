from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from features.forecast.models.period_types import ForecastPeriod
from features.tides.models.tide_types import CurrentDirection, TideEvent
from features.wind.models.wind_categories import CompassPoint

class SourceStatus(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"

class WaterTempSource(str, Enum):
    OBSERVED = "observed"
    DEFAULT = "default"

class ShiftWindow(BaseModel):
    """The 24 hour shift the briefing covers."""
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def check_span(self) -> 'ShiftWindow':
        if (self.end - self.start).total_seconds() != 24 * 3600:
            raise ValueError("shift window must span exactly 24 hours")
        return self

    class Config:
        frozen = True

class PeriodSummary(BaseModel):
    """Summary of one fixed period; data fields are None when the period has no hourly data."""
    period: str = Field(..., description="Period key, e.g. morning")
    label: str
    available: bool = True
    temp_range_f: Optional[Tuple[int, int]] = None
    dominant_condition: Optional[str] = None
    wind_avg_kt: Optional[int] = None
    wind_bearing_compass: Optional[CompassPoint] = None
    gust_max_kt: Optional[int] = None
    visibility_miles: Optional[float] = None
    precipitation_pct: Optional[int] = None
    wave_height_bucket: Optional[str] = None

    @classmethod
    def not_available(cls, period: ForecastPeriod) -> 'PeriodSummary':
        return cls(period=period.name.lower(), label=period.label, available=False)

    class Config:
        frozen = True

class CurrentConditions(BaseModel):
    temp_f: int
    feels_like_f: int
    conditions: str
    wind_speed_kt: int
    wind_bearing: CompassPoint
    gusts_kt: int
    pressure_inhg: float
    humidity_pct: int

    class Config:
        frozen = True

class MarineEstimate(BaseModel):
    water_temp_f: int
    water_temp_source: WaterTempSource
    current_speed: str
    current_direction: CurrentDirection
    sunrise: str = Field(..., description="Local time, HH:MM 24h")
    sunset: str = Field(..., description="Local time, HH:MM 24h")

    class Config:
        frozen = True

class FeedSources(BaseModel):
    """Availability of each upstream feed for this run."""
    weather: SourceStatus = SourceStatus.OK
    tides: SourceStatus
    water_temperature: SourceStatus

    class Config:
        frozen = True

class ForecastReport(BaseModel):
    """Shift briefing assembled from one pipeline run."""
    location: str
    station_id: str
    generated_at: datetime
    shift_window: ShiftWindow
    tides: List[TideEvent] = Field(..., max_length=4)
    current: CurrentConditions
    periods: List[PeriodSummary] = Field(..., min_length=4, max_length=4)
    marine: MarineEstimate
    sources: FeedSources

    class Config:
        frozen = True
