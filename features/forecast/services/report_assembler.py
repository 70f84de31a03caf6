import logging
from datetime import datetime
from typing import Any, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from core.config import settings
from features.common.exceptions.forecast_exceptions import FatalInputError
from features.common.utils.conversions import UnitConversions
from features.forecast.models.forecast_types import (
    CurrentConditions,
    FeedSources,
    ForecastReport,
    MarineEstimate,
    SourceStatus,
    WaterTempSource
)
from features.forecast.models.period_types import ForecastPeriod
from features.forecast.services.period_aggregator import summarize_period
from features.forecast.services.series_slicer import period_slice
from features.forecast.services.shift_window import compute_shift_window
from features.tides.models.tide_types import WaterTemperatureReading
from features.tides.services.current_estimator import estimate_tidal_current
from features.tides.services.tide_normalizer import normalize_tide_events
from features.weather.models.weather_types import (
    OpenMeteoCurrent,
    OpenMeteoForecast,
    describe_weather_code
)
from features.wind.models.wind_categories import CompassPoint

logger = logging.getLogger(__name__)

def parse_weather(weather: Union[OpenMeteoForecast, dict, None]) -> OpenMeteoForecast:
    if weather is None:
        raise FatalInputError("Weather payload is missing")
    if isinstance(weather, OpenMeteoForecast):
        return weather
    try:
        return OpenMeteoForecast.model_validate(weather)
    except ValidationError as e:
        logger.error(f"Weather payload failed validation: {e.error_count()} error(s)")
        raise FatalInputError(f"Weather payload is malformed: {e}") from e

def _current_conditions(current: OpenMeteoCurrent) -> CurrentConditions:
    return CurrentConditions(
        temp_f=UnitConversions.round_half_up(current.temperature_2m),
        feels_like_f=UnitConversions.round_half_up(current.apparent_temperature),
        conditions=describe_weather_code(current.weather_code),
        wind_speed_kt=UnitConversions.round_half_up(current.wind_speed_10m),
        wind_bearing=CompassPoint.from_degrees(current.wind_direction_10m),
        gusts_kt=UnitConversions.round_half_up(current.wind_gusts_10m),
        pressure_inhg=UnitConversions.hpa_to_inhg(current.pressure_msl),
        humidity_pct=UnitConversions.round_half_up(current.relative_humidity_2m)
    )

def _water_temperature(
    reading: Union[WaterTemperatureReading, dict, None],
    default_f: int
) -> Tuple[int, WaterTempSource]:
    if reading is None:
        return default_f, WaterTempSource.DEFAULT
    try:
        if not isinstance(reading, WaterTemperatureReading):
            reading = WaterTemperatureReading.model_validate(reading)
    except ValidationError:
        logger.warning(f"Unreadable water temperature {reading!r}; using default {default_f}°F")
        return default_f, WaterTempSource.DEFAULT
    return UnitConversions.round_half_up(reading.value), WaterTempSource.OBSERVED

def build_forecast_report(
    now: datetime,
    shift_start_hour: int,
    weather: Union[OpenMeteoForecast, dict, None],
    tides: Optional[Sequence[Any]] = None,
    water_temp: Union[WaterTemperatureReading, dict, None] = None,
    *,
    location: Optional[str] = None,
    station_id: Optional[str] = None,
    default_water_temp_f: Optional[int] = None
) -> ForecastReport:
    """Assemble the shift briefing from one set of upstream payloads.

    Only the weather payload is required: a missing or malformed one raises
    FatalInputError. Missing tides leave the tide list empty and the current
    "Variable"; a missing water temperature falls back to the configured
    default. Hourly arrays are assumed to start at the current hour of ``now``.
    """
    forecast = parse_weather(weather)
    if default_water_temp_f is None:
        default_water_temp_f = settings.default_water_temp_f

    shift_window = compute_shift_window(now, shift_start_hour)

    tide_events = normalize_tide_events(tides)
    tidal_current = estimate_tidal_current(tide_events)

    frame = forecast.hourly.to_frame()
    periods = [
        summarize_period(frame, period_slice(len(frame), now.hour, period), period)
        for period in ForecastPeriod
    ]

    water_temp_f, water_temp_source = _water_temperature(water_temp, default_water_temp_f)

    marine = MarineEstimate(
        water_temp_f=water_temp_f,
        water_temp_source=water_temp_source,
        current_speed=tidal_current.speed,
        current_direction=tidal_current.direction,
        sunrise=forecast.daily.sunrise[0].strftime("%H:%M"),
        sunset=forecast.daily.sunset[0].strftime("%H:%M")
    )

    sources = FeedSources(
        tides=SourceStatus.OK if tide_events else SourceStatus.UNAVAILABLE,
        water_temperature=(
            SourceStatus.OK if water_temp_source == WaterTempSource.OBSERVED else SourceStatus.UNAVAILABLE
        )
    )
    if sources.tides == SourceStatus.UNAVAILABLE:
        logger.info("Tide data unavailable; current reported as variable")

    return ForecastReport(
        location=location or settings.location_name,
        station_id=station_id or settings.noaa_station,
        generated_at=now,
        shift_window=shift_window,
        tides=tide_events,
        current=_current_conditions(forecast.current),
        periods=periods,
        marine=marine,
        sources=sources
    )
