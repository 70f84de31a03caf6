import logging
from typing import Optional

import pandas as pd

from features.common.utils.conversions import UnitConversions
from features.forecast.models.forecast_types import PeriodSummary
from features.forecast.models.period_types import ForecastPeriod, SliceRange
from features.waves.models.wave_categories import WaveHeightBucket
from features.weather.models.weather_types import describe_weather_code
from features.wind.models.wind_categories import CompassPoint

logger = logging.getLogger(__name__)

def _reduce(series: pd.Series, how: str) -> Optional[float]:
    """min/max/mean over the non-null values; None when nothing is left."""
    value = getattr(series, how)(skipna=True)
    if pd.isna(value):
        return None
    return float(value)

def _rounded(value: Optional[float]) -> Optional[int]:
    return None if value is None else UnitConversions.round_half_up(value)

def summarize_period(frame: pd.DataFrame, index_range: SliceRange, period: ForecastPeriod) -> PeriodSummary:
    """Reduce the hourly rows in ``index_range`` to one period summary.

    ``frame`` comes from ``OpenMeteoHourly.to_frame()``. The dominant condition
    is the weather code at the middle of the slice, and the bearing is a plain
    arithmetic mean of degrees, so a wind swinging across north averages to
    the south.
    """
    if index_range.is_empty:
        logger.debug(f"No hourly data for {period.name.lower()} in range {tuple(index_range)}")
        return PeriodSummary.not_available(period)

    window = frame.iloc[index_range.start:index_range.end]

    min_temp = _rounded(_reduce(window["temperature_f"], "min"))
    max_temp = _rounded(_reduce(window["temperature_f"], "max"))
    temp_range = (min_temp, max_temp) if min_temp is not None and max_temp is not None else None

    wind_avg = _rounded(_reduce(window["wind_speed_kt"], "mean"))
    bearing_avg = _reduce(window["wind_bearing_deg"], "mean")
    min_visibility = _reduce(window["visibility_m"], "min")

    codes = window["weather_code"]
    dominant = describe_weather_code(codes.iloc[len(codes) // 2])

    return PeriodSummary(
        period=period.name.lower(),
        label=period.label,
        temp_range_f=temp_range,
        dominant_condition=dominant,
        wind_avg_kt=wind_avg,
        wind_bearing_compass=CompassPoint.from_degrees(bearing_avg) if bearing_avg is not None else None,
        gust_max_kt=_rounded(_reduce(window["wind_gust_kt"], "max")),
        visibility_miles=UnitConversions.meters_to_miles(min_visibility),
        precipitation_pct=_rounded(_reduce(window["precipitation_pct"], "max")),
        wave_height_bucket=WaveHeightBucket.from_wind_speed(wind_avg).description if wind_avg is not None else None
    )
