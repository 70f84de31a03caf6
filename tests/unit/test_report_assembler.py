"""
Tests for assembling the shift report and its partial-failure policy.
"""

from datetime import datetime

import pytest

from features.common.exceptions.forecast_exceptions import FatalInputError
from features.forecast.models.forecast_types import SourceStatus, WaterTempSource
from features.forecast.services.report_assembler import build_forecast_report
from features.tides.models.tide_types import CurrentDirection
from features.weather.models.weather_types import OpenMeteoForecast
from features.wind.models.wind_categories import CompassPoint


class TestBuildForecastReport:

    def test_full_report(self, shift_now, weather_payload, tide_predictions, water_temp_reading):
        report = build_forecast_report(shift_now, 8, weather_payload, tide_predictions, water_temp_reading)

        assert report.shift_window.start == datetime(2024, 3, 12, 8, 0)
        assert report.shift_window.end == datetime(2024, 3, 13, 8, 0)
        assert len(report.tides) == 4
        assert [p.period for p in report.periods] == ["morning", "afternoon", "evening", "night"]
        assert all(p.available for p in report.periods)
        assert report.marine.current_direction == CurrentDirection.FLOOD
        assert report.marine.current_speed == "0.5-1.5 kt"
        assert report.marine.water_temp_f == 49
        assert report.marine.water_temp_source == WaterTempSource.OBSERVED
        assert report.marine.sunrise == "07:19"
        assert report.marine.sunset == "19:13"
        assert report.sources.tides == SourceStatus.OK
        assert report.sources.water_temperature == SourceStatus.OK

    def test_current_conditions(self, shift_now, weather_payload):
        current = build_forecast_report(shift_now, 8, weather_payload).current

        assert current.temp_f == 49
        assert current.feels_like_f == 45
        assert current.conditions == "Overcast"
        assert current.wind_speed_kt == 8
        assert current.wind_bearing == CompassPoint.SSW
        assert current.gusts_kt == 16
        assert current.pressure_inhg == 30.01
        assert current.humidity_pct == 81

    def test_missing_tides_degrade(self, shift_now, weather_payload, water_temp_reading):
        report = build_forecast_report(shift_now, 8, weather_payload, None, water_temp_reading)

        assert report.tides == []
        assert report.marine.current_direction == CurrentDirection.VARIABLE
        assert report.marine.current_speed == "Variable"
        assert report.sources.tides == SourceStatus.UNAVAILABLE
        assert len(report.periods) == 4
        assert report.current.conditions == "Overcast"
        assert report.marine.water_temp_f == 49

    def test_missing_water_temp_uses_default(self, shift_now, weather_payload, tide_predictions):
        report = build_forecast_report(shift_now, 8, weather_payload, tide_predictions, None)

        assert report.marine.water_temp_f == 52
        assert report.marine.water_temp_source == WaterTempSource.DEFAULT
        assert report.sources.water_temperature == SourceStatus.UNAVAILABLE

    def test_unreadable_water_temp_uses_default(self, shift_now, weather_payload):
        report = build_forecast_report(
            shift_now, 8, weather_payload, water_temp={"v": ""}, default_water_temp_f=50
        )
        assert report.marine.water_temp_f == 50

    def test_missing_weather_is_fatal(self, shift_now, tide_predictions):
        with pytest.raises(FatalInputError):
            build_forecast_report(shift_now, 8, None, tide_predictions)

    def test_mismatched_hourly_arrays_are_fatal(self, shift_now, weather_payload):
        weather_payload["hourly"]["visibility"] = weather_payload["hourly"]["visibility"][:-1]
        with pytest.raises(FatalInputError):
            build_forecast_report(shift_now, 8, weather_payload)

    def test_missing_current_block_is_fatal(self, shift_now, weather_payload):
        del weather_payload["current"]
        with pytest.raises(FatalInputError):
            build_forecast_report(shift_now, 8, weather_payload)

    def test_empty_hourly_series_is_fatal(self, shift_now, make_weather_payload):
        payload = make_weather_payload(hours=0)
        with pytest.raises(FatalInputError):
            build_forecast_report(shift_now, 8, payload)

    def test_accepts_validated_model(self, shift_now, weather_payload):
        forecast = OpenMeteoForecast.model_validate(weather_payload)
        report = build_forecast_report(shift_now, 8, forecast)
        assert report.current.temp_f == 49

    def test_elapsed_periods_are_not_available(self, weather_payload):
        """At 19:00 the morning and afternoon are over and fall back to N/A."""
        report = build_forecast_report(datetime(2024, 3, 12, 19, 0), 8, weather_payload)
        by_period = {p.period: p for p in report.periods}

        assert not by_period["morning"].available
        assert not by_period["afternoon"].available
        assert by_period["evening"].available
        assert by_period["night"].available
        assert by_period["morning"].temp_range_f is None

    def test_location_defaults_from_settings(self, shift_now, weather_payload):
        report = build_forecast_report(shift_now, 8, weather_payload)
        assert report.location == "Elliott Bay, Seattle"
        assert report.station_id == "9447130"

    def test_report_is_immutable(self, shift_now, weather_payload):
        report = build_forecast_report(shift_now, 8, weather_payload)
        with pytest.raises(Exception):
            report.location = "Somewhere else"
