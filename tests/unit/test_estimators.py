"""
Tests for the derived estimators: wave buckets, compass points and unit conversions.
"""

import pytest

from features.common.utils.conversions import UnitConversions
from features.waves.models.wave_categories import WaveHeightBucket
from features.weather.models.weather_types import describe_weather_code
from features.wind.models.wind_categories import CompassPoint


class TestWaveHeightBucket:

    @pytest.mark.parametrize("wind_kt, expected", [
        (0, "1-2 ft"),
        (9, "1-2 ft"),
        (10, "2-3 ft"),
        (14, "2-3 ft"),
        (15, "3-5 ft"),
        (19, "3-5 ft"),
        (20, "4-6 ft"),
        (25, "4-6 ft"),
        (60, "4-6 ft"),
    ])
    def test_thresholds(self, wind_kt, expected):
        assert WaveHeightBucket.from_wind_speed(wind_kt).description == expected

    def test_monotonic(self):
        order = list(WaveHeightBucket)
        buckets = [order.index(WaveHeightBucket.from_wind_speed(kt)) for kt in range(0, 40)]
        assert buckets == sorted(buckets)


class TestCompassPoint:

    @pytest.mark.parametrize("degrees, expected", [
        (0, CompassPoint.N),
        (360, CompassPoint.N),
        (11.24, CompassPoint.N),
        (11.25, CompassPoint.NNE),
        (45, CompassPoint.NE),
        (90, CompassPoint.E),
        (200, CompassPoint.SSW),
        (270, CompassPoint.W),
        (348.75, CompassPoint.N),
        (337.5, CompassPoint.NNW),
    ])
    def test_from_degrees(self, degrees, expected):
        assert CompassPoint.from_degrees(degrees) == expected

    def test_sixteen_points(self):
        assert len(CompassPoint) == 16


class TestUnitConversions:

    def test_hpa_to_inhg(self):
        assert UnitConversions.hpa_to_inhg(1016.2) == 30.01
        assert UnitConversions.hpa_to_inhg(None) is None

    def test_meters_to_miles(self):
        assert UnitConversions.meters_to_miles(16093.4) == 10.0
        assert UnitConversions.meters_to_miles(804.67) == 0.5
        assert UnitConversions.meters_to_miles(None) is None

    def test_format_feet(self):
        assert UnitConversions.format_feet(11.236) == "11.2"
        assert UnitConversions.format_feet(-0.881) == "-0.9"

    @pytest.mark.parametrize("value, expected", [(12.5, 13), (12.49, 12), (-0.5, 0), (48.6, 49)])
    def test_round_half_up(self, value, expected):
        assert UnitConversions.round_half_up(value) == expected


class TestWeatherCodes:

    def test_known_codes(self):
        assert describe_weather_code(0) == "Clear"
        assert describe_weather_code(48) == "Foggy"
        assert describe_weather_code(95) == "Thunderstorm"

    def test_unknown_and_missing(self):
        assert describe_weather_code(96) == "Unknown"
        assert describe_weather_code(None) == "Unknown"
        assert describe_weather_code(float("nan")) == "Unknown"
