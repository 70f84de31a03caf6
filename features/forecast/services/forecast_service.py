import asyncio
import logging
from datetime import datetime
from typing import Any, List, Optional
from zoneinfo import ZoneInfo

from core.config import settings
from features.common.exceptions.forecast_exceptions import FatalInputError, UpstreamFetchError
from features.forecast.models.forecast_types import ForecastReport, ShiftWindow
from features.forecast.services.report_assembler import build_forecast_report, parse_weather
from features.forecast.services.shift_window import compute_shift_window
from features.tides.models.tide_types import TideEvent
from features.tides.services.tide_normalizer import normalize_tide_events
from features.tides.services.tide_service import TideService
from features.weather.services.open_meteo_client import OpenMeteoClient

logger = logging.getLogger(__name__)

class ForecastService:
    """Fetches the upstream feeds for one run and hands them to the report assembler."""

    def __init__(
        self,
        weather_client: OpenMeteoClient,
        tide_service: TideService
    ):
        self.weather_client = weather_client
        self.tide_service = tide_service
        self.tz = ZoneInfo(settings.timezone)

        logger.info(f"Forecast service initialized for {settings.location_name} "
                    f"(station {settings.noaa_station}, shift starts {settings.shift_start_hour:02d}:00)")

    def now(self) -> datetime:
        """Current time at the station."""
        return datetime.now(self.tz)

    def _localize(self, now: Optional[datetime]) -> datetime:
        """Station wall-clock time; naive values are taken as already local."""
        if now is None:
            return self.now()
        if now.tzinfo is not None:
            return now.astimezone(self.tz)
        return now

    def get_shift_window(self, now: Optional[datetime] = None) -> ShiftWindow:
        return compute_shift_window(self._localize(now), settings.shift_start_hour)

    def _optional_feed(self, result: Any, feed: str) -> Any:
        """Degrade a failed optional feed to None."""
        if isinstance(result, Exception):
            logger.warning(f"{feed} unavailable, continuing without it: {str(result)}")
            return None
        if isinstance(result, BaseException):
            raise result
        return result

    async def get_forecast(self, now: Optional[datetime] = None) -> ForecastReport:
        """Build the briefing for the shift containing ``now``.

        The three feeds are fetched concurrently. Raises FatalInputError when
        the weather feed fails; tide and water temperature failures only reduce
        what the report contains.
        """
        now = self._localize(now)
        shift_window = self.get_shift_window(now)

        logger.info("Starting forecast fetch...")
        weather, tides, water_temp = await asyncio.gather(
            self.weather_client.get_forecast(settings.latitude, settings.longitude),
            self.tide_service.get_predictions(settings.noaa_station, shift_window.start, shift_window.end),
            self.tide_service.get_latest_water_temperature(settings.noaa_station),
            return_exceptions=True
        )

        if isinstance(weather, BaseException):
            if not isinstance(weather, Exception):
                raise weather
            raise FatalInputError(f"Weather data unavailable: {str(weather)}") from weather

        # Hourly index 0 must be the current hour
        forecast = parse_weather(weather).aligned_to(now)
        if forecast is None:
            raise FatalInputError(f"Weather data has no hourly rows at or after {now.isoformat()}")

        report = build_forecast_report(
            now,
            settings.shift_start_hour,
            forecast,
            self._optional_feed(tides, "Tide predictions"),
            self._optional_feed(water_temp, "Water temperature"),
            location=settings.location_name,
            station_id=settings.noaa_station,
            default_water_temp_f=settings.default_water_temp_f
        )
        logger.info("Forecast complete!")
        return report

    async def get_tide_events(self, now: Optional[datetime] = None) -> List[TideEvent]:
        """Formatted tide events for the current shift; empty when NOAA is unavailable."""
        shift_window = self.get_shift_window(now)
        try:
            predictions = await self.tide_service.get_predictions(
                settings.noaa_station, shift_window.start, shift_window.end
            )
        except UpstreamFetchError as e:
            logger.warning(f"Tide predictions unavailable: {str(e)}")
            return []
        return normalize_tide_events(predictions)
