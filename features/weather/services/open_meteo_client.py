import logging
from typing import Any, Dict, Optional

import aiohttp

from core.config import settings
from features.common.exceptions.forecast_exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)

class OpenMeteoClient:
    """Client for the Open-Meteo forecast API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url or settings.open_meteo_base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.request["timeout"])
        self._session: Optional[aiohttp.ClientSession] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": settings.request["user_agent"]}
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    def _build_params(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(settings.open_meteo_current_fields),
            "hourly": ",".join(settings.open_meteo_hourly_fields),
            "daily": ",".join(settings.open_meteo_daily_fields),
            "timezone": settings.timezone,
            **settings.open_meteo_units
        }

    async def get_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Fetch current, hourly and daily weather for a point, in °F and knots."""
        try:
            session = await self._init_session()
            logger.info(f"Fetching Open-Meteo forecast for {latitude:.4f},{longitude:.4f}")

            async with session.get(self.base_url, params=self._build_params(latitude, longitude)) as response:
                if response.status != 200:
                    raise UpstreamFetchError(f"Weather API returned {response.status}")
                data = await response.json(content_type=None)

                if not isinstance(data, dict):
                    raise UpstreamFetchError("Weather API returned an unexpected body")
                if data.get("error"):
                    raise UpstreamFetchError(data.get("reason", "Unknown error from Open-Meteo"))

                logger.info("Weather data received successfully")
                return data

        except UpstreamFetchError as e:
            logger.error(f"Error fetching Open-Meteo forecast: {str(e)}")
            raise
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.error(f"Error fetching Open-Meteo forecast: {str(e)}")
            raise UpstreamFetchError(f"Weather API request failed: {str(e)}") from e
