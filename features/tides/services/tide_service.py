import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import aiohttp

from core.cache import cached
from core.config import settings
from features.common.exceptions.forecast_exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)

class TideService:
    """Service for interacting with NOAA CO-OPS tide data API."""

    def __init__(self, data_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        """Initialize TideService."""
        self.data_url = data_url or settings.coops_base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.request["timeout"])
        self._session: Optional[aiohttp.ClientSession] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={
                    "User-Agent": settings.request["user_agent"],
                    "Accept": "application/json",
                }
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        session = await self._init_session()
        async with session.get(self.data_url, params=params) as response:
            response.raise_for_status()
            data = await response.json(content_type=None)
            if not isinstance(data, dict):
                raise UpstreamFetchError("NOAA CO-OPS returned an unexpected body")
            return data

    @cached(namespace="tide_predictions")
    async def get_predictions(
        self,
        station_id: str,
        begin_date: datetime,
        end_date: datetime
    ) -> List[Dict[str, Any]]:
        """Get high/low tide predictions for a station from NOAA CO-OPS API."""
        params = {
            **settings.coops_params,
            "begin_date": begin_date.strftime("%Y%m%d"),
            "end_date": end_date.strftime("%Y%m%d"),
            "station": station_id,
            "product": "predictions",
            "interval": "hilo",
        }

        try:
            logger.info(f"Fetching tide predictions for station {station_id} ({params['begin_date']}-{params['end_date']})")
            data = await self._get(params)

            if "error" in data:
                message = data["error"].get("message", "")
                if "No Predictions data was found" in message:
                    # Return empty list for stations without prediction data
                    return []
                raise UpstreamFetchError(message or "Unknown error from NOAA API")

            predictions = data.get("predictions", [])
            logger.info(f"Tide data received: {len(predictions)} tides")
            return predictions

        except UpstreamFetchError as e:
            logger.error(f"Error fetching tide predictions for station {station_id}: {str(e)}")
            raise
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.error(f"Error fetching tide predictions for station {station_id}: {str(e)}")
            raise UpstreamFetchError(f"Tide request failed: {str(e)}") from e

    async def get_latest_water_temperature(self, station_id: str) -> Optional[Dict[str, Any]]:
        """Get the latest water temperature reading, or None when the sensor has no data."""
        params = {
            **settings.coops_params,
            "station": station_id,
            "product": "water_temperature",
            "date": "latest",
        }
        params.pop("datum", None)

        try:
            data = await self._get(params)
            readings = data.get("data") or []
            if not readings:
                logger.warning(f"No water temperature available for station {station_id}")
                return None
            logger.info(f"Water temp: {readings[0].get('v')}°F")
            return readings[0]

        except UpstreamFetchError as e:
            logger.error(f"Error fetching water temperature for station {station_id}: {str(e)}")
            raise
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.error(f"Error fetching water temperature for station {station_id}: {str(e)}")
            raise UpstreamFetchError(f"Water temperature request failed: {str(e)}") from e
