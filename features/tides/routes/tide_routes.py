from typing import List

from fastapi import APIRouter, Depends, Request

from features.forecast.services.forecast_service import ForecastService
from features.tides.models.tide_types import TideEvent

router = APIRouter(
    prefix="/tides",
    tags=["Tides"]
)

def get_service(request: Request) -> ForecastService:
    """Dependency to get the ForecastService instance."""
    return request.app.state.forecast_service

@router.get(
    "/predictions",
    response_model=List[TideEvent],
    summary="Get tide events for the current shift",
    description="Returns up to four high/low tide events for the configured NOAA station; empty when predictions are unavailable"
)
async def get_tide_predictions(
    service: ForecastService = Depends(get_service)
) -> List[TideEvent]:
    """Get formatted tide events for the current shift."""
    return await service.get_tide_events()
