from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from features.common.exceptions.forecast_exceptions import FatalInputError
from features.forecast.models.forecast_types import ForecastReport, ShiftWindow
from features.forecast.services.forecast_service import ForecastService

router = APIRouter(
    prefix="/forecast",
    tags=["Forecast"]
)

def get_service(request: Request) -> ForecastService:
    """Dependency to get the ForecastService instance."""
    return request.app.state.forecast_service

@router.get(
    "",
    response_model=ForecastReport,
    summary="Get the shift marine forecast",
    description="Returns current conditions, tides, the four period forecasts and marine estimates for the current 24-hour shift"
)
async def get_forecast(
    service: ForecastService = Depends(get_service)
) -> ForecastReport:
    """Get the briefing for the current shift."""
    try:
        return await service.get_forecast()
    except FatalInputError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.get(
    "/shift-window",
    response_model=ShiftWindow,
    summary="Get the shift window",
    description="Returns the start and end of the 24-hour shift containing the given time (default: now)"
)
async def get_shift_window(
    now: Optional[datetime] = None,
    service: ForecastService = Depends(get_service)
) -> ShiftWindow:
    """Get the shift window for a point in time."""
    return service.get_shift_window(now)
