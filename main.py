from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging

# Feature routes
from features.forecast.routes.forecast_routes import router as forecast_router
from features.tides.routes.tide_routes import router as tide_router

# Services and clients
from features.forecast.services.forecast_service import ForecastService
from features.tides.services.tide_service import TideService
from features.weather.services.open_meteo_client import OpenMeteoClient

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    weather_client = OpenMeteoClient()
    tide_service = TideService()
    try:
        logger.info("🚀 Starting Fireboat Forecast API...")

        app.state.weather_client = weather_client
        app.state.tide_service = tide_service
        app.state.forecast_service = ForecastService(
            weather_client=weather_client,
            tide_service=tide_service
        )

        logger.info("✨ API startup complete - ready to serve requests")
        yield

    except Exception as e:
        logger.error(f"❌ Startup error: {str(e)}")
        raise
    finally:
        logger.info("🔄 Shutting down API...")
        await weather_client.close()
        await tide_service.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Fireboat Forecast API",
    description=f"Shift marine forecast for {settings.location_name}",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(forecast_router)
app.include_router(tide_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
