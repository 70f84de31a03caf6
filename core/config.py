from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Optional

class Settings(BaseSettings):
    """Application settings."""

    # Briefing location (Elliott Bay, Seattle)
    location_name: str = "Elliott Bay, Seattle"
    latitude: float = 47.6062
    longitude: float = -122.3321
    timezone: str = "America/Los_Angeles"

    # NOAA CO-OPS station used for tides and water temperature
    noaa_station: str = "9447130"

    # Shift starts at this local hour and runs for 24 hours
    shift_start_hour: int = Field(8, ge=0, le=23)

    # Used when the water temperature sensor has nothing to report
    default_water_temp_f: int = 52

    # Open-Meteo settings
    open_meteo_base_url: str = "https://api.open-meteo.com/v1/forecast"
    open_meteo_current_fields: List[str] = [
        "temperature_2m",
        "relative_humidity_2m",
        "apparent_temperature",
        "precipitation",
        "weather_code",
        "pressure_msl",
        "wind_speed_10m",
        "wind_direction_10m",
        "wind_gusts_10m",
    ]
    open_meteo_hourly_fields: List[str] = [
        "temperature_2m",
        "precipitation_probability",
        "weather_code",
        "visibility",
        "wind_speed_10m",
        "wind_direction_10m",
        "wind_gusts_10m",
    ]
    open_meteo_daily_fields: List[str] = [
        "temperature_2m_max",
        "temperature_2m_min",
        "sunrise",
        "sunset",
    ]
    open_meteo_units: Dict[str, str] = {
        "temperature_unit": "fahrenheit",
        "wind_speed_unit": "kn",
        "precipitation_unit": "inch",
    }

    # NOAA CO-OPS settings
    coops_base_url: str = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    coops_params: Dict[str, str] = {
        "datum": "MLLW",
        "units": "english",
        "time_zone": "lst_ldt",
        "format": "json"
    }

    request: Dict = {
        "timeout": 30,
        "user_agent": "fireboat-forecast-api/1.0"
    }

    cache_enabled: bool = True
    cache_prefix: str = "fireboat"

    log_level: str = "INFO"

    def get_cache_ttl(self) -> Dict[str, Optional[int]]:
        """Get cache TTL values in seconds."""
        return {
            "tide_predictions": 86400,  # 24 hours, predictions are published well ahead
        }

    model_config = SettingsConfigDict(
        env_prefix="fireboat_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
