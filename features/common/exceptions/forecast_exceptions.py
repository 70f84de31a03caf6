class ForecastError(Exception):
    """Base exception for forecast pipeline errors."""
    pass

class FatalInputError(ForecastError):
    """Raised when the weather payload is missing or malformed and no report can be built."""
    pass

class UpstreamFetchError(ForecastError):
    """Raised when an upstream feed (Open-Meteo, NOAA CO-OPS) cannot be fetched."""
    pass
