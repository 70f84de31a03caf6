from enum import Enum

class WaveHeightBucket(Enum):
    """Wind-driven wave height estimate for sheltered water, by average wind speed in knots."""
    SMALL = (0, 10, "1-2 ft")
    MODERATE = (10, 15, "2-3 ft")
    ROUGH = (15, 20, "3-5 ft")
    VERY_ROUGH = (20, float('inf'), "4-6 ft")

    def __init__(self, min_wind_kt: float, max_wind_kt: float, description: str):
        self.min_wind_kt = min_wind_kt
        self.max_wind_kt = max_wind_kt
        self.description = description

    @classmethod
    def from_wind_speed(cls, wind_kt: float) -> 'WaveHeightBucket':
        for bucket in cls:
            if wind_kt < bucket.max_wind_kt:
                return bucket
        return cls.VERY_ROUGH
