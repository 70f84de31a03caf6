import math
from typing import Optional

class UnitConversions:
    """Centralized utility for unit conversions across the application."""

    METERS_PER_MILE = 1609.34
    HPA_PER_INHG = 33.864

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round to the nearest integer, halves rounding up (12.5 -> 13)."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def meters_to_miles(meters: Optional[float]) -> Optional[float]:
        """Convert meters to statute miles, one decimal."""
        if meters is None:
            return None
        return round(meters / UnitConversions.METERS_PER_MILE, 1)

    @staticmethod
    def hpa_to_inhg(hpa: Optional[float]) -> Optional[float]:
        """Convert hectopascals to inches of mercury, two decimals."""
        if hpa is None:
            return None
        return round(hpa / UnitConversions.HPA_PER_INHG, 2)

    @staticmethod
    def format_feet(feet: Optional[float]) -> Optional[str]:
        """Format a height in feet with one decimal, e.g. 11.2."""
        if feet is None:
            return None
        return f"{feet:.1f}"
