from enum import Enum

from features.common.utils.conversions import UnitConversions

class CompassPoint(str, Enum):
    """16-point compass rose, clockwise from true north."""
    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"

    @classmethod
    def from_degrees(cls, degrees: float) -> 'CompassPoint':
        """Nearest compass point for a bearing; each point spans 22.5 degrees."""
        points = list(cls)
        return points[UnitConversions.round_half_up(degrees / 22.5) % len(points)]
