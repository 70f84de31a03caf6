from enum import Enum
from typing import NamedTuple

# Periods starting before this hour fall on the calendar day after the shift starts
NEXT_DAY_CUTOFF_HOUR = 8

class ForecastPeriod(Enum):
    """Fixed wall-clock periods the shift forecast is reported in."""
    MORNING = (8, 12, "Morning (08:00-12:00)")
    AFTERNOON = (12, 18, "Afternoon (12:00-18:00)")
    EVENING = (18, 24, "Evening (18:00-00:00)")
    NIGHT = (0, 8, "Night (00:00-08:00)")

    def __init__(self, start_hour: int, end_hour: int, label: str):
        self.start_hour = start_hour
        self.end_hour = end_hour
        self.label = label

    @property
    def is_next_day(self) -> bool:
        return self.start_hour < NEXT_DAY_CUTOFF_HOUR

class SliceRange(NamedTuple):
    """Half-open index range [start, end) into an hourly series."""
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    @property
    def size(self) -> int:
        return max(0, self.end - self.start)
