from datetime import datetime, timedelta

from features.forecast.models.forecast_types import ShiftWindow

SHIFT_LENGTH = timedelta(hours=24)

def compute_shift_window(now: datetime, start_hour: int) -> ShiftWindow:
    """Shift containing ``now``: it started today at ``start_hour``, or yesterday if that is still ahead."""
    if not 0 <= start_hour <= 23:
        raise ValueError(f"shift start hour must be in 0-23, got {start_hour}")

    start = now.replace(hour=start_hour, minute=0, second=0, microsecond=0)
    if now.hour < start_hour:
        start -= timedelta(days=1)
    return ShiftWindow(start=start, end=start + SHIFT_LENGTH)
