from features.forecast.models.period_types import ForecastPeriod, SliceRange

def period_slice(series_length: int, current_hour: int, period: ForecastPeriod) -> SliceRange:
    """Project a wall-clock period onto an hourly series whose index 0 is the current hour.

    The night period belongs to the following calendar day, so its offsets are
    pushed forward by 24 hours. Indices are clamped to [0, series_length - 1];
    a range that collapses is returned with start == end.
    """
    if series_length < 1:
        raise ValueError("series must contain at least one hour")
    if not 0 <= current_hour <= 23:
        raise ValueError(f"current hour must be in 0-23, got {current_hour}")

    if period.is_next_day:
        start = 24 - current_hour + period.start_hour
        end = 24 - current_hour + period.end_hour
    else:
        start = period.start_hour - current_hour
        end = period.end_hour - current_hour

    last_index = series_length - 1
    start = max(0, start)
    end = min(last_index, end)

    if start >= end:
        start = end = min(start, last_index)
    return SliceRange(start, end)
