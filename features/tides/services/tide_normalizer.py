import logging
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from features.common.utils.conversions import UnitConversions
from features.tides.models.tide_types import TideEvent, TidePrediction

logger = logging.getLogger(__name__)

MAX_TIDE_EVENTS = 4

def parse_tide_predictions(raw: Optional[Sequence[Any]]) -> List[TidePrediction]:
    """Validate raw NOAA predictions.

    A missing or malformed list degrades to an empty list; tides are optional
    for the briefing.
    """
    if not raw:
        return []
    try:
        return [p if isinstance(p, TidePrediction) else TidePrediction.model_validate(p) for p in raw]
    except ValidationError as e:
        logger.warning(f"Discarding malformed tide predictions: {e.error_count()} error(s)")
        return []

def normalize_tide_events(raw: Optional[Sequence[Any]]) -> List[TideEvent]:
    """First four tide events in upstream order, formatted for display."""
    predictions = parse_tide_predictions(raw)
    return [
        TideEvent(
            time=p.t.strftime("%H:%M"),
            kind=p.kind,
            height_feet=UnitConversions.format_feet(p.v)
        )
        for p in predictions[:MAX_TIDE_EVENTS]
    ]
