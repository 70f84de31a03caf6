from typing import Sequence

from features.tides.models.tide_types import (
    CurrentDirection,
    TidalCurrentEstimate,
    TideEvent,
    TideType
)

TYPICAL_CURRENT_SPEED = "0.5-1.5 kt"
VARIABLE = "Variable"

def estimate_tidal_current(events: Sequence[TideEvent]) -> TidalCurrentEstimate:
    """Classify the current from the first two tide events.

    Low then High means the tide is coming in (flood); High then Low means it
    is going out (ebb). Anything else, including fewer than two events, is
    reported as variable.
    """
    if len(events) >= 2:
        first, second = events[0].kind, events[1].kind
        if first == TideType.LOW and second == TideType.HIGH:
            return TidalCurrentEstimate(direction=CurrentDirection.FLOOD, speed=TYPICAL_CURRENT_SPEED)
        if first == TideType.HIGH and second == TideType.LOW:
            return TidalCurrentEstimate(direction=CurrentDirection.EBB, speed=TYPICAL_CURRENT_SPEED)
    return TidalCurrentEstimate(direction=CurrentDirection.VARIABLE, speed=VARIABLE)
