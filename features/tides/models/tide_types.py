from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator

class TideType(str, Enum):
    HIGH = "High"
    LOW = "Low"

class CurrentDirection(str, Enum):
    FLOOD = "Flood (incoming)"
    EBB = "Ebb (outgoing)"
    VARIABLE = "Variable"

class TidePrediction(BaseModel):
    """Raw high/low prediction as returned by NOAA CO-OPS (interval=hilo)."""
    t: datetime = Field(..., description="Local station time, e.g. 2024-01-06 04:12")
    type: Literal["H", "L"]
    v: float = Field(..., description="Height in feet above MLLW")

    @field_validator("t", mode="before")
    @classmethod
    def parse_coops_time(cls, value):
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        return value

    @property
    def kind(self) -> TideType:
        return TideType.HIGH if self.type == "H" else TideType.LOW

class WaterTemperatureReading(BaseModel):
    """Latest water temperature observation (°F)."""
    value: float = Field(..., alias="v")

    class Config:
        populate_by_name = True

class TideEvent(BaseModel):
    """Tide event formatted for the briefing."""
    time: str = Field(..., description="Local time, HH:MM 24h")
    kind: TideType
    height_feet: str = Field(..., description="Height above MLLW in feet, one decimal")

    class Config:
        frozen = True

class TidalCurrentEstimate(BaseModel):
    """Coarse current estimate inferred from the order of the next tide events."""
    direction: CurrentDirection
    speed: str

    class Config:
        frozen = True
