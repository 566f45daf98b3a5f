from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from lapstats.models.lap import Lap


class ActivityCreate(BaseModel):
    """Activity posted by a client: laps already built from the source file."""

    type: Optional[str] = None
    start_time: Optional[datetime] = None
    laps: list[Lap] = Field(default_factory=list)


class AscentDescentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ascent: float
    descent: float


class GeographicInformationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    north: float
    south: float
    east: float
    west: float
    highest: float
    lowest: float


class HeartRateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    median: Optional[float] = None
    max: Optional[float] = None


class SplitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    idx: int  # 1-based split index
    lap: int
    point: int
    distance_m: float  # cumulative distance at the split point


class ActivitySummary(BaseModel):
    """Schema returned when summarising an activity."""

    type: Optional[str] = None
    start_time: Optional[datetime] = None
    laps: int

    total_distance_m: float
    duration: str  # "HH:MM:SS"
    total_calories: float

    pace_per_mile: str       # e.g. "7:32"
    pace_per_kilometre: str  # e.g. "4:41"
    # None when the activity has no duration
    avg_speed_mph: Optional[float] = None
    avg_speed_kph: Optional[float] = None

    max_speed_mps: float
    max_speed_mph: float
    max_speed_kph: float

    # None when the activity has no track points
    elevation: Optional[AscentDescentRead] = None
    geography: Optional[GeographicInformationRead] = None
    heart_rate: HeartRateRead
