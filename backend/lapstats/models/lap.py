from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from lapstats.models.track_point import TrackPoint


class Lap(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_distance: float = 0.0  # meters
    total_time: float = 0.0      # seconds
    total_calories: float = 0.0
    max_speed: float = 0.0       # m/s

    start_time: Optional[datetime] = None
    avg_heart_rate: Optional[int] = None
    max_heart_rate: Optional[int] = None

    # Ordered as recorded
    track_points: list[TrackPoint] = Field(default_factory=list)

    def get_track_point(self, num: int) -> Optional[TrackPoint]:
        """Point at position `num`, or None when there is no such point."""
        if 0 <= num < len(self.track_points):
            return self.track_points[num]
        return None
