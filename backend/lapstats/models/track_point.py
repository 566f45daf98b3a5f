from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TrackPoint(BaseModel):
    """A single recorded sample.

    `distance` is cumulative from the start of the activity, not from the
    start of the lap. A `heart_rate` of None or 0 means no reading.
    """

    model_config = ConfigDict(from_attributes=True)

    latitude: float
    longitude: float
    altitude: float = 0.0
    distance: float = 0.0  # meters from activity start
    heart_rate: Optional[float] = None  # bpm, may be averaged

    time: Optional[datetime] = None
    speed: Optional[float] = None  # m/s
    cadence: Optional[int] = None

    def get_position(self, axis: str) -> float:
        """Return 'lat' or 'lon' of this point."""
        if axis == "lat":
            return self.latitude
        if axis == "lon":
            return self.longitude
        raise ValueError(f"Unknown position axis: {axis!r}")

    def has_heart_rate(self) -> bool:
        return bool(self.heart_rate)
