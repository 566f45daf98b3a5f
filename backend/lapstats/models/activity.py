import logging
from datetime import datetime
from typing import Any, Optional

from lapstats.core import converter
from lapstats.core.aggregate import (
    AscentDescent,
    GeographicInformation,
    HeartRateStats,
    SplitKey,
    ascent_descent,
    geographic_extent,
    heart_rate_stats,
    iter_points,
    split_keys,
)
from lapstats.core.config import settings
from lapstats.core.constants import SECONDS_PER_HOUR, SplitUnit
from lapstats.core.time_utils import to_local_datetime
from lapstats.models.lap import Lap

logger = logging.getLogger(__name__)


class Activity:
    """A recorded activity made of ordered laps.

    Nothing is cached: every getter walks the current laps, so results
    follow any `add_lap`/`set_laps` made in between. No locking is done
    here; guard mutation yourself when sharing an Activity across threads.
    """

    def __init__(self, type: Optional[str] = None):
        self.type = type
        self.start_time: Any = None
        self.laps: list[Lap] = []

    def get_type(self) -> Optional[str]:
        return self.type

    def set_type(self, type: str) -> "Activity":
        """Free-form label such as "Running" or "Cycling"."""
        self.type = type
        return self

    def get_start_time(self, fmt: str) -> Any:
        if isinstance(self.start_time, datetime):
            return self.start_time.strftime(fmt)
        return self.start_time

    def set_start_time(self, time: Any) -> "Activity":
        """Store the start time, normalised to the configured timezone.

        Values that are not datetimes are kept as given.
        """
        if isinstance(time, datetime):
            time = to_local_datetime(time, settings.timezone)
        self.start_time = time
        return self

    # --------- Laps --------- #

    def get_laps(self) -> list[Lap]:
        return self.laps

    def get_lap(self, num: int) -> Optional[Lap]:
        if 0 <= num < len(self.laps):
            return self.laps[num]
        return None

    def add_lap(self, lap: Lap) -> "Activity":
        self.laps.append(lap)
        return self

    def set_laps(self, laps: list[Lap]) -> "Activity":
        self.laps = list(laps)
        return self

    # --------- Totals --------- #

    def get_total_distance(self) -> float:
        total = 0
        for lap in self.laps:
            total += lap.total_distance
        return total

    def get_total_duration(self) -> float:
        total = 0
        for lap in self.laps:
            total += lap.total_time
        return total

    def get_total_calories(self) -> float:
        total = 0
        for lap in self.laps:
            total += lap.total_calories
        return total

    def get_max_speed(self) -> float:
        """Max speed in m/s over all laps, 0 with no laps."""
        return max((lap.max_speed for lap in self.laps), default=0)

    def get_max_speed_in_mph(self) -> float:
        return converter.mps_to_mph(self.get_max_speed())

    def get_max_speed_in_kph(self) -> float:
        return converter.mps_to_kph(self.get_max_speed())

    # --------- Pace / speed --------- #

    def _pace(self, distance_in_unit: float) -> str:
        # Zero distance formats as zero seconds rather than dividing by it
        seconds = self.get_total_duration() / distance_in_unit if distance_in_unit else 0
        return converter.seconds_to_human_readable(seconds)

    def get_average_pace_per_mile(self) -> str:
        return self._pace(converter.metres_to_miles(self.get_total_distance()))

    def get_average_pace_per_kilometre(self) -> str:
        return self._pace(converter.metres_to_kilometres(self.get_total_distance()))

    def _speed(self, distance_in_unit: float) -> Optional[float]:
        hours = self.get_total_duration() / SECONDS_PER_HOUR
        if not hours:
            # Undefined for a zero-duration activity
            return None
        return distance_in_unit / hours

    def get_average_speed_in_mph(self) -> Optional[float]:
        """Average speed in mph, None when the activity has no duration."""
        return self._speed(converter.metres_to_miles(self.get_total_distance()))

    def get_average_speed_in_kph(self) -> Optional[float]:
        """Average speed in kph, None when the activity has no duration."""
        return self._speed(converter.metres_to_kilometres(self.get_total_distance()))

    # --------- Point aggregates --------- #

    def get_total_ascent_descent(self) -> AscentDescent:
        """Total climbing and descending in meters.

        Raises EmptyActivityError when the activity has no track points.
        """
        result = ascent_descent(iter_points(self.laps))
        logger.debug("Ascent %.1f m, descent %.1f m", result.ascent, result.descent)
        return result

    def get_geographic_information(self) -> Optional[GeographicInformation]:
        """Extremal points of the track; None when there are no points."""
        return geographic_extent(iter_points(self.laps))

    def get_splits(self, unit: SplitUnit | str) -> list[SplitKey]:
        """Keys of the points closing each kilometre or mile.

        The final key closes a shorter split when the activity doesn't end
        exactly on a boundary.
        """
        unit = SplitUnit(unit)
        if unit is SplitUnit.kilometre:
            distance = converter.kilometres_to_metres(1)
        else:
            distance = converter.miles_to_metres(1)
        return split_keys(iter_points(self.laps), distance)

    def get_heart_rate(self) -> HeartRateStats:
        """Median and max heart rate; both None when nothing was recorded."""
        return heart_rate_stats(iter_points(self.laps))
