"""Folds over the points of an activity.

Every function here consumes the output of `iter_points`, a lazy
lap-then-point walk, so the four "all points" aggregates traverse the
activity in exactly the same order.
"""

import logging
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

from lapstats.errors import EmptyActivityError
from lapstats.models.lap import Lap
from lapstats.models.track_point import TrackPoint

logger = logging.getLogger(__name__)


class SplitKey(NamedTuple):
    """Position of a point: lap index and index within that lap."""

    lap: int
    point: int


class AscentDescent(NamedTuple):
    ascent: float
    descent: float


class GeographicInformation(NamedTuple):
    north: float
    south: float
    east: float
    west: float
    highest: float
    lowest: float


class HeartRateStats(NamedTuple):
    median: Optional[float]
    max: Optional[float]


def iter_points(laps: Iterable[Lap]) -> Iterator[tuple[SplitKey, TrackPoint]]:
    for lap_idx, lap in enumerate(laps):
        for point_idx, point in enumerate(lap.track_points):
            yield SplitKey(lap_idx, point_idx), point


def ascent_descent(points: Iterable[tuple[SplitKey, TrackPoint]]) -> AscentDescent:
    """Sum of upward and downward altitude deltas between consecutive points.

    The first point only seeds the running altitude. Raises
    EmptyActivityError when there is no point to seed from.
    """
    it = iter(points)
    first = next(it, None)
    if first is None:
        raise EmptyActivityError("Cannot compute ascent/descent of an activity with no track points")

    last = first[1].altitude
    ascent = 0.0
    descent = 0.0
    for _, point in it:
        if point.altitude > last:
            ascent += point.altitude - last
        elif point.altitude < last:
            descent += last - point.altitude
        last = point.altitude
    return AscentDescent(ascent, descent)


def geographic_extent(points: Iterable[tuple[SplitKey, TrackPoint]]) -> Optional[GeographicInformation]:
    """Bounding box and altitude range, or None if there are no points."""
    result = None
    for _, p in points:
        if result is None:
            result = [p.latitude, p.latitude, p.longitude, p.longitude, p.altitude, p.altitude]
            continue
        result[0] = max(result[0], p.latitude)
        result[1] = min(result[1], p.latitude)
        result[2] = max(result[2], p.longitude)
        result[3] = min(result[3], p.longitude)
        result[4] = max(result[4], p.altitude)
        result[5] = min(result[5], p.altitude)

    if result is None:
        return None
    return GeographicInformation(*result)


def split_keys(points: Iterable[tuple[SplitKey, TrackPoint]], unit_m: float) -> list[SplitKey]:
    """Keys of the points closing each `unit_m` of cumulative distance.

    A trailing partial unit is closed by the last point when it is past the
    previous boundary.
    """
    splits: list[SplitKey] = []
    diff = 0.0
    key = None
    point = None

    for key, point in points:
        if point.distance - diff >= unit_m:
            splits.append(key)
            diff = point.distance

    # Last split, even if it's not a full unit
    if point is not None and point.distance > diff:
        splits.append(key)

    return splits


def median(values: Sequence[float]) -> float:
    """Median of an already sorted, non-empty sequence."""
    n = len(values)
    mid = n // 2
    if n % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2
    return values[mid]


def heart_rate_stats(points: Iterable[tuple[SplitKey, TrackPoint]]) -> HeartRateStats:
    readings = sorted(p.heart_rate for _, p in points if p.has_heart_rate())
    if not readings:
        return HeartRateStats(None, None)

    logger.debug("Heart rate from %d readings", len(readings))
    return HeartRateStats(median(readings), readings[-1])
