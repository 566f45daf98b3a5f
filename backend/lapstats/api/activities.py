import logging
from typing import Optional

from fastapi import APIRouter, Query

from lapstats.core.config import settings
from lapstats.core.constants import SplitUnit
from lapstats.core.time_utils import seconds_to_hhmmss
from lapstats.errors import EmptyActivityError
from lapstats.models.activity import Activity
from lapstats.schemas.activity import (
    ActivityCreate,
    ActivitySummary,
    AscentDescentRead,
    GeographicInformationRead,
    HeartRateRead,
    SplitRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activities", tags=["activities"])


def _build_activity(payload: ActivityCreate) -> Activity:
    activity = Activity().set_type(payload.type).set_laps(payload.laps)
    if payload.start_time is not None:
        activity.set_start_time(payload.start_time)
    return activity


@router.post("/summary", response_model=ActivitySummary)
def summarise_activity(payload: ActivityCreate):
    activity = _build_activity(payload)

    try:
        ad = activity.get_total_ascent_descent()
        elevation = AscentDescentRead(ascent=ad.ascent, descent=ad.descent)
    except EmptyActivityError:
        logger.info("Activity has no track points, skipping elevation")
        elevation = None

    geo = activity.get_geographic_information()
    hr = activity.get_heart_rate()

    return ActivitySummary(
        type=activity.get_type(),
        start_time=activity.start_time,
        laps=len(activity.get_laps()),
        total_distance_m=activity.get_total_distance(),
        duration=seconds_to_hhmmss(activity.get_total_duration()),
        total_calories=activity.get_total_calories(),
        pace_per_mile=activity.get_average_pace_per_mile(),
        pace_per_kilometre=activity.get_average_pace_per_kilometre(),
        avg_speed_mph=activity.get_average_speed_in_mph(),
        avg_speed_kph=activity.get_average_speed_in_kph(),
        max_speed_mps=activity.get_max_speed(),
        max_speed_mph=activity.get_max_speed_in_mph(),
        max_speed_kph=activity.get_max_speed_in_kph(),
        elevation=elevation,
        geography=GeographicInformationRead(**geo._asdict()) if geo else None,
        heart_rate=HeartRateRead(median=hr.median, max=hr.max),
    )


@router.post("/splits", response_model=list[SplitRead])
def list_splits(
    payload: ActivityCreate,
    unit: Optional[SplitUnit] = Query(None),
):
    """
    Split boundaries of the posted activity, per kilometre or mile:
      POST /activities/splits?unit=k
    """
    activity = _build_activity(payload)
    unit = unit or settings.default_split_unit

    results: list[SplitRead] = []
    for i, key in enumerate(activity.get_splits(unit), start=1):
        point = activity.get_lap(key.lap).get_track_point(key.point)
        results.append(
            SplitRead(idx=i, lap=key.lap, point=key.point, distance_m=point.distance)
        )
    return results
