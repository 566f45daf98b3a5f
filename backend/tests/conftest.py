import pytest

from lapstats.models.lap import Lap
from lapstats.models.track_point import TrackPoint


def make_lap(points=(), **kwargs) -> Lap:
    """Build a lap from (distance, altitude, heart_rate) tuples."""
    track_points = [
        TrackPoint(
            latitude=51.5 + i * 0.001,
            longitude=-0.12 - i * 0.001,
            distance=d,
            altitude=alt,
            heart_rate=hr,
        )
        for i, (d, alt, hr) in enumerate(points)
    ]
    return Lap(track_points=track_points, **kwargs)


@pytest.fixture
def two_laps():
    lap1 = make_lap(
        [(0, 100, 120), (800, 105, 130), (1610, 103, None)],
        total_distance=1610,
        total_time=480,
        total_calories=110,
        max_speed=4.2,
    )
    lap2 = make_lap(
        [(2000, 103, 0), (3300, 110, 150)],
        total_distance=1690,
        total_time=520,
        total_calories=120.5,
        max_speed=5.1,
    )
    return [lap1, lap2]
