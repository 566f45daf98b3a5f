import pytest

from lapstats.core.aggregate import (
    SplitKey,
    ascent_descent,
    geographic_extent,
    heart_rate_stats,
    iter_points,
    median,
    split_keys,
)
from lapstats.errors import EmptyActivityError
from lapstats.models.track_point import TrackPoint

from conftest import make_lap


def test_iter_points_pairs_lap_and_point_index(two_laps):
    keys = [key for key, _ in iter_points(two_laps)]
    assert keys == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]
    assert all(isinstance(k, SplitKey) for k in keys)


def test_iter_points_skips_empty_laps():
    laps = [make_lap(), make_lap([(0, 10, None)])]
    assert [key for key, _ in iter_points(laps)] == [SplitKey(1, 0)]


def test_ascent_descent_single_lap():
    lap = make_lap([(0, alt, None) for alt in [100, 105, 103, 103, 110]])
    result = ascent_descent(iter_points([lap]))
    assert result.ascent == 12
    assert result.descent == 2


def test_ascent_descent_single_point_is_zero():
    result = ascent_descent(iter_points([make_lap([(0, 42, None)])]))
    assert result == (0, 0)


def test_ascent_descent_no_points_raises():
    with pytest.raises(EmptyActivityError):
        ascent_descent(iter_points([]))
    with pytest.raises(EmptyActivityError):
        ascent_descent(iter_points([make_lap()]))


def test_geographic_extent_single_point():
    lap = make_lap()
    lap.track_points.append(TrackPoint(latitude=10, longitude=20, altitude=5))
    geo = geographic_extent(iter_points([lap]))
    assert geo.north == geo.south == 10
    assert geo.east == geo.west == 20
    assert geo.highest == geo.lowest == 5


def test_geographic_extent_no_points():
    assert geographic_extent(iter_points([])) is None


def test_split_keys_single_lap_mile():
    lap = make_lap([(d, 0, None) for d in [0, 800, 1610, 2000, 3300]])
    assert split_keys(iter_points([lap]), 1609.34) == [(0, 2), (0, 4)]


def test_split_keys_trailing_partial_split():
    lap = make_lap([(d, 0, None) for d in [0, 1000, 1500]])
    assert split_keys(iter_points([lap]), 1000) == [(0, 1), (0, 2)]


def test_split_keys_ending_on_boundary_has_no_extra_split():
    lap = make_lap([(d, 0, None) for d in [0, 500, 1000]])
    assert split_keys(iter_points([lap]), 1000) == [(0, 2)]


def test_split_keys_no_points():
    assert split_keys(iter_points([]), 1000) == []


def test_split_keys_distinguish_laps():
    laps = [
        make_lap([(0, 0, None), (1000, 0, None)]),
        make_lap([(1500, 0, None), (2000, 0, None)]),
    ]
    assert split_keys(iter_points(laps), 1000) == [(0, 1), (1, 1)]


def test_median():
    assert median([70, 80, 90, 100]) == 85
    assert median([70, 80, 90]) == 80
    assert median([60]) == 60


def test_heart_rate_stats_even_and_odd():
    lap = make_lap([(0, 0, hr) for hr in [90, 70, 100, 80]])
    assert heart_rate_stats(iter_points([lap])) == (85, 100)

    lap = make_lap([(0, 0, hr) for hr in [80, 90, 70]])
    assert heart_rate_stats(iter_points([lap])) == (80, 90)


def test_heart_rate_stats_ignores_missing_readings():
    lap = make_lap([(0, 0, hr) for hr in [None, 0, 140, None]])
    assert heart_rate_stats(iter_points([lap])) == (140, 140)


def test_heart_rate_stats_no_readings():
    lap = make_lap([(0, 0, None), (10, 0, 0)])
    stats = heart_rate_stats(iter_points([lap]))
    assert stats.median is None
    assert stats.max is None


def test_heart_rate_stats_fractional_readings():
    lap = make_lap([(0, 0, hr) for hr in [72.5, 0, 70.25, 80.0]])
    stats = heart_rate_stats(iter_points([lap]))
    assert stats.median == 72.5
    assert stats.max == 80.0
