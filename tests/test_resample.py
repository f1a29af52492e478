import pytest
from pytest import approx

from centerlines import ConfigurationError, GeodeticSolver, GeoPoint
from centerlines.resample import resample

from tests.functions import gaps, walk

SOLVER = GeodeticSolver()


def test_resample_exact_multiple():
    points = walk(GeoPoint(51., -1., 20., 'A'), [(0., 100.)])
    result = resample(points, 25., SOLVER)
    assert len(result) == 5
    assert result[0] is points[0]

    distances = [SOLVER.distance(points[0], x) for x in result]
    assert distances == [approx(x, abs=1e-3) for x in (0., 25., 50., 75., 100.)]

    # Projected points keep the segment start's altitude and section
    assert all(x.altitude == 20. and x.section == 'A' for x in result)


def test_resample_across_vertices():
    # Collinear, unevenly spaced vertices along a meridian
    points = walk(GeoPoint(0., 0.), [(0., 40.), (0., 70.), (0., 40.)])
    result = resample(points, 25., SOLVER)
    assert len(result) == 7
    assert gaps(result) == [approx(25., abs=1e-3)] * 6


def test_resample_appends_remainder():
    points = walk(GeoPoint(-10., 130.), [(90., 60.), (95., 50.)])
    result = resample(points, 25., SOLVER)
    assert len(result) == 6
    assert result[-1] is points[-1]

    # Only the final pair may be short
    spacing = gaps(result)
    assert spacing[:-1] == [approx(25., abs=5e-2)] * 4
    assert 0 < spacing[-1] < 25.


def test_resample_short_input():
    point = GeoPoint(1., 1.)
    assert resample([point], 25.) == [point]
    assert resample([], 25.) == []

    # A path shorter than the interval keeps both ends
    points = walk(point, [(0., 10.)])
    result = resample(points, 25., SOLVER)
    assert len(result) == 2
    assert result[0] is points[0]
    assert result[1] is points[1]


def test_resample_repeat_is_stable():
    points = walk(GeoPoint(40., -105.), [(0., 333.), (0., 250.)])
    once = resample(points, 25., SOLVER)
    twice = resample(once, 25., SOLVER)
    assert abs(len(twice) - len(once)) <= 1


def test_resample_config_errors():
    points = walk(GeoPoint(0., 0.), [(0., 100.)])
    with pytest.raises(ConfigurationError):
        resample(points, 0.)

    with pytest.raises(ConfigurationError):
        resample(points, -25.)
