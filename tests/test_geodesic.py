import math

import pytest
from pytest import approx

from centerlines import GeoPoint
from centerlines.diagnostics import NON_CONVERGENCE
from centerlines.geodesic import *


def test_ellipsoid():
    assert WGS84.semi_major_axis == 6378137.0
    assert WGS84.semi_minor_axis == 6356752.314245
    assert WGS84.inverse_flattening == approx(298.257223563, abs=1e-6)
    assert GRS80.inverse_flattening == approx(298.257222101, abs=1e-6)
    assert WGS84 == Ellipsoid(6378137.0, 6356752.314245)
    assert WGS84 != GRS80

    with pytest.raises(AttributeError):
        WGS84.semi_major_axis = 1.

    with pytest.raises(ValueError):
        Ellipsoid(1., 2.)


def test_inverse_known_vectors():
    # Follow equator exactly - will trip ZeroDivisionError
    result = vincenty_inverse(GeoPoint(0., 0.), GeoPoint(0., 1.))
    assert result.distance == approx(111_319.49, abs=0.01)
    assert result.azimuth == approx(math.pi / 2)
    assert result.reverse_azimuth == approx(math.pi / 2)
    assert result.converged

    # Checked against PyGeodesy library results
    assert vincenty_inverse(GeoPoint(0., 0.), GeoPoint(0.001, 0.001)).distance == approx(156.903468, abs=1e-6)
    assert vincenty_inverse(GeoPoint(0., 0.), GeoPoint(1., 1.)).distance == approx(156_899.568291, abs=1e-6)

    # Antimeridian
    assert vincenty_inverse(GeoPoint(0., 179.), GeoPoint(0., -179.)).distance == approx(222_638.981586, abs=1e-6)

    # Due north
    result = vincenty_inverse(GeoPoint(0., 0.), GeoPoint(1., 0.))
    assert result.azimuth == 0.
    assert result.distance == approx(110_574.389, rel=1e-6)


def test_inverse_symmetry():
    pairs = [
        (GeoPoint(0., 0.), GeoPoint(0.001, 0.001)),
        (GeoPoint(51.5, -0.12), GeoPoint(48.85, 2.35)),
        (GeoPoint(-33.86, 151.2), GeoPoint(-37.81, 144.96)),
        (GeoPoint(60., 10.), GeoPoint(60.0001, 10.0002)),
    ]
    for a, b in pairs:
        forward, backward = vincenty_inverse(a, b), vincenty_inverse(b, a)
        assert forward.distance == approx(backward.distance, rel=1e-6)


def test_inverse_coincident():
    point = GeoPoint(45., 45.)
    assert vincenty_inverse(point, point) == GeodeticResult(0., 0., 0., True)


def test_direct():
    # Checked against PyGeodesy library results
    lat, lon = vincenty_direct(GeoPoint(0., 0.), math.radians(45.), 111_000)
    assert lat == approx(0.709811, abs=1e-6)
    assert lon == approx(0.705113, abs=1e-6)

    assert vincenty_direct(GeoPoint(10., 20.), 1., 0.) == (approx(10.), approx(20.))


def test_direct_inverse_consistency():
    solver = GeodeticSolver()
    start = GeoPoint(-27.47, 153.02)
    for azimuth in (0., 0.5, 2., -1., -3.):
        lat, lon = solver.direct(start, azimuth, 1234.5)
        result = solver.inverse(start, GeoPoint(lat, lon))
        assert result.distance == approx(1234.5, abs=1e-6)
        assert result.azimuth == approx(azimuth, abs=1e-9)


def test_solver_helpers():
    solver = GeodeticSolver()
    start = GeoPoint(0., 0., 12., 'A')
    end = GeoPoint(0., 1.)
    assert solver.distance(start, end) == solver.inverse(start, end).distance
    assert solver.bearing(start, end) == approx(math.pi / 2)

    projected = solver.project(start, math.pi / 2, 1000.)
    assert projected.altitude == 12.
    assert projected.section == 'A'
    assert projected.latitude == approx(0., abs=1e-12)
    assert solver.distance(start, projected) == approx(1000., abs=1e-6)

    with pytest.raises(ValueError):
        GeodeticSolver(max_iterations=0)


def test_non_convergence_is_reported():
    events = []
    solver = GeodeticSolver(diagnostics=events.append)

    # Antipodal points on the equator never converge
    result = solver.inverse(GeoPoint(0., 0.), GeoPoint(0., 180.))
    assert not result.converged
    assert math.isfinite(result.distance)
    assert len(events) == 1
    assert events[0].kind == NON_CONVERGENCE
    assert events[0].context['end'] == (0., 180.)

    # Converged solutions report nothing
    solver.inverse(GeoPoint(0., 0.), GeoPoint(1., 1.))
    assert len(events) == 1


def test_direct_non_convergence_is_reported():
    events = []
    solver = GeodeticSolver(max_iterations=1, diagnostics=events.append)

    lat, lon = solver.direct(GeoPoint(0., 0.), 0.5, 10_000_000.)
    assert math.isfinite(lat) and math.isfinite(lon)
    assert len(events) == 1
    assert events[0].kind == NON_CONVERGENCE
    assert events[0].context['distance'] == 10_000_000.
    assert 'direct' in events[0].message


def test_non_convergence_logged_by_default(caplog):
    solver = GeodeticSolver(max_iterations=3)
    solver.inverse(GeoPoint(0., 0.), GeoPoint(0., 180.))
    assert 'failed to converge within 3 iterations' in caplog.text
