from pytest import approx

from centerlines import GeodeticSolver, GeoPoint, PipelineConfig
from centerlines.pipeline import process_points, process_section

from tests.functions import gaps, walk

SOLVER = GeodeticSolver()

STRAIGHT = walk(GeoPoint(0., 0., section='A'), [(0., 250.)] * 4)
BENDY = walk(
    GeoPoint(0.01, 0.01, section='B'),
    [(0., 300.), (30., 300.), (60., 300.), (90., 300.), (90., 2000.)]
)
SHORT = walk(GeoPoint(0.02, 0.02, section='C'), [(0., 100.)] * 2)


def test_process_section_straight():
    result = process_section(STRAIGHT, PipelineConfig(), SOLVER)
    assert abs(len(result) - 41) <= 1

    # The first point survives every stage untouched
    assert result[0].latitude == STRAIGHT[0].latitude
    assert result[0].longitude == STRAIGHT[0].longitude

    spacing = gaps(result)
    assert spacing[:-1] == [approx(25., abs=1e-3)] * (len(spacing) - 1)
    assert spacing[-1] <= 25. + 1e-3

    assert result[0].chainage == 0.
    assert result[-1].chainage == approx(1000., abs=0.01)
    assert all(x.section == 'A' for x in result)
    assert all(x.curve_radius is None for x in result)


def test_process_section_find_curves():
    config = PipelineConfig(find_curves=True, output_spacing=20.)
    result = process_section(BENDY, config, SOLVER)
    assert all(x.curve_radius is not None for x in result)
    assert result[0].curve_radius == 0.
    assert result[-1].curve_radius == 0.

    # Somewhere along the bend a radius is found
    assert any(0. < x.curve_radius <= 5000. for x in result)

    # The long straight leg at the end reads as straight
    assert all(x.curve_radius == 0. for x in result[-20:])

    chainage = [x.chainage for x in result]
    assert chainage == sorted(chainage)


def test_process_points():
    points = [*STRAIGHT[:2], *BENDY, *SHORT, *STRAIGHT[2:]]
    result = process_points(points, solver=SOLVER)

    sections = [x.section for x in result]
    assert sections == sorted(sections)
    assert set(sections) == {'A', 'B'}

    # Chainage restarts with every section
    first_b = sections.index('B')
    assert result[0].chainage == 0.
    assert result[first_b].chainage == 0.
    assert result[first_b - 1].chainage == approx(1000., abs=0.01)

    assert process_points(SHORT) == []
    assert process_points([]) == []


def test_process_points_default_section():
    points = [x.replace(section='') for x in STRAIGHT]
    result = process_points(points, PipelineConfig(output_spacing=100.), SOLVER)
    assert len(result) == 11
    assert all(x.section == '' for x in result)
