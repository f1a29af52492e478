"""
End-to-end centerline processing: densify, fit a spline, resample, find
curves and stamp chainage, section by section.
"""

__all__ = ['process_points', 'process_section']

from typing import Iterable, List, Optional, Sequence

from centerlines._const import MIN_SECTION_POINTS
from centerlines.config import PipelineConfig
from centerlines.curvature import assign_chainage, find_curves
from centerlines.curves import interpolate_bezier, spline_control_points
from centerlines.densify import densify
from centerlines.geodesic import GeodeticSolver
from centerlines.points import GeoPoint, group_sections
from centerlines.resample import resample
from centerlines.utils.logging import LOGGER

SPLINE_TENSION = 0.5


def process_section(
    points: Sequence[GeoPoint],
    config: PipelineConfig,
    solver: Optional[GeodeticSolver] = None,
) -> List[GeoPoint]:
    """
    Run the full pipeline over the ordered points of a single section.

    Args:
        points:
            The raw points of one section, in path order

        config:
            The pipeline options

        solver: (Optional[GeodeticSolver])
            The solver used for every geodesic computation

    Returns:
        List[GeoPoint], evenly spaced with chainage (and curve radius, if
        config.find_curves) set
    """
    solver = solver or GeodeticSolver()

    densified = densify(points, config.max_segment_length, config.densify_spacing, solver)
    controls = spline_control_points(densified, SPLINE_TENSION)
    smoothed = interpolate_bezier(controls, config.spline_detail)
    resampled = resample(smoothed, config.output_spacing, solver)
    LOGGER.debug(
        'Section points: %d raw, %d densified, %d smoothed, %d resampled',
        len(points), len(densified), len(smoothed), len(resampled)
    )

    if config.find_curves:
        resampled = find_curves(
            resampled, config.curve_arc_length, config.straight_line_threshold, solver
        )

    return assign_chainage(resampled, solver)


def process_points(
    points: Iterable[GeoPoint],
    config: Optional[PipelineConfig] = None,
    solver: Optional[GeodeticSolver] = None,
) -> List[GeoPoint]:
    """
    Group points by section label and process every section independently,
    concatenating the results in the order sections first appear.

    Sections with too few points to fit a curve through are skipped.

    Args:
        points:
            Raw points, e.g. as returned by parse_kml

        config: (Optional[PipelineConfig])
            The pipeline options; the factory settings if not provided

        solver: (Optional[GeodeticSolver])
            The solver used for every geodesic computation

    Returns:
        List[GeoPoint]
    """
    config = config or PipelineConfig()
    solver = solver or GeodeticSolver()

    output: List[GeoPoint] = []
    for section, section_points in group_sections(points).items():
        if len(section_points) <= MIN_SECTION_POINTS:
            LOGGER.info(
                'Skipping section %r: %d points is too few to process',
                section, len(section_points)
            )
            continue

        processed = process_section(section_points, config, solver)
        LOGGER.info('Processed section %r into %d points', section, len(processed))
        output.extend(processed)

    return output
