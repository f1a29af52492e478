"""
Point densification along a centerline
"""

__all__ = ['densify']

from typing import List, Optional, Sequence

from centerlines.exceptions import ConfigurationError
from centerlines.geodesic import GeodeticSolver
from centerlines.points import GeoPoint
from centerlines.utils.functions import check_positive


def densify(
    points: Sequence[GeoPoint],
    max_segment_length: float,
    densify_spacing: float,
    solver: Optional[GeodeticSolver] = None,
) -> List[GeoPoint]:
    """
    Insert intermediate points wherever consecutive points are more than
    `max_segment_length` meters apart, so the spline fitted afterwards does
    not overshoot on long straights.

    New points are projected `densify_spacing` meters from the most recently
    emitted point towards the next original point. The bearing is recomputed
    from every inserted point, and insertion stops once the remaining gap is
    within `max_segment_length`. Inserted points take the section label of
    the point they lead to and the altitude of the point they were projected
    from.

    Args:
        points:
            The ordered points of one section

        max_segment_length:
            The largest permitted gap between consecutive points (meters)

        densify_spacing:
            The distance between inserted points (meters). Must not exceed
            twice max_segment_length, or a gap could never be closed.

        solver: (Optional[GeodeticSolver])
            The solver used for distances and projections

    Returns:
        List[GeoPoint]
    """
    check_positive(max_segment_length=max_segment_length, densify_spacing=densify_spacing)
    if densify_spacing > 2 * max_segment_length:
        raise ConfigurationError(
            'densify_spacing must not exceed twice max_segment_length, '
            f'got {densify_spacing!r} > 2 * {max_segment_length!r}'
        )

    solver = solver or GeodeticSolver()
    densified: List[GeoPoint] = []
    prev = None
    for point in points:
        if prev is not None:
            remaining = solver.distance(prev, point)
            while remaining > max_segment_length:
                bearing = solver.bearing(prev, point)
                inserted = solver.project(prev, bearing, densify_spacing)
                if inserted.section != point.section:
                    inserted = inserted.replace(section=point.section)

                densified.append(inserted)
                remaining = solver.distance(inserted, point)
                prev = inserted

        densified.append(point)
        prev = point

    return densified
