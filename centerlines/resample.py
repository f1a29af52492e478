"""
Arc-length resampling of a dense centerline at a uniform geodesic spacing
"""

__all__ = ['resample']

from typing import List, Optional, Sequence

from centerlines._const import COINCIDENT_POINT_TOLERANCE
from centerlines.geodesic import GeodeticSolver
from centerlines.points import GeoPoint
from centerlines.utils.functions import check_positive


def resample(
    points: Sequence[GeoPoint],
    interval: float,
    solver: Optional[GeodeticSolver] = None,
) -> List[GeoPoint]:
    """
    Re-sample a dense point sequence so that consecutive output points are
    exactly `interval` meters apart along the input path.

    The first input point is always kept. Output points are projected along
    the bearing of the input segment they fall in, keeping that segment
    start's section label and altitude. The last input point is appended
    unless the last output point already lies within a millimeter of it, so
    only the final pair may be closer than `interval`.

    Args:
        points:
            The dense, ordered points of one section

        interval:
            The output spacing in meters

        solver: (Optional[GeodeticSolver])
            The solver used for distances and projections

    Returns:
        List[GeoPoint]; the input unchanged if it holds fewer than 2 points
    """
    check_positive(interval=interval)
    if len(points) < 2:
        return list(points)

    solver = solver or GeodeticSolver()
    result = [points[0]]
    since_last_output = 0.

    for seg_start, seg_end in zip(points, points[1:]):
        geodesic = solver.inverse(seg_start, seg_end)
        covered = 0.

        while covered < geodesic.distance:
            to_next_output = interval - since_last_output
            if to_next_output <= geodesic.distance - covered:
                covered += to_next_output
                result.append(solver.project(seg_start, geodesic.azimuth, covered))
                since_last_output = 0.
            else:
                since_last_output += geodesic.distance - covered
                covered = geodesic.distance

    last = points[-1]
    if result[-1] is not last:
        if solver.distance(result[-1], last) > COINCIDENT_POINT_TOLERANCE:
            result.append(last)

    return result
