"""
Curve radius estimation and chainage stamping for resampled centerlines
"""

__all__ = ['assign_chainage', 'curve_radius', 'find_curves']

import math
from typing import List, Optional, Sequence

from centerlines._const import (
    CURVE_RADIUS_BEARING_DELTA, FALLBACK_POINT_SPACING, STRAIGHT_BEARING_DELTA
)
from centerlines.geodesic import GeodeticSolver
from centerlines.points import GeoPoint
from centerlines.utils.functions import check_positive, round_half_up, wrap_angle


def _bearing_change(
    prev: GeoPoint,
    curr: GeoPoint,
    nxt: GeoPoint,
    solver: GeodeticSolver
) -> float:
    """Shortest angle (radians) between the bearings prev->curr and curr->next"""
    return wrap_angle(solver.bearing(curr, nxt) - solver.bearing(prev, curr))


def curve_radius(
    p1: GeoPoint,
    p2: GeoPoint,
    p3: GeoPoint,
    solver: Optional[GeodeticSolver] = None
) -> float:
    """
    Radius in meters of the circle through three consecutive points,
    estimated from the change in bearing at p2.

    Returns:
        float; math.inf if the points are practically in a straight line
    """
    solver = solver or GeodeticSolver()
    delta = _bearing_change(p1, p2, p3, solver)
    if delta < CURVE_RADIUS_BEARING_DELTA:
        return math.inf

    return (solver.distance(p1, p3) / 2) / math.sin(delta / 2)


def find_curves(
    points: Sequence[GeoPoint],
    curve_arc_length: float,
    straight_line_threshold: float,
    solver: Optional[GeodeticSolver] = None,
) -> List[GeoPoint]:
    """
    Estimate the local curve radius at every point of a resampled section.

    Each point is compared with the points `offset` positions before and
    after it, where offset spans half of `curve_arc_length` at the spacing
    of the first two points. Radii above `straight_line_threshold`, nearly
    collinear neighbours, and points too close to either end all get a
    radius of 0 (straight).

    Args:
        points:
            Evenly spaced, ordered points of one section

        curve_arc_length:
            Length (meters) of the arc the estimate is taken over

        straight_line_threshold:
            Radius (meters) above which a bend is treated as straight

        solver: (Optional[GeodeticSolver])
            The solver used for bearings and distances

    Returns:
        List[GeoPoint] with curve_radius set
    """
    check_positive(
        curve_arc_length=curve_arc_length,
        straight_line_threshold=straight_line_threshold
    )
    solver = solver or GeodeticSolver()

    spacing = FALLBACK_POINT_SPACING
    if len(points) > 1:
        spacing = solver.distance(points[0], points[1]) or FALLBACK_POINT_SPACING

    offset = max(1, int(round_half_up((curve_arc_length / 2) / spacing, 0)))

    result = []
    for idx, curr in enumerate(points):
        radius = 0.
        if idx - offset >= 0 and idx + offset < len(points):
            prev, nxt = points[idx - offset], points[idx + offset]
            delta = _bearing_change(prev, curr, nxt, solver)
            if delta >= STRAIGHT_BEARING_DELTA:
                radius = (solver.distance(prev, nxt) / 2) / math.sin(delta / 2)
                if radius > straight_line_threshold:
                    radius = 0.

        result.append(curr.replace(curve_radius=radius))

    return result


def assign_chainage(
    points: Sequence[GeoPoint],
    solver: Optional[GeodeticSolver] = None
) -> List[GeoPoint]:
    """
    Stamp cumulative along-path distance (meters) onto one section's points,
    starting from 0 at the first point.

    Returns:
        List[GeoPoint] with chainage set
    """
    solver = solver or GeodeticSolver()

    result: List[GeoPoint] = []
    chainage = 0.
    for idx, point in enumerate(points):
        if idx:
            chainage += solver.distance(points[idx - 1], point)
        result.append(point.replace(chainage=chainage))

    return result
