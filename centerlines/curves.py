"""
Curve fitting through centerline points: cardinal-spline Bezier control
points, Bezier sampling, and a couple of simpler smoothing helpers.

All interpolation happens in the latitude/longitude plane.
"""

__all__ = [
    'bezier_windows', 'cardinal_spline', 'interpolate_bezier',
    'smooth_points', 'spline_control_points',
]

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from centerlines.exceptions import ConfigurationError
from centerlines.points import GeoPoint

BezierWindow = Tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]


def _offset(anchor: GeoPoint, d_lat: float, d_lon: float) -> GeoPoint:
    """A control point displaced from a real point; keeps its altitude and section"""
    return GeoPoint(
        anchor.latitude + d_lat,
        anchor.longitude + d_lon,
        anchor.altitude,
        anchor.section,
    )


def _end_control(end: GeoPoint, adjacent: GeoPoint, tension: float) -> GeoPoint:
    return _offset(
        end,
        tension * (adjacent.latitude - end.latitude),
        tension * (adjacent.longitude - end.longitude),
    )


def spline_control_points(points: Sequence[GeoPoint], tension: float = 0.5) -> List[GeoPoint]:
    """
    Converts points into the Bezier control points of a cardinal spline
    passing through them.

    The result interleaves the real points with synthetic control points as
    [P0, C0+, C1-, P1, C1+, ..., Cn-, Pn], so its length is always 3N - 2 and
    every four entries taken with a stride of three describe one cubic
    Bezier segment. Interior tangents are the difference between the
    following and preceding points; end tangents point at the single
    neighbour.

    Args:
        points:
            The points to pass through

        tension: (float) (Default 0.5)
            Spline tension, scaled by 1/3 internally

    Returns:
        List[GeoPoint]; the input unchanged if it holds fewer than 2 points
    """
    if len(points) < 2:
        return list(points)

    tension = tension / 3.0

    controls = [points[0], _end_control(points[0], points[1], tension)]
    for prev, curr, nxt in zip(points, points[1:], points[2:]):
        d_lat = tension * (nxt.latitude - prev.latitude)
        d_lon = tension * (nxt.longitude - prev.longitude)
        controls.append(_offset(curr, -d_lat, -d_lon))
        controls.append(curr)
        controls.append(_offset(curr, d_lat, d_lon))

    controls.append(_end_control(points[-1], points[-2], tension))
    controls.append(points[-1])

    return controls


def bezier_windows(control_points: Sequence[GeoPoint]) -> Iterator[BezierWindow]:
    """
    Iterates over the cubic segments of a control point sequence: windows of
    four starting at indices 0, 3, 6, ..., so consecutive windows share an
    anchor.
    """
    for idx in range(0, len(control_points) - 3, 3):
        yield tuple(control_points[idx:idx + 4])  # type: ignore


def _de_casteljau(window: BezierWindow, t: np.ndarray) -> np.ndarray:
    """
    Evaluates one cubic segment at every parameter in `t` by repeated linear
    interpolation.

    Returns:
        Array of shape (len(t), 2) holding (latitude, longitude) pairs
    """
    level = np.array([[x.latitude, x.longitude] for x in window])[np.newaxis, :, :]
    weights = t[:, np.newaxis, np.newaxis]
    while level.shape[1] > 1:
        level = level[:, :-1] + (level[:, 1:] - level[:, :-1]) * weights

    return level[:, 0]


def interpolate_bezier(
    control_points: Sequence[GeoPoint],
    samples_per_segment: int = 60
) -> List[GeoPoint]:
    """
    Samples the Bezier segments described by `control_points` (as produced
    by spline_control_points).

    Each segment contributes its start anchor verbatim followed by
    `samples_per_segment` interior points at t = j / (K + 1), j = 1..K, so
    anchors are never duplicated; the final anchor is appended once at the
    end. Interior samples interpolate latitude and longitude only: they take
    the segment start's section label and an altitude of 0.

    Args:
        control_points:
            A control point sequence of length 3N - 2

        samples_per_segment: (int) (Default 60)
            Interior samples per segment

    Returns:
        List[GeoPoint]; the input unchanged if it holds fewer than 4 points
    """
    if samples_per_segment < 1:
        raise ConfigurationError(
            f'samples_per_segment must be at least 1, got {samples_per_segment!r}'
        )

    if len(control_points) < 4:
        return list(control_points)

    t = np.arange(1, samples_per_segment + 1) / (samples_per_segment + 1)

    result: List[GeoPoint] = []
    for window in bezier_windows(control_points):
        result.append(window[0])
        section = window[0].section
        result.extend(
            GeoPoint(lat, lon, section=section)
            for lat, lon in _de_casteljau(window, t).tolist()
        )

    result.append(control_points[-1])
    return result


def cardinal_spline(
    points: Sequence[GeoPoint],
    tension: float = 0.5,
    samples_per_segment: int = 60
) -> List[GeoPoint]:
    """
    Evaluates a cardinal (Hermite) spline directly through `points`,
    interpolating altitude as well as position. With tension 0 this is a
    Catmull-Rom spline.

    Each segment contributes `samples_per_segment` points starting at its
    first anchor; the final point is appended at the end.

    Returns:
        List[GeoPoint]; the input unchanged if it holds fewer than 2 points
    """
    if len(points) < 2:
        return list(points)

    scale = (1 - tension) / 2
    u = np.arange(samples_per_segment) / samples_per_segment
    u2, u3 = u ** 2, u ** 3
    h1 = 2 * u3 - 3 * u2 + 1
    h2 = -2 * u3 + 3 * u2
    h3 = u3 - 2 * u2 + u
    h4 = u3 - u2

    coords = np.array([[x.latitude, x.longitude, x.altitude] for x in points])
    result: List[GeoPoint] = []
    for idx in range(len(points) - 1):
        p0 = coords[max(idx - 1, 0)]
        p1, p2 = coords[idx], coords[idx + 1]
        p3 = coords[min(idx + 2, len(points) - 1)]
        m1, m2 = scale * (p2 - p0), scale * (p3 - p1)

        segment = (
            np.outer(h1, p1) + np.outer(h2, p2) + np.outer(h3, m1) + np.outer(h4, m2)
        )
        section = points[idx].section
        result.extend(
            GeoPoint(lat, lon, alt, section) for lat, lon, alt in segment.tolist()
        )

    result.append(points[-1])
    return result


def smooth_points(points: Sequence[GeoPoint], window_size: int = 3) -> List[GeoPoint]:
    """
    Centered moving average of position and altitude. The window shrinks at
    either end of the sequence.

    Returns:
        List[GeoPoint]; the input unchanged if shorter than the window
    """
    if len(points) < window_size:
        return list(points)

    coords = np.array([[x.latitude, x.longitude, x.altitude] for x in points])
    half = window_size // 2
    result = []
    for idx, point in enumerate(points):
        lat, lon, alt = coords[max(0, idx - half):idx + half + 1].mean(axis=0).tolist()
        result.append(point.replace(latitude=lat, longitude=lon, altitude=alt))

    return result
