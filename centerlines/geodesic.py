"""
Geodesic calculations on an ellipsoid using Vincenty's direct and inverse formulae.

Coordinates are accepted and returned in degrees, distances in meters and
azimuths in radians. All trigonometry is done in radians internally.
"""

__all__ = [
    'Ellipsoid', 'GeodeticResult', 'GeodeticSolver', 'GRS80', 'WGS84',
    'vincenty_direct', 'vincenty_inverse',
]

import math
from typing import NamedTuple, Optional, Tuple

from centerlines._const import (
    GRS80_A, GRS80_B, VINCENTY_ACCURACY, VINCENTY_MAX_ITERATIONS, WGS84_A, WGS84_B
)
from centerlines.diagnostics import NON_CONVERGENCE, Diagnostic, DiagnosticSink, log_diagnostic
from centerlines.points import GeoPoint


class Ellipsoid:
    """Reference ellipsoid of a geodetic datum"""

    __slots__ = ('semi_major_axis', 'semi_minor_axis', 'flattening')

    def __init__(self, semi_major_axis: float, semi_minor_axis: float):
        if not semi_major_axis >= semi_minor_axis > 0:
            raise ValueError('Ellipsoid axes must satisfy semi_major >= semi_minor > 0')

        _set = object.__setattr__
        _set(self, 'semi_major_axis', float(semi_major_axis))
        _set(self, 'semi_minor_axis', float(semi_minor_axis))
        _set(self, 'flattening', (semi_major_axis - semi_minor_axis) / semi_major_axis)

    def __setattr__(self, key, value):
        raise AttributeError('Ellipsoid is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.semi_major_axis == other.semi_major_axis and
            self.semi_minor_axis == other.semi_minor_axis
        )

    def __hash__(self):
        return hash((self.semi_major_axis, self.semi_minor_axis))

    def __repr__(self):
        return f'<Ellipsoid(a={self.semi_major_axis}, b={self.semi_minor_axis})>'

    @property
    def inverse_flattening(self) -> float:
        return 1.0 / self.flattening


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
GRS80 = Ellipsoid(GRS80_A, GRS80_B)


class GeodeticResult(NamedTuple):
    """
    Solution of the inverse geodetic problem.

    distance is in meters; azimuth and reverse_azimuth are in radians, (-pi, pi].
    converged is False when the iteration cap was hit and the result is of
    degraded precision.
    """
    distance: float
    azimuth: float
    reverse_azimuth: float
    converged: bool = True


def _series_coefficients(u_sq: float) -> Tuple[float, float]:
    """Vincenty's A and B coefficients (eq. 3 and 4)"""
    a_coef = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    b_coef = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return a_coef, b_coef


def _delta_sigma(b_coef: float, sin_sigma: float, cos_sigma: float, cos2_sigma_m: float) -> float:
    """eq. 6"""
    return b_coef * sin_sigma * (
        cos2_sigma_m + b_coef / 4 * (
            cos_sigma * (-1 + 2 * cos2_sigma_m ** 2) -
            b_coef / 6 * cos2_sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos2_sigma_m ** 2)
        )
    )


class GeodeticSolver:
    """
    Vincenty solver for the direct and inverse geodetic problems.

    The solver holds only its configuration and can be shared freely. Any
    object exposing .latitude and .longitude (in degrees) may be passed
    as a point.

    Args:
        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid

        accuracy: (float) (Default 1e-12)
            Convergence threshold, in radians, between successive iterates

        max_iterations: (int) (Default 20)
            Iteration cap; a solution that hasn't converged by then is still
            returned, and a diagnostic is emitted

        diagnostics: (Optional[Callable])
            Receives a Diagnostic for every non-converged solution. Defaults
            to logging a warning.
    """

    def __init__(
        self,
        ellipsoid: Ellipsoid = WGS84,
        accuracy: float = VINCENTY_ACCURACY,
        max_iterations: int = VINCENTY_MAX_ITERATIONS,
        diagnostics: Optional[DiagnosticSink] = None,
    ):
        if max_iterations < 1:
            raise ValueError('max_iterations must be at least 1')

        self.ellipsoid = ellipsoid
        self.accuracy = accuracy
        self.max_iterations = max_iterations
        self.diagnostics = diagnostics or log_diagnostic

    def __repr__(self):
        return (
            f'<GeodeticSolver({self.ellipsoid!r}, accuracy={self.accuracy}, '
            f'max_iterations={self.max_iterations})>'
        )

    def _report_non_convergence(self, problem: str, **context) -> None:
        self.diagnostics(
            Diagnostic(
                NON_CONVERGENCE,
                f'Vincenty {problem} solution failed to converge within '
                f'{self.max_iterations} iterations; using degraded-precision result',
                context
            )
        )

    def inverse(self, start, end) -> GeodeticResult:
        """
        Solve the inverse problem: distance and azimuths between two points.

        Args:
            start:
                The start point

            end:
                The end point

        Returns:
            GeodeticResult
        """
        a = self.ellipsoid.semi_major_axis
        b = self.ellipsoid.semi_minor_axis
        f = self.ellipsoid.flattening

        lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)
        L = math.radians(end.longitude) - math.radians(start.longitude)

        U1 = math.atan((1 - f) * math.tan(lat1))
        U2 = math.atan((1 - f) * math.tan(lat2))
        sinU1, cosU1 = math.sin(U1), math.cos(U1)
        sinU2, cosU2 = math.sin(U2), math.cos(U2)

        Lambda = L
        converged = False
        for _ in range(self.max_iterations):
            sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

            # eq. 14
            sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                                 (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

            if sinSigma == 0:
                return GeodeticResult(0.0, 0.0, 0.0)  # Coincident points

            # eq. 15 & 16
            cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
            sigma = math.atan2(sinSigma, cosSigma)

            # eq. 17
            sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
            cosSqAlpha = 1 - sinAlpha ** 2

            # eq. 18
            try:
                cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
            except ZeroDivisionError:
                cos2SigmaM = 0  # Equatorial line

            # eq. 10 & 11
            C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
            Lambda_prev = Lambda
            Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
            )

            if abs(Lambda - Lambda_prev) <= self.accuracy:
                converged = True
                break

        if not converged:
            self._report_non_convergence(
                'inverse',
                start=(start.latitude, start.longitude),
                end=(end.latitude, end.longitude),
            )

        uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
        A, B = _series_coefficients(uSq)
        deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
        distance = b * A * (sigma - deltaSigma)

        # eq. 20
        alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
        alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

        return GeodeticResult(distance, alpha1, alpha2, converged)

    def direct(self, start, azimuth: float, distance: float) -> Tuple[float, float]:
        """
        Solve the direct problem: the point reached by travelling `distance`
        meters from `start` along initial azimuth `azimuth` (radians).

        Returns:
            Tuple of (latitude, longitude) in degrees
        """
        a = self.ellipsoid.semi_major_axis
        b = self.ellipsoid.semi_minor_axis
        f = self.ellipsoid.flattening

        lat1, lon1 = math.radians(start.latitude), math.radians(start.longitude)
        sinAlpha1, cosAlpha1 = math.sin(azimuth), math.cos(azimuth)

        tanU1 = (1 - f) * math.tan(lat1)
        cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
        sinU1 = tanU1 * cosU1

        sigma1 = math.atan2(tanU1, cosAlpha1)
        sinAlpha = cosU1 * sinAlpha1
        cosSqAlpha = 1 - sinAlpha ** 2
        uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
        A, B = _series_coefficients(uSq)

        sigma = distance / (b * A)
        converged = False
        for _ in range(self.max_iterations):
            cos2SigmaM = math.cos(2 * sigma1 + sigma)
            sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
            sigma_prev = sigma
            sigma = distance / (b * A) + _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
            if abs(sigma - sigma_prev) <= self.accuracy:
                converged = True
                break

        if not converged:
            self._report_non_convergence(
                'direct',
                start=(start.latitude, start.longitude),
                azimuth=azimuth,
                distance=distance,
            )

        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        cos2SigmaM = math.cos(2 * sigma1 + sigma)

        tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
        lat2 = math.atan2(
            sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
            (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
        )
        lambda_val = math.atan2(
            sinSigma * sinAlpha1,
            cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
        )
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        L = lambda_val - (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        return math.degrees(lat2), math.degrees(lon1 + L)

    def distance(self, start, end) -> float:
        """Ellipsoidal distance in meters between two points"""
        return self.inverse(start, end).distance

    def bearing(self, start, end) -> float:
        """Forward azimuth in radians from start to end"""
        return self.inverse(start, end).azimuth

    def project(self, point: GeoPoint, azimuth: float, distance: float) -> GeoPoint:
        """
        Create a new point `distance` meters from `point` along `azimuth` (radians).
        The new point keeps the section label and altitude of `point`.

        Returns:
            GeoPoint
        """
        lat, lon = self.direct(point, azimuth, distance)
        return GeoPoint(lat, lon, point.altitude, point.section)


def vincenty_inverse(start, end, ellipsoid: Ellipsoid = WGS84) -> GeodeticResult:
    """Inverse solution using the default convergence policy"""
    return GeodeticSolver(ellipsoid).inverse(start, end)


def vincenty_direct(
    start,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84
) -> Tuple[float, float]:
    """Direct solution using the default convergence policy"""
    return GeodeticSolver(ellipsoid).direct(start, azimuth, distance)
