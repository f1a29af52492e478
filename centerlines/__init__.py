"""
Geodetic smoothing and resampling of surveyed route centerlines
"""

from centerlines._version import __version__  # noqa: F401
from centerlines.utils.logging import LOGGER
from centerlines.exceptions import ConfigurationError
from centerlines.points import GeoPoint, group_sections
from centerlines.diagnostics import Diagnostic
from centerlines.geodesic import (
    Ellipsoid, GeodeticResult, GeodeticSolver, GRS80, WGS84,
    vincenty_direct, vincenty_inverse
)
from centerlines.config import PipelineConfig, load_config, restore_defaults
from centerlines.densify import densify
from centerlines.curves import (
    bezier_windows, cardinal_spline, interpolate_bezier, smooth_points, spline_control_points
)
from centerlines.resample import resample
from centerlines.curvature import assign_chainage, curve_radius, find_curves
from centerlines.pipeline import process_points, process_section

__all__ = [
    'ConfigurationError',
    'Diagnostic',
    'Ellipsoid',
    'GeoPoint',
    'GeodeticResult',
    'GeodeticSolver',
    'GRS80',
    'LOGGER',
    'PipelineConfig',
    'WGS84',
    'assign_chainage',
    'bezier_windows',
    'cardinal_spline',
    'curve_radius',
    'densify',
    'find_curves',
    'group_sections',
    'interpolate_bezier',
    'load_config',
    'process_points',
    'process_section',
    'resample',
    'restore_defaults',
    'smooth_points',
    'spline_control_points',
    'vincenty_direct',
    'vincenty_inverse',
]
