"""
Constants declarations for centerlines
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.314245  # Minor axis (meters)

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0
GRS80_B = 6356752.314140

# Vincenty convergence policy
VINCENTY_ACCURACY = 1.0e-12  # radians
VINCENTY_MAX_ITERATIONS = 20

# Curve detection
STRAIGHT_BEARING_DELTA = 1.0e-4  # radians
CURVE_RADIUS_BEARING_DELTA = 1.0e-3  # radians
FALLBACK_POINT_SPACING = 25.0  # meters

# Resampled end points closer than this are considered the same point
COINCIDENT_POINT_TOLERANCE = 0.001  # meters

# Sections with this many points or fewer are not processed
MIN_SECTION_POINTS = 3

DEFAULT_SECTION = 'default'
