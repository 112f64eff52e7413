"""
Constants declarations for geodatum
"""

import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INVERSE_F = 298.257223563
WGS84_F = 1 / WGS84_INVERSE_F  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0

# Helmert parameters are published in arc-seconds and parts-per-million
ARCSEC_TO_RADIANS = math.pi / (180 * 3600)
PPM = 1e-6

# Bowring (cartesian -> geodetic) iteration
BOWRING_TOLERANCE = 1e-12  # radians
BOWRING_MAX_ITERATIONS = 50

# Vincenty geodesic iteration
VINCENTY_TOLERANCE = 1e-12
VINCENTY_MAX_ITERATIONS = 200
