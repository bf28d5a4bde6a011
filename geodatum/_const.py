"""
Constants declarations for geodatum
"""
import math

# Unit conversion
ARCSEC_TO_RAD = math.pi / (180. * 3600.)  # Arc-seconds to radians
PPM = 1e-6  # Parts-per-million to dimensionless

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Name of the datum every registered datum is defined relative to
HUB_DATUM = 'WGS84'

# Geocentric -> geographic latitude iteration
GEOCENTRIC_MAX_ITER = 10
GEOCENTRIC_TOLERANCE = 1e-12  # radians

# Below this |cos(lat)|, height is taken from Z rather than p
POLAR_COS_THRESHOLD = 1e-10

# Vincenty lambda iteration
VINCENTY_MAX_ITER = 100
VINCENTY_TOLERANCE = 1e-12  # radians
