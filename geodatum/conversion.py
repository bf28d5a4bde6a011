"""
Conversion between geographic (latitude, longitude, height) and geocentric
(X, Y, Z) coordinates on a given ellipsoid
"""

__all__ = [
    'geocentric_to_geographic', 'geographic_to_geocentric',
    'to_geocentric', 'to_geographic',
]

import math
from typing import Tuple

from geodatum._const import GEOCENTRIC_MAX_ITER, GEOCENTRIC_TOLERANCE, POLAR_COS_THRESHOLD
from geodatum.coordinates import GeocentricCoordinate, GeographicCoordinate
from geodatum.ellipsoids import Ellipsoid
from geodatum.exceptions import NonConvergence
from geodatum.utils.logging import LOGGER


def geographic_to_geocentric(
    latitude: float,
    longitude: float,
    height: float,
    ellipsoid: Ellipsoid,
) -> Tuple[float, float, float]:
    """
    Convert geographic coordinates to geocentric Cartesian coordinates.

        X = (N + h) cosφ cosλ
        Y = (N + h) cosφ sinλ
        Z = (N(1 - e²) + h) sinφ

    Args:
        latitude:
            Geodetic latitude, in degrees

        longitude:
            Longitude, in degrees

        height:
            Ellipsoidal height, in meters

        ellipsoid:
            The reference ellipsoid

    Returns:
        (X, Y, Z) in meters
    """
    phi, lam = math.radians(latitude), math.radians(longitude)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)

    n = ellipsoid.radius_of_curvature_n(phi)

    return (
        (n + height) * cos_phi * math.cos(lam),
        (n + height) * cos_phi * math.sin(lam),
        (n * (1 - ellipsoid.e2) + height) * sin_phi,
    )


def geocentric_to_geographic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid,
    strict: bool = False,
) -> Tuple[float, float, float]:
    """
    Convert geocentric Cartesian coordinates to geographic coordinates.

    Latitude has no closed form. It is seeded with Bowring's approximation and refined
    by fixed-point iteration until successive estimates differ by less than 1e-12
    radians, or 10 iterations have elapsed.

    Args:
        x, y, z:
            Geocentric coordinates, in meters

        ellipsoid:
            The reference ellipsoid

        strict:
            (Default False) If True, raise NonConvergence when the iteration cap is
            reached. Otherwise the last latitude estimate is accepted.

    Returns:
        (latitude, longitude, height) in degrees, degrees, meters
    """
    a, b, e2 = ellipsoid.a, ellipsoid.b, ellipsoid.e2

    lam = math.atan2(y, x)
    p = math.hypot(x, y)

    # Bowring's parametric latitude seed
    theta = math.atan2(z * a, p * b)
    phi = math.atan2(
        z + ellipsoid.ep2 * b * math.sin(theta) ** 3,
        p - e2 * a * math.cos(theta) ** 3
    )

    for _ in range(GEOCENTRIC_MAX_ITER):
        sin_phi = math.sin(phi)
        n = ellipsoid.radius_of_curvature_n(phi)
        phi_prev = phi
        phi = math.atan2(z + e2 * n * sin_phi, p)
        if abs(phi - phi_prev) < GEOCENTRIC_TOLERANCE:
            break
    else:
        if strict:
            raise NonConvergence('Geocentric latitude iteration', GEOCENTRIC_MAX_ITER)
        LOGGER.debug(
            'Geocentric latitude iteration hit its cap at (%s, %s, %s); '
            'accepting last estimate', x, y, z
        )

    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    n = ellipsoid.radius_of_curvature_n(phi)

    if abs(cos_phi) > POLAR_COS_THRESHOLD:
        h = p / cos_phi - n
    else:
        h = abs(z) / abs(sin_phi) - n * (1 - e2)

    return math.degrees(phi), math.degrees(lam), h


def to_geocentric(coord: GeographicCoordinate, ellipsoid: Ellipsoid) -> GeocentricCoordinate:
    """Convert a GeographicCoordinate, keeping its datum binding"""
    return GeocentricCoordinate(
        *geographic_to_geocentric(coord.latitude, coord.longitude, coord.height, ellipsoid),
        datum=coord.datum
    )


def to_geographic(
    coord: GeocentricCoordinate,
    ellipsoid: Ellipsoid,
    strict: bool = False
) -> GeographicCoordinate:
    """Convert a GeocentricCoordinate, keeping its datum binding"""
    return GeographicCoordinate(
        *geocentric_to_geographic(coord.x, coord.y, coord.z, ellipsoid, strict=strict),
        datum=coord.datum
    )
