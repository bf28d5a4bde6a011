"""
Abridged Molodensky datum shift, applied directly to geographic coordinates
without passing through geocentric coordinates
"""

__all__ = ['molodensky_transform']

import math
from typing import Sequence, Tuple

from geodatum._const import POLAR_COS_THRESHOLD
from geodatum.ellipsoids import Ellipsoid
from geodatum.utils.functions import normalize_longitude


def molodensky_transform(
    latitude: float,
    longitude: float,
    height: float,
    from_ellipsoid: Ellipsoid,
    to_ellipsoid: Ellipsoid,
    shifts: Sequence[float],
) -> Tuple[float, float, float]:
    """
    Shift a geographic coordinate between datums using the Molodensky formulas.

    Only the three translations are modeled, and higher-order terms are dropped, so
    results agree with the geocentric Helmert route to roughly meter level.

    Args:
        latitude:
            Latitude on the source datum, in degrees

        longitude:
            Longitude on the source datum, in degrees

        height:
            Ellipsoidal height on the source datum, in meters

        from_ellipsoid:
            The source datum's ellipsoid

        to_ellipsoid:
            The target datum's ellipsoid

        shifts:
            (dx, dy, dz), the geocentric translation from source to target, in meters

    Returns:
        (latitude, longitude, height) on the target datum, with latitude in [-90, 90]
        and longitude wrapped into [-180, 180)
    """
    dx, dy, dz = shifts
    phi, lam = math.radians(latitude), math.radians(longitude)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    sin_lam, cos_lam = math.sin(lam), math.cos(lam)

    a, f, e2 = from_ellipsoid.a, from_ellipsoid.f, from_ellipsoid.e2
    da = to_ellipsoid.a - a
    df = to_ellipsoid.f - f

    rm = from_ellipsoid.radius_of_curvature_m(phi)
    rn = from_ellipsoid.radius_of_curvature_n(phi)

    d_phi = (
        -dx * sin_phi * cos_lam - dy * sin_phi * sin_lam + dz * cos_phi
        + da * (rn * e2 * sin_phi * cos_phi) / a
        + df * (rm / (1 - f) + rn * (1 - f)) * sin_phi * cos_phi
    ) / (rm + height)

    # Longitude is undefined on the polar axis
    d_lam = 0.
    if abs(cos_phi) > POLAR_COS_THRESHOLD:
        d_lam = (-dx * sin_lam + dy * cos_lam) / ((rn + height) * cos_phi)

    d_h = (
        dx * cos_phi * cos_lam + dy * cos_phi * sin_lam + dz * sin_phi
        - da * a / rn + df * (1 - f) * rn * sin_phi ** 2
    )

    lat = latitude + math.degrees(d_phi)
    lon = longitude + math.degrees(d_lam)

    # A shift across a pole comes out on the opposite meridian
    if abs(lat) > 90:
        lat = math.copysign(180., lat) - lat
        lon += 180.

    return lat, normalize_longitude(lon), height + d_h
