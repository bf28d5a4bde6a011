"""
Geodesic problems on the ellipsoid.

The inverse problem (distance and azimuths between two points) and the direct problem
(destination from a start point, azimuth and distance) are solved with Vincenty's
iterative formulae, or optionally with Karney's algorithm via geographiclib.
"""

__all__ = [
    'GeodesicResult',
    'geodesic_direct', 'geodesic_inverse',
    'karney_direct', 'karney_inverse',
    'vincenty_direct', 'vincenty_inverse',
]

import math
from typing import Literal, NamedTuple, Tuple

from geodatum._const import VINCENTY_MAX_ITER, VINCENTY_TOLERANCE
from geodatum.ellipsoids import WGS84, Ellipsoid
from geodatum.exceptions import NonConvergence
from geodatum.utils.functions import normalize_azimuth, normalize_longitude


class GeodesicResult(NamedTuple):
    """
    Solution of the inverse geodesic problem.

    Attributes:
        distance:
            Length of the geodesic, in meters

        azimuth12:
            Azimuth at point 1 toward point 2, degrees clockwise from north in [0, 360)

        azimuth21:
            Azimuth at point 2 back toward point 1, degrees in [0, 360)
    """
    distance: float
    azimuth12: float
    azimuth21: float


# -------------------------------------------------------------------------
# Vincenty Implementation
# -------------------------------------------------------------------------

def vincenty_inverse(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodesicResult:
    """
    Solve the inverse geodesic problem using Vincenty's formulae.

    Args:
        lat1, lon1:
            The first point, in degrees

        lat2, lon2:
            The second point, in degrees

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        GeodesicResult. Coincident points yield a distance of 0 and both azimuths 0.

    Raises:
        NonConvergence: if lambda fails to converge within 100 iterations, which
            happens for nearly antipodal points
    """
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    # Every longitude names the same point at a pole
    if lat1 == lat2 and abs(lat1) == 90:
        return GeodesicResult(0., 0., 0.)

    U1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    U2 = math.atan((1 - f) * math.tan(math.radians(lat2)))
    L = math.radians(normalize_longitude(lon2 - lon1))
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(VINCENTY_MAX_ITER):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return GeodesicResult(0., 0., 0.)  # Coincident points

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18; equatorial lines have cosSqAlpha == 0
        cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha if cosSqAlpha != 0 else 0.

        # eq. 10, 11
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < VINCENTY_TOLERANCE:
            break
    else:
        raise NonConvergence('Vincenty inverse', VINCENTY_MAX_ITER)

    # eq. 3 - 6
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )
    distance = b * A * (sigma - deltaSigma)

    # eq. 20
    sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
    alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)

    # eq. 21, the forward azimuth at point 2; reversed to point back at point 1
    alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

    return GeodesicResult(
        distance,
        normalize_azimuth(math.degrees(alpha1)),
        normalize_azimuth(math.degrees(alpha2) + 180),
    )


def vincenty_direct(
    lat: float,
    lon: float,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84,
) -> Tuple[float, float, float]:
    """
    Solve the direct geodesic problem using Vincenty's formulae.

    Args:
        lat, lon:
            The start point, in degrees

        azimuth:
            The initial azimuth, in degrees clockwise from north

        distance:
            The distance to travel, in meters

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        (latitude, longitude, azimuth) at the destination, where the azimuth is the
        direction of travel on arrival. Longitude is normalized to [-180, 180).
    """
    if distance == 0:
        return lat, lon, normalize_azimuth(azimuth)

    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f
    alpha1 = math.radians(azimuth)

    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)
    tanU1 = (1 - f) * math.tan(math.radians(lat))
    cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
    sinU1 = tanU1 * cosU1

    sigma1 = math.atan2(tanU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)

    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

    sigma = distance / (b * A)

    for _ in range(VINCENTY_MAX_ITER):
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        deltaSigma = B * sinSigma * (
                cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
        )
        sigma_prev = sigma
        sigma = distance / (b * A) + deltaSigma
        if abs(sigma - sigma_prev) < VINCENTY_TOLERANCE:
            break
    else:
        raise NonConvergence('Vincenty direct', VINCENTY_MAX_ITER)

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
    alpha2 = math.atan2(sinAlpha, -tmp)

    return (
        math.degrees(lat2),
        normalize_longitude(lon + math.degrees(L)),
        normalize_azimuth(math.degrees(alpha2)),
    )


# -------------------------------------------------------------------------
# Karney Implementation (via geographiclib)
# -------------------------------------------------------------------------

def karney_inverse(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodesicResult:
    """
    Solve the inverse geodesic problem using Karney's algorithm (via geographiclib).
    Converges for all point pairs, including antipodal ones.
    """
    from geographiclib.geodesic import Geodesic

    res = Geodesic(ellipsoid.a, ellipsoid.f).Inverse(lat1, lon1, lat2, lon2)

    # Coincident points have an arbitrary azimuth in geographiclib; pin it to 0
    if res['s12'] == 0:
        return GeodesicResult(0., 0., 0.)

    # geographiclib returns azimuths in range [-180, 180]; azi2 is the forward azimuth
    return GeodesicResult(
        res['s12'],
        normalize_azimuth(res['azi1']),
        normalize_azimuth(res['azi2'] + 180),
    )


def karney_direct(
    lat: float,
    lon: float,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84,
) -> Tuple[float, float, float]:
    """Solve the direct geodesic problem using Karney's algorithm (via geographiclib)."""
    from geographiclib.geodesic import Geodesic

    res = Geodesic(ellipsoid.a, ellipsoid.f).Direct(lat, lon, azimuth, distance)
    return (
        res['lat2'],
        normalize_longitude(res['lon2']),
        normalize_azimuth(res['azi2']),
    )


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

_ALGORITHMS = {
    'vincenty': (vincenty_inverse, vincenty_direct),
    'karney': (karney_inverse, karney_direct),
}


def _get_algorithm(algorithm: str):
    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")
    return _ALGORITHMS[algorithm]


def geodesic_inverse(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Ellipsoid = WGS84,
    algorithm: Literal['vincenty', 'karney'] = 'vincenty',
) -> GeodesicResult:
    """
    Solve the inverse geodesic problem with the chosen algorithm.

    Args:
        lat1, lon1, lat2, lon2:
            The two points, in degrees

        ellipsoid:
            (Default WGS84) The reference ellipsoid

        algorithm:
            (Default 'vincenty') 'vincenty' or 'karney'

    Returns:
        GeodesicResult
    """
    return _get_algorithm(algorithm)[0](lat1, lon1, lat2, lon2, ellipsoid)


def geodesic_direct(
    lat: float,
    lon: float,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84,
    algorithm: Literal['vincenty', 'karney'] = 'vincenty',
) -> Tuple[float, float, float]:
    """Solve the direct geodesic problem with the chosen algorithm; see vincenty_direct"""
    return _get_algorithm(algorithm)[1](lat, lon, azimuth, distance, ellipsoid)
