"""
Height systems: ellipsoidal (h, above the reference ellipsoid) and orthometric
(H, above the geoid), related through the geoid undulation N by

    H = h - N

Undulations come from a GeoidProvider. The providers shipped here are coarse analytic
approximations; callers needing cm-level accuracy must supply a grid-backed provider
(EGM2008, national models) implementing the same interface.
"""

__all__ = [
    'ApproximateGeoid', 'ConstantGeoid', 'GeoidProvider', 'RegionalGeoid',
    'ellipsoidal_height', 'ellipsoidal_to_orthometric',
    'orthometric_height', 'orthometric_to_ellipsoidal',
]

from abc import ABC, abstractmethod
import math

from geodatum._const import HUB_DATUM
from geodatum.coordinates import GeographicCoordinate


def ellipsoidal_to_orthometric(ellipsoidal_height: float, undulation: float) -> float:
    """H = h - N"""
    return ellipsoidal_height - undulation


def orthometric_to_ellipsoidal(orthometric_height: float, undulation: float) -> float:
    """h = H + N"""
    return orthometric_height + undulation


class GeoidProvider(ABC):
    """Supplies geoid undulations, the height of the geoid above the ellipsoid"""

    @abstractmethod
    def undulation(self, latitude: float, longitude: float) -> float:
        """
        The geoid undulation N at a location.

        Args:
            latitude:
                Latitude, in degrees

            longitude:
                Longitude, in degrees

        Returns:
            (float) N, in meters
        """


class ConstantGeoid(GeoidProvider):
    """A geoid at a fixed height above the ellipsoid everywhere"""

    def __init__(self, undulation: float):
        self._undulation = float(undulation)

    def __repr__(self):
        return f'<ConstantGeoid N={self._undulation}>'

    def undulation(self, latitude: float, longitude: float) -> float:
        return self._undulation


class ApproximateGeoid(GeoidProvider):
    """
    A handful of low-degree harmonic terms giving the broad shape of the global geoid.
    For illustration only; errors reach tens of meters.
    """

    def __repr__(self):
        return '<ApproximateGeoid>'

    def undulation(self, latitude: float, longitude: float) -> float:
        phi, lam = math.radians(latitude), math.radians(longitude)
        return (
            -8.4
            - 14 * math.sin(phi) ** 2
            + 16 * math.cos(2 * lam) * math.cos(phi) ** 2
            - 10 * math.sin(3 * phi)
            + 8 * math.cos(4 * lam) * math.cos(2 * phi)
        )


class RegionalGeoid(GeoidProvider):
    """
    A planar regional geoid: a base undulation at a reference location, varying
    linearly with latitude and longitude.

    Args:
        base:
            Undulation at the reference location, in meters

        ref_latitude, ref_longitude:
            The reference location, in degrees

        lat_gradient, lon_gradient:
            Change in undulation per degree of latitude / longitude, in meters
    """

    def __init__(
        self,
        base: float,
        ref_latitude: float,
        ref_longitude: float,
        lat_gradient: float = 0.,
        lon_gradient: float = 0.,
    ):
        self.base = base
        self.ref_latitude = ref_latitude
        self.ref_longitude = ref_longitude
        self.lat_gradient = lat_gradient
        self.lon_gradient = lon_gradient

    def __repr__(self):
        return (
            f'<RegionalGeoid N={self.base} at ({self.ref_latitude}, {self.ref_longitude})>'
        )

    @classmethod
    def turkey(cls) -> 'RegionalGeoid':
        """A rough fit to the Turkish geoid, which ranges between about 25m and 45m"""
        return cls(35., 39., 35., lat_gradient=0.5, lon_gradient=0.3)

    def undulation(self, latitude: float, longitude: float) -> float:
        return (
            self.base
            + (latitude - self.ref_latitude) * self.lat_gradient
            + (longitude - self.ref_longitude) * self.lon_gradient
        )


def orthometric_height(coord: GeographicCoordinate, geoid: GeoidProvider) -> float:
    """The orthometric height H of a coordinate whose height is ellipsoidal"""
    return ellipsoidal_to_orthometric(
        coord.height, geoid.undulation(coord.latitude, coord.longitude)
    )


def ellipsoidal_height(
    latitude: float,
    longitude: float,
    orthometric: float,
    geoid: GeoidProvider,
    datum: str = HUB_DATUM,
) -> GeographicCoordinate:
    """
    Build a GeographicCoordinate (with ellipsoidal height) from a location and its
    orthometric height.
    """
    return GeographicCoordinate(
        latitude,
        longitude,
        orthometric_to_ellipsoidal(orthometric, geoid.undulation(latitude, longitude)),
        datum,
    )
