"""
Datum-referenced coordinate value types
"""

__all__ = ['GeocentricCoordinate', 'GeographicCoordinate']

from dataclasses import dataclass, replace
import math
from typing import Tuple

from geodatum._const import HUB_DATUM
from geodatum.utils.functions import (
    decimal_to_dms, dms_to_decimal, format_dms, normalize_longitude
)


@dataclass(frozen=True)
class GeographicCoordinate:
    """
    A geodetic latitude/longitude/ellipsoidal height triple, referenced to a named datum.

    Coordinates referenced to different datums never compare equal, even when
    their numbers coincide.

    Args:
        latitude:
            Geodetic latitude in degrees, within [-90, 90]

        longitude:
            Longitude in degrees. Any real value is accepted; use .normalized() to
            wrap it into [-180, 180)

        height:
            (Default 0) Ellipsoidal height, in meters

        datum:
            (Default 'WGS84') The name of the datum the coordinate is referenced to
    """
    latitude: float
    longitude: float
    height: float = 0.
    datum: str = HUB_DATUM

    def __post_init__(self):
        for attr in ('latitude', 'longitude', 'height'):
            value = float(getattr(self, attr))
            if not math.isfinite(value):
                raise ValueError(f'{attr} must be finite, got {value}')
            object.__setattr__(self, attr, value)

        if not -90 <= self.latitude <= 90:
            raise ValueError(f'Latitude must be within [-90, 90], got {self.latitude}')

    def __repr__(self):
        return (
            f'<GeographicCoordinate({self.latitude}, {self.longitude}, '
            f'{self.height}) {self.datum}>'
        )

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[float, float, float, str],
        lon: Tuple[float, float, float, str],
        height: float = 0.,
        datum: str = HUB_DATUM,
    ):
        """
        Creates a GeographicCoordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            height:
                (Default 0) Ellipsoidal height, in meters
            datum:
                (Default 'WGS84') The datum name

        Returns:
            GeographicCoordinate
        """
        return cls(dms_to_decimal(*lat), dms_to_decimal(*lon), height, datum)

    def normalized(self) -> 'GeographicCoordinate':
        """Returns a copy with the longitude wrapped into [-180, 180)"""
        return replace(self, longitude=normalize_longitude(self.longitude))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the latitude and longitude to (degrees, minutes, seconds, hemisphere) tuples

        Returns:
            (latitude dms, longitude dms)
        """
        return (
            decimal_to_dms(self.latitude, 'N', 'S'),
            decimal_to_dms(self.longitude, 'E', 'W'),
        )

    def to_dms_str(self, precision: int = 4) -> Tuple[str, str]:
        """The latitude and longitude as human-readable DMS strings"""
        lat, lon = self.to_dms()
        return format_dms(lat, precision), format_dms(lon, precision)

    def to_tuple(self) -> Tuple[float, float, float]:
        """(latitude, longitude, height)"""
        return self.latitude, self.longitude, self.height


@dataclass(frozen=True)
class GeocentricCoordinate:
    """
    An Earth-centered Cartesian (X, Y, Z) position in meters, referenced to a named datum.
    The origin is the ellipsoid center and Z points toward the pole.
    """
    x: float
    y: float
    z: float
    datum: str = HUB_DATUM

    def __post_init__(self):
        for attr in ('x', 'y', 'z'):
            value = float(getattr(self, attr))
            if not math.isfinite(value):
                raise ValueError(f'{attr} must be finite, got {value}')
            object.__setattr__(self, attr, value)

    def __repr__(self):
        return f'<GeocentricCoordinate({self.x}, {self.y}, {self.z}) {self.datum}>'

    def to_tuple(self) -> Tuple[float, float, float]:
        """(x, y, z)"""
        return self.x, self.y, self.z
