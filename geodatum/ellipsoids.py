"""
Reference ellipsoids and their derived parameters
"""

__all__ = [
    'Ellipsoid', 'ELLIPSOIDS', 'get_ellipsoid',
    'AIRY1830', 'BESSEL1841', 'CLARKE1866', 'CLARKE1880', 'GRS67',
    'GRS80', 'INTERNATIONAL1924', 'KRASSOVSKY1940', 'WGS84',
]

from dataclasses import dataclass, field
from functools import cached_property
import math
from types import MappingProxyType
from typing import Mapping

from geodatum._const import WGS84_A, WGS84_F
from geodatum.exceptions import UnknownEllipsoid


@dataclass(frozen=True)
class Ellipsoid:
    """
    A reference ellipsoid, defined by its semi-major axis and flattening. All other
    parameters are derived on first access and cached on the (immutable) instance.

    Args:
        name:
            The catalog name of the ellipsoid, e.g. 'WGS84'

        a:
            The semi-major (equatorial) axis, in meters

        f:
            The flattening, (a - b) / a

        full_name:
            (Optional) a descriptive name
    """
    name: str
    a: float
    f: float
    full_name: str = field(default='', compare=False)

    def __post_init__(self):
        if not 0 < self.f < 1:
            raise ValueError(f'Flattening must be within (0, 1), got {self.f}')
        if not self.a > 0:
            raise ValueError(f'Semi-major axis must be positive, got {self.a}')

    def __repr__(self):
        return f'<Ellipsoid {self.name} (a={self.a}, 1/f={self.inverse_flattening})>'

    @cached_property
    def b(self) -> float:
        """Semi-minor (polar) axis, in meters"""
        return self.a * (1 - self.f)

    @cached_property
    def inverse_flattening(self) -> float:
        return 1 / self.f

    @cached_property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self.f - self.f ** 2

    @cached_property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.e2)

    @cached_property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self.e2 / (1 - self.e2)

    @cached_property
    def ep(self) -> float:
        """Second eccentricity"""
        return math.sqrt(self.ep2)

    @cached_property
    def c(self) -> float:
        """Polar radius of curvature, in meters"""
        return self.a ** 2 / self.b

    def radius_of_curvature_n(self, latitude: float) -> float:
        """
        The radius of curvature in the prime vertical, N = a / sqrt(1 - e² sin²φ)

        Args:
            latitude:
                The geodetic latitude, in radians

        Returns:
            (float) the radius, in meters
        """
        sin_lat = math.sin(latitude)
        return self.a / math.sqrt(1 - self.e2 * sin_lat * sin_lat)

    def radius_of_curvature_m(self, latitude: float) -> float:
        """
        The radius of curvature in the meridian, M = a(1 - e²) / (1 - e² sin²φ)^(3/2)

        Args:
            latitude:
                The geodetic latitude, in radians

        Returns:
            (float) the radius, in meters
        """
        sin_lat = math.sin(latitude)
        w = math.sqrt(1 - self.e2 * sin_lat * sin_lat)
        return self.a * (1 - self.e2) / (w * w * w)

    def mean_radius(self, latitude: float) -> float:
        """The Gaussian mean radius of curvature sqrt(M·N), latitude in radians"""
        return math.sqrt(
            self.radius_of_curvature_m(latitude) * self.radius_of_curvature_n(latitude)
        )


WGS84 = Ellipsoid('WGS84', WGS84_A, WGS84_F, 'World Geodetic System 1984')
GRS80 = Ellipsoid('GRS80', 6378137.0, 1 / 298.257222101, 'Geodetic Reference System 1980')
GRS67 = Ellipsoid('GRS67', 6378160.0, 1 / 298.247167427, 'Geodetic Reference System 1967')
INTERNATIONAL1924 = Ellipsoid('ED50', 6378388.0, 1 / 297.0, 'International 1924 (Hayford)')
BESSEL1841 = Ellipsoid('Bessel1841', 6377397.155, 1 / 299.1528128, 'Bessel 1841')
CLARKE1866 = Ellipsoid('Clarke1866', 6378206.4, 1 / 294.9786982, 'Clarke 1866')
CLARKE1880 = Ellipsoid('Clarke1880', 6378249.2, 1 / 293.466021, 'Clarke 1880 (IGN)')
KRASSOVSKY1940 = Ellipsoid('Krassovsky1940', 6378245.0, 1 / 298.3, 'Krassovsky 1940')
AIRY1830 = Ellipsoid('Airy1830', 6377563.396, 1 / 299.3249646, 'Airy 1830')


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    x.name: x for x in (
        WGS84, GRS80, GRS67, INTERNATIONAL1924, BESSEL1841,
        CLARKE1866, CLARKE1880, KRASSOVSKY1940, AIRY1830,
    )
})


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up a built-in ellipsoid by its catalog name.

    Raises:
        UnknownEllipsoid: if the name is not in the catalog
    """
    try:
        return ELLIPSOIDS[name]
    except KeyError:
        raise UnknownEllipsoid(name) from None
