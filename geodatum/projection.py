"""
The boundary between geographic and projected (plane) coordinates.

geodatum does not implement map projections itself. A ProjectionEngine supplies them;
PyprojProjectionEngine delegates to pyproj, which must be installed separately
(pip install geodatum[proj]).
"""

__all__ = [
    'CRS_DEFINITIONS', 'ProjectionEngine', 'PyprojProjectionEngine',
    'utm_epsg', 'utm_hemisphere', 'utm_zone',
]

from abc import ABC, abstractmethod
from functools import lru_cache
import math
from types import MappingProxyType
from typing import Mapping, Tuple

from geodatum.utils.functions import normalize_longitude


def _tm(lon_0: int, ellps: str) -> str:
    return (
        f'+proj=tmerc +lat_0=0 +lon_0={lon_0} +k=1 +x_0=500000 +y_0=0 '
        f'+ellps={ellps} +units=m +no_defs'
    )


# Named plane coordinate systems not covered by EPSG codes: the Turkish 3-degree
# Transverse Mercator zones on ED50 (International 1924) and TUREF (GRS80)
CRS_DEFINITIONS: Mapping[str, str] = MappingProxyType({
    **{f'ED50_TM{x}': _tm(x, 'intl') for x in (30, 33, 36, 39, 42, 45)},
    **{f'TUREF_TM{x}': _tm(x, 'GRS80') for x in (30, 33, 36, 39, 42, 45)},
})


class ProjectionEngine(ABC):
    """Projects geographic coordinates onto a plane coordinate system and back"""

    @abstractmethod
    def project(self, latitude: float, longitude: float, crs: str) -> Tuple[float, float]:
        """
        Project a geographic coordinate.

        Args:
            latitude, longitude:
                The location in degrees, on the geographic datum underlying `crs`

            crs:
                The identifier of the target projected coordinate system

        Returns:
            (easting, northing) in the CRS's units
        """

    @abstractmethod
    def unproject(self, easting: float, northing: float, crs: str) -> Tuple[float, float]:
        """
        Unproject a plane coordinate.

        Args:
            easting, northing:
                The plane coordinate

            crs:
                The identifier of the source projected coordinate system

        Returns:
            (latitude, longitude) in degrees
        """


class PyprojProjectionEngine(ProjectionEngine):
    """
    A ProjectionEngine backed by pyproj.

    Accepts anything pyproj understands as a CRS (e.g. 'EPSG:32635') plus the names in
    CRS_DEFINITIONS. Projection happens between a CRS and its own geographic CRS, so no
    datum shift is ever applied here; use a DatumTransformer for that.
    """

    def __repr__(self):
        return '<PyprojProjectionEngine>'

    @staticmethod
    @lru_cache(maxsize=64)
    def _transformers(crs: str):
        from pyproj import CRS, Transformer

        projected = CRS.from_user_input(CRS_DEFINITIONS.get(crs, crs))
        if not projected.is_projected:
            raise ValueError(f'{crs!r} is not a projected coordinate system')

        geographic = projected.geodetic_crs
        return (
            Transformer.from_crs(geographic, projected, always_xy=True),
            Transformer.from_crs(projected, geographic, always_xy=True),
        )

    def project(self, latitude: float, longitude: float, crs: str) -> Tuple[float, float]:
        forward, _ = self._transformers(crs)
        easting, northing = forward.transform(longitude, latitude)
        return float(easting), float(northing)

    def unproject(self, easting: float, northing: float, crs: str) -> Tuple[float, float]:
        _, inverse = self._transformers(crs)
        lon, lat = inverse.transform(easting, northing)
        return float(lat), float(lon)


def utm_zone(longitude: float) -> int:
    """
    The standard UTM zone number (1-60) containing a longitude. The Norway and
    Svalbard exceptions are not applied.
    """
    return min(int(math.floor((normalize_longitude(longitude) + 180) / 6)) + 1, 60)


def utm_hemisphere(latitude: float) -> str:
    """'N' for the northern hemisphere (including the equator), 'S' otherwise"""
    return 'N' if latitude >= 0 else 'S'


def utm_epsg(zone: int, north: bool = True) -> str:
    """
    The EPSG identifier of a WGS84 UTM zone, e.g. utm_epsg(35) -> 'EPSG:32635'
    """
    if not 1 <= zone <= 60:
        raise ValueError(f'UTM zone must be within [1, 60], got {zone}')
    return f'EPSG:{(32600 if north else 32700) + zone}'
