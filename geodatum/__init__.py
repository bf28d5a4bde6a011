import sys

from geodatum._version import __version__  # noqa: F401
from geodatum.utils.logging import LOGGER
from geodatum.catalog import dump_catalog, load_catalog
from geodatum.conversion import (
    geocentric_to_geographic, geographic_to_geocentric, to_geocentric, to_geographic
)
from geodatum.coordinates import GeocentricCoordinate, GeographicCoordinate
from geodatum.datums import DATUMS, DEFAULT_REGISTRY, Datum, DatumRegistry
from geodatum.ellipsoids import ELLIPSOIDS, WGS84, Ellipsoid, get_ellipsoid
from geodatum.exceptions import GeodatumError, NonConvergence, UnknownDatum, UnknownEllipsoid
from geodatum.geodesic import GeodesicResult, geodesic_direct, geodesic_inverse, vincenty_inverse
from geodatum.helmert import HelmertParameters, helmert_transform, inverse_helmert_transform
from geodatum.heights import ellipsoidal_to_orthometric, orthometric_to_ellipsoidal
from geodatum.molodensky import molodensky_transform
from geodatum.pipeline import DatumTransformer, transform_datum
from geodatum.strategies import HelmertShift, MolodenskyShift
from geodatum.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'geographiclib': 'geodatum[karney]',
        'pyproj': 'geodatum[proj]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'DATUMS',
    'DEFAULT_REGISTRY',
    'Datum',
    'DatumRegistry',
    'DatumTransformer',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GeocentricCoordinate',
    'GeodatumError',
    'GeodesicResult',
    'GeographicCoordinate',
    'HelmertParameters',
    'HelmertShift',
    'LOGGER',
    'MolodenskyShift',
    'NonConvergence',
    'UnknownDatum',
    'UnknownEllipsoid',
    'WGS84',
    'dump_catalog',
    'ellipsoidal_to_orthometric',
    'geocentric_to_geographic',
    'geodesic_direct',
    'geodesic_inverse',
    'geographic_to_geocentric',
    'get_ellipsoid',
    'helmert_transform',
    'inverse_helmert_transform',
    'load_catalog',
    'molodensky_transform',
    'orthometric_to_ellipsoidal',
    'to_geocentric',
    'to_geographic',
    'transform_datum',
    'vincenty_inverse',
]
