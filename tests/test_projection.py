
import pytest
from pytest import approx

from geodatum.projection import *


def test_utm_zone():
    assert utm_zone(28.9784) == 35
    assert utm_zone(-0.1246) == 30
    assert utm_zone(0.) == 31
    assert utm_zone(-180.) == 1
    assert utm_zone(179.99) == 60

    # Wrapped longitudes
    assert utm_zone(180.) == 1
    assert utm_zone(388.9784) == 35


def test_utm_hemisphere():
    assert utm_hemisphere(41.) == 'N'
    assert utm_hemisphere(0.) == 'N'
    assert utm_hemisphere(-33.9) == 'S'


def test_utm_epsg():
    assert utm_epsg(35) == 'EPSG:32635'
    assert utm_epsg(1, north=False) == 'EPSG:32701'
    assert utm_epsg(utm_zone(151.2), north=utm_hemisphere(-33.9) == 'N') == 'EPSG:32756'

    with pytest.raises(ValueError):
        utm_epsg(0)

    with pytest.raises(ValueError):
        utm_epsg(61)


def test_crs_definitions():
    assert set(CRS_DEFINITIONS) == {
        f'{datum}_TM{zone}'
        for datum in ('ED50', 'TUREF') for zone in (30, 33, 36, 39, 42, 45)
    }
    assert '+lon_0=33 ' in CRS_DEFINITIONS['ED50_TM33']
    assert '+ellps=intl ' in CRS_DEFINITIONS['ED50_TM33']
    assert '+ellps=GRS80 ' in CRS_DEFINITIONS['TUREF_TM30']

    with pytest.raises(TypeError):
        CRS_DEFINITIONS['NEW'] = ''


def test_projection_engine_abstract():
    with pytest.raises(TypeError):
        ProjectionEngine()


def test_pyproj_engine():
    pytest.importorskip('pyproj')
    engine = PyprojProjectionEngine()

    # On the central meridian at the equator
    easting, northing = engine.project(0., 27., 'EPSG:32635')
    assert easting == approx(500_000., abs=1e-3)
    assert northing == approx(0., abs=1e-3)

    easting, northing = engine.project(41.0082, 28.9784, utm_epsg(35))
    assert 600_000 < easting < 700_000
    assert 4_500_000 < northing < 4_600_000

    lat, lon = engine.unproject(easting, northing, 'EPSG:32635')
    assert lat == approx(41.0082, abs=1e-9)
    assert lon == approx(28.9784, abs=1e-9)


def test_pyproj_engine_named_definitions():
    pytest.importorskip('pyproj')
    engine = PyprojProjectionEngine()

    # Unit scale factor on the central meridian, no false northing
    easting, northing = engine.project(0., 30., 'TUREF_TM30')
    assert easting == approx(500_000., abs=1e-3)
    assert northing == approx(0., abs=1e-3)

    easting, northing = engine.project(41.0082, 28.9784, 'ED50_TM30')
    lat, lon = engine.unproject(easting, northing, 'ED50_TM30')
    assert lat == approx(41.0082, abs=1e-9)
    assert lon == approx(28.9784, abs=1e-9)

    # Geographic systems cannot be projected onto
    with pytest.raises(ValueError):
        engine.project(41., 29., 'EPSG:4326')
