
import itertools
import logging
import math

import pytest
from pytest import approx

from geodatum.conversion import *
from geodatum.coordinates import GeocentricCoordinate, GeographicCoordinate
from geodatum.ellipsoids import ELLIPSOIDS, GRS80, WGS84
from geodatum.exceptions import NonConvergence

from tests.functions import assert_geographic_equal, assert_xyz_equal


def test_geographic_to_geocentric_anchors():
    assert geographic_to_geocentric(0., 0., 0., WGS84) == (WGS84.a, 0., 0.)

    assert_xyz_equal(
        geographic_to_geocentric(0., 90., 0., WGS84),
        (0., WGS84.a, 0.)
    )
    assert_xyz_equal(
        geographic_to_geocentric(90., 0., 0., WGS84),
        (0., 0., WGS84.b)
    )
    assert_xyz_equal(
        geographic_to_geocentric(-90., 0., 100., WGS84),
        (0., 0., -WGS84.b - 100.)
    )

    # Height extends along the normal; at the equator, purely along X
    assert_xyz_equal(
        geographic_to_geocentric(0., 0., 1000., WGS84),
        (WGS84.a + 1000., 0., 0.)
    )


def test_geographic_to_geocentric_regression():
    actual = geographic_to_geocentric(41.0082, 28.9784, 0., WGS84)
    assert_xyz_equal(actual, (4216541.975965, 2335189.800481, 4163110.428698), abs_tol=1e-6)

    assert_xyz_equal(
        geographic_to_geocentric(39.9334, 32.8597, 938., WGS84),
        (4114476.949147, 2657671.202022, 4072920.115599),
        abs_tol=1e-6,
    )
    assert_xyz_equal(
        geographic_to_geocentric(-33.86, 151.21, 50., WGS84),
        (-4646595.529621, 2553431.522857, -3533589.736856),
        abs_tol=1e-6,
    )

    # Sanity check the magnitude: a point on the surface lies between b and a
    assert WGS84.b < math.sqrt(sum(x ** 2 for x in actual)) < WGS84.a


@pytest.mark.parametrize('ellipsoid', list(ELLIPSOIDS.values()), ids=lambda x: x.name)
def test_round_trip(ellipsoid):
    lats = (-89., -80., -60., -30., -0.5, 0., 0.5, 30., 45., 60., 80., 89.)
    lons = (-180., -120., -45., 0., 28.9784, 90., 179.9)
    heights = (-100., 0., 1000., 10_000.)

    for lat, lon, h in itertools.product(lats, lons, heights):
        xyz = geographic_to_geocentric(lat, lon, h, ellipsoid)
        assert_geographic_equal(
            geocentric_to_geographic(*xyz, ellipsoid),
            (lat, lon, h),
            deg_tol=1e-9,
            h_tol=1e-6,
        )


def test_round_trip_near_poles():
    # p / cos(lat) amplifies the last bits of latitude error close to the poles
    for lat, lon, h in itertools.product((-89.9, 89.9), (-120., 28.9784), (0., 1000.)):
        xyz = geographic_to_geocentric(lat, lon, h, WGS84)
        assert_geographic_equal(
            geocentric_to_geographic(*xyz, WGS84), (lat, lon, h), deg_tol=1e-9, h_tol=1e-4
        )


def test_round_trip_poles():
    for lat, h in ((90., 0.), (90., 1234.5), (-90., 0.), (-90., -50.)):
        xyz = geographic_to_geocentric(lat, 0., h, GRS80)
        actual_lat, _, actual_h = geocentric_to_geographic(*xyz, GRS80, strict=True)
        assert actual_lat == approx(lat, abs=1e-9)
        assert actual_h == approx(h, abs=1e-6)

    # Exactly on the axis
    lat, lon, h = geocentric_to_geographic(0., 0., WGS84.b + 10., WGS84)
    assert lat == approx(90., abs=1e-12)
    assert h == approx(10., abs=1e-6)


def test_geocentric_to_geographic_nonconvergence(monkeypatch, caplog):
    # With no iterations allowed the solver never gets to check convergence
    monkeypatch.setattr('geodatum.conversion.GEOCENTRIC_MAX_ITER', 0)
    xyz = geographic_to_geocentric(41.0082, 28.9784, 100., WGS84)

    with pytest.raises(NonConvergence) as exc:
        geocentric_to_geographic(*xyz, WGS84, strict=True)
    assert exc.value.iterations == 0

    # Lenient mode returns the Bowring estimate and leaves a debug record
    caplog.set_level(logging.DEBUG, logger='geodatum')
    lat, lon, h = geocentric_to_geographic(*xyz, WGS84)
    assert lat == approx(41.0082, abs=1e-6)
    assert lon == approx(28.9784, abs=1e-12)
    assert h == approx(100., abs=1e-2)
    assert 'accepting last estimate' in caplog.text


def test_to_geocentric_to_geographic():
    coord = GeographicCoordinate(41.0082, 28.9784, 50., 'ED50')
    geocentric = to_geocentric(coord, ELLIPSOIDS['ED50'])
    assert isinstance(geocentric, GeocentricCoordinate)
    assert geocentric.datum == 'ED50'
    assert geocentric.to_tuple() == geographic_to_geocentric(
        41.0082, 28.9784, 50., ELLIPSOIDS['ED50']
    )

    back = to_geographic(geocentric, ELLIPSOIDS['ED50'])
    assert isinstance(back, GeographicCoordinate)
    assert_geographic_equal(back, coord)
