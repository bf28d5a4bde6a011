
import logging

import pytest
from pytest import approx

from geodatum.coordinates import GeocentricCoordinate, GeographicCoordinate
from geodatum.datums import DEFAULT_REGISTRY, Datum, DatumRegistry
from geodatum.exceptions import UnknownDatum
from geodatum.helmert import HelmertParameters
from geodatum.pipeline import *
from geodatum.strategies import HelmertShift, MolodenskyShift

from tests.functions import assert_geographic_equal, assert_xyz_equal

ISTANBUL = GeographicCoordinate(41.0082, 28.9784, 0.)


def test_transformer_init():
    transformer = DatumTransformer()
    assert transformer.registry is DEFAULT_REGISTRY
    assert isinstance(transformer.strategy, HelmertShift)

    assert isinstance(DatumTransformer(strategy='molodensky').strategy, MolodenskyShift)

    strategy = HelmertShift(strict=True)
    assert DatumTransformer(strategy=strategy).strategy is strategy

    with pytest.raises(ValueError):
        DatumTransformer(strategy='grid')


def test_identity_transform():
    for datum in DEFAULT_REGISTRY:
        coord = GeographicCoordinate(41.0082, 28.9784, 12.5, datum)
        assert transform_datum(coord, datum, datum) is coord

    xyz = (4208830.0, 2334850.0, 4171267.0)
    assert transform_datum(xyz, 'ED50', 'ED50', mode='geocentric') is xyz


def test_unknown_datum():
    with pytest.raises(UnknownDatum):
        transform_datum(ISTANBUL, 'WGS84', 'XYZ')

    with pytest.raises(UnknownDatum):
        transform_datum(ISTANBUL, 'XYZ', 'WGS84')

    # Validated before anything else, including identity short-circuits
    with pytest.raises(UnknownDatum):
        transform_datum((1., 2., 3.), 'XYZ', 'XYZ', mode='geocentric')


def test_round_trip():
    for datum in ('ED50', 'ED50_Turkey', 'NAD27', 'Tokyo', 'HD72', 'TUREF'):
        there = transform_datum(ISTANBUL, 'WGS84', datum)
        assert there.datum == datum
        back = transform_datum(there, datum, 'WGS84')
        assert_geographic_equal(back, ISTANBUL, deg_tol=1e-9, h_tol=1e-6)

    # Rotation and scale sets invert to within a few centimeters
    london = GeographicCoordinate(51.5007, -0.1246, 45.)
    back = transform_datum(transform_datum(london, 'WGS84', 'OSGB36'), 'OSGB36', 'WGS84')
    assert_geographic_equal(back, london, deg_tol=1e-6, h_tol=0.05)


def test_ed50_shift_magnitude():
    # ED50 sits around 100-150m from WGS84 in Turkey
    shifted = transform_datum(ISTANBUL, 'WGS84', 'ED50')
    assert 0.0005 < abs(shifted.latitude - ISTANBUL.latitude) + \
        abs(shifted.longitude - ISTANBUL.longitude) < 0.005


def test_hub_composition():
    for from_datum, to_datum in (('ED50', 'TUREF'), ('NAD27', 'Tokyo'), ('OSGB36', 'Pulkovo1942')):
        start = GeographicCoordinate(41.0082, 28.9784, 100., from_datum)

        direct = transform_datum(start, from_datum, to_datum)
        via_hub = transform_datum(
            transform_datum(start, from_datum, 'WGS84'), 'WGS84', to_datum
        )
        assert_geographic_equal(direct, via_hub, deg_tol=1e-6, h_tol=1e-3)


def test_geocentric_mode():
    start = GeocentricCoordinate(4208830.0, 2334850.0, 4171267.0, 'ED50')
    actual = transform_datum(start, 'ED50', 'WGS84')
    assert isinstance(actual, GeocentricCoordinate)
    assert actual.datum == 'WGS84'
    assert_xyz_equal(actual.to_tuple(), (4208746.0, 2334747.0, 4171140.0), abs_tol=1e-6)

    # Plain tuples need an explicit mode and come back as tuples
    actual = transform_datum(start.to_tuple(), 'ED50', 'WGS84', mode='geocentric')
    assert isinstance(actual, tuple)
    assert_xyz_equal(actual, (4208746.0, 2334747.0, 4171140.0), abs_tol=1e-6)

    # Via the hub
    actual = transform_datum(start.to_tuple(), 'ED50', 'ED50_Turkey', mode='geocentric')
    assert_xyz_equal(actual, (4208833.0, 2334845.0, 4171261.0), abs_tol=1e-6)


def test_geographic_tuples():
    actual = transform_datum((41.0082, 28.9784, 0.), 'WGS84', 'ED50', mode='geographic')
    assert isinstance(actual, tuple)
    assert_geographic_equal(actual, transform_datum(ISTANBUL, 'WGS84', 'ED50').to_tuple())


def test_mode_errors():
    with pytest.raises(ValueError, match='mode must be specified'):
        transform_datum((41., 29., 0.), 'WGS84', 'ED50')

    with pytest.raises(ValueError):
        transform_datum((41., 29., 0.), 'WGS84', 'ED50', mode='projected')

    with pytest.raises(ValueError):
        transform_datum(ISTANBUL, 'WGS84', 'ED50', mode='geocentric')

    with pytest.raises(ValueError):
        transform_datum((41., 29.), 'WGS84', 'ED50', mode='geographic')

    # Coordinates must be referenced to the source datum
    with pytest.raises(ValueError, match='referenced to'):
        transform_datum(ISTANBUL, 'ED50', 'WGS84')


def test_transform_many():
    coords = [ISTANBUL, GeographicCoordinate(39.9334, 32.8597, 938.)]
    actual = DatumTransformer().transform_many(coords, 'WGS84', 'ED50')
    assert len(actual) == 2
    for coord, result in zip(coords, actual):
        assert result == transform_datum(coord, 'WGS84', 'ED50')


def test_molodensky_transformer():
    transformer = DatumTransformer(strategy='molodensky')
    actual = transformer.transform(ISTANBUL, 'WGS84', 'ED50')
    expected = transform_datum(ISTANBUL, 'WGS84', 'ED50')
    assert actual.datum == 'ED50'
    assert_geographic_equal(actual, expected, deg_tol=1e-4, h_tol=10.)


def test_custom_registry(caplog):
    registry = DatumRegistry([
        Datum('WGS84', 'WGS84'),
        Datum('Shifted', 'WGS84', HelmertParameters(tz=100.)),
    ])
    transformer = DatumTransformer(registry)

    caplog.set_level(logging.DEBUG, logger='geodatum')
    actual = transformer.transform(
        GeocentricCoordinate(0., 0., 6356752.314245, 'Shifted'), 'Shifted', 'WGS84'
    )
    assert actual.z == approx(6356852.314245, abs=1e-6)
    assert 'in 1 Helmert step(s)' in caplog.text

    # The built-in registry's datums are unknown here
    with pytest.raises(UnknownDatum):
        transformer.transform(ISTANBUL, 'WGS84', 'ED50')


def test_molodensky_transformer_near_poles():
    transformer = DatumTransformer(strategy='molodensky')
    for lat in (89.9999, 90., -89.9999, -90.):
        actual = transformer.transform(GeographicCoordinate(lat, 0., 0., 'ED50'), 'ED50', 'WGS84')
        assert actual.datum == 'WGS84'
        assert abs(actual.latitude - lat) < 0.01
        assert -180. <= actual.longitude < 180.

        actual = transformer.transform((lat, 0., 0.), 'ED50', 'WGS84', mode='geographic')
        assert -90. <= actual[0] <= 90.
        assert -180. <= actual[1] < 180.
