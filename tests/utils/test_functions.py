
from pytest import approx

from geodatum.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6


def test_normalize_longitude():
    assert normalize_longitude(0.) == 0.
    assert normalize_longitude(179.5) == 179.5
    assert normalize_longitude(190.) == -170.
    assert normalize_longitude(-190.) == 170.
    assert normalize_longitude(720.) == 0.

    # Upper bound is open
    assert normalize_longitude(180.) == -180.
    assert normalize_longitude(-180.) == -180.
    assert normalize_longitude(540.) == -180.


def test_normalize_azimuth():
    assert normalize_azimuth(45.) == 45.
    assert normalize_azimuth(-90.) == 270.
    assert normalize_azimuth(360.) == 0.
    assert normalize_azimuth(450.) == 90.


def test_decimal_to_dms():
    assert decimal_to_dms(41.0082, 'N', 'S') == (41, 0, 29.52, 'N')
    assert decimal_to_dms(-41.0082, 'N', 'S') == (41, 0, 29.52, 'S')
    assert decimal_to_dms(28.9784, 'E', 'W') == (28, 58, 42.24, 'E')
    assert decimal_to_dms(0., 'E', 'W') == (0, 0, 0., 'E')


def test_dms_to_decimal():
    assert dms_to_decimal(41, 0, 29.52, 'N') == approx(41.0082, abs=1e-12)
    assert dms_to_decimal(41, 0, 29.52, 'S') == approx(-41.0082, abs=1e-12)
    assert dms_to_decimal(28, 58, 42.24, 'w') == approx(-28.9784, abs=1e-12)
    assert dms_to_decimal(0, 30, 0, 'E') == 0.5


def test_format_dms():
    assert format_dms((41, 0, 29.52, 'N')) == '41° 0\' 29.5200" N'
    assert format_dms((28, 58, 42.24, 'E'), precision=1) == '28° 58\' 42.2" E'
