"""Module for miscellaneous multi-use functions"""

__all__ = [
    'decimal_to_dms', 'dms_to_decimal', 'format_dms',
    'normalize_azimuth', 'normalize_longitude', 'round_half_up',
]

from typing import Tuple


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def normalize_longitude(longitude: float) -> float:
    """Wraps a longitude into the range [-180, 180)"""
    lon = (longitude + 180.) % 360. - 180.
    # Float modulo can land exactly on the open bound
    return -180. if lon == 180. else lon


def normalize_azimuth(azimuth: float) -> float:
    """Wraps an azimuth, in degrees, into the range [0, 360)"""
    azimuth = azimuth % 360.
    return 0. if azimuth == 360. else azimuth


def decimal_to_dms(value: float, positive: str, negative: str) -> Tuple[int, int, float, str]:
    """
    Convert a value (latitude or longitude) in decimal degrees to a tuple of
    degrees, minutes, seconds, hemisphere

    Args:
        value:
            The decimal degree value

        positive:
            The hemisphere letter used for non-negative values ('N' or 'E')

        negative:
            The hemisphere letter used for negative values ('S' or 'W')

    Returns:
        converted value as (degrees, minutes, seconds, hemisphere)
    """
    minutes, seconds = divmod(abs(value) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    return (
        int(degrees),
        int(minutes),
        round_half_up(seconds, 5),
        positive if value >= 0 else negative
    )


def dms_to_decimal(degrees: float, minutes: float, seconds: float, hemisphere: str) -> float:
    """
    Convert degrees, minutes, seconds and a hemisphere letter to decimal degrees.
    Southern and western hemispheres produce negative values.
    """
    mult = -1 if hemisphere.upper() in ('S', 'W') else 1
    return mult * (abs(degrees) + minutes / 60 + seconds / 3600)


def format_dms(dms: Tuple[int, int, float, str], precision: int = 4) -> str:
    """Render a (degrees, minutes, seconds, hemisphere) tuple, e.g. 41° 0' 29.5200" N"""
    return f'{dms[0]}° {dms[1]}\' {dms[2]:.{precision}f}" {dms[3]}'
