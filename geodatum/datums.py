"""
Geodetic datums and the registry that resolves transforms between them.

Every datum is defined by a reference ellipsoid plus a Helmert transform to a single
hub datum (WGS84 unless configured otherwise). Transforms between two non-hub datums
are composed by routing through the hub.
"""

__all__ = ['Datum', 'DatumRegistry', 'DEFAULT_REGISTRY', 'DATUMS']

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from geodatum._const import HUB_DATUM
from geodatum.ellipsoids import ELLIPSOIDS, Ellipsoid
from geodatum.exceptions import UnknownDatum, UnknownEllipsoid
from geodatum.helmert import HelmertParameters, IDENTITY
from geodatum.utils.logging import LOGGER


@dataclass(frozen=True)
class Datum:
    """
    A named geodetic datum.

    Args:
        name:
            The registry name, e.g. 'ED50'

        ellipsoid:
            The catalog name of the datum's reference ellipsoid

        to_hub:
            The Helmert parameters taking this datum's geocentric coordinates to the hub
            datum's. The hub datum itself uses the identity.

        full_name, description, accuracy:
            (Optional) descriptive metadata
    """
    name: str
    ellipsoid: str
    to_hub: HelmertParameters = IDENTITY
    full_name: str = field(default='', compare=False)
    description: str = field(default='', compare=False)
    accuracy: str = field(default='', compare=False)


class DatumRegistry:
    """
    An immutable catalog of datums and the ellipsoids they reference.

    Args:
        datums:
            The datums to register. Names must be unique.

        ellipsoids:
            (Optional) The ellipsoids the datums may reference, keyed by name.
            Defaults to the built-in ellipsoid catalog.

        hub:
            (Default 'WGS84') The name of the hub datum. It must be registered and carry
            the identity transform.

    Raises:
        UnknownDatum: if the hub datum is not among the datums
        UnknownEllipsoid: if a datum references an unregistered ellipsoid
        ValueError: on duplicate names or a non-identity hub transform
    """

    def __init__(
        self,
        datums: Iterable[Datum],
        ellipsoids: Optional[Mapping[str, Ellipsoid]] = None,
        hub: str = HUB_DATUM,
    ):
        _datums = {}
        for datum in datums:
            if datum.name in _datums:
                raise ValueError(f'Datum {datum.name!r} is registered more than once')
            _datums[datum.name] = datum

        _ellipsoids = dict(ELLIPSOIDS if ellipsoids is None else ellipsoids)
        for datum in _datums.values():
            if datum.ellipsoid not in _ellipsoids:
                raise UnknownEllipsoid(datum.ellipsoid)

        if hub not in _datums:
            raise UnknownDatum(hub)
        if not _datums[hub].to_hub.is_identity:
            raise ValueError(f'Hub datum {hub!r} must use the identity transform')

        self._datums: Mapping[str, Datum] = MappingProxyType(_datums)
        self._ellipsoids: Mapping[str, Ellipsoid] = MappingProxyType(_ellipsoids)
        self._hub = hub

        LOGGER.debug(
            'Registered %d datums over %d ellipsoids (hub %s)',
            len(_datums), len(_ellipsoids), hub
        )

    def __contains__(self, name) -> bool:
        return name in self._datums

    def __iter__(self) -> Iterator[str]:
        return iter(self._datums)

    def __len__(self) -> int:
        return len(self._datums)

    def __repr__(self):
        return f'<DatumRegistry of {len(self)} datums, hub {self._hub}>'

    @property
    def hub(self) -> str:
        """The name of the hub datum"""
        return self._hub

    @property
    def datums(self) -> Mapping[str, Datum]:
        """A read-only view of the registered datums"""
        return self._datums

    @property
    def ellipsoids(self) -> Mapping[str, Ellipsoid]:
        """A read-only view of the registered ellipsoids"""
        return self._ellipsoids

    def get(self, name: str) -> Datum:
        """
        Look up a datum by name.

        Raises:
            UnknownDatum: if the name is not registered
        """
        try:
            return self._datums[name]
        except KeyError:
            raise UnknownDatum(name) from None

    def get_ellipsoid(self, name: str) -> Ellipsoid:
        """
        Look up a registered ellipsoid by name.

        Raises:
            UnknownEllipsoid: if the name is not registered
        """
        try:
            return self._ellipsoids[name]
        except KeyError:
            raise UnknownEllipsoid(name) from None

    def ellipsoid_for(self, datum_name: str) -> Ellipsoid:
        """The reference ellipsoid of a registered datum"""
        return self._ellipsoids[self.get(datum_name).ellipsoid]

    def resolve_parameters(
        self,
        from_datum: str,
        to_datum: str
    ) -> Tuple[HelmertParameters, ...]:
        """
        Resolve the ordered sequence of Helmert transforms taking geocentric coordinates
        on `from_datum` to `to_datum`.

            * Same datum: no steps
            * Either end is the hub: one step, the source's stored transform or the
              target's inverted
            * Otherwise: two steps, source -> hub then hub -> target

        Args:
            from_datum:
                The source datum name

            to_datum:
                The target datum name

        Returns:
            Tuple of HelmertParameters, applied in order

        Raises:
            UnknownDatum: if either name is not registered
        """
        source, target = self.get(from_datum), self.get(to_datum)

        if source.name == target.name:
            return ()

        steps = []
        if source.name != self._hub:
            steps.append(source.to_hub)
        if target.name != self._hub:
            steps.append(target.to_hub.inverted())

        return tuple(steps)


def _params(tx=0., ty=0., tz=0., rx=0., ry=0., rz=0., s=0.) -> HelmertParameters:
    return HelmertParameters(tx, ty, tz, rx, ry, rz, s)


DATUMS: Tuple[Datum, ...] = (
    Datum(
        'WGS84', 'WGS84',
        full_name='World Geodetic System 1984',
        description='Global geocentric datum. The standard for GPS/GNSS.',
        accuracy='Reference datum',
    ),
    Datum(
        'ITRF2014', 'GRS80',
        full_name='International Terrestrial Reference Frame 2014',
        description='High-precision global reference frame, epoch 2010.0.',
        accuracy='mm-level',
    ),
    Datum(
        'ITRF2020', 'GRS80',
        full_name='International Terrestrial Reference Frame 2020',
        description='Latest ITRF realization, epoch 2015.0.',
        accuracy='mm-level',
    ),
    Datum(
        'ETRS89', 'GRS80',
        full_name='European Terrestrial Reference System 1989',
        description='European datum fixed to the Eurasian plate at epoch 1989.0.',
        accuracy='cm-level',
    ),
    Datum(
        'TUREF', 'GRS80',
        full_name='Turkish National Reference Frame',
        description='Turkish national geodetic reference frame based on ITRF96.',
        accuracy='cm-level',
    ),
    Datum(
        'ED50', 'ED50', _params(-84.0, -103.0, -127.0),
        full_name='European Datum 1950',
        description='Historical European datum. Parameters vary by country/region.',
        accuracy='5-10 meters',
    ),
    Datum(
        'ED50_Turkey', 'ED50', _params(-87.0, -98.0, -121.0),
        full_name='European Datum 1950 - Turkey Parameters',
        description='ED50 with Turkey-specific transformation parameters.',
        accuracy='2-5 meters',
    ),
    Datum(
        'NAD27', 'Clarke1866', _params(-8., 160., 176.),
        full_name='North American Datum 1927',
        description='Historical North American datum, CONUS mean parameters.',
        accuracy='5-15 meters',
    ),
    Datum(
        'NAD83', 'GRS80',
        full_name='North American Datum 1983',
        description='North American geocentric datum.',
        accuracy='1-2 meters',
    ),
    Datum(
        'OSGB36', 'Airy1830',
        _params(446.448, -125.157, 542.060, 0.1502, 0.2470, 0.8421, -20.4894),
        full_name='Ordnance Survey Great Britain 1936',
        description='British national datum used for Ordnance Survey maps.',
        accuracy='5-7 meters',
    ),
    Datum(
        'Tokyo', 'Bessel1841', _params(-148., 507., 685.),
        full_name='Tokyo Datum',
        description='Japanese geodetic datum, used until 2002.',
        accuracy='3-10 meters',
    ),
    Datum(
        'Pulkovo1942', 'Krassovsky1940', _params(23.92, -141.27, -80.9, 0., 0.35, 0.82, -0.12),
        full_name='Pulkovo 1942',
        description='Soviet geodetic datum used across the former USSR.',
        accuracy='2-5 meters',
    ),
    Datum(
        'HD72', 'GRS67', _params(52.17, -71.82, -14.9),
        full_name='Hungarian Datum 1972',
        description='Hungarian national datum.',
        accuracy='2-3 meters',
    ),
)


DEFAULT_REGISTRY = DatumRegistry(DATUMS)
