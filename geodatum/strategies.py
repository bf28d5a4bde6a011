"""
Strategies for shifting geographic coordinates between datums.

Two variants are offered, trading accuracy for cost:

    * HelmertShift: convert to geocentric, apply the full seven-parameter
      Helmert transform(s), convert back. Accurate to the parameters' quality.
    * MolodenskyShift: apply the abridged Molodensky formulas directly to
      latitude/longitude/height. Cheaper, translation-only, meter-level.
"""

__all__ = ['GeographicShiftStrategy', 'HelmertShift', 'MolodenskyShift', 'STRATEGIES']

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type

from geodatum.conversion import geocentric_to_geographic, geographic_to_geocentric
from geodatum.datums import DatumRegistry
from geodatum.helmert import helmert_chain
from geodatum.molodensky import molodensky_transform
from geodatum.utils.mixins import LoggingMixin


class GeographicShiftStrategy(ABC, LoggingMixin):
    """Shifts a geographic coordinate from one registered datum to another"""

    name: str

    def __init__(self):
        super().__init__()

    def __repr__(self):
        return f'<{self.__class__.__name__}>'

    @abstractmethod
    def shift(
        self,
        latitude: float,
        longitude: float,
        height: float,
        from_datum: str,
        to_datum: str,
        registry: DatumRegistry,
    ) -> Tuple[float, float, float]:
        """
        Shift a coordinate between two distinct, registered datums.

        Args:
            latitude, longitude, height:
                The coordinate on `from_datum` (degrees, degrees, meters)

            from_datum:
                The source datum name

            to_datum:
                The target datum name

            registry:
                The registry both datums belong to

        Returns:
            (latitude, longitude, height) on `to_datum`
        """


class HelmertShift(GeographicShiftStrategy):
    """
    Geographic -> geocentric on the source ellipsoid, Helmert transform(s),
    geocentric -> geographic on the target ellipsoid.

    Args:
        strict:
            (Default False) Raise NonConvergence if the final geocentric -> geographic
            conversion hits its iteration cap instead of accepting the last estimate.
    """
    name = 'helmert'

    def __init__(self, strict: bool = False):
        super().__init__()
        self.strict = strict

    def shift(self, latitude, longitude, height, from_datum, to_datum, registry):
        steps = registry.resolve_parameters(from_datum, to_datum)
        xyz = geographic_to_geocentric(
            latitude, longitude, height, registry.ellipsoid_for(from_datum)
        )
        xyz = helmert_chain(xyz, steps)
        return geocentric_to_geographic(
            *xyz, registry.ellipsoid_for(to_datum), strict=self.strict
        )


class MolodenskyShift(GeographicShiftStrategy):
    """
    Abridged Molodensky shift, using only the translation part of each resolved
    Helmert step. Transforms between two non-hub datums are applied in two hops
    through the hub datum's ellipsoid.

    Rotation and scale parameters cannot be represented and are ignored, with a
    one-time warning per datum pair.
    """
    name = 'molodensky'

    def shift(self, latitude, longitude, height, from_datum, to_datum, registry):
        steps = registry.resolve_parameters(from_datum, to_datum)

        # One ellipsoid per hop boundary: source, [hub], target
        ellipsoids = [registry.ellipsoid_for(from_datum)]
        if len(steps) == 2:
            ellipsoids.append(registry.ellipsoid_for(registry.hub))
        ellipsoids.append(registry.ellipsoid_for(to_datum))

        if any(x.has_rotation_or_scale for x in steps):
            self.warn_once(
                f'Molodensky shift {from_datum} -> {to_datum} ignores rotation and '
                'scale parameters; use the Helmert strategy for full accuracy.'
            )

        coord = (latitude, longitude, height)
        for params, from_ell, to_ell in zip(steps, ellipsoids[:-1], ellipsoids[1:]):
            coord = molodensky_transform(*coord, from_ell, to_ell, params.translation)

        return coord


STRATEGIES: Dict[str, Type[GeographicShiftStrategy]] = {
    HelmertShift.name: HelmertShift,
    MolodenskyShift.name: MolodenskyShift,
}
