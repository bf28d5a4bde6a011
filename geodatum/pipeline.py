"""
Datum transformation pipeline: moves a coordinate from one named datum to another
"""

__all__ = ['DatumTransformer', 'transform_datum']

from typing import Iterable, List, Literal, Optional, Sequence, Tuple, Union

from geodatum.coordinates import GeocentricCoordinate, GeographicCoordinate
from geodatum.datums import DEFAULT_REGISTRY, DatumRegistry
from geodatum.helmert import helmert_chain
from geodatum.strategies import STRATEGIES, GeographicShiftStrategy, HelmertShift
from geodatum.utils.mixins import LoggingMixin

Mode = Literal['geographic', 'geocentric']
CoordinateLike = Union[GeographicCoordinate, GeocentricCoordinate, Sequence[float]]


class DatumTransformer(LoggingMixin):
    """
    Transforms coordinates between the datums of a registry.

    Args:
        registry:
            (Default: the built-in registry) The datum catalog to resolve names against

        strategy:
            (Default HelmertShift()) How geographic coordinates are shifted. Either a
            GeographicShiftStrategy instance or the name of one ('helmert', 'molodensky').
            Geocentric coordinates are always moved with the Helmert transform.
    """

    def __init__(
        self,
        registry: Optional[DatumRegistry] = None,
        strategy: Union[GeographicShiftStrategy, str, None] = None,
    ):
        super().__init__()
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

        if isinstance(strategy, str):
            if strategy not in STRATEGIES:
                raise ValueError(
                    f"Unknown strategy '{strategy}'. Options: {list(STRATEGIES.keys())}"
                )
            strategy = STRATEGIES[strategy]()

        self.strategy = strategy or HelmertShift()

    def __repr__(self):
        return f'<DatumTransformer {self.registry!r} using {self.strategy!r}>'

    @staticmethod
    def _infer_mode(coord: CoordinateLike) -> Mode:
        if isinstance(coord, GeographicCoordinate):
            return 'geographic'
        if isinstance(coord, GeocentricCoordinate):
            return 'geocentric'
        raise ValueError(
            'mode must be specified when transforming a plain sequence of numbers'
        )

    def transform(
        self,
        coord: CoordinateLike,
        from_datum: str,
        to_datum: str,
        mode: Optional[Mode] = None,
    ):
        """
        Transform a coordinate from one datum to another.

        Args:
            coord:
                A GeographicCoordinate, a GeocentricCoordinate, or a plain
                (lat, lon, h) / (x, y, z) sequence. Coordinate objects must be bound
                to `from_datum`.

            from_datum:
                The source datum name

            to_datum:
                The target datum name

            mode:
                (Optional) 'geographic' or 'geocentric'. Inferred from coordinate
                objects; required for plain sequences.

        Returns:
            The coordinate on `to_datum`, of the same kind as the input: a coordinate
            object bound to `to_datum`, or a 3-tuple. When both datums are the same the
            input is returned unchanged.

        Raises:
            UnknownDatum: if either datum is not registered
            ValueError: on a mode/coordinate mismatch
        """
        # Validate both names before doing any work
        self.registry.get(from_datum)
        self.registry.get(to_datum)

        inferred = None
        if isinstance(coord, (GeographicCoordinate, GeocentricCoordinate)):
            inferred = self._infer_mode(coord)
            if coord.datum != from_datum:
                raise ValueError(
                    f'Coordinate is referenced to {coord.datum!r}, not {from_datum!r}'
                )

        mode = mode or inferred or self._infer_mode(coord)
        if mode not in ('geographic', 'geocentric'):
            raise ValueError(f"mode must be 'geographic' or 'geocentric', not {mode!r}")
        if inferred and mode != inferred:
            raise ValueError(f'Cannot transform a {type(coord).__name__} in {mode} mode')

        if from_datum == to_datum:
            return coord

        values = coord.to_tuple() if inferred else tuple(coord)
        if len(values) != 3:
            raise ValueError(f'Expected 3 coordinate values, got {len(values)}')

        if mode == 'geographic':
            self.logger.debug(
                'Shifting %s from %s to %s with %r', values, from_datum, to_datum, self.strategy
            )
            result = self.strategy.shift(*values, from_datum, to_datum, self.registry)
            if inferred:
                return GeographicCoordinate(*result, datum=to_datum)
            return result

        steps = self.registry.resolve_parameters(from_datum, to_datum)
        self.logger.debug(
            'Transforming %s from %s to %s in %d Helmert step(s)',
            values, from_datum, to_datum, len(steps)
        )
        result = helmert_chain(values, steps)
        if inferred:
            return GeocentricCoordinate(*result, datum=to_datum)
        return result

    def transform_many(
        self,
        coords: Iterable[CoordinateLike],
        from_datum: str,
        to_datum: str,
        mode: Optional[Mode] = None,
    ) -> List:
        """Transform each of several coordinates; see .transform()"""
        return [self.transform(x, from_datum, to_datum, mode) for x in coords]


_DEFAULT_TRANSFORMER = DatumTransformer()


def transform_datum(
    coord: CoordinateLike,
    from_datum: str,
    to_datum: str,
    mode: Optional[Mode] = None,
) -> Union[GeographicCoordinate, GeocentricCoordinate, Tuple[float, float, float]]:
    """
    Transform a coordinate between datums of the built-in registry using the
    Helmert-via-geocentric strategy. See DatumTransformer.transform().
    """
    return _DEFAULT_TRANSFORMER.transform(coord, from_datum, to_datum, mode)
