"""
Seven-parameter Helmert (Bursa-Wolf) similarity transform between Cartesian frames.

Rotations follow the Position Vector convention: the position vector is rotated,
not the frame.

    [X']   [tx]           [  1  -rz   ry ] [X]
    [Y'] = [ty] + (1+s) * [ rz    1  -rx ] [Y]
    [Z']   [tz]           [-ry   rx    1 ] [Z]
"""

__all__ = [
    'HelmertParameters', 'IDENTITY',
    'helmert_chain', 'helmert_transform', 'helmert_transform_array',
    'inverse_helmert_transform',
]

from dataclasses import dataclass, fields
from typing import Dict, Sequence, Tuple

import numpy as np

from geodatum._const import ARCSEC_TO_RAD, PPM


@dataclass(frozen=True)
class HelmertParameters:
    """
    Helmert transform parameters.

    Args:
        tx, ty, tz:
            Translations, in meters

        rx, ry, rz:
            Rotations, in arc-seconds

        s:
            Scale change, in parts-per-million
    """
    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    rx: float = 0.
    ry: float = 0.
    rz: float = 0.
    s: float = 0.

    @classmethod
    def from_dict(cls, params: Dict[str, float]) -> 'HelmertParameters':
        """Create from a mapping of parameter name to value; missing values default to 0"""
        return cls(**{f.name: float(params.get(f.name, 0.)) for f in fields(cls)})

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def is_identity(self) -> bool:
        return all(getattr(self, f.name) == 0 for f in fields(self))

    @property
    def translation(self) -> Tuple[float, float, float]:
        return self.tx, self.ty, self.tz

    @property
    def has_rotation_or_scale(self) -> bool:
        return any((self.rx, self.ry, self.rz, self.s))

    def inverted(self) -> 'HelmertParameters':
        """
        The parameters of the reverse transform, obtained by negating all seven
        components. This is a first-order approximation, valid for the small rotations
        and scale changes typical of datum shifts.
        """
        return HelmertParameters(
            -self.tx, -self.ty, -self.tz, -self.rx, -self.ry, -self.rz, -self.s
        )

    def matrix(self) -> np.ndarray:
        """The 3x3 scaled rotation matrix (1 + s)·R, with rotations converted to radians"""
        rx, ry, rz = (x * ARCSEC_TO_RAD for x in (self.rx, self.ry, self.rz))
        return (1 + self.s * PPM) * np.array([
            [1., -rz, ry],
            [rz, 1., -rx],
            [-ry, rx, 1.],
        ])


IDENTITY = HelmertParameters()


def helmert_transform(
    xyz: Sequence[float],
    params: HelmertParameters
) -> Tuple[float, float, float]:
    """
    Apply a Helmert transform to a single geocentric position.

    Args:
        xyz:
            The (X, Y, Z) position, in meters

        params:
            The transform parameters

    Returns:
        The transformed (X, Y, Z), in meters
    """
    result = params.matrix() @ np.asarray(xyz, dtype=float) + np.array(params.translation)
    return float(result[0]), float(result[1]), float(result[2])


def helmert_chain(
    xyz: Sequence[float],
    steps: Sequence[HelmertParameters]
) -> Tuple[float, float, float]:
    """Apply a sequence of Helmert transforms in order. An empty sequence is a no-op."""
    result = (float(xyz[0]), float(xyz[1]), float(xyz[2]))
    for params in steps:
        result = helmert_transform(result, params)
    return result


def inverse_helmert_transform(
    xyz: Sequence[float],
    params: HelmertParameters,
    exact: bool = False
) -> Tuple[float, float, float]:
    """
    Undo a Helmert transform.

    By default the reverse transform is approximated by applying the negated
    parameters. Round-tripping is then only accurate to sub-millimeter level for
    translation-dominated parameter sets; residuals grow with the square of the
    rotation and scale magnitudes.

    Args:
        xyz:
            The (X, Y, Z) position, in meters

        params:
            The parameters of the forward transform being undone

        exact:
            (Default False) If True, solve the forward model exactly instead of
            negating the parameters.

    Returns:
        The (X, Y, Z) position before the forward transform, in meters
    """
    if not exact:
        return helmert_transform(xyz, params.inverted())

    shifted = np.asarray(xyz, dtype=float) - np.array(params.translation)
    result = np.linalg.solve(params.matrix(), shifted)
    return float(result[0]), float(result[1]), float(result[2])


def helmert_transform_array(points: np.ndarray, params: HelmertParameters) -> np.ndarray:
    """
    Apply a Helmert transform to many positions at once.

    Args:
        points:
            An (N, 3) array of geocentric positions, in meters

        params:
            The transform parameters

    Returns:
        An (N, 3) array of transformed positions
    """
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    if pts.shape[-1] != 3:
        raise ValueError(f'Expected an (N, 3) array of positions, got shape {pts.shape}')

    return pts @ params.matrix().T + np.array(params.translation)
