"""
Catalog records for configuring ellipsoids and datums from static configuration.

A catalog document looks like:

    {
        "hub": "WGS84",
        "ellipsoids": [{"name": "GRS80", "a": 6378137.0, "inverse_flattening": 298.257222101}],
        "datums": [
            {"name": "WGS84", "ellipsoidRef": "WGS84"},
            {
                "name": "ED50",
                "ellipsoidRef": "ED50",
                "hubTransform": {"tx": -84, "ty": -103, "tz": -127}
            }
        ]
    }

Ellipsoids listed in the document are added to (and override) the built-in catalog
unless `include_builtin_ellipsoids` is false.
"""

__all__ = [
    'CatalogRecord', 'DatumRecord', 'EllipsoidRecord', 'HelmertRecord',
    'build_registry', 'dump_catalog', 'load_catalog',
]

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from geodatum._const import HUB_DATUM
from geodatum.datums import Datum, DatumRegistry
from geodatum.ellipsoids import ELLIPSOIDS, Ellipsoid
from geodatum.helmert import HelmertParameters
from geodatum.utils.logging import LOGGER


class HelmertRecord(BaseModel):
    """Helmert parameters: translations (m), rotations (arc-seconds), scale (ppm)"""
    model_config = ConfigDict(extra='forbid', frozen=True)

    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    rx: float = 0.
    ry: float = 0.
    rz: float = 0.
    s: float = 0.

    def to_parameters(self) -> HelmertParameters:
        return HelmertParameters(**self.model_dump())


class EllipsoidRecord(BaseModel):
    """An ellipsoid entry. Exactly one of `f` or `inverse_flattening` must be given."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    name: str = Field(min_length=1)
    a: float = Field(gt=0)
    f: Optional[float] = Field(default=None, gt=0, lt=1)
    inverse_flattening: Optional[float] = Field(default=None, gt=1)
    full_name: str = ''

    @model_validator(mode='after')
    def _check_flattening(self):
        if (self.f is None) == (self.inverse_flattening is None):
            raise ValueError('Exactly one of f or inverse_flattening must be provided')
        return self

    def to_ellipsoid(self) -> Ellipsoid:
        f = self.f if self.f is not None else 1 / self.inverse_flattening
        return Ellipsoid(self.name, self.a, f, self.full_name)


class DatumRecord(BaseModel):
    """A datum entry, bound to an ellipsoid by name"""
    model_config = ConfigDict(extra='forbid', frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    ellipsoid: str = Field(alias='ellipsoidRef', min_length=1)
    to_hub: HelmertRecord = Field(default_factory=HelmertRecord, alias='hubTransform')
    full_name: str = ''
    description: str = ''
    accuracy: str = ''

    def to_datum(self) -> Datum:
        return Datum(
            self.name,
            self.ellipsoid,
            self.to_hub.to_parameters(),
            full_name=self.full_name,
            description=self.description,
            accuracy=self.accuracy,
        )


class CatalogRecord(BaseModel):
    """A complete datum catalog"""
    model_config = ConfigDict(extra='forbid', frozen=True)

    hub: str = HUB_DATUM
    ellipsoids: List[EllipsoidRecord] = Field(default_factory=list)
    datums: List[DatumRecord] = Field(min_length=1)
    include_builtin_ellipsoids: bool = True


def build_registry(catalog: Union[CatalogRecord, Dict[str, Any]]) -> DatumRegistry:
    """
    Create a DatumRegistry from a catalog record (or its dict equivalent).

    Args:
        catalog:
            A CatalogRecord, or a dict that validates as one

    Returns:
        DatumRegistry

    Raises:
        pydantic.ValidationError: if the catalog is malformed
        UnknownEllipsoid: if a datum references an unregistered ellipsoid
        UnknownDatum: if the hub datum is not defined
    """
    if not isinstance(catalog, CatalogRecord):
        catalog = CatalogRecord.model_validate(catalog)

    ellipsoids = dict(ELLIPSOIDS) if catalog.include_builtin_ellipsoids else {}
    ellipsoids.update({x.name: x.to_ellipsoid() for x in catalog.ellipsoids})

    return DatumRegistry(
        [x.to_datum() for x in catalog.datums],
        ellipsoids=ellipsoids,
        hub=catalog.hub,
    )


def load_catalog(path: Union[str, Path]) -> DatumRegistry:
    """
    Read a JSON catalog document from disk and build a DatumRegistry from it.

    Args:
        path:
            Path to the JSON file

    Returns:
        DatumRegistry
    """
    path = Path(path)
    LOGGER.debug('Loading datum catalog from %s', path)
    with open(path, 'r', encoding='utf-8') as f:
        return build_registry(json.load(f))


def dump_catalog(registry: DatumRegistry) -> Dict[str, Any]:
    """
    Serialize a registry into a catalog document (as a dict) that build_registry accepts.
    Only the ellipsoids referenced by a datum are written.
    """
    used = {x.ellipsoid for x in registry.datums.values()}
    catalog = CatalogRecord(
        hub=registry.hub,
        ellipsoids=[
            EllipsoidRecord(name=x.name, a=x.a, f=x.f, full_name=x.full_name)
            for name, x in registry.ellipsoids.items() if name in used
        ],
        datums=[
            DatumRecord(
                name=x.name,
                ellipsoid=x.ellipsoid,
                to_hub=HelmertRecord(**x.to_hub.to_dict()),
                full_name=x.full_name,
                description=x.description,
                accuracy=x.accuracy,
            )
            for x in registry.datums.values()
        ],
        include_builtin_ellipsoids=False,
    )
    return catalog.model_dump(by_alias=True)
