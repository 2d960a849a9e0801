"""
Detector construction from a parsed configuration tree.

Construction runs strictly in order: units, world, medium, objects. The
builder accumulates intermediate results and only :meth:`DetectorBuilder.build`
produces a :class:`Detector`; a failing step leaves no detector behind.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config_tree import require
from .constants import UNIT_CONVERSION
from .data_classes import (
    CoordinateSystem,
    Detector,
    DetectorObject,
    MaterialProperties,
    Unit,
    UnitTable,
)
from .errors import DetectorConfigError
from .hierarchy import sort_by_hierarchy
from .materials import MATERIAL_PROPERTIES, lookup_material
from .objects import construct_objects
from .units import resolve_units
from .world import construct_periodicity, construct_world

logger = logging.getLogger(__name__)


class DetectorBuilder:
    """Staged builder for an immutable :class:`Detector`.

    Example
    -------
    >>> detector = (
    ...     DetectorBuilder()
    ...     .with_name("coax")
    ...     .with_units({"length": "mm"})
    ...     .with_grid(grid)
    ...     .with_medium("vacuum")
    ...     .with_objects(objects)
    ...     .build()
    ... )
    """

    def __init__(
        self,
        material_table: Mapping[str, MaterialProperties] = MATERIAL_PROPERTIES,
        known_units: Mapping[str, Unit] = UNIT_CONVERSION,
    ):
        self._material_table = material_table
        self._known_units = known_units
        self._name = ""
        self._units: Optional[UnitTable] = None
        self._coordinate_system: Optional[CoordinateSystem] = None
        self._world = None
        self._cyclic: Optional[float] = None
        self._medium: Optional[MaterialProperties] = None
        self._semiconductors: List[DetectorObject] = []
        self._contacts: List[DetectorObject] = []
        self._passives: List[DetectorObject] = []

    def _require_units(self, step: str) -> UnitTable:
        if self._units is None:
            raise DetectorConfigError(f"Units must be set before {step}")
        return self._units

    def with_name(self, name: Optional[str]) -> DetectorBuilder:
        self._name = "" if name is None else str(name)
        return self

    def with_units(self, units: Optional[Mapping[str, str]]) -> DetectorBuilder:
        self._units = resolve_units(units, self._known_units)
        return self

    def with_grid(self, grid: Mapping[str, Any], path: str = "world.grid") -> DetectorBuilder:
        units = self._require_units("the grid")
        self._coordinate_system, self._world = construct_world(grid, units, path)
        self._cyclic = construct_periodicity(grid, units, path)
        return self

    def with_medium(self, medium: str) -> DetectorBuilder:
        self._medium = lookup_material(medium, self._material_table)
        return self

    def with_objects(
        self,
        objects: Sequence[Mapping[str, Any]],
        path: str = "world.objects",
    ) -> DetectorBuilder:
        units = self._require_units("objects")
        construct_objects(
            objects,
            self._semiconductors,
            self._contacts,
            self._passives,
            units,
            self._material_table,
            path,
        )
        return self

    def build(self) -> Detector:
        """Materialise the detector; collections are hierarchy-ordered."""
        units = self._require_units("building")
        if self._world is None:
            raise DetectorConfigError("The world grid must be set before building")
        if self._medium is None:
            raise DetectorConfigError("The medium must be set before building")

        detector = Detector(
            name=self._name,
            units=units,
            coordinate_system=self._coordinate_system,
            world=self._world,
            cyclic=self._cyclic,
            medium=self._medium,
            semiconductors=tuple(sort_by_hierarchy(self._semiconductors)),
            contacts=tuple(sort_by_hierarchy(self._contacts)),
            passives=tuple(sort_by_hierarchy(self._passives)),
            mirror_symmetry_phi=False,
        )
        logger.info(
            "Built detector '%s' (%s): %d semiconductors, %d contacts, %d passives",
            detector.name,
            detector.coordinate_system.value,
            len(detector.semiconductors),
            len(detector.contacts),
            len(detector.passives),
        )
        return detector


def build_detector(
    config: Dict[str, Any],
    material_table: Mapping[str, MaterialProperties] = MATERIAL_PROPERTIES,
    known_units: Mapping[str, Unit] = UNIT_CONVERSION,
) -> Detector:
    """Build a detector from a parsed configuration tree.

    Parameters
    ----------
    config : dict
        ``{"name": ..., "world": {"units": ..., "medium": ..., "grid": ...,
        "objects": [...]}}``.
    material_table : mapping, optional
        Material name -> properties; defaults to the bundled table.
    known_units : mapping, optional
        Unit symbol -> Unit; defaults to the bundled table.

    Raises
    ------
    MissingConfigFieldError
        If a required field is absent.
    UnrecognizedUnitError, UnsupportedCoordinateSystemError,
    UnknownMaterialError, UnknownShapeError, DetectorConfigError
        On invalid content.
    """
    name = require(config, "name")
    world = require(config, "world")
    builder = DetectorBuilder(material_table=material_table, known_units=known_units)
    return (
        builder
        .with_name(name)
        .with_units(require(world, "units", "world"))
        .with_grid(require(world, "grid", "world"))
        .with_medium(require(world, "medium", "world"))
        .with_objects(require(world, "objects", "world"))
        .build()
    )
