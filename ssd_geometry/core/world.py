"""
World volume construction.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Tuple

from .config_tree import require
from .data_classes import CoordinateSystem, Interval, UnitTable
from .errors import UnsupportedCoordinateSystemError
from .primitives import CartesianBox, Tube, full_angle_interval, length_interval
from .units import to_canonical_angle, to_canonical_length

logger = logging.getLogger(__name__)


def parse_coordinate_system(tag: Any) -> CoordinateSystem:
    """Map a grid ``coordinates`` tag onto :class:`CoordinateSystem`."""
    try:
        return CoordinateSystem(tag)
    except ValueError:
        raise UnsupportedCoordinateSystemError(tag) from None


def _cylindrical_world(dimensions: Mapping[str, Any], units: UnitTable, path: str) -> Tube:
    r_max = to_canonical_length(require(dimensions, "r", path), units)
    z = require(dimensions, "z", path)
    return Tube(
        r=Interval(to_canonical_length(0.0, units), r_max),
        phi=full_angle_interval(),
        z=length_interval(z, units, f"{path}.z"),
    )


def _cartesian_world(dimensions: Mapping[str, Any], units: UnitTable, path: str) -> CartesianBox:
    return CartesianBox(
        x=length_interval(require(dimensions, "x", path), units, f"{path}.x"),
        y=length_interval(require(dimensions, "y", path), units, f"{path}.y"),
        z=length_interval(require(dimensions, "z", path), units, f"{path}.z"),
    )


def construct_world(
    grid: Mapping[str, Any],
    units: UnitTable,
    path: str = "world.grid",
) -> Tuple[CoordinateSystem, Any]:
    """Build the world bounding volume from the ``grid`` section.

    Parameters
    ----------
    grid : mapping
        Must contain ``coordinates`` and ``dimensions``.
        Cylindrical dimensions: ``{"r": R, "z": {"from": z0, "to": z1}}``;
        the world spans ``r in [0, R]``, a full revolution in ``phi`` and
        ``[z0, z1]``. Cartesian dimensions: ``x``, ``y``, ``z`` intervals.
    units : UnitTable
        Input units of the dimensions.

    Returns
    -------
    (CoordinateSystem, shape)
        The coordinate system used and the world primitive in canonical units.

    Raises
    ------
    UnsupportedCoordinateSystemError
        If ``coordinates`` is not 'Cylindrical' or 'Cartesian'.
    """
    coordinate_system = parse_coordinate_system(require(grid, "coordinates", path))
    dimensions = require(grid, "dimensions", path)
    dim_path = f"{path}.dimensions"

    if coordinate_system is CoordinateSystem.CYLINDRICAL:
        world = _cylindrical_world(dimensions, units, dim_path)
    else:
        world = _cartesian_world(dimensions, units, dim_path)

    logger.debug("Built %s world: %s", coordinate_system.value, world.describe())
    return coordinate_system, world


def construct_periodicity(
    grid: Mapping[str, Any],
    units: UnitTable,
    path: str = "world.grid",
) -> float:
    """Read ``symmetries.periodic.phi`` and return it in radians."""
    symmetries = require(grid, "symmetries", path)
    periodic = require(symmetries, "periodic", f"{path}.symmetries")
    phi = require(periodic, "phi", f"{path}.symmetries.periodic")
    return to_canonical_angle(phi, units)
