"""
Volume primitives with point-membership predicates.

Shapes are immutable and store canonical units only (m, rad). Membership
uses closed intervals, so points on a boundary surface count as inside.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple, Union

import numpy as np

from .. import config
from .config_tree import require
from .data_classes import CartesianPoint, CylindricalPoint, Interval, UnitTable
from .errors import DetectorConfigError, UnknownShapeError
from .units import to_canonical_angle, to_canonical_length

Point = Union[CartesianPoint, CylindricalPoint, Sequence[float], np.ndarray]

# Tolerance for treating an azimuthal span as a full revolution
_PHI_EPSILON = 1e-9


def as_cartesian(point: Point) -> CartesianPoint:
    """Interpret ``point`` as Cartesian; plain sequences are taken as (x, y, z)."""
    if isinstance(point, (CartesianPoint, CylindricalPoint)):
        return point.to_cartesian()
    x, y, z = (float(c) for c in point)
    return CartesianPoint(x, y, z)


def as_cylindrical(point: Point) -> CylindricalPoint:
    if isinstance(point, CylindricalPoint):
        return point
    return as_cartesian(point).to_cylindrical()


def has_negative_radius(point: Point) -> bool:
    """True for a cylindrical point whose ``r`` is below zero.

    Such points lie in no shape, whatever its placement.
    """
    return isinstance(point, CylindricalPoint) and point.r < 0.0


@dataclass(frozen=True)
class Translation:
    """Offset of a shape's local origin (m)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def is_axial(self) -> bool:
        """True if the offset is along z only."""
        return self.x == 0.0 and self.y == 0.0


NO_TRANSLATION = Translation()


@dataclass(frozen=True)
class Tube:
    """Cylindrical sector ``r x phi x z`` around the z axis."""

    r: Interval
    phi: Interval
    z: Interval
    translate: Translation = NO_TRANSLATION

    @property
    def full_revolution(self) -> bool:
        return self.phi.width >= config.FULL_REVOLUTION - _PHI_EPSILON

    def _local(self, point: Point) -> CylindricalPoint:
        t = self.translate
        if isinstance(point, CylindricalPoint) and t.is_axial:
            return CylindricalPoint(point.r, point.phi, point.z - t.z)
        c = as_cartesian(point)
        return CartesianPoint(c.x - t.x, c.y - t.y, c.z - t.z).to_cylindrical()

    def _phi_inside(self, phi: float) -> bool:
        if self.full_revolution:
            return True
        offset = (phi - self.phi.left) % config.FULL_REVOLUTION
        return offset <= self.phi.width

    def contains(self, point: Point) -> bool:
        if has_negative_radius(point):
            return False
        p = self._local(point)
        return (
            self.r.contains(p.r)
            and self.z.contains(p.z)
            and self._phi_inside(p.phi)
        )

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def describe(self) -> str:
        return (
            f"Tube(r=[{self.r.left:g}, {self.r.right:g}] m, "
            f"phi=[{self.phi.left:g}, {self.phi.right:g}] rad, "
            f"z=[{self.z.left:g}, {self.z.right:g}] m)"
        )


@dataclass(frozen=True)
class CartesianBox:
    """Axis-aligned box."""

    x: Interval
    y: Interval
    z: Interval
    translate: Translation = NO_TRANSLATION

    def contains(self, point: Point) -> bool:
        if has_negative_radius(point):
            return False
        c = as_cartesian(point)
        t = self.translate
        return (
            self.x.contains(c.x - t.x)
            and self.y.contains(c.y - t.y)
            and self.z.contains(c.z - t.z)
        )

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def corners(self) -> np.ndarray:
        """The eight corners, shape (8, 3), translation applied."""
        t = np.array([self.translate.x, self.translate.y, self.translate.z])
        grid = np.array(
            [[x, y, z] for x in self.x for y in self.y for z in self.z],
            dtype=float,
        )
        return grid + t

    def describe(self) -> str:
        return (
            f"Box(x=[{self.x.left:g}, {self.x.right:g}] m, "
            f"y=[{self.y.left:g}, {self.y.right:g}] m, "
            f"z=[{self.z.left:g}, {self.z.right:g}] m)"
        )


@dataclass(frozen=True)
class UnionShape:
    """Point is inside if any part contains it."""

    parts: Tuple[Any, ...]

    def contains(self, point: Point) -> bool:
        return any(part.contains(point) for part in self.parts)

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def describe(self) -> str:
        return "Union(" + ", ".join(p.describe() for p in self.parts) + ")"


@dataclass(frozen=True)
class DifferenceShape:
    """``base`` minus every shape in ``subtract``."""

    base: Any
    subtract: Tuple[Any, ...]

    def contains(self, point: Point) -> bool:
        if not self.base.contains(point):
            return False
        return not any(s.contains(point) for s in self.subtract)

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def describe(self) -> str:
        removed = ", ".join(s.describe() for s in self.subtract)
        return f"Difference({self.base.describe()} - [{removed}])"


def _interval_from(value, convert, path: str) -> Interval:
    """Parse ``{"from": a, "to": b}`` or a scalar ``v`` (meaning ``[0, v]``)."""
    if isinstance(value, Mapping):
        left = convert(require(value, "from", path))
        right = convert(require(value, "to", path))
    else:
        left, right = convert(0.0), convert(value)
    if left > right:
        raise DetectorConfigError(f"Interval '{path}' is inverted: [{left}, {right}]")
    return Interval(left, right)


def length_interval(value, units: UnitTable, path: str) -> Interval:
    return _interval_from(value, lambda v: to_canonical_length(v, units), path)


def angle_interval(value, units: UnitTable, path: str) -> Interval:
    return _interval_from(value, lambda v: to_canonical_angle(v, units), path)


def full_angle_interval() -> Interval:
    return Interval(0.0, config.FULL_REVOLUTION)


def _translation_from(geometry: Mapping[str, Any], units: UnitTable) -> Translation:
    offset = geometry.get("translate")
    if not offset:
        return NO_TRANSLATION
    return Translation(
        to_canonical_length(offset.get("x", 0.0), units),
        to_canonical_length(offset.get("y", 0.0), units),
        to_canonical_length(offset.get("z", 0.0), units),
    )


def _build_tube(geometry, units, path):
    phi = geometry.get("phi")
    return Tube(
        r=length_interval(require(geometry, "r", path), units, f"{path}.r"),
        phi=angle_interval(phi, units, f"{path}.phi") if phi is not None else full_angle_interval(),
        z=length_interval(require(geometry, "z", path), units, f"{path}.z"),
        translate=_translation_from(geometry, units),
    )


def _build_box(geometry, units, path):
    return CartesianBox(
        x=length_interval(require(geometry, "x", path), units, f"{path}.x"),
        y=length_interval(require(geometry, "y", path), units, f"{path}.y"),
        z=length_interval(require(geometry, "z", path), units, f"{path}.z"),
        translate=_translation_from(geometry, units),
    )


def _build_union(geometry, units, path):
    parts = require(geometry, "parts", path)
    return UnionShape(tuple(
        build_shape(part, units, f"{path}.parts[{i}]") for i, part in enumerate(parts)
    ))


def _build_difference(geometry, units, path):
    base = build_shape(require(geometry, "base", path), units, f"{path}.base")
    subtract = require(geometry, "subtract", path)
    if isinstance(subtract, Mapping):
        subtract = [subtract]
    return DifferenceShape(base, tuple(
        build_shape(s, units, f"{path}.subtract[{i}]") for i, s in enumerate(subtract)
    ))


SHAPE_BUILDERS = {
    "tube": _build_tube,
    "box": _build_box,
    "union": _build_union,
    "difference": _build_difference,
}


def build_shape(geometry: Mapping[str, Any], units: UnitTable, path: str = "geometry"):
    """Build a primitive from its geometry description.

    Parameters
    ----------
    geometry : mapping
        ``{"type": "tube" | "box" | "union" | "difference", ...}``.
    units : UnitTable
        Input units of the numbers in ``geometry``.
    path : str
        Dotted location of ``geometry`` in the configuration, for errors.

    Raises
    ------
    UnknownShapeError
        If ``type`` is not supported.
    MissingConfigFieldError
        If a required field is absent.
    """
    shape_type = require(geometry, "type", path)
    builder = SHAPE_BUILDERS.get(str(shape_type).lower())
    if builder is None:
        raise UnknownShapeError(shape_type)
    return builder(geometry, units, path)
