"""
Data classes for the detector geometry model.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

import numpy as np


class CoordinateSystem(Enum):
    """Coordinate system of the world volume, fixed at construction."""
    CYLINDRICAL = "Cylindrical"
    CARTESIAN = "Cartesian"


class ObjectClass(Enum):
    """Kind of a detector object."""
    SEMICONDUCTOR = "Semiconductor"
    CONTACT = "Contact"
    PASSIVE = "Passive"


@dataclass(frozen=True)
class Unit:
    """A unit of one quantity kind and its affine map to the canonical unit.

    ``canonical = value * scale + offset``
    """

    symbol: str
    quantity: str
    scale: float
    offset: float = 0.0

    def to_canonical(self, value: float) -> float:
        return float(value) * self.scale + self.offset

    def from_canonical(self, value: float) -> float:
        return (float(value) - self.offset) / self.scale


@dataclass(frozen=True)
class UnitTable:
    """Resolved input unit for each of the four quantity kinds."""

    length: Unit
    angle: Unit
    potential: Unit
    temperature: Unit

    def __getitem__(self, quantity: str) -> Unit:
        if quantity not in ("length", "angle", "potential", "temperature"):
            raise KeyError(quantity)
        return getattr(self, quantity)

    def as_dict(self) -> Dict[str, str]:
        """Map each quantity kind to its unit symbol."""
        return {
            "length": self.length.symbol,
            "angle": self.angle.symbol,
            "potential": self.potential.symbol,
            "temperature": self.temperature.symbol,
        }


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[left, right]``."""

    left: float
    right: float

    def contains(self, value: float) -> bool:
        return self.left <= value <= self.right

    @property
    def width(self) -> float:
        return self.right - self.left

    def __iter__(self) -> Iterator[float]:
        yield self.left
        yield self.right


@dataclass(frozen=True)
class CartesianPoint:
    """Point in Cartesian coordinates (m)."""

    x: float
    y: float
    z: float

    def to_cartesian(self) -> CartesianPoint:
        return self

    def to_cylindrical(self) -> CylindricalPoint:
        r = math.hypot(self.x, self.y)
        phi = math.atan2(self.y, self.x) % (2.0 * math.pi)
        return CylindricalPoint(r, phi, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class CylindricalPoint:
    """Point in cylindrical coordinates (m, rad, m).

    ``r`` is kept as given, so a perturbed point may carry a negative radius.
    """

    r: float
    phi: float
    z: float

    def to_cylindrical(self) -> CylindricalPoint:
        return self

    def to_cartesian(self) -> CartesianPoint:
        return CartesianPoint(
            self.r * math.cos(self.phi),
            self.r * math.sin(self.phi),
            self.z,
        )

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.phi, self.z], dtype=float)


@dataclass(frozen=True)
class MaterialProperties:
    """Physical properties of a material, stored by value.

    Attributes
    ----------
    key : str
        Canonical key of the material in the material table.
    name : str
        Human-readable name.
    relative_permittivity : float
        Dielectric constant (dimensionless).
    density : float
        Mass density (kg/m³).
    ionisation_energy : float
        Mean energy per electron-hole pair (eV), 0 for non-semiconductors.
    fano_factor : float
        Fano factor, 0 where not applicable.
    """

    key: str
    name: str
    relative_permittivity: float
    density: float
    ionisation_energy: float = 0.0
    fano_factor: float = 0.0


@dataclass(frozen=True)
class DetectorObject:
    """One semiconductor body, contact or passive structure.

    The ``object_class`` tag selects the variant; ``potential`` and
    ``channel`` are only set for contacts.
    """

    object_class: ObjectClass
    id: str
    hierarchy: int
    shape: Any
    material: Optional[MaterialProperties] = None
    potential: Optional[float] = None  # V
    channel: Optional[int] = None
    name: str = ""

    def contains(self, point) -> bool:
        return self.shape.contains(point)

    def __contains__(self, point) -> bool:
        return self.contains(point)


@dataclass(frozen=True)
class Detector:
    """Immutable detector model: world volume plus ordered object collections.

    The three collections are tuples already resolved into hierarchy order.
    """

    name: str
    units: UnitTable
    coordinate_system: CoordinateSystem
    world: Any
    cyclic: float  # rad
    medium: MaterialProperties
    semiconductors: Tuple[DetectorObject, ...] = ()
    contacts: Tuple[DetectorObject, ...] = ()
    passives: Tuple[DetectorObject, ...] = ()
    mirror_symmetry_phi: bool = False
    precision_type: type = field(default=np.float64, repr=False)

    def objects(self, object_class: ObjectClass) -> Tuple[DetectorObject, ...]:
        """Return the collection holding objects of ``object_class``."""
        if object_class is ObjectClass.SEMICONDUCTOR:
            return self.semiconductors
        if object_class is ObjectClass.CONTACT:
            return self.contacts
        if object_class is ObjectClass.PASSIVE:
            return self.passives
        raise ValueError(f"Unknown object class {object_class!r}")

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs) -> Detector:
        """Build a detector from a parsed configuration tree.

        Keyword arguments are forwarded to :func:`build_detector`.
        """
        from .detector import build_detector
        return build_detector(config, **kwargs)

    def __str__(self) -> str:
        from ..reporting import format_detector_summary
        return format_detector_summary(self)
