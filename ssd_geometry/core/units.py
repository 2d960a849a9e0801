"""
Unit resolution and conversion into the canonical unit system.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from .. import config
from .constants import UNIT_CONVERSION
from .data_classes import Unit, UnitTable
from .errors import UnrecognizedUnitError

logger = logging.getLogger(__name__)


def resolve_units(
    units: Optional[Mapping[str, str]],
    known_units: Mapping[str, Unit] = UNIT_CONVERSION,
) -> UnitTable:
    """Resolve the declared input units of a configuration.

    Parameters
    ----------
    units : mapping or None
        Quantity kind -> unit symbol, e.g. ``{"length": "cm"}``. Any subset
        of the four kinds may be given; other keys are ignored.
    known_units : mapping, optional
        Symbol -> :class:`Unit` table. Defaults to the bundled table.

    Returns
    -------
    UnitTable
        Fully populated table; missing kinds fall back to
        ``config.DEFAULT_INPUT_UNITS``.

    Raises
    ------
    UnrecognizedUnitError
        If a declared symbol is unknown or belongs to another quantity kind.
    """
    units = units or {}
    resolved = {}
    for quantity in config.QUANTITY_KINDS:
        if quantity in units:
            symbol = units[quantity]
            unit = known_units.get(symbol)
            if unit is None or unit.quantity != quantity:
                raise UnrecognizedUnitError(quantity, symbol)
        else:
            unit = known_units[config.DEFAULT_INPUT_UNITS[quantity]]
        resolved[quantity] = unit

    table = UnitTable(**resolved)
    logger.debug("Resolved input units: %s", table.as_dict())
    return table


def geom_round(value: float, sigdigits: int = config.GEOM_SIGDIGITS) -> float:
    """Round to ``sigdigits`` significant digits.

    Removes the floating-point jitter left behind by unit conversion, so
    that e.g. 40 mm is stored as exactly 0.04 m.
    """
    value = float(value)
    if value == 0.0 or not math.isfinite(value):
        return value
    digits = sigdigits - int(math.floor(math.log10(abs(value)))) - 1
    return round(value, digits)


def to_canonical(value: float, unit: Unit) -> float:
    """Convert ``value`` given in ``unit`` to canonical units and round it."""
    return geom_round(unit.to_canonical(value))


def from_canonical(value: float, unit: Unit) -> float:
    """Convert a canonical value back into ``unit``, rounded."""
    return geom_round(unit.from_canonical(value))


def to_canonical_length(value: float, units: UnitTable) -> float:
    return to_canonical(value, units.length)


def to_canonical_angle(value: float, units: UnitTable) -> float:
    return to_canonical(value, units.angle)


def to_canonical_potential(value: float, units: UnitTable) -> float:
    return to_canonical(value, units.potential)


def to_canonical_temperature(value: float, units: UnitTable) -> float:
    return to_canonical(value, units.temperature)
