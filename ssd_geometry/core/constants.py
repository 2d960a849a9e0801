"""
Unit conversion constants.

Every entry maps an input unit symbol to its factor (and offset, for
temperatures) into the canonical unit of its quantity kind:
length m, angle rad, potential V, temperature K.
"""

import math
from types import MappingProxyType

from .data_classes import Unit

ZERO_CELSIUS_K = 273.15

_UNITS = [
    # length -> m
    Unit("nm", "length", 1.0e-9),
    Unit("um", "length", 1.0e-6),
    Unit("μm", "length", 1.0e-6),
    Unit("mm", "length", 1.0e-3),
    Unit("cm", "length", 1.0e-2),
    Unit("dm", "length", 1.0e-1),
    Unit("m", "length", 1.0),
    Unit("in", "length", 0.0254),
    # angle -> rad
    Unit("rad", "angle", 1.0),
    Unit("deg", "angle", math.pi / 180.0),
    Unit("°", "angle", math.pi / 180.0),
    # potential -> V
    Unit("mV", "potential", 1.0e-3),
    Unit("V", "potential", 1.0),
    Unit("kV", "potential", 1.0e3),
    Unit("MV", "potential", 1.0e6),
    # temperature -> K
    Unit("K", "temperature", 1.0),
    Unit("°C", "temperature", 1.0, ZERO_CELSIUS_K),
    Unit("degC", "temperature", 1.0, ZERO_CELSIUS_K),
    Unit("C", "temperature", 1.0, ZERO_CELSIUS_K),
]

# Read-only, process-wide
UNIT_CONVERSION = MappingProxyType({unit.symbol: unit for unit in _UNITS})
