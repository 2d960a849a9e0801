"""
Reference Detector Configurations for Testing and Debugging
===========================================================

This module provides small analytic detector configurations that can be
used wherever a parsed configuration tree is expected. They are useful for:
- Checking unit handling (the same detector in different length units)
- Exercising containment and hierarchy on known overlaps
- Sampling demonstrations

Each function returns a fresh configuration tree, so callers may modify it.
"""

from __future__ import annotations

from typing import Any, Dict, Literal

# Millimetres per declared length unit
_MM_PER_UNIT = {"mm": 1.0, "cm": 10.0, "m": 1000.0}


def _scaled(value_mm: float, length_unit: str) -> float:
    return value_mm / _MM_PER_UNIT[length_unit]


def _interval(left_mm: float, right_mm: float, length_unit: str) -> Dict[str, float]:
    return {"from": _scaled(left_mm, length_unit), "to": _scaled(right_mm, length_unit)}


def create_coax_config(
    length_unit: Literal["mm", "cm", "m"] = "mm",
    name: str = "Coaxial HPGe",
) -> Dict[str, Any]:
    """Create a closed-end coaxial detector.

    Geometry (in mm):
    - crystal: r in [0, 35], z in [0, 40], with a bore r <= 5, z >= 15
    - core contact filling the bore, 0 V
    - mantle contact r in [34, 35], z in [0, 40], 3.5 kV, overlapping the
      crystal and ranked before it
    - aluminium holder r in [36, 40], z in [-5, 45]
    - world r <= 50, z in [-10, 60]

    Parameters
    ----------
    length_unit : {"mm", "cm", "m"}
        Declared length unit; numbers are scaled so the physical detector is
        identical for every choice.
    name : str
        Detector name.
    """
    def iv(left_mm: float, right_mm: float) -> Dict[str, float]:
        return _interval(left_mm, right_mm, length_unit)

    return {
        "name": name,
        "world": {
            "units": {"length": length_unit, "angle": "deg", "potential": "V", "temperature": "K"},
            "medium": "vacuum",
            "grid": {
                "coordinates": "Cylindrical",
                "dimensions": {"r": _scaled(50.0, length_unit), "z": iv(-10.0, 60.0)},
                "symmetries": {"periodic": {"phi": 360.0}},
            },
            "objects": [
                {
                    "class": "Semiconductor",
                    "id": "crystal",
                    "material": "HPGe",
                    "hierarchy": 2,
                    "geometry": {
                        "type": "difference",
                        "base": {"type": "tube", "r": iv(0.0, 35.0), "z": iv(0.0, 40.0)},
                        "subtract": {"type": "tube", "r": iv(0.0, 5.0), "z": iv(15.0, 40.0)},
                    },
                },
                {
                    "class": "Contact",
                    "id": "core",
                    "material": "HPGe",
                    "potential": 0.0,
                    "channel": 1,
                    "hierarchy": 1,
                    "geometry": {"type": "tube", "r": iv(0.0, 5.0), "z": iv(15.0, 40.0)},
                },
                {
                    "class": "Contact",
                    "id": "mantle",
                    "material": "HPGe",
                    "potential": 3500.0,
                    "channel": 2,
                    "hierarchy": 1,
                    "geometry": {"type": "tube", "r": iv(34.0, 35.0), "z": iv(0.0, 40.0)},
                },
                {
                    "class": "Passive",
                    "id": "holder",
                    "material": "Al",
                    "hierarchy": 3,
                    "geometry": {"type": "tube", "r": iv(36.0, 40.0), "z": iv(-5.0, 45.0)},
                },
            ],
        },
    }


def create_planar_config(name: str = "Planar Si") -> Dict[str, Any]:
    """Create a planar silicon pad detector on a Cartesian grid.

    Geometry (in mm): a 20 x 20 x 10 crystal centred in x and y with
    0.1 mm contacts on both faces and a PTFE frame around it, in a
    40 x 40 x 20 world.
    """
    return {
        "name": name,
        "world": {
            "units": {"length": "mm", "potential": "kV"},
            "medium": "air",
            "grid": {
                "coordinates": "Cartesian",
                "dimensions": {
                    "x": {"from": -20.0, "to": 20.0},
                    "y": {"from": -20.0, "to": 20.0},
                    "z": {"from": -5.0, "to": 15.0},
                },
                "symmetries": {"periodic": {"phi": 0.0}},
            },
            "objects": [
                {
                    "class": "Semiconductor",
                    "id": "pad",
                    "material": "Si",
                    "hierarchy": 1,
                    "geometry": {
                        "type": "box",
                        "x": {"from": -10.0, "to": 10.0},
                        "y": {"from": -10.0, "to": 10.0},
                        "z": {"from": 0.0, "to": 10.0},
                    },
                },
                {
                    "class": "Contact",
                    "id": "front",
                    "potential": 0.1,
                    "channel": 1,
                    "hierarchy": 0,
                    "geometry": {
                        "type": "box",
                        "x": {"from": -10.0, "to": 10.0},
                        "y": {"from": -10.0, "to": 10.0},
                        "z": {"from": 9.9, "to": 10.0},
                    },
                },
                {
                    "class": "Contact",
                    "id": "back",
                    "potential": 0.0,
                    "channel": 2,
                    "hierarchy": 0,
                    "geometry": {
                        "type": "box",
                        "x": {"from": -10.0, "to": 10.0},
                        "y": {"from": -10.0, "to": 10.0},
                        "z": {"from": 0.0, "to": 0.1},
                    },
                },
                {
                    "class": "Passive",
                    "id": "frame",
                    "material": "PTFE",
                    "hierarchy": 2,
                    "geometry": {
                        "type": "difference",
                        "base": {
                            "type": "box",
                            "x": {"from": -15.0, "to": 15.0},
                            "y": {"from": -15.0, "to": 15.0},
                            "z": {"from": 0.0, "to": 10.0},
                        },
                        "subtract": {
                            "type": "box",
                            "x": {"from": -10.0, "to": 10.0},
                            "y": {"from": -10.0, "to": 10.0},
                            "z": {"from": 0.0, "to": 10.0},
                        },
                    },
                },
            ],
        },
    }


def create_simple_detector_config(
    geometry_type: Literal["coax", "planar"] = "coax",
    **kwargs,
) -> Dict[str, Any]:
    """Create one of the reference configurations by name.

    Parameters
    ----------
    geometry_type : {"coax", "planar"}
        Which reference detector to build.
    **kwargs
        Forwarded to the specific factory.
    """
    factories = {
        "coax": create_coax_config,
        "planar": create_planar_config,
    }
    if geometry_type not in factories:
        raise ValueError(f"Unknown geometry_type: {geometry_type}. Use 'coax' or 'planar'.")
    return factories[geometry_type](**kwargs)
