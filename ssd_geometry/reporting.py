"""
Human-readable summaries of detectors and sample sets.
"""

from __future__ import annotations

from typing import List

import numpy as np

from . import config
from .core.data_classes import Detector, DetectorObject, ObjectClass
from .core.sampling import cartesian_to_cylindrical

_COLLECTION_TITLES = {
    ObjectClass.SEMICONDUCTOR: "Semiconductors",
    ObjectClass.CONTACT: "Contacts",
    ObjectClass.PASSIVE: "Passives",
}


def _describe_object(obj: DetectorObject) -> str:
    line = f"    - {obj.id} (hierarchy {obj.hierarchy}): {obj.shape.describe()}"
    if obj.material is not None:
        line += f", material {obj.material.key}"
    if obj.object_class is ObjectClass.CONTACT:
        line += f", potential {obj.potential:g} V"
        if obj.channel is not None:
            line += f", channel {obj.channel}"
    return line


def format_detector_summary(detector: Detector) -> str:
    """Render name, medium, grid type and per-class object counts.

    Collections with at most ``config.VERBOSE_LISTING_LIMIT`` entries are
    listed object by object.
    """
    lines: List[str] = [
        "=" * 60,
        f"Detector: {detector.name or '<unnamed>'}",
        "=" * 60,
        f"Medium: {detector.medium.name}",
        f"Grid type: {detector.coordinate_system.value}",
        f"World: {detector.world.describe()}",
        "Units: " + ", ".join(f"{k}={v}" for k, v in detector.units.as_dict().items()),
    ]
    for object_class, title in _COLLECTION_TITLES.items():
        objects = detector.objects(object_class)
        lines.append(f"{title}: {len(objects)}")
        if 0 < len(objects) <= config.VERBOSE_LISTING_LIMIT:
            lines.extend(_describe_object(obj) for obj in objects)
    lines.append("=" * 60)
    return "\n".join(lines)


def print_detector_summary(detector: Detector) -> None:
    print(format_detector_summary(detector))


def describe_samples(points: np.ndarray) -> str:
    """Summarise a sample set: count and r/phi/z ranges."""
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    if len(points) == 0:
        return "No sample points."
    cyl = cartesian_to_cylindrical(points)
    return "\n".join([
        f"Sample points: {len(points)}",
        f"  r   (mm): [{cyl[:, 0].min()*1e3:.4f}, {cyl[:, 0].max()*1e3:.4f}], mean {cyl[:, 0].mean()*1e3:.4f}",
        f"  phi (rad): [{cyl[:, 1].min():.4f}, {cyl[:, 1].max():.4f}]",
        f"  z   (mm): [{cyl[:, 2].min()*1e3:.4f}, {cyl[:, 2].max()*1e3:.4f}], mean {cyl[:, 2].mean()*1e3:.4f}",
    ])
