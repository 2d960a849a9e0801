"""
Point containment queries against a detector.

All functions are read-only; a detector can be queried from any number of
threads at once.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .data_classes import Detector, DetectorObject, ObjectClass
from .primitives import Point

# Precedence between classes at equal hierarchy rank
_CLASS_PRECEDENCE = (ObjectClass.CONTACT, ObjectClass.SEMICONDUCTOR, ObjectClass.PASSIVE)


def in_any(objects: Iterable[DetectorObject], point: Point) -> bool:
    """True if any object of the collection contains ``point``."""
    return any(obj.contains(point) for obj in objects)


def in_world(detector: Detector, point: Point) -> bool:
    """True if ``point`` lies in the world volume."""
    return detector.world.contains(point)


def is_inside(detector: Detector, point: Point) -> bool:
    """True if ``point`` lies in the world and in a contact or a semiconductor.

    Passive structures never count as inside the detector. Object parts
    reaching past the world volume are ignored.
    """
    if not in_world(detector, point):
        return False
    return in_any(detector.contacts, point) or in_any(detector.semiconductors, point)


def is_inside_class(detector: Detector, object_class: ObjectClass, point: Point) -> bool:
    """True if ``point`` lies in the world and in any object of ``object_class``."""
    return in_world(detector, point) and in_any(detector.objects(object_class), point)


def locate(detector: Detector, point: Point) -> Optional[DetectorObject]:
    """Return the authoritative object containing ``point``, or None.

    The lowest hierarchy rank wins. At equal rank contacts come before
    semiconductors, which come before passives; within a class the resolved
    collection order decides.
    """
    if not in_world(detector, point):
        return None
    best = None
    best_key = None
    for class_order, object_class in enumerate(_CLASS_PRECEDENCE):
        for position, obj in enumerate(detector.objects(object_class)):
            key = (obj.hierarchy, class_order, position)
            if best_key is not None and key >= best_key:
                # Collections are rank-ordered: nothing later in this one can win
                break
            if obj.contains(point):
                best, best_key = obj, key
                break
    return best


def classify(detector: Detector, point: Point) -> Optional[ObjectClass]:
    """Class of the object :func:`locate` returns, or None outside all objects."""
    obj = locate(detector, point)
    return obj.object_class if obj is not None else None
