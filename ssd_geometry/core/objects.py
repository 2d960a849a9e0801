"""
Classification and construction of detector objects.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config_tree import require
from .data_classes import DetectorObject, MaterialProperties, ObjectClass, UnitTable
from .errors import DetectorConfigError, UnrecognizedObjectClassError
from .materials import MATERIAL_PROPERTIES, lookup_material
from .primitives import build_shape
from .units import to_canonical_potential

logger = logging.getLogger(__name__)


def _hierarchy(obj: Mapping[str, Any], path: str) -> int:
    raw = obj.get("hierarchy", 0)
    if isinstance(raw, bool):
        raise DetectorConfigError(f"'{path}.hierarchy' must be an integer, got {raw!r}")
    try:
        rank = int(raw)
    except (TypeError, ValueError):
        raise DetectorConfigError(f"'{path}.hierarchy' must be an integer, got {raw!r}") from None
    if rank != raw or rank < 0:
        raise DetectorConfigError(f"'{path}.hierarchy' must be a non-negative integer, got {raw!r}")
    return rank


def _material(
    obj: Mapping[str, Any],
    material_table: Mapping[str, MaterialProperties],
) -> Optional[MaterialProperties]:
    name = obj.get("material")
    if name is None:
        return None
    return lookup_material(name, material_table)


def _common_fields(
    object_class: ObjectClass,
    obj: Mapping[str, Any],
    index: int,
    units: UnitTable,
    material_table: Mapping[str, MaterialProperties],
    path: str,
) -> Dict[str, Any]:
    default_id = f"{object_class.value.lower()}_{index}"
    return dict(
        object_class=object_class,
        id=str(obj.get("id", default_id)),
        hierarchy=_hierarchy(obj, path),
        shape=build_shape(require(obj, "geometry", path), units, f"{path}.geometry"),
        material=_material(obj, material_table),
        name=str(obj.get("name", "")),
    )


def construct_semiconductor(obj, index, units, material_table, path) -> DetectorObject:
    return DetectorObject(**_common_fields(
        ObjectClass.SEMICONDUCTOR, obj, index, units, material_table, path))


def construct_contact(obj, index, units, material_table, path) -> DetectorObject:
    fields = _common_fields(ObjectClass.CONTACT, obj, index, units, material_table, path)
    fields["potential"] = to_canonical_potential(require(obj, "potential", path), units)
    channel = obj.get("channel")
    fields["channel"] = int(channel) if channel is not None else None
    return DetectorObject(**fields)


def construct_passive(obj, index, units, material_table, path) -> DetectorObject:
    return DetectorObject(**_common_fields(
        ObjectClass.PASSIVE, obj, index, units, material_table, path))


OBJECT_CONSTRUCTORS = {
    ObjectClass.SEMICONDUCTOR: construct_semiconductor,
    ObjectClass.CONTACT: construct_contact,
    ObjectClass.PASSIVE: construct_passive,
}


def classify_object(obj: Mapping[str, Any], path: str = "object") -> Optional[ObjectClass]:
    """Return the class named by ``obj['class']``, or None if unrecognised.

    Raises
    ------
    MissingConfigFieldError
        If ``class`` is absent.
    """
    tag = require(obj, "class", path)
    try:
        return ObjectClass(tag)
    except ValueError:
        return None


def construct_objects(
    objects: Sequence[Mapping[str, Any]],
    semiconductors: List[DetectorObject],
    contacts: List[DetectorObject],
    passives: List[DetectorObject],
    units: UnitTable,
    material_table: Mapping[str, MaterialProperties] = MATERIAL_PROPERTIES,
    path: str = "world.objects",
) -> None:
    """Classify each raw object description and append it to its collection.

    Objects keep their input order within each collection. An object whose
    ``class`` is not 'Semiconductor', 'Contact' or 'Passive' is skipped with
    an :class:`UnrecognizedObjectClassError` warning; callers relying on
    completeness must check the resulting counts.
    """
    targets = {
        ObjectClass.SEMICONDUCTOR: semiconductors,
        ObjectClass.CONTACT: contacts,
        ObjectClass.PASSIVE: passives,
    }
    for i, obj in enumerate(objects):
        obj_path = f"{path}[{i}]"
        object_class = classify_object(obj, obj_path)
        if object_class is None:
            message = (
                f"{obj_path}: class {obj['class']!r} is not one of "
                "'Semiconductor', 'Contact' or 'Passive'; object skipped"
            )
            logger.warning(message)
            warnings.warn(message, UnrecognizedObjectClassError, stacklevel=2)
            continue
        target = targets[object_class]
        target.append(OBJECT_CONSTRUCTORS[object_class](
            obj, len(target), units, material_table, obj_path))

    logger.debug(
        "Classified objects: %d semiconductors, %d contacts, %d passives",
        len(semiconductors), len(contacts), len(passives),
    )
