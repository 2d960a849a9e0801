"""
Material property table loading and lookup.
"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Dict, Mapping

import pandas as pd

from ..data_paths import get_materials_file
from .data_classes import MaterialProperties
from .errors import UnknownMaterialError

logger = logging.getLogger(__name__)

_REQUIRED_COLUMNS = (
    "key",
    "aliases",
    "name",
    "relative_permittivity",
    "density_g_cm3",
    "ionisation_energy_ev",
    "fano_factor",
)


def load_material_table(file_path: str) -> Dict[str, MaterialProperties]:
    """Load a material property table from a CSV file.

    Parameters
    ----------
    file_path : str
        CSV with the columns ``key, aliases, name, relative_permittivity,
        density_g_cm3, ionisation_energy_ev, fano_factor``. ``aliases`` is a
        ``|``-separated list of alternative names (may be empty).

    Returns
    -------
    dict
        Name -> MaterialProperties; the key and every alias map to the same
        (immutable) record. Densities are converted to kg/m³.
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"Material table '{file_path}' does not exist.")

    frame = pd.read_csv(file_path)
    missing = [c for c in _REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Material table is missing columns: {', '.join(missing)}")
    frame["aliases"] = frame["aliases"].fillna("").astype(str)

    table: Dict[str, MaterialProperties] = {}
    for row in frame.itertuples(index=False):
        props = MaterialProperties(
            key=str(row.key),
            name=str(row.name),
            relative_permittivity=float(row.relative_permittivity),
            density=float(row.density_g_cm3) * 1.0e3,
            ionisation_energy=float(row.ionisation_energy_ev),
            fano_factor=float(row.fano_factor),
        )
        table[props.key] = props
        for alias in filter(None, (a.strip() for a in row.aliases.split("|"))):
            table[alias] = props

    logger.debug("Loaded %d material names from %s", len(table), file_path)
    return table


# Read-only, loaded once per process
MATERIAL_PROPERTIES: Mapping[str, MaterialProperties] = MappingProxyType(
    load_material_table(str(get_materials_file()))
)


def lookup_material(
    name: str,
    table: Mapping[str, MaterialProperties] = MATERIAL_PROPERTIES,
) -> MaterialProperties:
    """Return the properties of material ``name``.

    Raises
    ------
    UnknownMaterialError
        If ``name`` is not in ``table``.
    """
    try:
        return table[name]
    except KeyError:
        raise UnknownMaterialError(name) from None
