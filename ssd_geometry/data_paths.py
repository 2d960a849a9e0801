"""
Package data path utilities.

This module provides functions to access package-bundled data files
(the material property table) regardless of where the package is installed.

Example usage:
    from ssd_geometry.data_paths import get_materials_file

    table_path = get_materials_file()
"""

from __future__ import annotations

from pathlib import Path

from . import config


def get_package_dir() -> Path:
    """Get the root directory of the ssd_geometry package.

    Returns
    -------
    Path
        Path to the ssd_geometry package directory.
    """
    return Path(__file__).resolve().parent


def get_data_dir() -> Path:
    """Get the path to the package data directory.

    Returns
    -------
    Path
        Path to ssd_geometry/data/
    """
    return config.DATA_DIR


def get_materials_file() -> Path:
    """Get the path to the bundled material property table.

    Returns
    -------
    Path
        Path to ssd_geometry/data/materials.csv

    Raises
    ------
    FileNotFoundError
        If the table is missing from the installation.

    Example
    -------
    >>> from ssd_geometry.data_paths import get_materials_file
    >>> get_materials_file().name
    'materials.csv'
    """
    path = get_data_dir() / config.MATERIALS_FILE
    if not path.is_file():
        raise FileNotFoundError(
            f"Material table not found at {path}. "
            "Make sure the package data was installed."
        )
    return path
