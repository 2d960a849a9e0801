"""
Export utilities for sampled detector points.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .sampling import cartesian_to_cylindrical

logger = logging.getLogger(__name__)


def samples_to_dataframe(points: np.ndarray) -> pd.DataFrame:
    """Tabulate sampled points with both Cartesian and cylindrical columns.

    Parameters
    ----------
    points : np.ndarray, shape (n, 3)
        Cartesian positions (m), as returned by the sampler.

    Returns
    -------
    pd.DataFrame
        Columns ``x_m, y_m, z_m, r_m, phi_rad``.
    """
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    cylindrical = cartesian_to_cylindrical(points)
    return pd.DataFrame({
        "x_m": points[:, 0],
        "y_m": points[:, 1],
        "z_m": points[:, 2],
        "r_m": cylindrical[:, 0],
        "phi_rad": cylindrical[:, 1],
    })


def export_samples_to_csv(points: np.ndarray, filename: str = "interior_samples.csv") -> None:
    """Write sampled points to a CSV file.

    Parameters
    ----------
    points : np.ndarray, shape (n, 3)
        Cartesian positions (m).
    filename : str
        Output CSV filename; parent directories are created.
    """
    if len(points) == 0:
        logger.warning("No sample points to export.")
        return

    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    samples_to_dataframe(points).to_csv(output_path, index_label="sample_id")
    logger.info("Exported %d sample points to %s", len(points), output_path)
