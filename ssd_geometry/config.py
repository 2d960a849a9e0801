"""
Configuration settings for detector geometry construction and sampling.

This module collects the parameters that control unit handling, geometric
rounding and interior sampling. Users can modify these values to customise
behaviour without changing the core code.

Data files (the material property table) are bundled with the package.
Use `ssd_geometry.data_paths` to access them:

    from ssd_geometry.data_paths import get_materials_file
"""

from __future__ import annotations

import math
from pathlib import Path

# =============================================================================
# Package Data Paths
# =============================================================================

# Package root directory
_PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled material property table
DATA_DIR = _PACKAGE_DIR / "data"
MATERIALS_FILE = "materials.csv"

# Output directories (user working directory)
DATA_OUTPUT_DIR = "Data"

# Output file names
SAMPLES_CSV = "interior_samples.csv"

# =============================================================================
# Units
# =============================================================================

# Units assumed for quantity kinds the configuration does not declare
DEFAULT_INPUT_UNITS = {
    "length": "mm",
    "angle": "rad",
    "potential": "V",
    "temperature": "K",
}

QUANTITY_KINDS = ("length", "angle", "potential", "temperature")

# Significant digits kept after unit conversion
GEOM_SIGDIGITS = 12

# A cylindrical world always spans one full revolution (rad)
FULL_REVOLUTION = 2.0 * math.pi

# =============================================================================
# Sampling Parameters
# =============================================================================

# Number of interior points drawn by the runner
DEFAULT_N_SAMPLES = 100

# Minimum distance kept from every boundary (m)
DEFAULT_MIN_CLEARANCE_M = 1.0e-4

# Seed for the runner's random generator (None = fresh entropy)
DEFAULT_SEED = None

# =============================================================================
# Reporting
# =============================================================================

# Collections with at most this many entries are listed object by object
VERBOSE_LISTING_LIMIT = 5
