"""
Solid-State Detector Geometry Package
=====================================

This package models the geometry of layered solid-state detectors
(semiconductor bodies, electrical contacts and passive structures) from a
unit-tagged configuration tree and answers spatial queries against it.

Modules:
--------
- config: Configurable defaults (units, rounding, sampling)
- core.units: Unit resolution and canonical conversion
- core.primitives: Volume primitives (tube, box, union, difference)
- core.detector: Detector construction
- core.hierarchy: Hierarchy ordering of overlapping objects
- core.containment: Point-in-detector queries
- core.sampling: Interior point sampling with boundary clearance
- reporting: Text summaries
- runner: Command-line sampling driver
"""

from . import config
from .core import *
from .core import __all__ as _core_all
from .reporting import format_detector_summary, print_detector_summary, describe_samples
from .logging_config import setup_logging

__version__ = "1.0.0"
__all__ = [
    "config",
    *_core_all,
    # Reporting
    "format_detector_summary",
    "print_detector_summary",
    "describe_samples",
    # Logging
    "setup_logging",
]
