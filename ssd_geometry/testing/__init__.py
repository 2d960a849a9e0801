"""
Testing subpackage for detector geometry.

This subpackage provides tools for testing and debugging:
- Reference configuration trees for analytic detectors
- Validation functions

Example usage:
    from ssd_geometry import build_detector
    from ssd_geometry.testing import create_coax_config, validate_detector

    detector = build_detector(create_coax_config())
    ok, messages = validate_detector(detector)
"""

from .simple_geometry import (
    create_coax_config,
    create_planar_config,
    create_simple_detector_config,
)

from .validation import (
    validate_detector,
    run_quick_test,
)

__all__ = [
    # Reference configurations
    "create_coax_config",
    "create_planar_config",
    "create_simple_detector_config",
    # Validation
    "validate_detector",
    "run_quick_test",
]
