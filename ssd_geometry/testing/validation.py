"""
Validation utilities for checking detector models before use.

These checks catch configuration mistakes that construction itself accepts,
e.g. objects placed partly outside the world volume.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from ..core.containment import in_any
from ..core.data_classes import CartesianPoint, Detector, ObjectClass
from ..core.detector import build_detector
from ..core.errors import SamplingBudgetExceededError
from ..core.sampling import default_bounds, sample_interior_points
from .simple_geometry import create_simple_detector_config

# Probe box size relative to the world bounds
_PROBE_MARGIN = 1.5


def _probe_points(detector: Detector, n_probes: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform Cartesian probes over a box half as large again as the world."""
    bounds = default_bounds(detector)
    r = bounds.r.right * _PROBE_MARGIN
    z_pad = bounds.z.width * (_PROBE_MARGIN - 1.0) / 2.0
    return np.column_stack([
        rng.uniform(-r, r, n_probes),
        rng.uniform(-r, r, n_probes),
        rng.uniform(bounds.z.left - z_pad, bounds.z.right + z_pad, n_probes),
    ])


def validate_detector(
    detector: Detector,
    n_probes: int = 2000,
    seed: Optional[int] = 0,
) -> Tuple[bool, List[str]]:
    """Validate a detector model.

    Checks that there is at least one semiconductor and one contact, and
    that random probe points inside any object are also inside the world.

    Parameters
    ----------
    detector : Detector
        Detector to check.
    n_probes : int
        Number of random probe points.
    seed : int, optional
        Seed of the probe generator.

    Returns
    -------
    valid : bool
        True if every check passed.
    messages : list of str
        One line per check.
    """
    messages = []
    valid = True

    for object_class in (ObjectClass.SEMICONDUCTOR, ObjectClass.CONTACT):
        count = len(detector.objects(object_class))
        if count == 0:
            valid = False
            messages.append(f"No {object_class.value.lower()} objects defined")
        else:
            messages.append(f"{count} {object_class.value.lower()} object(s)")

    rng = np.random.default_rng(seed)
    outside_world = 0
    all_objects = detector.semiconductors + detector.contacts + detector.passives
    for x, y, z in _probe_points(detector, n_probes, rng):
        point = CartesianPoint(x, y, z)
        if in_any(all_objects, point) and not detector.world.contains(point):
            outside_world += 1
    if outside_world:
        valid = False
        messages.append(f"{outside_world} of {n_probes} probes inside an object but outside the world")
    else:
        messages.append("All objects lie within the world volume")

    return valid, messages


def run_quick_test(n_samples: int = 20, verbose: bool = True) -> bool:
    """Build each reference detector, validate it and draw a few samples.

    Returns
    -------
    bool
        True if all reference detectors pass.
    """
    all_passed = True
    for geometry_type in ("coax", "planar"):
        detector = build_detector(create_simple_detector_config(geometry_type))
        valid, messages = validate_detector(detector)
        try:
            points = sample_interior_points(
                detector, n_samples, min_clearance=1e-4, seed=0, max_attempts=100_000)
            sampled = len(points) == n_samples
        except SamplingBudgetExceededError as e:
            messages.append(str(e))
            sampled = False

        passed = valid and sampled
        all_passed &= passed
        if verbose:
            status = "✓" if passed else "✗"
            print(f"{status} {geometry_type}: {detector.name}")
            for message in messages:
                print(f"    {message}")

    return all_passed
