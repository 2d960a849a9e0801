"""
Rejection sampling of interior detector points.

Candidates are drawn independently uniform in ``r``, ``phi`` and ``z``.
This is not volume-uniform in Cartesian space (small radii are
over-represented); consumers relying on the existing distribution expect
exactly this behaviour.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from .. import config
from .containment import in_any, is_inside
from .data_classes import CylindricalPoint, Detector, Interval
from .errors import SamplingBudgetExceededError
from .primitives import CartesianBox, Tube, full_angle_interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplingBounds:
    """Cylindrical region candidates are drawn from (m, rad, m)."""

    r: Interval
    phi: Interval
    z: Interval


def default_bounds(detector: Detector) -> SamplingBounds:
    """Derive sampling bounds enclosing the detector's world volume."""
    world = detector.world
    if isinstance(world, Tube):
        return SamplingBounds(world.r, world.phi, world.z)
    if isinstance(world, CartesianBox):
        corners = world.corners()
        r_max = float(np.max(np.hypot(corners[:, 0], corners[:, 1])))
        return SamplingBounds(
            Interval(0.0, r_max),
            full_angle_interval(),
            Interval(float(corners[:, 2].min()), float(corners[:, 2].max())),
        )
    raise TypeError(f"Cannot derive sampling bounds from {type(world).__name__}")


def is_valid_sample(detector: Detector, point: CylindricalPoint, min_clearance: float) -> bool:
    """Acceptance test of the rejection sampler.

    The point must lie outside every contact and inside the detector, and so
    must its four neighbours shifted by ``±min_clearance`` in ``r`` and in
    ``z`` at the same ``phi``.
    """
    if in_any(detector.contacts, point) or not is_inside(detector, point):
        return False
    r, phi, z = point.r, point.phi, point.z
    d = min_clearance
    return (
        is_inside(detector, CylindricalPoint(r + d, phi, z))
        and is_inside(detector, CylindricalPoint(r - d, phi, z))
        and is_inside(detector, CylindricalPoint(r, phi, z + d))
        and is_inside(detector, CylindricalPoint(r, phi, z - d))
    )


def _draw(rng: np.random.Generator, bounds: SamplingBounds) -> CylindricalPoint:
    return CylindricalPoint(
        float(rng.uniform(bounds.r.left, bounds.r.right)),
        float(rng.uniform(bounds.phi.left, bounds.phi.right)),
        float(rng.uniform(bounds.z.left, bounds.z.right)),
    )


def sample_interior_points(
    detector: Detector,
    n: int,
    bounds: Optional[SamplingBounds] = None,
    min_clearance: float = config.DEFAULT_MIN_CLEARANCE_M,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = None,
    progress: bool = False,
) -> np.ndarray:
    """Draw ``n`` interior points with a minimum clearance from all boundaries.

    Parameters
    ----------
    detector : Detector
        Detector to sample.
    n : int
        Number of points to return.
    bounds : SamplingBounds, optional
        Region candidates are drawn from. Defaults to the world volume.
    min_clearance : float
        Required distance (m) along ``r`` and ``z`` to any boundary.
    rng : numpy.random.Generator, optional
        Random source. If omitted, one is created from ``seed``.
    seed : int, optional
        Seed used when ``rng`` is not given.
    max_attempts : int, optional
        Upper bound on candidate draws. ``None`` means unbounded: a region
        with no valid point then never terminates.
    progress : bool
        Show a tqdm progress bar over accepted points.

    Returns
    -------
    np.ndarray, shape (n, 3)
        Cartesian (x, y, z) positions in metres, in acceptance order, with
        dtype ``detector.precision_type``.

    Raises
    ------
    SamplingBudgetExceededError
        If ``max_attempts`` draws did not yield ``n`` points.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if rng is None:
        rng = np.random.default_rng(seed)
    if bounds is None:
        bounds = default_bounds(detector)

    positions = np.empty((n, 3), dtype=detector.precision_type)
    n_filled = 0
    attempts = 0
    bar = tqdm(total=n, desc="Sampling interior points", disable=not progress)
    try:
        while n_filled < n:
            if max_attempts is not None and attempts >= max_attempts:
                raise SamplingBudgetExceededError(n_filled, n, attempts)
            attempts += 1
            sample = _draw(rng, bounds)
            if is_valid_sample(detector, sample, min_clearance):
                positions[n_filled] = sample.to_cartesian().as_array()
                n_filled += 1
                bar.update(1)
    finally:
        bar.close()

    logger.debug(
        "Accepted %d points in %d attempts (%.1f%%)",
        n, attempts, 100.0 * n / attempts if attempts else 100.0,
    )
    return positions


def sample_with_independent_streams(
    detector: Detector,
    n: int,
    n_streams: int,
    seed: Optional[int] = None,
    **kwargs,
) -> np.ndarray:
    """Split sampling over ``n_streams`` independent random generators.

    Each stream owns a child generator spawned from one
    :class:`numpy.random.SeedSequence`, so streams can be handed to separate
    workers without sharing state. Streams run here one after another and
    their results are concatenated in stream order.
    """
    if n_streams < 1:
        raise ValueError("n_streams must be at least 1")
    children = np.random.SeedSequence(seed).spawn(n_streams)
    base, extra = divmod(n, n_streams)
    chunks: List[np.ndarray] = []
    for i, child in enumerate(children):
        count = base + (1 if i < extra else 0)
        chunks.append(sample_interior_points(
            detector, count, rng=np.random.default_rng(child), **kwargs))
    return np.concatenate(chunks, axis=0)


def cartesian_to_cylindrical(points: np.ndarray) -> np.ndarray:
    """Convert an (n, 3) array of x, y, z into r, phi, z with ``phi`` in [0, 2π)."""
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    r = np.hypot(points[:, 0], points[:, 1])
    phi = np.mod(np.arctan2(points[:, 1], points[:, 0]), 2.0 * math.pi)
    return np.column_stack([r, phi, points[:, 2]])
