"""
Detector Sampling Runner Module

This module provides the sampling runner function that can be called
from scripts or imported directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from . import config
from .core.detector import build_detector
from .core.io_utils import export_samples_to_csv
from .core.sampling import sample_interior_points
from .logging_config import setup_logging
from .reporting import describe_samples, print_detector_summary
from .testing.simple_geometry import create_simple_detector_config

logger = logging.getLogger(__name__)


def run_sampling(
    detector_config: Optional[Dict[str, Any]] = None,
    n_samples: Optional[int] = None,
    min_clearance: float = config.DEFAULT_MIN_CLEARANCE_M,
    seed: Optional[int] = config.DEFAULT_SEED,
    max_attempts: Optional[int] = None,
    output_dir: Optional[Path] = None,
    save_results: bool = True,
    progress: bool = True,
) -> np.ndarray:
    """Build a detector, print its summary and sample interior points.

    Parameters
    ----------
    detector_config : dict, optional
        Parsed configuration tree. If None, the reference coaxial detector
        is used.
    n_samples : int, optional
        Number of points. If None, uses config default.
    min_clearance : float
        Minimum clearance from boundaries (m).
    seed : int, optional
        Random seed.
    max_attempts : int, optional
        Attempt budget of the rejection sampler (None = unbounded).
    output_dir : Path, optional
        Directory for output files (Data/). If None, uses current working directory.
    save_results : bool
        Whether to save the points to CSV.
    progress : bool
        Whether to show a progress bar.

    Returns
    -------
    np.ndarray, shape (n, 3)
        Sampled Cartesian points (m).
    """
    if detector_config is None:
        detector_config = create_simple_detector_config("coax")
    if n_samples is None:
        n_samples = config.DEFAULT_N_SAMPLES
    output_dir = Path.cwd() if output_dir is None else Path(output_dir)

    detector = build_detector(detector_config)
    print_detector_summary(detector)

    logger.info("Sampling %d interior points with %.3g m clearance", n_samples, min_clearance)
    points = sample_interior_points(
        detector,
        n_samples,
        min_clearance=min_clearance,
        seed=seed,
        max_attempts=max_attempts,
        progress=progress,
    )
    print(describe_samples(points))

    if save_results:
        csv_filename = output_dir / config.DATA_OUTPUT_DIR / config.SAMPLES_CSV
        export_samples_to_csv(points, filename=str(csv_filename))

    return points


def main(argv=None):
    """Command-line entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Sample interior points of a reference detector")
    parser.add_argument("-n", "--samples", type=int, default=None,
                        help="Number of points to sample")
    parser.add_argument("--geometry", choices=["coax", "planar"], default="coax",
                        help="Reference detector to build")
    parser.add_argument("--clearance", type=float, default=config.DEFAULT_MIN_CLEARANCE_M,
                        help="Minimum clearance from boundaries (m)")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED,
                        help="Random seed")
    parser.add_argument("--max-attempts", type=int, default=None,
                        help="Give up after this many candidate draws")
    parser.add_argument("--no-save", action="store_true",
                        help="Don't save points to CSV")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Output directory for results")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    run_sampling(
        detector_config=create_simple_detector_config(args.geometry),
        n_samples=args.samples,
        min_clearance=args.clearance,
        seed=args.seed,
        max_attempts=args.max_attempts,
        output_dir=args.output_dir,
        save_results=not args.no_save,
    )


if __name__ == "__main__":
    main()
