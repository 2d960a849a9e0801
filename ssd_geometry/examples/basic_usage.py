"""
Basic usage example for the ssd_geometry package.

Builds the reference coaxial detector, runs a few containment queries
and draws interior sample points.
"""

import numpy as np

from ssd_geometry import (
    CylindricalPoint,
    ObjectClass,
    build_detector,
    classify,
    is_inside,
    is_inside_class,
    sample_interior_points,
    cartesian_to_cylindrical,
    print_detector_summary,
    describe_samples,
)
from ssd_geometry.testing import create_coax_config, run_quick_test


def example_containment():
    """Containment queries on the coaxial detector."""
    print("=" * 60)
    print("Containment queries")
    print("=" * 60)

    detector = build_detector(create_coax_config())
    print_detector_summary(detector)

    probes = {
        "crystal bulk": CylindricalPoint(0.020, 0.0, 0.010),
        "bore contact": CylindricalPoint(0.002, 1.0, 0.030),
        "mantle contact": CylindricalPoint(0.0345, 2.0, 0.020),
        "holder": CylindricalPoint(0.038, 0.5, 0.020),
        "outside world": CylindricalPoint(0.060, 0.0, 0.020),
    }
    for label, point in probes.items():
        owner = classify(detector, point)
        print(
            f"  {label:15s} inside={is_inside(detector, point)!s:5s} "
            f"contact={is_inside_class(detector, ObjectClass.CONTACT, point)!s:5s} "
            f"class={owner.value if owner else '-'}"
        )


def example_sampling():
    """Draw interior points with 0.5 mm clearance."""
    print("\n" + "=" * 60)
    print("Interior sampling")
    print("=" * 60)

    detector = build_detector(create_coax_config())
    rng = np.random.default_rng(42)
    points = sample_interior_points(detector, 200, min_clearance=5e-4, rng=rng)
    print(describe_samples(points))

    cylindrical = cartesian_to_cylindrical(points)
    print(f"  closest to axis: r = {cylindrical[:, 0].min()*1e3:.3f} mm")


def main():
    example_containment()
    example_sampling()
    print()
    run_quick_test()


if __name__ == "__main__":
    main()
