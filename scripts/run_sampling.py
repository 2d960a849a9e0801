#!/usr/bin/env python
"""
Detector Sampling - Main Runner Script

This script builds a reference detector and samples interior points.

Usage:
    python run_sampling.py
    python run_sampling.py -n 1000
    python run_sampling.py --geometry planar --clearance 2e-4 --seed 1

Output files (Data/) are saved in the project directory, or in the
specified output directory.
"""

from pathlib import Path
import sys

# Make the package importable without installation
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from ssd_geometry.runner import run_sampling, main as runner_main


def main():
    """Script entry point."""
    if len(sys.argv) > 1:
        runner_main()
    else:
        run_sampling(output_dir=project_dir)


if __name__ == "__main__":
    main()
