"""
Tests for the sampling runner and command-line entry point
"""

import logging

import pandas as pd
import pytest

from ssd_geometry import config
from ssd_geometry.runner import main, run_sampling
from ssd_geometry.testing import create_planar_config


def test_run_sampling_saves_csv(tmp_path, capsys):
    """Runner writes the sample CSV"""
    points = run_sampling(n_samples=10, seed=1, output_dir=tmp_path, progress=False)
    assert points.shape == (10, 3)
    csv_path = tmp_path / config.DATA_OUTPUT_DIR / config.SAMPLES_CSV
    assert len(pd.read_csv(csv_path)) == 10
    assert "Sample points: 10" in capsys.readouterr().out


def test_run_sampling_without_saving(tmp_path):
    """Runner without saving writes nothing"""
    points = run_sampling(
        create_planar_config(), n_samples=5, seed=2,
        output_dir=tmp_path, save_results=False, progress=False,
    )
    assert points.shape == (5, 3)
    assert not (tmp_path / config.DATA_OUTPUT_DIR).exists()


@pytest.fixture
def restore_logging():
    yield
    logging.getLogger("ssd_geometry").handlers.clear()


def test_main(tmp_path, restore_logging):
    """Command-line entry point"""
    main(["-n", "4", "--geometry", "planar", "--seed", "3", "--output-dir", str(tmp_path)])
    assert len(pd.read_csv(tmp_path / config.DATA_OUTPUT_DIR / config.SAMPLES_CSV)) == 4
