"""
Shared fixtures: reference detectors and seeded random generators.
"""

import numpy as np
import pytest

from ssd_geometry import build_detector
from ssd_geometry.testing import create_coax_config, create_planar_config


@pytest.fixture
def coax_config():
    return create_coax_config()


@pytest.fixture
def planar_config():
    return create_planar_config()


@pytest.fixture
def coax_detector(coax_config):
    return build_detector(coax_config)


@pytest.fixture
def planar_detector(planar_config):
    return build_detector(planar_config)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)
