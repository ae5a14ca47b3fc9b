"""Pytest configuration and shared fixtures."""

import logging
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

# Add src/ to the path so the suite also runs from a plain checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


class ScriptedRng:
    """Random source replaying fixed draws and counting how many were consumed."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible statistics."""
    return np.random.default_rng(1234)


@pytest.fixture
def angle_grid():
    """(θ, φ) pairs strictly inside the sphere, away from the φ = 0 seam."""
    thetas = np.linspace(0.05, np.pi - 0.05, 9)
    phis = np.linspace(0.1, 2 * np.pi - 0.1, 11)
    return [(float(t), float(p)) for t in thetas for p in phis]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so each test starts from a clean logger."""
    yield
    logger = logging.getLogger("bloch_qubit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger._bloch_configured = False
    logger.setLevel(logging.NOTSET)
