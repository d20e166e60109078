"""Shared fixtures for the Stable Fluids test suite"""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from stable_fluids.config import SolverConfig
from stable_fluids.numerics.boundary import BoundaryEnforcer
from stable_fluids.physics.grid_state import GridState


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def n():
    return 6


@pytest.fixture
def boundary(n):
    return BoundaryEnforcer(n)


@pytest.fixture
def grid(n):
    return GridState(n)


@pytest.fixture
def config():
    return SolverConfig(diffusion_rate=5.0, fidelity=20)
