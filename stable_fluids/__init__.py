"""
Stable Fluids smoke solver

Semi-implicit Eulerian solver for 2D smoke: source injection, implicit
diffusion, semi-Lagrangian advection and pressure projection on a padded grid.
"""

from .config import SolverConfig
from .errors import ConfigurationError, NumericalDivergenceError, StableFluidsError
from .simulation import FluidSimulation, create

__version__ = "0.1.0"

__all__ = [
    'SolverConfig',
    'ConfigurationError',
    'NumericalDivergenceError',
    'StableFluidsError',
    'FluidSimulation',
    'create'
]
