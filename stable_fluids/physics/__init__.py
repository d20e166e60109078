"""Grid state and the frame stepper"""

from .grid_state import GridState
from .fluid_solver import FluidSolver

__all__ = [
    'GridState',
    'FluidSolver'
]
