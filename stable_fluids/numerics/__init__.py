"""Numerical building blocks of the Stable Fluids step"""

from .boundary import BoundaryEnforcer, FieldType
from .diffusion import DiffusionSolver
from .advection import Advector
from .projection import Projector
from .sources import SourceInjector

__all__ = [
    'BoundaryEnforcer',
    'FieldType',
    'DiffusionSolver',
    'Advector',
    'Projector',
    'SourceInjector'
]
