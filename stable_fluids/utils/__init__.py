"""Utility functions for Stable Fluids"""

from .initial_conditions import (
    random_density_patch,
    constant_force_patch
)

__all__ = [
    'random_density_patch',
    'constant_force_patch'
]
