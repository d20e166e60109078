"""
Padded 2D grid holding every field of the simulation
"""

import logging
import numbers
from typing import Dict, List

import numpy as np

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class GridState:
    """
    Owns all fields of an N x N simulation.

    Every array has shape (N+2, N+2) and is indexed field[x, y]; indices 1..N
    are interior cells and 0, N+1 form the ghost border.

    velocity_x, velocity_y and density are double-buffered: the front slot is
    the current state and the back slot is scratch space the stepper writes
    into before swapping. Accessors return the live arrays, never copies.
    """

    BUFFERED_FIELDS = ('velocity_x', 'velocity_y', 'density')
    SOURCE_FIELDS = ('source_velocity_x', 'source_velocity_y', 'source_density')

    def __init__(self, n: int):
        """
        Allocate a zeroed grid

        Args:
            n: Number of interior cells per side
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise ConfigurationError(f"grid size must be a positive integer, got {n!r}",
                                     {'size': n})

        self.n = int(n)
        shape = self.shape

        self._slots: Dict[str, List[np.ndarray]] = {
            name: [np.zeros(shape), np.zeros(shape)] for name in self.BUFFERED_FIELDS
        }
        self._sources: Dict[str, np.ndarray] = {
            name: np.zeros(shape) for name in self.SOURCE_FIELDS
        }

        logger.info("Allocated %dx%d grid (%d cells per field)", self.n, self.n, shape[0] * shape[1])

    @property
    def size(self) -> int:
        return self.n

    @property
    def shape(self):
        return (self.n + 2, self.n + 2)

    @property
    def velocity_x(self) -> np.ndarray:
        return self._slots['velocity_x'][0]

    @property
    def velocity_y(self) -> np.ndarray:
        return self._slots['velocity_y'][0]

    @property
    def density(self) -> np.ndarray:
        return self._slots['density'][0]

    @property
    def source_velocity_x(self) -> np.ndarray:
        return self._sources['source_velocity_x']

    @property
    def source_velocity_y(self) -> np.ndarray:
        return self._sources['source_velocity_y']

    @property
    def source_density(self) -> np.ndarray:
        return self._sources['source_density']

    def front(self, name: str) -> np.ndarray:
        """Current state of a double-buffered field"""
        return self._slots[name][0]

    def back(self, name: str) -> np.ndarray:
        """Scratch slot of a double-buffered field, contents unspecified"""
        return self._slots[name][1]

    def fresh(self, name: str) -> np.ndarray:
        """
        Back slot cleared to zero, ready to receive a new version of the field

        Equivalent to allocating a new array without the allocation.
        """
        buffer = self._slots[name][1]
        buffer.fill(0.0)
        return buffer

    def swap(self, name: str):
        """Exchange front and back slots so the freshly written buffer becomes current"""
        slots = self._slots[name]
        slots[0], slots[1] = slots[1], slots[0]

    def interior(self, field: np.ndarray) -> np.ndarray:
        """View of the interior cells of a field"""
        return field[1:self.n + 1, 1:self.n + 1]

    def reset(self):
        """Zero every buffer in place"""
        for slots in self._slots.values():
            for buffer in slots:
                buffer.fill(0.0)
        for buffer in self._sources.values():
            buffer.fill(0.0)

    def __repr__(self):
        return (f"GridState(n={self.n}, total_density={float(np.sum(self.interior(self.density))):.4f}, "
                f"max_velocity={float(np.max(np.hypot(self.velocity_x, self.velocity_y))):.4f})")
