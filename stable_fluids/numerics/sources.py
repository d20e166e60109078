"""
External stimulus: brush injection into source buffers and per-frame drain
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


class SourceInjector:
    """
    Applies user stimulus to the pending-source buffers of a grid.

    The brush is a diamond whose weight falls off as 1 / (1 + |i| + |j|)
    with Manhattan distance from the centre cell.
    """

    BRUSH_FRACTION = 0.10

    def __init__(self, n: int):
        """
        Args:
            n: Number of interior cells per side
        """
        self.n = n
        # Grids narrower than 20 cells still get the centre cell
        self.brush_size = max(1, int(math.floor(n * self.BRUSH_FRACTION * 0.5)))
        self.offsets = [
            (i, j, 1.0 / (1 + abs(i) + abs(j)))
            for i in range(-self.brush_size + 1, self.brush_size)
            for j in range(-self.brush_size + 1, self.brush_size)
            if abs(i) + abs(j) < self.brush_size
        ]

    def inject(self, grid, cell_x: int, cell_y: int,
               force_x: float, force_y: float, density_amount: float):
        """
        Accumulate force and density around (cell_x, cell_y)

        Target cells outside [0, N] on either axis are skipped.

        Args:
            grid: GridState receiving the stimulus
            cell_x, cell_y: Brush centre
            force_x, force_y: Velocity source at the centre
            density_amount: Density source at the centre
        """
        n = self.n
        source_density = grid.source_density
        source_velocity_x = grid.source_velocity_x
        source_velocity_y = grid.source_velocity_y

        written = 0
        for i, j, weight in self.offsets:
            x = cell_x + i
            y = cell_y + j
            if x < 0 or x > n or y < 0 or y > n:
                continue

            source_density[x, y] += density_amount * weight
            source_velocity_x[x, y] += force_x * weight
            source_velocity_y[x, y] += force_y * weight
            written += 1

        logger.debug("Injected force (%.3f, %.3f) density %.3f at (%d, %d) over %d cells",
                     force_x, force_y, density_amount, cell_x, cell_y, written)

    @staticmethod
    def drain(field: np.ndarray, source: np.ndarray, dt: float):
        """
        Move dt of the pending source into the field

        The source keeps (1 - dt) of its value, so a single stimulus leaks
        into the field over several frames when dt < 1.
        """
        field += dt * source
        source -= dt * source
