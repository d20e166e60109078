"""
Semi-Lagrangian advection

Each interior cell is traced backward along the velocity field and the
transported field is resampled at the origin with bilinear interpolation.
No CFL limit applies; the price is numerical diffusion from resampling.
"""

import numpy as np
from scipy.ndimage import map_coordinates

from .boundary import BoundaryEnforcer


class Advector:
    """
    Transports a field along a velocity field
    """

    def __init__(self, n: int, boundary: BoundaryEnforcer):
        """
        Args:
            n: Number of interior cells per side
            boundary: Boundary enforcer for the same grid
        """
        self.n = n
        self.boundary = boundary

        # Lattice coordinates of interior cells, indexed [x, y]
        cells = np.arange(1, n + 1, dtype=float)
        self.i_grid, self.j_grid = np.meshgrid(cells, cells, indexing='ij')

    def trace_back(self, vel_x: np.ndarray, vel_y: np.ndarray, dt: float):
        """
        Backward-traced origins of all interior cells

        Returns:
            (x, y) arrays of shape (N, N), clamped to [0.5, N + 0.5]
        """
        n = self.n
        dt0 = dt * n

        x = self.i_grid - dt0 * vel_x[1:n + 1, 1:n + 1]
        y = self.j_grid - dt0 * vel_y[1:n + 1, 1:n + 1]

        np.clip(x, 0.5, n + 0.5, out=x)
        np.clip(y, 0.5, n + 0.5, out=y)

        return x, y

    def advect(self, field_type: int, dst: np.ndarray, src: np.ndarray,
               vel_x: np.ndarray, vel_y: np.ndarray, dt: float) -> np.ndarray:
        """
        Advect src along (vel_x, vel_y) into dst

        Args:
            field_type: Boundary convention of the transported field
            dst: Destination array (must not alias src or the velocity)
            src: Field being transported
            vel_x: X component of the transporting velocity
            vel_y: Y component of the transporting velocity
            dt: Time step

        Returns:
            dst
        """
        n = self.n
        x, y = self.trace_back(vel_x, vel_y, dt)

        # Linear spline over the four surrounding lattice cells; clamped
        # coordinates never leave the padded array
        dst[1:n + 1, 1:n + 1] = map_coordinates(src, [x, y], order=1, mode='nearest')

        self.boundary.enforce(field_type, dst)

        return dst
