"""
Pressure projection onto the divergence-free subspace

Helmholtz decomposition: solve the Poisson equation L p = div(u) with
Gauss-Seidel relaxation and subtract grad(p) from the velocity.
"""

import numpy as np

from .boundary import BoundaryEnforcer, FieldType


class Projector:
    """
    Removes the divergent component of a 2D velocity field
    """

    def __init__(self, n: int, boundary: BoundaryEnforcer):
        """
        Args:
            n: Number of interior cells per side
            boundary: Boundary enforcer for the same grid
        """
        self.n = n
        self.h = 1.0 / n
        self.boundary = boundary

    def divergence(self, vel_x: np.ndarray, vel_y: np.ndarray,
                   out: np.ndarray) -> np.ndarray:
        """
        Cell-centred divergence scaled by -h/2, written to the interior of out
        """
        n = self.n
        out[1:n + 1, 1:n + 1] = -0.5 * self.h * (
            vel_x[2:n + 2, 1:n + 1] - vel_x[0:n, 1:n + 1] +
            vel_y[1:n + 1, 2:n + 2] - vel_y[1:n + 1, 0:n]
        )
        return out

    def solve_pressure(self, pressure: np.ndarray, divergence: np.ndarray, fidelity: int):
        """Gauss-Seidel sweeps for the discrete Poisson equation"""
        n = self.n

        for _ in range(fidelity):
            for i in range(1, n + 1):
                for j in range(1, n + 1):
                    pressure[i, j] = (divergence[i, j] +
                                      pressure[i - 1, j] + pressure[i + 1, j] +
                                      pressure[i, j - 1] + pressure[i, j + 1]) / 4.0
            self.boundary.enforce(FieldType.SCALAR, pressure)

        return pressure

    def project(self, vel_x: np.ndarray, vel_y: np.ndarray,
                pressure: np.ndarray, divergence: np.ndarray, fidelity: int):
        """
        Make (vel_x, vel_y) approximately divergence-free in place

        Args:
            vel_x: X velocity, modified in place
            vel_y: Y velocity, modified in place
            pressure: Scratch array for the pressure solution
            divergence: Scratch array for the divergence
            fidelity: Number of relaxation sweeps
        """
        n = self.n
        h = self.h

        self.divergence(vel_x, vel_y, divergence)
        pressure.fill(0.0)
        self.boundary.enforce(FieldType.SCALAR, divergence)
        self.boundary.enforce(FieldType.SCALAR, pressure)

        self.solve_pressure(pressure, divergence, fidelity)

        # Subtract the pressure gradient
        vel_x[1:n + 1, 1:n + 1] -= 0.5 * (pressure[2:n + 2, 1:n + 1] - pressure[0:n, 1:n + 1]) / h
        vel_y[1:n + 1, 1:n + 1] -= 0.5 * (pressure[1:n + 1, 2:n + 2] - pressure[1:n + 1, 0:n]) / h

        self.boundary.enforce(FieldType.X_VELOCITY, vel_x)
        self.boundary.enforce(FieldType.Y_VELOCITY, vel_y)

        return vel_x, vel_y
