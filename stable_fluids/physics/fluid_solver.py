"""
Stable Fluids stepper

Advances velocity and density by one frame using the semi-implicit scheme:
sources, diffusion, projection, advection, projection.
"""

import logging
from typing import Dict

import numpy as np

from ..config import SolverConfig
from ..numerics.advection import Advector
from ..numerics.boundary import BoundaryEnforcer, FieldType
from ..numerics.diffusion import DiffusionSolver
from ..numerics.projection import Projector
from ..numerics.sources import SourceInjector
from .grid_state import GridState

logger = logging.getLogger(__name__)


class FluidSolver:
    """
    Orchestrates one simulation frame on a GridState.

    All work happens synchronously inside update(); the grid must not be
    read or injected into while a step is running.
    """

    # Velocity magnitude treated as blow-up by check_regularity
    MAX_VELOCITY = 1e6

    def __init__(self, grid: GridState, config: SolverConfig):
        """
        Args:
            grid: Grid owned by this solver
            config: Parameters, read afresh on every update
        """
        self.grid = grid
        self.config = config
        self.frame = 0

        n = grid.size
        self.boundary = BoundaryEnforcer(n)
        self.diffusion = DiffusionSolver(n, self.boundary)
        self.advector = Advector(n, self.boundary)
        self.projector = Projector(n, self.boundary)
        self.sources = SourceInjector(n)

    def _project(self):
        grid = self.grid
        # Back slots of the velocity components are free between stages
        self.projector.project(
            grid.velocity_x, grid.velocity_y,
            grid.back('velocity_x'), grid.back('velocity_y'),
            self.config.fidelity
        )

    def _diffuse_and_swap(self, name: str, field_type: FieldType, dt: float):
        grid = self.grid
        config = self.config

        self.diffusion.diffuse(field_type, grid.fresh(name), grid.front(name), dt,
                               config.diffusion_rate, config.fidelity)
        grid.swap(name)

        # Diffusion refreshes the ghosts of its input only. Without this the
        # next stage samples zero ghosts and cells next to the walls come out different.
        self.boundary.enforce(field_type, grid.front(name))

    def update_velocity(self, dt: float):
        """
        Advance the velocity field by dt
        """
        grid = self.grid

        self.sources.drain(grid.velocity_x, grid.source_velocity_x, dt)
        self.sources.drain(grid.velocity_y, grid.source_velocity_y, dt)

        self._diffuse_and_swap('velocity_x', FieldType.X_VELOCITY, dt)
        self._diffuse_and_swap('velocity_y', FieldType.Y_VELOCITY, dt)

        self._project()

        # Both components are traced along the same projected field
        vel_x = grid.velocity_x
        vel_y = grid.velocity_y
        self.advector.advect(FieldType.X_VELOCITY, grid.fresh('velocity_x'), vel_x,
                             vel_x, vel_y, dt)
        self.advector.advect(FieldType.Y_VELOCITY, grid.fresh('velocity_y'), vel_y,
                             vel_x, vel_y, dt)
        grid.swap('velocity_x')
        grid.swap('velocity_y')

        self._project()

    def update_density(self, dt: float):
        """
        Advance the density field by dt along the current velocity
        """
        grid = self.grid

        self.sources.drain(grid.density, grid.source_density, dt)

        self._diffuse_and_swap('density', FieldType.SCALAR, dt)

        self.advector.advect(FieldType.SCALAR, grid.fresh('density'), grid.density,
                             grid.velocity_x, grid.velocity_y, dt)
        grid.swap('density')

    def update(self, dt: float):
        """
        Advance the simulation by one frame

        Velocity goes first so density is transported by this frame's flow.

        Args:
            dt: Frame duration; not clamped, must be positive
        """
        if dt <= 0:
            logger.warning("Non-positive time step dt=%s; results are not physical", dt)

        self.update_velocity(dt)
        self.update_density(dt)
        self.frame += 1

        if logger.isEnabledFor(logging.DEBUG):
            stats = self.diagnostics()
            logger.debug("Frame %d (dt=%.4f): total density %.4f, max |v| %.4f, max |div| %.6f",
                         self.frame, dt, stats['total_density'], stats['max_velocity'],
                         stats['max_divergence'])

    def diagnostics(self) -> Dict[str, float]:
        """
        Summary quantities of the current state

        Returns:
            Dictionary with total_density, max_velocity, kinetic_energy
            and max_divergence over interior cells
        """
        grid = self.grid
        n = grid.size
        h = 1.0 / n

        vel_x = grid.interior(grid.velocity_x)
        vel_y = grid.interior(grid.velocity_y)
        speed_squared = vel_x**2 + vel_y**2

        divergence = (
            (grid.velocity_x[2:n + 2, 1:n + 1] - grid.velocity_x[0:n, 1:n + 1]) +
            (grid.velocity_y[1:n + 1, 2:n + 2] - grid.velocity_y[1:n + 1, 0:n])
        ) / (2 * h)

        return {
            'total_density': float(np.sum(grid.interior(grid.density))),
            'max_velocity': float(np.sqrt(np.max(speed_squared))),
            'kinetic_energy': float(0.5 * np.sum(speed_squared) * h * h),
            'max_divergence': float(np.max(np.abs(divergence))),
        }

    def check_regularity(self) -> bool:
        """
        Check that the state is still numerically sane

        Returns True if no field contains NaN/Inf and the velocity has not
        blown up.
        """
        grid = self.grid
        for field in (grid.velocity_x, grid.velocity_y, grid.density):
            if not np.all(np.isfinite(field)):
                return False

        max_velocity = np.max(np.hypot(grid.velocity_x, grid.velocity_y))
        if max_velocity > self.MAX_VELOCITY:
            return False

        return True
