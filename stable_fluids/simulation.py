"""
Public handle on a running smoke simulation

This is the read/write surface a host (renderer, GUI, frame loop) uses:
configure, inject, step, read.
"""

import logging
from typing import Any, Mapping, Optional

import numpy as np

from .config import SolverConfig
from .errors import NumericalDivergenceError
from .physics.fluid_solver import FluidSolver
from .physics.grid_state import GridState
from .utils.initial_conditions import constant_force_patch, random_density_patch

logger = logging.getLogger(__name__)


class FluidSimulation:
    """
    A single simulation instance owned by its caller.

    Usage:
        sim = create(64, seed_density=True)
        sim.configure(diffusion_rate=2.0, fidelity=30)
        sim.inject_force_and_density(32, 32, 0.0, 5.0, 10.0)
        sim.update(1 / 60)
        density = sim.density()
    """

    def __init__(self, size: int, config: Optional[SolverConfig] = None):
        """
        Args:
            size: Number of interior cells per side
            config: Solver parameters (defaults if None)
        """
        self.config = config if config is not None else SolverConfig()
        self.grid = GridState(size)
        self.solver = FluidSolver(self.grid, self.config)

    # ---- configuration -------------------------------------------------

    def configure(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> SolverConfig:
        """
        Update solver parameters; effective on the next update()

        Args:
            options: Mapping of diffusion_rate, fidelity and/or gravity
            **kwargs: Same names, merged over options

        Returns:
            The new configuration
        """
        changes = dict(options or {})
        changes.update(kwargs)

        self.config = self.config.updated(**changes)
        self.solver.config = self.config
        return self.config

    def set_diffusion_rate(self, value: float):
        self.configure(diffusion_rate=value)

    def set_fidelity(self, iterations: int):
        self.configure(fidelity=iterations)

    def set_gravity(self, gx: float, gy: float):
        """Store a gravity vector. It is not applied by the stepper."""
        self.configure(gravity=(gx, gy))

    @property
    def gravity(self):
        return self.config.gravity

    def resize(self, size: int):
        """
        Discard the grid and start over at a new resolution

        Configuration is kept; all fields and pending sources are lost.
        """
        old_size = self.grid.size
        self.grid = GridState(size)
        self.solver = FluidSolver(self.grid, self.config)
        logger.info("Grid recreated: %d -> %d", old_size, self.grid.size)

    def reset(self):
        """Zero all fields and pending sources, keep the resolution"""
        self.grid.reset()
        self.solver.frame = 0

    # ---- stimulus and stepping -----------------------------------------

    def inject_force_and_density(self, cell_x: int, cell_y: int,
                                 force_x: float, force_y: float, density_amount: float):
        """
        Queue force and density around a cell; drained over the next frames
        """
        self.solver.sources.inject(self.grid, int(cell_x), int(cell_y),
                                   force_x, force_y, density_amount)

    def update(self, dt: float, strict: bool = False):
        """
        Advance one frame

        Args:
            dt: Frame duration
            strict: Raise NumericalDivergenceError if the state is no longer finite
        """
        self.solver.update(dt)

        if strict and not self.solver.check_regularity():
            raise NumericalDivergenceError(
                f"Simulation diverged at frame {self.solver.frame}",
                {'frame': self.solver.frame, 'dt': dt}
            )

    @property
    def frame(self) -> int:
        return self.solver.frame

    # ---- read accessors --------------------------------------------------

    def grid_size(self) -> int:
        return self.grid.size

    def velocity_x(self) -> np.ndarray:
        return self.grid.velocity_x

    def velocity_y(self) -> np.ndarray:
        return self.grid.velocity_y

    def density(self) -> np.ndarray:
        return self.grid.density

    def total_density(self) -> float:
        return self.solver.diagnostics()['total_density']

    def kinetic_energy(self) -> float:
        return self.solver.diagnostics()['kinetic_energy']

    def max_divergence(self) -> float:
        return self.solver.diagnostics()['max_divergence']


def create(size: int, seed_density: bool = False, seed_force: bool = False,
           force_power: float = 0.0, config: Optional[SolverConfig] = None,
           rng: Optional[np.random.Generator] = None) -> FluidSimulation:
    """
    Build a simulation, optionally seeded

    Args:
        size: Number of interior cells per side
        seed_density: Fill 0.2N < x, y < 0.8N with random density in [0, 0.5]
        seed_force: Set velocity_x = force_power for 0.3N < x, y < 0.4N
        force_power: Velocity of the seeded force patch
        config: Solver parameters (defaults if None)
        rng: Random generator for the density seed

    Returns:
        New simulation
    """
    simulation = FluidSimulation(size, config)

    if seed_density:
        random_density_patch(simulation.grid, rng)
    if seed_force:
        constant_force_patch(simulation.grid, force_power)

    return simulation
