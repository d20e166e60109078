"""
Initial conditions for Stable Fluids simulations
"""

from typing import Optional

import numpy as np

from ..physics.grid_state import GridState


def _centered_patch(n: int, low: float, high: float) -> np.ndarray:
    """
    Boolean mask of cells whose x and y both lie strictly between low*N and high*N

    Args:
        n: Number of interior cells per side
        low: Lower bound as a fraction of N
        high: Upper bound as a fraction of N

    Returns:
        (N+2, N+2) mask; the ghost border is never selected
    """
    coords = np.arange(n + 2)
    inside = (coords > low * n) & (coords < high * n)
    inside[0] = inside[n + 1] = False
    return inside[:, np.newaxis] & inside[np.newaxis, :]


def random_density_patch(grid: GridState,
                         rng: Optional[np.random.Generator] = None,
                         max_density: float = 0.5) -> GridState:
    """
    Seed a centred square of random density

    Cells with 0.2N < x, y < 0.8N receive density drawn uniformly
    from [0, max_density].

    Args:
        grid: Grid to seed in place
        rng: Random generator (a fresh default generator if None)
        max_density: Upper bound of the uniform distribution

    Returns:
        The seeded grid
    """
    if rng is None:
        rng = np.random.default_rng()

    mask = _centered_patch(grid.size, 0.2, 0.8)
    grid.density[mask] = rng.uniform(0.0, max_density, size=int(np.count_nonzero(mask)))

    return grid


def constant_force_patch(grid: GridState, force_power: float) -> GridState:
    """
    Seed a small square of constant horizontal velocity

    Cells with 0.3N < x, y < 0.4N receive velocity_x = force_power.

    Args:
        grid: Grid to seed in place
        force_power: X velocity assigned inside the patch

    Returns:
        The seeded grid
    """
    mask = _centered_patch(grid.size, 0.3, 0.4)
    grid.velocity_x[mask] = force_power

    return grid
