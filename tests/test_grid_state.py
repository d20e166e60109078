"""Grid allocation and double-buffered slots"""

import numpy as np
import pytest

from stable_fluids.errors import ConfigurationError
from stable_fluids.physics.grid_state import GridState


class TestGridState:

    def test_allocation(self, grid, n):
        assert grid.size == n
        for field in (grid.velocity_x, grid.velocity_y, grid.density,
                      grid.source_velocity_x, grid.source_velocity_y, grid.source_density):
            assert field.shape == (n + 2, n + 2)
            assert not np.any(field)

    @pytest.mark.parametrize('size', [0, -3, 2.5, True, '8', None])
    def test_invalid_size_rejected(self, size):
        with pytest.raises(ConfigurationError):
            GridState(size)

    def test_numpy_integer_size(self):
        assert GridState(np.int64(3)).size == 3

    def test_accessors_return_live_arrays(self, grid):
        grid.density[2, 2] = 1.5
        assert grid.density[2, 2] == 1.5
        assert grid.density is grid.front('density')

    def test_swap(self, grid):
        front = grid.front('velocity_x')
        back = grid.back('velocity_x')

        grid.swap('velocity_x')

        assert grid.velocity_x is back
        assert grid.back('velocity_x') is front

    def test_fresh_zeroes_back_slot_only(self, grid):
        grid.back('density')[:] = 4.0
        grid.density[:] = 2.0

        fresh = grid.fresh('density')

        assert fresh is grid.back('density')
        assert not np.any(fresh)
        assert np.all(grid.density == 2.0)

    def test_reset(self, grid):
        grid.velocity_y[1, 1] = 3.0
        grid.back('velocity_y')[1, 1] = 3.0
        grid.source_density[1, 1] = 3.0

        grid.reset()

        assert not np.any(grid.velocity_y)
        assert not np.any(grid.back('velocity_y'))
        assert not np.any(grid.source_density)

    def test_interior_view(self, grid, n):
        grid.interior(grid.density)[:] = 1.0

        assert np.sum(grid.density) == n * n
        assert grid.density[0, 0] == 0.0
