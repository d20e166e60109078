"""Brush injection and the geometric drain of source buffers"""

import numpy as np
import pytest

from stable_fluids.numerics.sources import SourceInjector
from stable_fluids.physics.grid_state import GridState


class TestBrush:

    @pytest.mark.parametrize('n, expected', [(4, 1), (19, 1), (20, 1), (40, 2), (64, 3), (100, 5)])
    def test_brush_size(self, n, expected):
        assert SourceInjector(n).brush_size == expected

    def test_small_grid_stamps_centre_only(self):
        grid = GridState(4)
        SourceInjector(4).inject(grid, 2, 2, 2.0, -1.0, 1.0)

        assert grid.source_density[2, 2] == 1.0
        assert grid.source_velocity_x[2, 2] == 2.0
        assert grid.source_velocity_y[2, 2] == -1.0
        assert np.count_nonzero(grid.source_density) == 1

    def test_diamond_falloff(self):
        n = 60
        grid = GridState(n)
        injector = SourceInjector(n)
        assert injector.brush_size == 3

        injector.inject(grid, 30, 30, 0.0, 0.0, 6.0)

        assert grid.source_density[30, 30] == pytest.approx(6.0)
        assert grid.source_density[31, 30] == pytest.approx(3.0)
        assert grid.source_density[30, 28] == pytest.approx(2.0)
        assert grid.source_density[31, 31] == pytest.approx(2.0)
        # Manhattan distance 3 is outside a size-3 diamond
        assert grid.source_density[33, 30] == 0.0
        assert grid.source_density[32, 31] == 0.0

    def test_containment(self):
        n = 60
        grid = GridState(n)
        injector = SourceInjector(n)
        injector.inject(grid, 10, 50, 1.0, 1.0, 1.0)

        xs, ys = np.nonzero(grid.source_density)
        distances = np.abs(xs - 10) + np.abs(ys - 50)
        assert np.all(distances < injector.brush_size)
        assert len(xs) == len(injector.offsets)

    def test_out_of_range_cells_skipped(self):
        n = 60
        grid = GridState(n)
        injector = SourceInjector(n)

        injector.inject(grid, 0, 0, 1.0, 1.0, 1.0)
        injector.inject(grid, n, n, 1.0, 1.0, 1.0)

        assert grid.source_density[0, 0] == pytest.approx(1.0)
        assert grid.source_density[n, n] == pytest.approx(1.0)
        # Index N+1 is never written
        assert not np.any(grid.source_density[n + 1, :])
        assert not np.any(grid.source_density[:, n + 1])
        assert np.count_nonzero(grid.source_density) == 2 * 6

    def test_far_outside_is_silent(self):
        grid = GridState(8)
        SourceInjector(8).inject(grid, -50, 100, 1.0, 1.0, 1.0)
        assert not np.any(grid.source_density)

    def test_injections_accumulate(self):
        grid = GridState(8)
        injector = SourceInjector(8)

        injector.inject(grid, 3, 4, 1.0, 0.5, 2.0)
        injector.inject(grid, 3, 4, 1.0, 0.5, 2.0)

        assert grid.source_density[3, 4] == pytest.approx(4.0)
        assert grid.source_velocity_x[3, 4] == pytest.approx(2.0)
        assert grid.source_velocity_y[3, 4] == pytest.approx(1.0)


class TestDrain:

    def test_geometric_decay(self):
        field = np.zeros((4, 4))
        source = np.zeros((4, 4))
        source[1, 2] = 2.0
        dt = 0.25

        for k in range(1, 6):
            SourceInjector.drain(field, source, dt)
            assert source[1, 2] == pytest.approx(2.0 * (1 - dt) ** k, rel=1e-12)
            assert source[1, 2] != 0.0

        # Whatever left the source went into the field
        assert field[1, 2] + source[1, 2] == pytest.approx(2.0)

    def test_unit_dt_empties_source(self):
        field = np.zeros((3, 3))
        source = np.full((3, 3), 3.0)

        SourceInjector.drain(field, source, 1.0)

        assert np.all(source == 0.0)
        assert np.all(field == 3.0)

    def test_drain_applies_to_every_cell(self):
        field = np.ones((3, 3))
        source = np.full((3, 3), 2.0)

        SourceInjector.drain(field, source, 0.5)

        np.testing.assert_allclose(field, 2.0)
        np.testing.assert_allclose(source, 1.0)
