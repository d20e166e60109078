"""Diagnostic history and plots"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from stable_fluids import create
from stable_fluids.visualization import DiagnosticPlotter


@pytest.fixture
def stirred():
    sim = create(8, seed_density=True, rng=np.random.default_rng(11))
    sim.inject_force_and_density(4, 4, 1.0, 1.0, 1.0)
    return sim


class TestDiagnosticPlotter:

    def test_records_history(self, stirred):
        plotter = DiagnosticPlotter()
        initial_density = stirred.total_density()
        plotter.update(stirred, 0.0)
        stirred.update(0.1)
        plotter.update(stirred, 0.1)

        assert plotter.history['time'] == [0.0, 0.1]
        assert plotter.history['frame'] == [0, 1]
        assert plotter.history['total_density'][0] == initial_density
        assert plotter.history['total_density'][1] == stirred.total_density()
        assert all(v >= 0 for v in plotter.history['max_divergence'])

    def test_plots(self, stirred):
        plotter = DiagnosticPlotter()
        for frame in range(3):
            stirred.update(0.1)
            plotter.update(stirred, 0.1 * (frame + 1))

        fig = plotter.plot_time_series()
        assert len(fig.axes) == 4
        plt.close(fig)

        fig = plotter.plot_density(stirred)
        assert fig.axes
        plt.close(fig)

    def test_save_and_load(self, stirred, tmp_path):
        plotter = DiagnosticPlotter()
        plotter.update(stirred, 0.0)
        path = tmp_path / 'diagnostics.json'

        plotter.save_diagnostics(str(path))
        restored = DiagnosticPlotter()
        restored.load_diagnostics(str(path))

        assert restored.history == plotter.history

    def test_zero_state_diagnostics(self):
        stats = create(4).solver.diagnostics()
        assert stats == {'total_density': 0.0, 'max_velocity': 0.0,
                         'kinetic_energy': 0.0, 'max_divergence': 0.0}
