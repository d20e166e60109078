"""
Diagnostic plotting for Stable Fluids simulations
"""

import json

import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict

from ..simulation import FluidSimulation


class DiagnosticPlotter:
    """
    Record and plot per-frame summary quantities of a simulation
    """

    def __init__(self):
        """Initialize diagnostic plotter"""
        self.history: Dict[str, List[float]] = {
            'time': [],
            'frame': [],
            'total_density': [],
            'kinetic_energy': [],
            'max_velocity': [],
            'max_divergence': []
        }

    def update(self, simulation: FluidSimulation, time: float):
        """
        Append the current state of a simulation to the history

        Args:
            simulation: Simulation to sample
            time: Simulated time of the sample
        """
        stats = simulation.solver.diagnostics()

        self.history['time'].append(time)
        self.history['frame'].append(simulation.frame)
        self.history['total_density'].append(stats['total_density'])
        self.history['kinetic_energy'].append(stats['kinetic_energy'])
        self.history['max_velocity'].append(stats['max_velocity'])
        self.history['max_divergence'].append(stats['max_divergence'])

    def plot_time_series(self) -> plt.Figure:
        """
        Plot time series of diagnostic quantities

        Returns:
            Figure object
        """
        fig, axes = plt.subplots(2, 2, figsize=(12, 8))
        axes = axes.flatten()

        t = np.array(self.history['time'])

        # Density
        ax = axes[0]
        ax.plot(t, self.history['total_density'], 'b-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Σ density')
        ax.set_title('Total Density')
        ax.grid(True, alpha=0.3)

        # Energy
        ax = axes[1]
        ax.plot(t, self.history['kinetic_energy'], 'r-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Energy')
        ax.set_title('Kinetic Energy')
        ax.grid(True, alpha=0.3)

        # Max velocity
        ax = axes[2]
        ax.plot(t, self.history['max_velocity'], 'g-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Max |u|')
        ax.set_title('Maximum Velocity')
        ax.grid(True, alpha=0.3)

        # Divergence left over after projection
        ax = axes[3]
        divergence = np.array(self.history['max_divergence'])
        ax.semilogy(t, divergence + 1e-16, 'm-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Max |div u|')
        ax.set_title('Maximum Divergence')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    def plot_density(self, simulation: FluidSimulation) -> plt.Figure:
        """
        Snapshot of the interior density with velocity arrows

        Args:
            simulation: Simulation to draw

        Returns:
            Figure object
        """
        fig, ax = plt.subplots(figsize=(8, 8))

        grid = simulation.grid
        density = grid.interior(grid.density)
        vel_x = grid.interior(grid.velocity_x)
        vel_y = grid.interior(grid.velocity_y)

        # Arrays are indexed [x, y]; imshow wants [row=y, col=x]
        im = ax.imshow(density.T, origin='lower', cmap='magma')

        skip = max(1, grid.size // 16)
        cells = np.arange(grid.size)
        ax.quiver(cells[::skip], cells[::skip],
                  vel_x[::skip, ::skip].T, vel_y[::skip, ::skip].T,
                  color='white', alpha=0.7)

        ax.set_xlabel('x')
        ax.set_ylabel('y')
        ax.set_title(f'Density (frame {simulation.frame})')
        plt.colorbar(im, ax=ax)

        return fig

    def save_diagnostics(self, filename: str):
        """
        Save diagnostic data to file

        Args:
            filename: Output filename
        """
        data = {}
        for key, values in self.history.items():
            data[key] = [float(v) for v in values]

        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

    def load_diagnostics(self, filename: str):
        """
        Load diagnostic data from file

        Args:
            filename: Input filename
        """
        with open(filename, 'r') as f:
            data = json.load(f)

        for key in self.history:
            self.history[key] = list(data.get(key, []))
