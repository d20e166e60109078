"""
Exception hierarchy for the Stable Fluids solver
"""

from typing import Dict, Optional


class StableFluidsError(Exception):
    """Base class for solver errors"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(StableFluidsError, ValueError):
    """
    Invalid grid size, iteration count or parameter set.

    Raised when the simulation is built or reconfigured, never mid-step.
    """


class NumericalDivergenceError(StableFluidsError):
    """Simulation state contains non-finite or blown-up values"""
