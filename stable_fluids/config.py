"""
Solver configuration
"""

import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverConfig:
    """
    Runtime parameters consumed by the stepper on every update.

    gravity is stored and can be changed, but no step applies it.
    """
    diffusion_rate: float = 5.0
    fidelity: int = 20
    gravity: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        self.validate()
        object.__setattr__(self, 'fidelity', int(self.fidelity))
        object.__setattr__(self, 'diffusion_rate', float(self.diffusion_rate))
        object.__setattr__(self, 'gravity', tuple(float(g) for g in self.gravity))

    def validate(self):
        """Fail fast on parameters that would make the relaxation degenerate"""
        if isinstance(self.fidelity, bool) or not isinstance(self.fidelity, numbers.Integral):
            raise ConfigurationError(
                f"fidelity must be an integer, got {self.fidelity!r}",
                {'fidelity': self.fidelity}
            )
        if self.fidelity < 1:
            raise ConfigurationError(
                f"fidelity must be >= 1, got {self.fidelity}",
                {'fidelity': self.fidelity}
            )

        rate = self.diffusion_rate
        if isinstance(rate, bool) or not isinstance(rate, numbers.Real):
            raise ConfigurationError(
                f"diffusion_rate must be a number, got {rate!r}",
                {'diffusion_rate': rate}
            )
        if not math.isfinite(rate):
            raise ConfigurationError(
                f"diffusion_rate must be finite, got {rate}",
                {'diffusion_rate': rate}
            )

        try:
            gx, gy = self.gravity
            float(gx), float(gy)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"gravity must be a 2-component vector, got {self.gravity!r}",
                {'gravity': self.gravity}
            ) from exc

    def updated(self, **changes: Any) -> 'SolverConfig':
        """
        Return a validated copy with the given parameters replaced

        Args:
            **changes: Any of diffusion_rate, fidelity, gravity

        Returns:
            New configuration
        """
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration options: {sorted(unknown)}",
                {'unknown': sorted(unknown)}
            )

        new_config = replace(self, **changes)
        logger.info("Solver configuration updated: %s", new_config)
        return new_config

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> 'SolverConfig':
        """Build a configuration from a mapping of named parameters"""
        return cls().updated(**dict(options))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'diffusion_rate': self.diffusion_rate,
            'fidelity': self.fidelity,
            'gravity': self.gravity,
        }
