"""Visualization tools for Stable Fluids"""

from .diagnostics import DiagnosticPlotter

__all__ = [
    'DiagnosticPlotter'
]
