"""Numerical methods: integration, interpolation, linear systems, root finding, ODEs and approximation."""

__version__ = "0.1.0"

__all__ = [
    "approximation",
    "cli",
    "integration",
    "interpolation",
    "linear_systems",
    "nonlinear",
    "ode",
    "utils",
]