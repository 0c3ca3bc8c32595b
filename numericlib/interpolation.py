"""Polynomial interpolation by the Lagrange and Newton forms."""

from __future__ import annotations

from collections.abc import Sequence


def interpolate_lagrange(
    x: float, xi: Sequence[float], fxi: Sequence[float], prec: int
) -> float:
    """Evaluate at ``x`` the Lagrange polynomial through the first ``prec`` nodes."""
    if len(xi) != len(fxi) or not xi:
        raise ValueError("Input vectors must have the same non-zero size.")
    if prec <= 0 or prec > len(xi):
        raise ValueError(
            "Precision must be a positive integer less than or equal to the size of input vectors."
        )

    nodes = list(zip(xi[:prec], fxi[:prec]))
    total = 0.0
    for i, (xi_i, y) in enumerate(nodes):
        basis = 1.0
        for j, (xi_j, _) in enumerate(nodes):
            if i != j:
                basis *= (x - xi_j) / (xi_i - xi_j)
        total += basis * y
    return total


def divided_differences(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Return the Newton coefficients a0..an computed from divided differences."""
    coefficients = list(y[: len(x)])
    n = len(coefficients)
    for order in range(1, n):
        for i in range(n - 1, order - 1, -1):
            coefficients[i] = (coefficients[i] - coefficients[i - 1]) / (x[i] - x[i - order])
    return coefficients


def evaluate_newton_polynomial(
    x_val: float, x: Sequence[float], coefficients: Sequence[float]
) -> float:
    """Evaluate the Newton-form polynomial with the given nodes and coefficients."""
    result = coefficients[0]
    product = 1.0
    for node, coefficient in zip(x, coefficients[1:]):
        product *= x_val - node
        result += coefficient * product
    return result


def interpolate_newton(x_val: float, x: Sequence[float], y: Sequence[float]) -> float:
    """Evaluate at ``x_val`` the Newton interpolating polynomial through all nodes."""
    if len(x) != len(y) or not x:
        raise ValueError("Input vectors must have the same non-zero size.")
    return evaluate_newton_polynomial(x_val, x, divided_differences(x, y))