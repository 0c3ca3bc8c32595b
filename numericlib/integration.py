"""Numerical quadrature: rectangle, trapezoid, Simpson and Gauss-Legendre rules."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

Function = Callable[[float], float]


@dataclass(frozen=True)
class GaussLegendreRule:
    """Nodes and weights of a Gauss-Legendre rule on [-1, 1]."""

    nodes: tuple[float, ...]
    weights: tuple[float, ...]


_RULES = {
    2: GaussLegendreRule(
        nodes=(-0.5773502692, 0.5773502692),
        weights=(1.0, 1.0),
    ),
    3: GaussLegendreRule(
        nodes=(-0.7745966692, 0.0, 0.7745966692),
        weights=(0.5555555556, 0.8888888889, 0.5555555556),
    ),
    4: GaussLegendreRule(
        nodes=(-0.8611363116, -0.3399810436, 0.3399810436, 0.8611363116),
        weights=(0.3478548451, 0.6521451549, 0.6521451549, 0.3478548451),
    ),
}


def _checked_range(range_: Sequence[float]) -> tuple[float, float]:
    if len(range_) != 2:
        raise ValueError("Range vector must have exactly two elements.")
    start, end = range_
    return start, end


def _check_order(start: float, end: float) -> None:
    if start >= end:
        raise ValueError("Range start must be less than range end.")


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("Function evaluation returned non-finite value.")
    return value


def rect(steps: float, func: Function, range_: Sequence[float]) -> float:
    """Approximate the integral of ``func`` over ``range_`` with left rectangles."""
    start, end = _checked_range(range_)
    if steps <= 0:
        raise ValueError("Step size must be positive.")
    _check_order(start, end)

    h = (end - start) / steps
    x = start
    total = 0.0
    while x < end:
        total += _finite(func(x)) * h
        x += h
    return total


def simpson(split: int, func: Function, range_: Sequence[float]) -> float:
    """Approximate the integral of ``func`` over ``range_`` with Simpson's rule.

    An odd number of intervals is raised to the next even number.
    """
    start, end = _checked_range(range_)
    if split <= 0:
        raise ValueError("Number of splits must be positive.")
    _check_order(start, end)

    if split % 2 == 1:
        split += 1

    h = (end - start) / split
    total = func(end) + func(start)
    for i in range(1, split):
        y = _finite(func(start + i * h))
        total += (2 if i % 2 == 0 else 4) * y
    return total * h / 3


def trapezoids(steps: float, func: Function, range_: Sequence[float]) -> float:
    """Approximate the integral of ``func`` over ``range_`` with the trapezoid rule."""
    start, end = _checked_range(range_)
    if steps <= 0:
        raise ValueError("Step size must be positive.")
    _check_order(start, end)

    h = (end - start) / steps
    x = start
    total = 0.0
    last = func(x)
    x += h
    while x < end:
        y = _finite(func(x))
        total += (last + y) * h
        x += h
        last = y
    return total / 2


def gl_rule(n: int) -> GaussLegendreRule:
    """Return the Gauss-Legendre rule with ``n`` nodes (2, 3 or 4)."""
    try:
        return _RULES[n]
    except KeyError:
        raise ValueError("Only 2, 3 or 4 are valid values") from None


def gauss_legendre_integral(a: float, b: float, func: Function, n: int) -> float:
    """Integrate ``func`` over [a, b] with an ``n``-node Gauss-Legendre rule."""
    rule = gl_rule(n)
    half = (b - a) / 2.0
    mid = (a + b) / 2.0
    total = sum(w * func(half * node + mid) for node, w in zip(rule.nodes, rule.weights))
    return half * total


def gauss_legendre_integral_split(
    a: float, b: float, func: Function, n: int, splits: int
) -> float:
    """Integrate ``func`` over [a, b] by applying the rule on ``splits`` equal parts."""
    if splits <= 0:
        raise ValueError("Number of splits must be greater than 0")
    h = (b - a) / splits
    total = 0.0
    for i in range(splits):
        left = a + i * h
        total += gauss_legendre_integral(left, left + h, func, n)
    return total