"""Least-squares polynomial approximation of a function on an interval."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from numericlib.integration import gauss_legendre_integral_split
from numericlib.linear_systems import gauss_elimination

Function = Callable[[float], float]

_QUADRATURE_NODES = 4
_QUADRATURE_SPLITS = 10


class Approximation:
    """Polynomial of a given degree that best fits ``func`` on ``[a, b]`` in the L2 sense.

    The normal equations use the exact moments of the monomials and
    Gauss-Legendre quadrature for the projections of ``func``.
    """

    def __init__(self, func: Function, degree: int, interval: Sequence[float]) -> None:
        if len(interval) != 2 or interval[0] >= interval[1]:
            raise ValueError("Invalid range: range must be [a, b] with a < b.")
        if degree < 0:
            raise ValueError("Degree must be non-negative.")

        self.func = func
        self.degree = degree
        self.interval: tuple[float, float] = (interval[0], interval[1])

        a, b = self.interval
        size = degree + 1
        gram = [
            [
                (b ** (i + j + 1) - a ** (i + j + 1)) / (i + j + 1)
                for j in range(size)
            ]
            for i in range(size)
        ]
        moments = [
            gauss_legendre_integral_split(
                a,
                b,
                lambda x, power=i: func(x) * x**power,
                _QUADRATURE_NODES,
                _QUADRATURE_SPLITS,
            )
            for i in range(size)
        ]
        self.coefficients: tuple[float, ...] = tuple(gauss_elimination(gram, moments))

    def approximate(self, x: float) -> float:
        """Evaluate the approximating polynomial at ``x``."""
        return sum(c * x**i for i, c in enumerate(self.coefficients))

    def __call__(self, x: float) -> float:
        return self.approximate(x)

    def format_coefficients(self) -> str:
        """Return the coefficients as text, one ``a[i] = value`` line each."""
        lines = ["Polynomial coefficients:\n"]
        lines.extend(f"a[{i}] = {c:g}\n" for i, c in enumerate(self.coefficients))
        return "".join(lines)

    def print_coefficients(self) -> str:
        """Write the coefficients to standard output and return the text written."""
        text = self.format_coefficients()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(degree={self.degree}, interval={self.interval}, "
            f"coefficients={self.coefficients})"
        )