"""Command-line entry point that runs worked examples of the library."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

from numericlib.approximation import Approximation
from numericlib.integration import (
    gauss_legendre_integral_split,
    rect,
    simpson,
    trapezoids,
)
from numericlib.interpolation import interpolate_lagrange, interpolate_newton
from numericlib.linear_systems import gauss_elimination


def _integration_example() -> None:
    print("Integration methods example:\n")
    interval = [0.0, math.pi]

    def func(x: float) -> float:
        return math.sin(3 * x)

    steps = 1000
    gauss_nodes = 4

    rect_result = rect(steps, func, interval)
    simpson_result = simpson(steps, func, interval)
    trapezoid_result = trapezoids(steps, func, interval)
    gauss_result = gauss_legendre_integral_split(
        interval[0], interval[1], func, gauss_nodes, steps
    )

    print(f"Rectangle method result: {rect_result:g}")
    print(f"Simpson's method result: {simpson_result:g}")
    print(f"Trapezoid method result: {trapezoid_result:g}")
    print(f"Gauss-Legendre method result: {gauss_result:g}\n")


def _damped_sine(x: float) -> float:
    return math.exp(-x) * math.sin(3 * x)


def _interpolation_example() -> None:
    print("Interpolation methods example:\n")
    nodes = [0.8, 0.9, 1.0, 1.1, 1.2]
    values = [_damped_sine(x) for x in nodes]
    x = 1.1

    lagrange_result = interpolate_lagrange(x, nodes, values, len(nodes))
    newton_result = interpolate_newton(x, nodes, values)

    print(f"Lagrange interpolation result at x = {x:g}: {lagrange_result:g}")
    print(f"Newton interpolation result at x = {x:g}: {newton_result:g}\n")


def _gauss_elimination_example() -> None:
    print("Gauss Elimination method example:\n")
    a = [
        [2.0, 3.0, -1.0],
        [4.0, 1.0, 2.0],
        [-2.0, 5.0, -3.0],
    ]
    b = [5.0, 6.0, -4.0]
    for number, value in enumerate(gauss_elimination(a, b), start=1):
        print(f"x{number} = {value:g}")
    print()


def _approximation_example() -> None:
    print("\nApproximation methods example:\n")
    approx = Approximation(_damped_sine, 3, [0.0, math.pi])
    approx.print_coefficients()
    print()

    x = 0.0
    while x <= math.pi:
        print(f"x = {x:g}, f(x) = {_damped_sine(x):g}, approx(x) = {approx(x):g}")
        x += math.pi / 6


def run_examples() -> None:
    """Print worked examples of integration, interpolation, elimination and approximation."""
    _integration_example()
    _interpolation_example()
    _gauss_elimination_example()
    _approximation_example()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the examples and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="numericlib",
        description="Run worked examples of the numerical methods.",
    )
    parser.parse_args(argv)
    print("Running examples...")
    run_examples()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())