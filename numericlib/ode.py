"""Fixed-step solvers for the initial value problem dy/dt = f(t, y)."""

from __future__ import annotations

from collections.abc import Callable

Derivative = Callable[[float, float], float]
_Step = Callable[[Derivative, float, float, float], float]


def _solve(y0: float, f: Derivative, a: float, b: float, n: int, step: _Step) -> list[float]:
    if n <= 0 or b <= a:
        raise ValueError("Invalid parameters: N must be > 0 and b > a.")
    h = (b - a) / n
    y, t = y0, a
    results = []
    for _ in range(n + 1):
        results.append(y)
        y += step(f, t, y, h)
        t += h
    return results


def _euler_step(f: Derivative, t: float, y: float, h: float) -> float:
    return h * f(t, y)


def _heun_step(f: Derivative, t: float, y: float, h: float) -> float:
    k1 = f(t, y)
    k2 = f(t + h, y + h * k1)
    return h * 0.5 * (k1 + k2)


def _midpoint_step(f: Derivative, t: float, y: float, h: float) -> float:
    k1 = f(t, y)
    k2 = f(t + h / 2, y + h / 2 * k1)
    return h * k2


def _rk4_step(f: Derivative, t: float, y: float, h: float) -> float:
    k1 = f(t, y)
    k2 = f(t + h / 2, y + h / 2 * k1)
    k3 = f(t + h / 2, y + h / 2 * k2)
    k4 = f(t + h, y + h * k3)
    return h / 6 * (k1 + 2 * k2 + 2 * k3 + k4)


def euler_method(y0: float, f: Derivative, a: float, b: float, n: int) -> list[float]:
    """Solve with the explicit Euler method; returns the n + 1 values from t = a to b."""
    return _solve(y0, f, a, b, n, _euler_step)


def heun_method(y0: float, f: Derivative, a: float, b: float, n: int) -> list[float]:
    """Solve with Heun's (improved Euler) method; returns n + 1 values."""
    return _solve(y0, f, a, b, n, _heun_step)


def midpoint_method(y0: float, f: Derivative, a: float, b: float, n: int) -> list[float]:
    """Solve with the explicit midpoint method; returns n + 1 values."""
    return _solve(y0, f, a, b, n, _midpoint_step)


def runge_kutta4_method(y0: float, f: Derivative, a: float, b: float, n: int) -> list[float]:
    """Solve with the classic fourth-order Runge-Kutta method; returns n + 1 values."""
    return _solve(y0, f, a, b, n, _rk4_step)