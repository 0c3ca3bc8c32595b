"""Root finding for scalar nonlinear equations."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass

Function = Callable[[float], float]

_EPSILON = sys.float_info.epsilon
_DERIVATIVE_STEP = 1e-5


@dataclass(frozen=True)
class RootTrace:
    """A root estimate together with the successive approximations that led to it."""

    root: float
    iterations: tuple[float, ...]


def _opposite_signs(fa: float, fb: float) -> None:
    if fa * fb >= 0:
        raise ValueError("No sign change on the interval: f(a) and f(b) must differ in sign.")


def _bisection(
    f: Function, a: float, b: float, tol: float, max_iter: int, record: list[float]
) -> tuple[float, bool]:
    _opposite_signs(f(a), f(b))
    c = (a + b) / 2
    for _ in range(max_iter):
        c = (a + b) / 2
        record.append(c)
        fc = f(c)
        if abs(fc) < tol or (b - a) / 2 < tol:
            return c, True
        if f(a) * fc < 0:
            b = c
        else:
            a = c
    return c, False


def bisection(
    f: Function, a: float, b: float, tol: float = 1e-8, max_iter: int = 1000
) -> float:
    """Find a root of ``f`` in [a, b] by bisection.

    Raises ValueError when f(a) and f(b) share a sign and RuntimeError when
    no root is found within ``max_iter`` iterations.
    """
    root, converged = _bisection(f, a, b, tol, max_iter, [])
    if not converged:
        raise RuntimeError("Root not found within the given number of iterations.")
    return root


def bisection_trace(
    f: Function, a: float, b: float, tol: float = 1e-8, max_iter: int = 1000
) -> RootTrace:
    """Bisection that records every midpoint; returns the last one if not converged."""
    record: list[float] = []
    root, _ = _bisection(f, a, b, tol, max_iter, record)
    return RootTrace(root, tuple(record))


def _newton(
    f: Function,
    x0: float,
    df: Function,
    tol: float,
    max_iter: int,
    record: list[float],
) -> float:
    for _ in range(max_iter):
        record.append(x0)
        fx = f(x0)
        if abs(fx) < tol:
            return x0
        dfx = df(x0)
        if abs(dfx) < _EPSILON:
            raise ZeroDivisionError("Derivative is zero.")
        x0 -= fx / dfx
    return x0


def newton(
    f: Function, x0: float, df: Function, tol: float = 1e-8, max_iter: int = 1000
) -> float:
    """Find a root of ``f`` by Newton's method starting at ``x0`` with derivative ``df``."""
    return _newton(f, x0, df, tol, max_iter, [])


def newton_trace(
    f: Function, x0: float, df: Function, tol: float = 1e-8, max_iter: int = 1000
) -> RootTrace:
    """Newton's method recording every point at which ``f`` was evaluated."""
    record: list[float] = []
    root = _newton(f, x0, df, tol, max_iter, record)
    return RootTrace(root, tuple(record))


def _central_difference(f: Function) -> Function:
    def derivative(x: float) -> float:
        h = _DERIVATIVE_STEP
        return (f(x + h) - f(x - h)) / (2 * h)

    return derivative


def newton_numeric(
    f: Function, x0: float, tol: float = 1e-8, max_iter: int = 1000
) -> float:
    """Newton's method with a central-difference derivative."""
    return newton(f, x0, _central_difference(f), tol, max_iter)


def newton_numeric_trace(
    f: Function, x0: float, tol: float = 1e-8, max_iter: int = 1000
) -> RootTrace:
    """Newton's method with a central-difference derivative, recording iterates."""
    return newton_trace(f, x0, _central_difference(f), tol, max_iter)


def _secant(
    f: Function,
    x0: float,
    x1: float,
    a: float,
    b: float,
    tol: float,
    max_iter: int,
    record: list[float],
) -> float:
    fx0, fx1 = f(x0), f(x1)
    for _ in range(max_iter):
        if abs(fx1) < tol:
            record.append(x1)
            return x1
        if abs(fx1 - fx0) < _EPSILON:
            raise ZeroDivisionError("Division by zero in the secant method.")
        x2 = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
        x2 = min(max(x2, a), b)
        record.append(x2)
        if abs(x2 - x1) < tol:
            return x2
        x0, fx0 = x1, fx1
        x1 = x2
        fx1 = f(x1)
    return x1


def secant(
    f: Function,
    x0: float,
    x1: float,
    a: float,
    b: float,
    tol: float = 1e-8,
    max_iter: int = 1000,
) -> float:
    """Find a root of ``f`` by the secant method, keeping iterates inside [a, b]."""
    return _secant(f, x0, x1, a, b, tol, max_iter, [])


def secant_trace(
    f: Function,
    x0: float,
    x1: float,
    a: float,
    b: float,
    tol: float = 1e-8,
    max_iter: int = 1000,
) -> RootTrace:
    """Secant method recording every new iterate."""
    record: list[float] = []
    root = _secant(f, x0, x1, a, b, tol, max_iter, record)
    return RootTrace(root, tuple(record))


def _falsi(
    f: Function,
    a: float,
    b: float,
    fa: float,
    fb: float,
    tol: float,
    max_iter: int,
    record: list[float],
) -> float:
    c = a
    for _ in range(max_iter):
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)
        record.append(c)
        if abs(fc) < tol:
            return c
        if fa * fc < 0:
            b, fb = c, fc
        else:
            a, fa = c, fc
        if abs(b - a) < tol:
            break
    return c


def falsi(
    f: Function, a: float, b: float, tol: float = 1e-8, max_iter: int = 1000
) -> float:
    """Find a root of ``f`` in [a, b] by regula falsi.

    Raises ValueError when f(a) and f(b) have the same strict sign.
    """
    fa, fb = f(a), f(b)
    if fa * fb > 0:
        raise ValueError("No sign change on the interval: f(a) and f(b) must differ in sign.")
    return _falsi(f, a, b, fa, fb, tol, max_iter, [])


def falsi_trace(
    f: Function, a: float, b: float, tol: float = 1e-8, max_iter: int = 1000
) -> RootTrace:
    """Regula falsi recording every iterate; f(a) and f(b) must differ in sign."""
    fa, fb = f(a), f(b)
    _opposite_signs(fa, fb)
    record: list[float] = []
    root = _falsi(f, a, b, fa, fb, tol, max_iter, record)
    return RootTrace(root, tuple(record))


def find_intervals(
    f: Function, a: float, b: float, step: float
) -> list[tuple[float, float]]:
    """Return the sub-intervals ``(x, x + step)`` of [a, b] where ``f`` changes sign.

    Points at which ``f`` raises are skipped.
    """
    if step <= 0:
        raise ValueError("Step must be positive.")
    intervals: list[tuple[float, float]] = []
    x = a
    while x < b:
        try:
            if f(x) * f(x + step) < 0:
                intervals.append((x, x + step))
        except Exception:
            pass
        x += step
    return intervals