"""Helpers for printing, checking and loading matrices and iteration traces."""

from __future__ import annotations

import itertools
import os
import re
from collections.abc import Iterable, Sequence

_NUMBER_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

Matrix = Sequence[Sequence[float]]


def print_iterations(name: str, values: Iterable[float], root: float) -> None:
    """Print successive approximations of a method with their distance to ``root``."""
    print(f"\nPrzyblizenia ({name}) [|x_n - x*|]:")
    for number, value in enumerate(values, start=1):
        print(f"Iteracja {number}: {value:12g}  Blad: {abs(value - root):g}")


def get_value_horner(x: float, coeffs: Sequence[float], n: int = 3) -> float:
    """Evaluate ``sum(coeffs[i] * x**i for i in 0..n)`` with Horner's scheme."""
    value = 0.0
    for coefficient in reversed(coeffs[: n + 1]):
        value = value * x + coefficient
    if n + 1 > len(coeffs):
        raise IndexError(f"degree {n} needs {n + 1} coefficients, got {len(coeffs)}")
    return value


def format_matrix(a: Matrix, b: Sequence[float] | None = None) -> str:
    """Render the square matrix ``a`` (and optionally the right-hand side ``b``)."""
    n = len(a)
    lines = []
    for i, row in enumerate(a):
        cells = "".join(f"{value:10g} " for value in row[:n])
        if b is not None:
            cells += f"| {b[i]:g}"
        lines.append(cells + "\n")
    return "".join(lines) + "\n"


def print_matrix(a: Matrix, b: Sequence[float] | None = None) -> None:
    """Print the matrix ``a`` (and optionally ``b``) to standard output."""
    print(format_matrix(a, b), end="")


def verify_solution(a: Matrix, b: Sequence[float], x: Sequence[float]) -> bool:
    """Return True when ``a @ x`` matches ``b`` within 1e-5 in every row."""
    n = len(a)
    for row, rhs in zip(a, b):
        total = sum(xj * aij for xj, aij in zip(x[:n], row[:n]))
        if abs(total - rhs) > 1e-5:
            return False
    return True


def is_number(c: str) -> bool:
    """Return True if ``c`` is a digit, a minus sign or a dot."""
    return c.isascii() and (c.isdigit() or c in "-.")


def _parse_prefix(token: str) -> float:
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return float(match.group())


def convert_line(line: str) -> list[float]:
    """Extract every number found in ``line``."""
    return [
        _parse_prefix("".join(chars))
        for numeric, chars in itertools.groupby(line, key=is_number)
        if numeric
    ]


def load_matrix(source: str | os.PathLike[str]) -> tuple[list[list[float]], list[float]]:
    """Load a matrix ``A`` and vector ``b`` from a text file.

    The file holds a header line, a line with the size ``n``, a ``b:`` line,
    the values of ``b``, an ``A:`` line and then ``n`` rows of ``A``.
    """
    with open(source, encoding="utf-8") as handle:
        lines = [line.rstrip("\n") for line in handle]

    def line_at(index: int) -> str:
        return lines[index] if index < len(lines) else ""

    sizes = convert_line(line_at(1))
    if not sizes:
        raise ValueError("matrix size is missing")
    n = int(sizes[0])
    b = convert_line(line_at(3))
    a = [convert_line(line_at(5 + i)) for i in range(n)]
    return a, b