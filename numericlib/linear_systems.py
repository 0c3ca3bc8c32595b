"""Direct solvers for systems of linear equations."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[float]]


class SingularMatrixError(ArithmeticError):
    """The system has no unique solution."""


def gauss_elimination(a: Matrix, b: Sequence[float]) -> list[float]:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting."""
    m = [list(row) for row in a]
    rhs = list(b)
    n = len(m)

    for i in range(n):
        max_row = max(range(i, n), key=lambda k: abs(m[k][i]))
        if m[max_row][i] == 0:
            raise SingularMatrixError(
                "The system of equations is linearly dependent (no unique solution)."
            )
        m[i], m[max_row] = m[max_row], m[i]
        rhs[i], rhs[max_row] = rhs[max_row], rhs[i]

        for j in range(i + 1, n):
            factor = m[j][i] / m[i][i]
            for k in range(i, n):
                m[j][k] -= factor * m[i][k]
            rhs[j] -= factor * rhs[i]

    return backward_substitution(m, rhs)


def pivot(a: list[list[float]], b: list[float], k: int) -> int:
    """Swap row ``k`` with the row below it holding the largest ``|a[i][k]|``.

    Works in place on ``a`` and ``b`` and returns the index of the chosen row.
    """
    max_row = k
    for i in range(k + 1, len(a)):
        if abs(a[i][k]) > abs(a[max_row][k]):
            max_row = i
    if max_row != k:
        a[k], a[max_row] = a[max_row], a[k]
        b[k], b[max_row] = b[max_row], b[k]
    return max_row


def lu_decomposition(a: Matrix) -> tuple[list[list[float]], list[list[float]]]:
    """Split ``a`` into unit lower triangular ``L`` and upper triangular ``U`` (Doolittle)."""
    n = len(a)
    lower = [[0.0] * n for _ in range(n)]
    upper = [[0.0] * n for _ in range(n)]

    for i in range(n):
        for j in range(i, n):
            total = sum(lower[i][k] * upper[k][j] for k in range(i))
            upper[i][j] = a[i][j] - total
        lower[i][i] = 1.0
        for j in range(i + 1, n):
            if upper[i][i] == 0:
                raise SingularMatrixError("Zero pivot in LU decomposition.")
            total = sum(lower[j][k] * upper[k][i] for k in range(i))
            lower[j][i] = (a[j][i] - total) / upper[i][i]

    return lower, upper


def forward_substitution(l: Matrix, b: Sequence[float]) -> list[float]:  # noqa: E741
    """Solve the lower triangular system ``l z = b``."""
    z: list[float] = []
    for i, row in enumerate(l):
        value = b[i] - sum(row[j] * z[j] for j in range(i))
        z.append(value / row[i])
    return z


def backward_substitution(u: Matrix, z: Sequence[float]) -> list[float]:
    """Solve the upper triangular system ``u x = z``."""
    n = len(u)
    x = [0.0] * n
    for i in reversed(range(n)):
        value = z[i] - sum(u[i][j] * x[j] for j in range(i + 1, n))
        x[i] = value / u[i][i]
    return x


def solve_full_pivot_lu(a: Matrix, b: Sequence[float]) -> list[float]:
    """Solve ``a x = b`` by LU decomposition with full (row and column) pivoting."""
    n = len(a)
    lower = [[0.0] * n for _ in range(n)]
    upper = [list(row) for row in a]
    rhs = list(b)
    col_perm = list(range(n))

    for k in range(n):
        max_val = 0.0
        max_row = max_col = k
        for i in range(k, n):
            for j in range(k, n):
                if abs(upper[i][j]) > max_val:
                    max_val = abs(upper[i][j])
                    max_row, max_col = i, j

        if max_val == 0:
            raise SingularMatrixError("Singular Matrix")

        if max_row != k:
            upper[k], upper[max_row] = upper[max_row], upper[k]
            rhs[k], rhs[max_row] = rhs[max_row], rhs[k]
            for j in range(k):
                lower[k][j], lower[max_row][j] = lower[max_row][j], lower[k][j]

        if max_col != k:
            for row in upper:
                row[k], row[max_col] = row[max_col], row[k]
            col_perm[k], col_perm[max_col] = col_perm[max_col], col_perm[k]

        lower[k][k] = 1.0
        for i in range(k + 1, n):
            lower[i][k] = upper[i][k] / upper[k][k]
            for j in range(k, n):
                upper[i][j] -= lower[i][k] * upper[k][j]

    z = forward_substitution(lower, rhs)
    x = backward_substitution(upper, z)

    solution = [0.0] * n
    for position, column in enumerate(col_perm):
        solution[column] = x[position]
    return solution