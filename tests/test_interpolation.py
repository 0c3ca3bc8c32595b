import math

import pytest

from numericlib.interpolation import (
    divided_differences,
    evaluate_newton_polynomial,
    interpolate_lagrange,
    interpolate_newton,
)

TOL = 0.01
X = [1, 2, 3]
Y = [2, 3, 5]


def test_lagrange_correct_input():
    assert abs(interpolate_lagrange(2.5, X, Y, 3) - 3.875) < TOL


def test_lagrange_mismatched_sizes():
    with pytest.raises(ValueError):
        interpolate_lagrange(2.0, [1, 2], [2, 3, 4], 1)


@pytest.mark.parametrize("prec", [0, -1, 4])
def test_lagrange_invalid_precision(prec):
    with pytest.raises(ValueError):
        interpolate_lagrange(2.0, X, Y, prec)


def test_lagrange_uses_only_first_nodes():
    assert interpolate_lagrange(2.5, X, Y, 2) == pytest.approx(3.5)


def test_newton_correct_input():
    assert abs(interpolate_newton(2.5, X, Y) - 3.875) < TOL


def test_newton_empty_input():
    with pytest.raises(ValueError):
        interpolate_newton(2.0, [], [])


def test_newton_mismatched_sizes():
    with pytest.raises(ValueError):
        interpolate_newton(2.0, [1, 2], [1])


def test_divided_differences_values():
    assert divided_differences(X, Y) == pytest.approx([2.0, 1.0, 0.5])


def test_evaluate_newton_polynomial():
    assert evaluate_newton_polynomial(2.5, X, [2.0, 1.0, 0.5]) == pytest.approx(3.875)


@pytest.mark.parametrize("node, value", list(zip(X, Y)))
def test_both_methods_pass_through_nodes(node, value):
    assert interpolate_lagrange(node, X, Y, 3) == pytest.approx(value)
    assert interpolate_newton(node, X, Y) == pytest.approx(value)


def test_lagrange_and_newton_agree():
    def func(x):
        return math.exp(-x) * math.sin(3 * x)

    xi = [0.8, 0.9, 1.0, 1.1, 1.2]
    fxi = [func(v) for v in xi]
    for point in (0.85, 1.05, 1.15):
        assert interpolate_lagrange(point, xi, fxi, len(xi)) == pytest.approx(
            interpolate_newton(point, xi, fxi), abs=1e-12
        )
    assert interpolate_newton(1.1, xi, fxi) == pytest.approx(func(1.1), abs=1e-12)


def test_exact_for_quadratic():
    xs = [0.0, 1.0, 3.0]
    ys = [x * x - 2 * x + 1 for x in xs]
    assert interpolate_newton(2.0, xs, ys) == pytest.approx(1.0)
    assert interpolate_lagrange(2.0, xs, ys, 3) == pytest.approx(1.0)