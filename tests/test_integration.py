import math

import pytest

from numericlib.integration import (
    GaussLegendreRule,
    gauss_legendre_integral,
    gauss_legendre_integral_split,
    gl_rule,
    rect,
    simpson,
    trapezoids,
)

TOL = 0.01


def square(x):
    return x * x


def infinite_func(x):
    return 1.0 / x


def test_trapezoid_correct_input():
    assert abs(trapezoids(10000, square, [0.0, 2.0]) - 8.0 / 3.0) < TOL


def test_trapezoid_empty_range():
    with pytest.raises(ValueError):
        trapezoids(10000, square, [])


def test_trapezoid_nonpositive_steps():
    with pytest.raises(ValueError):
        trapezoids(0, square, [0.0, 1.0])


def test_simpson_correct_input():
    assert abs(simpson(100, square, [0.0, 2.0]) - 8.0 / 3.0) < TOL


def test_simpson_incorrect_range():
    with pytest.raises(ValueError):
        simpson(100, square, [1, -3])


def test_simpson_exact_for_cubic():
    assert simpson(10, lambda x: x**3, [0.0, 2.0]) == pytest.approx(4.0, abs=1e-12)


def test_simpson_odd_split_rounded_up():
    assert simpson(3, math.sin, [0.0, 1.0]) == simpson(4, math.sin, [0.0, 1.0])


def test_simpson_non_finite_interior():
    with pytest.raises(ValueError):
        simpson(4, lambda x: math.inf if x == 1.0 else x, [0.0, 2.0])


def test_simpson_nonpositive_split():
    with pytest.raises(ValueError):
        simpson(0, square, [0.0, 1.0])


def test_rectangle_correct_input():
    assert abs(rect(10000, square, [0.0, 2.0]) - 8.0 / 3.0) < TOL


def test_rectangle_infinite_value():
    with pytest.raises((ValueError, ZeroDivisionError)):
        rect(10000, infinite_func, [0, 5])


def test_rectangle_returns_inf_raises_value_error():
    with pytest.raises(ValueError):
        rect(10, lambda x: math.inf, [0.0, 1.0])


def test_rectangle_wrong_range_length():
    with pytest.raises(ValueError):
        rect(10, square, [0.0, 1.0, 2.0])


def test_gauss_legendre_correct_input():
    assert abs(gauss_legendre_integral_split(0, 2, square, 4, 10) - 8.0 / 3.0) < TOL


def test_gauss_legendre_incorrect_rule():
    with pytest.raises(ValueError):
        gauss_legendre_integral_split(0, 2, square, -1, 20)


def test_gauss_legendre_zero_splits():
    with pytest.raises(ValueError):
        gauss_legendre_integral_split(0, 2, square, 4, 0)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_rule_weights_sum_to_two(n):
    rule = gl_rule(n)
    assert len(rule.nodes) == n
    assert sum(rule.weights) == pytest.approx(2.0, abs=1e-8)


def test_rule_two_nodes_values():
    assert gl_rule(2) == GaussLegendreRule((-0.5773502692, 0.5773502692), (1.0, 1.0))


@pytest.mark.parametrize("n", [1, 5])
def test_rule_unsupported(n):
    with pytest.raises(ValueError):
        gl_rule(n)


def test_two_node_rule_exact_for_cubic():
    assert gauss_legendre_integral(0.0, 2.0, lambda x: x**3, 2) == pytest.approx(4.0, abs=1e-8)


def test_split_integral_of_sine():
    assert gauss_legendre_integral_split(0.0, math.pi, math.sin, 4, 10) == pytest.approx(
        2.0, abs=1e-8
    )