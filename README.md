# numericlib

A compact collection of classic numerical methods in plain Python. It has no
third-party dependencies.

## What it covers

- **Integration** (`numericlib.integration`)
  - `rect` uses left rectangles.
  - `trapezoids` uses the trapezoid rule.
  - `simpson` uses Simpson's rule. An odd number of intervals is raised to the
    next even number.
  - `gauss_legendre_integral` applies one Gauss–Legendre rule over the whole
    interval.
  - `gauss_legendre_integral_split` applies the rule on equal sub-intervals.
  - `gl_rule` returns a `GaussLegendreRule` (nodes and weights) for 2, 3 or
    4 nodes.
- **Interpolation** (`numericlib.interpolation`)
  - `interpolate_lagrange` uses the first `prec` nodes.
  - `interpolate_newton` is built on `divided_differences` and
    `evaluate_newton_polynomial`.
- **Linear systems** (`numericlib.linear_systems`)
  - `gauss_elimination` uses partial pivoting.
  - `solve_full_pivot_lu` uses full (row and column) pivoting.
  - Both raise `SingularMatrixError`, a subclass of `ArithmeticError`, when
    the system has no unique solution.
  - The building blocks are available too:
    - `pivot` swaps rows in place.
    - `lu_decomposition` is a Doolittle decomposition returning `(L, U)`.
    - `forward_substitution` and `backward_substitution` solve triangular
      systems.
- **Nonlinear equations** (`numericlib.nonlinear`)
  - The root finders are `bisection`, `newton`, `newton_numeric` (which uses a
    central-difference derivative), `secant` (which keeps iterates inside
    `[a, b]`) and `falsi` (regula falsi).
  - Each has a `*_trace` variant that returns a `RootTrace` with the `root` and
    the successive `iterations`.
  - `find_intervals` returns the sub-intervals `(x, x + step)` where a
    function changes sign. Points at which the function raises are skipped.
- **ODEs** (`numericlib.ode`)
  - `euler_method`, `heun_method`, `midpoint_method` and
    `runge_kutta4_method` solve `dy/dt = f(t, y)`.
  - Each returns the `n + 1` values from `t = a` to `t = b`.
- **Approximation** (`numericlib.approximation`)
  - `Approximation` builds a least-squares polynomial of a given degree on an
    interval.
  - Call it, or use `approximate`, to evaluate the polynomial.
  - `coefficients` holds the coefficients.
  - `format_coefficients` and `print_coefficients` render them as text.
- **Utilities** (`numericlib.utils`)
  - `get_value_horner` evaluates a polynomial by Horner's scheme.
  - `verify_solution` checks that `a @ x` matches `b` within `1e-5`.
  - `format_matrix` and `print_matrix` render a matrix.
  - `print_iterations` prints the iterates with their errors.
  - `convert_line` and `is_number` extract numbers from text.
  - `load_matrix` reads a system from a text file.

## Installation

```
pip install .
```

## Usage

```python
import math

from numericlib.approximation import Approximation
from numericlib.integration import gauss_legendre_integral_split, simpson
from numericlib.interpolation import interpolate_lagrange
from numericlib.linear_systems import gauss_elimination
from numericlib.nonlinear import bisection, newton_trace
from numericlib.ode import runge_kutta4_method

simpson(100, lambda x: x * x, [0.0, 2.0])                           # ~ 8/3
gauss_legendre_integral_split(0.0, 2.0, lambda x: x * x, 4, 10)     # ~ 8/3

interpolate_lagrange(2.5, [1, 2, 3], [2, 3, 5], 3)                  # 3.875

gauss_elimination([[2, 1], [1, 3]], [5, 7])                         # ~ [1.6, 1.8]

bisection(lambda x: x * x - 1, 0.0, 2.0)                            # ~ 1.0
trace = newton_trace(lambda x: x * x - 2, 1.0, lambda x: 2 * x)
trace.root, len(trace.iterations)

runge_kutta4_method(0.0, lambda t, y: t + y, 0.0, 1.0, 10)[-1]      # ~ e - 2

fit = Approximation(math.sin, 2, [0.0, 2.0])
fit(1.0)                                                            # ~ sin(1)
```

### Loading a system from a file

`load_matrix(path)` returns `(A, b)`. It reads a text file laid out like this:

```
system
n = 2
b:
5 7
A:
2 1
1 3
```

The first line is ignored. The second line gives the size `n`. The fourth
line holds `b`, and the `n` lines after the `A:` line hold the rows of `A`.

## Errors

Invalid arguments raise `ValueError`. These include:

- a reversed or malformed range;
- a non-positive step count;
- mismatched or empty node lists;
- an unsupported number of Gauss–Legendre nodes;
- no sign change for `bisection` or `falsi`;
- a function value that is not finite during integration.

Methods that cannot continue raise other errors:

- `newton` and `secant` raise `ZeroDivisionError` when they would divide by a
  (near) zero value.
- `bisection` raises `RuntimeError` when it does not converge within
  `max_iter` iterations.

## Command line

```
numericlib
```

This prints a tour of the library:

- It integrates `sin(3x)` over `[0, π]` with every quadrature method.
- It interpolates `exp(-x)·sin(3x)` at `x = 1.1` with the Lagrange and
  Newton forms.
- It solves a 3×3 linear system by Gaussian elimination.
- It prints a cubic least-squares approximation next to the exact function
  values.

## What it does not do

The command only runs the built-in examples. It takes no input of its own:
it does not read functions, matrices or files from the user. To solve your
own problems, call the library from Python.

## Running the tests

```
pip install .[test]
pytest
```