# metodos-numericos

Classic numerical methods for finding the roots of single-variable functions
and for solving linear systems iteratively.

- **Bisection** and **false position** over an interval `[a, b]`
- **Newton-Raphson** from a starting point, using a built-in symbolic derivative
- **Gauss-Seidel** with partial pivoting for square systems

Functions are written as text in `x`, for example `2*x^2 + 2*x - 2`, `sin(x)`
or `3x + exp(x)`. The evaluator supports `+ - * / %`, `**` and `^` powers,
parentheses, unary minus, implicit multiplication between a digit and `x`
(`2x`), and the functions `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `sinh`,
`cosh`, `tanh`, `sqrt`, `pow(base, exponent)`, `ln`, `log10`,
`log(value, base)`, `exp`, `round`, `floor`, `ceil` and `abs`.

## Installation

```
pip install .
```

## Command line

```
metodos-numericos
```

The program prints a menu (1 Biseccion, 2 Regla Falsa, 3 Newton Raphson,
4 Gauss Seidel) and reads the choice from standard input. For the root-finding
methods it asks for the interval ends or the starting point, the number of
iterations and the function, then prints each iteration. For Gauss-Seidel it
asks for the size of the matrix, each row and the right-hand side vector, then
prints the system and every iterate. Invalid input is reported and the command
exits with status 1.

## Library use

```python
from metodos_numericos.bisection import Bisection
from metodos_numericos.false_position import FalsePosition
from metodos_numericos.newton_raphson import NewtonRaphson
from metodos_numericos.gauss_seidel import solve_system
from metodos_numericos.evaluate import evaluate_function
from metodos_numericos.derive import derive

evaluate_function(2.0, "x^2")          # 4.0
derive("x^2")                          # "2*x"

rows = Bisection(0, 1, 30, "2*x^2 + 2*x - 2").calculate()
# {0: (a, b, f(a), f(b), xi, f(xi)), 1: (...), ...}

rows = FalsePosition(0, 1, 30, "2*x^2 + 2*x - 2").calculate()
# keys start at 1; at most max_iter - 1 steps are run

approximations = NewtonRaphson(1.0, "2*x^2 + 2*x - 2", 10).calculate()
# one approximation per iteration

iterations, description = solve_system(
    [[4, 1, 2], [3, 5, 1], [1, 1, 3]],
    [4, 7, 3],
)
print(description)
print(iterations[-1])                  # close to [0.5, 1.0, 0.5]
```

Bisection and false position stop early when the function is exactly zero at
an end of the interval. `solve_system` stops when two successive iterates agree
within 1e-8, or after 1000 iterations; it does not modify its arguments.

## Errors

- `NoRootInIntervalError` (from `metodos_numericos.bisection`): the function
  has the same sign at both ends of the interval.
- `ExpressionError` (from `metodos_numericos.evaluate`): the expression cannot
  be parsed or evaluated, for example an unknown name or function.
- `DerivativeError` (from `metodos_numericos.derive`): a term the
  differentiator does not recognise.
- `ValueError` from `solve_system` when the matrix is not square or does not
  match the length of the right-hand side.

## Limitations

The differentiator handles only simple forms: sums of polynomial terms with
integer coefficients and exponents, constant multiples, products, and `sin`,
`cos`, `tan`, `ln` and `exp`. The derivatives of `tan` and `ln` assume their
argument is plain `x`, and that of `exp` ignores the chain rule. Newton-Raphson
therefore only works for functions within these forms.

## Tests

```
pip install .[test]
pytest
```