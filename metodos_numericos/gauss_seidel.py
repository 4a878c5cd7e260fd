"""Iterative solution of linear systems by the Gauss-Seidel method."""

from __future__ import annotations

import math
from decimal import Decimal

from .evaluate import _divide

_MAX_ITERATIONS = 1000
_TOLERANCE = 1e-8


def _format_g(value: float) -> str:
    """Format a float with its shortest digits in the %g style, right-aligned to 3."""
    if math.isnan(value):
        text = "NaN"
    elif math.isinf(value):
        text = "+Inf" if value > 0 else "-Inf"
    elif value == 0:
        text = "-0" if math.copysign(1.0, value) < 0 else "0"
    else:
        number = Decimal(repr(value)).normalize()
        sign, digits, exponent = number.as_tuple()
        magnitude = len(digits) + exponent - 1
        if -4 <= magnitude < 6:
            text = format(number, "f")
        else:
            mantissa = "".join(map(str, digits))
            if len(mantissa) > 1:
                mantissa = f"{mantissa[0]}.{mantissa[1:]}"
            text = f"{'-' if sign else ''}{mantissa}e{magnitude:+03d}"
    return f"{text:>3}"


def solve_system(a, b) -> tuple[list[list[float]], str]:
    """Solve ``a @ x = b``; return every iterate and a description of the system.

    Rows are reordered by partial pivoting first. Iteration stops when two
    successive iterates agree within 1e-8, or after 1000 iterations.
    """
    matrix = [[float(value) for value in row] for row in a]
    rhs = [float(value) for value in b]
    size = len(rhs)
    if len(matrix) != size or any(len(row) != size for row in matrix):
        raise ValueError("la matriz debe ser cuadrada y tener tantas filas como valores el vector")

    for column in range(size):
        best = max(range(column, size), key=lambda row: abs(matrix[row][column]))
        matrix[column], matrix[best] = matrix[best], matrix[column]
        rhs[column], rhs[best] = rhs[best], rhs[column]

    description = "System of equations:\n" + "".join(
        "["
        + "+ ".join(f"{_format_g(coef)}*x{number} " for number, coef in enumerate(row, start=1))
        + f"] = [{_format_g(value)}]\n"
        for row, value in zip(matrix, rhs)
    )

    x = [0.0] * size
    iterations: list[list[float]] = []
    for _ in range(_MAX_ITERATIONS):
        x_new = list(x)
        for i, (row, value) in enumerate(zip(matrix, rhs)):
            lower = sum(coef * known for coef, known in zip(row[:i], x_new[:i]))
            upper = sum(coef * known for coef, known in zip(row[i + 1:], x[i + 1:]))
            x_new[i] = _divide(value - lower - upper, row[i])
        iterations.append(x_new)
        if all(abs(old - new) <= _TOLERANCE for old, new in zip(x, x_new)):
            break
        x = list(x_new)

    return iterations, description