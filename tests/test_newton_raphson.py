import math

import pytest

from metodos_numericos.derive import DerivativeError
from metodos_numericos.newton_raphson import NewtonRaphson


def test_converges_to_known_root():
    method = NewtonRaphson(number=1.0, max_iter=10, function="2*x^2 + 2*x -2")
    result = method.calculate()
    assert 0.617 <= result[-1] <= 0.619


def test_one_approximation_per_iteration():
    method = NewtonRaphson(number=1.0, max_iter=7, function="2*x^2 + 2*x -2")
    assert len(method.calculate()) == 7


def test_zero_iterations_gives_empty_list():
    method = NewtonRaphson(number=1.0, max_iter=0, function="x^2-4")
    assert method.calculate() == []


def test_finds_square_root():
    method = NewtonRaphson(number=1.0, max_iter=20, function="x^2-4")
    assert method.calculate()[-1] == pytest.approx(2.0)


def test_linear_function_solved_in_one_step():
    method = NewtonRaphson(number=10.0, max_iter=3, function="3*x-6")
    result = method.calculate()
    assert result[0] == pytest.approx(2.0)
    assert all(value == pytest.approx(2.0) for value in result)


def test_zero_derivative_gives_negative_infinity():
    method = NewtonRaphson(number=0.0, max_iter=1, function="x^2+1")
    assert method.calculate() == [-math.inf]


def test_underivable_function_raises():
    method = NewtonRaphson(number=1.0, max_iter=3, function="x^")
    with pytest.raises(DerivativeError):
        method.calculate()