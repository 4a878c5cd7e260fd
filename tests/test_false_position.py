import pytest

from metodos_numericos.bisection import NoRootInIntervalError
from metodos_numericos.false_position import FalsePosition


def test_converges_to_known_root():
    method = FalsePosition(number_one=0, number_two=1, max_iter=30, function="2*x^2 +2*x -2 ")
    data = method.calculate()
    assert len(data) > 0
    best = min(data.values(), key=lambda row: abs(row[5]))
    assert 0.617 <= best[4] <= 0.619


def test_keys_start_at_one():
    method = FalsePosition(number_one=0, number_two=1, max_iter=30, function="2*x^2 +2*x -2")
    data = method.calculate()
    assert min(data) == 1
    assert len(data) <= 29
    assert sorted(data) == list(range(1, len(data) + 1))


def test_estimate_stays_inside_interval():
    method = FalsePosition(number_one=0, number_two=1, max_iter=10, function="2*x^2 +2*x -2")
    for a, b, fa, fb, xi, _ in method.calculate().values():
        assert min(a, b) <= xi <= max(a, b)
        assert xi == pytest.approx((a * fb - b * fa) / (fb - fa))


def test_first_estimate_of_linear_function_is_exact():
    method = FalsePosition(number_one=0, number_two=4, max_iter=2, function="x-1")
    data = method.calculate()
    assert list(data) == [1]
    assert data[1][4] == pytest.approx(1.0)


def test_root_at_right_end_stops():
    method = FalsePosition(number_one=0, number_two=1, max_iter=10, function="x-1")
    assert method.calculate() == {1: (0.0, 1.0, -1.0, 0.0, 1.0, 0.0)}


def test_root_at_left_end_stops():
    method = FalsePosition(number_one=0, number_two=1, max_iter=10, function="x")
    assert method.calculate() == {1: (0.0, 1.0, 0.0, 1.0, 0.0, 0.0)}


def test_interval_without_sign_change_raises():
    method = FalsePosition(number_one=2, number_two=3, max_iter=10, function="x")
    with pytest.raises(NoRootInIntervalError):
        method.calculate()


def test_single_iteration_limit_runs_nothing():
    method = FalsePosition(number_one=0, number_two=1, max_iter=1, function="x")
    assert method.calculate() == {}