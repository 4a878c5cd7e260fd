import pytest

from metodos_numericos.gauss_seidel import solve_system


def _example():
    return [[4, 1, 2], [3, 5, 1], [1, 1, 3]], [4, 7, 3]


def test_solves_example_system():
    a, b = _example()
    iterations, description = solve_system(a, b)
    assert len(iterations) > 0
    assert description.startswith("System of equations:")
    expected = [0.5, 1.0, 0.5]
    for got, want in zip(iterations[-1], expected):
        assert abs(got - want) <= 1e-2


def test_solution_satisfies_system():
    a, b = _example()
    iterations, _ = solve_system(a, b)
    solution = iterations[-1]
    for row, value in zip(a, b):
        assert sum(c * v for c, v in zip(row, solution)) == pytest.approx(value, abs=1e-6)


def test_stops_before_limit_and_last_two_agree():
    a, b = _example()
    iterations, _ = solve_system(a, b)
    assert 1 < len(iterations) < 1000
    assert iterations[-1] == pytest.approx(iterations[-2], abs=1e-8)


def test_description_format():
    a, b = _example()
    _, description = solve_system(a, b)
    lines = description.splitlines()
    assert lines[0] == "System of equations:"
    assert lines[1] == "[  4*x1 +   1*x2 +   2*x3 ] = [  4]"
    assert lines[2] == "[  3*x1 +   5*x2 +   1*x3 ] = [  7]"
    assert lines[3] == "[  1*x1 +   1*x2 +   3*x3 ] = [  3]"


def test_pivoting_reorders_rows():
    _, description = solve_system([[1, 1], [4, 1]], [2, 5])
    lines = description.splitlines()
    assert lines[1] == "[  4*x1 +   1*x2 ] = [  5]"
    assert lines[2] == "[  1*x1 +   1*x2 ] = [  2]"


def test_inputs_are_not_modified():
    a, b = [[1, 1], [4, 1]], [2, 5]
    solve_system(a, b)
    assert a == [[1, 1], [4, 1]]
    assert b == [2, 5]


def test_fractional_and_small_values_in_description():
    iterations, description = solve_system([[0.5]], [1e-05])
    assert description == "System of equations:\n[0.5*x1 ] = [1e-05]\n"
    assert iterations[-1][0] == pytest.approx(2e-05)


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError):
        solve_system([[1, 2], [3, 4]], [1, 2, 3])
    with pytest.raises(ValueError):
        solve_system([[1, 2], [3]], [1, 2])