import pytest

from metodos_numericos.derive import DerivativeError, derive


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("x^2", "2*x"),
        ("3*x", "3"),
        ("sin(x)", "cos(x)"),
        ("cos(x)", "-sin(x)"),
        ("5", "0"),
    ],
)
def test_source_cases(expression, expected):
    assert derive(expression) == expected


def test_literal_zero_is_parenthesised():
    assert derive("0") == "(0)"


def test_polynomial_sum():
    assert derive("x^2 + 3*x + 5") == "2*x + 3"


def test_negative_term_joined_without_plus():
    assert derive("x - x^2") == "1 -2*x"


def test_higher_power():
    assert derive("x^3") == "3*x^2"


def test_negative_power_term():
    assert derive("-x^3") == "-3*x^2"


def test_coefficient_attached_to_power():
    assert derive("3x^2") == "6*x"


def test_newton_example_function():
    assert derive("2*x^2 + 2*x -2") == "2*2*x + 2"


def test_chain_rule_for_sine():
    assert derive("sin(2*x)") == "cos(2*x)*(2)"


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("tan(x)", "sec^2(x)"),
        ("ln(x)", "1/x"),
        ("exp(x)", "exp(x)"),
        ("-ln(x)", "-1/x"),
    ],
)
def test_other_functions(expression, expected):
    assert derive(expression) == expected


def test_negative_constant_vanishes():
    assert derive("-5") == "0"


@pytest.mark.parametrize("expression", ["y", "x^a", "foo(x)", "2x", "ax^2"])
def test_unrecognised_terms_raise(expression):
    with pytest.raises(DerivativeError):
        derive(expression)