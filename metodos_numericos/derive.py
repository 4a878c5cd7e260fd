"""Symbolic differentiation of simple expressions in the variable x."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


class DerivativeError(ValueError):
    """Raised when a term of an expression cannot be differentiated."""


def derive(expr: str) -> str:
    """Return the derivative of ``expr`` with respect to x as a string."""
    if expr == "0":
        return "(0)"

    expr = expr.replace(" ", "")
    derivatives = []
    for term in _split_terms(expr):
        derivative = _derive_term(term)
        if derivative != "0":
            derivatives.append(_simplify_term(derivative))

    return _join(derivatives)


def _split_terms(expr: str) -> list[str]:
    """Split an expression into additive terms, keeping each term's sign."""
    terms: list[str] = []
    current: list[str] = []
    depth = 0

    for position, char in enumerate(expr):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1

        if depth == 0 and (char == "+" or (char == "-" and position > 0)):
            if current:
                terms.append("".join(current))
                current = []
            if char == "-":
                current.append("-")
        else:
            current.append(char)

    if current:
        terms.append("".join(current))
    return terms


def _parse_int(text: str) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise ValueError(text)
    return int(text)


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _signed(result: str, negative: bool) -> str:
    return "-" + result if negative else result


def _derive_term(term: str) -> str:
    negative = term.startswith("-")
    if negative:
        term = term[1:]

    if "(" in term:
        return _derive_function(term, negative)
    if "*" in term:
        return _derive_product(term, negative)
    if "x" in term:
        return _derive_polynomial(term, negative)
    if _is_number(term):
        return "0"

    raise DerivativeError(f"término no reconocido: {term}")


def _inner_argument(term: str, prefix: str) -> str:
    if len(term) <= len(prefix):
        raise DerivativeError(f"función no reconocida: {term}")
    return term[len(prefix):-1]


def _derive_function(term: str, negative: bool) -> str:
    if term.startswith("sin("):
        inner = _inner_argument(term, "sin(")
        inner_derivative = derive(inner)
        result = f"cos({inner})"
        if inner_derivative != "1":
            result = f"{result}*({inner_derivative})"
        return _signed(result, negative)

    if term.startswith("cos("):
        inner = _inner_argument(term, "cos(")
        inner_derivative = derive(inner)
        result = f"-sin({inner})"
        if inner_derivative != "1":
            result = f"{result}*({inner_derivative})"
        return _signed(result, negative)

    if term.startswith("tan("):
        return _signed("sec^2(x)", negative)

    if term.startswith("ln("):
        return _signed("1/x", negative)

    if term.startswith("exp("):
        inner = _inner_argument(term, "exp(")
        return _signed(f"exp({inner})", negative)

    raise DerivativeError(f"función no reconocida: {term}")


def _derive_product(term: str, negative: bool) -> str:
    parts = term.split("*")

    if len(parts) == 2 and "x" not in parts[0]:
        try:
            coefficient = _parse_int(parts[0])
        except ValueError:
            pass
        else:
            derivative = _derive_term(parts[1])
            if negative:
                coefficient = -coefficient
            return f"{coefficient}*{derivative}"

    products = []
    for index, part in enumerate(parts):
        derivative = _derive_term(part)
        products.append("*".join([*parts[:index], derivative, *parts[index + 1:]]))

    result = " + ".join(products)
    return f"-({result})" if negative else result


def _derive_polynomial(term: str, negative: bool) -> str:
    if term == "x":
        return "-1" if negative else "1"

    if term.startswith("x^"):
        try:
            exponent = _parse_int(term[2:])
        except ValueError:
            raise DerivativeError(f"exponente inválido: {term[2:]}") from None
        return _signed(f"{exponent}*x^{exponent - 1}", negative)

    if "x^" in term:
        parts = term.split("x^")
        try:
            coefficient = _parse_int(parts[0])
        except ValueError:
            raise DerivativeError(f"coeficiente inválido: {parts[0]}") from None
        try:
            exponent = _parse_int(parts[1])
        except ValueError:
            raise DerivativeError(f"exponente inválido: {parts[1]}") from None

        new_coefficient = coefficient * exponent
        if negative:
            new_coefficient = -new_coefficient
        if exponent - 1 == 0:
            return f"{new_coefficient}"
        if exponent - 1 == 1:
            return f"{new_coefficient}*x"
        return f"{new_coefficient}*x^{exponent - 1}"

    raise DerivativeError(f"término polinomial no reconocido: {term}")


def _join(derivatives: list[str]) -> str:
    if not derivatives:
        return "0"
    head, *rest = derivatives
    return head + "".join(
        f" {term}" if term.startswith("-") else f" + {term}" for term in rest
    )


def _replace_all(term: str, old: str, new: str) -> str:
    while old in term:
        term = term.replace(old, new)
    return term


def _simplify_term(term: str) -> str:
    """Tidy forms such as '2*x^1' into '2*x' and '3*1' into '3'."""
    term = _replace_all(term, "x^1", "x")
    if term.endswith("*1"):
        term = term[:-2]
    if term.endswith("^1"):
        term = term[:-2]
    term = _replace_all(term, "x^0", "1")
    term = _replace_all(term, "1*x", "x")
    term = _replace_all(term, "0*x", "0")
    return term