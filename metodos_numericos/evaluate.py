"""Numeric evaluation of expressions in the variable x."""

from __future__ import annotations

import math
import operator
import re
from typing import Callable

_DIGITS = frozenset("0123456789")

_LEXEME = re.compile(
    r"(?P<number>[0-9.]+)"
    r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<op>\*\*|[-+*/%(),])"
)


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class _ParseError(Exception):
    pass


class _EvalError(Exception):
    pass


def evaluate_function(x: float, function: str) -> float:
    """Evaluate ``function`` at the point ``x``."""
    source = _convert_powers(_insert_multiplication(function))
    try:
        return float(_Evaluator(source, float(x)).run())
    except _ParseError as exc:
        raise ExpressionError(f"error en la expresión: {exc}") from None
    except _EvalError as exc:
        raise ExpressionError(f"error al evaluar la expresión: {exc}") from None


def _insert_multiplication(expr: str) -> str:
    """Insert '*' between a digit and x, so '2x' becomes '2*x'."""
    out = []
    for current, following in zip(expr, expr[1:]):
        out.append(current)
        if current in _DIGITS and following == "x":
            out.append("*")
    out.append(expr[-1:])
    return "".join(out)


def _operand_end(expr: str, start: int) -> int:
    if expr[start] == "x":
        return start + 1
    end = start
    while end < len(expr) and expr[end] in _DIGITS:
        end += 1
    return end


def _convert_powers(expr: str) -> str:
    """Rewrite 'x^n' and 'n^x' as 'pow(x,n)' and 'pow(n,x)'."""
    operands = _DIGITS | {"x"}
    out = []
    i = 0
    while i < len(expr):
        if i + 2 < len(expr) and expr[i] in operands and expr[i + 1] == "^" and expr[i + 2] in operands:
            base_end = _operand_end(expr, i)
            exp_end = _operand_end(expr, base_end + 1)
            out.append(f"pow({expr[i:base_end]},{expr[base_end + 1:exp_end]})")
            i = exp_end
        else:
            out.append(expr[i])
            i += 1
    return "".join(out)


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division giving infinity or NaN on a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _modulo(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _ieee(
    function: Callable[[float], float],
    overflow: Callable[[float], float] = lambda value: math.inf,
) -> Callable[[float], float]:
    """Wrap a math function so domain errors give NaN and overflow gives infinity."""

    def apply(value: float) -> float:
        try:
            return function(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return overflow(value)

    return apply


def _logarithm(function: Callable[[float], float]) -> Callable[[float], float]:
    def apply(value: float) -> float:
        try:
            return function(value)
        except ValueError:
            return -math.inf if value == 0 else math.nan

    return apply


_ln = _logarithm(math.log)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    whole = float(math.trunc(value))
    if abs(value - whole) >= 0.5:
        whole += math.copysign(1.0, value)
    return math.copysign(whole, value)


def _integral(function: Callable[[float], int]) -> Callable[[float], float]:
    def apply(value: float) -> float:
        if not math.isfinite(value):
            return value
        return math.copysign(float(function(value)), value)

    return apply


_FUNCTIONS: dict[str, tuple[Callable[..., float], int]] = {
    "sin": (_ieee(math.sin), 1),
    "cos": (_ieee(math.cos), 1),
    "tan": (_ieee(math.tan), 1),
    "asin": (_ieee(math.asin), 1),
    "acos": (_ieee(math.acos), 1),
    "atan": (math.atan, 1),
    "sinh": (_ieee(math.sinh, lambda value: math.copysign(math.inf, value)), 1),
    "cosh": (_ieee(math.cosh), 1),
    "tanh": (math.tanh, 1),
    "sqrt": (_ieee(math.sqrt), 1),
    "pow": (_power, 2),
    "ln": (_ln, 1),
    "log10": (_logarithm(math.log10), 1),
    "log": (lambda value, base: _divide(_ln(value), _ln(base)), 2),
    "exp": (_ieee(math.exp), 1),
    "round": (_round_half_away, 1),
    "floor": (_integral(math.floor), 1),
    "ceil": (_integral(math.ceil), 1),
    "abs": (math.fabs, 1),
}

_ADDITIVE = {"+": operator.add, "-": operator.sub}
_MULTIPLICATIVE = {"*": operator.mul, "/": _divide, "%": _modulo}
_EXPONENT = {"**": _power}


def _lex(source: str) -> list[tuple[str, str]]:
    pieces = []
    position = 0
    while position < len(source):
        if source[position].isspace():
            position += 1
            continue
        match = _LEXEME.match(source, position)
        if match is None:
            raise _ParseError(f"carácter inesperado {source[position]!r} en la posición {position}")
        pieces.append((match.lastgroup, match.group()))
        position = match.end()
    return pieces


class _Evaluator:
    """Recursive-descent parser that computes the value as it parses.

    Evaluation problems are held back until parsing has finished, so a
    syntax error is always reported first.
    """

    def __init__(self, source: str, x: float) -> None:
        self._pieces = _lex(source)
        self._pos = 0
        self._x = x
        self._problem: str | None = None

    def run(self) -> float:
        if not self._pieces:
            raise _ParseError("expresión vacía")
        value = self._sum()
        if self._pos < len(self._pieces):
            raise _ParseError(f"símbolo inesperado {self._pieces[self._pos][1]!r}")
        if self._problem is not None:
            raise _EvalError(self._problem)
        return value

    def _fail(self, message: str) -> float:
        if self._problem is None:
            self._problem = message
        return math.nan

    def _accept(self, *symbols: str) -> str | None:
        if self._pos < len(self._pieces):
            kind, text = self._pieces[self._pos]
            if kind == "op" and text in symbols:
                self._pos += 1
                return text
        return None

    def _expect(self, symbol: str) -> None:
        if self._accept(symbol) is None:
            raise _ParseError(f"se esperaba {symbol!r}")

    def _chain(self, operand: Callable[[], float], table: dict) -> float:
        value = operand()
        while (symbol := self._accept(*table)) is not None:
            value = table[symbol](value, operand())
        return value

    def _sum(self) -> float:
        return self._chain(self._product, _ADDITIVE)

    def _product(self) -> float:
        return self._chain(self._exponential, _MULTIPLICATIVE)

    def _exponential(self) -> float:
        return self._chain(self._prefix, _EXPONENT)

    def _prefix(self) -> float:
        if self._accept("-"):
            return -self._prefix()
        return self._value()

    def _value(self) -> float:
        if self._pos >= len(self._pieces):
            raise _ParseError("fin inesperado de la expresión")
        kind, text = self._pieces[self._pos]
        self._pos += 1

        if kind == "number":
            try:
                return float(text)
            except ValueError:
                raise _ParseError(f"número inválido {text!r}") from None
        if kind == "name":
            if self._accept("("):
                return self._call(text)
            if text == "x":
                return self._x
            return self._fail(f"no se encontró el parámetro {text!r}")
        if text == "(":
            value = self._sum()
            self._expect(")")
            return value
        raise _ParseError(f"símbolo inesperado {text!r}")

    def _call(self, name: str) -> float:
        if name not in _FUNCTIONS:
            raise _ParseError(f"función no definida {name!r}")
        function, arity = _FUNCTIONS[name]

        arguments: list[float] = []
        if self._accept(")") is None:
            arguments.append(self._sum())
            while self._accept(","):
                arguments.append(self._sum())
            self._expect(")")

        if len(arguments) < arity:
            return self._fail(f"la función {name!r} necesita {arity} argumento(s)")
        return function(*arguments[:arity])