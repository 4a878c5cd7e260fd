"""Root finding by the method of false position (regula falsi)."""

from __future__ import annotations

from dataclasses import dataclass

from .bisection import NoRootInIntervalError, Row
from .evaluate import evaluate_function


@dataclass
class FalsePosition:
    """False position method on the interval [number_one, number_two].

    ``calculate`` maps each iteration index, starting at 1, to the tuple
    ``(a, b, f(a), f(b), xi, f(xi))``; at most ``max_iter - 1`` steps run.
    """

    number_one: float
    number_two: float
    max_iter: int
    function: str

    def calculate(self) -> dict[int, Row]:
        a, b = float(self.number_one), float(self.number_two)
        data: dict[int, Row] = {}

        for step in range(1, self.max_iter):
            fa = evaluate_function(a, self.function)
            fb = evaluate_function(b, self.function)

            if fa == 0:
                data[step] = (a, b, fa, fb, a, fa)
                break
            if fb == 0:
                data[step] = (a, b, fa, fb, b, fb)
                break
            if fa * fb > 0:
                raise NoRootInIntervalError()

            xi = (a * fb - b * fa) / (fb - fa)
            fxi = evaluate_function(xi, self.function)
            data[step] = (a, b, fa, fb, xi, fxi)

            if fa * fxi < 0:
                b = xi
            else:
                a = xi

        return data