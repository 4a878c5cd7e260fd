"""Root finding by repeatedly halving a bracketing interval."""

from __future__ import annotations

from dataclasses import dataclass

from .evaluate import evaluate_function

Row = tuple[float, float, float, float, float, float]


class NoRootInIntervalError(ValueError):
    """Raised when the function has the same sign at both ends of the interval."""

    def __init__(
        self, message: str = "el intervalo no encierra una raíz, elige otro intervalo"
    ) -> None:
        super().__init__(message)


@dataclass
class Bisection:
    """Bisection method on the interval [number_one, number_two].

    ``calculate`` maps each iteration index, starting at 0, to the tuple
    ``(a, b, f(a), f(b), xi, f(xi))``.
    """

    number_one: float
    number_two: float
    max_iter: int
    function: str

    def calculate(self) -> dict[int, Row]:
        a, b = float(self.number_one), float(self.number_two)
        data: dict[int, Row] = {}

        for step in range(self.max_iter):
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

            xi = (a + b) / 2
            fxi = evaluate_function(xi, self.function)
            data[step] = (a, b, fa, fb, xi, fxi)

            if fa * fxi < 0:
                b = xi
            else:
                a = xi

        return data