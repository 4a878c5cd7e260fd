"""Root finding by the Newton-Raphson method."""

from __future__ import annotations

from dataclasses import dataclass

from .derive import derive
from .evaluate import _divide, evaluate_function


@dataclass
class NewtonRaphson:
    """Newton-Raphson iteration starting from ``number``."""

    number: float
    function: str
    max_iter: int

    def calculate(self) -> list[float]:
        """Return the approximation produced by each iteration."""
        derivative = derive(self.function)
        xi = float(self.number)
        approximations = []
        for _ in range(self.max_iter):
            value = evaluate_function(xi, self.function)
            slope = evaluate_function(xi, derivative)
            xi -= _divide(value, slope)
            approximations.append(xi)
        return approximations