"""Bisection, false position, Newton-Raphson and Gauss-Seidel for functions given as text."""

__version__ = "0.1.0"