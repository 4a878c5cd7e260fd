"""Interactive command line for the numerical methods."""

from __future__ import annotations

import argparse
import math
from typing import Callable

from .bisection import Bisection, NoRootInIntervalError
from .derive import DerivativeError
from .evaluate import ExpressionError
from .false_position import FalsePosition
from .gauss_seidel import _format_g, solve_system
from .newton_raphson import NewtonRaphson

_MENU = {
    1: "Biseccion",
    2: "Regla Falsa",
    3: "Newton Raphson",
    4: "Gauss Seidel",
}


class _InputError(Exception):
    """Raised when the user types something that cannot be used."""


def _read_float(prompt: str) -> float:
    text = input(prompt).strip()
    try:
        return float(text)
    except ValueError:
        raise _InputError(f"número inválido: {text!r}") from None


def _read_int(prompt: str) -> int:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise _InputError(f"entero inválido: {text!r}") from None


def _read_function() -> str:
    return input("ingresa la funcion: ").strip()


def _format_f(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:f}"


def _print_data(data: dict[int, tuple[float, ...]]) -> None:
    for key in sorted(data):
        print(f"Clave: {key}")
        for value in data[key]:
            print(f"\tValor: {_format_f(value)}")


def _run_bracketing(method: type[Bisection] | type[FalsePosition]) -> int:
    first = _read_float("ingresa el num1: ")
    second = _read_float("ingresa el num2: ")
    iterations = _read_int("ingresa el numero interaciones: ")
    function = _read_function()
    try:
        data = method(first, second, iterations, function).calculate()
    except (NoRootInIntervalError, ExpressionError) as exc:
        print(exc)
        return 1
    _print_data(data)
    return 0


def _run_bisection() -> int:
    return _run_bracketing(Bisection)


def _run_false_position() -> int:
    return _run_bracketing(FalsePosition)


def _run_newton() -> int:
    start = _read_float("Ingresa el numero: ")
    iterations = _read_int("ingresa el numero interaciones: ")
    function = _read_function()
    try:
        result = NewtonRaphson(start, function, iterations).calculate()
    except (DerivativeError, ExpressionError) as exc:
        print(exc)
        return 1
    print("Aproximaciones de la raíz:")
    for number, value in enumerate(result, start=1):
        print(f"Iteración {number}: {_format_g(value)}")
    return 0


def _parse_values(line: str, size: int, invalid: Callable[[int], str]) -> list[float]:
    values = []
    for position, text in enumerate(line.split(), start=1):
        try:
            values.append(float(text))
        except ValueError:
            raise _InputError(invalid(position)) from None
    return values


def _read_system() -> tuple[list[list[float]], list[float]]:
    print("Ejemplo de sistema 3x3:")
    print("  4 1 2")
    print("  3 5 1")
    print("  1 1 3")
    print("Vector RHS: 4 7 3")
    print("Enter the number of rows for the matrix:")
    try:
        size = int(input().strip())
    except ValueError:
        size = 0
    if size <= 0:
        raise _InputError("Número de filas inválido.")

    matrix = []
    print("Enter the matrix row by row (space-separated values):")
    for row_number in range(1, size + 1):
        line = input()
        if len(line.split()) != size:
            raise _InputError(f"Fila {row_number} inválida. Debe tener {size} valores.")
        matrix.append(
            _parse_values(
                line,
                size,
                lambda column, row=row_number: (
                    f"Valor inválido en la fila {row}, columna {column}."
                ),
            )
        )

    print("Enter the RHS vector (space-separated values):")
    line = input()
    if len(line.split()) != size:
        raise _InputError(
            "El vector RHS debe tener el mismo número de valores que filas la matriz."
        )
    rhs = _parse_values(
        line, size, lambda position: f"Valor inválido en el vector RHS en la posición {position}."
    )
    return matrix, rhs


def _run_gauss_seidel() -> int:
    matrix, rhs = _read_system()
    iterations, description = solve_system(matrix, rhs)
    print(description)
    for number, solution in enumerate(iterations, start=1):
        print(f"Iteration {number}: [{' '.join(map(_format_g, solution))}]")
    return 0


_RUNNERS: dict[int, Callable[[], int]] = {
    1: _run_bisection,
    2: _run_false_position,
    3: _run_newton,
    4: _run_gauss_seidel,
}


def main(argv=None) -> int:
    """Show the menu, read the chosen method's input from stdin and print its results."""
    parser = argparse.ArgumentParser(
        prog="metodos-numericos",
        description="Métodos numéricos interactivos: raíces y sistemas lineales.",
    )
    parser.parse_args(argv)

    print("---------------- Metodos --------------------")
    for key, name in _MENU.items():
        print(key, name)

    try:
        try:
            option = int(input("Selecciona: ").strip())
        except ValueError:
            option = 0
        runner = _RUNNERS.get(option)
        if runner is None:
            print("Opcion no existe")
            return 0
        return runner()
    except EOFError:
        print()
        print("entrada incompleta")
        return 1
    except _InputError as exc:
        print(exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())