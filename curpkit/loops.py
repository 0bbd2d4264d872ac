"""Fibonacci series, factorials and digit counts, each by a chosen loop style."""

from __future__ import annotations

import math
from collections.abc import Iterator
from enum import Enum
from itertools import islice


class LoopKind(Enum):
    """Loop style; a do-while loop always runs its body at least once."""

    FOR = 1
    WHILE = 2
    DO_WHILE = 3


def _fibonacci_terms() -> Iterator[int]:
    previous, current = -1, 1
    while True:
        value = previous + current
        yield value
        previous, current = current, value


def fibonacci(count: int, loop: LoopKind = LoopKind.FOR) -> list[int]:
    """Return the first *count* Fibonacci numbers, starting at 0."""
    loop = LoopKind(loop)
    terms = max(count, 1) if loop is LoopKind.DO_WHILE else max(count, 0)
    return list(islice(_fibonacci_terms(), terms))


def factorial(number: int, loop: LoopKind = LoopKind.FOR) -> int:
    """Return number!; numbers below 1 give 1."""
    LoopKind(loop)
    return math.prod(range(1, number + 1))


def digit_count(number: int, loop: LoopKind = LoopKind.FOR) -> int:
    """Count the decimal digits of *number*.

    Zero and negative numbers count as 0 digits, except with a do-while loop,
    which always counts at least one.
    """
    loop = LoopKind(loop)
    count, bound = (1, 10) if loop is LoopKind.DO_WHILE else (0, 1)
    while number >= bound:
        bound *= 10
        count += 1
    return count


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_loop() -> LoopKind | None:
    choice = _read_int(
        "CICLOS REPETITIVOS\n\t1.-FOR\n\t2.-WHILE\n\t3.-DO WHILE\n"
        "Con que ciclo desea trabajar\n"
    )
    try:
        return LoopKind(choice)
    except ValueError:
        return None


def _run_fibonacci() -> None:
    loop = _read_loop()
    count = _read_int("Cuantas veces quiere mostrar fibonacci\n") or 0
    if loop is None:
        print("Opcion invalida, intentalo de nuevo")
        return
    print(" ".join(str(term) for term in fibonacci(count, loop)))


def _run_factorial() -> None:
    loop = _read_loop()
    number = _read_int("De que numero desea su factorial ") or 0
    result = 1
    if loop is None:
        print("Opcion no valida, intentalo de nuevo")
    else:
        result = factorial(number, loop)
    print(f"el factorial de {number} es {result}")


def _run_digits() -> None:
    loop = _read_loop()
    number = _read_int("Ingresa un numero ") or 0
    digits = 0
    if loop is None:
        print("opcion no valida, intantalo de nuevo")
    else:
        digits = digit_count(number, loop)
    print(f"El {number} tiene {digits} digitos")


_ACTIONS = {1: _run_fibonacci, 2: _run_factorial, 3: _run_digits}


def main(argv: list[str] | None = None) -> int:
    """Show the menu, run the chosen exercise and return the exit status."""
    option = _read_int(
        "MENU\n1.-FIBOANACCI\n2.--FACTORIAL\n3.-DIGITOS\nIngrese la opcion a realizar\n"
    )
    action = _ACTIONS.get(option)
    if action is not None:
        action()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())