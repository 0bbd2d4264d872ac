"""Classroom exercises: exam eligibility, multiplication tables, range means,
boat departures and course retakes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from itertools import count

from curpkit.textutils import ask_number

STUDENTS = 40
UNITS = 5
EXAM_PASSING_AVERAGE = 50
MIN_GRADE = 0
MAX_GRADE = 100

MAX_TOURISTS = 10
MAX_TOURIST_WEIGHT = 805
WEIGHT_LIMIT = 806
LIGHT_LOAD = 700

PARTIALS = 3
MAX_ATTEMPTS = 3
COURSE_PASSING_AVERAGE = 60


class BoatVerdict(Enum):
    """What the boat check concludes."""

    MAX_PASSENGERS = "Se cumplio la condicion de maximo 10 pasajeros"
    WEIGHT_OK = "cumple la condicion de peso"
    OVERWEIGHT = "Excede la cantidad de peso, no zarpara"


class RetakeOutcome(Enum):
    """Result of one attempt at a course."""

    APPROVED = "Aprobado"
    REPEAT = "Repetir"
    ACADEMIC_DROP = "Baja academica"


def _checked_grades(grades: Iterable[int], expected: int) -> list[int]:
    values = list(grades)
    if len(values) != expected:
        raise ValueError(f"expected {expected} grades, got {len(values)}")
    for grade in values:
        if not MIN_GRADE <= grade <= MAX_GRADE:
            raise ValueError(f"grade out of range: {grade}")
    return values


def count_exam_eligible(grades: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Count students with and without the right to a make-up exam.

    Each item holds one student's five unit grades. The running average is
    carried from one student to the next: each student's total is added to
    the previous average before dividing by five.
    """
    eligible = not_eligible = 0
    average = 0.0
    for student in grades:
        average = (average + sum(_checked_grades(student, UNITS))) / UNITS
        if average < EXAM_PASSING_AVERAGE:
            not_eligible += 1
        else:
            eligible += 1
    return eligible, not_eligible


def multiplication_tables() -> list[str]:
    """Return the lines of the multiplication tables from 1 to 10."""
    lines = []
    for left in range(1, 11):
        lines.append(f"TABLA DEL {left}")
        lines.extend(f"{left} X {right} = {left * right}" for right in range(1, 11))
    return lines


def range_mean(low: int, high: int, numbers: Iterable[int]) -> tuple[int, float]:
    """Sum and mean of one number per value from *low* to *high*.

    Exactly ``high - low + 1`` numbers are expected, each between *low* and
    *high*.
    """
    if high < low:
        raise ValueError(f"empty range: {low} > {high}")
    values = list(numbers)
    expected = high - low + 1
    if len(values) != expected:
        raise ValueError(f"expected {expected} numbers, got {len(values)}")
    for number in values:
        if not low <= number <= high:
            raise ValueError(f"number out of range: {number}")
    total = sum(values)
    return total, total / expected


def boat_departure(weights: Iterable[int]) -> tuple[int, float, BoatVerdict]:
    """Board tourists until ten are aboard or the weight limit is reached.

    Weights are taken lazily, only as many as are needed. Returns the number
    of tourists aboard, their average weight and the verdict.
    """
    source = iter(weights)
    total = passengers = 0
    while total < WEIGHT_LIMIT and passengers < MAX_TOURISTS:
        try:
            weight = next(source)
        except StopIteration:
            raise ValueError("not enough weights to decide") from None
        if not 0 <= weight <= MAX_TOURIST_WEIGHT:
            raise ValueError(f"weight out of range: {weight}")
        total += weight
        passengers += 1

    average = total / passengers
    if passengers == MAX_TOURISTS and total < LIGHT_LOAD:
        verdict = BoatVerdict.MAX_PASSENGERS
    elif total < WEIGHT_LIMIT:
        verdict = BoatVerdict.WEIGHT_OK
    else:
        verdict = BoatVerdict.OVERWEIGHT
    return passengers, average, verdict


def retake_course(attempts: Iterable[Sequence[int]]) -> Iterator[RetakeOutcome]:
    """Yield the outcome of each attempt until the course is passed or dropped.

    Each attempt holds three partial grades. The previous average is carried
    into the next attempt's total before dividing by three.
    """
    source = iter(attempts)
    average = 0.0
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            grades = next(source)
        except StopIteration:
            raise ValueError("not enough attempts to decide") from None
        average = (average + sum(_checked_grades(grades, PARTIALS))) / PARTIALS
        if average >= COURSE_PASSING_AVERAGE:
            yield RetakeOutcome.APPROVED
            return
        yield RetakeOutcome.ACADEMIC_DROP if attempt == MAX_ATTEMPTS else RetakeOutcome.REPEAT


def _write(text: str) -> None:
    print(text, end="")


def _ask(low: int, high: int, message: str = "") -> int:
    _write(message)
    return ask_number(low, high, "", "", input, _write)


def _read_int(prompt: str) -> int:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return 0


def _run_grades() -> None:
    def students() -> Iterator[list[int]]:
        for student in range(1, STUDENTS + 1):
            yield [
                _ask(
                    MIN_GRADE,
                    MAX_GRADE,
                    f"Ingrese la calificacion del alumno {student} de la unidad {unit}\n",
                )
                for unit in range(1, UNITS + 1)
            ]

    eligible, not_eligible = count_exam_eligible(students())
    print(f"La cantidad de alumnos con derecho a examen de nivelacion es de: {eligible}")
    print(f"La cantidad de alumnos sin derecho a examen de nivelacion es de: {not_eligible}")


def _run_tables() -> None:
    print("\n".join(multiplication_tables()))


def _run_range() -> None:
    low = _read_int("Ingrese el numero menor de sus numeros\n")
    high = _read_int("Ingrese el numero mayor de sus numeros\n")
    if high < low:
        print("El rango no contiene numeros")
        return
    numbers = [_ask(low, high, "Ingresa un numero\n") for _ in range(low, high + 1)]
    total, mean = range_mean(low, high, numbers)
    print(f"La suma de los numeros es {total} ")
    print(f"El promedio de los nuemros es {mean:.2f}")


def _run_boat() -> None:
    weights = (
        _ask(0, MAX_TOURIST_WEIGHT, f"Turista {tourist}, cual es su peso?\n")
        for tourist in count(1)
    )
    _, average, verdict = boat_departure(weights)
    print(f"El promedio de los turistas es de {average:.2f}")
    print(verdict.value)


def _run_retake() -> None:
    def attempts() -> Iterator[list[int]]:
        while True:
            yield [
                _ask(MIN_GRADE, MAX_GRADE, f"Ingresa la calificacion del parcial {partial} ")
                for partial in range(1, PARTIALS + 1)
            ]

    for outcome in retake_course(attempts()):
        print(outcome.value)


_ACTIONS = {
    1: _run_grades,
    2: _run_tables,
    3: _run_range,
    4: _run_boat,
    5: _run_retake,
}


def main(argv: list[str] | None = None) -> int:
    """Show the menu, run the chosen exercise and return the exit status."""
    option = _ask(
        1,
        5,
        "            MENU\n"
        "1.-Alumnos con derecho a examen\n"
        "2.-Tablas de multiplicar\n"
        "3.-Numeros dentro de un rango\n"
        "4.-Embarcacion de los cabos\n"
        "5.-Recursar materia\n"
        "\nELIGE UNA OPCION\n",
    )
    _ACTIONS[option]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())