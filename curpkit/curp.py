"""Build a Mexican CURP from a person's names, birth date, sex and state."""

from __future__ import annotations

import calendar
import random
from dataclasses import dataclass
from enum import Enum

from curpkit.textutils import (
    InvalidNameError,
    ask_number,
    first_consonant,
    first_vowel,
    remove_spaces,
    replace_enie,
    replace_u_diaeresis,
    strip_prefixes,
    validate_name,
)

FIRST_YEAR = 1900
LAST_YEAR = 2023
LAST_MONTH_OF_LAST_YEAR = 10

_PREFIXES = (
    "DA ", "DE ", "DI ", "DD ", "EL ", "LA ", "LE ", "MC ", "DAS ", "DEL ",
    "DER ", "DIE ", "LOS ", "LAS ", "LES ", "MAC ", "VAN ", "VON ", "Y ",
)
_PREFIX_PASSES = 3

_FORBIDDEN_WORDS = frozenset(
    """
    BACA BAKA BUEI BUEY CACA CACO CAGA CAGO CAKA CAKO COGE COGI COJA COJE
    COJI COJO COLA CULO FALO FETO GETA GUEI GUEY JETA JOTO KACA KACO KAGA
    KAGO KAKA KAKO KOGE KOGI KOJA KOJE KOJI KOJO KOLA KULO LILO LOCA LOCO
    LOKA LOKO MAME MAMO MEAR MEAS MEON MIAR MION MOCO MOKO MULA MULO NACA
    NACO PEDA PEDO PENE PIPI PITO POPO PUTA PUTO QULO RATA ROBA ROBE ROBO
    RUIN SENO TETA VACA VAGA VAGO VAKA VUEI VUEY WUEI WUEY
    """.split()
)

_STATE_CODES = (
    "AS", "BC", "BS", "CC", "CS", "CH", "CL", "CM", "DG", "GT", "GR", "HG",
    "JC", "MC", "MN", "MS", "NT", "NL", "OC", "PL", "QT", "QR", "SP", "SL",
    "SR", "TC", "TS", "TL", "VZ", "YN", "ZS", "DF", "NE",
)

_STATE_NAMES = (
    "AGUASCALIENTES", "BAJA CALIFORNIA", "BAJA CALIFORNIA SUR", "CAMPECHE",
    "CHIAPAS", "CHIHUAHUA", "COAHUILA", "COLIMA", "DURANGO", "GUANAJUATO",
    "GUERRERO", "HIDALGO", "JALISCO", "ESTADO DE MÉXICO", "MICHOACÁN",
    "MORELOS", "NAYARIT", "NUEVO LEÓN", "OAXACA", "PUEBLA", "QUERÉTARO",
    "QUINTANA ROO", "SAN LUIS POTOSÍ", "SINALOA", "SONORA", "TABASCO",
    "TAMAULIPAS", "TLAXCALA", "VERACRUZ", "YUCATÁN", "ZACATECAS",
    "CIUDAD DE MÉXICO", "EXTRANJERO",
)

_MONTH_NAMES = (
    "ENERO", "FEBRERO", "MARZO", "ABRIL", "MAYO", "JUNIO", "JULIO",
    "AGOSTO", "SEPTIEMBRE", "OCTUBRE", "NOVIEMBRE", "DICIEMBRE",
)

# First names that give way to the second name for the initial letter.
_INITIAL_SKIPPED_NAMES = frozenset({"JOSE", "MARIA", "JX", "MAX", "MA"})
# First names that give way to the second name for the internal consonant.
_CONSONANT_SKIPPED_NAMES = frozenset({"JOSE", "MARIA", "MAX", "MA", "M", "JX", "J"})


class Sex(Enum):
    """Sex as recorded in the CURP."""

    MALE = 1
    FEMALE = 2


@dataclass(frozen=True)
class Person:
    """The data a CURP is built from; names as typed and checked by validate_name."""

    name: str
    sex: Sex
    year: int
    month: int
    day: int
    state: int
    paternal: str = ""
    maternal: str = ""
    second_name: str = ""


def _strip_all_prefixes(text: str) -> str:
    for _ in range(_PREFIX_PASSES):
        text = strip_prefixes(text, _PREFIXES)
    return text


def normalize_surname(text: str) -> str:
    """Drop leading particles and spaces from a surname and replace Ñ with X."""
    return replace_enie(remove_spaces(_strip_all_prefixes(text)))


def normalize_given_name(text: str) -> str:
    """Replace Ñ and Ü, then drop leading particles and spaces from a given name."""
    return replace_u_diaeresis(remove_spaces(_strip_all_prefixes(replace_enie(text))))


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month of the given year."""
    return calendar.monthrange(year, month)[1]


def _principal_name(name: str, second_name: str, skipped: frozenset[str]) -> str:
    if name in skipped and second_name:
        return second_name
    return name


def initials(paternal: str, maternal: str, name: str, second_name: str) -> str:
    """The first four CURP letters, from normalized names.

    An empty surname gives X. When the four letters spell a forbidden word,
    the second letter becomes X.
    """
    first = paternal[:1] if paternal[:1] not in ("", "Ñ") else "X"
    vowel = first_vowel(paternal)
    if vowel in "/-.":
        vowel = "X"
    maternal_initial = maternal[:1] or "X"
    given = _principal_name(name, second_name, _INITIAL_SKIPPED_NAMES)[:1] or "X"
    word = first + vowel + maternal_initial + given
    if word in _FORBIDDEN_WORDS:
        word = word[0] + "X" + word[2:]
    return word


def date_part(year: int, month: int, day: int) -> str:
    """The YYMMDD part of the CURP."""
    if not 1 <= day <= days_in_month(year, month):
        raise ValueError(f"invalid day {day} for {year}-{month:02d}")
    return f"{year % 100:02d}{month:02d}{day:02d}"


def sex_letter(sex: Sex) -> str:
    """H for a man, M for a woman."""
    return "H" if Sex(sex) is Sex.MALE else "M"


def state_code(state: int) -> str:
    """Two-letter code of the birth state, numbered from 1 to 33."""
    if not 1 <= state <= len(_STATE_CODES):
        raise ValueError(f"state must be between 1 and {len(_STATE_CODES)}: {state}")
    return _STATE_CODES[state - 1]


def internal_consonants(paternal: str, maternal: str, name: str, second_name: str) -> str:
    """The first inner consonant of each surname and of the principal given name."""
    given = _principal_name(name, second_name, _CONSONANT_SKIPPED_NAMES)
    return first_consonant(paternal) + first_consonant(maternal) + first_consonant(given)


def century_letter(year: int) -> str:
    """0 for births before 2000, then A, B or C by decade."""
    if year < 2000:
        return "0"
    if year < 2010:
        return "A"
    if year < 2020:
        return "B"
    return "C"


def generate_curp(person: Person, rng: random.Random | None = None) -> str:
    """Build the 18-character CURP; the last digit is random between 1 and 9."""
    paternal = normalize_surname(person.paternal)
    maternal = normalize_surname(person.maternal)
    name = normalize_given_name(person.name)
    second_name = normalize_given_name(person.second_name)
    check = (rng or random).randint(1, 9)
    return "".join(
        (
            initials(paternal, maternal, name, second_name),
            date_part(person.year, person.month, person.day),
            sex_letter(person.sex),
            state_code(person.state),
            internal_consonants(paternal, maternal, name, second_name),
            century_letter(person.year),
            str(check),
        )
    )


def _write(text: str) -> None:
    print(text, end="")


def _ask(low: int, high: int, prompt: str, error: str) -> int:
    return ask_number(low, high, prompt, error, input, _write)


def _ask_name(prompt: str) -> str:
    _write(prompt)
    while True:
        try:
            return validate_name(input())
        except InvalidNameError as exc:
            print(str(exc).upper())
            print("INTENTALO DE NUEVO")


def _ask_optional_name(question: str, prompt: str) -> str:
    if _ask(1, 2, question, "OPCION INVALIDA, INGRESA 1 0 2\n") == 1:
        return _ask_name(prompt)
    return ""


def _ask_birth_date() -> tuple[int, int, int]:
    print("FECHA DE NACIMIENTO")
    year = _ask(FIRST_YEAR, LAST_YEAR, "ANIO DE NACIMIENTO: ", "OPCION INVALIDA, INGRESA OTRO ANIO\n")
    print("\n".join(f"{number}. {month}" for number, month in enumerate(_MONTH_NAMES, 1)))
    while True:
        month = _ask(1, 12, "ELIGE EL NUMERO DE TU MES: ", "OPCION INVALIDA, INGRESA OTRO MES\n")
        if not (year == LAST_YEAR and month > LAST_MONTH_OF_LAST_YEAR):
            break
    day = _ask(
        1,
        days_in_month(year, month),
        "INGRESA TU DIA DE NACIMIENTO EN NUMERO: ",
        "OPCION INVALIDA, INGRESA OTRO DIA\n",
    )
    return year, month, day


def _read_person() -> Person:
    paternal = _ask_optional_name(
        "TIENE APELLIDO PATERNO\n1.- SI \n2.- NO\n", "\nAPELLIDO PATERNO: "
    )
    maternal = _ask_optional_name(
        "TIENE APELLIDO MATERNO\n1.-SI\n2.-NO\n", "\nAPELLIDO MATERNO: "
    )
    name = _ask_name("\nPRIMER NOMBRE: ")
    second_name = _ask_optional_name(
        "TIENE OTRO NOMBRE \n1.- SI \n2.- NO\n", "\nOTRO(S) NOMBRE(S): "
    )
    sex = Sex(
        _ask(1, 2, "INGRESA TU SEXO\n1.-HOMBRE\n2.-MUJER\n", "OPCION INVALIDA, INGRESA 1 0 2\n")
    )
    year, month, day = _ask_birth_date()
    print("\n".join(f"{number}. {state}" for number, state in enumerate(_STATE_NAMES, 1)))
    state = _ask(
        1,
        len(_STATE_CODES),
        "INGRESA TU ESTADO DE NACIMIENTO: ",
        "OPCION INVALIDA, INGRESA UN NUMERO DEL 1 AL 33\n",
    )
    return Person(
        name=name,
        sex=sex,
        year=year,
        month=month,
        day=day,
        state=state,
        paternal=paternal,
        maternal=maternal,
        second_name=second_name,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CURP menu until the user chooses to leave."""
    while True:
        print("\t\nM E N U\n1. CURP\n2. SALIR")
        option = _ask(1, 2, "SELECCIONA UNA OPCION\n", "NUMERO INVALIDO\n")
        if option == 2:
            print("\nGRACIAS...")
            return 0
        print(generate_curp(_read_person()))
        input("Presione una tecla para continuar . . .")


if __name__ == "__main__":
    raise SystemExit(main())