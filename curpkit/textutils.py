"""Small text and number helpers used by the CURP builder and the exercises."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise

_VOWELS = frozenset("AEIOU")
_VOWEL_MARKS = frozenset("AEIOU/-.")
_NON_CONSONANTS = frozenset("AEIOU ")
_ENIE = frozenset("ñÑ")
_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
MAX_NAME_LENGTH = 30


class InvalidNameError(ValueError):
    """Raised when a name or surname holds characters that are not allowed."""


def _to_int(text: str) -> int:
    """Read the leading integer of *text*, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def search_sequential(values: Sequence, target) -> int | None:
    """Return the index of the first item equal to *target*, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def search_sorted(values: Sequence, target) -> int | None:
    """Search an ascending sequence, stopping as soon as *target* is passed."""
    for index, value in enumerate(values):
        if target < value:
            return None
        if target == value:
            return index
    return None


def search_matrix(matrix: Iterable[Iterable], target) -> int | None:
    """Return the index of the first row holding *target*, or None."""
    for row_index, row in enumerate(matrix):
        if target in row:
            return row_index
    return None


def sort_values(values: Iterable) -> list:
    """Return the values in ascending order."""
    return sorted(values)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of *text*, leaving every other character as is."""
    return text.translate(_UPPER_TABLE)


def random_in_range(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer between *low* and *high*, both included."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return (rng or random).randint(low, high)


def is_alpha(text: str) -> bool:
    """True when every character other than a space is an upper-case ASCII letter."""
    return all(ch == " " or "A" <= ch <= "Z" for ch in text)


def has_valid_spacing(text: str) -> bool:
    """True when *text* does not start with a space and holds no double space."""
    if text.startswith(" "):
        return False
    return "  " not in text


def remove_spaces(text: str) -> str:
    """Drop every space from *text*."""
    return text.replace(" ", "")


def replace_enie(text: str) -> str:
    """Replace every Ñ or ñ with X."""
    return "".join("X" if ch in _ENIE else ch for ch in text)


def replace_u_diaeresis(text: str) -> str:
    """Replace every Ü or ü with U."""
    return text.replace("ü", "U").replace("Ü", "U")


def first_vowel(text: str) -> str:
    """First vowel (or / - .) after the first character, X when there is none."""
    return next((ch for ch in text[1:] if ch in _VOWEL_MARKS), "X")


def first_consonant(text: str) -> str:
    """First non-vowel, non-space character after the first one, X when there is none."""
    return next((ch for ch in text[1:] if ch not in _NON_CONSONANTS), "X")


def strip_prefixes(text: str, prefixes: Iterable[str]) -> str:
    """Remove each prefix in turn from the start of *text* when it is there."""
    for prefix in prefixes:
        if prefix and text.startswith(prefix):
            text = text[len(prefix):]
    return text


def validate_name(text: str) -> str:
    """Check and clean a name as typed by a user.

    The text is upper-cased, "MAX" becomes "MAXX", Ü becomes U and every dot
    becomes X. Raises InvalidNameError for empty input, a leading space, a
    double space, special characters or more than 30 characters.
    """
    name = to_upper(text)
    if name == "MAX":
        name = "MAXX"
    name = name.replace("Ü", "U")
    if not name or name[0] == " ":
        raise InvalidNameError("name is empty or starts with a space")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(f"name is longer than {MAX_NAME_LENGTH} characters")

    cleaned = []
    for ch, following in pairwise(name + "\0"):
        if ch == " ":
            if following == " ":
                raise InvalidNameError("name holds two spaces in a row")
            cleaned.append(ch)
        elif "A" <= ch <= "Z" or ch in _ENIE:
            cleaned.append(ch)
        elif ch == ".":
            cleaned.append("X")
        else:
            raise InvalidNameError(f"special character not allowed: {ch!r}")
    return "".join(cleaned)


def ask_number(
    low: int,
    high: int,
    prompt: str,
    error: str,
    input_func: Callable[[], str] = input,
    output: Callable[[str], object] | None = None,
) -> int:
    """Prompt until the user enters an integer between *low* and *high*."""
    write = output or sys.stdout.write
    while True:
        write(prompt)
        number = _to_int(input_func())
        if low <= number <= high:
            return number
        write(error)