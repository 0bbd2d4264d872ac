# curpkit

Tools for building a CURP (the Mexican population registry code), together
with a few small interactive console exercises. Prompts and messages are in
Spanish.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Commands

- `curpkit-curp`: a menu that asks for surnames, given names, sex, date of
  birth (years 1900 to 2023) and state of birth, then prints an
  18-character CURP. It repeats until option 2 is chosen.
- `curpkit-loops`: a menu with the Fibonacci series, the factorial and a
  digit count. Each one asks whether to run as a `for`, `while` or
  `do while` style loop, runs once and exits.
- `curpkit-exercises`: a menu with exam eligibility for 40 students,
  multiplication tables from 1 to 10, the sum and mean of numbers within a
  range, a boat departure check and course retake tracking. It runs the
  chosen exercise once and exits.

## Library use

```python
import random
from curpkit.curp import Person, Sex, generate_curp

person = Person(
    paternal="GARCIA",
    maternal="LOPEZ",
    name="JUAN",
    sex=Sex.MALE,
    year=1990,
    month=5,
    day=17,
    state=9,
)
print(generate_curp(person, random.Random(0)))
```

`generate_curp` raises `ValueError` for a day that does not exist in the
given month or a state number outside 1 to 33.

The pieces of the code are also available on their own in `curpkit.curp`:
`initials`, `date_part`, `sex_letter`, `state_code`, `internal_consonants`,
`century_letter` and `days_in_month`. Names are cleaned with
`normalize_surname` and `normalize_given_name`, which drop leading particles
such as `DE `, `DEL ` or `LA `, remove spaces and replace Ñ with X.

`curpkit.textutils` holds the text and search helpers (`search_sequential`,
`search_sorted`, `search_matrix`, `first_vowel`, `first_consonant`,
`strip_prefixes` and others). `validate_name` upper-cases a typed name and
raises `InvalidNameError` when it is empty, starts with a space, holds two
spaces in a row, holds special characters or is longer than 30 characters.
`ask_number` prompts until an integer within a range is entered.

`curpkit.loops` and `curpkit.exercises` offer the calculations behind each
menu entry as plain functions: `fibonacci`, `factorial`, `digit_count`,
`count_exam_eligible`, `multiplication_tables`, `range_mean`,
`boat_departure` and `retake_course`.

## What it does not do

- The last character of the CURP is a random digit from 1 to 9. It is not
  the official check digit, and character 17 only reflects the birth decade,
  so a generated CURP is not guaranteed to match the one actually issued.
- Nothing is looked up or stored: there is no registry query and no record
  of generated codes.