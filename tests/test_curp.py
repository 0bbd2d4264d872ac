import random

import pytest

from curpkit.curp import (
    Person,
    Sex,
    century_letter,
    date_part,
    days_in_month,
    generate_curp,
    initials,
    internal_consonants,
    normalize_given_name,
    normalize_surname,
    sex_letter,
    state_code,
)


def _person(**changes):
    data = dict(
        name="JUAN",
        paternal="GOMEZ",
        maternal="PEREZ",
        sex=Sex.MALE,
        year=1995,
        month=3,
        day=7,
        state=6,
    )
    data.update(changes)
    return Person(**data)


def test_surname_particles_are_removed():
    assert normalize_surname("DE LA CRUZ") == "CRUZ"


def test_surname_particles_need_several_passes():
    assert normalize_surname("VAN DER BERG") == "BERG"


def test_surname_enie_becomes_x():
    result = normalize_surname("PEÑA")
    assert "Ñ" not in result
    assert result[2] == "X"


def test_given_name_spaces_removed():
    result = normalize_given_name("ANA SOFIA")
    assert " " not in result
    assert result.startswith("ANA")


def test_leap_february_has_one_more_day():
    assert days_in_month(2020, 2) == days_in_month(2021, 2) + 1
    assert days_in_month(1900, 2) == days_in_month(2023, 2)


def test_invalid_month_raises():
    with pytest.raises(ValueError):
        days_in_month(2023, 13)


def test_initials_basic():
    result = initials("GOMEZ", "PEREZ", "JUAN", "")
    assert result[0] == "G"
    assert result[1] == "O"
    assert result[2] == "P"
    assert result[3] == "J"


def test_initials_missing_maternal():
    assert initials("GOMEZ", "", "JUAN", "")[2] == "X"


@pytest.mark.parametrize("first", ["JOSE", "MARIA", "MA", "JX"])
def test_initials_use_second_name(first):
    assert initials("GOMEZ", "PEREZ", first, "LUIS")[3] == "L"


def test_initials_forbidden_word():
    assert initials("PEREZ", "DIAZ", "OSCAR", "") == "PXDO"


def test_date_part():
    assert date_part(1995, 3, 7) == "950307"


def test_date_part_rejects_bad_day():
    with pytest.raises(ValueError):
        date_part(2023, 2, 29)


def test_sex_letters():
    assert sex_letter(Sex.MALE) == "H"
    assert sex_letter(Sex.FEMALE) == "M"


def test_state_codes():
    assert state_code(1) == "AS"
    assert state_code(6) == "CH"
    assert state_code(33) == "NE"


@pytest.mark.parametrize("state", [0, 34])
def test_state_out_of_range(state):
    with pytest.raises(ValueError):
        state_code(state)


def test_internal_consonants_skip_maria():
    assert internal_consonants("GOMEZ", "PEREZ", "MARIA", "LUISA") == internal_consonants(
        "GOMEZ", "PEREZ", "LUISA", ""
    )


def test_internal_consonants_empty_surname():
    assert internal_consonants("", "", "JUAN", "")[:2] == "XX"


@pytest.mark.parametrize(
    "year, letter", [(1999, "0"), (2005, "A"), (2015, "B"), (2023, "C")]
)
def test_century_letter(year, letter):
    assert century_letter(year) == letter


def test_generate_curp_parts():
    curp = generate_curp(_person(), random.Random(0))
    assert len(curp) == 18
    assert curp[:4] == initials("GOMEZ", "PEREZ", "JUAN", "")
    assert curp[4:10] == date_part(1995, 3, 7)
    assert curp[10] == "H"
    assert curp[11:13] == "CH"
    assert curp[13:16] == internal_consonants("GOMEZ", "PEREZ", "JUAN", "")
    assert curp[16] == "0"
    assert curp[17] in "123456789"


def test_generate_curp_is_deterministic_with_seed():
    first = generate_curp(_person(), random.Random(5))
    second = generate_curp(_person(), random.Random(5))
    assert first[:17] == "GOPJ950307HCHMRN0"
    assert first[17] in "123456789"
    assert second == first


def test_generate_curp_check_digits_in_range():
    digits = {generate_curp(_person(), random.Random(seed))[17] for seed in range(200)}
    assert digits <= set("123456789")
    assert "0" not in digits


def test_generate_curp_normalizes_surname():
    curp = generate_curp(_person(paternal="DE LA CRUZ", sex=Sex.FEMALE), random.Random(1))
    assert curp[0] == "C"
    assert curp[10] == "M"