import math

import pytest

from curpkit.loops import LoopKind, digit_count, factorial, fibonacci, main


@pytest.mark.parametrize("loop", list(LoopKind))
def test_fibonacci_recurrence(loop):
    series = fibonacci(12, loop)
    assert len(series) == 12
    assert series[:2] == [0, 1]
    assert all(series[i] == series[i - 1] + series[i - 2] for i in range(2, 12))


def test_fibonacci_loops_agree_for_positive_count():
    assert fibonacci(9, LoopKind.FOR) == fibonacci(9, LoopKind.WHILE)
    assert fibonacci(9, LoopKind.FOR) == fibonacci(9, LoopKind.DO_WHILE)


def test_fibonacci_do_while_runs_once():
    assert fibonacci(0, LoopKind.FOR) == []
    assert fibonacci(0, LoopKind.WHILE) == []
    assert fibonacci(0, LoopKind.DO_WHILE) == [0]


def test_fibonacci_accepts_int_option():
    assert fibonacci(5, 2) == fibonacci(5, LoopKind.WHILE)


def test_invalid_loop_option():
    with pytest.raises(ValueError):
        fibonacci(3, 4)
    with pytest.raises(ValueError):
        factorial(3, 0)


@pytest.mark.parametrize("loop", list(LoopKind))
@pytest.mark.parametrize("number", [0, 1, 5, 10])
def test_factorial_matches_math(loop, number):
    assert factorial(number, loop) == math.factorial(number)


def test_factorial_below_one():
    assert factorial(-3, LoopKind.DO_WHILE) == 1


@pytest.mark.parametrize("loop", list(LoopKind))
@pytest.mark.parametrize("number", [1, 9, 10, 99, 100, 123456])
def test_digit_count_positive(loop, number):
    assert digit_count(number, loop) == len(str(number))


def test_digit_count_zero_and_negative():
    assert digit_count(0, LoopKind.FOR) == 0
    assert digit_count(0, LoopKind.WHILE) == 0
    assert digit_count(0, LoopKind.DO_WHILE) == 1
    assert digit_count(-5, LoopKind.FOR) == 0


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_main_fibonacci(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "5"])
    assert main([]) == 0
    assert "0 1 1 2 3" in capsys.readouterr().out


def test_main_factorial(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "2", "5"])
    main([])
    assert "el factorial de 5 es 120" in capsys.readouterr().out


def test_main_factorial_invalid_loop(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "9", "4"])
    main([])
    out = capsys.readouterr().out
    assert "Opcion no valida" in out
    assert "el factorial de 4 es 1\n" in out


def test_main_digits(monkeypatch, capsys):
    _feed(monkeypatch, ["3", "3", "2023"])
    main([])
    assert f"El 2023 tiene {len('2023')} digitos" in capsys.readouterr().out


def test_main_unknown_option_does_nothing(monkeypatch, capsys):
    _feed(monkeypatch, ["7"])
    assert main([]) == 0
    assert "factorial" not in capsys.readouterr().out