import math

import pytest

from keycalc.engine import Calculator


def test_starts_at_zero():
    assert Calculator().value == 0.0


def test_set_replaces_value():
    calc = Calculator()
    calc.set(4.5)
    assert calc.value == 4.5


def test_add_from_zero():
    calc = Calculator()
    calc.add(3)
    assert calc.value == 3


def test_add_then_sub_restores_value():
    calc = Calculator()
    calc.set(10)
    calc.add(2.5)
    calc.sub(2.5)
    assert calc.value == 10


def test_mul_then_div_restores_value():
    calc = Calculator()
    calc.set(7)
    calc.mul(4)
    calc.div(4)
    assert calc.value == 7


@pytest.mark.parametrize("start", [5.0, -5.0, 0.0])
def test_division_by_zero_gives_nan(start):
    calc = Calculator()
    calc.set(start)
    calc.div(0)
    assert str(calc.value) == "nan"


def test_pow_two_matches_self_multiplication():
    powered = Calculator()
    powered.set(13)
    powered.pow(2)
    multiplied = Calculator()
    multiplied.set(13)
    multiplied.mul(13)
    assert powered.value == multiplied.value


def test_square_root_then_square_round_trip():
    calc = Calculator()
    calc.set(9)
    calc.pow(0.5)
    calc.pow(2)
    assert calc.value == pytest.approx(9)


def test_pow_zero_exponent_is_one():
    calc = Calculator()
    calc.set(42)
    calc.pow(0)
    assert calc.value == 1.0


def test_pow_negative_base_fractional_exponent_is_nan():
    calc = Calculator()
    calc.set(-8)
    calc.pow(0.5)
    assert str(calc.value) == "nan"


def test_pow_overflow_is_positive_infinity():
    calc = Calculator()
    calc.set(10)
    calc.pow(400)
    assert math.isinf(calc.value) and calc.value > 0


def test_pow_overflow_keeps_sign_for_odd_exponent():
    calc = Calculator()
    calc.set(-10)
    calc.pow(401)
    assert math.isinf(calc.value) and calc.value < 0


def test_zero_to_negative_power_is_infinite():
    calc = Calculator()
    calc.set(0)
    calc.pow(-1)
    assert math.isinf(calc.value) and calc.value > 0


def test_nan_propagates_through_add():
    calc = Calculator()
    calc.div(0)
    calc.add(1)
    assert str(calc.value) == "nan"