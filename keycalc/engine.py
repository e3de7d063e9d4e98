"""Arithmetic engine holding a single running value."""

from __future__ import annotations

import math


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent``, yielding inf or nan instead of raising."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # Zero raised to a negative power: the sign of zero survives odd exponents.
            if _is_odd_integer(exponent) and math.copysign(1.0, base) < 0:
                return -math.inf
            return math.inf
        return math.nan


class Calculator:
    """Accumulator that applies one operation at a time to its current value."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def __repr__(self) -> str:
        return f"Calculator(value={self.value!r})"

    def set(self, value: float) -> None:
        """Replace the current value."""
        self.value = float(value)

    def add(self, value: float) -> None:
        self.value += value

    def sub(self, value: float) -> None:
        self.value -= value

    def mul(self, value: float) -> None:
        self.value *= value

    def div(self, value: float) -> None:
        """Divide the current value; dividing by zero gives nan."""
        if value != 0:
            self.value /= value
        else:
            self.value = math.nan

    def pow(self, value: float) -> None:
        """Raise the current value to ``value``."""
        self.value = _power(self.value, float(value))