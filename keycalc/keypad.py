"""Button-driven calculator front panel: display, formula line and memory."""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Callable

from keycalc.engine import Calculator

_DIGITS = "0123456789"


class Operation(Enum):
    """Pending binary operation; the value is the symbol shown in the formula."""

    NO_OPERATION = ""
    ADDITION = "+"
    SUBTRACTION = "−"
    MULTIPLICATION = "×"
    DIVISION = "÷"
    POWER = "^"


_APPLY: dict[Operation, Callable[[Calculator, float], None]] = {
    Operation.ADDITION: Calculator.add,
    Operation.SUBTRACTION: Calculator.sub,
    Operation.MULTIPLICATION: Calculator.mul,
    Operation.DIVISION: Calculator.div,
    Operation.POWER: Calculator.pow,
}

_OPERATION_KEYS = {
    "+": Operation.ADDITION,
    "−": Operation.SUBTRACTION,
    "×": Operation.MULTIPLICATION,
    "÷": Operation.DIVISION,
    "xʸ": Operation.POWER,
}


def format_number(value: float) -> str:
    """Render a number the way the display shows it (six significant digits)."""
    return "%g" % value


def strip_leading_zeroes(text: str) -> str:
    """Drop leading zero characters, leaving "0" if nothing else remains."""
    return text.lstrip("0") or "0"


def normalize_number(text: str) -> str:
    """Tidy typed input: empty becomes "0", ".x" gets a leading zero, extra zeroes go."""
    if not text:
        return "0"
    if text.startswith("."):
        return normalize_number("0" + text)
    if text.startswith("-") and len(text) > 1:
        numeric = text[1:]
        if numeric.startswith("0") and numeric != "0" and not numeric.startswith("0."):
            return "-" + strip_leading_zeroes(numeric)
        return text
    if text.startswith("0") and text != "0" and not text.startswith("0."):
        return strip_leading_zeroes(text)
    return text


def _to_number(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


class Keypad:
    """State of the calculator panel, driven by key presses.

    ``result`` is the main display, ``formula`` the line above it and
    ``memory_label`` shows "M" while a value is stored in memory.
    """

    def __init__(self) -> None:
        self._calculator = Calculator()
        self._active = 0.0
        self._operation = Operation.NO_OPERATION
        self._memory = 0.0
        self._memory_set = False
        self._clear_on_next_digit = False
        self.result = "0"
        self.formula = ""
        self.memory_label = ""
        self._keys: dict[str, Callable[[], None]] = {
            digit: partial(self.press_digit, digit) for digit in _DIGITS
        }
        self._keys.update(
            {label: partial(self.press_operation, op) for label, op in _OPERATION_KEYS.items()}
        )
        self._keys.update(
            {
                "=": self.press_equals,
                "C": self.press_clear,
                "±": self.press_sign,
                ".": self.press_dot,
                "⌫": self.press_backspace,
                "MC": self.memory_clear,
                "MR": self.memory_recall,
                "MS": self.memory_save,
            }
        )
        self._set_text("0")

    def _set_text(self, text: str) -> None:
        self.result = normalize_number(text)
        self._active = _to_number(self.result)

    def _add_text(self, suffix: str) -> None:
        self._set_text(self.result + suffix)

    def press(self, label: str) -> None:
        """Press the key carrying ``label``."""
        try:
            action = self._keys[label]
        except KeyError:
            raise ValueError(f"unknown key: {label!r}") from None
        action()

    def press_digit(self, digit: str) -> None:
        if len(digit) != 1 or digit not in _DIGITS:
            raise ValueError(f"not a digit: {digit!r}")
        if self._clear_on_next_digit or self.result == "0":
            self._set_text(digit)
            self._clear_on_next_digit = False
        else:
            self._add_text(digit)

    def _show_pending(self, operation: Operation) -> None:
        self.formula = f"{format_number(self._calculator.value)} {operation.value}"

    def press_operation(self, operation: Operation) -> None:
        if self._operation is not Operation.NO_OPERATION:
            if self._clear_on_next_digit:
                self._operation = operation
                self._show_pending(operation)
                return
        else:
            self._calculator.set(self._active)
        self._operation = operation
        self._show_pending(operation)
        self._clear_on_next_digit = True

    def press_equals(self) -> None:
        if self._operation is Operation.NO_OPERATION:
            self.formula = ""
            return
        self.formula = (
            f"{format_number(self._calculator.value)} {self._operation.value} "
            f"{format_number(self._active)} ="
        )
        _APPLY[self._operation](self._calculator, self._active)
        self._active = self._calculator.value
        self._set_text(format_number(self._active))
        self._operation = Operation.NO_OPERATION
        self._clear_on_next_digit = True

    def press_clear(self) -> None:
        self._operation = Operation.NO_OPERATION
        self.formula = ""
        self._set_text("0")
        self._clear_on_next_digit = False

    def press_sign(self) -> None:
        if self.result.startswith("-"):
            self._set_text(self.result[1:])
        else:
            self._set_text("-" + self.result)

    def press_dot(self) -> None:
        if "." not in self.result:
            self._add_text(".")

    def press_backspace(self) -> None:
        if not self.result or self.result == "0":
            return
        remaining = self.result[:-1]
        if not remaining or remaining == "-":
            self._set_text("0")
        else:
            self._set_text(remaining)

    def memory_clear(self) -> None:
        self._memory_set = False
        self._memory = 0.0
        self.memory_label = ""

    def memory_recall(self) -> None:
        if not self._memory_set:
            return
        self._active = self._memory
        self._set_text(format_number(self._active))
        self._clear_on_next_digit = False
        if self._operation is Operation.NO_OPERATION:
            self._calculator.set(self._active)

    def memory_save(self) -> None:
        self._memory = self._active
        self._memory_set = True
        self.memory_label = "M"