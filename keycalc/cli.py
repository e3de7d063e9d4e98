"""Command-line front end: feed key presses, print the display after each line."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from keycalc.keypad import Keypad

_ALIASES = {
    "-": "−",
    "*": "×",
    "/": "÷",
    "^": "xʸ",
    "+-": "±",
}

_NUMBER_CHARS = frozenset("0123456789.")


def _enter(keypad: Keypad, token: str) -> None:
    try:
        keypad.press(_ALIASES.get(token, token))
    except ValueError:
        if not set(token) <= _NUMBER_CHARS:
            raise ValueError(f"unknown key: {token!r}") from None
        for char in token:
            keypad.press(char)


def _render(keypad: Keypad) -> str:
    prefix = "M " if keypad.memory_label else ""
    if keypad.formula:
        return f"{prefix}{keypad.formula} {keypad.result}"
    return f"{prefix}{keypad.result}"


def run(lines: Iterable[str], out: TextIO) -> Keypad:
    """Press the whitespace-separated keys of each line and write the display."""
    keypad = Keypad()
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        for token in tokens:
            _enter(keypad, token)
        out.write(_render(keypad) + "\n")
    return keypad


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="keycalc",
        description="Push calculator keys; without arguments, read lines of keys from stdin.",
    )
    parser.add_argument("keys", nargs="*", help="key labels or numbers, e.g. 2 ^ 8 =")
    args = parser.parse_args(argv)
    lines: Iterable[str] = [" ".join(args.keys)] if args.keys else sys.stdin
    try:
        run(lines, sys.stdout)
    except ValueError as error:
        print(f"keycalc: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())