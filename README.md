# keycalc

A small calculator that works like a pocket calculator keypad. You press
digit, operation, sign, dot, backspace, clear and memory keys. It keeps three
pieces of display text up to date: the result display, the formula line and
the memory indicator.

## Installing

```
pip install .
```

## Using it from the terminal

Pass the keys as arguments:

```
keycalc 2 ^ 8 =
```

This prints `2 ^ 8 = 256`.

With no arguments, `keycalc` reads lines of keys from standard input. In every
line the keys are separated by whitespace, and blank lines are skipped. After
each line the command prints one line of output:

- `M ` when a value is stored in memory,
- then the formula line, if it is not empty,
- then the result display.

Keys understood:

| Key                         | Meaning                                  |
|-----------------------------|------------------------------------------|
| `0` … `9`                   | digits                                   |
| `+` `−` `×` `÷` `xʸ`        | add, subtract, multiply, divide, power   |
| `=`                         | compute                                  |
| `±`                         | change sign                              |
| `.`                         | decimal point                            |
| `⌫`                         | backspace                                |
| `C`                         | clear                                    |
| `MS` `MR` `MC`              | memory save, recall, clear               |

Plain ASCII forms are accepted too:

- `-` for `−`
- `*` for `×`
- `/` for `÷`
- `^` for `xʸ`
- `+-` for `±`

A token made only of digits and dots, such as `156` or `2.5`, is entered one
key at a time. Any other unknown token makes the command print an error to
standard error and exit with status 1.

Example session:

```
$ keycalc
15 + 12 =
15 + 12 = 27
MS C MR - 15 =
M 27 − 15 = 12
```

Results are shown with six significant digits. For example, `2 ^ 100 =` shows
`1.26765e+30`. Division by zero gives `nan`.

## Using it as a library

```python
from keycalc.keypad import Keypad, Operation

pad = Keypad()
for key in ["1", "5", "6", "+", "1", "2", "="]:
    pad.press(key)

pad.result        # "168"
pad.formula       # "156 + 12 ="
pad.memory_label  # ""

pad.press_operation(Operation.MULTIPLICATION)
```

`Keypad.press(label)` takes a key label from the table above; an unknown label
raises `ValueError`. Each key also has its own method:

- `press_digit`
- `press_operation`
- `press_equals`
- `press_clear`
- `press_sign`
- `press_dot`
- `press_backspace`
- `memory_save`
- `memory_recall`
- `memory_clear`

`keycalc.keypad` also provides the helpers that produce the display text:

- `format_number` renders a value with `%g`.
- `normalize_number` tidies typed input: empty input becomes `0`, `.5`
  becomes `0.5`, and redundant leading zeroes are dropped.
- `strip_leading_zeroes` removes leading `0` characters and leaves `0` if
  nothing else remains.

The arithmetic lives in `keycalc.engine.Calculator`. It holds one
floating-point `value` and changes it with `set`, `add`, `sub`, `mul`, `div`
and `pow`. Dividing by zero gives `nan`. A power that overflows or has no real
result gives `inf`, `-inf` or `nan` instead of raising.

`keycalc.cli.run(lines, out)` drives a fresh `Keypad` from an iterable of
lines. It writes the display to `out` and returns the keypad.
`keycalc.cli.main` is the entry point of the `keycalc` command.

## What it does not do

keycalc has no graphical window. The calculator is used through the
`keycalc` command or from Python code.

## Running the tests

```
pip install .[test]
pytest
```