"""Keypad-driven calculator with a result display, formula line, memory and a terminal command."""

__version__ = "0.1.0"
__all__ = ["__version__"]