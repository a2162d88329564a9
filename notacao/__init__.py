"""Infix and postfix expression conversion and evaluation, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["expressao", "cli"]