"""Lox: a small, dynamically typed scripting language.

The package holds the whole language pipeline: :mod:`~loxlang.lexer`,
:mod:`~loxlang.parser`, :mod:`~loxlang.interpreter` and the
:func:`~loxlang.runner.run` helper tying them together.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from loxlang.runner import run

__all__ = ["run"]
__version__ = "0.1.0"
