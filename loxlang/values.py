"""Runtime values.

Lox values map directly onto Python objects:

=========  ===========
Lox        Python
=========  ===========
nil        ``None``
boolean    ``bool``
number     ``float``
string     ``str``
=========  ===========

Since ``bool`` is a subclass of ``int`` and ``True == 1.0`` holds in Python,
equality and type checks here compare the exact type rather than relying on
``isinstance`` or ``==`` alone.


File: values.py
Version: 0.1.0
License: MIT
"""

import math


def is_number(value) -> bool:
    """Return True for Lox numbers (and never for booleans)."""
    return type(value) is float


def is_string(value) -> bool:
    """Return True for Lox strings."""
    return type(value) is str


def is_truthy(value) -> bool:
    """
    Map any value to a boolean for branching.

    Only ``nil`` and ``false`` are falsy; ``0`` and ``""`` are truthy.
    """
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def values_equal(left, right) -> bool:
    """
    Compare two values with Lox semantics.

    Values of different variants are never equal. Numbers use float equality,
    so ``nan`` is not equal to itself.
    """
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value) -> str:
    """
    Return the textual representation used by ``print``.
    """
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is float:
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            text = str(int(value))
            # int() drops the sign of negative zero
            if value == 0 and math.copysign(1.0, value) < 0:
                return "-0"
            return text
        return repr(value)
    return str(value)

