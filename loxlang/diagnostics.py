"""Diagnostic records and sinks.

The lexer, parser and interpreter never print errors themselves. They hand a
:class:`Diagnostic` to a sink, which is any callable accepting one. The
default sink renders the record in the canonical form

    [line <line>] Error<location>: <message>

and writes it to standard error.


File: diagnostics.py
Version: 0.1.0
License: MIT
"""

import sys
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Diagnostic:
    """A single error report: where it happened and what went wrong."""

    line: int
    location: str
    message: str

    def __str__(self) -> str:
        return format_diagnostic(self.line, self.location, self.message)


DiagnosticSink = Callable[[Diagnostic], None]


def format_diagnostic(line: int, location: str, message: str) -> str:
    """
    Render a diagnostic in the canonical text form.

    Parameters:
        line (int): Source line of the error.
        location (str): ``""``, ``" at end"`` or ``" at '<lexeme>'"``.
        message (str): Human readable message.

    Returns:
        str: The rendered line, without a trailing newline.
    """
    return f"[line {line}] Error{location}: {message}"


def stderr_sink(diagnostic: Diagnostic) -> None:
    """Write a rendered diagnostic to the current ``sys.stderr``."""
    print(diagnostic, file=sys.stderr)


class CollectingSink:
    """
    Sink that keeps every diagnostic it receives, in order.
    """

    def __init__(self):
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)

    def lines(self) -> list[str]:
        """Return every collected diagnostic rendered as text."""
        return [str(d) for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
