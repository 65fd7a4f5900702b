"""
Shared fixtures for Lox Language tests.
"""
import builtins

import pytest

from loxlang.diagnostics import CollectingSink


@pytest.fixture
def sink():
    """A diagnostic sink that keeps everything reported to it."""
    return CollectingSink()


@pytest.fixture
def repl_input(monkeypatch):
    """
    Script the lines the REPL reads.

    Call the returned function with the entries to type. An exception class
    in the list is raised at that point instead of returning a line; once the
    list runs out ``input()`` raises EOFError.
    """
    def feed(lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            entry = remaining.pop(0)
            if isinstance(entry, type) and issubclass(entry, BaseException):
                raise entry
            return entry

        monkeypatch.setattr(builtins, "input", fake_input)

    return feed
