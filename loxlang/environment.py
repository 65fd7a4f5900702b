"""Variable scopes.

An :class:`Environment` maps names to values and optionally points at the
scope enclosing it. Lookups and assignments walk outward along that chain;
definitions only ever touch the innermost scope, so a block can shadow an
outer variable without changing it.


File: environment.py
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import UndefinedVariableError
from loxlang.tokens import Token


class Environment:
    """A single scope in the scope chain."""

    def __init__(self, enclosing: 'Environment | None' = None):
        self.values: dict[str, object] = {}
        self.enclosing = enclosing

    def child(self) -> 'Environment':
        """Return a new, empty scope nested inside this one."""
        return Environment(self)

    @property
    def depth(self) -> int:
        """Number of scopes enclosing this one. The global scope has depth 0."""
        depth = 0
        scope = self.enclosing
        while scope is not None:
            depth += 1
            scope = scope.enclosing
        return depth

    def define(self, name: str, value) -> None:
        """
        Bind ``name`` in this scope, replacing any existing binding here.
        """
        self.values[name] = value

    def _resolve(self, name: str) -> 'Environment | None':
        scope = self
        while scope is not None:
            if name in scope.values:
                return scope
            scope = scope.enclosing
        return None

    def get(self, token: Token):
        """
        Return the value bound to the token's name in the nearest scope.

        Raises:
            UndefinedVariableError: If no scope in the chain binds the name.
        """
        scope = self._resolve(token.lexeme)
        if scope is None:
            raise UndefinedVariableError(token)
        return scope.values[token.lexeme]

    def assign(self, token: Token, value) -> None:
        """
        Update the nearest existing binding of the token's name.

        Raises:
            UndefinedVariableError: If no scope in the chain binds the name.
        """
        scope = self._resolve(token.lexeme)
        if scope is None:
            raise UndefinedVariableError(token)
        scope.values[token.lexeme] = value

    def __contains__(self, name: str) -> bool:
        return self._resolve(name) is not None

    def __repr__(self) -> str:
        return f"Environment({self.values!r}, depth={self.depth})"
