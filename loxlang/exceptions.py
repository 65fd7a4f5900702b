"""Errors.

Lox has three independent error families, one per phase:

- :class:`LexError` for malformed characters and strings,
- :class:`ParseError` for grammar violations,
- :class:`LoxRuntimeError` for type and name errors during evaluation.

Every error knows how to describe itself as a
:class:`~loxlang.diagnostics.Diagnostic` so the phases can report it through
the same sink.


File: exceptions.py
Version: 0.1.0
License: MIT
"""

from enum import Enum

from loxlang.diagnostics import Diagnostic
from loxlang.tokens import Token, TokenType


class LoxError(Exception):
    """
    Base class for all Lox diagnostics.
    """
    def __init__(self, line: int, message: str, location: str = ""):
        self.line = line
        self.location = location
        self.message = message
        super().__init__(message)

    @property
    def diagnostic(self) -> Diagnostic:
        """Return the structured record for this error."""
        return Diagnostic(self.line, self.location, self.message)

    def __str__(self) -> str:
        return str(self.diagnostic)


def token_location(token: Token) -> str:
    """
    Return the location tag used when an error points at a token.
    """
    if token.type == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


# ----------------------------------------------------------------------
# Lexical errors
# ----------------------------------------------------------------------

class LexError(LoxError):
    """
    Error for malformed input found while scanning.
    """


class UnterminatedStringError(LexError):
    """
    Error for a string literal that runs into the end of input.
    """
    def __init__(self, line: int):
        super().__init__(line, "Unterminated string.")


class UnexpectedCharacterError(LexError):
    """
    Error for a character that does not start any token.
    """
    def __init__(self, line: int, char: str):
        self.char = char
        super().__init__(line, "Unexpected character.")


# ----------------------------------------------------------------------
# Syntax errors
# ----------------------------------------------------------------------

class ExpectAfter(str, Enum):
    """
    Names the construct a missing token was expected after.
    """

    WHILE = "'while'"
    EXPRESSION = "expression"
    IF = "'if'"
    CONDITION = "condition"
    FOR = "'for'"
    FOR_CLAUSES = "for clauses"
    VALUE = "value"
    DECLARATION = "declaration"
    LOOP_CONDITION = "loop condition"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class ParseError(LoxError):
    """
    Error raised by the parser. Points at the offending token.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        super().__init__(token.line, message, token_location(token))


class ExpectLeftParenError(ParseError):
    """
    Error for a missing ``(``.
    """
    def __init__(self, token: Token, after: ExpectAfter):
        self.after = after
        super().__init__(token, f"Expect '(' after {after.value}.")


class ExpectRightParenError(ParseError):
    """
    Error for a missing ``)``.
    """
    def __init__(self, token: Token, after: ExpectAfter):
        self.after = after
        super().__init__(token, f"Expect ')' after {after.value}.")


class ExpectSemicolonError(ParseError):
    """
    Error for a missing ``;``.
    """
    def __init__(self, token: Token, after: ExpectAfter):
        self.after = after
        super().__init__(token, f"Expect ';' after {after.value}.")


class ExpectExpressionError(ParseError):
    """
    Error for a token that cannot start an expression.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Expect expression.")


class ExpectBraceAfterBlockError(ParseError):
    """
    Error for a block that is never closed.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Expect '}' after block.")


class ExpectVariableNameError(ParseError):
    """
    Error for a ``var`` not followed by an identifier.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Expect variable name.")


class InvalidAssignmentTargetError(ParseError):
    """
    Error for ``=`` whose left side is not a variable. Reported, never raised.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Invalid assignment target.")


class NestingTooDeepError(ParseError):
    """
    Error for input nested deeper than the parser's call stack can follow.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Too deeply nested.")


# ----------------------------------------------------------------------
# Runtime errors
# ----------------------------------------------------------------------

class LoxRuntimeError(LoxError):
    """
    Error raised while evaluating a program. Reported without a location.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        super().__init__(token.line, message)


class OperandMustBeNumberError(LoxRuntimeError):
    """
    Error for a unary operator applied to a non-number.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Operand must be a number.")


class OperandsMustBeNumbersError(LoxRuntimeError):
    """
    Error for an arithmetic or comparison operator applied to non-numbers.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Operands must be numbers.")


class OperandsMustBeNumberOrStringError(LoxRuntimeError):
    """
    Error for ``+`` applied to anything but two numbers or two strings.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Operands must be two numbers or two strings.")


class UndefinedVariableError(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, token: Token):
        self.varname = token.lexeme
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class StackOverflowError(LoxError):
    """
    Error for evaluation nested deeper than the host stack allows. There is
    no single token to blame, so it carries the line of the statement that
    was executing.
    """
    def __init__(self, line: int):
        super().__init__(line, "Stack overflow.")
