"""
Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. The binary tiers
share one precedence-climbing loop driven by `BINARY_OPERATORS`: it parses
a unary operand, then folds operators from the left for as long as they
bind at least as tightly as the level it was entered at. Recursion only
happens for a tighter right-hand operand or a parenthesized group, which
keeps the Python call depth per nesting level small.

Precedence, loosest first:
    assignment < or < and < equality < comparison < term < factor < unary < primary


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import (
    ExpectAfter,
    ExpectExpressionError,
    ExpectRightParenError,
    InvalidAssignmentTargetError,
)
from loxlang.nodes import Expr
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# Binary operator -> (precedence level, node kind). Higher binds tighter.
BINARY_OPERATORS: dict[TokenType, tuple[int, Expr]] = {
    TokenType.OR:            (1, Expr.LOGICAL),
    TokenType.AND:           (2, Expr.LOGICAL),
    TokenType.BANG_EQUAL:    (3, Expr.BINARY),
    TokenType.EQUAL_EQUAL:   (3, Expr.BINARY),
    TokenType.GREATER:       (4, Expr.BINARY),
    TokenType.GREATER_EQUAL: (4, Expr.BINARY),
    TokenType.LESS:          (4, Expr.BINARY),
    TokenType.LESS_EQUAL:    (4, Expr.BINARY),
    TokenType.MINUS:         (5, Expr.BINARY),
    TokenType.PLUS:          (5, Expr.BINARY),
    TokenType.SLASH:         (6, Expr.BINARY),
    TokenType.STAR:          (6, Expr.BINARY),
}

LOWEST_BINARY_LEVEL = 1


# ---- Lowest precedence ----

def parse_expression(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parse_assignment(parser)


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse an assignment, or fall through to a binary expression.

    The target is parsed as an ordinary expression first. If an ``=``
    follows, the target must have come out as a variable reference;
    anything else is reported at the ``=`` without aborting the parse.
    """
    expr = parse_binary(parser)

    if parser.match(TokenType.EQUAL):
        equals = parser.previous()
        value = parse_assignment(parser)

        if expr[0] == Expr.VARIABLE:
            name_tok = expr[1]
            return (Expr.ASSIGN, name_tok, value, name_tok.line)

        parser.report(InvalidAssignmentTargetError(equals))

    return expr


def parse_binary(parser: 'Parser', min_level: int = LOWEST_BINARY_LEVEL) -> tuple:
    """
    Parse binary and logical operators binding at ``min_level`` or tighter.

    Operators of equal level fold to the left; a tighter operator on the
    right is parsed by a nested call before the current one is folded.
    """
    left = parse_unary(parser)
    while True:
        entry = BINARY_OPERATORS.get(parser.curr_token.type)
        if entry is None or entry[0] < min_level:
            return left
        level, kind = entry
        op_tok = parser.advance()
        right = parse_binary(parser, level + 1)
        left = (kind, left, op_tok, right, op_tok.line)


def parse_unary(parser: 'Parser') -> tuple:
    """Parse prefix '!' and '-', which nest to the right."""
    if parser.match(TokenType.BANG, TokenType.MINUS):
        op_tok = parser.previous()
        operand = parse_unary(parser)
        return (Expr.UNARY, op_tok, operand, op_tok.line)
    return parse_primary(parser)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if parser.match(TokenType.FALSE):
        return (Expr.LITERAL, False, tok.line)
    if parser.match(TokenType.TRUE):
        return (Expr.LITERAL, True, tok.line)
    if parser.match(TokenType.NIL):
        return (Expr.LITERAL, None, tok.line)

    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return (Expr.LITERAL, tok.literal, tok.line)

    if parser.match(TokenType.IDENTIFIER):
        return (Expr.VARIABLE, tok, tok.line)

    if parser.match(TokenType.LEFT_PAREN):
        inner = parse_expression(parser)
        parser.consume(TokenType.RIGHT_PAREN, ExpectRightParenError, ExpectAfter.EXPRESSION)
        return (Expr.GROUPING, inner, tok.line)

    raise ExpectExpressionError(tok)
