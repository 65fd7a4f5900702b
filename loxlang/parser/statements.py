"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the various statement forms in the language: declarations, blocks,
conditionals, loops and print.

``for`` has no node of its own. It is desugared here into blocks and a
``while`` loop, so the interpreter only ever sees the primitive forms.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import (
    ExpectAfter,
    ExpectBraceAfterBlockError,
    ExpectLeftParenError,
    ExpectRightParenError,
    ExpectSemicolonError,
    ExpectVariableNameError,
)
from loxlang.nodes import Expr, Stmt
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a declaration or a statement.

    Syntax:
        var <identifier> (= <expression>)? ;
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    if parser.match(TokenType.VAR):
        return parser.var_declaration()
    return parser.statement()


def parse_var_declaration(parser: 'Parser') -> tuple:
    """
    Parse a variable declaration. The ``var`` keyword is already consumed.

    Syntax:
        var <identifier> (= <expression>)? ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: (Stmt.VAR, name_token, initializer_or_None, line)
    """
    name_tok = parser.consume(TokenType.IDENTIFIER, ExpectVariableNameError)

    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parser.expression()

    parser.consume(TokenType.SEMICOLON, ExpectSemicolonError, ExpectAfter.DECLARATION)
    return (Stmt.VAR, name_tok, initializer, name_tok.line)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if parser.match(TokenType.FOR):
        return parse_for(parser)
    if parser.match(TokenType.IF):
        return parse_if(parser)
    if parser.match(TokenType.PRINT):
        return parse_print(parser)
    if parser.match(TokenType.WHILE):
        return parse_while(parser)
    if parser.match(TokenType.LEFT_BRACE):
        return (Stmt.BLOCK, parser.block(), tok.line)
    return parser.expression_statement()


def parse_block(parser: 'Parser') -> list:
    """
    Parse the statements of a block. The opening brace is already consumed.

    Syntax:
        { <declaration>* }

    Args:
        parser: The parser instance.

    Returns:
        list: the statements of the block.
    """
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        statements.append(parser.declaration())
    parser.consume(TokenType.RIGHT_BRACE, ExpectBraceAfterBlockError)
    return statements


def parse_print(parser: 'Parser') -> tuple:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression> ;
    """
    tok = parser.previous()
    value = parser.expression()
    parser.consume(TokenType.SEMICOLON, ExpectSemicolonError, ExpectAfter.VALUE)
    return (Stmt.PRINT, value, tok.line)


def parse_expression_statement(parser: 'Parser') -> tuple:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;
    """
    expr = parser.expression()
    parser.consume(TokenType.SEMICOLON, ExpectSemicolonError, ExpectAfter.EXPRESSION)
    return (Stmt.EXPRESSION, expr, expr[-1])


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional with an optional else branch. A dangling ``else``
    binds to the nearest ``if``.

    Syntax:
        if ( <condition> ) <statement> (else <statement>)?

    Args:
        parser: The parser instance.

    Returns:
        tuple: (Stmt.IF, condition, then_branch, else_branch_or_None, line)
    """
    tok = parser.previous()
    parser.consume(TokenType.LEFT_PAREN, ExpectLeftParenError, ExpectAfter.IF)
    condition = parser.expression()
    parser.consume(TokenType.RIGHT_PAREN, ExpectRightParenError, ExpectAfter.CONDITION)

    then_branch = parser.statement()
    else_branch = None
    if parser.match(TokenType.ELSE):
        else_branch = parser.statement()

    return (Stmt.IF, condition, then_branch, else_branch, tok.line)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <statement>
    """
    tok = parser.previous()
    parser.consume(TokenType.LEFT_PAREN, ExpectLeftParenError, ExpectAfter.WHILE)
    condition = parser.expression()
    parser.consume(TokenType.RIGHT_PAREN, ExpectRightParenError, ExpectAfter.CONDITION)
    body = parser.statement()
    return (Stmt.WHILE, condition, body, tok.line)


def parse_for(parser: 'Parser') -> tuple:
    """
    Parse a 'for' loop and desugar it into a 'while' loop.

    Syntax:
        for ( <initializer>? ; <condition>? ; <increment>? ) <statement>

    The result is equivalent to::

        { <initializer>; while (<condition>) { <statement> <increment>; } }

    where the outer block is omitted without an initializer, the inner block
    is omitted without an increment, and a missing condition is ``true``.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the desugared AST node.
    """
    tok = parser.previous()
    parser.consume(TokenType.LEFT_PAREN, ExpectLeftParenError, ExpectAfter.FOR)

    if parser.match(TokenType.SEMICOLON):
        initializer = None
    elif parser.match(TokenType.VAR):
        initializer = parser.var_declaration()
    else:
        initializer = parser.expression_statement()

    condition = None
    if not parser.check(TokenType.SEMICOLON):
        condition = parser.expression()
    parser.consume(TokenType.SEMICOLON, ExpectSemicolonError, ExpectAfter.LOOP_CONDITION)

    increment = None
    if not parser.check(TokenType.RIGHT_PAREN):
        increment = parser.expression()
    parser.consume(TokenType.RIGHT_PAREN, ExpectRightParenError, ExpectAfter.FOR_CLAUSES)

    body = parser.statement()

    if increment is not None:
        body = (Stmt.BLOCK, [body, (Stmt.EXPRESSION, increment, increment[-1])], tok.line)

    if condition is None:
        condition = (Expr.LITERAL, True, tok.line)
    body = (Stmt.WHILE, condition, body, tok.line)

    if initializer is not None:
        body = (Stmt.BLOCK, [initializer, body], tok.line)

    return body
