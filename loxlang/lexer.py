"""Lexer for Lox.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Alternatives are ordered so the longest
lexeme wins at every position (``!=`` before ``!``, ``//`` before ``/``).
Each match yields a :class:`~loxlang.tokens.Token` containing its type,
lexeme, literal payload and source line number.

Lexing is collect-all: a bad character or an unterminated string is reported
through the diagnostic sink and scanning carries on, so one pass can surface
several errors while still producing a best-effort token list. The list is
always terminated by an ``EOF`` token.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import re

from loxlang.diagnostics import DiagnosticSink, stderr_sink
from loxlang.exceptions import UnexpectedCharacterError, UnterminatedStringError
from loxlang.tokens import KEYWORDS, Token, TokenType


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Layout
    ('NEWLINE',        r'\n'),
    ('SKIP',           r'[ \r\t]+'),
    ('COMMENT',        r'//[^\n]*'),

    # Literals
    ('STRING',         r'"[^"]*"'),
    ('UNTERMINATED',   r'"[^"]*\Z'),
    ('NUMBER',         r'[0-9]+(?:\.[0-9]+)?'),
    ('IDENTIFIER',     r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two character operators
    ('BANG_EQUAL',     r'!='),
    ('EQUAL_EQUAL',    r'=='),
    ('GREATER_EQUAL',  r'>='),
    ('LESS_EQUAL',     r'<='),

    # Single character tokens
    ('LEFT_PAREN',     r'\('),
    ('RIGHT_PAREN',    r'\)'),
    ('LEFT_BRACE',     r'\{'),
    ('RIGHT_BRACE',    r'\}'),
    ('COMMA',          r','),
    ('DOT',            r'\.'),
    ('MINUS',          r'-'),
    ('PLUS',           r'\+'),
    ('SEMICOLON',      r';'),
    ('SLASH',          r'/'),
    ('STAR',           r'\*'),
    ('BANG',           r'!'),
    ('EQUAL',          r'='),
    ('GREATER',        r'>'),
    ('LESS',           r'<'),

    # Anything else
    ('MISMATCH',       r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def tokenize(code: str, sink: DiagnosticSink | None = None) -> tuple[list[Token], bool]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        sink (DiagnosticSink): Receives lexical errors. Defaults to stderr.

    Returns:
        list[Token]: The tokens, terminated by an ``EOF`` token.
        bool: True if any lexical error was reported.
    """
    report = sink if sink is not None else stderr_sink
    tokens: list[Token] = []
    had_error = False
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            report(UnexpectedCharacterError(line_num, value).diagnostic)
            had_error = True
            continue
        if kind == 'UNTERMINATED':
            line_num += value.count('\n')
            report(UnterminatedStringError(line_num).diagnostic)
            had_error = True
            continue

        if kind == 'STRING':
            line_num += value.count('\n')
            tokens.append(Token(TokenType.STRING, value, value[1:-1], line_num))
        elif kind == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, value, float(value), line_num))
        elif kind == 'IDENTIFIER':
            type_ = KEYWORDS.get(value, TokenType.IDENTIFIER)
            tokens.append(Token(type_, value, None, line_num))
        else:
            tokens.append(Token(TokenType[kind], value, None, line_num))

    tokens.append(Token(TokenType.EOF, "", None, line_num))
    return tokens, had_error
