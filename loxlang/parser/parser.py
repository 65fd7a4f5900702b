"""
Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process and owns the token cursor. The actual grammar
routines are split across `loxlang.parser.expressions` and
`loxlang.parser.statements`.

Syntax errors are raised as `ParseError` from wherever they are detected
and caught in the top-level declaration loop, which reports them and
resynchronizes (panic mode) so that one pass can surface several
independent errors.


File: parser.py
Version: 0.1.0
License: MIT
"""

from loxlang.diagnostics import DiagnosticSink, stderr_sink
from loxlang.exceptions import NestingTooDeepError, ParseError
from loxlang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


# Tokens that start a statement; resynchronization stops in front of them.
STATEMENT_STARTS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], sink: DiagnosticSink | None = None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): Token instances, terminated by an EOF token.
            sink (DiagnosticSink): Receives syntax errors. Defaults to stderr.
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens = list(tokens) + [Token(TokenType.EOF, "", None, line)]
        self.tokens = tokens
        self.position = 0
        self.sink = sink if sink is not None else stderr_sink
        self.had_error = False
        self.panicked = False

    # Token cursor
    @property
    def curr_token(self) -> Token:
        """The token about to be consumed."""
        return self.tokens[self.position]

    def previous(self) -> Token:
        """The most recently consumed token."""
        return self.tokens[self.position - 1]

    def is_at_end(self) -> bool:
        return self.curr_token.type == TokenType.EOF

    def check(self, token_type: TokenType) -> bool:
        """
        Return True if the current token has the given type, without consuming it.
        """
        if self.is_at_end():
            return False
        return self.curr_token.type == token_type

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        if not self.is_at_end():
            self.position += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it has any of the given types.
        """
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, error: type[ParseError], *args) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            error (type[ParseError]): Error raised on mismatch. It receives the
                offending token followed by ``args``.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise error(self.curr_token, *args)

    # Error handling
    def report(self, error: ParseError) -> None:
        """
        Hand a syntax error to the sink and mark the parse as failed.
        """
        self.had_error = True
        self.sink(error.diagnostic)

    def synchronize(self) -> None:
        """
        Discard tokens until a likely statement boundary.

        Always skips the offending token, then stops just after a ``;``,
        just before a statement keyword, or at end of input.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.curr_token.type in STATEMENT_STARTS:
                return
            self.advance()

    # Expression wrappers
    def expression(self) -> tuple:
        """
        Parse a full expression starting from the lowest precedence.
        """
        return _expr.parse_expression(self)

    # Statement wrappers
    def declaration(self) -> tuple:
        """
        Parse a declaration or statement.
        """
        return _stmt.parse_declaration(self)

    def var_declaration(self) -> tuple:
        """
        Parse the remainder of a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> list:
        """
        Parse the statements of a block up to the closing brace.
        """
        return _stmt.parse_block(self)

    def expression_statement(self) -> tuple:
        """
        Parse an expression followed by ';'.
        """
        return _stmt.parse_expression_statement(self)

    def parse(self) -> list:
        """
        Parse the full input into a list of statements.

        Declarations that fail to parse are reported and dropped; parsing
        resumes after the next statement boundary. Input nested deeper than
        the Python stack allows is reported the same way. Afterwards
        ``had_error`` tells whether any syntax error was reported and
        ``panicked`` whether a declaration had to be dropped.
        """
        statements = []
        while not self.is_at_end():
            try:
                statements.append(self.declaration())
            except ParseError as e:
                self.report(e)
                self.panicked = True
                self.synchronize()
            except RecursionError:
                self.report(NestingTooDeepError(self.curr_token))
                self.panicked = True
                self.synchronize()
        return statements


def parse(tokens: list[Token], sink: DiagnosticSink | None = None) -> tuple[list, bool]:
    """
    Parse a token list.

    Returns:
        list: The successfully parsed statements.
        bool: True if any syntax error was reported.
    """
    parser = Parser(tokens, sink)
    statements = parser.parse()
    return statements, parser.had_error
