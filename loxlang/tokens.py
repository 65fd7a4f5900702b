"""Token model for Lox.

A :class:`Token` records the classified lexeme, its literal payload (for
strings and numbers) and the source line it was scanned from. The fixed
keyword table lives here as well so the lexer and the parser agree on which
words are reserved, including those reserved for features the interpreter
does not implement (``class``, ``fun``, ``return``, ``super``, ``this``).


File: tokens.py
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of every token kind produced by the lexer.
    """

    # Single-character tokens
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"

    # One or two character tokens
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FUN = "FUN"
    FOR = "FOR"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


class Token:
    """
    Represents a lexical token with a type, lexeme, literal and line.
    """

    __slots__ = ("type", "lexeme", "literal", "line")

    def __init__(self, type_: TokenType, lexeme: str, literal, line: int):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            lexeme (str): The exact source text of the token.
            literal (str | float | None): The literal payload, if any.
            line (int): The 1-based source line.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.type == other.type
            and self.lexeme == other.lexeme
            and self.literal == other.literal
            and self.line == other.line
        )

    def __hash__(self) -> int:
        return hash((self.type, self.lexeme, self.literal, self.line))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
