"""Shared definitions for AST node kinds.

Nodes are plain tuples. The first element is a kind from :class:`Expr` or
:class:`Stmt` and the last element is the source line, so any node can be
inspected with ``node[0]`` and ``node[-1]`` without knowing its shape.
Tokens are embedded where an error may later need to point at them.

Expression nodes::

    (Expr.LITERAL, value, line)
    (Expr.UNARY, operator_token, operand, line)
    (Expr.BINARY, left, operator_token, right, line)
    (Expr.LOGICAL, left, operator_token, right, line)
    (Expr.GROUPING, inner, line)
    (Expr.VARIABLE, name_token, line)
    (Expr.ASSIGN, name_token, value, line)

Statement nodes::

    (Stmt.EXPRESSION, expr, line)
    (Stmt.PRINT, expr, line)
    (Stmt.VAR, name_token, initializer_or_None, line)
    (Stmt.BLOCK, [statements], line)
    (Stmt.IF, condition, then_branch, else_branch_or_None, line)
    (Stmt.WHILE, condition, body, line)


File: nodes.py
Version: 0.1.0
License: MIT
"""

from enum import Enum

from loxlang.values import stringify


class Expr(str, Enum):
    """
    Enumeration of expression node kinds.
    """

    LITERAL = "literal"
    UNARY = "unary"
    BINARY = "binary"
    LOGICAL = "logical"
    GROUPING = "grouping"
    VARIABLE = "variable"
    ASSIGN = "assign"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Stmt(str, Enum):
    """
    Enumeration of statement node kinds.
    """

    EXPRESSION = "expression"
    PRINT = "print"
    VAR = "var"
    BLOCK = "block"
    IF = "if"
    WHILE = "while"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


def _parenthesize(name: str, *nodes) -> str:
    parts = [name] + [format_expr(node) for node in nodes]
    return "(" + " ".join(parts) + ")"


def format_expr(node) -> str:
    """
    Convert an expression back to a Lisp-like string for debugging.

    ``-123 * (45.67)`` renders as ``(* (- 123) (group 45.67))``.

    Args:
        node (tuple): An expression node.

    Returns:
        str: A string representation of the expression.
    """
    kind = node[0]
    match kind:
        case Expr.LITERAL:
            return stringify(node[1])
        case Expr.UNARY:
            return _parenthesize(node[1].lexeme, node[2])
        case Expr.BINARY | Expr.LOGICAL:
            return _parenthesize(node[2].lexeme, node[1], node[3])
        case Expr.GROUPING:
            return _parenthesize("group", node[1])
        case Expr.VARIABLE:
            return node[1].lexeme
        case Expr.ASSIGN:
            return f"(= {node[1].lexeme} {format_expr(node[2])})"
        case _:
            return f"<expr {kind}>"


def format_stmt(node) -> str:
    """
    Convert a statement to a Lisp-like string for debugging.

    Args:
        node (tuple): A statement node.

    Returns:
        str: A string representation of the statement.
    """
    kind = node[0]
    match kind:
        case Stmt.EXPRESSION:
            return f"(; {format_expr(node[1])})"
        case Stmt.PRINT:
            return f"(print {format_expr(node[1])})"
        case Stmt.VAR:
            if node[2] is None:
                return f"(var {node[1].lexeme})"
            return f"(var {node[1].lexeme} {format_expr(node[2])})"
        case Stmt.BLOCK:
            return "(block" + "".join(" " + format_stmt(s) for s in node[1]) + ")"
        case Stmt.IF:
            text = f"(if {format_expr(node[1])} {format_stmt(node[2])}"
            if node[3] is not None:
                text += f" {format_stmt(node[3])}"
            return text + ")"
        case Stmt.WHILE:
            return f"(while {format_expr(node[1])} {format_stmt(node[2])})"
        case _:
            return f"<stmt {kind}>"
