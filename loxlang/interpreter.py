"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser.
It supports arithmetic, string concatenation, comparisons, variables in nested
scopes, conditionals, loops, and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive
manner. Statements are executed via the `execute()` method, and expressions are
evaluated using `eval_expr()`. Both operate over the tuples described in
`loxlang.nodes`.

2. Environment
The interpreter holds the current scope in `self.environment`. A block swaps in
a fresh child scope for its duration and restores the previous one when it
finishes, whether normally or by an error.

3. Expression Evaluation
Operands are type checked before use. Arithmetic and comparison require numbers,
`+` also accepts two strings, and equality works across every type without
failing. `and`/`or` short-circuit and yield one of their operands.

4. Error Handling
Type errors and references to undefined variables raise `LoxRuntimeError`
subclasses carrying the token that caused them. Nothing here catches them: the
first runtime error aborts the rest of the program.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

import math

from loxlang.environment import Environment
from loxlang.exceptions import (
    OperandMustBeNumberError,
    OperandsMustBeNumberOrStringError,
    OperandsMustBeNumbersError,
)
from loxlang.nodes import Expr, Stmt
from loxlang.tokens import TokenType
from loxlang.values import is_number, is_string, is_truthy, stringify, values_equal


def _divide(lhs: float, rhs: float) -> float:
    """IEEE-754 division: a zero divisor gives an infinity or nan, not an error."""
    if rhs != 0:
        return lhs / rhs
    if lhs == 0 or math.isnan(lhs):
        return math.nan
    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, output=None, environment: Environment | None = None):
        """
        Initialize the interpreter.

        Parameters:
            output: Stream that ``print`` writes to. Defaults to ``sys.stdout``.
            environment (Environment): Global scope. A fresh one by default.
        """
        self.output = output
        self.globals = environment if environment is not None else Environment()
        self.environment = self.globals
        # Line of the statement most recently started.
        self.line = 1

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.

        Returns:
            The evaluated value: ``None``, ``bool``, ``float`` or ``str``.

        Raises:
            LoxRuntimeError: On an operand type error or an undefined variable.
        """
        kind = node[0]

        if kind == Expr.LITERAL:
            return node[1]

        elif kind == Expr.GROUPING:
            return self.eval_expr(node[1])

        elif kind == Expr.VARIABLE:
            return self.environment.get(node[1])

        elif kind == Expr.ASSIGN:
            _, name_tok, value_node, _ = node
            value = self.eval_expr(value_node)
            self.environment.assign(name_tok, value)
            return value

        elif kind == Expr.LOGICAL:
            _, left_node, op_tok, right_node, _ = node
            lhs = self.eval_expr(left_node)
            if op_tok.type == TokenType.OR:
                if is_truthy(lhs):
                    return lhs
            elif not is_truthy(lhs):
                return lhs
            return self.eval_expr(right_node)

        elif kind == Expr.UNARY:
            _, op_tok, operand_node, _ = node
            operand = self.eval_expr(operand_node)
            match op_tok.type:
                case TokenType.MINUS:
                    if not is_number(operand):
                        raise OperandMustBeNumberError(op_tok)
                    return -operand
                case TokenType.BANG:
                    return not is_truthy(operand)

        elif kind == Expr.BINARY:
            _, left_node, op_tok, right_node, _ = node
            lhs = self.eval_expr(left_node)
            rhs = self.eval_expr(right_node)
            return self._binary(op_tok, lhs, rhs)

        raise RuntimeError(f"Invalid expression node: {node}")

    def _binary(self, op_tok, lhs, rhs):
        op = op_tok.type

        # Equality
        if op == TokenType.EQUAL_EQUAL:
            return values_equal(lhs, rhs)
        if op == TokenType.BANG_EQUAL:
            return not values_equal(lhs, rhs)

        if op == TokenType.PLUS:
            if is_number(lhs) and is_number(rhs):
                return lhs + rhs
            if is_string(lhs) and is_string(rhs):
                return lhs + rhs
            raise OperandsMustBeNumberOrStringError(op_tok)

        if not (is_number(lhs) and is_number(rhs)):
            raise OperandsMustBeNumbersError(op_tok)

        match op:
            # Arithmetic
            case TokenType.MINUS:
                return lhs - rhs
            case TokenType.STAR:
                return lhs * rhs
            case TokenType.SLASH:
                return _divide(lhs, rhs)
            # Comparison
            case TokenType.GREATER:
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                return lhs >= rhs
            case TokenType.LESS:
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                return lhs <= rhs

        raise RuntimeError(f"Unknown binary operator '{op_tok.lexeme}' on line {op_tok.line}")

    def execute_block(self, statements: list, environment: Environment) -> None:
        """
        Execute statements in the given scope, then restore the previous one.
        """
        previous = self.environment
        self.environment = environment
        try:
            self.execute(statements)
        finally:
            self.environment = previous

    def execute(self, statements: list) -> None:
        """
        Executes a list of statements in the current scope.

        Parameters:
            statements (list): Statement nodes, see `loxlang.nodes`.

        Raises:
            LoxRuntimeError: The first runtime error; later statements do not run.
        """
        for stmt in statements:
            kind = stmt[0]
            self.line = stmt[-1]

            if kind == Stmt.EXPRESSION:
                self.eval_expr(stmt[1])

            elif kind == Stmt.PRINT:
                value = self.eval_expr(stmt[1])
                print(stringify(value), file=self.output)

            elif kind == Stmt.VAR:
                _, name_tok, init_node, _ = stmt
                value = None
                if init_node is not None:
                    value = self.eval_expr(init_node)
                self.environment.define(name_tok.lexeme, value)

            elif kind == Stmt.BLOCK:
                self.execute_block(stmt[1], self.environment.child())

            elif kind == Stmt.IF:
                _, cond_node, then_branch, else_branch, _ = stmt
                if is_truthy(self.eval_expr(cond_node)):
                    self.execute([then_branch])
                elif else_branch is not None:
                    self.execute([else_branch])

            elif kind == Stmt.WHILE:
                _, cond_node, body, _ = stmt
                while is_truthy(self.eval_expr(cond_node)):
                    self.execute([body])

            else:
                raise TypeError(
                    f"Unknown statement type: {kind} "
                    f"on line {stmt[-1]}"
                )
