"""
Utility functions shared across Lox Language tests.
"""
from loxlang.diagnostics import CollectingSink
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.runner import run


def scan(source: str):
    """
    Tokenize source code and return the tokens, the error flag and the
    diagnostics that were reported.
    """
    sink = CollectingSink()
    tokens, had_error = tokenize(source, sink)
    return tokens, had_error, sink


def parse_source(source: str, sink: CollectingSink | None = None):
    """
    Parse source code and return the AST.
    """
    sink = sink if sink is not None else CollectingSink()
    tokens, _ = tokenize(source, sink)
    parser = Parser(tokens, sink)
    return parser.parse()


def execute_source(source: str) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter afterwards.
    """
    ast = parse_source(source)
    interpreter = Interpreter()
    interpreter.execute(ast)
    return interpreter


def run_source(source: str):
    """
    Run source code through the full pipeline.

    Returns:
        bool: The run status.
        list[str]: The rendered diagnostics.
    """
    sink = CollectingSink()
    ok = run(source, sink)
    return ok, sink.lines()
