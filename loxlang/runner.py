"""Pipeline entry point.

`run()` pushes one piece of source text through every phase:

1. The lexer turns the text into tokens, reporting bad characters.
2. The parser builds statements, reporting and skipping broken ones.
3. Unless the parser had to drop a declaration, the interpreter executes
   the statements.

Any error along the way is reported through the diagnostic sink and makes
the run fail. Errors that leave every declaration intact, such as a stray
character or an invalid assignment target, still let the program execute;
the run is reported as failed all the same. Programs nested deeper than the
Python stack allows are reported rather than crashing the host.


File: runner.py
Version: 0.1.0
License: MIT
"""

from loxlang.diagnostics import DiagnosticSink, stderr_sink
from loxlang.exceptions import LoxRuntimeError, StackOverflowError
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser


def run(source: str, sink: DiagnosticSink | None = None,
        interpreter: Interpreter | None = None) -> bool:
    """
    Lex, parse and execute a program.

    Parameters:
        source (str): The program text.
        sink (DiagnosticSink): Receives every diagnostic. Defaults to stderr.
        interpreter (Interpreter): Reused when given, so its global bindings
            carry over (as in a REPL session). A fresh one is made otherwise.

    Returns:
        bool: True if no lexical, syntax or runtime error occurred.
    """
    report = sink if sink is not None else stderr_sink

    tokens, lex_error = tokenize(source, report)
    parser = Parser(tokens, report)
    statements = parser.parse()
    if parser.panicked:
        return False

    if interpreter is None:
        interpreter = Interpreter()
    try:
        interpreter.execute(statements)
    except LoxRuntimeError as e:
        report(e.diagnostic)
        return False
    except RecursionError:
        report(StackOverflowError(interpreter.line).diagnostic)
        return False
    return not (lex_error or parser.had_error)
