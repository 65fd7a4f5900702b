"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set ``LOXDEBUG`` in the environment to dump the tokens and the AST before
a script runs.
"""
import os
import sys

from loxlang.diagnostics import CollectingSink, stderr_sink
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.nodes import format_stmt
from loxlang.parser import Parser
from loxlang.runner import run

EXIT_COMMANDS = {"exit", "quit"}


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox [script.lox]")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(code: str):
    """
    Print tokenized source and AST
    """
    sink = CollectingSink()
    tokens, _ = tokenize(code, sink)
    ast = Parser(tokens, sink).parse()
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print("\nAST:\n")
    for stmt in ast:
        print(format_stmt(stmt))
    print(" ")


def run_script(script_name: str) -> bool:
    """
    Run a Lox script. Returns True on success.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return False

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(code)

    return run(code)


def is_incomplete(source: str) -> bool:
    """
    Return True if the source only fails to parse because it ends too early,
    e.g. an unclosed block typed over several lines.
    """
    sink = CollectingSink()
    tokens, lex_error = tokenize(source, sink)
    if lex_error:
        return False
    Parser(tokens, sink).parse()
    return len(sink) > 0 and all(d.location == " at end" for d in sink)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter()
    buffer: list[str] = []
    while True:
        try:
            prompt = "> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in EXIT_COMMANDS:
                break
            # A blank line ends a pending entry and reports what is missing
            if buffer and not line.strip():
                run("\n".join(buffer), stderr_sink, interpreter)
                buffer.clear()
                continue
            buffer.append(line)
            source = "\n".join(buffer)
            if is_incomplete(source):
                continue
            run(source, stderr_sink, interpreter)
            buffer.clear()
        except KeyboardInterrupt:
            if buffer:
                print("\nDiscarded.")
                buffer.clear()
                continue
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: run it as a script; the exit code
      is 0 on success and 1 if any error was reported.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return 0 if run_script(args[0]) else 1
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
