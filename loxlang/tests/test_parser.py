"""
Tests for the Lox parser: precedence, statement forms, for-loop desugaring
and panic-mode error recovery.
"""
from loxlang.diagnostics import CollectingSink
from loxlang.lexer import tokenize
from loxlang.nodes import Expr, Stmt, format_expr, format_stmt
from loxlang.parser import Parser, parse
from loxlang.tokens import TokenType

from loxlang.tests.utils import parse_source


def parse_expr(source: str) -> tuple:
    """
    Parse a single expression statement and return its expression.
    """
    ast = parse_source(source + ";")
    assert len(ast) == 1
    assert ast[0][0] == Stmt.EXPRESSION
    return ast[0][1]


def parse_with_errors(source: str):
    sink = CollectingSink()
    ast = parse_source(source, sink)
    return ast, sink.lines()


def test_pretty_print_unary_and_grouping():
    assert format_expr(parse_expr("-123 * (45.67)")) == "(* (- 123) (group 45.67))"


def test_multiplication_binds_tighter_than_addition():
    node = parse_expr("1 + 2 * 3")
    assert format_expr(node) == "(+ 1 (* 2 3))"
    assert node[0] == Expr.BINARY
    assert node[2].type == TokenType.PLUS


def test_binary_operators_are_left_associative():
    assert format_expr(parse_expr("1 - 2 - 3")) == "(- (- 1 2) 3)"
    assert format_expr(parse_expr("8 / 4 / 2")) == "(/ (/ 8 4) 2)"


def test_full_precedence_ladder():
    node = parse_expr("a = b or c and d == e < f + g * -h")
    assert format_expr(node) == "(= a (or b (and c (== d (< e (+ f (* g (- h))))))))"


def test_assignment_is_right_associative():
    node = parse_expr("a = b = 1")
    assert node[0] == Expr.ASSIGN
    assert node[1].lexeme == "a"
    assert node[2][0] == Expr.ASSIGN
    assert node[2][1].lexeme == "b"


def test_logical_operators_build_logical_nodes():
    node = parse_expr("x or y and z")
    assert node[0] == Expr.LOGICAL
    assert node[2].type == TokenType.OR
    assert node[3][0] == Expr.LOGICAL
    assert node[3][2].type == TokenType.AND


def test_unary_nests_to_the_right():
    assert format_expr(parse_expr("!!true")) == "(! (! true))"
    assert format_expr(parse_expr("--1")) == "(- (- 1))"


def test_primary_literals():
    assert parse_expr("true")[:2] == (Expr.LITERAL, True)
    assert parse_expr("false")[:2] == (Expr.LITERAL, False)
    assert parse_expr("nil")[:2] == (Expr.LITERAL, None)
    assert parse_expr('"hi"')[:2] == (Expr.LITERAL, "hi")
    assert parse_expr("2.5")[:2] == (Expr.LITERAL, 2.5)
    variable = parse_expr("name")
    assert variable[0] == Expr.VARIABLE
    assert variable[1].lexeme == "name"


def test_statement_forms():
    source = (
        "var a;\n"
        "var b = 1;\n"
        "print a;\n"
        "{ a = 2; }\n"
        "if (a) print 1; else print 2;\n"
        "while (false) print 3;\n"
    )
    ast, errors = parse_with_errors(source)
    assert errors == []
    assert [stmt[0] for stmt in ast] == [
        Stmt.VAR, Stmt.VAR, Stmt.PRINT, Stmt.BLOCK, Stmt.IF, Stmt.WHILE,
    ]
    assert ast[0][2] is None
    assert ast[1][2] == (Expr.LITERAL, 1.0, 2)
    assert [stmt[-1] for stmt in ast] == [1, 2, 3, 4, 5, 6]


def test_dangling_else_binds_to_nearest_if():
    ast = parse_source("if (a) if (b) print 1; else print 2;")
    outer = ast[0]
    assert outer[3] is None
    inner = outer[2]
    assert inner[0] == Stmt.IF
    assert inner[3][0] == Stmt.PRINT


def test_for_loop_desugars_into_while():
    ast = parse_source("for (var i = 0; i < 3; i = i + 1) print i;")
    assert format_stmt(ast[0]) == (
        "(block (var i 0) (while (< i 3) (block (print i) (; (= i (+ i 1))))))"
    )


def test_for_loop_without_clauses():
    ast = parse_source("for (;;) print 1;")
    assert format_stmt(ast[0]) == "(while true (print 1))"


def test_for_loop_with_expression_initializer():
    ast = parse_source("for (i = 0; i < 1;) print i;")
    assert format_stmt(ast[0]) == "(block (; (= i 0)) (while (< i 1) (print i)))"


def test_invalid_assignment_target_is_reported_but_not_fatal():
    ast, errors = parse_with_errors("1 = 2;\nprint 3;")
    assert errors == ["[line 1] Error at '=': Invalid assignment target."]
    assert len(ast) == 2
    assert format_stmt(ast[0]) == "(; 1)"
    assert ast[1][0] == Stmt.PRINT


def test_missing_semicolon_messages():
    _, errors = parse_with_errors("print 1")
    assert errors == ["[line 1] Error at end: Expect ';' after value."]

    _, errors = parse_with_errors("var a = 1 print a;")
    assert errors == ["[line 1] Error at 'print': Expect ';' after declaration."]

    _, errors = parse_with_errors("a\n+ 1\nb;")
    assert errors == ["[line 3] Error at 'b': Expect ';' after expression."]


def test_missing_variable_name():
    _, errors = parse_with_errors("var 1 = 2;")
    assert errors == ["[line 1] Error at '1': Expect variable name."]


def test_missing_expression():
    _, errors = parse_with_errors("print ;")
    assert errors == ["[line 1] Error at ';': Expect expression."]


def test_unclosed_group():
    _, errors = parse_with_errors("print (1 + 2;")
    assert errors == ["[line 1] Error at ';': Expect ')' after expression."]


def test_unclosed_block():
    _, errors = parse_with_errors("{ print 1;\n")
    assert errors == ["[line 2] Error at end: Expect '}' after block."]


def test_control_flow_paren_messages():
    cases = {
        "if 1) print 1;": "[line 1] Error at '1': Expect '(' after 'if'.",
        "if (1 print 1;": "[line 1] Error at 'print': Expect ')' after condition.",
        "while 1) print 1;": "[line 1] Error at '1': Expect '(' after 'while'.",
        "while (1 print 1;": "[line 1] Error at 'print': Expect ')' after condition.",
        "for var i = 0;;) print 1;": "[line 1] Error at 'var': Expect '(' after 'for'.",
        "for (;1 print 1;": "[line 1] Error at 'print': Expect ';' after loop condition.",
        "for (;;1 print 1;": "[line 1] Error at 'print': Expect ')' after for clauses.",
    }
    for source, expected in cases.items():
        _, errors = parse_with_errors(source)
        assert errors[0] == expected, source


def test_recovery_reports_independent_errors():
    """
    Each broken declaration is reported once and parsing resumes at the
    next statement boundary, keeping the declarations that parsed cleanly.
    """
    source = (
        "var a = 1;\n"
        "print ;\n"
        "var b = 2;\n"
        "var = 3;\n"
        "print b;\n"
    )
    ast, errors = parse_with_errors(source)
    assert errors == [
        "[line 2] Error at ';': Expect expression.",
        "[line 4] Error at '=': Expect variable name.",
    ]
    assert [stmt[0] for stmt in ast] == [Stmt.VAR, Stmt.VAR, Stmt.PRINT]
    assert [stmt[1].lexeme for stmt in ast[:2]] == ["a", "b"]


def test_recovery_stops_before_statement_keyword():
    ast, errors = parse_with_errors("1 + ) 2 print 3;")
    assert errors == ["[line 1] Error at ')': Expect expression."]
    assert len(ast) == 1
    assert ast[0][0] == Stmt.PRINT


def test_reserved_keywords_are_rejected():
    _, errors = parse_with_errors("fun f() {}\nclass A {}\nreturn 1;")
    assert errors == [
        "[line 1] Error at 'fun': Expect expression.",
        "[line 2] Error at 'class': Expect expression.",
        "[line 3] Error at 'return': Expect expression.",
    ]


def test_parser_reports_failure_flag():
    sink = CollectingSink()
    tokens, _ = tokenize("print 1;", sink)
    parser = Parser(tokens, sink)
    parser.parse()
    assert not parser.had_error

    tokens, _ = tokenize("print", sink)
    statements, had_error = parse(tokens, sink)
    assert had_error
    assert statements == []


def test_parser_appends_missing_eof():
    parser = Parser([], CollectingSink())
    assert parser.parse() == []
    assert not parser.had_error


def test_mixed_levels_fold_in_precedence_order():
    assert format_expr(parse_expr("1 * 2 + 3 * 4 - 5")) == "(- (+ (* 1 2) (* 3 4)) 5)"
    assert format_expr(parse_expr("a == b != c")) == "(!= (== a b) c)"
    assert format_expr(parse_expr("1 < 2 == 3 >= 4")) == "(== (< 1 2) (>= 3 4))"
    assert format_expr(parse_expr("a and b or c and d")) == "(or (and a b) (and c d))"


def test_hundred_nested_groups_parse():
    node = parse_expr("(" * 100 + "1 + 2" + ")" * 100)
    depth = 0
    while node[0] == Expr.GROUPING:
        node = node[1]
        depth += 1
    assert depth == 100
    assert format_expr(node) == "(+ 1 2)"


def test_nesting_past_the_call_stack_is_reported(sink):
    source = "print " + "(" * 5000 + "1" + ")" * 5000 + ";\nprint 2;"
    tokens, _ = tokenize(source, sink)
    parser = Parser(tokens, sink)
    ast = parser.parse()
    assert sink.lines() == ["[line 1] Error at '(': Too deeply nested."]
    assert parser.panicked
    assert len(ast) == 1
    assert format_stmt(ast[0]) == "(print 2)"
