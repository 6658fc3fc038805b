import pytest
from hypothesis import given, strategies as st

from pigment.reader.lexer import Lexer
from pigment.reader.parser import Parser, parse_program
from pigment.types.ast import Block, Form, ParamList, Symbol
from pigment.types.errors import PigmentError, PigmentSyntaxError


def parse_one(source):
    return Parser(Lexer(source)).parse()


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("x", Symbol("x")),
        ("(+ 1 2)", Form(Symbol("+"), [1.0, 2.0])),
        ("(vec)", Form(Symbol("vec"), [])),
        ("[1 x]", Block([1.0, Symbol("x")])),
        ("[]", Block([])),
        ("{a b}", ParamList(["a", "b"])),
        ("{}", ParamList([])),
        (
            "(set f (func {a b} (* a b)))",
            Form(
                Symbol("set"),
                [
                    Symbol("f"),
                    Form(
                        Symbol("func"),
                        [ParamList(["a", "b"]), Form(Symbol("*"), [Symbol("a"), Symbol("b")])],
                    ),
                ],
            ),
        ),
    ],
)
def test_parser(source, expected):
    assert parse_one(source) == expected


def test_nested_blocks():
    assert parse_one("[[1] [2 3]]") == Block([Block([1.0]), Block([2.0, 3.0])])


def test_program_reads_all_top_level_forms():
    program = parse_program("(set x 1) x [x]")
    assert program == [
        Form(Symbol("set"), [Symbol("x"), 1.0]),
        Symbol("x"),
        Block([Symbol("x")]),
    ]


def test_empty_program():
    assert parse_program("   ") == []


def test_is_end():
    parser = Parser(Lexer("1"))
    assert not parser.is_end()
    parser.parse()
    assert parser.is_end()


def test_token_and_istoken():
    parser = Parser(Lexer("( x"))
    assert parser.istoken("(")
    assert not parser.istoken(")")
    parser.token("(")
    with pytest.raises(PigmentSyntaxError, match="invalid token 'x', correct token is '\\)'."):
        parser.token(")")


@pytest.mark.parametrize(
    "source, message",
    [
        ("(1 2)", "Number '1' is not identifier."),
        ('("f" 2)', 'String Literal "f" is not identifier.'),
        ("(", "'EOF' is not identifier."),
        ("{a 1}", "Number '1' is not identifier."),
        ('{"a"}', 'String Literal "a" is not identifier.'),
        ("(+ 1 2", "invalid token 'EOF', correct token is '\\)'."),
        ("[1 2", "invalid token 'EOF', correct token is '\\]'."),
        ("{a", "invalid token 'EOF', correct token is '}'."),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(PigmentSyntaxError, match=message):
        parse_program(source)


def test_parse_at_eof():
    parser = Parser(Lexer(""))
    with pytest.raises(PigmentSyntaxError, match="already EOF."):
        parser.parse()


def test_nesting_limit():
    source = "[" * 20 + "]" * 20
    assert parse_program(source, max_nesting=20)
    with pytest.raises(PigmentSyntaxError, match="nesting too deep"):
        parse_program(source, max_nesting=19)


def test_deep_nesting_is_a_syntax_error_not_a_crash():
    with pytest.raises(PigmentSyntaxError):
        parse_program("(vec " * 5000)


def test_nesting_beyond_the_python_stack_is_a_syntax_error():
    source = "[" * 5000 + "]" * 5000
    with pytest.raises(PigmentSyntaxError, match="nesting too deep"):
        parse_program(source, max_nesting=100_000)


source_strat = st.lists(
    st.sampled_from(["(", ")", "[", "]", "{", "}", "x", "1", '"s"', "+", " "]),
    max_size=30,
).map(" ".join)


@given(source_strat)
def test_parser_never_crashes(source):
    try:
        parse_program(source)
    except PigmentError:
        pass
