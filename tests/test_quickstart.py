"""Tests that the usage examples in the package docstrings hold.

Each test mirrors one documented example, so a behavior change that would
make the docs lie fails here first.
"""

from __future__ import annotations

import pytest

from sclex import lex, raise_on_error
from sclex.channel import TokenChannel
from sclex.errors import LexError
from sclex.lexer import Lexer


class TestPackageExamples:
    def test_quick_start_output(self) -> None:
        printed = [str(token) for token in lex("main.sc", "var n int\nn = 10")]
        assert printed == [
            "main.sc:1:1 'var'",
            "main.sc:1:5 'n'",
            "main.sc:1:7 'int'",
            "main.sc:2:1 'n'",
            "main.sc:2:3 '='",
            "main.sc:2:5 '10'",
            "EOF",
        ]

    def test_lex_example(self) -> None:
        assert [t.type.name for t in lex(None, "x <= 1")] == [
            "IDENT",
            "LESS_OR_EQUAL",
            "NUMBER",
            "EOF",
        ]

    def test_raise_on_error_example(self) -> None:
        with pytest.raises(LexError) as exc_info:
            list(raise_on_error(lex("a.sc", "a & b")))

        assert str(exc_info.value) == "a.sc:1:3 expected && operator"
        assert exc_info.value.lineno == 1
        assert exc_info.value.col_offset == 3


class TestLexerExamples:
    def test_lexer_package_example(self) -> None:
        assert [repr(t) for t in Lexer("if x != 0 {").tokenize()] == [
            "Token(IF, 'if', 1:1)",
            "Token(IDENT, 'x', 1:4)",
            "Token(NOT_EQUAL, '!=', 1:6)",
            "Token(NUMBER, '0', 1:9)",
            "Token(LEFT_BRACE, '{', 1:11)",
            "Token(EOF, '', 1:12)",
        ]

    def test_lexer_class_example(self) -> None:
        lexer = Lexer("var x int\nx = 4 <= y", filename="main.sc")
        assert [repr(t) for t in lexer.tokenize()] == [
            "Token(VAR, 'var', 1:1)",
            "Token(IDENT, 'x', 1:5)",
            "Token(INT, 'int', 1:7)",
            "Token(IDENT, 'x', 2:1)",
            "Token(ASSIGN, '=', 2:3)",
            "Token(NUMBER, '4', 2:5)",
            "Token(LESS_OR_EQUAL, '<=', 2:7)",
            "Token(IDENT, 'y', 2:10)",
            "Token(EOF, '', 2:11)",
        ]

    def test_channel_example(self) -> None:
        with TokenChannel(Lexer("a && b")) as channel:
            reprs = [repr(token) for token in channel]

        assert reprs == [
            "Token(IDENT, 'a', 1:1)",
            "Token(AND, '&&', 1:3)",
            "Token(IDENT, 'b', 1:6)",
            "Token(EOF, '', 1:7)",
        ]
