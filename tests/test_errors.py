"""Error-path tests.

The lexer reports lexical errors as tokens; these tests cover the
exception types used around it and the opt-in raise_on_error policy.
"""

import pytest

from sclex import lex, raise_on_error
from sclex.errors import (
    ConfigError,
    LexError,
    LexerStateError,
    SclexError,
    SerializationError,
)
from sclex.location import SourceLocation
from sclex.tokens import Token, TokenType

# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    def test_message_only(self) -> None:
        err = LexError("unexpected }")
        assert str(err) == "unexpected }"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = LexError("bad", lineno=42)
        assert str(err) == "42 bad"

    def test_with_line_and_column(self) -> None:
        err = LexError("unexpected )", lineno=10, col_offset=5)
        assert str(err) == "10:5 unexpected )"

    def test_with_filename(self) -> None:
        err = LexError("unexpected )", lineno=1, col_offset=2, filename="a.sc")
        assert str(err) == "a.sc:1:2 unexpected )"

    def test_from_token(self) -> None:
        token = Token(
            TokenType.ERROR,
            "unrecognized token ?",
            SourceLocation(lineno=3, col_offset=4, offset=20, filename="b.sc"),
        )
        err = LexError.from_token(token)

        assert err.message == "unrecognized token ?"
        assert (err.lineno, err.col_offset, err.filename) == (3, 4, "b.sc")
        assert str(err) == "b.sc:3:4 unrecognized token ?"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            LexError("x"),
            LexerStateError("x"),
            ConfigError("chunk_size", "x"),
            SerializationError("x"),
        ],
    )
    def test_is_sclex_error(self, error: Exception) -> None:
        assert isinstance(error, SclexError)

    def test_config_error_names_field(self) -> None:
        err = ConfigError("chunk_size", "must be >= 1, got 0")
        assert err.field_name == "chunk_size"
        assert str(err) == "LexConfig.chunk_size: must be >= 1, got 0"


# =========================================================================
# raise_on_error
# =========================================================================


class TestRaiseOnError:
    def test_clean_stream_passes_through(self) -> None:
        tokens = list(raise_on_error(lex("ok.sc", "a = 1")))
        assert [t.type for t in tokens] == [
            TokenType.IDENT,
            TokenType.ASSIGN,
            TokenType.NUMBER,
            TokenType.EOF,
        ]

    def test_raises_at_first_error(self) -> None:
        seen: list[Token] = []
        with pytest.raises(LexError) as exc_info:
            for token in raise_on_error(lex("bad.sc", "a }\nb ?")):
                seen.append(token)

        assert [t.value for t in seen] == ["a"]
        assert str(exc_info.value) == "bad.sc:1:3 unexpected }"

    def test_lexer_itself_never_raises(self) -> None:
        tokens = list(lex(None, "& | } ) ? /* open"))
        assert sum(t.is_error for t in tokens) == 6
        assert tokens[-1].type == TokenType.EOF
