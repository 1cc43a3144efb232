"""Tests for CharReader over strings and text streams."""

from __future__ import annotations

import io
import logging

import pytest

from sclex.config import LexConfig, lex_config_context
from sclex.lexer import CharReader, Lexer
from sclex.tokens import TokenType


class CountingStream(io.StringIO):
    """StringIO that counts read() calls."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.reads = 0

    def read(self, size: int | None = -1) -> str:
        self.reads += 1
        return super().read(size)


class FailingStream(io.StringIO):
    """Returns its text on the first read, then raises ``error``."""

    def __init__(self, text: str, error: Exception) -> None:
        super().__init__(text)
        self.error = error
        self.calls = 0

    def read(self, size: int | None = -1) -> str:
        self.calls += 1
        if self.calls > 1:
            raise self.error
        return super().read()


class TestCharReader:
    def test_peek_does_not_advance(self) -> None:
        reader = CharReader("ab")
        assert reader.peek() == "a"
        assert reader.peek() == "a"
        assert reader.offset == 0

    def test_advance_tracks_lines_and_columns(self) -> None:
        reader = CharReader("a\nb")
        assert reader.advance() == "a"
        assert (reader.lineno, reader.col) == (1, 2)
        assert reader.advance() == "\n"
        assert (reader.lineno, reader.col) == (2, 1)
        assert reader.advance() == "b"
        assert reader.offset == 3

    def test_end_of_input(self) -> None:
        reader = CharReader("")
        assert reader.at_end
        assert reader.peek() == ""
        assert reader.advance() == ""
        assert (reader.lineno, reader.col, reader.offset) == (1, 1, 0)

    def test_read_while(self) -> None:
        reader = CharReader("aaab")
        assert reader.read_while(lambda c: c == "a") == "aaa"
        assert reader.peek() == "b"

    def test_stream_chunks_are_stitched(self) -> None:
        reader = CharReader(io.StringIO("hello world"), chunk_size=3)
        assert reader.read_while(str.isalpha) == "hello"
        assert reader.advance() == " "
        assert reader.read_while(str.isalpha) == "world"
        assert reader.at_end

    def test_at_end_follows_stream_draining(self) -> None:
        reader = CharReader(io.StringIO("ab"), chunk_size=1)
        assert not reader.at_end
        assert reader.offset == 0

        reader.advance()
        assert not reader.at_end
        reader.advance()
        assert reader.at_end
        assert reader.offset == 2


class TestStreamSources:
    def test_stream_matches_string(self) -> None:
        source = "var x int\nx = 10 // ten\nif x >= 3 { x = x - 1 }\n"
        expected = [(t.type, t.value, t.location) for t in Lexer(source).tokenize()]

        with lex_config_context(LexConfig(chunk_size=2)):
            lexer = Lexer(io.StringIO(source))
        actual = [(t.type, t.value, t.location) for t in lexer.tokenize()]

        assert actual == expected

    def test_stream_is_read_on_demand(self) -> None:
        stream = CountingStream("ab cd ef gh")
        with lex_config_context(LexConfig(chunk_size=2)):
            tokens = Lexer(stream).tokenize()

        assert stream.reads == 0
        assert next(tokens).value == "ab"
        assert stream.reads == 2

    def test_read_failure_ends_input(self, caplog: pytest.LogCaptureFixture) -> None:
        stream = FailingStream("x y", OSError("disk gone"))

        with caplog.at_level(logging.WARNING, logger="sclex"):
            tokens = list(Lexer(stream, filename="flaky.sc").tokenize())

        assert [(t.type, t.value, t.col) for t in tokens] == [
            (TokenType.IDENT, "x", 1),
            (TokenType.IDENT, "y", 3),
            (TokenType.EOF, "", 4),
        ]
        assert any("flaky.sc" in r.getMessage() for r in caplog.records)
        assert caplog.records[0].name == "sclex.lexer.reader"

    def test_decode_failure_ends_input(self) -> None:
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        tokens = list(Lexer(FailingStream("a", error)).tokenize())

        assert [t.type for t in tokens] == [TokenType.IDENT, TokenType.EOF]

    def test_closed_stream_is_empty_input(self) -> None:
        stream = io.StringIO("x")
        stream.close()

        tokens = list(Lexer(stream).tokenize())
        assert [(t.type, t.lineno, t.col) for t in tokens] == [(TokenType.EOF, 1, 1)]

    def test_binary_stream_is_rejected(self) -> None:
        tokens = Lexer(io.BytesIO(b"x")).tokenize()  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="text mode"):
            next(tokens)
