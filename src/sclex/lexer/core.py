"""State-machine lexer for the sc language.

A LexerMode variable drives a single dispatch loop. Each step runs the
handler for the current mode, which consumes at most one lexeme (or one
comment) and returns a token or None. Tokens are yielded one at a time, so
the scan only advances as fast as the consumer pulls.

Lexical errors are ERROR tokens in the stream; the scan never raises on
bad input and always ends with exactly one EOF token.

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from sclex.config import get_lex_config
from sclex.errors import LexerStateError
from sclex.lexer.modes import LexerMode
from sclex.lexer.reader import CharReader
from sclex.lexer.scanners import (
    CommentScannerMixin,
    OperatorScannerMixin,
    SourceScannerMixin,
    WordScannerMixin,
)
from sclex.location import SourceLocation
from sclex.tokens import Token, TokenType
from sclex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    SourceScannerMixin,
    WordScannerMixin,
    OperatorScannerMixin,
    CommentScannerMixin,
):
    """State-machine lexer producing a lazy, forward-only token stream.

    Usage:
            >>> lexer = Lexer("var x int\\nx = 4 <= y", filename="main.sc")
            >>> for token in lexer.tokenize():
            ...     print(repr(token))
        Token(VAR, 'var', 1:1)
        Token(IDENT, 'x', 1:5)
        Token(INT, 'int', 1:7)
        Token(IDENT, 'x', 2:1)
        Token(ASSIGN, '=', 2:3)
        Token(NUMBER, '4', 2:5)
        Token(LESS_OR_EQUAL, '<=', 2:7)
        Token(IDENT, 'y', 2:10)
        Token(EOF, '', 2:11)

    Thread Safety:
        Lexer instances are single-use. Create one per source.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_reader",
        "_filename",
        "_config",
        "_mode",
        "_brace_depth",  # Unmatched "{" so far
        "_paren_depth",  # Unmatched "(" so far
        "_started",
        "_saved_lineno",
        "_saved_col",
        "_saved_offset",
    )

    def __init__(self, source: str | TextIO, filename: str | None = None) -> None:
        """Initialize lexer with a source.

        Args:
            source: Source text, or a readable text stream
            filename: Optional label for diagnostics; never opened
        """
        self._config = get_lex_config()
        self._filename = filename
        self._reader = CharReader(
            source, chunk_size=self._config.chunk_size, name=filename
        )
        self._mode = LexerMode.SOURCE
        self._brace_depth = 0
        self._paren_depth = 0
        self._started = False

        self._saved_lineno = 1
        self._saved_col = 1
        self._saved_offset = 0

    @property
    def filename(self) -> str | None:
        return self._filename

    @property
    def mode(self) -> LexerMode:
        return self._mode

    @property
    def brace_depth(self) -> int:
        return self._brace_depth

    @property
    def paren_depth(self) -> int:
        return self._paren_depth

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source into a token stream.

        Yields:
            Token objects one at a time, ending with EOF

        Raises:
            LexerStateError: If called more than once on this lexer
        """
        if self._started:
            raise LexerStateError("Lexer is single-use; tokenize() was already called")
        self._started = True
        return self._run()

    def _run(self) -> Iterator[Token]:
        while self._mode is not LexerMode.DONE:
            token = self._dispatch_mode()
            if token is not None:
                yield token

    def _dispatch_mode(self) -> Token | None:
        """Dispatch to the scanner for the current mode.

        Returns:
            Token produced by this step, if any.
        """
        mode = self._mode
        if mode is LexerMode.SOURCE:
            return self._scan_source()
        if mode is LexerMode.IDENT:
            return self._scan_ident()
        if mode is LexerMode.NUMBER:
            return self._scan_number()
        if mode is LexerMode.LINE_COMMENT:
            self._scan_line_comment()
            return None
        if mode is LexerMode.BLOCK_COMMENT:
            return self._scan_block_comment()
        raise AssertionError(f"unhandled lexer mode {mode!r}")

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token.

        Call this before consuming the first character of a lexeme.
        """
        reader = self._reader
        self._saved_lineno = reader.lineno
        self._saved_col = reader.col
        self._saved_offset = reader.offset

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a Token located at the last saved location.

        Args:
            token_type: The token type.
            value: Matched text (or diagnostic for ERROR).

        Returns:
            Token at the saved location.
        """
        return Token(
            type=token_type,
            value=value,
            location=SourceLocation(
                lineno=self._saved_lineno,
                col_offset=self._saved_col,
                offset=self._saved_offset,
                filename=self._filename,
            ),
        )

    def _error(self, message: str) -> Token:
        """Create an ERROR token carrying a diagnostic message."""
        token = self._make_token(TokenType.ERROR, message)
        logger.debug("Lexical error at %s: %s", token.location, message)
        return token
