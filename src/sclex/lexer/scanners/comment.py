"""Comment scanner mixin.

Comments produce no tokens. A line comment stops before its newline, so
the newline is skipped as ordinary whitespace. Block comments do not nest:
the first ``*/`` closes the comment.
"""

from __future__ import annotations

from sclex.config import LexConfig
from sclex.lexer.modes import LexerMode
from sclex.lexer.reader import CharReader
from sclex.tokens import Token


class CommentScannerMixin:
    """Mixin providing LINE_COMMENT and BLOCK_COMMENT mode scanning."""

    _reader: CharReader
    _mode: LexerMode
    _config: LexConfig

    def _error(self, message: str) -> Token:
        """Create an ERROR token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line_comment(self) -> None:
        """Skip to (not past) the end of the line."""
        reader = self._reader
        char = reader.peek()
        while char and char != "\n":
            reader.advance()
            char = reader.peek()
        self._mode = LexerMode.SOURCE

    def _scan_block_comment(self) -> Token | None:
        """Skip through the closing ``*/``.

        The saved location still points at the opening ``/``, so an
        unterminated comment is reported there.

        Returns:
            ERROR token if the comment runs to end of input (and reporting
            is enabled), else None.
        """
        reader = self._reader
        self._mode = LexerMode.SOURCE
        while True:
            char = reader.advance()
            if not char:
                if self._config.report_unterminated_comments:
                    return self._error("comment not terminated")
                return None
            if char == "*" and reader.peek() == "/":
                reader.advance()
                return None
