"""Source mode scanner mixin (main dispatch)."""

from __future__ import annotations

from collections.abc import Callable

from sclex.lexer.charsets import WHITESPACE, is_digit, is_ident_start
from sclex.lexer.modes import LexerMode
from sclex.lexer.reader import CharReader
from sclex.tokens import Token, TokenType


class SourceScannerMixin:
    """Mixin providing SOURCE mode scanning logic.

    Skips whitespace, then classifies the next lexeme by its first
    character. Identifiers, numbers and comments hand off to their own
    mode; everything else is emitted from here.

    """

    # These will be set by the Lexer class or other mixins
    _reader: CharReader
    _mode: LexerMode

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    # Provided by OperatorScannerMixin, which follows this mixin in the MRO
    _scan_operator: Callable[[str], Token]

    def _scan_source(self) -> Token | None:
        """Scan up to the start of the next lexeme and classify it.

        Returns:
            A token, or None when control passes to another mode.
        """
        reader = self._reader
        while reader.peek() in WHITESPACE:
            reader.advance()

        self._save_location()
        char = reader.peek()

        if not char:
            self._mode = LexerMode.DONE
            return self._make_token(TokenType.EOF, "")

        if is_ident_start(char):
            self._mode = LexerMode.IDENT
            return None

        if is_digit(char):
            self._mode = LexerMode.NUMBER
            return None

        reader.advance()
        if char == "/":
            follow = reader.peek()
            if follow == "/":
                reader.advance()
                self._mode = LexerMode.LINE_COMMENT
                return None
            if follow == "*":
                reader.advance()
                self._mode = LexerMode.BLOCK_COMMENT
                return None
            return self._make_token(TokenType.DIVIDE, char)

        return self._scan_operator(char)
