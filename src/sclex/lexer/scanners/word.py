"""Identifier, keyword and number scanner mixin."""

from __future__ import annotations

from sclex.lexer.charsets import is_digit, is_ident_part
from sclex.lexer.modes import LexerMode
from sclex.lexer.reader import CharReader
from sclex.tokens import KEYWORDS, Token, TokenType


class WordScannerMixin:
    """Mixin providing IDENT and NUMBER mode scanning."""

    _reader: CharReader
    _mode: LexerMode

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_ident(self) -> Token:
        """Scan a maximal identifier and classify it against KEYWORDS.

        Keyword matches are exact: ``ifx`` is one IDENT, never IF + IDENT.
        """
        text = self._reader.read_while(is_ident_part)
        self._mode = LexerMode.SOURCE
        return self._make_token(KEYWORDS.get(text, TokenType.IDENT), text)

    def _scan_number(self) -> Token:
        """Scan a maximal run of ASCII digits."""
        text = self._reader.read_while(is_digit)
        self._mode = LexerMode.SOURCE
        return self._make_token(TokenType.NUMBER, text)
