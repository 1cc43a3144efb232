"""Operator and delimiter scanner mixin."""

from __future__ import annotations

from sclex.lexer.modes import (
    OPTIONAL_PAIR_OPERATORS,
    REQUIRED_PAIR_OPERATORS,
    SINGLE_CHAR_OPERATORS,
)
from sclex.lexer.reader import CharReader
from sclex.tokens import Token, TokenType


class OperatorScannerMixin:
    """Mixin providing operator classification and delimiter depth tracking.

    Two-character operators use one character of lookahead. ``=``, ``<``,
    ``>`` and ``!`` are valid alone; ``&`` and ``|`` are errors unless
    doubled.

    Delimiter depth never goes negative: a closer at depth 0 yields an
    ERROR token and leaves the depth unchanged.

    """

    _reader: CharReader
    _brace_depth: int
    _paren_depth: int

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, message: str) -> Token:
        """Create an ERROR token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_operator(self, char: str) -> Token:
        """Classify an already-consumed operator or delimiter character.

        Args:
            char: The consumed character

        Returns:
            Operator/delimiter token, or ERROR token.
        """
        single = SINGLE_CHAR_OPERATORS.get(char)
        if single is not None:
            return self._make_token(single, char)

        optional = OPTIONAL_PAIR_OPERATORS.get(char)
        if optional is not None:
            return self._emit_if_next(char, *optional)

        required = REQUIRED_PAIR_OPERATORS.get(char)
        if required is not None:
            return self._expect(char, *required)

        if char == "{":
            self._brace_depth += 1
            return self._make_token(TokenType.LEFT_BRACE, char)
        if char == "}":
            if self._brace_depth == 0:
                return self._error("unexpected }")
            self._brace_depth -= 1
            return self._make_token(TokenType.RIGHT_BRACE, char)
        if char == "(":
            self._paren_depth += 1
            return self._make_token(TokenType.LEFT_PAREN, char)
        if char == ")":
            if self._paren_depth == 0:
                return self._error("unexpected )")
            self._paren_depth -= 1
            return self._make_token(TokenType.RIGHT_PAREN, char)

        return self._error(f"unrecognized token {char}")

    def _emit_if_next(
        self, char: str, second: str, paired: TokenType, alone: TokenType
    ) -> Token:
        """Emit the two-char form if the next character is ``second``."""
        if self._reader.peek() == second:
            self._reader.advance()
            return self._make_token(paired, char + second)
        return self._make_token(alone, char)

    def _expect(self, char: str, paired: TokenType, message: str) -> Token:
        """Emit the two-char form, or an error without consuming the next char."""
        if self._reader.peek() == char:
            self._reader.advance()
            return self._make_token(paired, char + char)
        return self._error(message)
