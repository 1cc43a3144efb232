"""Lexer states and operator tables.

This module defines the finite state machine modes for the lexer and the
lookup tables that drive operator classification.
"""

from __future__ import annotations

from enum import Enum, auto

from sclex.tokens import TokenType


class LexerMode(Enum):
    """Lexer states.

    The dispatch loop runs the handler for the current mode until DONE:
    - SOURCE: Between lexemes, skipping whitespace and classifying the next one
    - IDENT: At the start of an identifier or keyword
    - NUMBER: At the start of an integer literal
    - LINE_COMMENT: After ``//``
    - BLOCK_COMMENT: After ``/*``
    - DONE: EOF emitted; the stream is closed

    """

    SOURCE = auto()
    IDENT = auto()
    NUMBER = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    DONE = auto()


# Operators that never extend to two characters. "/" is absent: it may
# start a comment and is handled by the source scanner.
SINGLE_CHAR_OPERATORS: dict[str, TokenType] = {
    "*": TokenType.MULTIPLY,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
}

# first char -> (second char, two-char type, one-char type)
OPTIONAL_PAIR_OPERATORS: dict[str, tuple[str, TokenType, TokenType]] = {
    "=": ("=", TokenType.EQUAL, TokenType.ASSIGN),
    "<": ("=", TokenType.LESS_OR_EQUAL, TokenType.LESS),
    ">": ("=", TokenType.GREATER_OR_EQUAL, TokenType.GREATER),
    "!": ("=", TokenType.NOT_EQUAL, TokenType.NOT),
}

# first char -> (two-char type, diagnostic when the second char is missing).
# These have no single-character meaning.
REQUIRED_PAIR_OPERATORS: dict[str, tuple[TokenType, str]] = {
    "&": (TokenType.AND, "expected && operator"),
    "|": (TokenType.OR, "expected || operator"),
}
