"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sclex.lexer.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

# Separators between lexemes. Form feed and vertical tab are not whitespace
# in this language; they lex as unrecognized tokens.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# Number literals are ASCII-only, unlike identifiers.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


def is_ident_start(char: str) -> bool:
    """Check if character can start an identifier (underscore or any letter)."""
    return char == "_" or char.isalpha()


def is_ident_part(char: str) -> bool:
    """Check if character can continue an identifier.

    Letters, underscore, and Unicode decimal digits (category Nd).
    """
    return char == "_" or char.isalpha() or char.isdecimal()


def is_digit(char: str) -> bool:
    return char in ASCII_DIGITS
