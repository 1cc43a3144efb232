"""Modular state-machine lexer for sclex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, CharReader
├── core.py              # Lexer class (mixin composition + dispatch loop)
├── modes.py             # LexerMode enum, operator tables
├── charsets.py          # Character classification
├── reader.py            # CharReader cursor over str or text streams
└── scanners/            # Mode-specific scanners
    ├── source.py        # SOURCE mode (whitespace + main dispatch)
    ├── word.py          # IDENT and NUMBER modes
    ├── operator.py      # Operators and delimiter depth
    └── comment.py       # LINE_COMMENT and BLOCK_COMMENT modes

Usage:
    >>> from sclex.lexer import Lexer
    >>> for token in Lexer("if x != 0 {").tokenize():
    ...     print(repr(token))
Token(IF, 'if', 1:1)
Token(IDENT, 'x', 1:4)
Token(NOT_EQUAL, '!=', 1:6)
Token(NUMBER, '0', 1:9)
Token(LEFT_BRACE, '{', 1:11)
Token(EOF, '', 1:12)

"""

from sclex.lexer.core import Lexer
from sclex.lexer.modes import LexerMode
from sclex.lexer.reader import CharReader

__all__ = ["CharReader", "Lexer", "LexerMode"]
