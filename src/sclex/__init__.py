"""
sclex: streaming lexer for the sc toy language

Turns sc source (variables, if/for, arithmetic, logical and relational
expressions) into a lazy, forward-only stream of typed tokens. Lexical
errors are ERROR tokens in the stream; the scan never aborts on bad input.

Quick Start:
    >>> from sclex import lex
    >>> for token in lex("main.sc", "var n int\\nn = 10"):
    ...     print(token)
    main.sc:1:1 'var'
    main.sc:1:5 'n'
    main.sc:1:7 'int'
    main.sc:2:1 'n'
    main.sc:2:3 '='
    main.sc:2:5 '10'
    EOF

    >>> # Lex a file lazily, on a worker thread
    >>> with open("main.sc") as f, lex("main.sc", f, threaded=True) as tokens:
    ...     kinds = [t.type for t in tokens]

Installation:
    pip install sclex
"""

from collections.abc import Iterable, Iterator
from typing import TextIO

from sclex.channel import TokenChannel
from sclex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from sclex.errors import (
    ConfigError,
    LexError,
    LexerStateError,
    SclexError,
    SerializationError,
)
from sclex.lexer import Lexer, LexerMode
from sclex.location import SourceLocation
from sclex.serialization import from_dict, from_json, to_dict, to_json
from sclex.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"


def lex(
    filename: str | None,
    source: str | TextIO,
    *,
    threaded: bool = False,
) -> Iterator[Token]:
    """Start lexing a source and return its token stream.

    Args:
        filename: Label for diagnostics (never opened)
        source: Source text or a readable text stream
        threaded: Run the scan on a worker thread (returns a TokenChannel,
            which should be closed or used as a context manager)

    Returns:
        Iterator of tokens ending with EOF

    Example:
        >>> [t.type.name for t in lex(None, "x <= 1")]
        ['IDENT', 'LESS_OR_EQUAL', 'NUMBER', 'EOF']
    """
    lexer = Lexer(source, filename=filename)
    if threaded:
        return TokenChannel(lexer)
    return lexer.tokenize()


def raise_on_error(tokens: Iterable[Token]) -> Iterator[Token]:
    """Pass tokens through, raising at the first ERROR token.

    An opt-in policy for consumers that treat any lexical error as fatal.

    Raises:
        LexError: Built from the first ERROR token

    Example:
        >>> list(raise_on_error(lex("a.sc", "a & b")))
        Traceback (most recent call last):
        ...
        sclex.errors.LexError: a.sc:1:3 expected && operator
    """
    for token in tokens:
        if token.is_error:
            raise LexError.from_token(token)
        yield token


__all__ = [
    # Main API
    "lex",
    "raise_on_error",
    "Lexer",
    "LexerMode",
    "TokenChannel",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "SclexError",
    "LexError",
    "LexerStateError",
    "ConfigError",
    "SerializationError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "__version__",
]
