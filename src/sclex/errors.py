"""Exception classes for sclex.

Lexical errors are never raised by the lexer; they travel in the token
stream as ERROR tokens. These exceptions cover consumer-side policy
(raise_on_error), API misuse, configuration and serialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sclex.tokens import Token


class SclexError(Exception):
    """Base exception for all sclex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(SclexError):
    """A lexical error surfaced as an exception by a consumer.

    Raised when a consumer opts into treating ERROR tokens as fatal.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        filename: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            filename: Source label (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.filename = filename

        location = ""
        if filename:
            location = f"{filename}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_token(cls, token: Token) -> LexError:
        """Build a LexError from an ERROR token."""
        loc = token.location
        return cls(
            token.value,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            filename=loc.filename,
        )


class LexerStateError(SclexError):
    """A lexer or token channel was used outside its lifecycle.

    Lexers are single-use: tokenize() may be called once per instance.
    """

    pass


class ConfigError(SclexError):
    """Invalid LexConfig value."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"LexConfig.{field_name}: {message}")


class SerializationError(SclexError):
    """Malformed serialized token data."""

    pass
