"""Token, TokenType and keyword definitions for the sclex lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token has a type, a value, and the location of its first character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum and KEYWORDS is a read-only mapping.

"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from sclex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Stream structure (EOF, ERROR)
    - Identifiers and literals
    - Keywords and type names
    - Operators
    - Delimiters

    """

    # Stream structure
    EOF = auto()
    ERROR = auto()  # value holds the diagnostic message

    # Identifiers and literals
    IDENT = auto()
    FALSE = auto()  # false
    NUMBER = auto()  # integer literal
    TRUE = auto()  # true

    # Keywords
    ELSE = auto()
    IF = auto()
    VAR = auto()
    FOR = auto()

    # Types
    BOOL = auto()
    INT = auto()

    # Assignment
    ASSIGN = auto()  # =

    # Arithmetic
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /
    PLUS = auto()  # +
    MINUS = auto()  # -

    # Relational
    LESS = auto()  # <
    LESS_OR_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_OR_EQUAL = auto()  # >=
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=

    # Logical
    NOT = auto()  # !
    AND = auto()  # &&
    OR = auto()  # ||

    # Delimiters
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }


# Reserved words. Lookup is exact and case-sensitive.
KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "bool": TokenType.BOOL,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "if": TokenType.IF,
        "int": TokenType.INT,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The matched source text, or the diagnostic message for
            ERROR tokens. Empty for EOF.
        location: Location of the token's first character

    """

    type: TokenType
    value: str
    location: SourceLocation

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self.location.col_offset

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"

    def __str__(self) -> str:
        """Human-readable form used in diagnostics."""
        if self.type is TokenType.EOF:
            return "EOF"
        if self.type is TokenType.ERROR:
            return self.value
        if len(self.value) > 10:
            return f"{self.location} {self.value[:10]!r}..."
        return f"{self.location} {self.value!r}"
