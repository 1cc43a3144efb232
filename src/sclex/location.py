"""Source location tracking for tokens and diagnostics.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token's first character.

    Line and column are 1-indexed; every character (tabs included) advances
    the column by one. The offset is the 0-indexed character offset from the
    start of the input.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute character offset in the source
        filename: Label of the source, used only for diagnostics

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=7, filename="gcd.sc")
            >>> str(loc)
            'gcd.sc:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    filename: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "main.sc:10:5" or "10:5"
        """
        if self.filename:
            return f"{self.filename}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
