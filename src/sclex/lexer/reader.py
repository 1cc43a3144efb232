"""Character cursor with one character of lookahead.

Wraps either an in-memory string or a readable text stream. Streams are
read lazily in fixed-size chunks, so lexing a large file never holds more
than one chunk in memory.

Thread Safety:
CharReader is owned by a single Lexer and must not be shared.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from sclex.utils.logger import get_logger

logger = get_logger(__name__)


class CharReader:
    """Forward-only character cursor that tracks line, column and offset.

    Line numbers increment on ``\\n``. Every other character, tabs and
    ``\\r`` included, advances the column by one.

    Usage:
            >>> reader = CharReader("ab\\nc")
            >>> reader.advance(), reader.peek()
            ('a', 'b')
            >>> reader.lineno, reader.col
            (1, 2)

    """

    __slots__ = (
        "_buf",
        "_idx",
        "_stream",
        "_chunk_size",
        "_name",
        "_lineno",
        "_col",
        "_offset",
    )

    def __init__(
        self,
        source: str | TextIO,
        *,
        chunk_size: int = 4096,
        name: str | None = None,
    ) -> None:
        """Initialize reader.

        Args:
            source: Source text, or a text stream with a read(n) method
            chunk_size: Characters requested per read() on streams
            name: Source label for log messages
        """
        if isinstance(source, str):
            self._buf = source
            self._stream: TextIO | None = None
        else:
            self._buf = ""
            self._stream = source
        self._idx = 0
        self._chunk_size = chunk_size
        self._name = name or "<input>"
        self._lineno = 1
        self._col = 1
        self._offset = 0

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def at_end(self) -> bool:
        return not self.peek()

    def _fill(self) -> bool:
        """Replace the exhausted buffer with the next chunk of the stream.

        A stream that fails to read is treated as ended.

        Returns:
            True if new characters are available.
        """
        if self._stream is None:
            return False

        try:
            chunk = self._stream.read(self._chunk_size)
        except (OSError, UnicodeDecodeError, ValueError):
            logger.warning(
                "Reading %s failed at %d:%d; treating as end of input",
                self._name,
                self._lineno,
                self._col,
                exc_info=True,
            )
            chunk = ""

        if not chunk:
            self._stream = None
            return False
        if not isinstance(chunk, str):
            raise TypeError(
                f"source stream must be opened in text mode, read() returned {type(chunk).__name__}"
            )

        self._buf = chunk
        self._idx = 0
        return True

    def peek(self) -> str:
        """Peek at the next character without advancing.

        Returns:
            Next character or empty string at end of input.
        """
        if self._idx >= len(self._buf) and not self._fill():
            return ""
        return self._buf[self._idx]

    def advance(self) -> str:
        """Consume one character, updating line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        char = self.peek()
        if not char:
            return ""

        self._idx += 1
        self._offset += 1
        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        return char

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while predicate holds.

        Returns:
            The consumed characters (possibly empty).
        """
        chars: list[str] = []
        char = self.peek()
        while char and predicate(char):
            chars.append(self.advance())
            char = self.peek()
        return "".join(chars)
