"""Token channel: run a scan on a worker thread with a one-token handoff.

The worker thread produces a token only after the consumer asks for one,
so at most one token is in flight and the scan never runs ahead of the
consumer. Nothing polls: both sides block on threading primitives.

Usage:
    >>> from sclex.channel import TokenChannel
    >>> from sclex.lexer import Lexer
    >>> with TokenChannel(Lexer("a && b")) as channel:
    ...     for token in channel:
    ...         print(repr(token))
    Token(IDENT, 'a', 1:1)
    Token(AND, '&&', 1:3)
    Token(IDENT, 'b', 1:6)
    Token(EOF, '', 1:7)

Thread Safety:
    One producer (the worker) and one consumer. A channel must not be
    iterated from several threads at once.

"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from types import TracebackType
from typing import TYPE_CHECKING, cast

from sclex.errors import LexerStateError
from sclex.tokens import Token
from sclex.utils.logger import get_logger

if TYPE_CHECKING:
    from sclex.lexer import Lexer

logger = get_logger(__name__)

# Handoff marker: the token stream is exhausted
_END = object()


class TokenChannel:
    """Iterator over a lexer's tokens, produced on a dedicated thread.

    close() is the stop signal: it wakes the worker, which closes the
    underlying token generator and exits. Dropping a channel without
    closing it leaves the (daemon) worker blocked until interpreter exit.

    """

    def __init__(self, lexer: Lexer) -> None:
        """Start the worker thread.

        Args:
            lexer: A fresh Lexer; its tokenize() is called immediately.

        Raises:
            LexerStateError: If the lexer was already tokenized
        """
        self._tokens = lexer.tokenize()
        self._name = lexer.filename or "<input>"
        self._demand = threading.Semaphore(0)
        self._handoff: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._stop = threading.Event()
        self._finished = False
        self._thread = threading.Thread(
            target=self._produce,
            name=f"sclex-lexer[{self._name}]",
            daemon=True,
        )
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._stop.is_set()

    def _produce(self) -> None:
        logger.debug("Lexer worker started for %s", self._name)
        try:
            while True:
                self._demand.acquire()
                if self._stop.is_set():
                    return
                try:
                    token = next(self._tokens)
                except StopIteration:
                    self._handoff.put(_END)
                    return
                except Exception as exc:
                    self._handoff.put(exc)
                    return
                self._handoff.put(token)
        finally:
            self._tokens.close()
            logger.debug("Lexer worker stopped for %s", self._name)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        if self._stop.is_set():
            raise LexerStateError("TokenChannel is closed")

        self._demand.release()
        item = self._handoff.get()
        if item is _END:
            self._finished = True
            raise StopIteration
        if isinstance(item, BaseException):
            self._finished = True
            raise item
        return cast(Token, item)

    def close(self) -> None:
        """Stop the worker and wait for it to exit. Idempotent."""
        if self._stop.is_set():
            return
        self._stop.set()
        self._demand.release()
        self._thread.join()

    def __enter__(self) -> TokenChannel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
