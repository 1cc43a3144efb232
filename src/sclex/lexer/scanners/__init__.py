"""Mode-specific scanners for the sclex lexer.

Each scanner is a mixin that provides scanning logic for one or more
lexer modes (SOURCE, IDENT, NUMBER, LINE_COMMENT, BLOCK_COMMENT).
"""

from __future__ import annotations

from sclex.lexer.scanners.comment import CommentScannerMixin
from sclex.lexer.scanners.operator import OperatorScannerMixin
from sclex.lexer.scanners.source import SourceScannerMixin
from sclex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "OperatorScannerMixin",
    "SourceScannerMixin",
    "WordScannerMixin",
]
