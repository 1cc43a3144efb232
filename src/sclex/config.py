"""ContextVar-based lexer configuration for sclex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from sclex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(chunk_size=512)):
        tokens = list(Lexer(stream).tokenize())

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from sclex.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: the filename is excluded; it is per-call state and stays on the
    Lexer instance.

    Attributes:
        chunk_size: Characters requested per read() from stream sources
        report_unterminated_comments: Emit an ERROR token for a block
            comment that runs to end of input

    """

    chunk_size: int = 4096
    report_unterminated_comments: bool = True

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ConfigError("chunk_size", f"must be >= 1, got {self.chunk_size}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"chunk_size": 64, "unknown": 1})
            >>> config.chunk_size
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get the current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for the current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(report_unterminated_comments=False)):
        ...     tokens = list(Lexer("a /* open").tokenize())
        >>> # Previous config is active again

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
