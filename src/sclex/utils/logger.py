"""Logging for sclex.

Every sclex module logs through a logger under the "sclex" namespace, so
applications can tune the whole library with one logger:

    logging.getLogger("sclex").setLevel(logging.DEBUG)

What gets logged:
- DEBUG on "sclex.lexer.core": each ERROR token, with its location
- DEBUG on "sclex.channel": worker thread start and stop
- WARNING on "sclex.lexer.reader": a source read failure, treated as end
  of input

The library never installs handlers; applications configure logging.
"""

from __future__ import annotations

import logging

# Namespace root; get_logger() places every module logger beneath it
ROOT_LOGGER_NAME = "sclex"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the sclex namespace.

    Module names inside the package ("sclex.lexer.core") are used as is;
    anything else is nested under "sclex.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    # Ensure sclex prefix so one level setting covers the whole library
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
