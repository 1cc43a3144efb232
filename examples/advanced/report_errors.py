"""Collect lexical errors from a file, compiler-style.

Usage:
    python examples/advanced/report_errors.py path/to/program.sc
"""

import logging
import sys

from sclex import lex


def main(path: str) -> int:
    logging.basicConfig(level=logging.WARNING)
    errors = 0
    with open(path, encoding="utf-8") as f, lex(path, f, threaded=True) as tokens:
        for token in tokens:
            if token.is_error:
                print(f"{token.location}: {token}", file=sys.stderr)
                errors += 1
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1]))
