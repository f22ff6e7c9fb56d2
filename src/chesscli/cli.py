"""Command line entry point.

Parses options and prints a one-line summary of them. Option errors are
reported on stderr with exit status 1.

Usage:
    chesscli -concurrency 4 -games 100 -openings book.epd -repeat
    python -m chesscli -games 2
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from chesscli.errors import OptionsError
from chesscli.options import Options, parse_options
from chesscli.strbuf import StrBuf
from chesscli.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

PROG = "chesscli"


def _flag(value: bool) -> bytes:
    return b"true" if value else b"false"


def format_options(options: Options) -> bytes:
    """Render options as a single summary line.

    Example:
        >>> format_options(Options())
        b'concurrency=1 games=1 openings= chess960=false random=false repeat=false'
    """
    line = StrBuf()
    try:
        line.append_formatted(
            b"concurrency=%i games=%i openings=%S chess960=%s random=%s repeat=%s",
            options.concurrency,
            options.games,
            options.openings,
            _flag(options.chess960),
            _flag(options.random),
            _flag(options.repeat),
        )
        return line.value
    finally:
        line.release()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    configure_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        options = parse_options(args)
    except OptionsError as e:
        logger.debug("rejected arguments %r", args)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    try:
        print(format_options(options).decode("utf-8", "replace"))
    finally:
        options.release()
    return 0
