"""
chesscli — byte-string foundation of a chess engine command line tool

Owned, null-terminated byte buffers with power-of-two growth, a small
%-template formatter, a reentrant tokenizer and a locked line reader,
plus the option parser of the command line tool built on them.

Quick Start:
    >>> from chesscli import StrBuf, next_token
    >>> buf = StrBuf(b"ab")
    >>> buf.append(b"cd", StrBuf(b"ef")).value
    b'abcdef'
    >>> buf.clear().append_formatted(b"%i apples, %u oranges", -5, 3).value
    b'-5 apples, 3 oranges'

    >>> token = StrBuf()
    >>> rest = next_token(b"position startpos", token, b" ")
    >>> token.value
    b'position'

Zero runtime dependencies.
"""

from chesscli.config import (
    StrConfig,
    get_str_config,
    reset_str_config,
    set_str_config,
    str_config_context,
)
from chesscli.errors import (
    AllocationError,
    ChessCliError,
    FormatArgumentError,
    InvariantError,
    OptionsError,
    UnsupportedSpecifierError,
)
from chesscli.options import Options, parse_options
from chesscli.profiling import GrowthAccumulator, get_growth_accumulator, profiled_growth
from chesscli.strbuf import (
    StrBuf,
    append_formatted,
    capacity_for,
    iter_lines,
    iter_tokens,
    next_token,
    read_line,
    stream_lock,
)

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "ChessCliError",
    "FormatArgumentError",
    "GrowthAccumulator",
    "InvariantError",
    "Options",
    "OptionsError",
    "StrBuf",
    "StrConfig",
    "UnsupportedSpecifierError",
    "__version__",
    "append_formatted",
    "capacity_for",
    "get_growth_accumulator",
    "get_str_config",
    "iter_lines",
    "iter_tokens",
    "next_token",
    "parse_options",
    "profiled_growth",
    "read_line",
    "reset_str_config",
    "set_str_config",
    "stream_lock",
    "str_config_context",
]
