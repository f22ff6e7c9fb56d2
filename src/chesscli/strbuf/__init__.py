"""Owned, null-terminated byte buffers and the algorithms built on them.

Provides:
- growth: capacity_for, the power-of-two capacity policy
- core: StrBuf, copy and append operations
- fmt: append_formatted, the %-template engine
- tokenizer: next_token, a reentrant tokenizer
- reader: read_line, a locked line reader
"""

from chesscli.strbuf.core import StrBuf, as_raw
from chesscli.strbuf.fmt import append_formatted, format_decimal
from chesscli.strbuf.growth import MIN_CAPACITY, WORD_SIZE, capacity_for
from chesscli.strbuf.reader import iter_lines, read_line, stream_lock
from chesscli.strbuf.tokenizer import iter_tokens, next_token

__all__ = [
    "MIN_CAPACITY",
    "StrBuf",
    "WORD_SIZE",
    "append_formatted",
    "as_raw",
    "capacity_for",
    "format_decimal",
    "iter_lines",
    "iter_tokens",
    "next_token",
    "read_line",
    "stream_lock",
]
