"""Reentrant tokenizer over raw bytes.

next_token() keeps no state between calls: progress is carried by the
remaining input it returns, a zero-copy memoryview into the original bytes.
Several inputs can be tokenized at once, from any number of threads, as long
as each uses its own token buffer.

Example:
    >>> token = StrBuf()
    >>> rest = next_token(b"  a  b ", token, b" ")
    >>> token.value
    b'a'
    >>> rest = next_token(rest, token, b" ")
    >>> token.value
    b'b'
    >>> next_token(rest, token, b" ") is None
    True

"""

from __future__ import annotations

from collections.abc import Iterator

from chesscli.errors import InvariantError
from chesscli.strbuf.core import RawBytes, StrBuf, as_raw


def _as_view(remaining: RawBytes) -> memoryview:
    if isinstance(remaining, memoryview) and remaining.format == "B" and remaining.ndim == 1:
        return remaining
    return memoryview(as_raw(remaining))


def next_token(
    remaining: RawBytes | None,
    token: StrBuf,
    delimiters: RawBytes,
) -> memoryview | None:
    """Extract the next token from remaining into token.

    Leading delimiter bytes are skipped, then bytes up to the next delimiter
    (or end of input, or a zero byte) form the token.

    Args:
        remaining: Input to scan, or None once exhausted
        token: Receives the token; emptied when there is none
        delimiters: Set of delimiter bytes (must be non-empty)

    Returns:
        The unconsumed input, starting at the delimiter that ended the
        token, or None when no token was found.

    Raises:
        InvariantError: delimiters is empty
    """
    delim_set = frozenset(as_raw(delimiters))
    if not delim_set:
        raise InvariantError("next_token() needs at least one delimiter")

    token.clear()
    if remaining is None:
        return None

    view = _as_view(remaining)
    n = len(view)
    i = 0

    while i < n and view[i] and view[i] in delim_set:
        i += 1
    start = i
    while i < n and view[i] and view[i] not in delim_set:
        i += 1

    if i == start:
        return None

    token.copy(view[start:i])
    return view[i:]


def iter_tokens(source: RawBytes, delimiters: RawBytes) -> Iterator[bytes]:
    """Yield each token of source as bytes.

    Example:
        >>> list(iter_tokens(b"go depth 12", b" "))
        [b'go', b'depth', b'12']
    """
    token = StrBuf()
    try:
        rest = next_token(source, token, delimiters)
        while rest is not None:
            yield token.value
            rest = next_token(rest, token, delimiters)
    finally:
        token.release()


__all__ = ["iter_tokens", "next_token"]
