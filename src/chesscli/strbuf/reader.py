"""Line reader for binary streams.

read_line() pulls one byte at a time from a stream into a StrBuf until a
newline or end of stream.

Thread Safety:
Each stream gets one reentrant lock, held for a whole read_line() call, so
threads sharing a stream never see interleaved lines. Use stream_lock() to
hold it across several reads.

"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterator
from typing import BinaryIO

from chesscli.errors import InvariantError
from chesscli.strbuf.core import StrBuf

_registry_lock = threading.Lock()
_stream_locks: weakref.WeakKeyDictionary[BinaryIO, threading.RLock] = (
    weakref.WeakKeyDictionary()
)
# Streams that refuse weak references (__slots__ without __weakref__).
# Keyed by id(); a recycled id only makes two streams share a lock.
_id_locks: dict[int, threading.RLock] = {}


def stream_lock(stream: BinaryIO) -> threading.RLock:
    """Return the lock guarding line reads from stream.

    Locks are held weakly and go away with their stream. Streams that cannot
    be weakly referenced get a lock keyed by id() instead, which is never
    freed.
    """
    with _registry_lock:
        try:
            lock = _stream_locks.get(stream)
            if lock is None:
                lock = _stream_locks[stream] = threading.RLock()
        except TypeError:
            lock = _id_locks.get(id(stream))
            if lock is None:
                lock = _id_locks[id(stream)] = threading.RLock()
        return lock


def _line_bytes(read, ended: list[bool]) -> Iterator[int]:
    while True:
        c = read(1)
        if not c:
            return
        if not isinstance(c, (bytes, bytearray)):
            raise InvariantError(
                f"read_line() needs a binary stream, got {type(c).__name__} data"
            )
        if c == b"\n":
            ended.append(True)
            return
        if c[0]:
            yield c[0]


def read_line(out: StrBuf, stream: BinaryIO) -> int:
    """Read one line from stream into out.

    The newline is consumed but not stored. Zero bytes read from the
    stream cannot be stored in a StrBuf and are dropped.

    The whole line goes through a single append_chars() call, so debug
    checks run a fixed number of times per line.

    Args:
        out: Buffer receiving the line (emptied first)
        stream: Binary stream; read(1) returning b"" marks end of stream

    Returns:
        len(out) + 1 if the line ended with a newline, len(out) at end of
        stream. 0 means the stream is exhausted.

    Raises:
        InvariantError: stream is not binary
    """
    out.clear()
    ended: list[bool] = []

    with stream_lock(stream):
        out.append_chars(_line_bytes(stream.read, ended))

    return len(out) + len(ended)


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield each line of stream as bytes, without its newline."""
    line = StrBuf()
    try:
        while read_line(line, stream):
            yield line.value
    finally:
        line.release()


__all__ = ["iter_lines", "read_line", "stream_lock"]
