"""StrBuf: an owned, growable, null-terminated byte buffer.

Storage is a bytearray whose size is the buffer's capacity. The content
occupies the first ``len`` bytes and is always followed by a zero byte.
Capacity follows capacity_for(), so storage only moves when the length
crosses a power of two.

Invariants (checked by is_valid()):
1. storage[len] == 0
2. no zero byte in storage[:len]
3. capacity >= capacity_for(len + 1)

Thread Safety:
StrBuf is not thread-safe. Callers sharing one buffer across threads
serialize access themselves.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from chesscli.config import get_str_config
from chesscli.errors import AllocationError, InvariantError
from chesscli.profiling import get_growth_accumulator
from chesscli.strbuf.growth import capacity_for
from chesscli.utils.logger import get_logger

logger = get_logger(__name__)

RawBytes = Union[bytes, bytearray, memoryview, str]
Fragment = Union[RawBytes, "StrBuf"]
Char = Union[int, bytes, str]


def as_raw(src: RawBytes) -> bytes:
    """Convert a raw byte sequence to bytes, stopping at its first zero byte.

    A zero byte terminates raw input the same way it terminates buffer
    content. str input is encoded as UTF-8 with no further interpretation.

    Raises:
        TypeError: src is not bytes-like or str
    """
    if isinstance(src, bytes):
        data = src
    elif isinstance(src, (bytearray, memoryview)):
        data = bytes(src)
    elif isinstance(src, str):
        data = src.encode("utf-8", "surrogateescape")
    else:
        raise TypeError(f"expected bytes-like or str, got {type(src).__name__}")

    end = data.find(0)
    return data if end < 0 else data[:end]


def _char_code(c: Char) -> int:
    if isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError(f"character code out of range: {c}")
        return c
    if isinstance(c, (bytes, bytearray)) and len(c) == 1:
        return c[0]
    if isinstance(c, str) and len(c) == 1:
        encoded = c.encode("utf-8", "surrogateescape")
        if len(encoded) == 1:
            return encoded[0]
    raise ValueError(f"expected a single byte character, got {c!r}")


def _allocate(capacity: int) -> bytearray:
    limit = get_str_config().max_capacity
    if limit is not None and capacity > limit:
        logger.warning("allocation of %d bytes exceeds limit %d", capacity, limit)
        raise AllocationError(capacity, limit)
    try:
        return bytearray(capacity)
    except MemoryError as e:
        logger.warning("allocation of %d bytes failed", capacity)
        raise AllocationError(capacity) from e


class StrBuf:
    """Owned, growable byte string with a maintained terminator.

    Mutating methods return self for chaining.

    Usage:
            >>> buf = StrBuf(b"ab")
            >>> buf.append(b"cd", StrBuf(b"ef")).value
            b'abcdef'
            >>> buf.copy_bounded(b"hello", 3).value
            b'hel'

    """

    __slots__ = ("_buf", "_len")

    def __init__(self, src: RawBytes = b"") -> None:
        """Create a buffer holding src (empty by default)."""
        data = as_raw(src)
        n = len(data)
        self._buf: bytearray | None = _allocate(capacity_for(n + 1))
        self._buf[:n] = data
        self._len = n
        self._check()

    @classmethod
    def from_bytes(cls, src: RawBytes) -> StrBuf:
        """Create a buffer whose content equals src."""
        return cls(src)

    # -- internal primitives -------------------------------------------------

    def _check(self) -> None:
        if self._buf is None:
            raise InvariantError("buffer used after release()")
        if get_str_config().debug_checks and not self.is_valid():
            raise InvariantError(f"buffer invariants violated: {self!r}")

    def _set_len(self, n: int) -> None:
        # Bytes between the old and new length are unspecified until the
        # caller fills them.
        needed = capacity_for(n + 1)
        old_capacity = len(self._buf)
        if old_capacity < needed:
            grown = _allocate(needed)
            grown[: self._len] = self._buf[: self._len]
            self._buf = grown
            logger.debug("grew buffer %d -> %d bytes", old_capacity, needed)
            acc = get_growth_accumulator()
            if acc is not None:
                acc.record_realloc(old_capacity, needed)
        self._len = n
        self._buf[n] = 0

    def _assign(self, data: bytes | bytearray) -> None:
        n = len(data)
        self._set_len(n)
        self._buf[:n] = data

    def _extend(self, data: bytes | bytearray) -> None:
        old = self._len
        self._set_len(old + len(data))
        self._buf[old : self._len] = data

    def _content(self) -> bytearray:
        self._check()
        return self._buf[: self._len]

    # -- lifecycle and inspection --------------------------------------------

    def release(self) -> None:
        """Drop owned storage. The buffer must not be used afterwards."""
        self._buf = None
        self._len = 0

    def is_valid(self) -> bool:
        """Return True if all buffer invariants hold."""
        buf = self._buf
        if buf is None:
            return False
        n = self._len
        return (
            0 <= n < len(buf)
            and len(buf) >= capacity_for(n + 1)
            and buf[n] == 0
            and buf.find(0, 0, n) < 0
        )

    @property
    def capacity(self) -> int:
        """Allocated storage in bytes, terminator included."""
        return 0 if self._buf is None else len(self._buf)

    @property
    def value(self) -> bytes:
        """Content as bytes (terminator excluded)."""
        return bytes(self._content())

    def equals(self, other: StrBuf) -> bool:
        """Return True if both buffers hold the same bytes."""
        self._check()
        other._check()
        return self._len == other._len and self._buf[: self._len] == other._buf[: other._len]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrBuf):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        self._check()
        return self._len

    def __bytes__(self) -> bytes:
        return self.value

    def __repr__(self) -> str:
        if self._buf is None:
            return "StrBuf(<released>)"
        return f"StrBuf({bytes(self._buf[: self._len])!r}, capacity={len(self._buf)})"

    # -- copy ----------------------------------------------------------------

    def copy(self, src: RawBytes) -> StrBuf:
        """Replace content with src."""
        self._check()
        self._assign(as_raw(src))
        self._check()
        return self

    def copy_buffer(self, src: StrBuf) -> StrBuf:
        """Replace content with an independent copy of src's content."""
        self._check()
        if src is not self:
            self._assign(src._content())
        self._check()
        return self

    def copy_bounded(self, src: RawBytes, max_len: int) -> StrBuf:
        """Replace content with at most max_len bytes of src."""
        if max_len < 0:
            raise ValueError(f"max_len must be >= 0, got {max_len}")
        self._check()
        self._assign(as_raw(src)[:max_len])
        self._check()
        return self

    def clear(self) -> StrBuf:
        """Make the buffer empty, keeping its storage."""
        return self.copy(b"")

    # -- append --------------------------------------------------------------

    def append(self, *fragments: Fragment) -> StrBuf:
        """Append fragments left to right.

        Each fragment is raw bytes or another StrBuf. A buffer appended to
        itself contributes its content as of when that fragment is reached.
        """
        self._check()
        for fragment in fragments:
            if isinstance(fragment, StrBuf):
                data = fragment._content()
            else:
                data = as_raw(fragment)
            self._extend(data)
            self._check()
        return self

    def append_bounded(self, src: RawBytes, max_len: int) -> StrBuf:
        """Append at most max_len bytes of src."""
        if max_len < 0:
            raise ValueError(f"max_len must be >= 0, got {max_len}")
        self._check()
        self._extend(as_raw(src)[:max_len])
        self._check()
        return self

    def append_chars(self, chars: Iterable[Char]) -> StrBuf:
        """Append characters one byte at a time.

        Stops at the end of chars or at the first zero character.

        Args:
            chars: ints in 0..255, one-byte bytes, or one-character str.
                Iterating a bytes object yields ints, so bytes work directly.
        """
        self._check()
        for c in chars:
            code = _char_code(c)
            if code == 0:
                break
            n = self._len
            self._set_len(n + 1)
            self._buf[n] = code
        self._check()
        return self

    def append_formatted(self, template: RawBytes, *args: object) -> StrBuf:
        """Append template rendered with args. See chesscli.strbuf.fmt."""
        from chesscli.strbuf.fmt import append_formatted

        return append_formatted(self, template, *args)


__all__ = ["Char", "Fragment", "RawBytes", "StrBuf", "as_raw"]
