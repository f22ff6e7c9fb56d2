"""Format engine: append printf-style output to a StrBuf.

Supported specifiers:

    %s  raw bytes (bytes, bytearray, memoryview or str)
    %S  StrBuf
    %i  signed integer in C int range
    %I  signed integer in intmax_t range
    %u  unsigned integer in C unsigned range
    %U  unsigned integer in uintmax_t range
    %%  literal '%'

Anything else after '%' raises UnsupportedSpecifierError. Templates are
fixed at each call site, so a bad specifier is a defect in the caller.

Output is rendered into a scratch StrBuf and appended to the destination
only once the whole template succeeded: a failing call leaves the
destination untouched.
"""

from __future__ import annotations

import operator
import struct
from collections.abc import Callable

from chesscli.errors import FormatArgumentError, UnsupportedSpecifierError
from chesscli.strbuf.core import RawBytes, StrBuf, as_raw

INT_BITS: int = 8 * struct.calcsize("i")
UINT_BITS: int = 8 * struct.calcsize("I")
INTMAX_BITS: int = 64

# uintmax_t max has 20 digits; intmax_t min has 19 plus a sign.
SCRATCH_SIZE: int = 24

_INT_RANGES: dict[int, tuple[int, int]] = {
    ord("i"): (-(1 << (INT_BITS - 1)), (1 << (INT_BITS - 1)) - 1),
    ord("I"): (-(1 << (INTMAX_BITS - 1)), (1 << (INTMAX_BITS - 1)) - 1),
    ord("u"): (0, (1 << UINT_BITS) - 1),
    ord("U"): (0, (1 << INTMAX_BITS) - 1),
}


def format_decimal(value: int) -> bytes:
    """Render an integer in decimal.

    Digits are produced by repeated division, right to left, into a
    fixed-size scratch buffer.

    Examples:
        >>> format_decimal(-5)
        b'-5'
        >>> format_decimal(0)
        b'0'
    """
    scratch = bytearray(SCRATCH_SIZE)
    pos = SCRATCH_SIZE
    n = -value if value < 0 else value

    while True:
        pos -= 1
        scratch[pos] = 0x30 + n % 10
        n //= 10
        if not n:
            break

    if value < 0:
        pos -= 1
        scratch[pos] = 0x2D

    return bytes(scratch[pos:])


def _fmt_raw(out: StrBuf, spec: int, arg: object) -> None:
    if isinstance(arg, StrBuf):
        raise FormatArgumentError("%s expects raw bytes, got StrBuf (use %S)")
    try:
        data = as_raw(arg)  # type: ignore[arg-type]
    except TypeError:
        raise FormatArgumentError(
            f"%s expects raw bytes, got {type(arg).__name__}"
        ) from None
    out.append(data)


def _fmt_buffer(out: StrBuf, spec: int, arg: object) -> None:
    if not isinstance(arg, StrBuf):
        raise FormatArgumentError(f"%S expects StrBuf, got {type(arg).__name__}")
    out.append(arg)


def _fmt_int(out: StrBuf, spec: int, arg: object) -> None:
    name = "%" + chr(spec)
    try:
        value = operator.index(arg)  # type: ignore[arg-type]
    except TypeError:
        raise FormatArgumentError(
            f"{name} expects an integer, got {type(arg).__name__}"
        ) from None

    low, high = _INT_RANGES[spec]
    if not low <= value <= high:
        raise FormatArgumentError(f"{name} argument {value} outside [{low}, {high}]")
    out.append(format_decimal(value))


_HANDLERS: dict[int, Callable[[StrBuf, int, object], None]] = {
    ord("s"): _fmt_raw,
    ord("S"): _fmt_buffer,
    ord("i"): _fmt_int,
    ord("I"): _fmt_int,
    ord("u"): _fmt_int,
    ord("U"): _fmt_int,
}


def append_formatted(dest: StrBuf, template: RawBytes, *args: object) -> StrBuf:
    """Append template to dest, replacing each specifier with its argument.

    Args:
        dest: Buffer to append to
        template: Format template (raw bytes)
        *args: One argument per specifier, in order

    Returns:
        dest

    Raises:
        UnsupportedSpecifierError: Unknown specifier or trailing lone '%'
        FormatArgumentError: Argument count, kind or range mismatch

    Example:
        >>> buf = StrBuf()
        >>> append_formatted(buf, b"%i apples, %u oranges", -5, 3).value
        b'-5 apples, 3 oranges'
    """
    fmt = as_raw(template)
    staged = StrBuf()
    next_arg = 0
    pos = 0
    end = len(fmt)

    try:
        while pos < end:
            pct = fmt.find(b"%", pos)
            if pct < 0:
                staged.append(fmt[pos:])
                break
            if pct > pos:
                staged.append(fmt[pos:pct])
            if pct + 1 == end:
                raise UnsupportedSpecifierError(b"", fmt)

            spec = fmt[pct + 1]
            pos = pct + 2

            if spec == 0x25:
                staged.append(b"%")
                continue

            handler = _HANDLERS.get(spec)
            if handler is None:
                raise UnsupportedSpecifierError(bytes((spec,)), fmt)
            if next_arg >= len(args):
                raise FormatArgumentError(
                    f"missing argument for %{chr(spec)} in {fmt!r}"
                )
            handler(staged, spec, args[next_arg])
            next_arg += 1

        if next_arg < len(args):
            raise FormatArgumentError(
                f"{len(args) - next_arg} unused argument(s) for {fmt!r}"
            )

        return dest.append(staged)
    finally:
        staged.release()


__all__ = ["INTMAX_BITS", "INT_BITS", "SCRATCH_SIZE", "UINT_BITS", "append_formatted", "format_decimal"]
