"""Low-level writers that emit one value to a text stream and report its length."""

from __future__ import annotations

import operator
from typing import TextIO

_INT_BITS = 32
_LONG_BITS = 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _as_signed_int(n: int) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    half = 1 << (_INT_BITS - 1)
    return (operator.index(n) + half) % (1 << _INT_BITS) - half


def _as_unsigned(n: int, bits: int) -> int:
    """Wrap an integer to the range of an unsigned integer of the given width."""
    return operator.index(n) % (1 << bits)


def _digits(n: int, base: str) -> str:
    """Render a non-negative integer in the base given by its digit alphabet."""
    radix = len(base)
    out = []
    while True:
        n, rem = divmod(n, radix)
        out.append(base[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _emit(text: str, stream: TextIO) -> int:
    stream.write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO) -> int:
    """Write a single character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return _emit(c, stream)
    return _emit(chr(operator.index(c) & 0xFF), stream)


def put_str(s: object, stream: TextIO) -> int:
    """Write a string, or ``(null)`` when given None."""
    return _emit(_NULL_STRING if s is None else str(s), stream)


def put_nbr(n: int, stream: TextIO) -> int:
    """Write a signed 32-bit decimal integer."""
    value = _as_signed_int(n)
    text = _digits(abs(value), _LOWER_DIGITS[:10])
    if value < 0:
        text = "-" + text
    return _emit(text, stream)


def put_unbr(n: int, stream: TextIO) -> int:
    """Write an unsigned 32-bit decimal integer."""
    return _emit(_digits(_as_unsigned(n, _INT_BITS), _LOWER_DIGITS[:10]), stream)


def put_hex(n: int, conversion: str, stream: TextIO) -> int:
    """Write an unsigned 32-bit integer in hex; lowercase for ``x``, else uppercase."""
    base = _LOWER_DIGITS if conversion == "x" else _UPPER_DIGITS
    return _emit(_digits(_as_unsigned(n, _INT_BITS), base), stream)


def put_addr(addr: int | None, stream: TextIO) -> int:
    """Write an address as ``0x`` followed by lowercase hex, or ``(nil)`` for zero."""
    value = 0 if addr is None else _as_unsigned(addr, _LONG_BITS)
    if value == 0:
        return _emit(_NULL_POINTER, stream)
    return _emit("0x" + _digits(value, _LOWER_DIGITS), stream)