"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import io
import sys
from typing import Any, Iterator, TextIO

from miniprintf.writers import put_addr, put_char, put_hex, put_nbr, put_str, put_unbr


class FormatError(ValueError):
    """Raised when a format string cannot be printed."""


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{conversion}") from None


def _convert(conversion: str, args: Iterator[Any], stream: TextIO) -> int:
    if conversion == "c":
        return put_char(_next_arg(args, conversion), stream)
    if conversion == "s":
        return put_str(_next_arg(args, conversion), stream)
    if conversion in ("d", "i"):
        return put_nbr(_next_arg(args, conversion), stream)
    if conversion == "u":
        return put_unbr(_next_arg(args, conversion), stream)
    if conversion in ("x", "X"):
        return put_hex(_next_arg(args, conversion), conversion, stream)
    if conversion == "p":
        return put_addr(_next_arg(args, conversion), stream)
    if conversion == "%":
        return put_char("%", stream)
    return 0


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``; return characters written.

    Unknown conversions print nothing and consume no argument. A format
    ending in a lone ``%`` raises FormatError after the preceding text is written.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    out = sys.stdout if stream is None else stream
    remaining = iter(args)
    chars = iter(fmt)
    count = 0
    for ch in chars:
        if ch == "%":
            conversion = next(chars, None)
            if conversion is None:
                raise FormatError("format ends with a lone '%'")
            count += _convert(conversion, remaining, out)
        else:
            count += put_char(ch, out)
    return count


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for ``fmt`` and ``args``."""
    buf = io.StringIO()
    printf(fmt, *args, stream=buf)
    return buf.getvalue()