# miniprintf

A small printf-style formatter with a deliberately limited set of
conversions. It writes formatted text to a text stream and returns how many
characters it wrote.

## Supported conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | a one-character string, or an integer taken as a byte value | the character |
| `%s` | any object, or `None` | `str()` of the object, or `(null)` for `None` |
| `%d`, `%i` | an integer, wrapped to signed 32 bits | decimal |
| `%u` | an integer, wrapped to unsigned 32 bits | decimal |
| `%x`, `%X` | an integer, wrapped to unsigned 32 bits | lower- or upper-case hexadecimal |
| `%p` | an integer wrapped to unsigned 64 bits, or `None` | `0x` followed by lower-case hex, or `(nil)` for zero or `None` |
| `%%` | none | a literal `%` |

Integers outside the range of a conversion wrap around, so `%d` of
`2**31` prints `-2147483648` and `%u` of `-1` prints `4294967295`.

## Usage

```python
import sys
from miniprintf.printf import printf, sprintf

count = printf("Hello %s, you are %d\n", "world", 42, stream=sys.stdout)

text = sprintf("%x %X %p", 255, 255, 0xDEADBEEF)
# "ff FF 0xdeadbeef"
```

`printf(fmt, *args, stream=None)` writes to `stream`, or to `sys.stdout`
when no stream is given, and returns the number of characters written.
`sprintf(fmt, *args)` returns the formatted string instead.

The single-value writers in `miniprintf.writers` can be used directly:
`put_char`, `put_str`, `put_nbr`, `put_unbr`, `put_hex` (which takes the
conversion letter, `"x"` for lower case and anything else for upper case)
and `put_addr`. Each writes to the stream it is given and returns the
number of characters it wrote.

## Errors

- `FormatError` (a subclass of `ValueError`) is raised when the format ends
  with a lone `%`, after the text before it has been written, and when a
  conversion has no argument left to use.
- `TypeError` is raised when the format is `None`.
- `ValueError` is raised when `%c` is given a string that is not exactly one
  character long.

## What it does not do

Only the conversions above are understood. Flags, field widths, precision
and length modifiers are not supported: any other character after `%`
prints nothing and uses no argument. There are no floating-point
conversions.

## Running the tests

```
pip install -e .[test]
pytest
```