import io

import pytest

from miniprintf.writers import put_addr, put_char, put_hex, put_nbr, put_str, put_unbr


class _BrokenStream:
    def write(self, text):
        raise OSError("write failed")


def test_put_char_string():
    buf = io.StringIO()
    count = put_char("a", buf)
    assert (count, buf.getvalue()) == (1, "a")


def test_put_char_int():
    buf = io.StringIO()
    count = put_char(ord("z"), buf)
    assert (count, buf.getvalue()) == (1, "z")


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_plain():
    buf = io.StringIO()
    count = put_str("hello", buf)
    assert (count, buf.getvalue()) == (5, "hello")


def test_put_str_empty():
    buf = io.StringIO()
    count = put_str("", buf)
    assert (count, buf.getvalue()) == (0, "")


def test_put_str_none():
    buf = io.StringIO()
    count = put_str(None, buf)
    assert (count, buf.getvalue()) == (6, "(null)")


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -99])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    count = put_nbr(n, buf)
    out = buf.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_put_nbr_minimum():
    buf = io.StringIO()
    count = put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"
    assert count == 11


def test_put_nbr_wraps_to_32_bits():
    buf = io.StringIO()
    put_nbr(2**31, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, 4000000000])
def test_put_unbr_round_trip(n):
    buf = io.StringIO()
    count = put_unbr(n, buf)
    out = buf.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_put_unbr_wraps_negative():
    buf = io.StringIO()
    put_unbr(-1, buf)
    assert int(buf.getvalue()) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF])
def test_put_hex_lower_round_trip(n):
    buf = io.StringIO()
    count = put_hex(n, "x", buf)
    out = buf.getvalue()
    assert int(out, 16) == n
    assert out == out.lower()
    assert count == len(out)


def test_put_hex_upper():
    buf = io.StringIO()
    put_hex(0xABCDEF, "X", buf)
    out = buf.getvalue()
    assert int(out, 16) == 0xABCDEF
    assert out == out.upper()


def test_put_hex_zero():
    buf = io.StringIO()
    count = put_hex(0, "x", buf)
    assert (count, buf.getvalue()) == (1, "0")


def test_put_addr_zero():
    buf = io.StringIO()
    count = put_addr(0, buf)
    assert (count, buf.getvalue()) == (5, "(nil)")


def test_put_addr_none():
    buf = io.StringIO()
    put_addr(None, buf)
    assert buf.getvalue() == "(nil)"


def test_put_addr_nonzero():
    buf = io.StringIO()
    count = put_addr(0xDEADBEEF, buf)
    out = buf.getvalue()
    assert out.startswith("0x")
    assert int(out, 16) == 0xDEADBEEF
    assert out == out.lower()
    assert count == len(out)


def test_put_addr_wraps_to_64_bits():
    buf = io.StringIO()
    put_addr(-1, buf)
    assert int(buf.getvalue(), 16) == 2**64 - 1


def test_write_failure_propagates():
    with pytest.raises(OSError):
        put_str("abc", _BrokenStream())