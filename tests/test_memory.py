import pytest

from solong.libft.memory import (
    INT_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == b"def"


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_calloc_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(b == 0 for b in buf)


def test_calloc_zero_total_gives_one_byte():
    assert calloc(0, 5) == bytearray(1)
    assert calloc(5, 0) == bytearray(1)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(INT_MAX, 2)


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert index == 2


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("o"), 5) == 4


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x100 + 3, 3) == memchr(data, 3, 3)


def test_memcmp_equal_and_order():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_limited_prefix():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_antisymmetric():
    a, b = b"\x00\xff", b"\x00\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(5)
    result = memcpy(dst, b"hello", 5)
    assert result is dst
    assert dst == b"hello"


def test_memcpy_partial():
    dst = bytearray(b"-----")
    memcpy(dst, b"ab", 2)
    assert dst == b"ab---"


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_keeps_length():
    buf = bytearray(b"0123456789")
    memmove(buf, 3, 1, 5)
    assert len(buf) == 10


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 4)
    assert result is buf
    assert buf[:4] == b"zzzz"
    assert buf[4:] == b"ef"


def test_memset_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray([0x41, 0x41])


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        bzero(bytearray(2), -1)