import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_zero_count_is_noop():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"hello")
    assert bzero(buf, 2) == bytearray(b"\x00\x00llo")


@pytest.mark.parametrize("count,size", [(0, 0), (1, 8), (5, 3), (7, 0)])
def test_calloc_size_and_zero(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(b == 0 for b in buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("a"), len(data)) == data.index(b"a")
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_value_modulo_256():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x102, 3) == 2


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_difference():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) == a[2] - b[2]
    assert memcmp(b, a, 3) == b[2] - a[2]
    assert memcmp(a, b, 3) < 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_rejects_overrun():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"------")
    result = memcpy(dest, b"hello world", 5)
    assert result is dest
    assert dest == bytearray(b"hello-")


def test_memcpy_rejects_short_dest():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(original[:2] + original[0:5] + original[7:])


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(original[2:7] + original[5:])


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"stable")
    assert memmove(buf, 1, 1, 4) == bytearray(b"stable")


def test_memmove_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)