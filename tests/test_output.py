import os

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        count = action(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        data = reader.read()
    return count, data


def test_put_char_from_str():
    count, data = _capture(lambda fd: put_char("A", fd))
    assert data == b"A"
    assert count == 1


def test_put_char_from_int():
    count, data = _capture(lambda fd: put_char(ord("z"), fd))
    assert data == b"z"
    assert count == 1


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_str_writes_text():
    count, data = _capture(lambda fd: put_str("Hello, 42!", fd))
    assert data == b"Hello, 42!"
    assert count == len(data)


def test_put_str_accepts_bytes():
    count, data = _capture(lambda fd: put_str(b"raw", fd))
    assert data == b"raw"
    assert count == 3


def test_put_str_rejects_other_types():
    with pytest.raises(TypeError):
        put_str(42, 1)


def test_put_endl_adds_newline():
    count, data = _capture(lambda fd: put_endl("line", fd))
    assert data == b"line\n"
    assert count == len(data)


def test_put_endl_empty_string():
    _, data = _capture(lambda fd: put_endl("", fd))
    assert data == b"\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    count, data = _capture(lambda fd: put_nbr(n, fd))
    assert int(data.decode("ascii")) == n
    assert count == len(data)


def test_put_nbr_int_min():
    _, data = _capture(lambda fd: put_nbr(-2147483648, fd))
    assert data == b"-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", 1)


def test_long_string_written_whole():
    text = "A" * 999
    count, data = _capture(lambda fd: put_str(text, fd))
    assert data == text.encode()
    assert count == 999