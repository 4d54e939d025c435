import pytest

from lucaria.stream import RawInputStream, SeekOrigin


def test_read_advances_cursor():
    stream = RawInputStream(b"abcdef")
    assert stream.read(2) == b"ab"
    assert stream.tell() == 2
    assert stream.read(3) == b"cde"


def test_read_past_end_is_truncated():
    stream = RawInputStream(b"xyz")
    stream.seek(1)
    assert stream.read(10) == b"yz"
    assert stream.tell() == 3
    assert stream.read(4) == b""


def test_size_and_opened():
    stream = RawInputStream(bytearray(b"12345"))
    assert stream.size() == 5
    assert stream.opened() is True


def test_seek_origins():
    stream = RawInputStream(b"0123456789")
    assert stream.seek(3, SeekOrigin.SET) == 3
    assert stream.seek(2, SeekOrigin.CURRENT) == 5
    assert stream.seek(-1, SeekOrigin.END) == 9
    assert stream.read(1) == b"9"


def test_seek_to_end_allowed():
    stream = RawInputStream(b"abc")
    assert stream.seek(0, SeekOrigin.END) == 3
    assert stream.read(1) == b""


def test_seek_out_of_range_raises_and_keeps_position():
    stream = RawInputStream(b"abc")
    stream.seek(1)
    with pytest.raises(ValueError):
        stream.seek(4)
    with pytest.raises(ValueError):
        stream.seek(-2, SeekOrigin.CURRENT)
    assert stream.tell() == 1


def test_negative_read_raises():
    with pytest.raises(ValueError):
        RawInputStream(b"abc").read(-1)