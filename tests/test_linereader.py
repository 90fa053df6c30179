import io

import pytest

from pipex.linereader import LineReader, is_binary

TEXT = "first line\nsecond one\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 5, 42, 1000])
def test_text_round_trip(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 3, 42])
def test_bytes_round_trip(size):
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(isinstance(line, bytes) for line in lines)


def test_each_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO(TEXT), 4))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_after_end_keeps_returning_none():
    reader = LineReader(io.StringIO("only\n"), 3)
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_binary_first_line_stops_reading():
    reader = LineReader(io.BytesIO(b"\x01\x02abc\nplain\n"))
    assert reader.read_line() is None
    assert list(reader) == []


def test_nul_truncates_chunk():
    reader = LineReader(io.BytesIO(b"ab\0cd\nef\n"), 42)
    assert list(reader) == [b"ab"]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_is_binary_printable_text():
    assert is_binary("hello world") is False
    assert is_binary(b"hello world") is False


def test_is_binary_only_checks_first_line():
    assert is_binary("hello\n\x01\x02") is False


@pytest.mark.parametrize("stash", ["a\tb", "caf\u00e9", b"\xff", b"x\x7f"])
def test_is_binary_detects_unprintable(stash):
    assert is_binary(stash) is True


def test_read_error_propagates():
    class Broken(io.RawIOBase):
        def readable(self):
            return True

        def read(self, size=-1):
            if size == 0:
                return b""
            raise OSError("read failed")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.read_line()