"""Tests for input readers."""
from __future__ import annotations

import io

import pytest

from esb_fireplace.errors import InputFailure
from esb_fireplace.inputs import FixedReader, InputReader, StdinReader


class _BrokenStream:
    def __init__(self, exc):
        self.exc = exc

    def read(self):
        raise self.exc


class TestStdinReader:

    def test_reads_whole_stream(self):
        reader = StdinReader(io.StringIO("line 1\nline 2\n"))
        assert reader.load() == "line 1\nline 2\n"

    def test_defaults_to_sys_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
        assert StdinReader().load() == "from stdin"

    def test_empty_stream(self):
        assert StdinReader(io.StringIO("")).load() == ""

    @pytest.mark.parametrize("exc", [
        OSError("stream closed"),
        UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
    ])
    def test_read_errors_become_input_failure(self, exc):
        with pytest.raises(InputFailure) as exc_info:
            StdinReader(_BrokenStream(exc)).load()
        assert exc_info.value.__cause__ is exc

    def test_closed_stream(self):
        stream = io.StringIO("gone")
        stream.close()
        with pytest.raises(InputFailure):
            StdinReader(stream).load()

    def test_bad_encoding(self):
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfa"), encoding="utf-8")
        with pytest.raises(InputFailure):
            StdinReader(stream).load()


class TestFixedReader:

    def test_returns_text_every_time(self):
        reader = FixedReader("sample input")
        assert reader.load() == "sample input"
        assert reader.load() == "sample input"

    def test_base_reader_is_abstract(self):
        with pytest.raises(NotImplementedError):
            InputReader().load()
