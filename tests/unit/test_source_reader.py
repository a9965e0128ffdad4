"""
Unit tests for reading deck sources.
"""

import io

import pytest

from card_autonumber.core.errors import SourceReadError
from card_autonumber.parsing import read_source


class TestReadSource:
    """Tests for file and stdin sources"""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "deck.typ"
        path.write_text('#card(id: "")\n', encoding="utf-8")
        assert read_source(str(path)) == '#card(id: "")\n'

    def test_preserves_crlf_line_endings(self, tmp_path):
        path = tmp_path / "deck.typ"
        path.write_bytes(b'#card(id: "")\r\n= Title\r\n')
        assert read_source(str(path)) == '#card(id: "")\r\n= Title\r\n'

    def test_reads_stdin(self):
        stream = io.StringIO("from stdin")
        assert read_source("stdin", stdin=stream) == "from stdin"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError, match="no such file") as exc_info:
            read_source(str(tmp_path / "missing.typ"))
        assert exc_info.value.source.endswith("missing.typ")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SourceReadError):
            read_source(str(tmp_path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "deck.typ"
        path.write_bytes(b"\xff\xfe\x00broken")
        with pytest.raises(SourceReadError, match="not valid UTF-8"):
            read_source(str(path))

    def test_invalid_utf8_on_stdin(self):
        """Bytes that a lenient stdin stream would let through are still rejected"""
        stream = io.TextIOWrapper(io.BytesIO(b'#card(id: "", q: [Q\xff], a: [A])\n'), errors="surrogateescape")
        with pytest.raises(SourceReadError, match="not valid UTF-8"):
            read_source("stdin", stdin=stream)

    def test_stdin_bytes_keep_crlf(self):
        stream = io.TextIOWrapper(io.BytesIO(b'#card(id: "")\r\n'), encoding="utf-8")
        assert read_source("stdin", stdin=stream) == '#card(id: "")\r\n'

    def test_unreadable_stdin(self):
        class BrokenStream:
            def read(self):
                raise OSError("stream closed")

        with pytest.raises(SourceReadError, match="standard input"):
            read_source("stdin", stdin=BrokenStream())
