#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_io_utils.py
"""Unit tests for writing rendered text."""

from io import BytesIO, StringIO

import pytest

from orgleanpub.utils.io_utils import write_text


@pytest.mark.unit
class TestWriteText:
    """Tests for write_text destinations."""

    def test_write_to_path(self, tmp_path):
        target = tmp_path / "out.md"
        write_text("héllo", target)
        assert target.read_bytes() == "héllo".encode("utf-8")

    def test_write_to_str_path(self, tmp_path):
        target = tmp_path / "out.md"
        write_text("x", str(target))
        assert target.read_text(encoding="utf-8") == "x"

    def test_write_to_text_stream(self):
        buffer = StringIO()
        write_text("abc", buffer)
        assert buffer.getvalue() == "abc"

    def test_write_to_binary_stream(self):
        buffer = BytesIO()
        write_text("ü", buffer)
        assert buffer.getvalue() == "ü".encode("utf-8")

    def test_write_to_binary_file(self, tmp_path):
        target = tmp_path / "out.md"
        with open(target, "wb") as handle:
            write_text("ß", handle)
        assert target.read_bytes() == "ß".encode("utf-8")

    def test_unsupported_output(self):
        with pytest.raises(TypeError, match="Unsupported output type"):
            write_text("x", 42)
