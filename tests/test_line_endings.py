"""Tests for CRLF/LF conversion."""

import pytest

from shellbelt.commands.line_endings import convert_line_endings, convert_text
from shellbelt.errors import ValidationError


class TestConvertText:
    """Test the in-memory conversion."""

    def test_crlf_to_lf(self):
        text, count = convert_text("line1\r\nline2\r\n")
        assert text == "line1\nline2\n"
        assert count == 2

    def test_lf_to_crlf(self):
        text, count = convert_text("a\nb\n", reverse=True)
        assert text == "a\r\nb\r\n"
        assert count == 2

    def test_reverse_does_not_double_existing_crlf(self):
        text, count = convert_text("a\r\nb\n", reverse=True)
        assert text == "a\r\nb\r\n"
        assert count == 1

    def test_already_lf_is_unchanged(self):
        text, count = convert_text("a\nb\n")
        assert text == "a\nb\n"
        assert count == 0

    def test_lone_carriage_return_is_kept(self):
        text, _ = convert_text("a\rb\r\n")
        assert text == "a\rb\n"


class TestConvertFile:
    """Test conversion of files on disk."""

    def test_scenario_overwrites_input(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"line1\r\nline2\r\n")

        result = convert_line_endings(path)

        assert path.read_bytes() == b"line1\nline2\n"
        assert result.destination == path
        assert result.replacements == 2

    def test_output_path_leaves_input_alone(self, tmp_path):
        src = tmp_path / "in.txt"
        dst = tmp_path / "out.txt"
        src.write_bytes(b"x\r\n")

        convert_line_endings(src, output_path=dst)

        assert src.read_bytes() == b"x\r\n"
        assert dst.read_bytes() == b"x\n"

    def test_second_run_changes_nothing(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\ntwo\r\nthree")

        convert_line_endings(path, reverse=True)
        once = path.read_bytes()
        result = convert_line_endings(path, reverse=True)

        assert path.read_bytes() == once
        assert not result.changed

    def test_round_trip_preserves_lf_file(self, tmp_path):
        original = b"caf\xe9\nna\xefve\n\x00\xff\nend"
        path = tmp_path / "bin.txt"
        path.write_bytes(original)

        convert_line_endings(path, reverse=True)
        assert path.read_bytes() == original.replace(b"\n", b"\r\n")
        convert_line_endings(path)

        assert path.read_bytes() == original

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ValidationError, match="missing.txt"):
            convert_line_endings(tmp_path / "missing.txt")
