"""
Tests for utility modules.
"""

from pathlib import Path

from rdfe2rdfx.util.files import change_extension, has_extension, iter_input_files
from rdfe2rdfx.util.text import is_empty, needs_cdata


class TestText:
    """Tests for string value helpers."""

    def test_none_is_empty(self):
        assert is_empty(None)
        assert not needs_cdata(None)

    def test_empty_string(self):
        assert is_empty("")
        assert not needs_cdata("")

    def test_single_line(self):
        assert not is_empty("value")
        assert not needs_cdata("value with spaces & <markup>")

    def test_carriage_return_only(self):
        """Test that a carriage return alone does not count as a newline."""
        assert not needs_cdata("a\rb")

    def test_multi_line(self):
        assert needs_cdata("line1\nline2")
        assert needs_cdata("trailing\n")
        assert needs_cdata("windows\r\nline")


class TestFiles:
    """Tests for file helpers."""

    def test_change_extension(self):
        assert change_extension("dir/folder.rdfe", ".rdfx") == Path("dir/folder.rdfx")

    def test_change_extension_keeps_inner_dots(self):
        assert change_extension("my.folder.rdfe", ".rdfx") == Path("my.folder.rdfx")

    def test_has_extension(self):
        assert has_extension("a.rdfe", ".rdfe")
        assert not has_extension("a.rdfx", ".rdfe")
        assert not has_extension("a.RDFE", ".rdfe")
        assert not has_extension("a.rdfe.bak", ".rdfe")

    def test_iter_input_files_recursive_and_sorted(self, tmp_path):
        for name in ["b.rdfe", "a.rdfe", "sub/c.rdfe", "sub/d.rdfx", "e.txt"]:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("{}")

        found = list(iter_input_files(tmp_path, ".rdfe"))

        assert found == [tmp_path / "a.rdfe", tmp_path / "b.rdfe", tmp_path / "sub" / "c.rdfe"]

    def test_iter_input_files_skips_directories(self, tmp_path):
        (tmp_path / "archive.rdfe").mkdir()
        (tmp_path / "archive.rdfe" / "inner.rdfe").write_text("{}")

        found = list(iter_input_files(tmp_path, ".rdfe"))

        assert found == [tmp_path / "archive.rdfe" / "inner.rdfe"]
