"""Unit tests for filesystem utility functions."""

import unittest
from pathlib import Path

import pytest

from tzloc.utils.fs_utils import project_root, read_first_line, read_link

pytestmark = pytest.mark.unit  # Mark all tests in this module as unit tests


class TestFsUtils(unittest.TestCase):
    """Test FS utils functions (unittest style)."""

    def test_project_root(self):
        result = Path(project_root())
        assert result == Path(__file__).resolve().parent.parent.parent.parent.parent


def test_project_root_with_file_path():
    result = project_root("config.yaml")
    assert result.endswith("/config.yaml")


def test_read_first_line(tmp_path):
    fname = tmp_path / "f.txt"
    fname.write_bytes(b"first\nsecond\n")
    assert read_first_line(str(fname)) == b"first\n"


def test_read_first_line_limit(tmp_path):
    fname = tmp_path / "f.bin"
    fname.write_bytes(b"x" * 100)
    assert read_first_line(str(fname), limit=10) == b"x" * 10


def test_read_first_line_missing(tmp_path):
    with pytest.raises(OSError):
        read_first_line(str(tmp_path / "missing"))


def test_read_link(tmp_path):
    link = tmp_path / "link"
    link.symlink_to("/usr/share/zoneinfo/Europe/Budapest")
    assert read_link(str(link)) == "/usr/share/zoneinfo/Europe/Budapest"


def test_read_link_regular_file(tmp_path):
    fname = tmp_path / "plain"
    fname.write_text("x", encoding="utf-8")
    assert read_link(str(fname)) is None


def test_read_link_missing(tmp_path):
    assert read_link(str(tmp_path / "missing")) is None
