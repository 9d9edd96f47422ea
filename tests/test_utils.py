import os

import pytest

from grepkit.utils import ext, is_bin_ext, rel_path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("notes.TXT", "txt"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
    ],
)
def test_ext(path, expected):
    assert ext(path) == expected


def test_ext_is_lower_case_of_last_part():
    path = "Report.Final.PDF"
    assert ext(path) == path.split(".")[-1].lower()


@pytest.mark.parametrize("path", ["image.png", "photo.JPG", "lib.dll", "bundle.tar.gz", "x.zip"])
def test_is_bin_ext_true(path):
    assert is_bin_ext(path) is True


@pytest.mark.parametrize("path", ["main.py", "readme.md", "Makefile", "source.cpp"])
def test_is_bin_ext_false(path):
    assert is_bin_ext(path) is False


def test_rel_path_strips_base(tmp_path):
    base = str(tmp_path)
    full = os.path.join(base, "sub", "file.txt")
    assert rel_path(full, base) == os.path.join("sub", "file.txt")


def test_rel_path_ignores_case(tmp_path):
    base = str(tmp_path)
    full = os.path.join(base, "file.txt")
    assert rel_path(full, base.upper()) == "file.txt"


def test_rel_path_unrelated_base_returns_path():
    path = os.path.join("one", "two", "three.txt")
    assert rel_path(path, os.path.join("other", "dir")) == path