"""Tests for soap.render."""

import pytest

from soap.config import PyramidConfig
from soap.render import iter_rows, render


def test_three_rows():
    assert render(PyramidConfig(size=3, character="#")) == "  #\n ###\n#####\n"


def test_size_zero_is_empty():
    config = PyramidConfig(size=0)
    assert render(config) == ""
    assert list(iter_rows(config)) == []


def test_size_one():
    assert render(PyramidConfig(size=1)) == "*\n"


def test_default_pyramid():
    lines = render(PyramidConfig.default()).splitlines()
    assert len(lines) == 10
    assert lines[0] == " " * 9 + "*"
    assert lines[-1] == "*" * 19


def test_no_sentinel_after_last_row():
    out = render(PyramidConfig(size=2))
    assert out.endswith("***\n")
    assert "\0" not in out


@pytest.mark.parametrize("size", [2, 5, 17, 64])
def test_row_shape(size):
    rows = list(iter_rows(PyramidConfig(size=size, character="é")))
    assert len(rows) == size
    for r, row in enumerate(rows):
        assert row == " " * (size - r - 1) + "é" * (2 * r + 1)


def test_max_size():
    rows = list(iter_rows(PyramidConfig(size=4096)))
    assert len(rows) == 4096
    assert rows[-1] == "*" * 8191
    assert rows[0] == " " * 4095 + "*"
