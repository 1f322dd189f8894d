from pathlib import Path

import pytest

from regex_collection.io import clean_values, read_values


def test_read_values_strips_and_skips(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_bytes("\ufeff18328073000\r\n  G14  \n\n0817-12341234".encode("utf-8"))
    assert read_values(path) == ["18328073000", "G14", "0817-12341234"]


def test_read_values_keeps_whitespace_when_asked(tmp_path: Path) -> None:
    path = tmp_path / "values.txt"
    path.write_text(" G14\n\n", encoding="utf-8")
    assert read_values(path, strip_whitespace=False, skip_blank=False) == [" G14", ""]


def test_read_values_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "missing.txt")


def test_clean_values_blank_with_spaces() -> None:
    assert clean_values(["  \n", "\t\n", " x \n"], strip_whitespace=False) == [" x "]
