"""Reading candidate values from plain-text files.

Files are read as UTF-8 with transparent BOM handling (``"utf-8-sig"``) and
split into one value per line.  ``FileNotFoundError`` and other I/O errors
propagate to the caller.
"""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["read_values", "clean_values"]


def clean_values(
    lines: list[str], *, strip_whitespace: bool = True, skip_blank: bool = True
) -> list[str]:
    """Apply the input cleaning policy to raw ``lines``.

    Line terminators are always removed.  With ``strip_whitespace`` surrounding
    blanks are removed too.  With ``skip_blank`` any value that is empty or
    consists only of whitespace is dropped, even when ``strip_whitespace`` is
    off and other values keep their surrounding blanks.
    """

    values: list[str] = []
    for line in lines:
        value = line.rstrip("\r\n")
        if strip_whitespace:
            value = value.strip()
        if skip_blank and not value.strip():
            continue
        values.append(value)
    return values


def read_values(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    strip_whitespace: bool = True,
    skip_blank: bool = True,
) -> list[str]:
    """Return the values stored one per line in ``path``."""

    with Path(path).open("r", encoding=encoding, newline="") as fh:
        text = fh.read()
    return clean_values(
        text.splitlines(keepends=True),
        strip_whitespace=strip_whitespace,
        skip_blank=skip_blank,
    )
