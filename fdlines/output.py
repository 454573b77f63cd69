"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str, file: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)


def put_str(s: str | None, file: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is not None:
        _target(file).write(s)


def put_endl(s: str | None, file: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _target(file)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(file).write(str(n))