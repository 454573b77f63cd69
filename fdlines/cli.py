"""Print the lines of each file given on the command line."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from fdlines.output import put_endl, put_str
from fdlines.reader import BUFF_SIZE, MAX_FD, LineReader


class PrintError(Exception):
    """A file could not be opened, read or closed."""


def print_file(path: str, out: TextIO | None = None) -> None:
    """Write every line of ``path`` to ``out``, each followed by a newline.

    Raises PrintError naming the step that failed.
    """
    target = sys.stdout if out is None else out
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise PrintError(f"Error in opening the file: {path}") from exc
    try:
        try:
            for line in LineReader(BUFF_SIZE, MAX_FD).lines(fd):
                put_endl(line, target)
        except (OSError, ValueError) as exc:
            raise PrintError(f"Error getting next line in: {path}") from exc
    finally:
        try:
            os.close(fd)
        except OSError as exc:
            raise PrintError(f"Error closing file: {path}") from exc


def main(argv: list[str] | None = None) -> int:
    """Print the given files in order; stop at the first failure and return 1."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if not paths:
        put_endl("Needs at least one file", sys.stdout)
    for path in paths:
        try:
            print_file(path, sys.stdout)
        except PrintError as exc:
            put_str(str(exc), sys.stdout)
            put_str("\n", sys.stdout)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())