"""Searching and comparing strings and byte sequences.

String searches return an index into the searched text, or ``None`` when
there is no match. Comparisons return the difference between the first pair
of differing character codes, so the sign tells the ordering.
"""

from __future__ import annotations

from collections.abc import Iterator


def _char(c: int | str) -> str:
    """Return a one-character string for a character given as int or str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _codes(s: str | bytes) -> Iterator[int]:
    """Yield the character codes of ``s`` followed by a terminating zero."""
    if isinstance(s, str):
        yield from map(ord, s)
    elif isinstance(s, (bytes, bytearray)):
        yield from s
    else:
        raise TypeError(f"expected str or bytes, got {type(s).__name__}")
    yield 0


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int, got {type(c).__name__}")
    return c & 0xFF


def _check_span(data: bytes, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"length {n} exceeds data of {len(data)} bytes")


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``; an empty needle matches at 0."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`strstr`, but only matches lying within the first ``length`` characters count."""
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strcmp(s1: str | bytes, s2: str | bytes) -> int:
    """Compare two strings; zero when equal, else the difference of the first differing codes."""
    for a, b in zip(_codes(s1), _codes(s2)):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for count, (a, b) in enumerate(zip(_codes(s1), _codes(s2)), start=1):
        if count > n:
            break
        if a != b or a == 0:
            return a - b
    return 0


def strequ(s1: str | bytes | None, s2: str | bytes | None) -> bool:
    """True when both strings are given and equal."""
    return s1 is not None and s2 is not None and strcmp(s1, s2) == 0


def strnequ(s1: str | bytes | None, s2: str | bytes | None, n: int) -> bool:
    """True when both strings are given and their first ``n`` characters are equal."""
    return s1 is not None and s2 is not None and strncmp(s1, s2, n) == 0


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) within the first ``n`` bytes."""
    _check_span(data, n)
    index = bytes(data).find(_byte(c), 0, n)
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; zero when equal, else the difference of the first differing bytes."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0