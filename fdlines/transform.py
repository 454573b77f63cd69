"""Building new strings from existing ones: joining, slicing, trimming, splitting, mapping."""

from __future__ import annotations

from collections.abc import Callable

_TRIM = " \n\t"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    The buffer holds a terminating NUL, so at most ``dstsize - len(dst) - 1``
    characters of ``src`` are appended. Returns the resulting string and the
    length the full concatenation would have had (``dst`` counted at most
    ``dstsize`` long).
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    srclen = len(src)
    dstlen = len(dst)
    if dstlen > dstsize:
        return dst, dstsize + srclen
    if dstlen == dstsize or dstsize == 0:
        return dst, dstlen + srclen
    room = dstsize - dstlen - 1
    return dst + src[:room], dstlen + srclen


def strsub(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` starting at ``start``."""
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        raise IndexError(f"start {start} is past the end of a string of length {len(s)}")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str) -> str:
    """Strip spaces, newlines and tabs from both ends."""
    return _require_str(s, "s").strip(_TRIM)


def strsplit(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter character ``c``, dropping empty words."""
    _require_str(s, "s")
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single delimiter character, got {c!r}")
    return [word for word in s.split(c) if word]


def strmap(s: str, f: Callable[[str], str]) -> str:
    """Return a new string made of ``f`` applied to every character."""
    return "".join(f(ch) for ch in _require_str(s, "s"))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, character)`` for every character."""
    return "".join(f(i, ch) for i, ch in enumerate(_require_str(s, "s")))