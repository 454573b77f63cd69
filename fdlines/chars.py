"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_SPACE = " \n\t\v\f\r"


def _code(c: int | str) -> int:
    """Return the code point of a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    An optional single sign is accepted. Parsing stops at the first
    non-digit; if no digits follow, the result is 0.
    """
    stripped = text.lstrip(_SPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; other values are returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; other values are returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(c, str) else code