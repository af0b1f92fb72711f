"""String helpers used throughout the shell: parsing, splitting and comparing."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = frozenset(" " + "".join(chr(code) for code in range(7, 14)))
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading integer the way the C library does.

    Leading blanks (space and control characters 7 to 13) are skipped, one
    optional sign is accepted, then ASCII digits are read until the first
    character that is not one. A string without digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < length and text[pos] in _DIGITS:
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return -result if negative else result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str | None, sep: str) -> list[str] | None:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str | None, charset: str) -> str | None:
    """Remove every leading and trailing character found in ``charset``.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    return text.strip(charset)


def substr(text: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end of the text, or a zero length, gives an empty
    string. Returns None when ``text`` is None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if text is None:
        return None
    if length == 0 or start >= len(text):
        return ""
    return text[start:start + length]


def _compare(a: str, b: str) -> int:
    """Compare two strings as C strings, returning the code point difference."""
    for left, right in zip_longest(a, b, fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            return 0
    return 0


def strncmp(a: str | None, b: str | None, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    The result is negative, zero or positive as ``a`` sorts before, equal to
    or after ``b``. A missing string sorts before a present one.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return _compare(a[:n], b[:n])


def strcmp(a: str, b: str) -> int:
    """Compare ``a`` and ``b`` fully, returning the difference at the first mismatch."""
    return _compare(a, b)