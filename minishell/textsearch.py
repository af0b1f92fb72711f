"""Searching inside strings, including quote-aware substitution."""

from __future__ import annotations


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def strnstr(haystack: str | None, needle: str | None, n: int) -> int | None:
    """Find ``needle`` within the first ``n`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if haystack is None or needle is None:
        return None
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character gives the length of the text, where the
    terminator of a C string would sit.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character gives the length of the text.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def in_single_quotes(text: str, index: int) -> bool:
    """Tell whether position ``index`` of ``text`` lies inside single quotes.

    Single quotes inside double quotes do not count, and the reverse.
    """
    single = False
    double = False
    for ch in text[:index]:
        if ch == "'" and not double:
            single = not single
        if ch == '"' and not single:
            double = not double
    return single


def replace_unquoted(text: str, old: str, new: str) -> str | None:
    """Replace the first occurrence of ``old`` not inside single quotes.

    Returns None when no such occurrence exists. Replacing a bare ``$`` with
    the empty string leaves the text unchanged.
    """
    if old == "$" and new == "":
        return text
    last_start = len(text) - len(old)
    for index in range(len(text)):
        if index > last_start:
            break
        if text.startswith(old, index) and not in_single_quotes(text, index):
            return text[:index] + new + text[index + len(old):]
    return None