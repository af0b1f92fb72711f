"""A small printf supporting the conversions %c %s %p %d %i %u %x %X."""

from __future__ import annotations

import sys
from typing import Any, Callable

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _signed32(value: Any) -> int:
    number = int(value) & _UINT32_MASK
    return number - (1 << 32) if number & 0x80000000 else number


def _unsigned32(value: Any) -> int:
    return int(value) & _UINT32_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _UINT64_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "x": lambda value: format(_unsigned32(value), "x"),
    "X": lambda value: format(_unsigned32(value), "X"),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    An unknown conversion character is written as itself, so ``%%`` gives
    ``%``. Extra arguments are ignored.
    """
    chars = iter(fmt)
    values = iter(args)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            parts.append(spec)
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        parts.append(convert(value))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)