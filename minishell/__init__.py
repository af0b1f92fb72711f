"""Builtin commands, environment handling and string helpers for a small shell."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "environment",
    "formatting",
    "linereader",
    "strutil",
    "textsearch",
]