"""The shell's environment variables and the export, unset and env views of them."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

_KEY_START = frozenset(string.ascii_letters + "_")
_KEY_BODY = frozenset(string.ascii_letters + string.digits + "_")


def is_valid_key(key: Optional[str]) -> bool:
    """Tell whether ``key`` may name a variable: a letter or ``_``, then letters, digits or ``_``."""
    if not key:
        return False
    return key[0] in _KEY_START and all(ch in _KEY_BODY for ch in key)


def split_assignment(arg: str) -> tuple[str, Optional[str]]:
    """Split ``KEY=VALUE`` at the first ``=``.

    The value is None when the argument holds no ``=`` at all, and the empty
    string when nothing follows it.
    """
    key, sep, value = arg.partition("=")
    return key, (value if sep else None)


def assemble_envar(key: str, value: Optional[str]) -> str:
    """Join a key and value into ``KEY=VALUE``, or just ``KEY`` without a value."""
    return key if value is None else f"{key}={value}"


@dataclass
class EnvVar:
    """One environment variable. A value of None marks a variable declared but unset."""

    key: str
    value: Optional[str] = None

    @property
    def envar(self) -> str:
        return assemble_envar(self.key, self.value)


class Environment:
    """An ordered set of environment variables, kept in insertion order."""

    def __init__(self, entries: Optional[Iterable[str]] = None) -> None:
        self._vars: dict[str, EnvVar] = {}
        for entry in entries or ():
            key, value = split_assignment(entry)
            self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None if it is missing or has no value."""
        var = self._vars.get(key)
        return None if var is None else var.value

    def set(self, key: str, value: Optional[str]) -> None:
        """Create ``key`` or update its value.

        Setting an existing variable to None leaves its current value alone.
        """
        var = self._vars.get(key)
        if var is None:
            self._vars[key] = EnvVar(key, value)
        elif value is not None:
            var.value = value

    def unset(self, *args: str) -> int:
        """Remove every named variable; names that do not exist are ignored."""
        for key in args:
            self._vars.pop(key, None)
        return 0

    def export(self, args: Iterable[str], out: TextIO, err: TextIO) -> int:
        """Run ``export`` with the arguments following the command name.

        Without arguments every variable is listed. Otherwise each
        ``KEY[=VALUE]`` is stored; an invalid identifier is reported on
        ``err`` and makes the result 1, but later arguments are still handled.
        """
        args = list(args)
        if not args:
            self.print_export(out)
            return 0
        exit_code = 0
        for arg in args:
            key, value = split_assignment(arg)
            if not is_valid_key(key):
                err.write(f"minishell: export: `{arg}': not a valid identifier\n")
                exit_code = 1
                continue
            self.set(key, value)
        return exit_code

    def print_export(self, out: TextIO) -> None:
        """List every variable sorted by key, as ``declare -x KEY="VALUE"``."""
        for var in sorted(self._vars.values(), key=lambda v: v.key):
            out.write(f"declare -x {var.key}")
            if var.value is not None:
                out.write(f'="{var.value}"\n')
            else:
                out.write("\n")

    def print_env(self, out: TextIO) -> None:
        """List variables that have a value as ``KEY=VALUE``, in insertion order."""
        for var in self._vars.values():
            if var.value is not None:
                out.write(f"{var.key}={var.value}\n")

    def home(self) -> Optional[str]:
        """Return the value of ``HOME``.

        Raises KeyError when the variable does not exist.
        """
        var = self._vars.get("HOME")
        if var is None:
            raise KeyError("minishell: cd: HOME not set")
        return var.value

    def keys(self) -> list[str]:
        """Return the variable names in insertion order."""
        return list(self._vars)