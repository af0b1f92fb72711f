"""The commands the shell runs itself: echo, cd, pwd, export, unset, env and exit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from minishell.environment import Environment
from minishell.strutil import atoi

SUCCESS = 0
FAILURE = 1

_INT64_MAX_DIGITS = "9223372036854775807"
_INT64_MIN_DIGITS = "9223372036854775808"

_MSG_CD_ARGC = "minishell: cd: too many arguments"
_MSG_CD_DIR = "minishell: cd: error retrieving current directory"
_MSG_ENV_ARGC = "minishell: env: too many arguments"
_MSG_EXIT_NUM = "minishell: exit: numeric argument required"
_MSG_EXIT_ARGC = "minishell: exit: too many arguments"

_BUILTIN_NAMES = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})


class ShellExit(Exception):
    """Raised when the shell must terminate with the given status."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """State shared between commands; ``exit_code`` is the last command's status."""

    exit_code: int = 0


def is_builtin(name: Optional[str]) -> bool:
    """Tell whether ``name`` is one of the shell's own commands."""
    return name in _BUILTIN_NAMES


def run_builtin(
    args: Sequence[str],
    env: Environment,
    state: ShellState,
    out: TextIO,
    err: TextIO,
) -> int:
    """Run the builtin named by ``args[0]`` with the rest as its arguments.

    Returns the command's exit status; an unknown name gives 0. ``exit``
    may raise :class:`ShellExit`.
    """
    if not args:
        return SUCCESS
    name, rest = args[0], list(args[1:])
    if name == "echo":
        return echo(rest, out)
    if name == "cd":
        return cd(rest, env, err)
    if name == "pwd":
        return pwd(out)
    if name == "export":
        return env.export(rest, out, err)
    if name == "unset":
        return env.unset(*rest)
    if name == "env":
        return env_builtin(rest, env, out, err)
    if name == "exit":
        return exit_builtin(rest, state, err)
    return SUCCESS


def _is_no_newline_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and all(ch == "n" for ch in arg[1:])


def echo(args: Sequence[str], out: TextIO) -> int:
    """Print the arguments separated by spaces.

    Leading ``-n`` options (``-n``, ``-nnn`` ...) are skipped; when the first
    argument is one, no trailing newline is written.
    """
    args = list(args)
    start = 0
    while start < len(args) and _is_no_newline_flag(args[start]):
        start += 1
    out.write(" ".join(args[start:]))
    if not args or not _is_no_newline_flag(args[0]):
        out.write("\n")
    return SUCCESS


def cd(args: Sequence[str], env: Environment, err: TextIO) -> int:
    """Change directory, updating ``OLDPWD`` and ``PWD`` where they exist.

    With no argument or ``~`` the target is ``HOME``.
    """
    args = list(args)
    if len(args) > 1:
        err.write(_MSG_CD_ARGC + "\n")
        return FAILURE
    if not args or args[0] == "~":
        try:
            target = env.home()
        except KeyError as exc:
            err.write(f"{exc.args[0]}\n")
            return FAILURE
        if target is None:
            return FAILURE
    else:
        target = args[0]
    try:
        old_cwd = os.getcwd()
    except OSError:
        err.write(_MSG_CD_DIR + "\n")
        return FAILURE
    try:
        os.chdir(target)
    except OSError as exc:
        err.write(f"minishell: cd: {target}: {exc.strerror}\n")
        return FAILURE
    if "OLDPWD" in env:
        env.set("OLDPWD", old_cwd)
    if "PWD" in env:
        try:
            env.set("PWD", os.getcwd())
        except OSError:
            pass
    return SUCCESS


def pwd(out: TextIO) -> int:
    """Print the current working directory; print nothing if it cannot be found."""
    try:
        cwd = os.getcwd()
    except OSError:
        return SUCCESS
    out.write(cwd + "\n")
    return SUCCESS


def env_builtin(args: Sequence[str], env: Environment, out: TextIO, err: TextIO) -> int:
    """Print every variable that has a value; any argument other than ``env`` is an error."""
    args = list(args)
    if args and args[0] != "env":
        err.write(_MSG_ENV_ARGC + "\n")
        return FAILURE
    env.print_env(out)
    return SUCCESS


def _is_numeric_argument(text: str) -> bool:
    pos = 0
    while pos < len(text) and text[pos] == " ":
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    while pos < len(text) and text[pos] == "0":
        pos += 1
    rest = text[pos:]
    limit = _INT64_MIN_DIGITS if negative else _INT64_MAX_DIGITS
    if len(rest) > len(limit) or (len(rest) == len(limit) and rest > limit):
        return False
    return all(ch in "0123456789" for ch in rest)


def parse_exit_argument(text: str) -> int:
    """Turn an ``exit`` argument into a process status between 0 and 255.

    Raises ValueError when the argument is not a number within the 64-bit
    signed range.
    """
    if not _is_numeric_argument(text):
        raise ValueError(f"numeric argument required: {text!r}")
    return atoi(text) & 0xFF


def exit_builtin(args: Sequence[str], state: ShellState, err: TextIO) -> int:
    """Leave the shell by raising :class:`ShellExit`.

    Without arguments the last exit status is used. A non-numeric argument
    exits with 2. More than one numeric argument is reported and returns 1
    without exiting.
    """
    args = list(args)
    if not args:
        raise ShellExit(state.exit_code)
    try:
        code = parse_exit_argument(args[0])
    except ValueError:
        err.write(_MSG_EXIT_NUM + "\n")
        raise ShellExit(2) from None
    if len(args) > 1:
        err.write(_MSG_EXIT_ARGC + "\n")
        return FAILURE
    raise ShellExit(code)