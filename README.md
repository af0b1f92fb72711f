# minishell

This package provides parts of a small POSIX-style shell:

- the builtin commands `echo`, `cd`, `pwd`, `export`, `unset`, `env` and `exit`,
- an environment store that behaves like a shell's exported variables,
- the string helpers that a shell's parser needs.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Environment

`minishell.environment.Environment` keeps variables in insertion order. A
variable can exist without a value, as it does after `export NAME`.

```python
import sys
from minishell.environment import Environment

env = Environment(["HOME=/home/user", "PATH=/usr/bin"])
env.export(["GREETING=hello", "EMPTY=", "FLAG"], sys.stdout, sys.stderr)
env.print_export(sys.stdout)   # declare -x ... lines, sorted by name
env.print_env(sys.stdout)      # NAME=value lines, only variables with a value
env.unset("FLAG")
print(env.get("GREETING"))     # hello
```

`export` returns 1 if any argument is not a valid identifier, and 0
otherwise. Each invalid argument is reported on the error stream, and the
arguments after it are still processed. Exporting a name that already exists
without giving `=VALUE` leaves its value as it was.

The module also provides the helper functions `is_valid_key`,
`split_assignment` and `assemble_envar`, and the `EnvVar` dataclass.

## Builtins

```python
import sys
from minishell.builtins import ShellExit, ShellState, is_builtin, run_builtin
from minishell.environment import Environment

env = Environment(["HOME=/tmp"])
state = ShellState()

is_builtin("echo")                                        # True
run_builtin(["echo", "-n", "hi"], env, state, sys.stdout, sys.stderr)

try:
    run_builtin(["exit", "42"], env, state, sys.stdout, sys.stderr)
except ShellExit as request:
    print(request.code)                                   # 42
```

The builtins behave as follows:

- `cd` with no argument, or with `~`, changes to `HOME`. It updates
  `OLDPWD` and `PWD` only if those variables already exist.
- `exit` does not end the interpreter. It raises `ShellExit`, which carries
  the status the shell should exit with:
  - With no argument, the status is `ShellState.exit_code`.
  - With a numeric argument, the status is that number modulo 256.
  - With a non-numeric argument, or a number outside the 64-bit signed
    range, it reports an error and the status is 2.
  - With a valid number followed by further arguments, it reports
    "too many arguments" and returns 1 without raising.
- `parse_exit_argument` performs the argument check that `exit` uses on its
  own.

## String helpers

`minishell.strutil` covers parsing, splitting and comparison:

- `atoi` and `itoa` convert between strings and integers.
- `split` splits on a single separator character and drops empty words.
- `strtrim` trims characters from both ends, and `substr` slices.
- `strcmp` and `strncmp` compare strings the way C does.

`minishell.textsearch` covers searching:

- `strnstr`, `strchr` and `strrchr` return indices, or `None` when nothing
  is found.
- `in_single_quotes` tells whether a position lies inside single quotes.
- `replace_unquoted` replaces the first occurrence of a string that is not
  inside single quotes. If there is no such occurrence it returns `None`.

`minishell.formatting` provides a small `printf` that supports
`%c %s %p %d %i %u %x %X`. It returns the number of characters written.
`format_string` returns the formatted text instead of printing it.

`minishell.linereader.LineReader` reads newline-terminated lines from a
binary or text stream, using a fixed read size:

```python
import io
from minishell.linereader import LineReader

for line in LineReader(io.BytesIO(b"one\ntwo"), 4):
    print(repr(line))   # b'one\n', then b'two'
```

## What this package does not do

This package has no interactive prompt and no command to start a shell. It
does not parse command lines into pipelines, redirections or here-documents,
and it does not run external programs. Those pieces must be built on top of
the builtins, the environment and the string helpers described above.