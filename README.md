# tinyshell

Two minimal interactive shells and a few classic file utilities.

## Installation

```
pip install .
```

## The shells

### femtoshell

```
femtoshell
```

Prints the prompt `Femto shell prompt > `, then reads standard input up
to end of input (Ctrl+D on a terminal) and runs it line by line. It
understands only:

- `echo <text>` prints the text after `echo ` unchanged
- `echo` and `\` print an empty line
- `exit` prints `Good Bye` and ends the session with status `0`

Anything else prints `Invalid command`. A line of only spaces, tabs or
carriage returns just prints the prompt again. The exit status is that
of the last command run (`0` on success, `1` for an invalid command).

### picoshell

```
picoshell
```

Prints the prompt `Pico shell prompt > `, reads a block of input (a
line at a time on a terminal) and splits each line into words on
spaces. It supports:

- `echo [words...]` prints the words separated by single spaces
- `pwd` prints the current directory
- `cd <dir>` changes the current directory; without an argument it
  prints `cd: missing argument`, and on failure `cd: <dir>: <reason>`
- `exit` prints `Good Bye` and ends the session with status `0`

Any other word is run as an external program found on `PATH` with the
remaining words as its arguments; its exit status becomes the shell's
status (`1` if it was killed by a signal). A program that cannot be
started reports `<name>: command not found` with status `127`.

Both shells also work on piped input:

```
printf 'echo hello\nexit\n' | picoshell
```

### What the shells do not do

There is no quoting or escaping, no variables, no globbing, no pipes or
redirection, no background jobs and no command history. Words are split
on single spaces only.

## Using the library

```python
import io
from tinyshell.pico import PicoShell

out = io.StringIO()
shell = PicoShell(io.StringIO("echo hi there\n"), out)
status = shell.run()
```

`FemtoShell` from `tinyshell.femto` has the same interface. Both
classes also offer `execute(line)`, which runs a single command line and
returns its status, or `None` when the line was `exit`.

The helpers in `tinyshell.common` are handy on their own:

- `is_blank(text)` is true for text of only spaces, tabs, CR and LF
- `split_commands(data)` splits on newlines, dropping empty lines
- `split_arguments(command)` splits on spaces, dropping empty words

## Utilities

`tinyshell.utilities` holds small versions of `pwd`, `echo`, `cp` and
`mv` as `pwd_main`, `echo_main`, `cp_main` and `mv_main`. Each takes an
argument list (without the program name; `sys.argv[1:]` when omitted)
and returns an exit status. `cp_main` and `mv_main` expect exactly a
source and a destination; otherwise, or given `--help`, they print a
usage line to standard error and return `1`. File errors are likewise
reported on standard error with status `1`. `UsageError` is the
exception class used for these argument errors.

The file operations are also available directly:

```python
from tinyshell.utilities import copy_file, move_file

copy_file("notes.txt", "notes.bak")
move_file("notes.bak", "/tmp/notes.bak")
```

`copy_file` creates or truncates the destination. `move_file` renames,
and falls back to copying and deleting when the destination is on
another file system. Both raise `OSError` on failure.