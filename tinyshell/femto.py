"""A minimal shell that understands echo and exit."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from tinyshell.common import is_blank

PROMPT = "Femto shell prompt > "


class FemtoShell:
    """Reads all of its input, then runs it line by line."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = sys.stdin if stdin is None else stdin
        self._stdout = sys.stdout if stdout is None else stdout

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def execute(self, line: str) -> Optional[int]:
        """Run one command line; return its status, or None when the shell should exit."""
        if is_blank(line):
            self._write(PROMPT)
            self._write(PROMPT)
            return 0
        if line == "exit":
            self._write("Good Bye\n")
            return None
        if line.startswith("echo "):
            self._write(line[len("echo "):] + "\n")
            return 0
        if line in ("echo", "\\"):
            self._write("\n")
            return 0
        self._write("Invalid command\n")
        return 1

    def run(self) -> int:
        """Run until end of input or ``exit``; return the last command's status."""
        status = 0
        while True:
            self._write(PROMPT)
            try:
                data = self._stdin.read()
            except OSError:
                return 1
            if not data:
                return status
            lines = data.split("\n")
            if data.endswith("\n"):
                lines.pop()
            last = len(lines) - 1
            for index, line in enumerate(lines):
                if line:
                    result = self.execute(line)
                    if result is None:
                        return 0
                    status = result
                if index < last:
                    self._write(PROMPT)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the shell on the process's standard streams."""
    return FemtoShell().run()


if __name__ == "__main__":
    sys.exit(main())