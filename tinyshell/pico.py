"""A small shell with echo, pwd, cd, exit and external commands."""

from __future__ import annotations

import codecs
import io
import os
import subprocess
import sys
from typing import Optional, TextIO

from tinyshell.common import is_blank, split_arguments, split_commands

PROMPT = "Pico shell prompt > "
CHUNK_SIZE = 1023
COMMAND_NOT_FOUND = 127


class PicoShell:
    """Reads a block of input at a time and runs each of its lines."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = sys.stdout if stdout is None else stdout
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _read_chunk(self) -> str:
        if self._stdin is not None:
            return self._stdin.read(CHUNK_SIZE)
        raw = os.read(sys.stdin.fileno(), CHUNK_SIZE)
        return self._decoder.decode(raw, final=not raw)

    def _read_block(self) -> str:
        """Read until a short chunk, a chunk ending in a newline, or end of input."""
        parts = []
        while True:
            chunk = self._read_chunk()
            if not chunk:
                break
            parts.append(chunk)
            if len(chunk) < CHUNK_SIZE or chunk.endswith("\n"):
                break
        return "".join(parts)

    def _stdout_fileno(self) -> Optional[int]:
        try:
            return self._stdout.fileno()
        except (AttributeError, OSError, io.UnsupportedOperation):
            return None

    def _run_external(self, args: list[str]) -> int:
        fileno = self._stdout_fileno()
        try:
            if fileno is not None:
                completed = subprocess.run(args, stdout=fileno)
            else:
                completed = subprocess.run(args, stdout=subprocess.PIPE)
        except OSError:
            self._write(f"{args[0]}: command not found\n")
            return COMMAND_NOT_FOUND
        if completed.stdout:
            self._write(completed.stdout.decode("utf-8", errors="replace"))
        if completed.returncode < 0:
            return 1
        return completed.returncode

    def _change_directory(self, args: list[str]) -> int:
        if len(args) < 2:
            self._write("cd: missing argument\n")
            return 1
        try:
            os.chdir(args[1])
        except OSError as exc:
            self._write(f"cd: {args[1]}: {exc.strerror or exc}\n")
            return 1
        return 0

    def _print_working_directory(self) -> int:
        try:
            cwd = os.getcwd()
        except OSError as exc:
            print(f"pwd failed: {exc.strerror or exc}", file=sys.stderr)
            return 1
        self._write(cwd + "\n")
        return 0

    def execute(self, line: str) -> Optional[int]:
        """Run one command line; return its status, or None when the shell should exit."""
        if is_blank(line):
            self._write(PROMPT)
            self._write(PROMPT)
            return 0
        args = split_arguments(line)
        if not args:
            return 0
        name = args[0]
        if name == "exit":
            self._write("Good Bye\n")
            return None
        if name == "echo":
            self._write(" ".join(args[1:]) + "\n")
            return 0
        if name == "pwd":
            return self._print_working_directory()
        if name == "cd":
            return self._change_directory(args)
        self._stdout.flush()
        return self._run_external(args)

    def run(self) -> int:
        """Run until end of input or ``exit``; return the last command's status."""
        status = 0
        while True:
            self._write(PROMPT)
            try:
                data = self._read_block()
            except OSError as exc:
                print(f"Error reading input: {exc.strerror or exc}", file=sys.stderr)
                return status
            if not data:
                return status
            commands = split_commands(data)
            if not commands:
                self._write(PROMPT)
                self._write(PROMPT)
                continue
            last = len(commands) - 1
            for index, command in enumerate(commands):
                result = self.execute(command)
                if result is None:
                    return 0
                status = result
                if index < last:
                    self._write(PROMPT)
                elif last > 0 and command.startswith("echo "):
                    self._write(PROMPT)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the shell on the process's standard streams."""
    return PicoShell().run()


if __name__ == "__main__":
    sys.exit(main())