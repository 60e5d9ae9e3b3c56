"""Small file and directory utilities: pwd, echo, cp and mv."""

from __future__ import annotations

import errno
import os
import shutil
import sys
from collections.abc import Sequence

CP_USAGE = "Usage: cp source-file destination-file"
MV_USAGE = "Usage: mv source_file target_file"

_NEW_FILE_MODE = 0o666


class UsageError(Exception):
    """Raised when a utility is called with the wrong arguments."""


def _create_truncated(path: str, flags: int) -> int:
    return os.open(path, flags, _NEW_FILE_MODE)


def copy_file(source: str | os.PathLike, destination: str | os.PathLike) -> None:
    """Copy the bytes of ``source`` into ``destination``, creating or truncating it."""
    with open(source, "rb") as src, open(destination, "wb", opener=_create_truncated) as dst:
        shutil.copyfileobj(src, dst)


def move_file(source: str | os.PathLike, destination: str | os.PathLike) -> None:
    """Rename ``source`` to ``destination``, copying across file systems if needed."""
    try:
        os.rename(source, destination)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        copy_file(source, destination)
        os.unlink(source)


def _two_paths(argv: Sequence[str], usage: str) -> tuple[str, str]:
    if len(argv) != 2 or argv[0] == "--help":
        raise UsageError(usage)
    return argv[0], argv[1]


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def pwd_main(argv: Sequence[str] | None = None) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"pwd: {_describe(exc)}", file=sys.stderr)
        return 1
    sys.stdout.write(cwd + "\n")
    return 0


def echo_main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments separated by single spaces."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.write(" ".join(args) + "\n")
    return 0


def cp_main(argv: Sequence[str] | None = None) -> int:
    """Copy one file to another."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        source, destination = _two_paths(args, CP_USAGE)
    except UsageError as exc:
        print(f"{exc}\n", file=sys.stderr)
        return 1
    try:
        src = open(source, "rb")
    except OSError as exc:
        print(f"opening source file {source}: {_describe(exc)}", file=sys.stderr)
        return 1
    with src:
        try:
            dst = open(destination, "wb", opener=_create_truncated)
        except OSError as exc:
            print(f"opening destination file {destination}: {_describe(exc)}", file=sys.stderr)
            return 1
        with dst:
            try:
                shutil.copyfileobj(src, dst)
            except OSError as exc:
                print(f"Couldn't write whole buffer: {_describe(exc)}", file=sys.stderr)
                return 1
    return 0


def mv_main(argv: Sequence[str] | None = None) -> int:
    """Move one file to another name."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        source, destination = _two_paths(args, MV_USAGE)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        move_file(source, destination)
    except OSError as exc:
        print(f"mv: {_describe(exc)}", file=sys.stderr)
        return 1
    return 0