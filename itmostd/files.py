"""File access built-in functions."""

from __future__ import annotations

from typing import Any, List

from .core import CallContext, StdLib, assert_type, make_builtin
from .errors import FileAccessError
from .values import to_text


def register_all(lib: StdLib) -> None:
    """Register every file function in ``lib``."""
    lib.register("file_read", make_builtin("file_read", file_read, 1))
    lib.register("file_read_lines", make_builtin("file_read_lines", file_read_lines, 1))
    lib.register("file_write", make_builtin("file_write", file_write, 2))
    lib.register("file_append", make_builtin("file_append", file_append, 2))


def _read(args: List[Any], context: CallContext) -> str:
    assert_type(args[0], 0, "String", context)
    filename = args[0]
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError:
        raise FileAccessError(context.location, filename) from None


def _write(args: List[Any], context: CallContext, mode: str) -> None:
    assert_type(args[0], 0, "String", context)
    filename = args[0]
    try:
        with open(filename, mode, encoding="utf-8", newline="") as handle:
            handle.write(to_text(args[1]))
    except OSError:
        raise FileAccessError(context.location, filename) from None
    return None


def file_read(args: List[Any], context: CallContext) -> str:
    """Whole contents of a file."""
    return _read(args, context)


def file_read_lines(args: List[Any], context: CallContext) -> List[str]:
    """Lines of a file without their newlines; a final newline adds no line."""
    lines = _read(args, context).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def file_write(args: List[Any], context: CallContext) -> None:
    """Replace the contents of a file with a value's text."""
    return _write(args, context, "w")


def file_append(args: List[Any], context: CallContext) -> None:
    """Append a value's text to a file."""
    return _write(args, context, "a")