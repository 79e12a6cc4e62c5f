"""Input, output and introspection built-in functions."""

from __future__ import annotations

from typing import Any, List, TextIO

from .core import CallContext, StdLib, make_builtin, make_stream_builtin
from .values import to_display


def register_all(lib: StdLib) -> None:
    """Register every system function in ``lib``."""
    lib.register_output("print", make_stream_builtin("print", print_value, 1))
    lib.register_output("println", make_stream_builtin("println", println_value, 1))
    lib.register_input("read", make_stream_builtin("read", read_line, 0))
    lib.register("stacktrace", make_builtin("stacktrace", stacktrace, 0))


def print_value(stream: TextIO, args: List[Any], context: CallContext) -> None:
    """Write the printable form of a value."""
    stream.write(to_display(args[0]))
    return None


def println_value(stream: TextIO, args: List[Any], context: CallContext) -> None:
    """Write the printable form of a value followed by a newline."""
    stream.write(to_display(args[0]) + "\n")
    stream.flush()
    return None


def read_line(stream: TextIO, args: List[Any], context: CallContext) -> str:
    """Read one line without its trailing newline; empty at end of input."""
    line = stream.readline()
    return line[:-1] if line.endswith("\n") else line


def stacktrace(args: List[Any], context: CallContext) -> List[List[Any]]:
    """Pairs of function name and entry line for every frame of the call stack."""
    return [
        [frame.function_name, frame.entry_location.line]
        for frame in context.call_stack
    ]