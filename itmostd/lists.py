"""List built-in functions."""

from __future__ import annotations

import copy
from typing import Any, List

from .core import CallContext, StdLib, assert_type, make_builtin
from .errors import (
    ArgumentTypeError,
    EmptyListPopError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)
from .values import sort_key, type_name


def register_all(lib: StdLib) -> None:
    """Register every list function in ``lib``."""
    lib.register("len", make_builtin("len", length, 1))
    lib.register("push", make_builtin("push", push, 2))
    lib.register("pop", make_builtin("pop", pop, 1))
    lib.register("insert", make_builtin("insert", insert, 3))
    lib.register("remove", make_builtin("remove", remove, 2))
    lib.register("range", make_builtin("range", range_list, 3))
    lib.register("sort", make_builtin("sort", sort, 1))
    lib.register("set", make_builtin("set", set_item, 3))


def length(args: List[Any], context: CallContext) -> int:
    """Number of elements of a List or characters of a String."""
    value = args[0]
    given = type_name(value)
    if given not in ("List", "String"):
        raise ArgumentTypeError(context.location, 0, given, "List or String")
    return len(value)


def range_list(args: List[Any], context: CallContext) -> List[int]:
    """List of Ints from start up to (not including) end with the given step."""
    for value in args[:3]:
        assert_type(value, 0, "Int", context)
    start, end, step = args[0], args[1], args[2]
    if step == 0:
        raise InvalidArgumentError(context.location, 2, "step in range() can't be zero")
    return list(range(start, end, step))


def push(args: List[Any], context: CallContext) -> List[Any]:
    """Append a value to the end of a list in place and return the list."""
    assert_type(args[0], 0, "List", context)
    items = args[0]
    items.append(args[1])
    return items


def pop(args: List[Any], context: CallContext) -> List[Any]:
    """Remove the last element of a list in place and return the list."""
    assert_type(args[0], 0, "List", context)
    items = args[0]
    if not items:
        raise EmptyListPopError(context.location)
    items.pop()
    return items


def _checked_index(args: List[Any], context: CallContext, allow_end: bool) -> int:
    assert_type(args[0], 0, "List", context)
    assert_type(args[1], 1, "Int", context)
    items, index = args[0], args[1]
    limit = len(items) if allow_end else len(items) - 1
    if index < 0 or index > limit:
        raise IndexOutOfRangeError(context.location, index, len(items))
    return index


def insert(args: List[Any], context: CallContext) -> List[Any]:
    """Insert a value before the given index; the index may equal the length."""
    index = _checked_index(args, context, allow_end=True)
    items = args[0]
    items.insert(index, args[2])
    return items


def remove(args: List[Any], context: CallContext) -> List[Any]:
    """Remove the element at the given index in place and return the list."""
    index = _checked_index(args, context, allow_end=False)
    items = args[0]
    del items[index]
    return items


def sort(args: List[Any], context: CallContext) -> List[Any]:
    """Sort a list in place, ordering by type first and by value within a type."""
    assert_type(args[0], 0, "List", context)
    items = args[0]
    items.sort(key=sort_key)
    return items


def set_item(args: List[Any], context: CallContext) -> List[Any]:
    """Replace the element at the given index with a copy of a value."""
    index = _checked_index(args, context, allow_end=False)
    items = args[0]
    value = args[2]
    items[index] = copy.deepcopy(value) if isinstance(value, list) else value
    return items