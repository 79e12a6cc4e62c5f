"""String built-in functions."""

from __future__ import annotations

import string
from typing import Any, List

from . import utils
from .core import CallContext, StdLib, assert_type, make_builtin
from .values import to_text

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def register_all(lib: StdLib) -> None:
    """Register every string function in ``lib``."""
    lib.register("lower", make_builtin("lower", lower, 1))
    lib.register("upper", make_builtin("upper", upper, 1))
    lib.register("split", make_builtin("split", split, 2))
    lib.register("join", make_builtin("join", join, 2))
    lib.register("replace", make_builtin("replace", replace, 3))


def lower(args: List[Any], context: CallContext) -> str:
    """ASCII letters converted to lower case."""
    assert_type(args[0], 0, "String", context)
    return args[0].translate(_LOWER)


def upper(args: List[Any], context: CallContext) -> str:
    """ASCII letters converted to upper case."""
    assert_type(args[0], 0, "String", context)
    return args[0].translate(_UPPER)


def split(args: List[Any], context: CallContext) -> List[str]:
    """Split a string on a delimiter; an empty delimiter yields the whole string."""
    assert_type(args[0], 0, "String", context)
    assert_type(args[1], 1, "String", context)
    text, delimiter = args[0], args[1]
    if not delimiter:
        return [text]
    return text.split(delimiter)


def join(args: List[Any], context: CallContext) -> str:
    """Join the elements of a list with a glue string."""
    assert_type(args[0], 0, "List", context)
    assert_type(args[1], 1, "String", context)
    return utils.join(args[0], args[1], to_text)


def replace(args: List[Any], context: CallContext) -> str:
    """Replace every occurrence of one substring with another."""
    for index in range(3):
        assert_type(args[index], index, "String", context)
    return utils.replace_all(args[0], args[1], args[2])