"""Numeric built-in functions."""

from __future__ import annotations

import math
import random
from typing import Any, List

from .core import CallContext, StdLib, assert_number, assert_type, make_builtin
from .errors import InvalidArgumentError, SqrtFromNegativeError
from .utils import parse_float, parse_int
from .values import to_display

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def register_all(lib: StdLib) -> None:
    """Register every numeric function in ``lib``."""
    lib.register("abs", make_builtin("abs", absolute, 1))
    lib.register("ceil", make_builtin("ceil", ceil, 1))
    lib.register("floor", make_builtin("floor", floor, 1))
    lib.register("round", make_builtin("round", round_number, 1))
    lib.register("sqrt", make_builtin("sqrt", sqrt, 1))
    lib.register("rnd", make_builtin("rnd", rnd, 1))
    lib.register("parse_num", make_builtin("parse_num", parse_num, 1))
    lib.register("to_string", make_builtin("to_string", to_string, 1))


def absolute(args: List[Any], context: CallContext) -> Any:
    """Absolute value of an Int or Float."""
    assert_number(args[0], 0, context)
    return abs(args[0])


def _float_op(value: float, op) -> float:
    if not math.isfinite(value):
        return value
    return float(op(value))


def ceil(args: List[Any], context: CallContext) -> Any:
    """Smallest whole number not below the argument; Ints are returned as is."""
    assert_number(args[0], 0, context)
    if isinstance(args[0], int):
        return args[0]
    return _float_op(args[0], math.ceil)


def floor(args: List[Any], context: CallContext) -> Any:
    """Largest whole number not above the argument; Ints are returned as is."""
    assert_number(args[0], 0, context)
    if isinstance(args[0], int):
        return args[0]
    return _float_op(args[0], math.floor)


def _round_half_away(value: float) -> int:
    low = math.floor(value)
    fraction = value - low
    if fraction > 0.5 or (fraction == 0.5 and value > 0):
        return low + 1
    return low


def round_number(args: List[Any], context: CallContext) -> Any:
    """Round to the nearest whole number, halves away from zero."""
    assert_number(args[0], 0, context)
    if isinstance(args[0], int):
        return args[0]
    return _float_op(args[0], _round_half_away)


def sqrt(args: List[Any], context: CallContext) -> float:
    """Square root; negative arguments raise SqrtFromNegativeError."""
    value = args[0]
    assert_number(value, 0, context)
    if value < 0:
        raise SqrtFromNegativeError(context.location, to_display(value))
    return math.sqrt(value)


def rnd(args: List[Any], context: CallContext) -> int:
    """Random Int in the range [0, n)."""
    assert_type(args[0], 0, "Int", context)
    n = args[0]
    if n <= 0:
        raise InvalidArgumentError(
            context.location,
            0,
            f"negative values and zero are not supported, got {n}",
        )
    return random.randrange(n)


def parse_num(args: List[Any], context: CallContext) -> Any:
    """Parse a String into an Int or Float; nil if it is not a number."""
    assert_type(args[0], 0, "String", context)
    text = args[0]
    try:
        number = parse_float(text)
    except (ValueError, OverflowError):
        pass
    else:
        if math.isfinite(number) and number.is_integer() and _INT64_MIN <= number <= _INT64_MAX:
            return int(number)
        return number
    try:
        return parse_int(text)
    except (ValueError, OverflowError):
        return None


def to_string(args: List[Any], context: CallContext) -> str:
    """Text form of a number; Floats are written with six decimals."""
    value = args[0]
    assert_number(value, 0, context)
    if isinstance(value, int):
        return str(value)
    return f"{value:.6f}"