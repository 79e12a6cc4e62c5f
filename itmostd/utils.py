"""Numeric, string and sequence helpers shared by the standard library."""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MOD = 1 << 64

_INT_RE = re.compile(r"-?[0-9A-Za-z]+")
_FLOAT_RE = re.compile(
    r"-?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|(?i:inf(?:inity)?|nan))",
    re.ASCII,
)


def _wrap_int64(value: int) -> int:
    value %= _UINT64_MOD
    return value - _UINT64_MOD if value > _INT64_MAX else value


def fast_pow(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative power with 64-bit wrap-around."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return _wrap_int64(pow(base, exponent, _UINT64_MOD))


def fast_pow_neg(base: int, exponent: int) -> float:
    """Raise ``base`` to a possibly negative integer power."""
    result = _wrap_int64(pow(base, abs(exponent), _UINT64_MOD))
    if exponent < 0:
        return math.inf if result == 0 else 1.0 / result
    return float(result)


def _repeat_count(length: int, times: float) -> tuple[int, int]:
    whole = int(times)
    extra = int(length * (times - whole))
    return whole, extra


def multiply_str(text: str, times: float) -> Optional[str]:
    """Repeat a string a possibly fractional number of times; None if negative."""
    if times < 0:
        return None
    whole, extra = _repeat_count(len(text), times)
    return text * whole + text[:extra]


def multiply_seq(items: Sequence[T], times: float) -> Optional[list[T]]:
    """Repeat a sequence a possibly fractional number of times; None if negative."""
    if times < 0:
        return None
    whole, extra = _repeat_count(len(items), times)
    return list(items) * whole + list(items[:extra])


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` changes nothing."""
    if not old:
        return text
    return text.replace(old, new)


def parse_int(text: str, base: int = 10) -> int:
    """Parse a whole string as a signed 64-bit integer.

    Raises ValueError for malformed input and OverflowError when out of range.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    digits = text[1:] if text.startswith("-") else text
    if not _INT_RE.fullmatch(text) or any(int(ch, 36) >= base for ch in digits):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a whole string as a floating-point number.

    Raises ValueError for malformed input and OverflowError when out of range.
    """
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise OverflowError(f"number out of range: {text!r}")
    return value


def join(items: Iterable[T], glue: str, getter: Callable[[T], Any] = str) -> str:
    """Join the results of ``getter`` over ``items`` with ``glue``."""
    return glue.join(str(getter(item)) for item in items)


def format_exception(error: Any, label: str) -> str:
    """Render a language error with its position, type and message."""
    return (
        f"{label} on line {error.line()}, column {error.column()}:\n"
        f"{error.error_type()}: {error}\n"
    )