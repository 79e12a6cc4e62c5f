"""Helpers describing script values held as native Python objects.

Script values map onto Python as: nil -> None, Bool -> bool, Int -> int,
Float -> float, String -> str, List -> list, Function -> any callable.
"""

from __future__ import annotations

from typing import Any


def type_name(value: Any) -> str:
    """Name of the script type of ``value``."""
    if value is None:
        return "NullType"
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, int):
        return "Int"
    if isinstance(value, float):
        return "Float"
    if isinstance(value, str):
        return "String"
    if isinstance(value, list):
        return "List"
    if callable(value):
        return "Function"
    raise TypeError(f"not a script value: {value!r}")


def to_display(value: Any) -> str:
    """Printable form of a value; strings are shown in double quotes."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return "[" + ", ".join(to_display(item) for item in value) + "]"
    if callable(value):
        return "function"
    raise TypeError(f"not a script value: {value!r}")


def to_text(value: Any) -> str:
    """Raw text of a string, or the printable form of any other value."""
    return value if isinstance(value, str) else to_display(value)


_RANKS = {
    "NullType": 0,
    "Bool": 1,
    "Int": 2,
    "Float": 2,
    "String": 3,
    "List": 4,
    "Function": 5,
}


def sort_key(value: Any) -> tuple:
    """Key ordering values by type first, then by value within a type."""
    name = type_name(value)
    rank = _RANKS[name]
    if name in ("NullType", "Function"):
        return (rank, 0)
    if name == "List":
        return (rank, tuple(sort_key(item) for item in value))
    return (rank, value)