"""Assembly of the default standard library."""

from __future__ import annotations

from . import files, lists, numbers, strings, system
from .core import StdLib


def load_default(lib: StdLib) -> None:
    """Register all standard functions in ``lib``."""
    numbers.register_all(lib)
    strings.register_all(lib)
    lists.register_all(lib)
    system.register_all(lib)
    files.register_all(lib)


def create_default() -> StdLib:
    """A new library holding every standard function."""
    lib = StdLib()
    load_default(lib)
    return lib