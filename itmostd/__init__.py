"""Registry and built-in functions (numbers, strings, lists, I/O, files) for the ItmoScript language."""

__version__ = "0.1.0"