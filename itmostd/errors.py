"""Error types raised by the standard library of the scripting language."""

from __future__ import annotations

from dataclasses import dataclass

ERROR_DETAILS_INDENT = 4
"""Indent used for error details when an error is printed."""


@dataclass(frozen=True)
class Location:
    """Position in the script source where an error was detected."""

    line: int = 0
    column: int = 0


class LangException(Exception):
    """Base class for every error of the language."""

    def __init__(self, location: Location, message: str) -> None:
        super().__init__(message)
        self.location = location
        self.message = message

    def error_type(self) -> str:
        """Name of the error as it is shown to the user."""
        return "Exception"

    def line(self) -> int:
        """Line on which the error occurred."""
        return self.location.line

    def column(self) -> int:
        """Column on which the error occurred."""
        return self.location.column

    def __str__(self) -> str:
        return self.message


class StdUsageError(LangException):
    """A standard library function was used incorrectly."""

    def error_type(self) -> str:
        return "StdUsageError"


class ParametersCountError(LangException):
    """A function received a wrong number of arguments."""

    def __init__(self, location: Location, name: str, expected: int, given: int) -> None:
        super().__init__(
            location,
            f"function '{name}' expects {expected} argument(s), got {given}",
        )
        self.name = name
        self.expected = expected
        self.given = given

    def error_type(self) -> str:
        return "ParametersCountError"


class UndefinedNameError(LangException):
    """A name was used that is not defined."""

    def __init__(self, location: Location, name: str) -> None:
        super().__init__(location, f"name '{name}' is not defined")
        self.name = name

    def error_type(self) -> str:
        return "UndefinedNameError"


class IndexOutOfRangeError(LangException):
    """An index lies outside the bounds of a sequence."""

    def __init__(self, location: Location, index: int, size: int) -> None:
        super().__init__(
            location, f"index {index} is out of range for a sequence of size {size}"
        )
        self.index = index
        self.size = size

    def error_type(self) -> str:
        return "IndexOutOfRangeError"


class ArgumentTypeError(StdUsageError):
    """An argument of a standard function has the wrong type."""

    def __init__(self, location: Location, index: int, given: str, expected: str) -> None:
        super().__init__(
            location,
            f"invalid argument type on index {index}: expected {expected}, got {given}",
        )
        self.index = index
        self.given = given
        self.expected = expected

    def error_type(self) -> str:
        return "ArgumentTypeError"


class DuplicateNameError(StdUsageError):
    """A name is already defined in the standard library."""

    def __init__(self, location: Location, name: str) -> None:
        super().__init__(location, f"name '{name}' is already defined in the stdlib")
        self.name = name

    def error_type(self) -> str:
        return "DuplicateNameError"


class EmptyListPopError(StdUsageError):
    """An element was popped from an empty list."""

    def __init__(self, location: Location) -> None:
        super().__init__(location, "cannot pop from an empty List")

    def error_type(self) -> str:
        return "EmptyListPopError"


class FileAccessError(StdUsageError):
    """A file could not be opened."""

    def __init__(self, location: Location, filename: str) -> None:
        super().__init__(location, f"unable to access file '{filename}'")
        self.filename = filename

    def error_type(self) -> str:
        return "FileAccessError"


class InvalidArgumentError(StdUsageError):
    """An argument of a standard function has an unacceptable value."""

    def __init__(self, location: Location, index: int, message: str) -> None:
        super().__init__(location, f"invalid argument on index {index}: {message}")
        self.index = index

    def error_type(self) -> str:
        return "InvalidArgumentError"


class SqrtFromNegativeError(StdUsageError):
    """A square root of a negative number was requested."""

    def __init__(self, location: Location, value: str) -> None:
        super().__init__(location, f"cannot get sqrt from a negative number {value}")
        self.value = value

    def error_type(self) -> str:
        return "SqrtFromNegativeError"