"""Registry of built-in functions and helpers for defining them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TextIO

from .errors import ArgumentTypeError, Location, ParametersCountError, UndefinedNameError
from .values import type_name

ValueFunction = Callable[[List[Any], "CallContext"], Any]
OutputFunction = Callable[[TextIO, List[Any], "CallContext"], Any]
InputFunction = Callable[[TextIO, List[Any], "CallContext"], Any]


@dataclass(frozen=True)
class CallFrame:
    """One entry of the call stack: a function and where it was entered."""

    function_name: str
    entry_location: Location = field(default_factory=Location)


@dataclass
class CallContext:
    """Where a built-in was called from, together with the current call stack."""

    location: Location = field(default_factory=Location)
    call_stack: List[CallFrame] = field(default_factory=list)


class StdLib:
    """Named built-in functions, split by whether they use an input or output stream."""

    def __init__(self) -> None:
        self._functions: Dict[str, ValueFunction] = {}
        self._output_functions: Dict[str, OutputFunction] = {}
        self._input_functions: Dict[str, InputFunction] = {}

    def register(self, name: str, func: ValueFunction) -> None:
        """Register a function that works on values only."""
        self._functions[name] = func

    def register_output(self, name: str, func: OutputFunction) -> None:
        """Register a function that writes to an output stream."""
        self._output_functions[name] = func

    def register_input(self, name: str, func: InputFunction) -> None:
        """Register a function that reads from an input stream."""
        self._input_functions[name] = func

    def has(self, name: str) -> bool:
        """Whether any kind of function is registered under ``name``."""
        return (
            self.has_value_function(name)
            or self.has_output_function(name)
            or self.has_input_function(name)
        )

    def has_value_function(self, name: str) -> bool:
        return name in self._functions

    def has_output_function(self, name: str) -> bool:
        return name in self._output_functions

    def has_input_function(self, name: str) -> bool:
        return name in self._input_functions

    def call(self, name: str, args: List[Any], context: CallContext) -> Any:
        """Call a value function; raise UndefinedNameError if it is unknown."""
        try:
            func = self._functions[name]
        except KeyError:
            raise UndefinedNameError(context.location, name) from None
        return func(args, context)

    def call_output(
        self, stream: TextIO, name: str, args: List[Any], context: CallContext
    ) -> Any:
        """Call an output function writing to ``stream``."""
        try:
            func = self._output_functions[name]
        except KeyError:
            raise UndefinedNameError(context.location, name) from None
        return func(stream, args, context)

    def call_input(
        self, stream: TextIO, name: str, args: List[Any], context: CallContext
    ) -> Any:
        """Call an input function reading from ``stream``."""
        try:
            func = self._input_functions[name]
        except KeyError:
            raise UndefinedNameError(context.location, name) from None
        return func(stream, args, context)


def _check_count(name: str, arg_count: int, args: List[Any], context: CallContext) -> None:
    if len(args) != arg_count:
        raise ParametersCountError(context.location, name, arg_count, len(args))


def make_builtin(name: str, func: ValueFunction, arg_count: int) -> ValueFunction:
    """Wrap a value function so that it checks the number of arguments."""

    def wrapper(args: List[Any], context: CallContext) -> Any:
        _check_count(name, arg_count, args, context)
        return func(args, context)

    wrapper.__name__ = name
    return wrapper


def make_stream_builtin(name: str, func: OutputFunction, arg_count: int) -> OutputFunction:
    """Wrap a stream function so that it checks the number of arguments."""

    def wrapper(stream: TextIO, args: List[Any], context: CallContext) -> Any:
        _check_count(name, arg_count, args, context)
        return func(stream, args, context)

    wrapper.__name__ = name
    return wrapper


def assert_type(value: Any, index: int, expected: str, context: CallContext) -> None:
    """Raise ArgumentTypeError unless ``value`` has the script type ``expected``."""
    given = type_name(value)
    if given != expected:
        raise ArgumentTypeError(context.location, index, given, expected)


def assert_number(value: Any, index: int, context: CallContext) -> None:
    """Raise ArgumentTypeError unless ``value`` is an Int or a Float."""
    given = type_name(value)
    if given not in ("Int", "Float"):
        raise ArgumentTypeError(context.location, index, given, "Int or Float")