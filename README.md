# itmostd

`itmostd` is the standard library of built-in functions for the ItmoScript
language. It gives an interpreter a registry of named built-ins. Each built-in
checks how many arguments it gets and what types they are. When a call goes
wrong, it raises a language error that records the line and column of the call.

## What is included

- **Numbers** (`itmostd.numbers`): `abs`, `ceil`, `floor`, `round`, `sqrt`,
  `rnd`, `parse_num`, `to_string`
- **Strings** (`itmostd.strings`): `lower`, `upper`, `split`, `join`, `replace`
- **Lists** (`itmostd.lists`): `len`, `push`, `pop`, `insert`, `remove`,
  `range`, `sort`, `set`
- **System** (`itmostd.system`): `print`, `println` (both write to an output
  stream), `read` (reads one line from an input stream) and `stacktrace`
- **Files** (`itmostd.files`): `file_read`, `file_read_lines`, `file_write`,
  `file_append`

`itmostd.defaults.create_default()` returns a `StdLib` with all of these
registered. `itmostd.defaults.load_default(lib)` adds them to an existing one.

## Installation

```
pip install itmostd
```

## Usage

```python
import io

from itmostd.core import CallContext
from itmostd.defaults import create_default

lib = create_default()
context = CallContext()

lib.call("range", [0, 5, 2], context)        # [0, 2, 4]
lib.call("split", ["a,b,c", ","], context)   # ["a", "b", "c"]

out = io.StringIO()
lib.call_output(out, "println", ["hi"], context)
out.getvalue()                               # '"hi"\n'

lib.call_input(io.StringIO("line\n"), "read", [], context)   # "line"
```

A `CallContext` holds the `Location` (line and column) that errors report. It
also holds the call stack, a list of `CallFrame` entries, which `stacktrace`
returns as `[function_name, line]` pairs.

Values are plain Python objects:

- `int` for Int
- `float` for Float
- `bool` for Bool
- `str` for String
- `list` for List
- `None` for nil
- any callable for Function

`print` and `println` write values in their display form, so a string is shown
in double quotes. `join`, `file_write` and `file_append` write strings as they
are.

These functions change the list object you pass in and then return it: `push`,
`pop`, `insert`, `remove`, `sort` and `set`. `sort` puts values of different
types in a fixed order: nil, then Bool, then numbers, then String, then List,
then Function.

`itmostd.values` has helpers for working with these values: `type_name`,
`to_display`, `to_text` and `sort_key`. `itmostd.utils` has the string and
number helpers the built-ins use.

### Registering your own built-ins

```python
from itmostd.core import StdLib, make_builtin

lib = StdLib()
lib.register("twice", make_builtin("twice", lambda args, ctx: args[0] * 2, 1))
```

Use `make_stream_builtin` together with `register_output` or `register_input`
for functions that take a stream. Use `assert_type` and `assert_number` to
check the types of arguments.

## Errors

Every error is a subclass of `itmostd.errors.LangException`. Each one reports
`line()`, `column()` and `error_type()`.

- A name that is not registered raises `UndefinedNameError`.
- A wrong number of arguments raises `ParametersCountError`.
- An argument of the wrong type raises `ArgumentTypeError`.
- An index outside a list raises `IndexOutOfRangeError`.
- Calling `pop` on an empty list raises `EmptyListPopError`.
- A file that cannot be opened raises `FileAccessError`.
- A bad argument value, such as a zero `range` step or a non-positive `rnd`
  bound, raises `InvalidArgumentError`.
- Calling `sqrt` on a negative number raises `SqrtFromNegativeError`.

`itmostd.utils.format_exception(error, label)` turns any of these errors into
text for display.

## What this package does not do

This package has only the built-in functions and their registry. It has no
lexer, parser or evaluator, so it cannot read or run ItmoScript programs. It
also has no command-line tool and no interactive prompt. An interpreter that
uses this package has to provide those parts and call the built-ins through
`StdLib`.