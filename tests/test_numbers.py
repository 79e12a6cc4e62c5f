import pytest

from itmostd.core import CallContext, StdLib
from itmostd.errors import (
    ArgumentTypeError,
    InvalidArgumentError,
    Location,
    ParametersCountError,
    SqrtFromNegativeError,
)
from itmostd.numbers import (
    absolute,
    ceil,
    floor,
    parse_num,
    register_all,
    rnd,
    round_number,
    sqrt,
    to_string,
)


@pytest.fixture
def lib():
    library = StdLib()
    register_all(library)
    return library


@pytest.fixture
def context():
    return CallContext(Location(1, 1))


@pytest.mark.parametrize(
    "arg, expected", [(3, 3), (-1, 1), (0, 0), (-21423423, 21423423)]
)
def test_abs(lib, context, arg, expected):
    result = lib.call("abs", [arg], context)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("arg, expected", [(3.2, 4.0), (-1.7, -1.0), (0.0, 0.0), (5.999, 6.0)])
def test_ceil(lib, context, arg, expected):
    result = lib.call("ceil", [arg], context)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("arg, expected", [(3.7, 3.0), (-1.2, -2.0), (0.0, 0.0), (5.999, 5.0)])
def test_floor(lib, context, arg, expected):
    result = lib.call("floor", [arg], context)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("arg, expected", [(3.2, 3.0), (3.5, 4.0), (-1.4, -1.0), (-1.6, -2.0)])
def test_round(lib, context, arg, expected):
    result = lib.call("round", [arg], context)
    assert result == expected
    assert type(result) is type(expected)


def test_int_passthrough(context):
    ceiled = ceil([7], context)
    floored = floor([7], context)
    rounded = round_number([7], context)
    assert (ceiled, floored, rounded) == (7, 7, 7)
    assert type(ceiled) is int
    assert type(floored) is int
    assert type(rounded) is int


@pytest.mark.parametrize("arg, expected", [(4, 2.0), (9, 3.0), (0, 0.0), (2.25, 1.5)])
def test_sqrt(lib, context, arg, expected):
    result = lib.call("sqrt", [arg], context)
    assert result == expected
    assert type(result) is float


def test_sqrt_negative(context):
    with pytest.raises(SqrtFromNegativeError) as info:
        sqrt([-4], context)
    assert str(info.value) == "cannot get sqrt from a negative number -4"


@pytest.mark.parametrize("n, low, high", [(1, 0, 0), (10, 0, 9), (100, 0, 99)])
def test_rnd(lib, context, n, low, high):
    value = lib.call("rnd", [n], context)
    assert isinstance(value, int)
    assert low <= value <= high


@pytest.mark.parametrize("n", [0, -5])
def test_rnd_rejects_non_positive(context, n):
    with pytest.raises(InvalidArgumentError):
        rnd([n], context)


def test_rnd_rejects_float(context):
    with pytest.raises(ArgumentTypeError):
        rnd([1.5], context)


@pytest.mark.parametrize(
    "text, expected",
    [("123", 123), ("-45.67", -45.67), ("0", 0), ("not_a_number", None)],
)
def test_parse_num(lib, context, text, expected):
    result = lib.call("parse_num", [text], context)
    assert result == expected
    assert type(result) is type(expected)


def test_parse_num_requires_string(context):
    with pytest.raises(ArgumentTypeError):
        parse_num([5], context)


@pytest.mark.parametrize("arg, expected", [(123, "123"), (-45.67, "-45.670000"), (0, "0")])
def test_to_string(lib, context, arg, expected):
    assert lib.call("to_string", [arg], context) == expected


def test_to_string_rejects_string(context):
    with pytest.raises(ArgumentTypeError):
        to_string(["1"], context)


def test_abs_rejects_bool(context):
    with pytest.raises(ArgumentTypeError):
        absolute([True], context)


def test_wrong_argument_count(lib, context):
    with pytest.raises(ParametersCountError):
        lib.call("abs", [1, 2], context)