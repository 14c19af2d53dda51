from typing import Any

import pytest

from strmap import Complex64, Float32, Int16, NilValueError, ParseError, Uint32, UnsupportedTypeError
from strmap.encoding.float import to_single
from strmap.scalar import get_scalar_codec, string_to_value, value_to_string
from tests.records import (
    STRINGER_OUT,
    Color,
    Level,
    Shade,
    StubIntStringer,
    StubIntText,
    StubStringer,
    StubText,
    StubTextMarshaler,
)


class Name(str):
    pass


class Count(int):
    pass


@pytest.mark.parametrize('value, type_, expected', [
    (True, bool, 'true'),
    (0, int, '0'),
    (-5, Int16, '-5'),
    (5, Uint32, '5'),
    (2.5, float, '2.5'),
    (2, float, '2'),
    (to_single(0.1), Float32, '0.1'),
    (1 + 1j, complex, '(1+1i)'),
    (complex(to_single(0.1), to_single(0.2)), Complex64, '(0.1+0.2i)'),
    (3, complex, '(3+0i)'),
    ('text', str, 'text'),
    (Name('name'), Name, 'name'),
    (Count(3), Count, '3'),
    (Color.BLUE, Color, 'blue'),
    (Level.HIGH, Level, '10'),
    (Shade.DARK, Shade, 'dark'),
    (StubStringer(), StubStringer, STRINGER_OUT),
    (StubIntStringer(1), int, STRINGER_OUT),
    (StubTextMarshaler(), Any, 'stubtext'),
    (StubIntText(4), int, '#4'),
    (True, Any, 'true'),
])
def test_value_to_string(value, type_, expected):
    assert value_to_string(value, type_) == expected


def test_value_to_string_incompatible_declared_type():
    # the runtime type is used when the value doesn't match the declared type
    assert value_to_string('x', int) == 'x'
    assert value_to_string(True, Float32) == 'true'


def test_value_to_string_none():
    with pytest.raises(NilValueError):
        value_to_string(None, int)


@pytest.mark.parametrize('value', [b'bytes', [1], {'a': 1}, object()])
def test_value_to_string_unsupported(value):
    with pytest.raises(UnsupportedTypeError) as exc_info:
        value_to_string(value)
    assert exc_info.value.type_ is type(value)


@pytest.mark.parametrize('text, type_, expected', [
    ('True', bool, True),
    ('+7', int, 7),
    ('-32768', Int16, -32768),
    ('4294967295', Uint32, 4294967295),
    ('1e3', float, 1000.0),
    ('Infinity', float, float('inf')),
    ('(0-1i)', complex, -1j),
    ('anything', str, 'anything'),
    ('name', Name, Name('name')),
    ('3', Count, Count(3)),
    ('red', Color, Color.RED),
    ('1', Level, Level.LOW),
    ('dark', Shade, Shade.DARK),
    ('hello', StubText, StubText('hello')),
    ('#9', StubIntText, StubIntText(9)),
])
def test_string_to_value(text, type_, expected):
    value = string_to_value(text, type_)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize('text, type_', [
    ('32768', Int16),
    ('-1', Uint32),
    ('1e39', Float32),
    ('(1e39+0i)', Complex64),
    ('x', Count),
    ('2', Shade),
    ('DARK', Shade),
])
def test_string_to_value_invalid(text, type_):
    with pytest.raises(ParseError):
        string_to_value(text, type_)


@pytest.mark.parametrize('type_', [bytes, list, StubStringer, StubTextMarshaler, Any, int | str])
def test_string_to_value_unsupported(type_):
    with pytest.raises(UnsupportedTypeError):
        string_to_value('x', type_)


def test_get_scalar_codec():
    assert get_scalar_codec(int) is not None
    assert get_scalar_codec(Uint32) is not None
    assert get_scalar_codec(Count) is not None
    assert get_scalar_codec(bytes) is None
    assert get_scalar_codec(Any) is None
    assert get_scalar_codec(list[int]) is None
