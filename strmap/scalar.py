# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Conversion of a single leaf value to and from its string representation.

Encoding tries, in order: `to_text()`, a user-defined `__str__`, and finally the primitive kind of the value (or of
the declared field type, when the value is compatible with it). Decoding tries `from_text()` on the declared type and
then the primitive kind of the declared type. A type matching none of them raises `UnsupportedTypeError`, so a type
that can only be displayed can be encoded but never decoded.

>>> value_to_string(100.1 + 80.1j)
'(100.1+80.1i)'
>>> string_to_value('(100.1+80.1i)', complex)
(100.1+80.1j)
>>> from strmap.types import Float32, Uint8
>>> value_to_string(string_to_value('100.1', Float32), Float32)
'100.1'
>>> string_to_value('255', Uint8)
255
"""

from enum import Enum
from functools import partial
from typing import Any, Callable, NamedTuple, Optional

from strmap.encoding.bool import decode_bool, encode_bool
from strmap.encoding.complex import decode_complex, encode_complex
from strmap.encoding.enum import decode_enum, encode_enum
from strmap.encoding.float import decode_float, encode_float
from strmap.encoding.int import decode_int, encode_int
from strmap.exception import NilValueError, UnsupportedTypeError
from strmap.hooks import has_display_str, is_text_marshaler, is_text_unmarshaler
from strmap.types import (
    INT_BOUNDS,
    Complex64,
    Complex128,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from strmap.utils.typing import is_subclass, pretty_type, resolve_newtype


class ScalarCodec(NamedTuple):
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]


def _encode_str(value: str) -> str:
    return str.__str__(value)


def _decode_str(text: str) -> str:
    return text


def _sized_int_codec(type_: Any) -> ScalarCodec:
    bounds = INT_BOUNDS[type_]
    return ScalarCodec(
        partial(encode_int, bounds=bounds, target_type=type_),
        partial(decode_int, bounds=bounds, target_type=type_),
    )


def _float_codec(type_: Any, *, single: bool) -> ScalarCodec:
    return ScalarCodec(
        partial(encode_float, single=single, target_type=type_),
        partial(decode_float, single=single, target_type=type_),
    )


def _complex_codec(type_: Any, *, single: bool) -> ScalarCodec:
    return ScalarCodec(
        partial(encode_complex, single=single, target_type=type_),
        partial(decode_complex, single=single, target_type=type_),
    )


# Mapping between primitive types and their codecs, subclasses of these types use their closest base's codec.
TYPE_TO_SCALAR_CODEC: dict[Any, ScalarCodec] = {
    # builtin types:
    bool: ScalarCodec(encode_bool, decode_bool),
    int: ScalarCodec(encode_int, decode_int),
    float: _float_codec(float, single=False),
    complex: _complex_codec(complex, single=False),
    str: ScalarCodec(_encode_str, _decode_str),
    # sized types:
    Int8: _sized_int_codec(Int8),
    Int16: _sized_int_codec(Int16),
    Int32: _sized_int_codec(Int32),
    Int64: _sized_int_codec(Int64),
    Uint8: _sized_int_codec(Uint8),
    Uint16: _sized_int_codec(Uint16),
    Uint32: _sized_int_codec(Uint32),
    Uint64: _sized_int_codec(Uint64),
    Float32: _float_codec(Float32, single=True),
    Float64: _float_codec(Float64, single=False),
    Complex64: _complex_codec(Complex64, single=True),
    Complex128: _complex_codec(Complex128, single=False),
}


def _rebuild_with(type_: type, decode: Callable[[str], Any], text: str) -> Any:
    return type_(decode(text))


def get_scalar_codec(type_: Any) -> Optional[ScalarCodec]:
    """ Find the codec for a primitive type, a NewType or a subclass of a primitive type.

    Decoding with the codec of a subclass builds an instance of the subclass.
    """
    try:
        codec = TYPE_TO_SCALAR_CODEC.get(type_)
    except TypeError:
        # unhashable type annotations can't be primitives
        return None
    if codec is not None:
        return codec
    super_type = getattr(type_, '__supertype__', None)
    if super_type is not None:
        return get_scalar_codec(super_type)
    if not isinstance(type_, type):
        return None
    for base in type_.__mro__[1:]:
        base_codec = TYPE_TO_SCALAR_CODEC.get(base)
        if base_codec is not None:
            return ScalarCodec(base_codec.encode, partial(_rebuild_with, type_, base_codec.decode))
    return None


def _is_compatible(value: Any, type_: Any) -> bool:
    """ Whether the value can be encoded with the codec of the declared type.
    """
    base = resolve_newtype(type_)
    if not isinstance(base, type):
        return False
    if isinstance(value, base):
        return True
    # ints are accepted where floats are expected
    return base in (float, complex) and isinstance(value, (int, float)) and not isinstance(value, bool)


def value_to_string(value: Any, type_: Any = Any) -> str:
    """ Encode a leaf value, `type_` is the declared type of the field holding it, if known.
    """
    if value is None:
        raise NilValueError(f'cannot convert None to a string (declared as {pretty_type(type_)})')

    if is_text_marshaler(value):
        text = value.to_text()
        if not isinstance(text, str):
            raise UnsupportedTypeError(
                f'{pretty_type(type(value))}.to_text() returned {pretty_type(type(text))} instead of str',
                type_=type(value),
            )
        return text

    if has_display_str(value):
        return str(value)

    if isinstance(value, Enum):
        return encode_enum(value, value_to_string)

    codec: Optional[ScalarCodec] = None
    if type_ is not Any and _is_compatible(value, type_):
        codec = get_scalar_codec(type_)
    if codec is None:
        codec = get_scalar_codec(type(value))
    if codec is None:
        raise UnsupportedTypeError(
            f"{pretty_type(type(value))} doesn't implement to_text or __str__ and is not a primitive type",
            type_=type(value),
        )
    return codec.encode(value)


def string_to_value(text: str, type_: Any) -> Any:
    """ Decode a leaf value into the given declared type.
    """
    base = resolve_newtype(type_)

    if is_text_unmarshaler(base):
        return base.from_text(text)

    if is_subclass(base, Enum):
        return decode_enum(text, base, value_to_string)

    codec = get_scalar_codec(type_)
    if codec is None:
        raise UnsupportedTypeError(
            f"{pretty_type(type_)} doesn't implement from_text and is not a primitive type",
            type_=type_,
        )
    return codec.decode(text)
