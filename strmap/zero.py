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
Zero values, used to encode absent references, to allocate them on decode and to implement `omitempty`.

>>> zero_value(int), zero_value(str), zero_value(float | None)
(0, '', None)
>>> is_zero(0), is_zero(''), is_zero(None), is_zero(0j)
(True, True, True, True)
>>> is_zero(-0.0), is_zero(float('nan')), is_zero('x')
(False, False, False)
"""

import dataclasses
import math
from enum import Enum
from types import NoneType
from typing import Any, TypeVar

from strmap.descriptor import get_record_hints, is_record, is_record_type
from strmap.exception import AllocationError
from strmap.utils.typing import pretty_type, resolve_newtype, unwrap_optional

R = TypeVar('R')

_PRIMITIVE_TYPES = (bool, int, float, complex, str)


def zero_value(type_: Any) -> Any:
    """ Build the zero value of a type: None for optionals, the empty value of primitives, a default record.

    Other classes are called without arguments, `AllocationError` is raised when that isn't possible.
    """
    if type_ is None or type_ is NoneType:
        return None
    _, optional = unwrap_optional(type_)
    if optional:
        return None
    base = resolve_newtype(type_)
    if base in _PRIMITIVE_TYPES:
        return base()
    if is_record_type(base):
        return new_record(base)
    if isinstance(base, type) and not issubclass(base, Enum):
        try:
            return base()
        except TypeError as e:
            raise AllocationError(f'cannot build a zero value for {pretty_type(type_)}', type_=type_) from e
    raise AllocationError(f'cannot build a zero value for {pretty_type(type_)}', type_=type_)


def new_record(record_type: type[R]) -> R:
    """ Build a fresh record, fields with defaults use them, other init fields get their type's zero value.
    """
    hints = get_record_hints(record_type)
    kwargs: dict[str, Any] = {}
    for field in dataclasses.fields(record_type):  # type: ignore[arg-type]
        if not field.init:
            continue
        if field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:
            continue
        kwargs[field.name] = zero_value(hints.get(field.name, Any))
    try:
        return record_type(**kwargs)
    except (TypeError, ValueError) as e:
        raise AllocationError(f'cannot build a new {pretty_type(record_type)}', type_=record_type) from e


def is_zero(value: Any) -> bool:
    """ Whether a value is the zero value of its type.

    Negative zero and NaN are not zero, a record is zero when all its fields are (unexported ones included), other
    objects are zero when they define truthiness and are falsy.
    """
    if value is None:
        return True
    if isinstance(value, Enum):
        return is_zero(value.value)
    if isinstance(value, bool):
        return not value
    if isinstance(value, float):
        return value == 0 and math.copysign(1.0, value) > 0
    if isinstance(value, complex):
        return is_zero(value.real) and is_zero(value.imag)
    if isinstance(value, int):
        return value == 0
    if isinstance(value, str):
        return value == ''
    if is_record(value):
        return all(is_zero(getattr(value, field.name)) for field in dataclasses.fields(value))
    value_type = type(value)
    if hasattr(value_type, '__bool__') or hasattr(value_type, '__len__'):
        return not value
    return False
